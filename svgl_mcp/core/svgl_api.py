from __future__ import annotations
import logging
import requests
from typing import Any, Optional

from .config import API_BASE_URL
from .errors import ApiError

logger = logging.getLogger(__name__)


class SvglAPI:
    def __init__(self, base_url: str = API_BASE_URL, session: Optional[requests.Session] = None) -> None:
        self.base = base_url.rstrip("/")
        # no default Session: each fetch starts clean (no cookies, no pooled state)
        self.session = session

    def fetch(self, endpoint: str) -> Any:
        """
        GET a fully formed SVGL URL.
        Endpoints containing "/svg/" anywhere in the URL return raw SVG text,
        everything else is decoded as JSON.
        """
        logger.debug("GET %s", endpoint)
        get = self.session.get if self.session is not None else requests.get
        r = get(endpoint)
        if not 200 <= r.status_code < 300:
            raise ApiError(r.status_code, r.reason or "")

        if "/svg/" in endpoint:
            return r.text

        return r.json()
