from __future__ import annotations
import json
from typing import Any
from urllib.parse import quote


def dump_json(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2)


def encode_component(value: str) -> str:
    # same unreserved set as JS encodeURIComponent
    return quote(value, safe="-_.!~*'()")


def format_number(v: Any) -> str:
    if isinstance(v, bool):
        return json.dumps(v)
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)
