from svgl_mcp.core.config import API_BASE_URL, env


def test_env_default_for_missing_or_blank(monkeypatch):
    monkeypatch.delenv("SVGL_MCP_TEST_KEY", raising=False)
    assert env("SVGL_MCP_TEST_KEY", "INFO") == "INFO"

    monkeypatch.setenv("SVGL_MCP_TEST_KEY", "   ")
    assert env("SVGL_MCP_TEST_KEY", "INFO") == "INFO"


def test_env_strips_value(monkeypatch):
    monkeypatch.setenv("SVGL_MCP_TEST_KEY", " debug ")
    assert env("SVGL_MCP_TEST_KEY", "INFO") == "debug"


def test_upstream_base_url():
    assert API_BASE_URL == "https://api.svgl.app"


def test_setup_logging_targets_stderr(monkeypatch):
    import logging
    import sys

    from svgl_mcp.core import logging_setup

    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))

    logging_setup.setup_logging("debug")

    assert captured["level"] == "DEBUG"
    assert captured["handlers"][0].stream is sys.stderr
