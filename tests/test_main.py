"""Tests for the serve entry point and console tracing."""

import artvault.__main__ as entry
from artvault.config import settings
from artvault.utils import log as log_module


def test_main_serves_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    entry.main()

    assert calls == [(
        "artvault.main:app",
        {"host": settings.host, "port": settings.port, "reload": settings.debug},
    )]


def test_traces_hidden_unless_debug(monkeypatch, capsys):
    monkeypatch.setattr(settings, "debug", False)
    log_module.log("SHOP", "Loaded 6 products")
    assert capsys.readouterr().out == ""

    monkeypatch.setattr(settings, "debug", True)
    log_module.log("SHOP", "Loaded 6 products")
    assert capsys.readouterr().out == "[SHOP] Loaded 6 products\n"


def test_warnings_always_printed(monkeypatch, capsys):
    monkeypatch.setattr(settings, "debug", False)
    log_module.warn("CART", "listener failed")

    assert capsys.readouterr().out == "[CART] Warning: listener failed\n"
