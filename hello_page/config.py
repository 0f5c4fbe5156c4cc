"""Configuration defaults for the greeting application."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask

ENV_PREFIX = "HELLO_PAGE"


class DefaultConfig:
    HOST = "127.0.0.1"
    PORT = 5000
    DEBUG = False
    # Fixed server identity; when unset the WSGI server's own is reported.
    SERVER_INFO: Optional[str] = None
    LOG_LEVEL = "INFO"


def load_config(app: Flask, test_config: Optional[Mapping[str, Any]] = None) -> None:
    """Populate ``app.config`` from defaults, the environment and ``test_config``.

    Environment variables named ``HELLO_PAGE_<KEY>`` override the defaults;
    ``test_config`` overrides everything.
    """
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env(ENV_PREFIX)
    if test_config is not None:
        app.config.from_mapping(test_config)


def bind_address(app: Flask) -> tuple[str, int]:
    """Return the ``(host, port)`` pair configured for :func:`hello_page.main.main`."""
    host = str(app.config["HOST"])
    try:
        port = int(app.config["PORT"])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid PORT setting: {app.config['PORT']!r}") from exc
    return host, port


def log_level(app: Flask) -> Any:
    """Return ``LOG_LEVEL`` in a form :func:`logging.basicConfig` accepts."""
    level = app.config["LOG_LEVEL"]
    if isinstance(level, str):
        return level.upper()
    return level
