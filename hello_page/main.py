"""Hello page application entry point.

This module exposes a tiny Flask application serving a single HTML greeting
page at ``/hello``. Running it will start a development web server.
"""

from __future__ import annotations

import logging
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Callable, Mapping, Optional

from flask import Flask, request

from hello_page.config import bind_address, load_config, log_level
from hello_page.greeting import render_page, resolve_name

logger = logging.getLogger(__name__)

ServerInfo = Callable[[], str]
Clock = Callable[[], datetime]


def flask_identity() -> str:
    """Return ``Flask/<version>`` for the installed Flask."""
    try:
        return f"Flask/{version('flask')}"
    except PackageNotFoundError:
        return "Flask"


def wsgi_server_info() -> str:
    """Return the identity the WSGI server reports for the current request."""
    return request.environ.get("SERVER_SOFTWARE") or flask_identity()


def local_now() -> datetime:
    """Return the current local time with its zone attached."""
    return datetime.now().astimezone()


def create_app(
    test_config: Optional[Mapping[str, Any]] = None,
    *,
    server_info: Optional[ServerInfo] = None,
    clock: Optional[Clock] = None,
) -> Flask:
    """Create and configure the greeting application.

    ``server_info`` and ``clock`` replace the ambient server identity and the
    wall clock; tests pass fixed values here.
    """

    app = Flask(__name__)
    load_config(app, test_config)

    if server_info is None:
        configured = app.config.get("SERVER_INFO")
        if configured:
            server_info = lambda: configured  # noqa: E731
        else:
            server_info = wsgi_server_info
    if clock is None:
        clock = local_now

    @app.get("/hello")
    def hello():
        name = resolve_name(request.args.get("name"))
        body = render_page(name, server_info(), clock())
        return body, 200, {"Content-Type": "text/html; charset=utf-8"}

    logger.debug("registered GET /hello")
    return app


def main() -> None:
    """Run the development server when executed as a script."""
    app = create_app()
    logging.basicConfig(
        level=log_level(app),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host, port = bind_address(app)
    logger.info("serving hello page on http://%s:%d/hello", host, port)
    app.run(host=host, port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":  # pragma: no cover
    main()
