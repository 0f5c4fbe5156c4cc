"""Rendering of the greeting page.

Nothing here touches Flask: the view in :mod:`hello_page.main` resolves the
request parameter and the ambient values, then hands plain strings to
:func:`render_page`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

DEFAULT_NAME = "World"
EXAMPLE_NAME = "Liberty"

# Same layout as ``Date.toString()`` on the servers this page used to run on.
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"

# Control characters and space, the set a blank-name check treats as padding.
_TRIM_CHARS = "".join(map(chr, range(0x21)))

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<title>Liberty Test</title>
<style>
body {{ font-family: Arial, sans-serif; text-align: center; margin: 50px; }}
.container {{ max-width: 600px; margin: 0 auto; padding: 20px; border: 1px solid #ccc; border-radius: 10px; }}
</style>
</head>
<body>
<div class='container'>
<h1>\U0001F680 WebSphere Liberty Test</h1>
<h2>{greeting}</h2>
<p>Your Liberty application is working!</p>
<hr>
<p><strong>Server Info:</strong> {server_info}</p>
<p><strong>Current Time:</strong> {current_time}</p>
<p><a href='?name={example}'>Try with name={example}</a></p>
</div>
</body>
</html>
"""


def greet(name: str) -> str:
    """Return the heading text for the provided ``name``."""
    return f"Hello, {name}!"


def resolve_name(raw: Optional[str]) -> str:
    """Return ``raw`` unchanged, or :data:`DEFAULT_NAME` if it is missing or blank."""
    if raw is None or not raw.strip(_TRIM_CHARS):
        return DEFAULT_NAME
    return raw


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` like ``Sat Oct 17 22:45:00 UTC 2026``."""
    return moment.strftime(TIMESTAMP_FORMAT).replace("  ", " ").strip()


def render_page(name: str, server_info: str, now: datetime) -> str:
    """Render the full HTML document.

    ``name`` is embedded as given. It is not HTML-escaped.
    """
    return PAGE_TEMPLATE.format(
        greeting=greet(name),
        server_info=server_info,
        current_time=format_timestamp(now),
        example=EXAMPLE_NAME,
    )
