"""Single-page Flask greeting service."""
