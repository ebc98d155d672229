"""Check whether domains answer over HTTP or HTTPS."""

__version__ = "1.2.0"
