"""Help routing to usage text and installed man pages."""

from .router import HelpRouter, ManPageViewer

__all__ = ["HelpRouter", "ManPageViewer"]
