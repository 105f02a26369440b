"""Interactive script shared by every exported page."""

from __future__ import annotations

import functools

from .templating import build_environment


@functools.cache
def generate_script() -> str:
    """Return the client-side script bundled as ``script.js``.

    The script has a fixed behaviour set: smooth scrolling for in-page
    anchors, image fade-in on load, scroll-triggered reveal of the hero and
    body sections, and the mobile navigation toggle. Every behaviour checks
    that its elements exist before attaching, so pages without a toggle
    button or without images load cleanly.
    """
    return build_environment().get_template("script.js.jinja").render()


__all__ = ["generate_script"]
