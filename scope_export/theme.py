"""Theme-parameterized stylesheet generation.

Each export ships a single ``styles.css`` shared by every page. The
stylesheet is rendered from ``templates/styles.css.jinja`` with the colour,
background, and typography values of one :class:`ThemePalette`. Unknown
theme names fall back to the ``modern`` palette so a bad configuration value
never blocks an export.

Examples
--------
>>> css = generate_stylesheet("modern", responsive=True)
>>> "linear-gradient" in css
True
>>> "@media" in generate_stylesheet("minimal", responsive=False)
False
"""

from __future__ import annotations

import dataclasses as dc
import functools

from .config.helpers import _normalize_theme
from .templating import build_environment

_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"


@dc.dataclass(slots=True, frozen=True)
class ThemePalette:
    """Colour and typography parameters for one export theme."""

    name: str
    header_background: str
    hero_background: str
    foreground: str
    header_shadow: str
    footer_background: str
    hero_title_size: str


PALETTES: dict[str, ThemePalette] = {
    "modern": ThemePalette(
        name="modern",
        header_background=_GRADIENT,
        hero_background=_GRADIENT,
        foreground="#fff",
        header_shadow="0 2px 4px rgba(0,0,0,0.1)",
        footer_background="#2c3e50",
        hero_title_size="3.5rem",
    ),
    "classic": ThemePalette(
        name="classic",
        header_background="#2c3e50",
        hero_background="#34495e",
        foreground="#fff",
        header_shadow="0 2px 4px rgba(0,0,0,0.1)",
        footer_background="#34495e",
        hero_title_size="2.5rem",
    ),
    "minimal": ThemePalette(
        name="minimal",
        header_background="#f8f9fa",
        hero_background="#f8f9fa",
        foreground="#333",
        header_shadow="none",
        footer_background="#f8f9fa",
        hero_title_size="2.5rem",
    ),
}


def resolve_palette(theme: str | None) -> ThemePalette:
    """Return the palette for ``theme``, defaulting to ``modern``."""
    return PALETTES[_normalize_theme(theme)]


@functools.cache
def generate_stylesheet(theme: str | None = "modern", responsive: bool = True) -> str:  # noqa: FBT001, FBT002
    """Render the complete stylesheet for ``theme``.

    Parameters
    ----------
    theme : str or None, optional
        One of ``modern``, ``classic`` or ``minimal``; anything else renders
        the ``modern`` palette.
    responsive : bool, optional
        When true, append the 768px and 480px breakpoint blocks.

    Returns
    -------
    str
        Self-contained CSS covering reset, typography, header/nav, hero,
        body copy, footer and utility classes.
    """
    template = build_environment().get_template("styles.css.jinja")
    return template.render(palette=resolve_palette(theme), responsive=responsive)


__all__ = ["PALETTES", "ThemePalette", "generate_stylesheet", "resolve_palette"]
