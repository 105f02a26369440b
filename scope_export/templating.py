"""Shared Jinja2 environment for every generated export artefact."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).parent / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return an environment loading templates from ``templates_dir``.

    HTML templates (``*.html.jinja``) are autoescaped; stylesheet, script and
    README templates are rendered verbatim.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(
            enabled_extensions=("html", "html.jinja"),
            default_for_string=False,
        ),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


__all__ = ["TEMPLATES_DIR", "build_environment"]
