"""Shared fixtures for the export engine tests."""

from __future__ import annotations

import collections.abc as cabc
import datetime as dt

import pytest

from scope_export.config import Page, Site

FIXED_EXPORT_DATE = dt.datetime(2025, 1, 31, 9, 30, 15, 123000, tzinfo=dt.UTC)


@pytest.fixture
def fixed_clock() -> cabc.Callable[[], dt.datetime]:
    """Return a clock that always reports :data:`FIXED_EXPORT_DATE`."""
    return lambda: FIXED_EXPORT_DATE


@pytest.fixture
def sample_site() -> Site:
    """Return a two-page site mirroring the editor's starter content."""
    return Site(
        pages=[
            Page(
                id="home",
                name="Home",
                title="Welcome",
                description="Main page",
                hero_subheading="Hello",
                hero_image_url="h.png",
                body_content="Para one.\n\nPara two.",
            ),
            Page(
                id="about",
                name="About",
                title="About us",
                description="Who we are",
                body_image_url="b.png",
            ),
        ]
    )
