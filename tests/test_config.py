"""Unit tests for site model loading and export option resolution.

These tests cover :func:`scope_export.config.build_site` fallbacks for
incomplete page records, document loading through ruamel.yaml, and the
overlay of partial export options onto the documented defaults, including
plan-tier gating of the branding flag.
"""

from __future__ import annotations

import typing as typ

import pytest

from scope_export.config import (
    DEFAULT_EXPORT_OPTIONS,
    ExportOptions,
    SiteConfigError,
    UserData,
    apply_plan_limits,
    build_site,
    build_user,
    load_export_settings,
    load_site,
    resolve_export_options,
)
from scope_export.config.site import UNTITLED_PAGE

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_build_site_preserves_order_and_aliases() -> None:
    """CamelCase and snake_case field names should both populate pages."""
    site = build_site(
        {
            "pages": [
                {"id": "about", "name": "About", "title": "About", "heroTitle": "Us"},
                {
                    "id": "home",
                    "name": "Home",
                    "title": "Home",
                    "hero_image_url": "h.png",
                    "bodyContent": "  Indented.\n\nNext.  ",
                },
            ]
        }
    )

    assert [page.id for page in site.pages] == ["about", "home"]
    assert site.pages[0].hero_title == "Us"
    assert site.pages[1].hero_image_url == "h.png"
    assert site.pages[1].body_content == "  Indented.\n\nNext.  ", (
        "body copy should keep its whitespace for paragraph splitting"
    )


def test_build_site_fills_missing_required_fields() -> None:
    """Missing id, name and title should fall back to usable values."""
    site = build_site(
        {
            "pages": [
                {"name": "Contact Us"},
                {"title": "Pricing"},
                {},
            ]
        }
    )

    ids = [page.id for page in site.pages]
    assert ids == ["contact-us", "pricing", "page-3"]
    assert site.pages[0].title == "Contact Us"
    assert site.pages[1].name == "Pricing"
    assert site.pages[2].name == "Page 3"
    assert site.pages[2].title == "Page 3"
    assert UNTITLED_PAGE == "Untitled page"


def test_build_site_renames_duplicate_ids() -> None:
    """Duplicate ids should receive numeric suffixes in document order."""
    site = build_site(
        {
            "pages": [
                {"id": "home", "name": "Home", "title": "Home"},
                {"id": "home", "name": "Home again", "title": "Home"},
            ]
        }
    )

    assert [page.id for page in site.pages] == ["home", "home-2"]


def test_build_site_skips_non_mapping_entries() -> None:
    """Scalar entries in the page list should be ignored."""
    site = build_site({"pages": ["oops", {"id": "home", "name": "H", "title": "H"}]})

    assert [page.id for page in site.pages] == ["home"]


@pytest.mark.parametrize("payload", [None, {}, {"pages": None}, {"pages": []}])
def test_build_site_accepts_empty_payloads(payload: dict[str, typ.Any] | None) -> None:
    """Absent or empty page lists should produce an empty site."""
    site = build_site(payload)

    assert site.pages == []
    assert site.root_page() is None


@pytest.mark.parametrize("payload", [["pages"], {"pages": {"home": {}}}, "pages"])
def test_build_site_rejects_malformed_shapes(payload: object) -> None:
    """Payloads with the wrong structure should raise SiteConfigError."""
    with pytest.raises(SiteConfigError):
        build_site(payload)  # type: ignore[arg-type]


def test_root_page_prefers_home_then_first() -> None:
    """The page with id ``home`` wins; otherwise the first page is the root."""
    with_home = build_site(
        {
            "pages": [
                {"id": "a", "name": "A", "title": "A"},
                {"id": "home", "name": "H", "title": "H"},
            ]
        }
    )
    without_home = build_site({"pages": [{"id": "a", "name": "A", "title": "A"}]})

    assert with_home.root_page().id == "home"
    assert without_home.root_page().id == "a"


def test_load_site_reads_yaml(tmp_path: Path) -> None:
    """YAML documents should load into the same model as mappings."""
    path = tmp_path / "site.yaml"
    path.write_text(
        """
pages:
  - id: home
    name: Home
    title: Welcome
    description: Main page
    bodyContent: |
      First paragraph.

      Second paragraph.
  - id: about
    name: About
    title: About us
""".lstrip(),
        encoding="utf-8",
    )

    site = load_site(path)

    assert [page.id for page in site.pages] == ["home", "about"]
    assert site.pages[0].body_content == "First paragraph.\n\nSecond paragraph.\n"


def test_load_site_reads_json(tmp_path: Path) -> None:
    """JSON documents from the data store are valid YAML 1.2 input."""
    path = tmp_path / "site.json"
    path.write_text(
        '{"pages": [{"id": "home", "name": "Home", "title": "T", '
        '"heroImageUrl": "h.png"}]}',
        encoding="utf-8",
    )

    site = load_site(path)

    assert site.pages[0].hero_image_url == "h.png"


def test_load_site_missing_file(tmp_path: Path) -> None:
    """A missing document should raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site(tmp_path / "absent.yaml")


def test_load_site_rejects_non_mapping_document(tmp_path: Path) -> None:
    """A top-level list is not a site document."""
    path = tmp_path / "site.yaml"
    path.write_text("- home\n- about\n", encoding="utf-8")

    with pytest.raises(TypeError, match="mapping"):
        load_site(path)


def test_load_export_settings_reads_optional_blocks(tmp_path: Path) -> None:
    """The export, user and site_name entries should be parsed when present."""
    path = tmp_path / "site.yaml"
    path.write_text(
        """
site_name: acme
user:
  email: jane@example.com
  plan: Pro
export:
  theme: classic
  includeBranding: false
pages:
  - id: home
    name: Home
    title: Home
""".lstrip(),
        encoding="utf-8",
    )

    settings = load_export_settings(path)

    assert settings.site_name == "acme"
    assert settings.user == UserData(identity="jane@example.com", plan="pro")
    assert settings.options == ExportOptions(
        include_branding=False, theme="classic", responsive=True, seo_optimized=True
    )


def test_resolve_export_options_defaults() -> None:
    """No options should produce the documented defaults."""
    assert resolve_export_options(None) == DEFAULT_EXPORT_OPTIONS
    assert resolve_export_options({}) == ExportOptions(
        include_branding=True, theme="modern", responsive=True, seo_optimized=True
    )


def test_resolve_export_options_overlays_partial_values() -> None:
    """Only supplied keys should override the defaults."""
    options = resolve_export_options({"seoOptimized": False, "theme": "MINIMAL"})

    assert options.seo_optimized is False
    assert options.theme == "minimal"
    assert options.include_branding is True
    assert options.responsive is True


def test_resolve_export_options_ignores_none_overrides() -> None:
    """``None`` values should keep the value from ``defaults``."""
    defaults = ExportOptions(include_branding=False, theme="classic")

    options = resolve_export_options(
        {"theme": None, "include_branding": None}, defaults
    )

    assert options == defaults


@pytest.mark.parametrize(
    ("value", "expected"),
    [("no", False), ("YES", True), (0, False), (1, True), ("maybe", True)],
)
def test_resolve_export_options_coerces_flags(value: object, *, expected: bool) -> None:
    """String and integer flags are coerced; unclear values keep the default."""
    assert resolve_export_options({"responsive": value}).responsive is expected


def test_resolve_export_options_normalizes_unknown_theme() -> None:
    """Unknown themes should fall back to ``modern``."""
    assert resolve_export_options({"theme": "neon"}).theme == "modern"


def test_apply_plan_limits_forces_branding_for_free_plan() -> None:
    """Free-plan users cannot remove the footer credit."""
    options = ExportOptions(include_branding=False)

    gated = apply_plan_limits(options, UserData("a@b.c", "free"), page_count=1)

    assert gated.include_branding is True


def test_apply_plan_limits_respects_pro_plan_and_anonymous_exports() -> None:
    """Pro users and exports without a user keep their branding choice."""
    options = ExportOptions(include_branding=False)

    assert apply_plan_limits(options, UserData("a@b.c", "pro"), page_count=1) == options
    assert apply_plan_limits(options, None, page_count=99) == options


def test_apply_plan_limits_warns_when_over_page_limit(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Exceeding the plan page limit should be logged, not rejected."""
    options = ExportOptions()

    with caplog.at_level("WARNING", logger="scope_export.config.options"):
        gated = apply_plan_limits(options, UserData("a@b.c", "free"), page_count=5)

    assert gated == options
    assert "allows 4" in caplog.text


def test_build_user_normalizes_plan() -> None:
    """Unknown plans fall back to ``free``; a plan alone still builds a user."""
    assert build_user({"identity": "x@y.z", "plan": "enterprise"}) == UserData(
        "x@y.z", "free"
    )
    assert build_user({"plan": "pro"}) == UserData("", "pro")
    assert build_user({"identity": None, "plan": None}) is None
    assert build_user({}) is None
    assert build_user(None) is None
    assert UserData("x@y.z", "pro").page_limit == 6
