"""Resolve partial export options against the documented defaults."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .helpers import _coerce_bool, _first_present, _normalize_theme, _optional_str
from .models import DEFAULT_PLAN, PLAN_PAGE_LIMITS, ExportOptions, UserData

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_OPTIONS = ExportOptions()

_OPTION_ALIASES: dict[str, tuple[str, ...]] = {
    "include_branding": ("includeBranding", "include_branding", "branding"),
    "theme": ("theme",),
    "responsive": ("responsive",),
    "seo_optimized": ("seoOptimized", "seo_optimized", "seo"),
}

OptionsInput: typ.TypeAlias = ExportOptions | typ.Mapping[str, typ.Any] | None


def resolve_export_options(
    partial: OptionsInput, defaults: ExportOptions = DEFAULT_EXPORT_OPTIONS
) -> ExportOptions:
    """Overlay ``partial`` onto ``defaults`` and return a complete option set.

    Parameters
    ----------
    partial : ExportOptions, Mapping, or None
        Caller-supplied options. Mappings may use the editor's camelCase keys
        (``includeBranding``) or snake_case keys; keys that are absent or set
        to ``None`` keep the default.
    defaults : ExportOptions, optional
        Baseline values, normally :data:`DEFAULT_EXPORT_OPTIONS`.

    Returns
    -------
    ExportOptions
        Fully populated options. Unknown themes and non-boolean flags are
        normalized to the defaults rather than rejected.

    Examples
    --------
    >>> resolve_export_options({"theme": "Classic", "responsive": "no"})
    ExportOptions(include_branding=True, theme='classic', responsive=False, seo_optimized=True)
    """
    match partial:
        case None:
            return dc.replace(defaults, theme=_normalize_theme(defaults.theme))
        case ExportOptions():
            payload: typ.Mapping[str, typ.Any] = dc.asdict(partial)
        case dict():
            payload = partial
        case _:
            logger.debug("Ignoring unsupported export options %r", partial)
            payload = {}

    values = {
        field: _first_present(payload, *aliases)
        for field, aliases in _OPTION_ALIASES.items()
    }
    return ExportOptions(
        include_branding=_coerce_bool(
            values["include_branding"], defaults.include_branding
        ),
        theme=_normalize_theme(values["theme"] or defaults.theme),
        responsive=_coerce_bool(values["responsive"], defaults.responsive),
        seo_optimized=_coerce_bool(values["seo_optimized"], defaults.seo_optimized),
    )


def apply_plan_limits(
    options: ExportOptions, user: UserData | None, *, page_count: int
) -> ExportOptions:
    """Apply plan-tier gating to already resolved options.

    Free plans cannot drop the footer credit, so branding is forced back on.
    Exceeding the plan's page limit is only reported; enforcing it belongs to
    the editor that creates pages.
    """
    if user is None:
        return options
    if page_count > user.page_limit:
        logger.warning(
            "Site has %d pages; the %s plan allows %d",
            page_count,
            user.plan,
            user.page_limit,
        )
    if not options.include_branding and not user.can_remove_branding:
        logger.info("Branding kept for %s plan export", user.plan)
        return dc.replace(options, include_branding=True)
    return options


def build_user(payload: typ.Mapping[str, typ.Any] | None) -> UserData | None:
    """Build :class:`UserData` from a ``{identity, plan}`` mapping, if present.

    A plan without an identity still yields a user with an empty identity,
    so plan gating applies to anonymous exports that name a plan.
    """
    match payload:
        case dict() as data:
            identity = _optional_str(_first_present(data, "identity", "email"))
            raw_plan = _optional_str(data.get("plan"))
        case _:
            return None
    if identity is None and raw_plan is None:
        return None
    plan = (raw_plan or DEFAULT_PLAN).lower()
    if plan not in PLAN_PAGE_LIMITS:
        logger.debug("Unknown plan %r; using %s", plan, DEFAULT_PLAN)
        plan = DEFAULT_PLAN
    return UserData(identity=identity or "", plan=plan)


__all__ = [
    "DEFAULT_EXPORT_OPTIONS",
    "OptionsInput",
    "apply_plan_limits",
    "build_user",
    "resolve_export_options",
]
