"""Display labels for enumerations, per locale.

Sorting, comparison and equality always use the enum members; these tables
are only consulted for rendering and for resolving user or backup input.
"""

from typing import Optional

from adtrack.domain.entities import DateRangeOption, Platform, Project
from adtrack.domain.errors import ValidationError, unknown_choice

DEFAULT_LOCALE = "en"
LOCALES = ("en", "ar")

# Rendered for a platform slot that no platform qualifies for
NO_PLATFORM = "-"

PROJECT_LABELS: dict[str, dict[Project, str]] = {
    "en": {
        Project.AZZA: "Azza Al-Mutamayeza",
        Project.BRONZE: "Bronze Abaya",
        Project.MARAYA: "Maraya Abaya",
        Project.SABORIO: "Saborio",
    },
    "ar": {
        Project.AZZA: "عزة المتميزة",
        Project.BRONZE: "برونز عباية",
        Project.MARAYA: "مرايا عباية",
        Project.SABORIO: "سابوريو",
    },
}

PLATFORM_LABELS: dict[str, dict[Platform, str]] = {
    "en": {
        Platform.META: "Meta",
        Platform.SNAPCHAT: "Snapchat",
        Platform.TIKTOK: "TikTok",
        Platform.GOOGLE: "Google Ads",
    },
    "ar": {
        Platform.META: "Meta",
        Platform.SNAPCHAT: "Snapchat",
        Platform.TIKTOK: "TikTok",
        Platform.GOOGLE: "Google Ads",
    },
}

RANGE_LABELS: dict[str, dict[DateRangeOption, str]] = {
    "en": {
        DateRangeOption.TODAY: "Today",
        DateRangeOption.YESTERDAY: "Yesterday",
        DateRangeOption.LAST_7_DAYS: "Last 7 days",
        DateRangeOption.THIS_MONTH: "This month",
        DateRangeOption.LAST_30_DAYS: "Last 30 days",
        DateRangeOption.LAST_3_MONTHS: "Last 3 months",
        DateRangeOption.CUSTOM: "Custom range",
    },
    "ar": {
        DateRangeOption.TODAY: "اليوم",
        DateRangeOption.YESTERDAY: "أمس",
        DateRangeOption.LAST_7_DAYS: "آخر 7 أيام",
        DateRangeOption.THIS_MONTH: "هذا الشهر",
        DateRangeOption.LAST_30_DAYS: "آخر 30 يوم",
        DateRangeOption.LAST_3_MONTHS: "آخر 3 أشهر",
        DateRangeOption.CUSTOM: "فترة مخصصة",
    },
}

EXPORT_HEADERS: dict[str, dict[str, tuple[str, ...]]] = {
    "csv": {
        "en": ("Date", "Project", "Platform", "Spend (SAR)", "Purchases", "CPR"),
        "ar": (
            "التاريخ",
            "المشروع",
            "المنصة",
            "الصرف (SAR)",
            "الطلبات",
            "تكلفة الطلب (CPR)",
        ),
    },
    "tsv": {
        "en": ("Date", "Project", "Platform", "Spend", "Purchases", "CPR"),
        "ar": ("التاريخ", "المشروع", "المنصة", "الصرف", "الطلبات", "CPR"),
    },
}


def _locale(locale: Optional[str]) -> str:
    if locale is None:
        return DEFAULT_LOCALE
    if locale not in LOCALES:
        raise ValidationError(unknown_choice("locale", locale))
    return locale


def project_label(project: Project, locale: Optional[str] = None) -> str:
    """Return the display label for a project."""
    return PROJECT_LABELS[_locale(locale)][project]


def platform_label(platform: Optional[Platform], locale: Optional[str] = None) -> str:
    """Return the display label for a platform, or the no-platform marker."""
    if platform is None:
        return NO_PLATFORM
    return PLATFORM_LABELS[_locale(locale)][platform]


def range_label(option: DateRangeOption, locale: Optional[str] = None) -> str:
    """Return the display label for a date range option."""
    return RANGE_LABELS[_locale(locale)][option]


def export_headers(kind: str, locale: Optional[str] = None) -> tuple[str, ...]:
    """Return the header row for an export kind ('csv' or 'tsv')."""
    return EXPORT_HEADERS[kind][_locale(locale)]


def _normalize(text: str) -> str:
    return text.strip().casefold()


def resolve_project(value: str) -> Project:
    """Resolve a project from its id, enum name or any display label.

    Raises:
        ValidationError: If the value matches no project
    """
    needle = _normalize(str(value))
    for project in Project:
        candidates = {project.value, project.name.casefold()}
        candidates.update(_normalize(labels[project]) for labels in PROJECT_LABELS.values())
        if needle in candidates:
            return project
    raise ValidationError(unknown_choice("project", value))


def resolve_platform(value: str) -> Platform:
    """Resolve a platform from its id, enum name or any display label.

    Raises:
        ValidationError: If the value matches no platform
    """
    needle = _normalize(str(value))
    for platform in Platform:
        candidates = {platform.value, platform.name.casefold()}
        candidates.update(_normalize(labels[platform]) for labels in PLATFORM_LABELS.values())
        if needle in candidates:
            return platform
    raise ValidationError(unknown_choice("platform", value))


def resolve_range_option(value: str) -> DateRangeOption:
    """Resolve a date range option from its id or enum name."""
    needle = _normalize(str(value)).replace("_", "-")
    for option in DateRangeOption:
        if needle in (option.value, option.name.casefold().replace("_", "-")):
            return option
    raise ValidationError(unknown_choice("date range", value))
