from typing import Dict, Optional, Tuple

from .models.config import ColumnDefinition, ScrapeConfig
from .models.preset import Preset

# =====================================================================================
# BUILT-IN PRESETS
# Ready-made configs for common page-audit questions. Built-ins carry
# created_at=0 and ids prefixed with "sys-".
# =====================================================================================

SYSTEM_PRESET_PREFIX = "sys-"


def _preset(preset_id: str, name: str, main_selector: str, *columns: Tuple[str, str]) -> Preset:
    return Preset(
        id=preset_id,
        name=name,
        config=ScrapeConfig(
            main_selector=main_selector,
            columns=[ColumnDefinition(name=col_name, selector=selector) for col_name, selector in columns],
        ),
        created_at=0,
    )


# Link columns shared by the rel-based presets
LINK_COLUMNS = (
    ("Anchor text", "."),
    ("URL", "@href"),
    ("Title", "@title"),
    ("Rel", "@rel"),
    ("Target", "@target"),
)

SOCIAL_HOSTS = (
    "facebook.com",
    "twitter.com",
    "x.com",
    "linkedin.com",
    "instagram.com",
    "youtube.com",
    "tiktok.com",
    "pinterest.com",
)

SYSTEM_PRESETS: Tuple[Preset, ...] = (
    _preset("sys-nofollow-links", "Nofollow links", '//a[contains(@rel, "nofollow")]', *LINK_COLUMNS),
    _preset("sys-sponsored-links", "Sponsored links", '//a[contains(@rel, "sponsored")]', *LINK_COLUMNS),
    _preset("sys-ugc-links", "UGC links", '//a[contains(@rel, "ugc")]', *LINK_COLUMNS),
    _preset(
        "sys-dofollow-links",
        "Dofollow links",
        '//a[not(contains(@rel, "nofollow")) and not(contains(@rel, "sponsored")) and not(contains(@rel, "ugc"))]',
        ("Anchor text", "."),
        ("URL", ".//@href"),
        ("Title", ".//@title"),
        ("Rel", ".//@rel"),
        ("Target", ".//@target"),
    ),
    _preset(
        "sys-headings",
        "Headings (H1-H6)",
        "//h1 | //h2 | //h3 | //h4 | //h5 | //h6",
        ("Level", "substring(local-name(), 2)"),
        ("Text", "normalize-space(.)"),
        ("ID", "@id"),
        ("Class", "@class"),
    ),
    _preset(
        "sys-images",
        "Images",
        "//img",
        ("Source", "@src"),
        ("Alt Text", "@alt"),
        ("Title", "@title"),
        ("Width", "@width"),
        ("Height", "@height"),
        ("Loading", "@loading"),
    ),
    _preset(
        "sys-external-links",
        "External Links",
        '//a[starts-with(@href, "http")]',
        ("Anchor Text", "."),
        ("URL", "@href"),
        ("Host", 'substring-before(substring-after(@href, "://"), "/")'),
        ("Rel", "@rel"),
        ("Target", "@target"),
    ),
    _preset(
        "sys-internal-links",
        "Internal (relative) Links",
        '//a[starts-with(@href, "/") or starts-with(@href, "#") or starts-with(@href, "?")]',
        ("Anchor Text", "."),
        ("URL", "@href"),
        ("Rel", "@rel"),
        ("Target", "@target"),
    ),
    _preset(
        "sys-social-media-links",
        "Social Media Links",
        "//a[" + " or ".join(f'contains(@href, "{host}")' for host in SOCIAL_HOSTS) + "]",
        ("Platform", 'translate(substring-before(substring-after(@href, "://"), ".com"), "www.", "")'),
        ("URL", "@href"),
        ("Anchor Text", "."),
        ("Rel", "@rel"),
    ),
    _preset(
        "sys-forms",
        "Forms",
        "//form",
        ("Action", "@action"),
        ("Method", "@method"),
        ("ID", "@id"),
        ("Class", "@class"),
        ("Input Count", "count(.//input)"),
    ),
    _preset(
        "sys-buttons-cta",
        "Buttons & CTAs",
        '//button | //input[@type="submit"] | //a[contains(@class, "btn") or contains(@class, "button") or contains(@class, "cta")]',
        ("Element Type", "local-name()"),
        ("Text/Value", "."),
        ("Value Attr", "@value"),
        ("Type", "@type"),
        ("Class", "@class"),
        ("Href", "@href"),
    ),
)

PRESETS_BY_ID: Dict[str, Preset] = {preset.id: preset for preset in SYSTEM_PRESETS}


def get_preset(preset_id: str) -> Optional[Preset]:
    return PRESETS_BY_ID.get(preset_id)


def is_system_preset(preset: Preset) -> bool:
    return preset.id.startswith(SYSTEM_PRESET_PREFIX) and preset.id in PRESETS_BY_ID
