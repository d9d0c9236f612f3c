"""
Tests for the built-in presets, run against a small audit page.
"""
import pytest

from scrape_similar import SYSTEM_PRESETS, get_preset, scrape_html
from scrape_similar.presets import is_system_preset

AUDIT_PAGE = """
<html>
<body>
    <h1 id="top">Welcome</h1>
    <h2 class="sub">  Latest   news </h2>
    <a href="/about">About</a>
    <a href="https://example.org/page" rel="nofollow" target="_blank">Partner</a>
    <a href="https://twitter.com/someone">Follow us</a>
    <a href="/buy" class="btn primary">Buy now</a>
    <img src="/logo.png" alt="Logo" width="120">
    <form action="/search" method="get">
        <input type="text" name="q">
        <input type="submit" value="Go">
    </form>
    <button type="button">Menu</button>
</body>
</html>
"""


def scrape(preset_id):
    return scrape_html(AUDIT_PAGE, get_preset(preset_id).config)


def test_ids_are_unique_and_prefixed():
    ids = [preset.id for preset in SYSTEM_PRESETS]

    assert len(ids) == len(set(ids)) == 11
    assert all(is_system_preset(preset) for preset in SYSTEM_PRESETS)
    assert all(preset.created_at == 0 for preset in SYSTEM_PRESETS)


def test_unknown_preset():
    assert get_preset("sys-missing") is None


@pytest.mark.parametrize("preset", SYSTEM_PRESETS, ids=lambda preset: preset.id)
def test_every_preset_runs(preset):
    assert preset.config.is_executable
    result = scrape_html(AUDIT_PAGE, preset.config)
    assert result.column_order == preset.config.column_names


def test_headings():
    result = scrape("sys-headings")

    assert [row.data["Level"] for row in result.data] == ["1", "2"]
    assert [row.data["Text"] for row in result.data] == ["Welcome", "Latest news"]
    assert result.data[0].data["ID"] == "top"


def test_nofollow_and_dofollow_links():
    nofollow = scrape("sys-nofollow-links")
    dofollow = scrape("sys-dofollow-links")

    assert [row.data["URL"] for row in nofollow.data] == ["https://example.org/page"]
    assert nofollow.data[0].data["Target"] == "_blank"
    assert "https://example.org/page" not in [row.data["URL"] for row in dofollow.data]
    assert dofollow.row_count == 3


def test_external_links_host():
    result = scrape("sys-external-links")

    assert [row.data["Host"] for row in result.data] == ["example.org", "twitter.com"]


def test_internal_links():
    result = scrape("sys-internal-links")

    assert [row.data["URL"] for row in result.data] == ["/about", "/buy"]


def test_social_media_links():
    result = scrape("sys-social-media-links")

    assert [row.data["URL"] for row in result.data] == ["https://twitter.com/someone"]


def test_forms_input_count():
    result = scrape("sys-forms")

    assert result.data[0].data["Input Count"] == "2"
    assert result.data[0].data["Method"] == "get"


def test_buttons_and_ctas():
    result = scrape("sys-buttons-cta")

    assert [row.data["Element Type"] for row in result.data] == ["a", "input", "button"]


def test_images():
    result = scrape("sys-images")

    assert result.data[0].data == {
        "Source": "/logo.png",
        "Alt Text": "Logo",
        "Title": "",
        "Width": "120",
        "Height": "",
        "Loading": "",
    }
