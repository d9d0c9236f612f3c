"""
Tests for the config and result models: camelCase wire format, parsing
errors and config executability.
"""
import json

import pytest

from scrape_similar import (
    ColumnDefinition,
    InvalidScrapeConfigError,
    ParserError,
    RowMetadata,
    ScrapeConfig,
    ScrapedRow,
    ScrapeResult,
)
from scrape_similar.models.config import EMPTY_COLUMN_LIST, EMPTY_MAIN_SELECTOR

CONFIG_JSON = """
{
    "mainSelector": "//ul/li",
    "columns": [
        {"name": "Text", "selector": "."},
        {"name": "Link", "selector": "a/@href"}
    ]
}
"""


class TestScrapeConfig:
    def test_from_camel_case_json(self):
        config = ScrapeConfig.from_string(CONFIG_JSON)

        assert config.main_selector == "//ul/li"
        assert config.column_names == ["Text", "Link"]
        assert config.columns[1] == ColumnDefinition(name="Link", selector="a/@href")

    def test_to_dict_uses_camel_case(self):
        config = ScrapeConfig(main_selector="//a", columns=[ColumnDefinition(name="URL", selector="@href")])

        assert config.to_dict() == {"mainSelector": "//a", "columns": [{"name": "URL", "selector": "@href"}]}
        assert json.loads(config.to_json()) == config.to_dict()

    def test_from_dict_accepts_field_names(self):
        config = ScrapeConfig.from_dict({"main_selector": "//p", "columns": [], "unknown": 1})

        assert config.main_selector == "//p"

    def test_from_string_invalid_json(self):
        with pytest.raises(ParserError):
            ScrapeConfig.from_string("{not json")

    def test_from_string_missing_field(self):
        with pytest.raises(ParserError):
            ScrapeConfig.from_string('{"columns": []}')

    def test_from_dict_rejects_other_types(self):
        with pytest.raises(ParserError):
            ScrapeConfig.from_dict(["//p"])

    def test_from_dict_invalid_fields(self):
        with pytest.raises(ParserError):
            ScrapeConfig.from_dict({"columns": "not a list"})

    def test_config_is_immutable(self):
        config = ScrapeConfig(main_selector="//p")

        with pytest.raises(Exception):
            config.main_selector = "//a"

    @pytest.mark.parametrize(
        "main_selector, columns, reason",
        [
            ("", [ColumnDefinition(name="Text", selector=".")], EMPTY_MAIN_SELECTOR),
            ("   ", [ColumnDefinition(name="Text", selector=".")], EMPTY_MAIN_SELECTOR),
            ("//p", [], EMPTY_COLUMN_LIST),
        ],
    )
    def test_ensure_executable(self, main_selector, columns, reason):
        config = ScrapeConfig(main_selector=main_selector, columns=columns)

        assert not config.is_executable
        with pytest.raises(InvalidScrapeConfigError) as exc_info:
            config.ensure_executable()
        assert exc_info.value.reason == reason

    def test_executable_config_is_returned(self):
        config = ScrapeConfig.from_string(CONFIG_JSON)

        assert config.is_executable
        assert config.ensure_executable() is config


class TestScrapeResult:
    @pytest.fixture
    def result(self):
        return ScrapeResult(
            data=[
                ScrapedRow(data={"Text": "One"}, metadata=RowMetadata(original_index=0, is_empty=False)),
                ScrapedRow(data={"Text": ""}, metadata=RowMetadata(original_index=1, is_empty=True)),
                ScrapedRow(data={"Text": "Three"}, metadata=RowMetadata(original_index=2, is_empty=False)),
            ],
            column_order=["Text"],
        )

    def test_summary(self, result):
        assert result.row_count == 3
        assert result.empty_count == 1
        assert result.summary() == "3 rows found, 1 empty"

    def test_hide_empty_keeps_original_index(self, result):
        rows = result.rows(hide_empty=True)

        assert [row.metadata.original_index for row in rows] == [0, 2]
        assert len(result.rows()) == 3

    def test_wire_format(self, result):
        payload = result.to_dict()

        assert payload["columnOrder"] == ["Text"]
        assert payload["data"][1] == {"data": {"Text": ""}, "metadata": {"originalIndex": 1, "isEmpty": True}}

    def test_negative_index_is_rejected(self):
        with pytest.raises(ValueError):
            RowMetadata(original_index=-1, is_empty=False)
