"""
Config Guessing Heuristics
==========================

Derives a complete ScrapeConfig from the single element a user pointed at.

How It Works:
=============

Step 1: Walk up from the element to the closest "interesting" ancestor
        (table row, link, image, list item, heading, form control, ...).
        Without one, the element itself is used.

Step 2: Minimize the ancestor's absolute XPath into the main selector
        (see `xpath.minimizer`). Table rows are the exception: their main
        selector is `(//table)[N]//tr[td]`, the data rows of the Nth table.

Step 3: Map the ancestor's tag to an `AnchorKind` and build the columns from
        that kind's template. Every template is followed by one `@data-*`
        column per data attribute on the ancestor, captured at guess time.

Example:
========

    <ul>
      <li data-sku="A1">First</li>
      <li data-sku="B2">Second</li>
    </ul>

Right-clicking "First" gives:

    {
        "mainSelector": "/html/body/ul/li",
        "columns": [
            {"name": "List Item", "selector": "."},
            {"name": "data-sku", "selector": "@data-sku"}
        ]
    }
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List

from lxml import etree

from .document import closest, element_text
from .exceptions import NoMatchingElementError
from .models.config import ColumnDefinition, ScrapeConfig
from .xpath.base import PathEvaluator
from .xpath.minimizer import minimize_xpath

log = logging.getLogger(__name__)

# Closest ancestor-or-self with one of these tags becomes the row anchor.
INTERESTING_TAGS = (
    "tr", "a", "img", "dt", "li", "button", "input", "textarea", "select",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "article", "section", "main", "aside", "figure",
)
HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class AnchorKind(str, Enum):
    ROW = "row"
    LINK = "link"
    IMAGE = "image"
    BUTTON = "button"
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    TERM = "term"
    LIST_ITEM = "list_item"
    HEADING = "heading"
    SECTION = "section"
    FIGURE = "figure"
    BLOCKQUOTE = "blockquote"
    CODE = "code"
    COLUMN_GROUP = "column_group"
    COLUMN = "column"
    TABLE = "table"
    LIST = "list"
    DEFINITION_LIST = "definition_list"
    FORM = "form"
    NAV = "nav"
    LANDMARK = "landmark"
    MEDIA = "media"
    DETAILS = "details"
    SUMMARY = "summary"
    DEFAULT = "default"

    @classmethod
    def from_tag(cls, tag: str) -> "AnchorKind":
        return TAG_KINDS.get(tag.lower(), cls.DEFAULT)


TAG_KINDS: Dict[str, AnchorKind] = {
    "tr": AnchorKind.ROW,
    "a": AnchorKind.LINK,
    "img": AnchorKind.IMAGE,
    "button": AnchorKind.BUTTON,
    "input": AnchorKind.INPUT,
    "textarea": AnchorKind.TEXTAREA,
    "select": AnchorKind.SELECT,
    "dt": AnchorKind.TERM,
    "li": AnchorKind.LIST_ITEM,
    **{tag: AnchorKind.HEADING for tag in HEADING_TAGS},
    "article": AnchorKind.SECTION,
    "section": AnchorKind.SECTION,
    "main": AnchorKind.SECTION,
    "aside": AnchorKind.SECTION,
    "figure": AnchorKind.FIGURE,
    "blockquote": AnchorKind.BLOCKQUOTE,
    "pre": AnchorKind.CODE,
    "code": AnchorKind.CODE,
    "colgroup": AnchorKind.COLUMN_GROUP,
    "col": AnchorKind.COLUMN,
    "table": AnchorKind.TABLE,
    "ul": AnchorKind.LIST,
    "ol": AnchorKind.LIST,
    "dl": AnchorKind.DEFINITION_LIST,
    "form": AnchorKind.FORM,
    "nav": AnchorKind.NAV,
    "header": AnchorKind.LANDMARK,
    "footer": AnchorKind.LANDMARK,
    "video": AnchorKind.MEDIA,
    "audio": AnchorKind.MEDIA,
    "details": AnchorKind.DETAILS,
    "summary": AnchorKind.SUMMARY,
}

ColumnTemplate = Callable[[etree._Element], List[ColumnDefinition]]


def _columns(*pairs) -> List[ColumnDefinition]:
    return [ColumnDefinition(name=name, selector=selector) for name, selector in pairs]


def _child_elements(element: etree._Element, *tags: str) -> List[etree._Element]:
    return [child for child in element if child.tag in tags]


def data_attribute_columns(element: etree._Element) -> List[ColumnDefinition]:
    return [
        ColumnDefinition(name=name, selector=f"@{name}")
        for name in element.attrib
        if name.startswith("data-")
    ]


def find_header_cells(row: etree._Element) -> List[etree._Element]:
    """
    Header cells describing `row`: the last <thead> row, else the closest
    preceding row with <th> cells, else every <th> in the table.
    """
    table = closest(row, ("table",))
    if table is None:
        return []

    thead = table.find(".//thead")
    if thead is not None:
        header_rows = thead.findall(".//tr")
        if header_rows:
            headers = _child_elements(header_rows[-1], "th")
            if headers:
                return headers

    rows = list(table.iter("tr"))
    if row in rows:
        for candidate in reversed(rows[: rows.index(row)]):
            headers = _child_elements(candidate, "th")
            if headers:
                return headers

    return list(table.iter("th"))


def row_columns(row: etree._Element) -> List[ColumnDefinition]:
    headers = find_header_cells(row)
    cells = _child_elements(row, "th", "td")
    if headers and len(headers) == len(cells):
        names = [element_text(th) or f"Column {i + 1}" for i, th in enumerate(headers)]
    else:
        names = [f"Column {i + 1}" for i in range(len(cells))]
    return [ColumnDefinition(name=name, selector=f"*[{i + 1}]") for i, name in enumerate(names)]


def link_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Anchor text", "."), ("URL", "@href"), ("Rel", "@rel"), ("Target", "@target"))


def image_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Alt Text", "@alt"), ("Source", "@src"), ("Title", "@title"))


def button_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(
        ("Text", "."), ("Value", "@value"), ("ARIA Label", "@aria-label"), ("Disabled", "@disabled")
    )


def input_columns(element: etree._Element) -> List[ColumnDefinition]:
    columns = _columns(("Value", "@value"), ("Placeholder", "@placeholder"), ("Name", "@name"), ("Type", "@type"))
    if (element.get("type") or "").lower() in ("checkbox", "radio"):
        columns += _columns(("Checked", "@checked"))
    return columns


def textarea_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Value", "."), ("Placeholder", "@placeholder"), ("Name", "@name"))


def select_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Selected Option", "option[@selected]"), ("Name", "@name"))


def term_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Term", "."), ("Definition", "./following-sibling::dd"))


def list_item_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("List Item", "."))


def heading_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Heading", "."), ("ARIA Label", "@aria-label"))


def section_columns(element: etree._Element) -> List[ColumnDefinition]:
    columns = _columns(("Text", "."), ("ARIA Label", "@aria-label"))
    heading = next((el for el in element.iterdescendants() if el.tag in HEADING_TAGS), None)
    if heading is not None:
        columns += _columns(("Headline", heading.tag))
    return columns


def figure_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(
        ("Image Source", ".//img/@src"),
        ("Image Alt", ".//img/@alt"),
        ("Image Title", ".//img/@title"),
        ("Caption", "figcaption"),
        ("Code", "pre|code"),
        ("Blockquote", "blockquote"),
        ("Paragraph", "p"),
        ("Figure Text", "."),
    )


def blockquote_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Quote", "."), ("Citation", "@cite"), ("Footer", "footer"), ("Cite Element", "cite"))


def code_columns(element: etree._Element) -> List[ColumnDefinition]:
    columns = _columns(("Code", "."), ("Language", "@data-language"), ("Class", "@class"))
    parent = element.getparent()
    if parent is not None and parent.tag == "figure":
        columns += _columns(("Caption", "figcaption"))
    return columns


def column_group_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Span", "@span"), ("Class", "@class"), ("Style", "@style"))


def table_columns(element: etree._Element) -> List[ColumnDefinition]:
    columns = []
    if element.find(".//caption") is not None:
        columns += _columns(("Caption", "caption"))
    for i, th in enumerate(element.iter("th")):
        columns.append(ColumnDefinition(name=element_text(th) or f"Column {i + 1}", selector=f".//tr/td[{i + 1}]"))
    columns += _columns(("Col Count", "count(col)"))
    for i, _ in enumerate(element.iter("col")):
        columns.append(ColumnDefinition(name=f"Col {i + 1} Span", selector=f".//col[{i + 1}]/@span"))
    return columns


def list_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("List Item", "li"))


def definition_list_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Term", "dt"), ("Definition", "dd"))


def form_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(
        ("Action", "@action"),
        ("Method", "@method"),
        ("Input Names", ".//input/@name"),
        ("Input Types", ".//input/@type"),
    )


def nav_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Text", "."), ("ARIA Label", "@aria-label"), ("Links", "a/@href"))


def landmark_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Text", "."), ("ARIA Label", "@aria-label"))


def media_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(
        ("Source", "source/@src"), ("Poster", "@poster"), ("Controls", "@controls"), ("Captions", "track/@src")
    )


def details_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Summary", "summary"), ("Details", "."))


def summary_columns(element: etree._Element) -> List[ColumnDefinition]:
    return _columns(("Summary", "."))


def default_columns(element: etree._Element) -> List[ColumnDefinition]:
    columns = []
    if element.get("aria-label") is not None:
        columns += _columns(("ARIA Label", "@aria-label"))
    columns += _columns(("Text", "."))
    return columns


COLUMN_TEMPLATES: Dict[AnchorKind, ColumnTemplate] = {
    AnchorKind.ROW: row_columns,
    AnchorKind.LINK: link_columns,
    AnchorKind.IMAGE: image_columns,
    AnchorKind.BUTTON: button_columns,
    AnchorKind.INPUT: input_columns,
    AnchorKind.TEXTAREA: textarea_columns,
    AnchorKind.SELECT: select_columns,
    AnchorKind.TERM: term_columns,
    AnchorKind.LIST_ITEM: list_item_columns,
    AnchorKind.HEADING: heading_columns,
    AnchorKind.SECTION: section_columns,
    AnchorKind.FIGURE: figure_columns,
    AnchorKind.BLOCKQUOTE: blockquote_columns,
    AnchorKind.CODE: code_columns,
    AnchorKind.COLUMN_GROUP: column_group_columns,
    AnchorKind.COLUMN: column_group_columns,
    AnchorKind.TABLE: table_columns,
    AnchorKind.LIST: list_columns,
    AnchorKind.DEFINITION_LIST: definition_list_columns,
    AnchorKind.FORM: form_columns,
    AnchorKind.NAV: nav_columns,
    AnchorKind.LANDMARK: landmark_columns,
    AnchorKind.MEDIA: media_columns,
    AnchorKind.DETAILS: details_columns,
    AnchorKind.SUMMARY: summary_columns,
    AnchorKind.DEFAULT: default_columns,
}


def find_anchor(element: etree._Element) -> etree._Element:
    """Closest interesting ancestor-or-self of `element`, or the element itself."""
    ancestor = closest(element, INTERESTING_TAGS)
    return ancestor if ancestor is not None else element


def build_columns(kind: AnchorKind, element: etree._Element) -> List[ColumnDefinition]:
    return COLUMN_TEMPLATES[kind](element) + data_attribute_columns(element)


def table_rows_selector(table: etree._Element, evaluator: PathEvaluator) -> str:
    """
    Selector for the data rows of `table`, wherever in the table the click landed.

    Rows without a <td> (header and footer rows) are left out.
    """
    tables = evaluator.evaluate_elements("//table")
    return f"(//table)[{tables.index(table) + 1}]//tr[td]"


def guess_scrape_config(element: etree._Element, evaluator: PathEvaluator) -> ScrapeConfig:
    """
    Guess a ScrapeConfig that extracts every element similar to `element`.

    Args:
        element: The element the user pointed at.
        evaluator: Evaluator bound to the element's document, used to count
            matches while minimizing the main selector.
    """
    ancestor = find_anchor(element)
    kind = AnchorKind.from_tag(ancestor.tag)
    table = closest(ancestor, ("table",)) if kind is AnchorKind.ROW else None
    if table is not None:
        main_selector = table_rows_selector(table, evaluator)
    else:
        main_selector = minimize_xpath(ancestor, evaluator)

    columns = build_columns(kind, ancestor)
    log.info(f"Guessed {kind.value} config '{main_selector}' with {len(columns)} columns.")
    return ScrapeConfig(main_selector=main_selector, columns=columns)


def guess_scrape_config_from_selector(selector: str, evaluator: PathEvaluator) -> ScrapeConfig:
    """
    Guess columns from the first element matched by a user-typed `selector`,
    keeping that selector as the main selector.

    Raises:
        SelectorSyntaxError: `selector` is malformed.
        NoMatchingElementError: `selector` matches no element.
    """
    elements = evaluator.evaluate_elements(selector)
    if not elements:
        raise NoMatchingElementError(f"No elements found for selector '{selector}'")
    guessed = guess_scrape_config(elements[0], evaluator)
    return guessed.model_copy(update={"main_selector": selector})
