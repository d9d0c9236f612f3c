from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import Tag
from lxml import etree
from lxml import html as lxml_html

from .exceptions import ParserError
from .settings import settings

log = logging.getLogger(__name__)

Markup = Union[str, bytes, Tag, etree._Element]


def load_document(markup: Markup, encoding: Optional[str] = None) -> lxml_html.HtmlElement:
    """
    Parse `markup` into a document snapshot and return its root `<html>` element.

    Accepts raw HTML (`str` or `bytes`), a BeautifulSoup object, or an lxml
    element (whose tree root is returned). The parser always produces
    `<html><body>`, so absolute paths starting at `/html/body` are valid even
    for fragments.
    """
    if isinstance(markup, etree._Element):
        return markup.getroottree().getroot()

    if isinstance(markup, Tag):
        markup = str(markup)

    if isinstance(markup, bytes):
        markup = markup.decode(encoding or settings.DEFAULT_ENCODING, errors="ignore")

    if not isinstance(markup, str):
        raise ParserError(f"Cannot build a document from {type(markup).__name__}")

    if not markup.strip():
        markup = "<html><body></body></html>"

    try:
        root = lxml_html.document_fromstring(markup)
    except (etree.ParserError, ValueError) as e:
        raise ParserError(f"Cannot parse HTML document: {e}") from e

    if root.find("body") is None:
        # Documents with a <frameset> or only a <head> still need a body step.
        etree.SubElement(root, "body")
    log.debug(f"Loaded document with {sum(1 for _ in root.iter())} nodes.")
    return root


def element_text(element: etree._Element) -> str:
    """Trimmed text content of `element` and its descendants (DOM `textContent`)."""
    return str(element.xpath("string()")).strip()


def closest(element: etree._Element, tags) -> Optional[etree._Element]:
    """Nearest ancestor-or-self of `element` whose tag is in `tags`."""
    node = element
    while node is not None:
        if node.tag in tags:
            return node
        node = node.getparent()
    return None
