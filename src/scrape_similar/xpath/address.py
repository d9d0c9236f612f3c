from __future__ import annotations

from typing import Any, Optional

from lxml import etree

BODY_XPATH = "/html/body"


def _is_element(node: Any) -> bool:
    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def get_element_index(node: etree._Element) -> Optional[int]:
    """
    1-based rank of `node` among its same-tag siblings, or None when it is the
    only child with that tag.
    """
    parent = node.getparent()
    if parent is None:
        return None
    siblings = [child for child in parent if child.tag == node.tag]
    if len(siblings) > 1:
        return siblings.index(node) + 1
    return None


def generate_xpath(node: Any) -> str:
    """
    Build the absolute XPath of `node`, adding `[n]` only where same-tag
    siblings make a step ambiguous.

    The document `<body>` is always written as `/html/body`; non-element
    nodes give an empty string.

    Examples:
        <body><ul><li/><li/></ul></body>, second <li>  -> "/html/body/ul/li[2]"
        <body><main><p/></main></body>, the <p>        -> "/html/body/main/p"
    """
    if not _is_element(node):
        return ""

    parent = node.getparent()
    if node.tag == "body" and parent is not None and parent.getparent() is None:
        return BODY_XPATH

    index = get_element_index(node)
    segment = f"{node.tag}[{index}]" if index else node.tag
    if parent is None:
        return f"/{segment}"
    return f"{generate_xpath(parent)}/{segment}"
