"""Element access utilities for lxml HTML nodes.

This module is the single point through which form parsing reads the
document tree: tag names, attributes (absent vs. present-but-empty),
text content and descendant selection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from lxml.html import HtmlElement

T = TypeVar("T")

CONTROL_TAGS = ("input", "select", "textarea", "button")
CONTROLS_XPATH = " | ".join(".//%s" % tag for tag in CONTROL_TAGS)


def tag_name(element: HtmlElement) -> str | None:
    """Return the lowercased tag name, or None for comments and PIs."""
    tag = element.tag
    if not isinstance(tag, str):
        return None
    return tag.lower()


def attr(element: HtmlElement, name: str) -> str | None:
    """Look up an attribute.

    Returns None when the attribute is absent and the (possibly empty)
    string when it is present, so ``<option selected>`` is distinguishable
    from ``<option>``.

    Example:
        >>> attr(fromstring('<input name="q" required>'), "required")
        ''
        >>> attr(fromstring('<input name="q">'), "required") is None
        True
    """
    return element.get(name)


def coalesce(*values: T | None) -> T | None:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def attr_or(element: HtmlElement, name: str, default: T) -> str | T:
    """Look up an attribute, falling back to ``default`` when absent."""
    return coalesce(attr(element, name), default)


def has_attr(element: HtmlElement, name: str) -> bool:
    return attr(element, name) is not None


def text(element: HtmlElement) -> str:
    """Full text content of an element and its descendants."""
    return element.text_content()


def select_controls(element: HtmlElement) -> list[HtmlElement]:
    """All form controls beneath ``element`` in document order."""
    return element.xpath(CONTROLS_XPATH)


def select_all(element: HtmlElement, tag: str) -> list[HtmlElement]:
    """All descendants with the given tag, in document order."""
    return element.xpath(".//%s" % tag)
