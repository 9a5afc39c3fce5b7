"""HTML form parsing.

Turns ``<form>`` elements into :class:`~formulary.model.form.Form` models.
Each control tag has its own parser; :func:`parse_field` dispatches on the
tag name and :func:`parse_form` assembles the ordered field map.

See the HTML 4.01 form specification:
http://www.w3.org/TR/html401/interact/forms.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable

from anystore.logging import get_logger
from lxml import etree, html

from formulary.exc import ShapeMismatch
from formulary.helpers.element import (
    attr,
    attr_or,
    coalesce,
    has_attr,
    select_all,
    select_controls,
    tag_name,
    text,
)
from formulary.model.field import (
    UNNAMED,
    AnyField,
    ButtonField,
    InputField,
    SelectField,
    TextareaField,
)
from formulary.model.form import Enctype, Form

if TYPE_CHECKING:
    from lxml.html import HtmlElement

log = get_logger(__name__)

ENCTYPES: dict[str, Enctype] = {
    "application/x-www-form-urlencoded": "form",
    "multipart/form-data": "multipart",
}


def _ensure_tag(element: HtmlElement, expected: str) -> None:
    tag = tag_name(element)
    if tag != expected:
        raise ShapeMismatch(expected, tag)


def _control_attrs(element: HtmlElement) -> dict[str, Any]:
    return {
        "value": attr(element, "value"),
        "checked": attr(element, "checked"),
        "disabled": attr(element, "disabled"),
        "readonly": attr(element, "readonly"),
        "required": attr_or(element, "required", False),
    }


# <input>: type, name, value, checked, maxlength, id, disabled, readonly, required
# Unknown types are kept verbatim and treated like text.
def parse_input(element: HtmlElement) -> InputField:
    _ensure_tag(element, "input")
    return InputField(
        name=attr(element, "name"),
        type=attr_or(element, "type", "text"),
        **_control_attrs(element),
    )


def parse_options(options: Iterable[HtmlElement]) -> tuple[list[str], dict[str, str]]:
    """Read ``<option>`` elements into (selected values, label -> value)."""
    selected: list[str] = []
    mapping: dict[str, str] = {}
    for option in options:
        label = text(option)
        value = coalesce(attr(option, "value"), label)
        mapping[label] = value
        if has_attr(option, "selected") and value not in selected:
            selected.append(value)
    return selected, mapping


def parse_select(element: HtmlElement) -> SelectField:
    """Parse a ``<select>``.

    Only options marked ``selected`` count as the value; nothing is
    selected by default, unlike a browser which picks the first option.
    """
    _ensure_tag(element, "select")
    selected, options = parse_options(select_all(element, "option"))
    return SelectField(
        name=attr(element, "name"),
        value=selected,
        options=options,
        multiple=has_attr(element, "multiple"),
    )


def parse_textarea(element: HtmlElement) -> TextareaField:
    _ensure_tag(element, "textarea")
    return TextareaField(name=attr(element, "name"), value=text(element))


def parse_button(element: HtmlElement) -> ButtonField:
    _ensure_tag(element, "button")
    return ButtonField(
        name=attr_or(element, "name", UNNAMED),
        type=attr(element, "type"),
        **_control_attrs(element),
    )


PARSERS: dict[str, Callable[[HtmlElement], AnyField]] = {
    "input": parse_input,
    "select": parse_select,
    "textarea": parse_textarea,
    "button": parse_button,
}


def parse_field(element: HtmlElement) -> AnyField:
    """Parse any form control, dispatching on its tag name."""
    tag = tag_name(element)
    parser = PARSERS.get(tag)
    if parser is None:
        raise ShapeMismatch(" | ".join(PARSERS), tag)
    return parser(element)


def parse_fields(element: HtmlElement) -> dict[str, AnyField]:
    """Parse all controls of a form into an ordered field map.

    Controls without a name carry no name/value pair and are skipped
    (buttons get a placeholder name instead). A repeated name replaces
    the earlier field in place.
    """
    fields: dict[str, AnyField] = {}
    for control in select_controls(element):
        field = parse_field(control)
        if field.name is None:
            log.debug("Skipping unnamed control", tag=field.kind)
            continue
        fields[field.name] = field
    return fields


def convert_enctype(enctype: str | None) -> Enctype:
    if enctype is None:
        return "form"
    converted = ENCTYPES.get(enctype)
    if converted is None:
        log.warning("Unknown enctype, defaulting to form encoded", enctype=enctype)
        return "form"
    return converted


def parse_form(element: HtmlElement) -> Form:
    """Parse a single ``<form>`` element.

    The method is uppercased but otherwise kept as written; invalid
    methods are resolved when the request is derived.

    Example:
        >>> form = parse_form(doc.find('.//form'))
        >>> form.method, form.url, list(form.fields)
        ('GET', '/search', ['q', 'go'])
    """
    _ensure_tag(element, "form")
    method = attr(element, "method")
    return Form(
        name=coalesce(attr(element, "id"), attr(element, "name"), UNNAMED),
        method=method.upper() if method is not None else "GET",
        url=attr(element, "action"),
        enctype=convert_enctype(attr(element, "enctype")),
        fields=parse_fields(element),
    )


def _ensure_element(source: Any) -> HtmlElement:
    if isinstance(source, (str, bytes)):
        return html.fromstring(source)
    if isinstance(source, etree._ElementTree):
        return source.getroot()
    return source


def parse_forms(source: Any) -> list[Form]:
    """Parse all forms in a document, element, list of elements or HTML
    string, in document order.

    A ``<form>`` element on its own yields a one-item list.
    """
    if isinstance(source, (list, tuple)):
        forms: list[Form] = []
        for item in source:
            forms.extend(parse_forms(item))
        return forms

    element = _ensure_element(source)
    if tag_name(element) == "form":
        return [parse_form(element)]
    return [parse_form(form) for form in select_all(element, "form")]
