"""Setting field values on a parsed form."""

from __future__ import annotations

from typing import Any, Mapping

from anystore.logging import get_logger
from banal import ensure_list

from formulary.exc import ImmutableField, UnknownField
from formulary.model.field import SelectField
from formulary.model.form import Form

log = get_logger(__name__)


def _coerce(value: Any) -> str | None:
    if value is None:
        return value
    return str(value)


def set_values(
    form: Form, values: Mapping[str, Any] | None = None, **kwargs: Any
) -> Form:
    """Return a copy of ``form`` with the given field values.

    Values may be passed as a mapping (for names that are not valid
    Python identifiers) and/or as keyword arguments.

    The submit and hidden guards look at the control type of both
    ``<input>`` and ``<button>`` fields, so a ``<button type="submit">``
    is as immutable as an ``<input type="submit">``. Select and textarea
    fields are never guarded.

    Raises:
        UnknownField: If any name is not a field of the form. All unknown
            names are reported at once.
        ImmutableField: If a submit field is targeted.

    Example:
        >>> search = parse_forms(doc)[0]
        >>> set_values(search, q="My little pony")
        >>> set_values(search, {"entry.564397473": "abc"})
    """
    new_values = {**(values or {}), **kwargs}

    no_match = [name for name in new_values if name not in form.fields]
    if no_match:
        raise UnknownField(no_match)

    for name in new_values:
        if form.fields[name].is_submit:
            raise ImmutableField(name)

    form = form.model_copy(deep=True)
    for name, value in new_values.items():
        field = form.fields[name]
        if field.field_type == "hidden":
            log.warning("Setting value of hidden field", field=name, form=form.name)
        if isinstance(field, SelectField):
            field.value = [_coerce(v) for v in ensure_list(value)]
        else:
            field.value = _coerce(value)
    return form
