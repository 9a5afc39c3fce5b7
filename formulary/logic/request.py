"""Derive the HTTP request a form submission produces."""

from __future__ import annotations

from anystore.logging import get_logger

from formulary.exc import UnknownSubmission
from formulary.model.field import AnyField, SelectField
from formulary.model.form import Form
from formulary.model.request import METHODS, FormRequest

log = get_logger(__name__)


def _project(field: AnyField) -> str | list[str] | None:
    if isinstance(field, SelectField):
        if not field.value:
            return None
        if len(field.value) == 1:
            return field.value[0]
        return list(field.value)
    return field.value


def submit_request(form: Form, submit: str | None = None) -> FormRequest:
    """Build the request for submitting ``form`` with the button ``submit``.

    If no button is given, the first submit field in document order is
    used. Only the chosen submit field is sent; every other submit field
    is left out, as a browser does for the buttons that were not clicked.

    Raises:
        UnknownSubmission: If ``submit`` is not one of the submit fields.
    """
    submits = form.submits
    if submit is None:
        submit = next(iter(submits), None)
        if submit is None:
            log.info("Form has no submit button", form=form.name)
        else:
            log.info("Submitting with default button", form=form.name, submit=submit)
    elif submit not in submits:
        raise UnknownSubmission(submit, list(submits))
    other_submits = {name for name in submits if name != submit}

    method = form.method
    if method not in METHODS:
        log.warning("Invalid method, defaulting to GET", method=method)
        method = "GET"

    values: dict[str, str | list[str]] = {}
    for name, field in form.fields.items():
        if name in other_submits or not field.is_named:
            continue
        value = _project(field)
        if value is None:
            continue
        values[name] = value

    request = FormRequest(
        method=method, url=form.url, encoding=form.enctype, values=values
    )
    log.debug("Derived form request", form=form.name, method=method, url=form.url)
    return request
