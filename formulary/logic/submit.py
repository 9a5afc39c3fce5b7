"""Submit a form back to the server."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

from anystore.logging import get_logger

from formulary.exc import UnsupportedMethod
from formulary.logic.request import submit_request

if TYPE_CHECKING:
    from formulary.logic.http import FormResponse, FormSession
    from formulary.model.form import Form

log = get_logger(__name__)


def submit_form(
    session: FormSession, form: Form, submit: str | None = None, **kwargs: Any
) -> FormResponse:
    """Submit ``form`` using the session and return the response.

    Args:
        session: Session to submit the form with. Its current page is the
            base for relative form actions and the target of forms
            without one.
        form: Form to submit.
        submit: Name of the submit button to use. Defaults to the first
            submit button of the form.
        **kwargs: Passed on to ``httpx`` (headers, timeout, ...).

    Returns:
        The response, which is now the session's current page. Failed
        requests raise the ``httpx`` error unchanged.

    Example:
        >>> with FormSession() as session:
        ...     session.get("https://www.google.com")
        ...     search = set_values(session.forms()[0], q="My little pony")
        ...     result = submit_form(session, search)
    """
    request = submit_request(form, submit)
    log.info(
        "Submitting form",
        form=form.name,
        method=request.method,
        url=request.url,
        encoding=request.encoding,
    )

    if request.method == "GET":
        return session.get(request.url, params=request.items(), **kwargs)
    elif request.method == "POST":
        if request.encoding == "multipart":
            parts = [(name, (None, value)) for name, value in request.items()]
            if parts:
                return session.post(request.url, files=parts, **kwargs)
            return _post_empty_multipart(session, request.url, **kwargs)
        return session.post(request.url, data=request.values, **kwargs)
    raise UnsupportedMethod(request.method)


def _post_empty_multipart(
    session: FormSession, url: str | None, **kwargs: Any
) -> FormResponse:
    # httpx falls back to an empty, untyped body when there are no parts
    boundary = uuid4().hex
    headers = dict(kwargs.pop("headers", None) or {})
    headers["Content-Type"] = "multipart/form-data; boundary=%s" % boundary
    content = ("--%s--\r\n" % boundary).encode("ascii")
    return session.post(url, content=content, headers=headers, **kwargs)
