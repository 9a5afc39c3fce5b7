"""HTTP session for browsing pages and submitting forms."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any
from urllib.parse import urljoin

import httpx
from anystore.logging import get_logger
from lxml import etree, html

from formulary.core import get_settings
from formulary.logic.parse import parse_forms
from formulary.logic.submit import submit_form

if TYPE_CHECKING:
    from formulary.model.form import Form

log = get_logger(__name__)

NON_HTML = ("application/json", "application/pdf", "application/octet-stream")


class FormSession:
    """HTTP client with a notion of the current page.

    Wraps an ``httpx.Client`` (cookies and headers live there) and keeps
    the URL of the last response, against which relative URLs, including
    form actions, are resolved.
    """

    def __init__(
        self,
        url: str | None = None,
        client: httpx.Client | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        settings = get_settings()
        if client is None:
            client = httpx.Client(
                timeout=timeout or settings.http_timeout,
                follow_redirects=settings.follow_redirects,
            )
            user_agent = user_agent or settings.user_agent
        if user_agent is not None:
            client.headers["User-Agent"] = user_agent
        self.client = client
        self.url = url
        self.response: FormResponse | None = None

    def resolve(self, url: str | None) -> str:
        """Resolve a (possibly relative or missing) URL against the
        current page."""
        if url is None:
            if self.url is None:
                raise ValueError("No URL given and no current page")
            return self.url
        if self.url is None:
            return url
        return urljoin(self.url, url)

    def request(self, method: str, url: str | None, **kwargs: Any) -> FormResponse:
        """Send a request and make its response the current page.

        Transport errors and error status codes raise the corresponding
        ``httpx`` exception.
        """
        method = method.upper().strip()
        url = self.resolve(url)
        log.debug("HTTP request", method=method, url=url)
        response = self.client.request(method, url, **kwargs)
        response.raise_for_status()
        self.url = str(response.url)
        self.response = FormResponse(response)
        return self.response

    def get(self, url: str | None = None, **kwargs: Any) -> FormResponse:
        return self.request("GET", url, **kwargs)

    def post(self, url: str | None = None, **kwargs: Any) -> FormResponse:
        return self.request("POST", url, **kwargs)

    def forms(self) -> list[Form]:
        """Forms on the current page."""
        if self.response is None:
            return []
        return self.response.forms()

    def submit(
        self, form: Form, submit: str | None = None, **kwargs: Any
    ) -> FormResponse:
        return submit_form(self, form, submit=submit, **kwargs)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> FormSession:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return "<FormSession(%s)>" % self.url


class FormResponse:
    """Wrapper for an ``httpx`` response that parses its content lazily."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def url(self) -> str:
        return str(self.response.url)

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def content_type(self) -> str | None:
        content_type = self.headers.get("content-type")
        if content_type is None:
            return None
        return content_type.split(";")[0].strip().lower()

    @property
    def ok(self) -> bool:
        return self.response.is_success

    @property
    def text(self) -> str:
        return self.response.text

    @cached_property
    def html(self):
        """Parse HTML content."""
        if self.content_type in NON_HTML:
            return None
        content = self.response.content
        if not len(content):
            return None
        try:
            return html.fromstring(content)
        except (etree.ParserError, etree.ParseError):
            log.warning("Could not parse HTML", url=self.url)
        return None

    def json(self) -> Any:
        return self.response.json()

    def forms(self) -> list[Form]:
        if self.html is None:
            return []
        return parse_forms(self.html)

    def __repr__(self) -> str:
        return "<FormResponse(%s,%s)>" % (self.url, self.status_code)
