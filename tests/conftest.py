import os

import httpx
import pytest
from lxml import html

from formulary.logic.http import FormSession


def get_testdata_dir():
    file_path = os.path.realpath(__file__)
    return os.path.normpath(os.path.join(file_path, "../testdata"))


def load_testdata(name):
    with open(os.path.join(get_testdata_dir(), name), encoding="utf-8") as fh:
        return fh.read()


def echo(request: httpx.Request) -> httpx.Response:
    """Answer like a tiny httpbin: pages under /page, errors under
    /status/<code>, and an echo of the request for everything else."""
    path = request.url.path
    if path == "/page":
        return httpx.Response(200, html=load_testdata("search.html"))
    if path == "/down":
        raise httpx.ConnectError("Connection refused", request=request)
    if path.startswith("/status/"):
        return httpx.Response(int(path.rsplit("/", 1)[-1]))
    return httpx.Response(
        200,
        json={
            "method": request.method,
            "url": str(request.url),
            "headers": dict(request.headers),
            "body": request.content.decode("utf-8"),
        },
    )


@pytest.fixture(scope="module")
def search_html():
    return load_testdata("search.html")


@pytest.fixture(scope="function")
def document(search_html):
    return html.fromstring(search_html)


@pytest.fixture(scope="function")
def session():
    """Fresh session for each test, served by the echo transport."""
    client = httpx.Client(transport=httpx.MockTransport(echo), follow_redirects=True)
    with FormSession(client=client) as session:
        yield session
