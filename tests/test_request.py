import pytest
from lxml import html

from formulary.exc import UnknownSubmission
from formulary.logic.parse import parse_form, parse_forms
from formulary.logic.request import submit_request
from formulary.logic.values import set_values
from formulary.model import Form, FormRequest, InputField


@pytest.fixture
def forms(document):
    return parse_forms(document)


def test_round_trip(forms):
    search = set_values(forms[0], q="pony")
    request = submit_request(search)
    assert isinstance(request, FormRequest)
    assert request.method == "GET"
    assert request.url == "/search"
    assert request.encoding == "form"
    assert request.values == {"q": "pony", "token": "abc", "go": "Search"}


def test_default_submit_is_first(mocker, forms):
    log = mocker.patch("formulary.logic.request.log")
    request = submit_request(forms[0])
    assert "go" in request.values
    assert "lucky" not in request.values
    log.info.assert_called_once()
    assert log.info.call_args.kwargs["submit"] == "go"


def test_explicit_submit(forms):
    request = submit_request(forms[0], submit="lucky")
    assert request.values["lucky"] == "Lucky"
    assert "go" not in request.values


def test_unknown_submit(forms):
    with pytest.raises(UnknownSubmission) as exc:
        submit_request(forms[0], submit="q")
    assert exc.value.name == "q"
    assert exc.value.choices == ["go", "lucky"]
    assert "go, lucky" in str(exc.value)


def test_unset_fields_dropped(forms):
    request = submit_request(forms[1])
    assert request.method == "POST"
    assert request.encoding == "multipart"
    assert request.url == "https://example.org/login"
    assert request.values == {"lang": "fr", "bio": "Hello world", "login": "1"}


def test_no_submit_fields(mocker, forms):
    log = mocker.patch("formulary.logic.request.log")
    request = submit_request(forms[2])
    log.info.assert_called_once()
    assert request.values == {"tags": ["a", "c"], "q": "second", "agree": "yes"}


def test_no_submit_fields_explicit(forms):
    with pytest.raises(UnknownSubmission) as exc:
        submit_request(forms[2], submit="go")
    assert exc.value.choices == []


def test_invalid_method_defaults_to_get(mocker, forms):
    log = mocker.patch("formulary.logic.request.log")
    assert forms[2].method == "PUT"
    request = submit_request(forms[2])
    assert request.method == "GET"
    log.warning.assert_called_once()


def test_valid_method_no_warning(mocker, forms):
    log = mocker.patch("formulary.logic.request.log")
    submit_request(forms[0])
    log.warning.assert_not_called()


def test_empty_select_dropped(forms):
    request = submit_request(forms[2])
    assert "empty" not in request.values


def test_items_repeat_multi_values(forms):
    request = submit_request(forms[2])
    assert request.items() == [
        ("tags", "a"),
        ("tags", "c"),
        ("q", "second"),
        ("agree", "yes"),
    ]


def test_submit_without_value_dropped():
    form = parse_form(
        html.fragment_fromstring(
            '<form><input name="a" value="1"><input type="submit" name="go"></form>'
        )
    )
    request = submit_request(form)
    assert request.values == {"a": "1"}


def test_submit_button_chosen_over_input():
    form = parse_form(
        html.fragment_fromstring(
            "<form>"
            '<button type="submit" name="first" value="1">One</button>'
            '<input type="submit" name="second" value="2">'
            "</form>"
        )
    )
    request = submit_request(form)
    assert request.values == {"first": "1"}


def test_unnamed_button_never_sent():
    form = parse_form(
        html.fragment_fromstring(
            '<form><button value="x">Hi</button><input name="a" value="1"></form>'
        )
    )
    assert "<unnamed>" in form.fields
    assert submit_request(form).values == {"a": "1"}


def test_field_order_preserved():
    form = Form(
        fields={
            "b": InputField(name="b", value="2"),
            "a": InputField(name="a", value="1"),
            "s": InputField(name="s", type="submit", value="ok"),
        }
    )
    assert list(submit_request(form).values) == ["b", "a", "s"]
