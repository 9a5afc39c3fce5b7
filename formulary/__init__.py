import logging

from formulary.exc import (
    FormularyException,
    ImmutableField,
    ShapeMismatch,
    UnknownField,
    UnknownSubmission,
    UnsupportedMethod,
)
from formulary.logic.http import FormResponse, FormSession
from formulary.logic.parse import parse_form, parse_forms
from formulary.logic.request import submit_request
from formulary.logic.submit import submit_form
from formulary.logic.values import set_values
from formulary.model import (
    ButtonField,
    Form,
    FormRequest,
    InputField,
    SelectField,
    TextareaField,
)

# Silence noisy third-party loggers
for logger_name in ("httpx", "httpcore"):
    logging.getLogger(logger_name).setLevel(logging.WARNING)

__all__ = [
    "ButtonField",
    "Form",
    "FormRequest",
    "FormResponse",
    "FormSession",
    "FormularyException",
    "ImmutableField",
    "InputField",
    "SelectField",
    "ShapeMismatch",
    "TextareaField",
    "UnknownField",
    "UnknownSubmission",
    "UnsupportedMethod",
    "parse_form",
    "parse_forms",
    "set_values",
    "submit_form",
    "submit_request",
]
