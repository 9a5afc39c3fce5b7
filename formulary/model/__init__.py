from formulary.model.field import (
    AnyField,
    ButtonField,
    InputField,
    SelectField,
    TextareaField,
)
from formulary.model.form import Form
from formulary.model.request import FormRequest

__all__ = [
    "AnyField",
    "ButtonField",
    "Form",
    "FormRequest",
    "InputField",
    "SelectField",
    "TextareaField",
]
