"""Form control models.

Each control kind is a pydantic model with a literal ``kind`` tag, so a
field map can be validated and dumped as a discriminated union.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

UNNAMED = "<unnamed>"
NON_INPUT = "non-input"


class BaseField(BaseModel):
    """Common shape of all form controls."""

    model_config = {"extra": "forbid"}

    name: str | None = None

    @property
    def field_type(self) -> str:
        """The control type used by value guards and submit detection."""
        return NON_INPUT

    @property
    def is_submit(self) -> bool:
        return self.field_type == "submit"

    @property
    def is_named(self) -> bool:
        return self.name is not None and self.name != UNNAMED


class InputField(BaseField):
    """An ``<input>`` control.

    ``checked``, ``disabled`` and ``readonly`` keep the raw attribute
    value: None when absent, usually "" when present.
    """

    kind: Literal["input"] = "input"
    type: str = "text"
    value: str | None = None
    checked: str | None = None
    disabled: str | None = None
    readonly: str | None = None
    required: str | bool = False

    @property
    def field_type(self) -> str:
        return self.type


class SelectField(BaseField):
    """A ``<select>`` control.

    ``value`` holds the selected option values in document order, and
    ``options`` maps each option's display text to its value.
    """

    kind: Literal["select"] = "select"
    value: list[str] = Field(default_factory=list)
    options: dict[str, str] = Field(default_factory=dict)
    multiple: bool = False


class TextareaField(BaseField):
    kind: Literal["textarea"] = "textarea"
    value: str = ""


class ButtonField(BaseField):
    """A ``<button>`` control. Unnamed buttons get a placeholder name."""

    kind: Literal["button"] = "button"
    name: str | None = UNNAMED
    type: str | None = None
    value: str | None = None
    checked: str | None = None
    disabled: str | None = None
    readonly: str | None = None
    required: str | bool = False

    @property
    def field_type(self) -> str:
        return self.type or NON_INPUT


AnyField = Annotated[
    Union[InputField, SelectField, TextareaField, ButtonField],
    Field(discriminator="kind"),
]
