"""Request descriptor derived from a form."""

from typing import Literal

from pydantic import BaseModel, Field

from formulary.model.form import Enctype

Method = Literal["GET", "POST"]
METHODS = ("GET", "POST")


class FormRequest(BaseModel):
    """Everything needed to send a form: method, target, encoding and
    the name/value pairs taking part in the submission.

    A field contributing several values (a multi-select) maps to a list.
    """

    method: Method = "GET"
    url: str | None = None
    encoding: Enctype = "form"
    values: dict[str, str | list[str]] = Field(default_factory=dict)

    def items(self) -> list[tuple[str, str]]:
        """Flatten ``values`` into (name, value) pairs, repeating names
        for multi-valued fields."""
        pairs: list[tuple[str, str]] = []
        for name, value in self.values.items():
            if isinstance(value, list):
                pairs.extend((name, v) for v in value)
            else:
                pairs.append((name, value))
        return pairs
