"""Form model as pydantic model."""

from typing import Literal

from pydantic import BaseModel, Field

from formulary.model.field import UNNAMED, AnyField

Enctype = Literal["form", "multipart"]


class Form(BaseModel):
    """A parsed HTML form.

    ``fields`` is ordered by the position of each control in the document.
    When the markup repeats a name, the later control takes over the slot
    of the earlier one.
    """

    name: str = UNNAMED
    method: str = "GET"
    url: str | None = None
    enctype: Enctype = "form"
    fields: dict[str, AnyField] = Field(default_factory=dict)

    @property
    def submits(self) -> dict[str, AnyField]:
        """Submit fields, in document order."""
        return {name: f for name, f in self.fields.items() if f.is_submit}

    def __contains__(self, name: str) -> bool:
        return name in self.fields

    def __getitem__(self, name: str) -> AnyField:
        return self.fields[name]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return "<Form(%s,%s,%s)>" % (self.name, self.method, self.url)
