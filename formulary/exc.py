class FormularyException(Exception):
    """Base exception class."""

    pass


class ShapeMismatch(FormularyException):
    """A parser was handed an element of the wrong kind."""

    def __init__(self, expected: str, tag: str | None):
        self.expected = expected
        self.tag = tag
        msg = "Expected <%s> element, got <%s>" % (expected, tag)
        super().__init__(msg)


class UnknownField(FormularyException):
    """Values were set for fields the form does not have."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__("Unknown field names: %s" % ", ".join(names))


class ImmutableField(FormularyException):
    """The value of a submit field cannot be changed."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("Can't change value of submit input '%s'" % name)


class UnknownSubmission(FormularyException):
    """The requested submit button is not one of the form's submit fields."""

    def __init__(self, name: str, choices: list[str]):
        self.name = name
        self.choices = choices
        msg = "Unknown submission name '%s'. Possible values: %s" % (
            name,
            ", ".join(choices),
        )
        super().__init__(msg)


class UnsupportedMethod(FormularyException):
    """A request method other than GET or POST."""

    def __init__(self, method: str):
        self.method = method
        super().__init__("Unknown method: %s" % method)
