"""Errors raised by the message store."""


class FormattingError(ValueError):
    """A message template could not be formatted with the supplied data."""

    def __init__(self, template: str, data: object) -> None:
        super().__init__(f"Cannot format message {template!r} with {data!r}")
        self.template = template
        self.data = data
