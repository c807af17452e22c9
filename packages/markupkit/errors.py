"""Markup exceptions."""


class MarkupError(Exception):
    """Base exception for all markupkit errors."""


class InvalidArgumentError(MarkupError, ValueError):
    """An argument cannot be turned into markup.

    Raised for malformed attribute expressions, tabular attributes on a model
    without a form name, and URLs no resolver can handle.
    """

    def __init__(self, message: str, argument: str | None = None):
        self.argument = argument
        super().__init__(f"{message}\n\n  Argument: {argument!r}" if argument is not None else message)
