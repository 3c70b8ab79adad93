from __future__ import annotations


class TodoInputError(ValueError):
    """
    Base class for input the CLI refuses to process.

    The message is the fixed one-line diagnostic shown to the user.
    """


# PUBLIC_INTERFACE
class MalformedInputError(TodoInputError):
    """The -add value is not JSON or does not have the todo item shape."""


# PUBLIC_INTERFACE
class MalformedDateError(TodoInputError):
    """The due field is set but is not a YYYY-MM-DD calendar date."""
