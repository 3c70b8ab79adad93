"""
Todo CLI package.

This module marks the 'src.cli' directory as a Python package and exposes
the input pipeline for convenience imports.
"""

from .errors import MalformedDateError, MalformedInputError, TodoInputError  # noqa: F401
from .processor import parse_input, render  # noqa: F401
from .schemas import ABSENT_DUE, ParsedItem, RawItem  # noqa: F401
