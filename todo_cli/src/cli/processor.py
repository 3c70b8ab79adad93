from __future__ import annotations

import json
import logging
import sys
from datetime import date, datetime
from typing import Optional, TextIO, Tuple

from pydantic import ValidationError

from .errors import MalformedDateError, MalformedInputError
from .schemas import ABSENT_DUE, ParsedItem, RawItem
from .settings import DUE_DATE_FORMAT, get_settings

logger = logging.getLogger("todo_app.processor")


# PUBLIC_INTERFACE
def deserialize(raw_input: str) -> RawItem:
    """
    Decode the -add value into a RawItem.

    Args:
        raw_input: Text expected to hold a JSON object with a string "todo"
            and an optional string "due".

    Returns:
        The decoded RawItem.

    Raises:
        MalformedInputError: the text is not JSON, or the JSON is not an
            object whose "todo"/"due" values are strings (or null).
    """
    message = get_settings().invalid_json_message
    try:
        data = json.loads(raw_input)
    except ValueError as e:
        raise MalformedInputError(message) from e

    # A bare null decodes to an item with every field empty.
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedInputError(message)

    # Keys match case-insensitively; for repeated keys the last one wins.
    fields = {}
    for key, value in data.items():
        name = key.casefold()
        if name in RawItem.model_fields:
            fields[name] = value

    try:
        return RawItem.model_validate(fields)
    except ValidationError as e:
        raise MalformedInputError(message) from e


# PUBLIC_INTERFACE
def parse_due_date(due_text: str, date_format: str = DUE_DATE_FORMAT) -> date:
    """
    Parse a due date string.

    An empty string means no due date and yields ABSENT_DUE. Anything else
    must be spelled exactly as date_format would print it: zero-padded
    fields, no surrounding whitespace, and a real calendar date.

    Raises:
        MalformedDateError: the text is non-empty and does not match.
    """
    if due_text == "":
        return ABSENT_DUE

    message = get_settings().bad_date_message
    try:
        parsed = datetime.strptime(due_text, date_format).date()
    except ValueError as e:
        raise MalformedDateError(message) from e

    # strptime also accepts unpadded fields such as 2020-2-2. %Y is expanded
    # by hand since the platform strftime may not pad years below 1000.
    canonical_format = date_format.replace("%Y", f"{parsed.year:04d}")
    if parsed.strftime(canonical_format) != due_text:
        raise MalformedDateError(message)
    return parsed


# PUBLIC_INTERFACE
def build_parsed_item(raw: RawItem, date_format: str = DUE_DATE_FORMAT) -> ParsedItem:
    """Convert a RawItem into a ParsedItem. The task text is not validated."""
    return ParsedItem(todo=raw.todo, due=parse_due_date(raw.due, date_format))


# PUBLIC_INTERFACE
def parse_input(raw_input: str, date_format: str = DUE_DATE_FORMAT) -> ParsedItem:
    """
    Run the whole input pipeline: decode the JSON, then parse the due date.

    Raises:
        MalformedInputError: see deserialize.
        MalformedDateError: see parse_due_date.
    """
    item = build_parsed_item(deserialize(raw_input), date_format)
    logger.debug("Parsed item: todo=%r due=%s", item.todo, item.due.isoformat())
    return item


# PUBLIC_INTERFACE
def format_item(item: ParsedItem) -> str:
    """
    Build the confirmation text for an item.

    The item is written as tab-indented JSON, with every line after the
    first shifted one more tab to the right, under a "You entered:" header.
    The absent due date is shown as 0001-01-01.
    """
    body = json.dumps(item.model_dump(mode="json"), indent="\t", ensure_ascii=False)
    body = body.replace("\n", "\n\t")
    return f"You entered:\n\n\t{body}\n"


# PUBLIC_INTERFACE
def render(item: ParsedItem, stream: Optional[TextIO] = None) -> Tuple[int, Optional[Exception]]:
    """
    Write the confirmation text for item to stream (stdout by default).

    Returns:
        (characters written, None) on success, or (0, error) when the stream
        could not be written to. Write errors are returned, not raised.
    """
    out = stream if stream is not None else sys.stdout
    text = format_item(item)
    try:
        out.write(text)
        out.flush()
    except (OSError, ValueError) as e:
        return 0, e
    return len(text), None
