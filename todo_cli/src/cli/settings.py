from __future__ import annotations

from dataclasses import dataclass

DUE_DATE_FORMAT = "%Y-%m-%d"
PROGRAM_NAME = "todo-app"


@dataclass(frozen=True)
class Settings:
    """
    Fixed application settings.

    The CLI reads no environment variables or files, so everything here is a
    constant. It is grouped in one place so the entry point and the tests
    agree on the exact strings.

    Fields:
    - program_name: name used in usage text and diagnostics
    - default_item: JSON used when -add is not given
    - due_date_format: strptime format every non-empty due date must match
    - invalid_json_message: diagnostic for undecodable or wrongly shaped input
    - bad_date_message: diagnostic for a malformed due date
    """

    program_name: str
    default_item: str
    due_date_format: str
    invalid_json_message: str
    bad_date_message: str


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return the application settings."""
    return Settings(
        program_name=PROGRAM_NAME,
        default_item='{"todo": "Something worth doing"}',
        due_date_format=DUE_DATE_FORMAT,
        invalid_json_message=f"Invalid JSON passed to ./{PROGRAM_NAME}",
        bad_date_message="Badly formed due date.",
    )
