"""Input validation for the generation prompts.

Each validator returns None when the value is acceptable, otherwise a
message to show before prompting again.
"""

import re

VELO_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*Notifier$")
STATE_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*State$")
BASE_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
TEST_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


def _check(value: str, pattern: re.Pattern, message: str) -> str | None:
    if not value:
        return "Name is required"
    if not pattern.fullmatch(value):
        return message
    return None


def validate_velo_name(value: str) -> str | None:
    return _check(value, VELO_NAME_PATTERN, 'Name must be PascalCase and end with "Notifier"')


def validate_state_name(value: str) -> str | None:
    return _check(value, STATE_NAME_PATTERN, 'Name must be PascalCase and end with "State"')


def validate_base_name(value: str) -> str | None:
    return _check(value, BASE_NAME_PATTERN, "Name must be PascalCase and start with uppercase letter")


def validate_test_name(value: str) -> str | None:
    return _check(value, TEST_NAME_PATTERN, "Name must be snake_case and start with lowercase letter")
