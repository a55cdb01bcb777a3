"""Identifier case conversion for generated class and file names.

Dart classes are PascalCase, Dart files and test names are snake_case.
"""

import re


def to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case or space separated text to PascalCase.

    Text that is already PascalCase is returned unchanged.

    Examples:
        >>> to_pascal_case("counter_velo")
        'CounterVelo'
        >>> to_pascal_case("user profile state")
        'UserProfileState'
        >>> to_pascal_case("CounterVelo")
        'CounterVelo'
    """
    if re.fullmatch(r"[A-Z][a-zA-Z0-9]*", text):
        return text

    words = re.split(r"[-_\s]", text)
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def to_snake_case(text: str) -> str:
    """Convert PascalCase or camelCase text to snake_case.

    Examples:
        >>> to_snake_case("UserProfileState")
        'user_profile_state'
        >>> to_snake_case("counterVelo")
        'counter_velo'
    """
    result = re.sub(r"([A-Z])", r"_\1", text).lower()
    return re.sub(r"^_", "", result)


def snake_to_class_name(text: str) -> str:
    """Upper-case the first letter of each underscore separated segment.

    Unlike to_pascal_case the rest of each segment is kept as written.

    Examples:
        >>> snake_to_class_name("counter_velo")
        'CounterVelo'
    """
    return "".join(word[:1].upper() + word[1:] for word in text.split("_"))
