def find_matching_delimiter(text: str, open_index: int, opener: str, closer: str) -> int | None:
    """Return the index of the delimiter closing the one at open_index.

    Nested pairs are skipped. Delimiters inside string literals or comments
    are counted like any other character.

    Args:
        text: Text to scan
        open_index: Index of an opening delimiter in text
        opener: Opening delimiter character, e.g. "{"
        closer: Closing delimiter character, e.g. "}"

    Returns:
        Index of the matching closer, or None if the text ends first
    """
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
    return None
