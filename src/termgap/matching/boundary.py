"""Word character classification and boundary checks."""

WORD_PUNCTUATION = frozenset("'-_")


def is_word_char(char: str) -> bool:
    """Return True if the character participates in a word.

    Alphanumerics are word characters, as are apostrophes, hyphens and
    underscores, so "don't", "well-known" and "snake_case" are single words.
    """
    return char.isalnum() or char in WORD_PUNCTUATION


def is_boundary_match(text: str, pos: int, length: int) -> bool:
    """Check that ``text[pos:pos + length]`` is a whole word token.

    Args:
        text: The full text
        pos: Start offset of the candidate span
        length: Length of the candidate span

    Returns:
        True if the span lies within the text and is not preceded or
        followed by a word character.

    """
    end = pos + length
    if pos < 0 or length < 0 or end > len(text):
        return False
    if pos > 0 and is_word_char(text[pos - 1]):
        return False
    return end >= len(text) or not is_word_char(text[end])
