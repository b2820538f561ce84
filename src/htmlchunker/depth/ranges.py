"""Chapter token expansion for range-setting terms."""

import re

from htmlchunker.exceptions import InvalidDepthSpecifierError, InvalidRangeError

# Upper bound on chapter entries a specifier may expand to
MAX_EXPANDED_CHAPTERS = 10_000

_NUMBER = re.compile(r"[0-9]+")

# Longest accepted integer token
MAX_DIGITS = 18


def parse_positive(token: str, what: str) -> int:
    """Parse a plain decimal token that must be >= 1.

    Args:
        token: Raw token, surrounding whitespace allowed.
        what: Name used in the error message ("chapter", "level").

    Returns:
        The parsed integer.

    Raises:
        InvalidDepthSpecifierError: If the token is not a positive integer.
    """
    stripped = token.strip()
    if not _NUMBER.fullmatch(stripped):
        raise InvalidDepthSpecifierError(f"Invalid {what} {token!r}: expected a positive integer")
    if len(stripped) > MAX_DIGITS:
        raise InvalidDepthSpecifierError(
            f"Invalid {what} {stripped[:10]}...: longer than {MAX_DIGITS} digits"
        )
    value = int(stripped)
    if value < 1:
        raise InvalidDepthSpecifierError(f"Invalid {what} {token!r}: must be at least 1")
    return value


def expand_range(
    chapter_token: str,
    level: str,
    max_chapters: int = MAX_EXPANDED_CHAPTERS,
) -> dict[int, int]:
    """Expand a chapter token into a chapter -> level mapping.

    E.g. ``expand_range("3-6", "2")`` returns ``{3: 2, 4: 2, 5: 2, 6: 2}``
    and ``expand_range("8", "5")`` returns ``{8: 5}``.

    Args:
        chapter_token: Either ``"N"`` or an inclusive range ``"N-M"``.
        level: Extraction level applied to every chapter in the token.
        max_chapters: Largest range accepted.

    Returns:
        Mapping from chapter number to level.

    Raises:
        InvalidRangeError: If the range ends before it starts.
        InvalidDepthSpecifierError: If a token is not a positive integer,
            or the range is larger than ``max_chapters``.
    """
    depth = parse_positive(level, "level")

    parts = chapter_token.split("-")
    if len(parts) > 2:
        raise InvalidDepthSpecifierError(
            f"Invalid chapter range {chapter_token!r}: expected N or N-M"
        )
    start = parse_positive(parts[0], "chapter")
    if len(parts) == 1:
        return {start: depth}

    end = parse_positive(parts[1], "chapter")
    if end < start:
        raise InvalidRangeError(start, end)

    size = end - start + 1
    if size > max_chapters:
        raise InvalidDepthSpecifierError(
            f"Chapter range {start}-{end} covers {size} chapters (limit {max_chapters})"
        )
    return {chapter: depth for chapter in range(start, end + 1)}
