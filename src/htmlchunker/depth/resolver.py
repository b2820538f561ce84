"""Depth specifier parsing.

A depth specifier is a comma-separated list of terms such as
``"1,3-5:6,8:4"``. A bare integer sets the default extraction level; a
``chapter:level`` term overrides the level of one chapter or an inclusive
range of chapters. Terms are applied left to right, so later terms win.
"""

import logging
from dataclasses import dataclass, field

from htmlchunker.depth.ranges import MAX_EXPANDED_CHAPTERS, expand_range, parse_positive
from htmlchunker.depth.table import DEFAULT_LEVEL, DepthTable
from htmlchunker.exceptions import DepthSpecifierError, InvalidDepthSpecifierError

logger = logging.getLogger(__name__)


@dataclass
class DepthTerm:
    """One parsed comma-separated term of a depth specifier."""

    position: int  # 1-based
    raw: str
    default_level: int | None = None
    overrides: dict[int, int] = field(default_factory=dict)

    @property
    def is_default(self) -> bool:
        """True for a bare-integer term."""
        return self.default_level is not None


def parse_term(raw: str, position: int, max_chapters: int = MAX_EXPANDED_CHAPTERS) -> DepthTerm:
    """Parse a single term.

    Args:
        raw: The term text, e.g. ``"2"``, ``"8:5"`` or ``"3-8:2"``.
        position: 1-based position of the term in the specifier.
        max_chapters: Largest chapter range accepted.

    Returns:
        The parsed term.

    Raises:
        DepthSpecifierError: If the term is malformed. The error carries the
            raw term and its position.
    """
    try:
        if not raw.strip():
            raise InvalidDepthSpecifierError("Empty term in depth specifier")

        chapter_token, sep, level = raw.partition(":")
        if not sep:
            return DepthTerm(position, raw, default_level=parse_positive(raw, "default level"))
        return DepthTerm(position, raw, overrides=expand_range(chapter_token, level, max_chapters))
    except DepthSpecifierError as e:
        e.locate(raw, position)
        raise


def resolve(raw_specifier: str, max_chapters: int = MAX_EXPANDED_CHAPTERS) -> DepthTable:
    """Resolve a depth specifier into a depth table.

    E.g. ``resolve("3,1:2,8:5")`` gives default level 3, level 2 for
    chapter 1 and level 5 for chapter 8. The default level is 1 when no
    bare integer is given.

    Args:
        raw_specifier: The full comma-separated specifier.
        max_chapters: Limit on distinct chapters overridden across all terms.

    Returns:
        The resolved DepthTable.

    Raises:
        InvalidDepthSpecifierError: If any term is malformed or the overrides
            cover more than ``max_chapters`` distinct chapters.
        InvalidRangeError: If a chapter range runs backwards.
    """
    default_level = DEFAULT_LEVEL
    overrides: dict[int, int] = {}

    for position, raw in enumerate(raw_specifier.split(","), start=1):
        term = parse_term(raw, position, max_chapters)

        if term.is_default:
            default_level = term.default_level
        else:
            overrides.update(term.overrides)
            if len(overrides) > max_chapters:
                error = InvalidDepthSpecifierError(
                    f"Depth specifier overrides more than {max_chapters} chapters"
                )
                error.locate(raw, position)
                raise error

        logger.debug(f"Depth term {position} {raw!r}: {term.default_level or term.overrides}")

    return DepthTable(default_level=default_level, overrides=overrides)
