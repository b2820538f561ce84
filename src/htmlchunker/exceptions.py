"""Custom exceptions for htmlchunker."""


class HtmlChunkerError(Exception):
    """Base exception for all htmlchunker errors."""

    exit_code: int = 1
    default_hint: str | None = None

    def __init__(
        self,
        message: str,
        details: str | None = None,
        hint: str | None = None,
    ):
        self.message = message
        self.details = details
        self.hint = hint or self.default_hint
        super().__init__(message)


# Input errors (10-19)
class InputFileError(HtmlChunkerError):
    """The single HTML input is missing or unusable."""

    exit_code = 10
    default_hint = "Pass exactly one HTML file generated by Asciidoctor"


# Depth specifier errors (20-29)
class DepthSpecifierError(HtmlChunkerError):
    """Error while resolving a depth specifier.

    Attributes:
        term: The raw comma-separated term that failed, once known.
        position: 1-based position of that term in the specifier.
    """

    exit_code = 20
    default_hint = "Example: --depth 3,1:2,8:5 (default 3, chapter 1 at 2, chapter 8 at 5)"

    def __init__(
        self,
        message: str,
        details: str | None = None,
        hint: str | None = None,
        term: str | None = None,
        position: int | None = None,
    ):
        super().__init__(message, details=details, hint=hint)
        self.term = term
        self.position = position

    def locate(self, term: str, position: int) -> None:
        """Attach the offending term and its position to the error."""
        self.term = term
        self.position = position
        self.details = f"term {position}: {term!r}"


class InvalidDepthSpecifierError(DepthSpecifierError):
    """A term is not an integer or an integer:integer pair."""

    exit_code = 21


class InvalidRangeError(DepthSpecifierError):
    """A hyphenated chapter range runs backwards."""

    exit_code = 22
    default_hint = "Write chapter ranges low to high, e.g. 3-8:2"

    def __init__(self, start: int, end: int, **kwargs):
        super().__init__(
            f"Invalid chapter range {start}-{end}: end is before start",
            **kwargs,
        )
        self.start = start
        self.end = end


# Configuration errors (30-39)
class ConfigError(HtmlChunkerError):
    """Configuration error."""

    exit_code = 30
    default_hint = "Check ~/.htmlchunker/config.yaml and HTMLCHUNKER_* variables"
