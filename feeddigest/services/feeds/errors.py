"""Feed parser error taxonomy.

Entry-level failures (``ParseError`` for a missing link, ``DateError``) are
recovered by dropping the entry. Feed-level failures are terminal for that
feed and reach the caller as a single exception.
"""


class ParserError(Exception):
    """Base class for every failure the feed parsers report."""

    kind = "parser"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParserError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class DeserializeError(ParserError):
    """The raw document did not match any known feed schema."""

    kind = "deserialize"


class ParseError(ParserError):
    """The schema matched but a semantic constraint failed."""

    kind = "parse"


class DateError(ParserError):
    """An entry timestamp did not fit its format's date grammar."""

    kind = "date"
