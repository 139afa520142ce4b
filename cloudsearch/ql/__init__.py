from ._models import (
    And,
    Expression,
    MatchAll,
    Near,
    Not,
    Or,
    Phrase,
    Prefix,
    Range,
    Term,
)

__all__ = [
    "And",
    "Expression",
    "MatchAll",
    "Near",
    "Not",
    "Or",
    "Phrase",
    "Prefix",
    "Range",
    "Term",
]
