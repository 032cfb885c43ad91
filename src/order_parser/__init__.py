"""Free-text grocery order parsing.

The parser converts an English/Hindi/Telugu (romanized or native script) utterance into ordered
`ParsedItem` lines plus ranked `ParseGuess` candidates. Resolving canonical names into purchasable
inventory is left to the caller's catalog search.
"""

from src.order_parser.parser import parse_multiple, parse_utterance
from src.order_parser.schema import (
    LanguageHint,
    ParsedItem,
    ParseGuess,
    ParseResult,
    Unit,
)

__all__ = [
    "LanguageHint",
    "ParseGuess",
    "ParseResult",
    "ParsedItem",
    "Unit",
    "parse_multiple",
    "parse_utterance",
]
