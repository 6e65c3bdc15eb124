"""
String-safe newline escaper
Repairs literal newlines inside JSON string literals without parsing the JSON
"""

from enum import Enum
from typing import Dict, List, Tuple


class ScanState(Enum):
    """Position of the scanner relative to JSON string literals"""
    OUTSIDE = "outside"
    IN_STRING = "in_string"
    IN_STRING_ESCAPED = "in_string_escaped"


class CharClass(Enum):
    """Character classes the scanner distinguishes"""
    QUOTE = "quote"
    BACKSLASH = "backslash"
    NEWLINE = "newline"
    CARRIAGE_RETURN = "carriage_return"
    OTHER = "other"


class Emit(Enum):
    """What to write to the output for the current character"""
    KEEP = "keep"
    ESCAPE_NEWLINE = "escape_newline"
    DROP = "drop"


_CHAR_CLASSES = {
    '"': CharClass.QUOTE,
    "\\": CharClass.BACKSLASH,
    "\n": CharClass.NEWLINE,
    "\r": CharClass.CARRIAGE_RETURN,
}

# Complete table: every (state, char class) pair has exactly one entry.
TRANSITIONS: Dict[Tuple[ScanState, CharClass], Tuple[ScanState, Emit]] = {
    (ScanState.OUTSIDE, CharClass.QUOTE): (ScanState.IN_STRING, Emit.KEEP),
    (ScanState.OUTSIDE, CharClass.BACKSLASH): (ScanState.OUTSIDE, Emit.KEEP),
    (ScanState.OUTSIDE, CharClass.NEWLINE): (ScanState.OUTSIDE, Emit.KEEP),
    (ScanState.OUTSIDE, CharClass.CARRIAGE_RETURN): (ScanState.OUTSIDE, Emit.KEEP),
    (ScanState.OUTSIDE, CharClass.OTHER): (ScanState.OUTSIDE, Emit.KEEP),

    (ScanState.IN_STRING, CharClass.QUOTE): (ScanState.OUTSIDE, Emit.KEEP),
    (ScanState.IN_STRING, CharClass.BACKSLASH): (ScanState.IN_STRING_ESCAPED, Emit.KEEP),
    (ScanState.IN_STRING, CharClass.NEWLINE): (ScanState.IN_STRING, Emit.ESCAPE_NEWLINE),
    (ScanState.IN_STRING, CharClass.CARRIAGE_RETURN): (ScanState.IN_STRING, Emit.DROP),
    (ScanState.IN_STRING, CharClass.OTHER): (ScanState.IN_STRING, Emit.KEEP),

    # The escaped character is copied verbatim, whatever it is
    (ScanState.IN_STRING_ESCAPED, CharClass.QUOTE): (ScanState.IN_STRING, Emit.KEEP),
    (ScanState.IN_STRING_ESCAPED, CharClass.BACKSLASH): (ScanState.IN_STRING, Emit.KEEP),
    (ScanState.IN_STRING_ESCAPED, CharClass.NEWLINE): (ScanState.IN_STRING, Emit.KEEP),
    (ScanState.IN_STRING_ESCAPED, CharClass.CARRIAGE_RETURN): (ScanState.IN_STRING, Emit.KEEP),
    (ScanState.IN_STRING_ESCAPED, CharClass.OTHER): (ScanState.IN_STRING, Emit.KEEP),
}


def classify(ch: str) -> CharClass:
    """Map a single character to its scanner class"""
    return _CHAR_CLASSES.get(ch, CharClass.OTHER)


def escape_newlines_in_strings(text: str) -> str:
    """
    Escape literal newlines that appear inside JSON string literals.

    Literal ``\\n`` inside a string becomes the two characters ``\\`` ``n``,
    literal ``\\r`` inside a string is dropped, and everything outside string
    literals is passed through unchanged. An unterminated string at the end of
    the input is left as is.

    Args:
        text: Candidate JSON text, possibly malformed

    Returns:
        str: Text with in-string newlines escaped
    """
    state = ScanState.OUTSIDE
    out: List[str] = []

    for ch in text:
        state, emit = TRANSITIONS[(state, classify(ch))]
        if emit is Emit.KEEP:
            out.append(ch)
        elif emit is Emit.ESCAPE_NEWLINE:
            out.append("\\n")

    return "".join(out)


__all__ = ["ScanState", "CharClass", "Emit", "TRANSITIONS", "classify", "escape_newlines_in_strings"]
