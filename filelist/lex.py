"""
# Filelist Lexing
"""

# Std-Lib Imports
import re
from typing import Iterator

# PyPi Imports
from pydantic.dataclasses import dataclass

# Local Imports
from .data import FilelistLexError


# Pattern for path-ish text: file paths, directories, define names and values.
# An initial dot, slash, underscore or letter, followed by any of those plus digits.
path_pattern = r"[./_a-zA-Z][./_0-9a-zA-Z]*"

# Master mapping of tokens <=> patterns
# Fixed literals come first; `-v` and `-y` must never be swallowed as path text.
_literals = dict(
    INCDIR=r"\+incdir\+",
    DEFINE=r"\+define\+",
    V=r"\-v",
    Y=r"\-y",
    EQUALS=r"\=",
    QUOTE=r"\"",
)
_patterns = dict(
    PATH=path_pattern,
    WHITE=r"[ \t\n\f]+",
    COMMENT=r"\#.*\n?",
    ERROR=r"[\s\S]",
)
# Given each token its name as a key in the overall regex
tokens = {key: rf"(?P<{key}>{val})" for key, val in _literals.items()}
for key, val in _patterns.items():
    # Add the lower-priority patterns last
    tokens[key] = rf"(?P<{key}>{val})"
# Build our overall regex pattern, a union of all
pat = re.compile("|".join(tokens.values()))
# Create an enum-ish class of these token-types
Tokens = type("Tokens", (object,), {k: k for k in tokens.keys()})

# Token-types which are consumed by the lexer and never handed to the parser
_idle = (Tokens.WHITE, Tokens.COMMENT)


@dataclass
class Token:
    """Lexer Token
    Includes type-annotation (as a string), the token's text value, and its span in the line."""

    tp: str  # Type Annotation. A value from `Tokens`
    val: str  # Text Content Value
    start: int = 0  # Span start, as an offset into the line
    end: int = 0  # Span end (exclusive)


class Lexer:
    """# Filelist Lexer
    Tokenizes a single filelist line."""

    def __init__(self, line: str):
        self.line = line

    def lex(self) -> Iterator[Token]:
        """Create an iterator over pattern-matches.
        Whitespace and comments are skipped; invalid input raises `FilelistLexError`."""
        scanner = pat.scanner(self.line)
        for m in iter(scanner.match, None):
            if m.lastgroup in _idle:
                continue
            if m.lastgroup == Tokens.ERROR:
                FilelistLexError.throw(text=m.group(), pos=m.start())
            yield Token(m.lastgroup, m.group(), m.start(), m.end())
