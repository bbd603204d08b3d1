"""
# Filelist Directive Grammar

One command per line:

    command     := define_dir | incdir_dir | v_dir | y_dir | bare_file
    define_dir  := DEFINE PATH (EQUALS value)?
    value       := PATH | QUOTE PATH QUOTE
    incdir_dir  := INCDIR PATH
    v_dir       := V PATH
    y_dir       := Y PATH
    bare_file   := PATH
"""

# Std-Lib Imports
from typing import Any, Callable, Iterator, Optional

# Local Imports
from .data import (
    Command,
    Define,
    Include,
    V,
    Y,
    File,
    UnexpectedToken,
    UnexpectedEndOfInput,
    TrailingInput,
)
from .lex import Lexer, Token, Tokens


class CommandParser:
    """Single-Line Directive Parser"""

    def __init__(self, lex: Lexer):
        self.tokens: Optional[Iterator[Token]] = None
        self.cur: Optional[Token] = None
        self.nxt: Optional[Token] = None
        self.lex = lex

    @classmethod
    def from_str(cls, line: str) -> "CommandParser":
        """Create from a single line of text"""
        return cls(lex=Lexer(line))

    def start(self) -> None:
        # Initialize our token generator
        self.tokens = self.lex.lex()
        # And queue up our lookahead token
        self.advance()

    def advance(self) -> None:
        self.cur = self.nxt
        self.nxt = next(self.tokens, None)

    def peek(self) -> Optional[Token]:
        """Peek at the next Token"""
        return self.nxt

    def match(self, tp: str) -> bool:
        """Boolean indication of whether our next token matches `tp`"""
        if self.nxt and tp == self.nxt.tp:
            self.advance()
            return True
        return False

    def expect(self, tp: str) -> Token:
        """Assertion that our next token matches `tp`, returning it.
        Note this advances if successful."""
        if not self.match(tp):
            self.fail(expecting=tp)
        return self.cur

    def parse(self, f: Optional[Callable[[], Any]] = None) -> Any:
        """Perform parsing. Succeeds if the entire line is parsable by function `f`.
        Defaults to parsing a `Command`."""
        self.start()
        func = f if f else self.parse_command
        return self.finish(func())

    def parse_directive(self) -> Optional[Command]:
        """Parse a line which may be empty, i.e. whitespace and/or comment only.
        Returns `None` for empty lines."""
        self.start()
        if self.nxt is None:
            return None
        return self.finish(self.parse_command())

    def finish(self, root: Any) -> Any:
        """Check that the line has no remaining tokens, and return `root`"""
        if self.nxt is not None:  # Check whether there's more stuff
            TrailingInput.throw(token=self.nxt, pos=self.nxt.start)
        return root

    def parse_command(self) -> Command:
        """Parse a single directive, selected by its leading token"""
        if self.match(Tokens.DEFINE):
            return self.parse_define()
        if self.match(Tokens.INCDIR):
            return Include(directory=self.parse_path())
        if self.match(Tokens.V):
            return V(library_file=self.parse_path())
        if self.match(Tokens.Y):
            return Y(library_dir=self.parse_path())
        if self.nxt is not None and self.nxt.tp == Tokens.PATH:
            return File(file=self.parse_path())
        self.fail()

    def parse_define(self) -> Define:
        """NAME ( = VALUE )?, following the `+define+` keyword"""
        name = self.parse_path()
        value = None
        if self.match(Tokens.EQUALS):
            value = self.parse_value()
        return Define(name=name, value=value)

    def parse_value(self) -> str:
        """Define value, optionally "quoted". Quotes are dropped."""
        if self.match(Tokens.QUOTE):
            val = self.parse_path()
            self.expect(Tokens.QUOTE)
            return val
        return self.parse_path()

    def parse_path(self) -> str:
        """Path-content text"""
        return self.expect(Tokens.PATH).val

    def fail(self, expecting: Optional[str] = None):
        """Raise an error for our next token, or for end of input"""
        if self.nxt is None:
            UnexpectedEndOfInput.throw(token=None, pos=len(self.lex.line))
        msg = f"Unexpected token {self.nxt.val!r} at position {self.nxt.start}"
        if expecting is not None:
            msg += f", expecting {expecting}"
        UnexpectedToken.throw(token=self.nxt, pos=self.nxt.start, msg=msg)


def parse_line(line: str) -> Command:
    """Parse a single filelist line into its `Command`"""
    return CommandParser.from_str(line).parse()
