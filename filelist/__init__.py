"""
Filelists

Parsing the `+incdir+`, `+define+`, `-v`, `-y` and file-path
directives of hardware-description-language filelists.
"""

__version__ = "0.1.0"

import warnings
from pathlib import Path

# Configure warning format to be more concise (single line, no source code repetition)
# This applies globally whenever the filelist package is imported
def _warning_on_one_line(message, category, filename, lineno, file=None, line=None):
    return f'{Path(filename).name}:{lineno}: {category.__name__}: {message}\n'

warnings.formatwarning = _warning_on_one_line


from .data import *
from .lex import Lexer, Token, Tokens
from .grammar import CommandParser, parse_line
from .parse import (
    parse,
    parse_str,
    parse_lines,
    parse_files,
    ParseOptions,
    ErrorMode,
    FilelistCollector,
)
