"""

# Filelist Data Model

Parsed filelist directives, the aggregate result,
and the error hierarchy, primarily in the form of dataclasses.

"""

# Std-Lib Imports
import json
from enum import Enum
from pathlib import Path
from dataclasses import field
from typing import Optional, Union, List

# PyPi Imports
from pydantic import TypeAdapter
from pydantic.dataclasses import dataclass


class ErrorKind(Enum):
    """Enumerated Filelist Error Kinds"""

    INVALID_TOKEN = "InvalidToken"  # Lexical: no token pattern matches
    UNEXPECTED_TOKEN = "UnexpectedToken"  # Syntactic: token not allowed here
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"  # Syntactic: line ends mid-directive
    TRAILING_INPUT = "TrailingInput"  # Syntactic: tokens after a complete directive
    IO_FAILURE = "IOFailure"  # Filelist could not be read


class FilelistError(Exception):
    """Filelist Error Base Class"""

    kind: Optional[ErrorKind] = None

    @classmethod
    def throw(cls, *args, **kwargs):
        """Exception-raising debug wrapper. Breakpoint to catch `FilelistError`s."""
        raise cls(*args, **kwargs)


class FilelistLexError(FilelistError):
    """Invalid input text, matching no token pattern"""

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, text: str, pos: int):
        self.text = text
        self.pos = pos
        super().__init__(f"Invalid token {text!r} at position {pos}")


class FilelistParseError(FilelistError):
    """Filelist Parse Error
    Carries the offending `token` (or `None` at end of input), and its position."""

    def __init__(self, token=None, pos: int = 0, msg: Optional[str] = None):
        self.token = token
        self.pos = pos
        super().__init__(msg or self.describe())

    def describe(self) -> str:
        if self.token is None:
            return f"Unexpected end of input at position {self.pos}, no matching directive"
        return f"Unexpected token {self.token.val!r} at position {self.pos}"


class UnexpectedToken(FilelistParseError):
    kind = ErrorKind.UNEXPECTED_TOKEN


class UnexpectedEndOfInput(FilelistParseError):
    kind = ErrorKind.UNEXPECTED_END_OF_INPUT


class TrailingInput(FilelistParseError):
    kind = ErrorKind.TRAILING_INPUT

    def describe(self) -> str:
        if self.token is None:
            return super().describe()
        return f"Trailing input {self.token.val!r} at position {self.pos}"


class FilelistIOError(FilelistError):
    """Failure to open or read a filelist"""

    kind = ErrorKind.IO_FAILURE

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read filelist {path}: {reason}")


class FilelistLineError(FilelistError):
    """A single line of a filelist failed to lex or parse.

    Attributes:
        index: 0-based index of the failing line
        line: Raw line text, without its trailing newline
        detail: The underlying `FilelistLexError` or `FilelistParseError`
        partial: The `Filelist` aggregated from all lines before the failure
        path: Source filelist, if parsing from a file
    """

    def __init__(
        self,
        index: int,
        line: str,
        detail: FilelistError,
        partial: Optional["Filelist"] = None,
        path: Optional[Path] = None,
    ):
        self.index = index
        self.line = line
        self.detail = detail
        self.partial = partial
        self.path = path
        self.kind = detail.kind
        where = f"{path}:{index + 1}" if path is not None else f"Line {index + 1}"
        super().__init__(f"{where}: {detail} in {line!r}")


@dataclass
class Define:
    """Preprocessor define, `+define+NAME` or `+define+NAME=VALUE`"""

    name: str
    value: Optional[str] = None


@dataclass
class Include:
    """Include directory, `+incdir+PATH`"""

    directory: str


@dataclass
class V:
    """Library file, `-v PATH`"""

    library_file: str


@dataclass
class Y:
    """Library search directory, `-y PATH`"""

    library_dir: str


@dataclass
class File:
    """Bare source file path"""

    file: str


# Union of all single-line Commands
Command = Union[Define, Include, V, Y, File]
# Library entries are recorded, but not expanded into source files
LibraryEntry = Union[V, Y]


@dataclass
class LineError:
    """Record of a failing line, stored when parsing with `ErrorMode.STORE`"""

    index: int  # 0-based line index
    line: str  # Raw line text
    kind: ErrorKind
    message: str
    path: Optional[Path] = None


@dataclass
class Filelist:
    """# Aggregate Filelist
    Parsed directives, partitioned by kind. Each list is in order of appearance."""

    defines: List[str] = field(default_factory=list)
    includes: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    libraries: List[LibraryEntry] = field(default_factory=list)
    errors: List[LineError] = field(default_factory=list)

    @property
    def library_files(self) -> List[str]:
        """Paths of all `-v` library files"""
        return [e.library_file for e in self.libraries if isinstance(e, V)]

    @property
    def library_dirs(self) -> List[str]:
        """Paths of all `-y` library directories"""
        return [e.library_dir for e in self.libraries if isinstance(e, Y)]


def to_json(arg) -> str:
    """Dump any `pydantic.dataclass` or simple combination thereof to JSON string."""
    data = TypeAdapter(type(arg)).dump_python(arg, mode="json")
    return json.dumps(data, indent=2)


def write_json(obj, path: Union[str, Path]) -> None:
    """Write a `Filelist` or `Command` to JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write(to_json(obj))
