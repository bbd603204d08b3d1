"""
# Filelist Parsing
"""

import os
from io import StringIO
from enum import Enum
from pathlib import Path
from warnings import warn
from typing import Iterable, Optional, Sequence, Union
from pydantic.dataclasses import dataclass

# Local Imports
from .grammar import CommandParser
from .data import *


class ErrorMode(Enum):
    """Enumerated Error-Response Strategies"""

    RAISE = 0  # Raise on the first failing line
    STORE = 1  # Store failing lines in `Filelist.errors`, and continue


@dataclass
class ParseOptions:
    """Parse Options"""

    errormode: ErrorMode = ErrorMode.RAISE  # Error-handling mode
    encoding: str = "utf-8"  # Text encoding of filelist files


def parse(
    src: Union[str, os.PathLike, Sequence[os.PathLike]],
    *,
    options: Optional[ParseOptions] = None,
) -> Filelist:
    """
    Primary filelist-parsing entry point.
    String `src` is parsed as filelist content; anything else as a path or list of paths.
    Optional argument `options` sets all behavior laid out by the `ParseOptions` class.
    """
    if isinstance(src, str):
        return parse_str(src, options=options)
    return parse_files(src, options=options)


def parse_str(src: str, *, options: Optional[ParseOptions] = None) -> Filelist:
    """Parse filelist content from a string"""
    # Universal newlines, so that "\r\n" line-endings never reach the lexer
    return parse_lines(StringIO(src, newline=None), options=options)


def parse_lines(
    lines: Iterable[str], *, options: Optional[ParseOptions] = None
) -> Filelist:
    """Parse an ordered sequence of filelist lines"""
    collector = FilelistCollector(options)
    collector.collect(lines)
    return collector.filelist


def parse_files(
    src: Union[os.PathLike, Sequence[os.PathLike]],
    *,
    options: Optional[ParseOptions] = None,
) -> Filelist:
    """Parse filelist content from file or files `src`, into a single `Filelist`."""

    if options is None:  # If not provided, create the default `ParseOptions`.
        options = ParseOptions()

    # Cover the cases of a single file
    if not isinstance(src, (list, tuple)):
        src = [src]

    collector = FilelistCollector(options)
    for s in src:
        path = Path(s)
        if not path.is_file():
            FilelistIOError.throw(path, "no such file")
        try:
            with open(path, "r", encoding=options.encoding) as f:
                collector.collect(f, path=path)
        except (OSError, UnicodeDecodeError) as e:
            raise FilelistIOError(path, str(e)) from e
    return collector.filelist


class FilelistCollector:
    """
    Aggregator of per-line `Command`s into a `Filelist`.
    Each command is routed to the list for its kind, in order of arrival.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options or ParseOptions()
        self.filelist = Filelist()

    def collect(self, lines: Iterable[str], path: Optional[Path] = None) -> None:
        """Parse and collect each of `lines`"""
        for index, line in enumerate(lines):
            try:
                cmd = CommandParser.from_str(line).parse_directive()
            except (FilelistLexError, FilelistParseError) as e:
                self.fail(index, line, e, path)
                continue
            if cmd is not None:  # Blank and comment-only lines produce nothing
                self.add(cmd)

    def add(self, cmd: Command) -> None:
        """Route a `Command` to its destination list"""
        if isinstance(cmd, Define):
            self.filelist.defines.append(self.define_text(cmd))
        elif isinstance(cmd, Include):
            self.filelist.includes.append(cmd.directory)
        elif isinstance(cmd, File):
            self.filelist.files.append(cmd.file)
        elif isinstance(cmd, (V, Y)):
            # Library expansion is left to downstream tools
            self.filelist.libraries.append(cmd)
        else:
            raise TypeError(f"Invalid Command {cmd}")

    @staticmethod
    def define_text(cmd: Define) -> str:
        """Combined `NAME` or `NAME=VALUE` text of a `Define`"""
        if cmd.value is None:
            return cmd.name
        return f"{cmd.name}={cmd.value}"

    def fail(
        self, index: int, line: str, detail: FilelistError, path: Optional[Path]
    ) -> None:
        """Handle a failing line per our `ErrorMode`"""
        line = line.rstrip("\n")
        err = FilelistLineError(
            index=index, line=line, detail=detail, partial=self.filelist, path=path
        )
        if self.options.errormode == ErrorMode.RAISE:
            raise err from detail
        # Otherwise, store the failure and keep going
        warn(str(err))
        self.filelist.errors.append(
            LineError(
                index=index, line=line, kind=detail.kind, message=str(detail), path=path
            )
        )
