"""
BlosumTableGen.parsing
----------------------
function:
    read_matrix(path: str | os.PathLike | Traversable) -> ScoringMatrix
    parse_matrix(lines: Iterable[str]) -> ScoringMatrix
usage:
    >>> from BlosumTableGen.parsing import parse_matrix
    >>> m = parse_matrix(["residue A B", "A 4 -1", "B -1 5"])
    >>> m.row("A")
    {'A': '4', 'B': '-1'}

File format, one record per line:
    # ...              comment, ignored
    residue A R N ...  header, the column residues in order
    A 4 -1 -2 ...      data row, residue then one score per header column

Rows must follow the header order, one row per column, and the first bad
line raises a MatrixFormatError subclass.
"""

from __future__ import annotations
import os
from typing import Iterable, List, Union

from importlib.resources.abc import Traversable

from BlosumTableGen.common import logger, COMMENT_MARKER, HEADER_TOKEN
from BlosumTableGen.errors import (
    DuplicateResidueError,
    HeaderNotDeclaredError,
    LengthMismatchError,
    RowMismatchError,
)
from BlosumTableGen.matrix import ScoringMatrix


def is_comment_line(line: str) -> bool:
    return line.startswith(COMMENT_MARKER)

def is_header_line(line: str) -> bool:
    return line.startswith(HEADER_TOKEN)


class MatrixParser:
    """
    Single forward pass over the lines of a matrix file.

    Holds the running header, the matrix built so far and the index of the
    header column the next data row must name. Feed lines with `feed`, then
    take the result with `finish`.
    """

    def __init__(self):
        self.header: List[str] = []
        self.matrix = ScoringMatrix()
        self.row_index = 0
        self._seen_header = False

    def feed(self, line: str) -> None:
        line = line.rstrip("\r\n")
        if is_comment_line(line):
            return
        if is_header_line(line):
            # the row counter carries on across a repeated header
            self.header = line.split()[1:]
            self._seen_header = True
            logger.debug("Header: %s", " ".join(self.header))
            return
        self._add_row(line)

    def _add_row(self, line: str) -> None:
        row = self.row_index + 1
        if not self._seen_header:
            raise HeaderNotDeclaredError(row)

        tokens = line.split()
        residue = tokens[0] if tokens else ""
        scores = tokens[1:]

        if len(scores) != len(self.header):
            raise LengthMismatchError(row)

        if residue in self.matrix:
            raise DuplicateResidueError(residue, row)

        expected = self.header[self.row_index] if self.row_index < len(self.header) else None
        if residue != expected:
            raise RowMismatchError(row)

        self.matrix.add_row(residue, dict(zip(self.header, scores)))
        self.row_index += 1

    def finish(self) -> ScoringMatrix:
        logger.info(
            "Parsed %d rows x %d columns", len(self.matrix), len(self.header)
        )
        return self.matrix


def parse_matrix(lines: Iterable[str]) -> ScoringMatrix:
    """Parse an iterable of lines, raising on the first malformed one"""
    parser = MatrixParser()
    for line in lines:
        parser.feed(line)
    return parser.finish()

def read_matrix(path: Union[str, os.PathLike, Traversable]) -> ScoringMatrix:
    """Open a matrix file (a path or a bundled resource) in text mode and parse it"""
    if isinstance(path, (str, os.PathLike)):
        logger.info("Reading %s", os.fspath(path))
        with open(path, "rt", encoding="utf-8") as source:
            return parse_matrix(source)
    logger.info("Reading bundled %s", path.name)
    with path.open("r", encoding="utf-8") as source:
        return parse_matrix(source)
