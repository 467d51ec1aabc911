"""
BlosumTableGen.emitter
----------------------
Turn a parsed ScoringMatrix into match arms for a generated lookup:

    (b'A', b'A') => Some(4),
    (b'A', b'R') => Some(-1),
    ...
    (_, _) => None,

The last arm is the catch-all for pairs the matrix does not define.
"""

from typing import Iterator, List, NamedTuple, Optional

from BlosumTableGen.matrix import ScoringMatrix

INDENT = "    "


class MatchArm(NamedTuple):
    """One (row, column) => score association. All None for the catch-all."""
    row: Optional[str]
    column: Optional[str]
    score: Optional[str]

    @property
    def is_default(self) -> bool:
        return self.row is None

    def render(self) -> str:
        if self.is_default:
            return "(_, _) => None,"
        return f"(b'{self.row}', b'{self.column}') => Some({self.score}),"


DEFAULT_ARM = MatchArm(None, None, None)


class TableEmitter:
    """
    Iterable over the match arms of a matrix, explicit pairs first in row
    then column order, followed by DEFAULT_ARM. Each iteration starts over
    from the matrix, which is never modified.
    """

    def __init__(self, matrix: ScoringMatrix):
        self.matrix = matrix

    def __iter__(self) -> Iterator[MatchArm]:
        for row, column, score in self.matrix.pairs():
            yield MatchArm(row, column, score)
        yield DEFAULT_ARM

    def lines(self) -> Iterator[str]:
        for arm in self:
            yield arm.render()


def render_arms(matrix: ScoringMatrix) -> List[str]:
    return list(TableEmitter(matrix).lines())

def render_function(matrix: ScoringMatrix, fn_name: str = "score") -> List[str]:
    """
    Wrap the arms in a complete function,
    `pub fn <fn_name>(this: u8, other: u8) -> Option<i8>`
    """
    retval = [
        f"pub fn {fn_name}(this: u8, other: u8) -> Option<i8> {{",
        f"{INDENT}match (this, other) {{",
    ]
    retval.extend(INDENT * 2 + line for line in TableEmitter(matrix).lines())
    retval.append(f"{INDENT}}}")
    retval.append("}")
    return retval
