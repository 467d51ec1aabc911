"""
BlosumTableGen.errors
---------------------
Fatal problems found while reading a scoring matrix file.

Every error carries the 1-based data row it was raised for (``row``), so
callers can point at the offending line without re-reading the file.
"""

from typing import Optional


class MatrixFormatError(ValueError):
    """Base class for structural errors in a matrix file"""

    def __init__(self, message: str, row: Optional[int] = None):
        super().__init__(message)
        self.row = row


class HeaderNotDeclaredError(MatrixFormatError):
    def __init__(self, row: int):
        super().__init__(f"header not yet declared before data row {row}", row)


class RowMismatchError(MatrixFormatError):
    def __init__(self, row: int):
        super().__init__(f"header doesn't match residue for residue {row}", row)


class LengthMismatchError(MatrixFormatError):
    def __init__(self, row: int):
        super().__init__(f"Length mismatch between header and data row {row}", row)


class DuplicateResidueError(MatrixFormatError):
    def __init__(self, residue: str, row: int):
        super().__init__(f"residue {residue} is repeated in the data rows", row)
        self.residue = residue
