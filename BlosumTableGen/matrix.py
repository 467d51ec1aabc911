"""
BlosumTableGen.matrix
---------------------
The parsed scoring matrix.

Rows and columns keep the order they were read in; emission order depends
on it, so both levels are plain (insertion ordered) dicts.
"""

from __future__ import annotations
from typing import Dict, Iterator, List, Tuple

import numpy as np
import pandas as pd


class ScoringMatrix:
    def __init__(self):
        self._rows: Dict[str, Dict[str, str]] = {}

    def add_row(self, residue: str, scores: Dict[str, str]) -> None:
        self._rows[residue] = scores

    @property
    def residues(self) -> List[str]:
        """Row residues in the order they were read"""
        return list(self._rows)

    @property
    def header(self) -> List[str]:
        """Column residues of the first row ([] if the matrix is empty)"""
        for scores in self._rows.values():
            return list(scores)
        return []

    def row(self, residue: str) -> Dict[str, str]:
        return self._rows[residue]

    def pairs(self) -> Iterator[Tuple[str, str, str]]:
        """
        Yield (row, column, score) for every stored pair, rows in read order
        and columns in header order. Scores are the literal tokens from the file.
        """
        for current, others in self._rows.items():
            for other, score in others.items():
                yield current, other, score

    def to_frame(self) -> pd.DataFrame:
        """Return the matrix as a numeric dataframe (rows x columns), NaN for non-numeric tokens"""
        # a redeclared header can add columns, keep them in first-seen order
        columns = list(dict.fromkeys(c for others in self._rows.values() for c in others))
        retval = pd.DataFrame.from_dict(self._rows, orient="index")
        retval = retval.reindex(index=self.residues, columns=columns)
        return retval.apply(pd.to_numeric, errors="coerce")

    def is_symmetric(self) -> bool:
        """
        True when the matrix is square over the same residues and
        score(a, b) == score(b, a) for every pair
        """
        df = self.to_frame()
        if list(df.index) != list(df.columns):
            return False
        return bool(np.array_equal(df.values, df.values.T))

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __contains__(self, residue: object) -> bool:
        return residue in self._rows

    def __repr__(self) -> str:
        return f"ScoringMatrix(residues={self.residues})"
