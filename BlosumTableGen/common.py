from importlib import resources
from importlib.resources.abc import Traversable
from typing import List
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger("BlosumTableGen")

COMMENT_MARKER = "#"
HEADER_TOKEN = "residue"
MATRIX_PACKAGE = "BlosumTableGen.matrices"
MATRIX_SUFFIX = ".txt"

def available_matrices() -> List[str]:
    """Names of the matrix files shipped with the package, sorted."""
    return sorted(
        entry.name[: -len(MATRIX_SUFFIX)]
        for entry in resources.files(MATRIX_PACKAGE).iterdir()
        if entry.name.endswith(MATRIX_SUFFIX)
    )

def get_matrix_path(name: str) -> Traversable:
    """ Return the packaged matrix file for `name` (e.g. "blosum62")."""
    path = resources.files(MATRIX_PACKAGE) / f"{name.lower()}{MATRIX_SUFFIX}"
    if not path.is_file():
        raise FileNotFoundError(
            f"no bundled matrix named {name!r}; choose from {available_matrices()}"
        )
    return path
