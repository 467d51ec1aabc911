# tests/conftest.py
import pytest


@pytest.fixture
def two_residue_lines():
    return [
        "# toy matrix",
        "residue A B",
        "A 4 -1",
        "B -1 5",
    ]


@pytest.fixture
def asym_lines():
    return [
        "residue A C G",
        "A 9 -1 -2",
        "C -4 12 -5",
        "G -7 -8 11",
    ]


@pytest.fixture
def matrix_file(tmp_path, two_residue_lines):
    path = tmp_path / "toy.txt"
    path.write_text("\n".join(two_residue_lines) + "\n")
    return path
