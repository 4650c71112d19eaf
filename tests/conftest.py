import pathlib
import sys
from typing import Dict, Tuple

import pytest

# Add tests directory to sys.path so helpers.py can be imported
_tests_dir = pathlib.Path(__file__).parent
if str(_tests_dir) not in sys.path:
    sys.path.insert(0, str(_tests_dir))

from graph_model import Graph, Vertex  # noqa: E402
from helpers import build  # noqa: E402


@pytest.fixture
def triangle() -> Tuple[Graph, Dict[str, Vertex]]:
    """Undirected A-B(4), B-C(2), A-C(5)."""
    return build(False, [("A", "B", 4), ("B", "C", 2), ("A", "C", 5)])


@pytest.fixture
def directed_cycle() -> Tuple[Graph, Dict[str, Vertex]]:
    """Directed A->B->C->A, all weight 1."""
    return build(True, [("A", "B", 1), ("B", "C", 1), ("C", "A", 1)])
