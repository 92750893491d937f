import pytest

from routegraph import pyedge, pyroutegraph


@pytest.fixture
def sample_graph() -> pyroutegraph:
    """Square 0-1-2-3 plus a detached edge 8-42."""
    return pyroutegraph([
        pyedge(0, 1),
        pyedge(0, 3),
        pyedge(1, 2),
        pyedge(2, 3),
        pyedge(8, 42),
    ])


@pytest.fixture
def build():
    """Build a route-less graph from vertex pairs."""
    def _build(*pairs) -> pyroutegraph:
        return pyroutegraph([pyedge(i, j) for i, j in pairs])
    return _build
