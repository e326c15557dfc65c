import os
import sys
import pytest

# Ensure diagram modules can be imported
sys.path.append(os.getcwd())


@pytest.fixture
def artboard():
    """Fixed 800x600 artboard with no box model."""
    from diagram.artboard import Artboard
    return Artboard()


@pytest.fixture
def padded_artboard():
    """800x600 artboard with 40px padding."""
    from diagram.artboard import Artboard
    return Artboard(width=800, height=600, box_model={"padding": 40})


@pytest.fixture
def builder():
    """DiagramBuilder over a fresh padded artboard."""
    from diagram.builder import DiagramBuilder
    return DiagramBuilder(width=800, height=600, box_model={"padding": 40})


@pytest.fixture
def count_passes(monkeypatch):
    """Counts layout passes (LayoutEngine.run calls)."""
    from diagram.resolve.engine import LayoutEngine

    calls = []
    original = LayoutEngine.run

    def counting_run(self):
        calls.append(self.root)
        return original(self)

    monkeypatch.setattr(LayoutEngine, "run", counting_run)
    return calls
