from __future__ import annotations

import sys
from pathlib import Path

# Add src directory to path immediately on import - MUST be before any other imports
_src_dir = Path(__file__).resolve().parents[1] / "src"
_src_str = str(_src_dir)
if _src_str not in sys.path:
    sys.path.insert(0, _src_str)

import pytest

from wordselect.models.passage import DelimiterPair

COW_PASSAGE = "The cow [jumped] over [the] moon"


def pytest_configure(config: pytest.Config) -> None:
    """Ensure src directory is on sys.path so tests can import modules."""
    if _src_str not in sys.path:
        sys.path.insert(0, _src_str)


@pytest.fixture
def brackets() -> DelimiterPair:
    return DelimiterPair(left="[", right="]")


@pytest.fixture
def cow_passage() -> str:
    return COW_PASSAGE
