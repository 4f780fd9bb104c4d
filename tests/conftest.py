"""
Shared test fixtures and path constants for massif-parse tests.

All sample profile paths are defined here as module-level constants for
easy discovery and modification. If sample files move or new ones are
added, update this file.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample profile paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent / "data"

EXAMPLE_MASSIF = DATA_DIR / "example.massif"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def example_lines() -> list[str]:
    """The bundled example profile, as lines with terminators kept."""
    with open(EXAMPLE_MASSIF, "r", encoding="utf-8") as f:
        return f.readlines()


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against bundled sample profiles)",
    )
