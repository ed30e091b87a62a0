"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path

import pytest

from procroute.core.settings import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

HEADER = "Iface\tDestination\tGateway\tFlags\tRefCnt\tUse\tMetric\tMask\tMTU\tWindow\tIRTT"


@pytest.fixture
def sample_path() -> Path:
    """Path to the three-route sample table."""
    return FIXTURES_DIR / "sample"


@pytest.fixture
def sample_lines(sample_path: Path) -> list[str]:
    """Sample table as a list of lines, header included."""
    return sample_path.read_text().splitlines()


@pytest.fixture
def write_table(tmp_path: Path):
    """Write a routing table file under tmp_path and return its path."""

    def _write(*rows: str, header: str = HEADER) -> Path:
        path = tmp_path / "route"
        path.write_text("\n".join([header, *rows]) + "\n")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler changes made by setup_logging() during a test."""
    logger = logging.getLogger("procroute")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
