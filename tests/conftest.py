from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.manifest_builder import ManifestBuilder


@pytest.fixture
def manifest_builder(tmp_path: Path) -> ManifestBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ManifestBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_stylemeta_logger() -> Iterator[None]:
    """Undo configure_logging so caplog keeps seeing stylemeta records."""
    yield
    logger = logging.getLogger("stylemeta")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
