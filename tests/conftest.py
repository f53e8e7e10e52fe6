import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from writebench.batches import Batch, list_batch_files


TEST_LOGGER = "test-writebench"


def write_batch_dir(root: Path, dirname: str, count: int) -> Path:
    directory = root / dirname
    directory.mkdir(parents=True)
    for i in range(count):
        (directory / f"f{i:02d}.txt").write_text(f"paragraph {i}\n\nsecond paragraph\n", encoding="utf-8")
    return directory


@pytest.fixture
def batches_root(tmp_path):
    return tmp_path / "batches"


@pytest.fixture
def make_batch(batches_root):
    def _make(name: str, dirname: str, count: int = 3) -> Batch:
        directory = write_batch_dir(batches_root, dirname, count)
        return Batch(name=name, files=list_batch_files(directory))
    return _make


@pytest.fixture
def mount_point(tmp_path):
    path = tmp_path / "efs"
    path.mkdir()
    return path


@pytest.fixture
def s3_client():
    return MagicMock(name="s3_client")


@pytest.fixture
def transfer_manager():
    manager = MagicMock(name="transfer_manager")
    manager.upload.return_value = MagicMock(name="future")
    return manager


@pytest.fixture
def test_logger():
    return logging.getLogger(TEST_LOGGER)


@pytest.fixture(autouse=True)
def reset_writebench_logger():
    yield
    log = logging.getLogger("writebench")
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)
    log.propagate = True
