"""Named file batches used by the benchmark"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from .errors import BatchNotFoundError


FILE_SUFFIX = "txt"


class BatchName:
    """Descriptors of the predefined batches"""
    MIXED_75 = "75-files mixed-batch"
    MIXED_150 = "150-files mixed-batch"
    MIXED_300 = "300-files mixed-batch"
    PARAGRAPH_5 = "100-files 5-paragraph"
    PARAGRAPH_10 = "100-files 10-paragraph"
    PARAGRAPH_20 = "100-files 20-paragraph"
    PARAGRAPH_50 = "100-files 50-paragraph"


# (descriptor, directory under the batches root), in run order
BATCH_DEFINITIONS: List[Tuple[str, str]] = [
    (BatchName.MIXED_75, "75-mixed"),
    (BatchName.MIXED_150, "150-mixed"),
    (BatchName.MIXED_300, "300-mixed"),
    (BatchName.PARAGRAPH_5, "100x-5-paragraph"),
    (BatchName.PARAGRAPH_10, "100x-10-paragraph"),
    (BatchName.PARAGRAPH_20, "100x-20-paragraph"),
    (BatchName.PARAGRAPH_50, "100x-50-paragraph"),
]


@dataclass(frozen=True)
class Batch:
    """A named, ordered group of files benchmarked together"""
    name: str
    files: Tuple[Path, ...]


def list_batch_files(directory: Path, suffix: str = FILE_SUFFIX) -> Tuple[Path, ...]:
    """Regular files directly inside directory whose name ends with suffix, sorted by name"""
    return tuple(
        path for path in sorted(directory.iterdir(), key=lambda p: p.name)
        if path.is_file() and path.name.endswith(suffix)
    )


def load_batch(name: str, directory: Path) -> Batch:
    """Load a single batch from its directory"""
    directory = Path(directory)
    if not directory.is_dir():
        raise BatchNotFoundError(name, directory)
    return Batch(name=name, files=list_batch_files(directory))


def load_batches(root: Path, definitions=None) -> List[Batch]:
    """Load every predefined batch under root"""
    root = Path(root)
    definitions = BATCH_DEFINITIONS if definitions is None else definitions
    return [load_batch(name, root / dirname) for name, dirname in definitions]
