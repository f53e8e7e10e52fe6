"""Base class for the serial write strategies"""

import logging
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import List

import numpy as np

from .batches import Batch


logger = logging.getLogger("writebench")


@dataclass
class StrategyTiming:
    """Timings of one strategy over one batch, kept only until they are logged"""
    strategy: str
    batch: str
    files: int
    total_ms: float
    latency_avg_ms: float
    latency_p95_ms: float


class WriteStrategy(ABC):
    """Writes every file of a batch one after another and times each write"""

    #: label used in the "Running ... Test" and total lines
    title = "Serial"
    #: storage name used in the per-file lines
    target_label = "storage"

    def __init__(self, log: logging.Logger = None):
        self.log = log or logger
        self.latencies: List[float] = []

    @abstractmethod
    def write_file(self, path: Path):
        """Write one source file; the timed part goes inside self.timed()"""

    @contextmanager
    def timed(self, destination: str):
        start = time.perf_counter()
        yield
        elapsed_ms = (time.perf_counter() - start) * 1000
        self.latencies.append(elapsed_ms)
        self.log.debug("Writing %s to %s took %.0fms", destination, self.target_label, elapsed_ms)

    def run(self, batch: Batch) -> StrategyTiming:
        """Run the strategy over all files of the batch"""
        self.log.info("Running %s Test: %s", self.title, batch.name)
        self.latencies = []

        start = time.perf_counter()
        for path in batch.files:
            self.write_file(path)
        total_ms = (time.perf_counter() - start) * 1000

        timing = self._calculate_results(batch, total_ms)
        self.log.info(
            "%s Test %s took %.0fms (%d files, avg %.2fms, p95 %.2fms)",
            self.title, batch.name, timing.total_ms, timing.files,
            timing.latency_avg_ms, timing.latency_p95_ms,
        )
        return timing

    def _calculate_results(self, batch: Batch, total_ms: float) -> StrategyTiming:
        if not self.latencies:
            return StrategyTiming(self.title, batch.name, 0, total_ms, 0.0, 0.0)

        latencies_arr = np.array(self.latencies)
        return StrategyTiming(
            strategy=self.title,
            batch=batch.name,
            files=len(self.latencies),
            total_ms=total_ms,
            latency_avg_ms=float(np.mean(latencies_arr)),
            latency_p95_ms=float(np.percentile(latencies_arr, 95)),
        )


def destination_key(prefix: str, path: Path) -> str:
    """<prefix>/<parent directory name>/<file name>"""
    path = Path(path)
    return f"{prefix}/{path.parent.name}/{path.name}"
