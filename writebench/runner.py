"""Runs the three serial write strategies over every batch"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .base import StrategyTiming, WriteStrategy
from .batches import Batch
from .config import BackendConfig
from .filesystem import MountedFilesystemStrategy
from .native_s3 import (
    DirectPutStrategy,
    TransferManagerStrategy,
    create_s3_client,
    create_transfer_manager,
)


logger = logging.getLogger("writebench")


@dataclass
class BatchOutcome:
    """What happened to one batch; error is set when the batch was aborted"""
    batch: str
    timings: List[StrategyTiming] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BenchmarkRunner:
    """S3 put vs. S3 transfer manager vs. mounted filesystem, one batch at a time"""

    def __init__(self, config: BackendConfig, s3_client=None, transfer_manager=None,
                 log: logging.Logger = None):
        self.config = config
        self.log = log or logger
        self.s3_client = s3_client or create_s3_client(config)
        self._owns_transfer_manager = transfer_manager is None
        self.transfer_manager = transfer_manager or create_transfer_manager(self.s3_client)

        self.strategies: List[WriteStrategy] = [
            DirectPutStrategy(self.s3_client, config.bucket, log=self.log),
            TransferManagerStrategy(self.transfer_manager, config.bucket, log=self.log),
            MountedFilesystemStrategy(config.mount_point, log=self.log),
        ]

    def run_batch(self, batch: Batch) -> BatchOutcome:
        """Run every strategy over the batch; the first failure aborts the batch"""
        outcome = BatchOutcome(batch=batch.name)
        try:
            for strategy in self.strategies:
                outcome.timings.append(strategy.run(batch))
        except Exception as e:
            outcome.error = e
        return outcome

    def run(self, batches: List[Batch]) -> List[BatchOutcome]:
        self.log.info("Starting %s tests", type(self).__name__)

        outcomes = []
        for batch in batches:
            outcome = self.run_batch(batch)
            if not outcome.ok:
                err = outcome.error
                self.log.error(
                    "Failed data [%s, <collection>] with error message: %s",
                    batch.name, err,
                    exc_info=(type(err), err, err.__traceback__),
                )
            outcomes.append(outcome)

        self.log.info("Ended %s tests", type(self).__name__)
        return outcomes

    def close(self):
        if self._owns_transfer_manager:
            self.transfer_manager.shutdown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
