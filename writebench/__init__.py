"""Serial write benchmark: S3 put vs. S3 transfer manager vs. mounted filesystem"""

from .base import StrategyTiming, WriteStrategy
from .batches import Batch, load_batches
from .config import BackendConfig
from .errors import BatchNotFoundError, WriteBenchError
from .filesystem import MountedFilesystemStrategy
from .native_s3 import DirectPutStrategy, TransferManagerStrategy
from .runner import BatchOutcome, BenchmarkRunner

__version__ = "0.1.0"

__all__ = [
    'Batch',
    'BackendConfig',
    'BatchNotFoundError',
    'BatchOutcome',
    'BenchmarkRunner',
    'DirectPutStrategy',
    'MountedFilesystemStrategy',
    'StrategyTiming',
    'TransferManagerStrategy',
    'WriteBenchError',
    'WriteStrategy',
    'load_batches',
]
