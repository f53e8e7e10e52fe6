"""Exceptions raised by the write benchmark"""


class WriteBenchError(Exception):
    """Base class for benchmark errors"""


class BatchNotFoundError(WriteBenchError):
    """A batch resource directory is missing"""

    def __init__(self, name: str, directory):
        super().__init__(f"Batch '{name}' directory does not exist: {directory}")
        self.name = name
        self.directory = directory
