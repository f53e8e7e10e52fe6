"""Backend configuration for the write benchmark"""

import os
from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_REGION = "us-east-1"
DEFAULT_ENDPOINT = "https://s3.amazonaws.com"
DEFAULT_BUCKET = "s3vsefstestbucket"
DEFAULT_MOUNT_POINT = "/efs"
DEFAULT_BATCHES_ROOT = Path("batches")

ENV_PREFIX = "WRITEBENCH_"

_TRUE_WORDS = {"true", "yes", "on", "y", "t"}


def to_boolean(value) -> bool:
    """Lenient boolean parsing: true/yes/on/y/t in any case, everything else is False"""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).lower() in _TRUE_WORDS


@dataclass(frozen=True)
class BackendConfig:
    """Credentials and locations for one benchmark run"""
    access_key: str
    secret_key: str = field(repr=False)
    region: str = DEFAULT_REGION
    endpoint: str = DEFAULT_ENDPOINT
    bucket: str = DEFAULT_BUCKET
    mount_point: Path = Path(DEFAULT_MOUNT_POINT)
    batches_root: Path = DEFAULT_BATCHES_ROOT
    debug: bool = False

    @classmethod
    def from_env(cls, access_key: str, secret_key: str, debug: bool = False,
                 environ=None) -> "BackendConfig":
        """Build the configuration, taking optional overrides from WRITEBENCH_* variables"""
        env = os.environ if environ is None else environ

        def _get(name: str, default):
            return env.get(ENV_PREFIX + name) or default

        return cls(
            access_key=access_key,
            secret_key=secret_key,
            region=_get("REGION", DEFAULT_REGION),
            endpoint=_get("ENDPOINT", DEFAULT_ENDPOINT),
            bucket=_get("BUCKET", DEFAULT_BUCKET),
            mount_point=Path(_get("MOUNT_POINT", DEFAULT_MOUNT_POINT)),
            batches_root=Path(_get("BATCHES_ROOT", DEFAULT_BATCHES_ROOT)),
            debug=debug,
        )
