"""Serial writes to a mounted filesystem (EFS, s3fs, goofys, ...)"""

from pathlib import Path

from .base import WriteStrategy


SERIAL_DIR = "test-serial"


class MountedFilesystemStrategy(WriteStrategy):
    """Copies each file as UTF-8 text under <mount>/test-serial/<parent>/"""

    title = "Serial EFS"
    target_label = "EFS"

    def __init__(self, mount_point, log=None):
        super().__init__(log)
        self.mount_point = Path(mount_point)

    def destination_dir(self, path: Path) -> Path:
        return self.mount_point / SERIAL_DIR / Path(path).parent.name

    def write_file(self, path: Path):
        parent = self.destination_dir(path)
        parent.mkdir(parents=True, exist_ok=True)

        target = parent / Path(path).name
        with self.timed(str(target)):
            text = Path(path).read_text(encoding="utf-8", errors="replace")
            with open(target, "w", encoding="utf-8") as f:
                f.write(text)
