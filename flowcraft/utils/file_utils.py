"""File and path helpers shared by the state file and diagram file I/O."""

import os
import tempfile
from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Create directory and parents if needed. Return path."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def canonical_path(path: os.PathLike | str) -> Path:
    """Absolute, normalised path with ~ expanded. Symlinks are kept as given."""
    return Path(os.path.abspath(Path(path).expanduser()))


def display_name(path: os.PathLike | str) -> str:
    """Final path component, as shown in the recent-files list."""
    return Path(path).name


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Replace `path` with `data` via a temp file in the same directory + os.replace.
    Raises OSError; the temp file is removed on failure.
    """
    path = Path(path)
    ensure_dir(path.parent)
    fd, tmp = tempfile.mkstemp(prefix="." + path.name + ".", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
