import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, Iterator, Union

from .errors import StorageError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

# mkstemp creates 0600 files
NEW_FILE_MODE = 0o644


def iter_lines(filename: PathLike) -> Iterator[str]:
    """Yield the lines of a UTF-8 text file without their line endings.

    A leading byte-order mark is dropped. The file is closed on every exit
    path. Read failures surface as StorageError, after any lines already
    yielded.
    """
    try:
        with open(filename, "r", encoding="utf-8-sig") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeError) as e:
        logger.warning(f"Failed to read list file {filename}: {e}")
        raise StorageError(str(e), path=filename) from e


def save_lines_atomic(lines: Iterable[str], filename: PathLike) -> int:
    """Atomic file write to prevent corruption.

    Writes every line followed by '\\n' to a temp file in the target
    directory and then moves it into place. Returns the number of lines.
    """
    target = Path(filename)
    dirpath = target.parent
    tmp = None
    count = 0
    try:
        fd, tmp = tempfile.mkstemp(dir=dirpath, prefix=".tmp_", suffix=".txt")
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
                count += 1
        if target.exists():
            shutil.copymode(target, tmp)
        else:
            os.chmod(tmp, NEW_FILE_MODE)
        os.replace(tmp, target)
    except (OSError, UnicodeError) as e:
        if tmp:
            try:
                os.unlink(tmp)
            except OSError:
                pass
        logger.warning(f"Failed to write list file {filename}: {e}")
        raise StorageError(str(e), path=filename) from e
    return count


def remove_file(filename: PathLike) -> bool:
    """Delete 'filename' if present. Returns True when a file was removed."""
    try:
        os.remove(filename)
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning(f"Failed to delete list file {filename}: {e}")
        raise StorageError(str(e), path=filename) from e
    return True
