"""
acquisition/archive.py
----------------------
Extracts every entry of the GloVe zip into the working directory.
Partial extractions are left in place.
"""

import zipfile
import zlib
from pathlib import Path

from glove_core.errors import ArchiveError
from glove_core.logger import log_event


def extract_archive(archive, target_dir) -> list[str]:
    """Extract all members of `archive` into `target_dir`; returns the member names."""
    archive = Path(archive)
    if not archive.exists():
        raise ArchiveError(f"archive not found: {archive}")
    try:
        with zipfile.ZipFile(archive, "r") as z:
            names = z.namelist()
            z.extractall(target_dir)
    except (zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error, EOFError, OSError,
            NotImplementedError, RuntimeError, ValueError) as e:
        raise ArchiveError(f"{archive}: {e}") from e
    return names


def unzip(archive, target_dir) -> bool:
    log_event("unzip", {"archive": str(archive), "target": str(target_dir)})
    try:
        extract_archive(archive, target_dir)
    except ArchiveError as e:
        log_event("unzip_failed", {"archive": str(archive), "error": str(e)}, level="error")
        return False
    return True
