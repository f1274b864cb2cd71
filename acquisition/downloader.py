"""
acquisition/downloader.py
-------------------------
Single-attempt HTTPS download of the GloVe archive.

The body is streamed into a temporary file next to the destination and
renamed over it only once complete, so an interrupted transfer never leaves
a file that looks like a finished archive.
"""

import hashlib
import os
import tempfile
from pathlib import Path

import requests
from tqdm import tqdm

from glove_core.config import get_settings
from glove_core.errors import ChecksumError, DownloadError
from glove_core.logger import log_event


def checksum(path: Path) -> str:
    """Compute SHA256 checksum of a binary file."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _expected_length(resp):
    """Body size from Content-Length, or None when absent, unparsable or content-encoded."""
    if resp.headers.get("content-encoding", "identity").lower() != "identity":
        # requests decodes gzip/deflate, so the header counts different bytes
        return None
    try:
        return int(resp.headers.get("content-length", 0)) or None
    except ValueError:
        return None


def _stream_to(resp, fh, chunk_size, show_progress, desc):
    total = _expected_length(resp)
    written = 0
    with tqdm(total=total, unit="B", unit_scale=True, desc=desc, disable=not show_progress) as bar:
        for chunk in resp.iter_content(chunk_size=chunk_size):
            if not chunk:
                continue
            fh.write(chunk)
            written += len(chunk)
            bar.update(len(chunk))
    if total is not None and written != total:
        raise DownloadError(f"truncated body: got {written} of {total} bytes")
    return written


def fetch(url: str, dest, expected_sha256=None, settings=None) -> int:
    """
    Download `url` to `dest`. Returns the number of bytes written.
    Raises DownloadError (or ChecksumError) and leaves nothing at `dest` on failure.
    """
    settings = settings or get_settings()
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=dest.name + ".", suffix=".part", dir=dest.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            try:
                with requests.get(url, stream=True, timeout=settings.download_timeout) as resp:
                    resp.raise_for_status()
                    written = _stream_to(resp, fh, settings.chunk_size, settings.show_progress, dest.name)
            except requests.RequestException as e:
                raise DownloadError(str(e)) from e

        if expected_sha256:
            actual = checksum(tmp)
            if actual.lower() != expected_sha256.lower():
                raise ChecksumError(dest, expected_sha256, actual)

        os.replace(tmp, dest)
        return written
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def download_file(url: str, dest, settings=None) -> bool:
    """Boolean wrapper around fetch(); failures are logged, never raised."""
    settings = settings or get_settings()
    log_event("download_start", {"path": str(dest), "url": url})
    try:
        size = fetch(url, dest, expected_sha256=settings.expected_sha256, settings=settings)
    except ChecksumError as e:
        log_event("checksum_mismatch", {"path": str(dest), "expected": e.expected, "actual": e.actual}, level="error")
        return False
    except (DownloadError, OSError) as e:
        log_event("download_failed", {"url": url, "path": str(dest), "error": str(e)}, level="error")
        return False
    log_event("download_complete", {"path": str(dest), "bytes": size})
    return True
