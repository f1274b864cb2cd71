"""
acquisition/__init__.py
-----------------------
Fetch and unpack the GloVe archive.
"""

from .archive import extract_archive, unzip
from .downloader import checksum, download_file, fetch

__all__ = ["fetch", "download_file", "checksum", "extract_archive", "unzip"]
