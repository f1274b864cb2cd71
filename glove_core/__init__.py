"""
glove_core/__init__.py
----------------------
Shared settings and event logging.
"""

from .config import GloVeSettings, get_settings
from .errors import ArchiveError, ChecksumError, DownloadError, GloVeError, ParseError
from .logger import log_event

__all__ = [
    "GloVeSettings",
    "get_settings",
    "log_event",
    "GloVeError",
    "DownloadError",
    "ChecksumError",
    "ArchiveError",
    "ParseError",
]
