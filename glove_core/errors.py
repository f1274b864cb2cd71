"""
glove_core/errors.py
--------------------
Failures raised inside the acquisition and parsing pipeline.
The public load path catches these and reports an unloaded index instead.
"""


class GloVeError(Exception):
    """Base class for acquisition and parse failures."""


class DownloadError(GloVeError):
    pass


class ChecksumError(DownloadError):
    def __init__(self, path, expected, actual):
        super().__init__(f"sha256 mismatch for {path}: expected {expected}, got {actual}")
        self.path = path
        self.expected = expected
        self.actual = actual


class ArchiveError(GloVeError):
    pass


class ParseError(GloVeError):
    def __init__(self, path, line_no, reason):
        super().__init__(f"{path}:{line_no}: {reason}")
        self.path = path
        self.line_no = line_no
        self.reason = reason
