"""
embeddings/glove_parser.py
--------------------------
Reads one glove.6B.<D>d.txt file into a word -> float32 vector dict.

Format: one entry per line, `<word> <f0> <f1> ... <f(D-1)>`, single spaces,
no header. Tokens past the first D numbers are ignored; fewer is an error.
"""

import numpy as np
from pathlib import Path

from glove_core.errors import ParseError
from glove_core.logger import log_event


def parse_line(line: str, dim: int):
    """Split one line into (word, vector). Raises ValueError on a malformed line."""
    parts = line.rstrip("\r\n").split(" ")
    if len(parts) < dim + 1:
        raise ValueError(f"expected {dim} components, found {len(parts) - 1}")
    vec = np.asarray(parts[1:dim + 1], dtype=np.float32)
    return parts[0], vec


def read_vector_file(path, dim: int) -> dict:
    """
    Parse the whole file. Later duplicates of a word replace earlier ones.
    Raises ParseError on the first bad line or on any I/O failure.
    """
    path = Path(path)
    words = {}
    line_no = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                try:
                    word, vec = parse_line(line, dim)
                except ValueError as e:
                    raise ParseError(path, line_no, str(e)) from e
                words[word] = vec
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(path, line_no, str(e)) from e
    if not words:
        raise ParseError(path, 0, "no vectors")
    return words


def parse_vector_file(path, dim: int) -> dict:
    """Like read_vector_file(), but returns {} and logs instead of raising."""
    try:
        return read_vector_file(path, dim)
    except ParseError as e:
        log_event("parse_failed", {"path": str(e.path), "line": e.line_no, "error": e.reason}, level="error")
        return {}
