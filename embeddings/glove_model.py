"""
embeddings/glove_model.py
-------------------------
Top-level GloVe 6B loader and the GloVeModel facade.

load_index(dir, D):
    1. target file <dir>/glove.6B.<D>d.txt
    2. if missing: download <dir>/glove.6B.zip (unless cached), then unzip it
    3. parse the text file into a new EmbeddingIndex

Every failure is logged and yields EmbeddingIndex.empty(); nothing is raised.
A cached archive is re-extracted whenever the target text file is missing,
so a corrupt zip keeps failing loads until it is removed by hand.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from acquisition.archive import unzip
from acquisition.downloader import download_file
from embeddings.glove_parser import parse_vector_file
from embeddings.index import EmbeddingIndex
from glove_core.config import AVAILABLE_DIMENSIONS, GloVeSettings, get_settings
from glove_core.logger import log_event
from query import encode


def get_available_dimension_list() -> List[int]:
    return list(AVAILABLE_DIMENSIONS)


def glove_text_file_name(dimension: int) -> str:
    return f"glove.6B.{dimension}d.txt"


def load_index(dir_path, dimension: int, settings: Optional[GloVeSettings] = None) -> EmbeddingIndex:
    """Build a fresh index for `dimension` from files under `dir_path`."""
    settings = settings or get_settings()
    if dimension not in AVAILABLE_DIMENSIONS:
        log_event("unsupported_dimension", {"dimension": dimension}, level="error")
        return EmbeddingIndex.empty()

    dir_path = Path(dir_path)
    file_path = dir_path / glove_text_file_name(dimension)
    if not file_path.exists():
        zip_path = dir_path / settings.archive_name
        if not zip_path.exists():
            if not download_file(settings.archive_url, zip_path, settings=settings):
                return EmbeddingIndex.empty()
        if not unzip(zip_path, dir_path):
            return EmbeddingIndex.empty()

    log_event("loading", {"path": str(file_path), "dimension": dimension})
    t0 = time.perf_counter()
    words = parse_vector_file(file_path, dimension)
    if not words:
        return EmbeddingIndex.empty()

    index = EmbeddingIndex.from_mapping(words, dimension)
    log_event("loaded", {
        "path": str(file_path),
        "words": index.size(),
        "seconds": round(time.perf_counter() - t0, 2),
    })
    return index


class GloVeModel:
    """
    Mutable holder for the current EmbeddingIndex.

    load() resets to the empty index, then installs the new one with a single
    assignment. Queries read whichever index is current; callers must not
    load and query concurrently.
    """

    def __init__(self, settings: Optional[GloVeSettings] = None):
        self.settings = settings or get_settings()
        self.index = EmbeddingIndex.empty()

    @staticmethod
    def get_available_dimension_list() -> List[int]:
        return get_available_dimension_list()

    def load(self, dimension: int, dir_path=None) -> Dict[str, np.ndarray]:
        """Load `dimension` from `dir_path` (default: settings.work_dir). Returns the word map."""
        self.index = EmbeddingIndex.empty()
        if dir_path is None:
            dir_path = self.settings.work_dir
        self.index = load_index(dir_path, dimension, settings=self.settings)
        return self.index.as_dict()

    def load50(self):
        return self.load(50)

    def load100(self):
        return self.load(100)

    def load200(self):
        return self.load(200)

    def load300(self):
        return self.load(300)

    def encode_word(self, word: str) -> Optional[np.ndarray]:
        return encode.encode_word(self.index, word)

    def encode_document(self, text: str) -> np.ndarray:
        return encode.encode_document(self.index, text)

    def distance(self, word1: str, word2: str) -> float:
        return encode.distance(self.index, word1, word2)

    def size(self) -> int:
        return self.index.size()

    def get_word_vec_dimension(self) -> int:
        return self.index.dimension()
