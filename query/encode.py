"""
query/encode.py
---------------
Read-only queries over an EmbeddingIndex: word lookup, bag-of-words
document encoding and Euclidean distance.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

import numpy as np

from query.normalizer import tokenize

if TYPE_CHECKING:
    from embeddings.index import EmbeddingIndex

MISSING_DISTANCE = -1.0


def encode_word(index: EmbeddingIndex, word: str) -> Optional[np.ndarray]:
    """Stored vector for the lowercased word, or None if out of vocabulary."""
    return index.lookup(word)


def encode_document(index: EmbeddingIndex, text: str) -> np.ndarray:
    """
    Unweighted sum of the vectors of every in-vocabulary token.
    Not a mean: divide by the matched token count yourself if you need one.
    An unloaded index yields an empty vector.
    """
    acc = np.zeros(max(index.dimension(), 0), dtype=np.float32)
    for token in tokenize(text):
        token = token.strip()
        if not token:
            continue
        vec = encode_word(index, token)
        if vec is None:
            continue
        acc += vec
    return acc


def distance(index: EmbeddingIndex, word1: str, word2: str) -> float:
    """Euclidean distance between two words; -1.0 if either is missing."""
    v1 = encode_word(index, word1)
    v2 = encode_word(index, word2)
    if v1 is None or v2 is None:
        return MISSING_DISTANCE
    diff = v1 - v2
    return math.sqrt(float(np.dot(diff, diff)))
