"""
embeddings/index.py
-------------------
Immutable word -> vector index produced by a load.

An index is either loaded (dimension D, every vector of length D) or the
empty unloaded index (dimension -1). Vectors are read-only float32 arrays.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

import numpy as np

UNLOADED = -1


@dataclass(frozen=True, eq=False)
class EmbeddingIndex:
    words: Mapping[str, np.ndarray] = field(default_factory=lambda: MappingProxyType({}))
    dim: int = UNLOADED

    @classmethod
    def empty(cls) -> "EmbeddingIndex":
        return cls()

    @classmethod
    def from_mapping(cls, mapping: Dict[str, np.ndarray], dim: int) -> "EmbeddingIndex":
        """Freeze a parsed mapping. Every vector must have length `dim`."""
        if dim <= 0:
            raise ValueError(f"dimension must be positive, got {dim}")
        frozen = {}
        for word, vec in mapping.items():
            arr = np.array(vec, dtype=np.float32)
            if arr.shape != (dim,):
                raise ValueError(f"vector for {word!r} has shape {arr.shape}, expected ({dim},)")
            arr.flags.writeable = False
            frozen[word] = arr
        return cls(words=MappingProxyType(frozen), dim=dim)

    def size(self) -> int:
        return len(self.words)

    def dimension(self) -> int:
        return self.dim

    @property
    def loaded(self) -> bool:
        return self.dim != UNLOADED

    def lookup(self, word: str) -> Optional[np.ndarray]:
        """Vector for the lowercased `word`, or None."""
        return self.words.get(word.lower())

    def as_dict(self) -> Dict[str, np.ndarray]:
        return dict(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word) -> bool:
        return word in self.words

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __eq__(self, other) -> bool:
        if not isinstance(other, EmbeddingIndex):
            return NotImplemented
        if self.dim != other.dim or self.words.keys() != other.words.keys():
            return False
        return all(np.array_equal(v, other.words[w]) for w, v in self.words.items())

    __hash__ = None

    def __repr__(self) -> str:
        return f"EmbeddingIndex(size={self.size()}, dim={self.dim})"
