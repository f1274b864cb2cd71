from .encode import MISSING_DISTANCE, distance, encode_document, encode_word
from .normalizer import PUNCTUATION, normalize, tokenize

__all__ = [
    "encode_word",
    "encode_document",
    "distance",
    "MISSING_DISTANCE",
    "normalize",
    "tokenize",
    "PUNCTUATION",
]
