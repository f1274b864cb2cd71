"""
embeddings/__init__.py
----------------------
GloVe vector parsing, the immutable index and the loader facade.
"""

from .glove_model import GloVeModel, get_available_dimension_list, glove_text_file_name, load_index
from .glove_parser import parse_vector_file, read_vector_file
from .index import UNLOADED, EmbeddingIndex

__all__ = [
    "GloVeModel",
    "EmbeddingIndex",
    "UNLOADED",
    "load_index",
    "get_available_dimension_list",
    "glove_text_file_name",
    "parse_vector_file",
    "read_vector_file",
]
