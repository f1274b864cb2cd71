import math

import numpy as np
import pytest

from embeddings.index import EmbeddingIndex
from query.encode import MISSING_DISTANCE, distance, encode_document, encode_word
from query.normalizer import tokenize


def test_encode_word(hello_world_index):
    assert encode_word(hello_world_index, "hello").tolist() == [1.0, 0.0, 0.0]


def test_encode_word_is_case_insensitive(hello_world_index):
    a = encode_word(hello_world_index, "Hello")
    b = encode_word(hello_world_index, "HELLO")
    assert np.array_equal(a, b)
    assert a.tolist() == [1.0, 0.0, 0.0]


def test_encode_word_missing(hello_world_index):
    assert encode_word(hello_world_index, "missing") is None


def test_encode_document_sums_known_words(hello_world_index):
    vec = encode_document(hello_world_index, "Hello, world!")
    assert vec.dtype == np.float32
    assert vec.tolist() == [1.0, 1.0, 0.0]


def test_encode_document_is_a_sum_not_a_mean(hello_world_index):
    vec = encode_document(hello_world_index, "hello hello hello world")
    assert vec.tolist() == [3.0, 1.0, 0.0]


def test_encode_document_empty_is_zero_vector(hello_world_index):
    vec = encode_document(hello_world_index, "")
    assert vec.shape == (3,)
    assert not vec.any()


def test_encode_document_matches_word_sum():
    rng = np.random.default_rng(1)
    words = {w: rng.standard_normal(4) for w in ["a", "b", "c"]}
    index = EmbeddingIndex.from_mapping(words, 4)
    text = "A b, unknown c. a!"
    expected = np.zeros(4, dtype=np.float32)
    for tok in tokenize(text):
        vec = encode_word(index, tok) if tok else None
        if vec is not None:
            expected += vec
    assert np.allclose(encode_document(index, text), expected)


def test_encode_document_does_not_alias_stored_vectors(hello_world_index):
    vec = encode_document(hello_world_index, "hello")
    vec[0] = 42.0
    assert encode_word(hello_world_index, "hello")[0] == 1.0


def test_encode_document_on_unloaded_index():
    assert encode_document(EmbeddingIndex.empty(), "hello").shape == (0,)


def test_distance(hello_world_index):
    assert distance(hello_world_index, "hello", "world") == pytest.approx(math.sqrt(2))


def test_distance_to_self_is_zero(hello_world_index):
    assert distance(hello_world_index, "hello", "Hello") == 0.0


def test_distance_is_symmetric():
    rng = np.random.default_rng(2)
    index = EmbeddingIndex.from_mapping({"x": rng.standard_normal(5), "y": rng.standard_normal(5)}, 5)
    assert distance(index, "x", "y") == distance(index, "y", "x")


def test_distance_missing_word(hello_world_index):
    assert distance(hello_world_index, "hello", "missing") == MISSING_DISTANCE == -1
    assert distance(hello_world_index, "missing", "hello") == -1


def test_encode_document_trims_whitespace_around_tokens(hello_world_index):
    assert encode_document(hello_world_index, "Hello world\n").tolist() == [1.0, 1.0, 0.0]
    assert encode_document(hello_world_index, "hello\tworld").tolist() == [0.0, 0.0, 0.0]
    assert encode_document(hello_world_index, "\thello\r\nworld\n").tolist() == [0.0, 0.0, 0.0]
    assert encode_document(hello_world_index, "\thello \r\nworld\n").tolist() == [1.0, 1.0, 0.0]


def test_encode_word_lowercases_non_ascii():
    index = EmbeddingIndex.from_mapping({"école": [1.0, 2.0]}, 2)
    assert encode_word(index, "École").tolist() == [1.0, 2.0]
    assert encode_document(index, "ÉCOLE!").tolist() == [1.0, 2.0]
