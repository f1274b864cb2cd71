"""
tests/conftest.py
-----------------
Shared fixtures: isolated settings/log dir, synthetic GloVe files and a fake
HTTP client so nothing ever touches the network.
"""

import io
import zipfile

import numpy as np
import pytest
import requests

from embeddings.index import EmbeddingIndex
from glove_core.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("GLOVE_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("GLOVE_WORK_DIR", str(tmp_path / "work"))
    monkeypatch.setenv("GLOVE_SHOW_PROGRESS", "false")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


def vector_lines(rows):
    return "".join(f"{w} " + " ".join(repr(float(x)) for x in vec) + "\n" for w, vec in rows)


def make_rows(dim, words=("the", "cat", "dog")):
    rng = np.random.default_rng(0)
    return [(w, rng.standard_normal(dim).astype(np.float32).tolist()) for w in words]


def write_vectors(path, rows):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(vector_lines(rows), encoding="utf-8")
    return path


def zip_bytes(files):
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as z:
        for name, text in files.items():
            z.writestr(name, text)
    return buf.getvalue()


@pytest.fixture
def hello_world_index():
    return EmbeddingIndex.from_mapping(
        {"hello": [1.0, 0.0, 0.0], "world": [0.0, 1.0, 0.0]},
        3,
    )


class FakeResponse:
    def __init__(self, body=b"", status=200, content_length=None, chunks=None):
        self.body = body
        self.status = status
        length = len(body) if content_length is None else content_length
        self.headers = {"content-length": str(length)}
        self.chunks = chunks

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} Error")

    def iter_content(self, chunk_size=1):
        if self.chunks is not None:
            for chunk in self.chunks:
                if isinstance(chunk, Exception):
                    raise chunk
                yield chunk
            return
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]


@pytest.fixture
def fake_http(monkeypatch):
    """Install a fake requests.get; returns the list of requested URLs."""
    calls = []
    state = {"response": FakeResponse()}

    def fake_get(url, stream=False, timeout=None):
        calls.append(url)
        resp = state["response"]
        if isinstance(resp, Exception):
            raise resp
        return resp

    monkeypatch.setattr("acquisition.downloader.requests.get", fake_get)

    class Controller:
        requested = calls

        def respond(self, response):
            state["response"] = response

    return Controller()
