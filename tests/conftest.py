"""Shared fixtures for json-harness tests."""

import io
import json

import pytest

from json_harness.adapters import Adapter
from json_harness.report import Reporter


class RecordingAdapter(Adapter):
    """Adapter that does no real work and records how it was called."""

    def __init__(self, name: str):
        self.name = name
        self.calls = []

    def parse(self, data, repeat):
        self.calls.append(("parse", repeat))

    def load(self, data):
        self.calls.append(("load",))
        return json.loads(data)

    def dump(self, value, repeat):
        self.calls.append(("dump", repeat))


class ParseOnlyAdapter(Adapter):
    """Adapter that never implements dump."""

    name = "parseonly"

    def parse(self, data, repeat):
        pass

    def load(self, data):
        return json.loads(data)


class StepClock:
    """Fake clock advancing a fixed step on every reading."""

    def __init__(self, step: float = 0.010):
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def json_100_bytes() -> bytes:
    """A valid JSON array that is exactly 100 bytes long."""
    data = b"[" + b",".join([b"1"] * 49) + b"]\n"
    assert len(data) == 100
    return data


@pytest.fixture
def json_file(tmp_path, json_100_bytes):
    path = tmp_path / "array.json"
    path.write_bytes(json_100_bytes)
    return path


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(output) -> Reporter:
    return Reporter(output)


@pytest.fixture
def sample_json() -> bytes:
    return json.dumps(
        {
            "id": 7,
            "title": "the quick brown fox",
            "tags": ["benchmark", "json", "parse"],
            "metrics": {"views": 1024, "score": 4.5, "flagged": False},
            "related": None,
        }
    ).encode("utf-8")
