"""Uniform parse/serialize surface over the measured JSON libraries."""

import json
from abc import ABC, abstractmethod
from typing import Any

import msgspec
import orjson
import rapidjson
import ujson


class SerializeUnsupported(NotImplementedError):
    """Raised by adapters that do not take part in the serialize benchmark."""


class Adapter(ABC):
    """
    One measured JSON library.

    Subclasses set ``name`` and implement ``parse`` and ``load``. Implementing
    ``dump`` opts in to the serialize benchmark.

    Adapters hold no per-document state, so a single instance is reused for
    every document. Input bytes are never modified.
    """

    name: str = ""

    @abstractmethod
    def parse(self, data: bytes, repeat: int) -> None:
        """Parse ``data`` ``repeat`` times, dropping each result."""
        pass

    @abstractmethod
    def load(self, data: bytes) -> Any:
        """Parse ``data`` once and return the library's value."""
        pass

    def dump(self, value: Any, repeat: int) -> None:
        """Serialize ``value`` ``repeat`` times, dropping each result."""
        raise SerializeUnsupported(f"{self.name} does not support serialize")

    def serialize(self, data: bytes, repeat: int) -> None:
        """Parse ``data`` once, then serialize the result ``repeat`` times."""
        self.dump(self.load(data), repeat)

    @property
    def supports_serialize(self) -> bool:
        return type(self).dump is not Adapter.dump

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class JsonAdapter(Adapter):
    name = "json"

    def parse(self, data, repeat):
        loads = json.loads
        for _ in range(repeat):
            loads(data)

    def load(self, data):
        return json.loads(data)

    def dump(self, value, repeat):
        dumps = json.dumps
        for _ in range(repeat):
            dumps(value)


class OrjsonAdapter(Adapter):
    name = "orjson"

    def parse(self, data, repeat):
        loads = orjson.loads
        for _ in range(repeat):
            loads(data)

    def load(self, data):
        return orjson.loads(data)

    def dump(self, value, repeat):
        dumps = orjson.dumps
        for _ in range(repeat):
            dumps(value)


class MsgspecAdapter(Adapter):
    """msgspec in untyped mode, decoding to plain dicts and lists."""

    name = "msgspec"

    def __init__(self):
        self._decoder = msgspec.json.Decoder()
        self._encoder = msgspec.json.Encoder()

    def parse(self, data, repeat):
        decode = self._decoder.decode
        for _ in range(repeat):
            decode(data)

    def load(self, data):
        return self._decoder.decode(data)

    def dump(self, value, repeat):
        encode = self._encoder.encode
        for _ in range(repeat):
            encode(value)


class UjsonAdapter(Adapter):
    name = "ujson"

    def parse(self, data, repeat):
        loads = ujson.loads
        for _ in range(repeat):
            loads(data)

    def load(self, data):
        return ujson.loads(data)

    def dump(self, value, repeat):
        dumps = ujson.dumps
        for _ in range(repeat):
            dumps(value)


class RapidjsonAdapter(Adapter):
    name = "rapidjson"

    def parse(self, data, repeat):
        loads = rapidjson.loads
        for _ in range(repeat):
            loads(data)

    def load(self, data):
        return rapidjson.loads(data)

    def dump(self, value, repeat):
        dumps = rapidjson.dumps
        for _ in range(repeat):
            dumps(value)


ADAPTERS: dict[str, type[Adapter]] = {
    cls.name: cls
    for cls in (JsonAdapter, OrjsonAdapter, MsgspecAdapter, UjsonAdapter, RapidjsonAdapter)
}


def make_adapters(names=None) -> list[Adapter]:
    """
    Build the adapter list for a run.

    Args:
        names: Registry names, in the order they should run. None means
            every registered library in registry order.

    Returns:
        Fresh adapter instances.

    Raises:
        KeyError: If a name is not registered.
    """
    if names is None:
        names = list(ADAPTERS)
    return [ADAPTERS[name]() for name in names]
