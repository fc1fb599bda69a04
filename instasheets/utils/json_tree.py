"""Tagged JSON tree: Primitive | Record | Sequence.

Decoded JSON is converted once into explicit node types so the flattener
dispatches on a tag instead of inspecting runtime types at every level.
Decoding walks an explicit stack; nesting beyond `max_depth` containers
raises FlattenDepthError instead of exhausting the interpreter stack.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Tuple, Union

from instasheets.config import api_config
from instasheets.exceptions import FlattenDepthError

Scalar = Union[str, int, float, bool, None]


@dataclass
class Primitive:
    value: Scalar


@dataclass
class Record:
    entries: List[Tuple[str, "JsonNode"]] = field(default_factory=list)


@dataclass
class Sequence:
    items: List["JsonNode"] = field(default_factory=list)


JsonNode = Union[Primitive, Record, Sequence]


def decode(value: Any, max_depth: int = api_config.MAX_FLATTEN_DEPTH) -> JsonNode:
    """Convert a decoded JSON value (dict / list / scalar) into a JsonNode."""
    root: List[JsonNode] = []
    stack: List[Tuple[Any, int, Callable[[JsonNode], None]]] = [(value, 0, root.append)]
    while stack:
        raw, depth, attach = stack.pop()
        if isinstance(raw, dict):
            if depth >= max_depth:
                raise FlattenDepthError(f"JSON nested deeper than {max_depth} levels")
            record = Record()
            attach(record)
            # reversed so children attach in key order when popped
            for key, inner in reversed(list(raw.items())):
                stack.append((inner, depth + 1, _entry_appender(record, str(key))))
        elif isinstance(raw, list):
            if depth >= max_depth:
                raise FlattenDepthError(f"JSON nested deeper than {max_depth} levels")
            seq = Sequence()
            attach(seq)
            for inner in reversed(raw):
                stack.append((inner, depth + 1, seq.items.append))
        else:
            attach(Primitive(raw))
    return root[0]


def _entry_appender(record: Record, key: str) -> Callable[[JsonNode], None]:
    def attach(node: JsonNode) -> None:
        record.entries.append((key, node))
    return attach


__all__ = ["Primitive", "Record", "Sequence", "JsonNode", "decode"]
