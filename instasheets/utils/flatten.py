"""Flatten JSON pages into two-column (label, value) rows.

Rules:
- A record emits one row per key in key order. Nested records and
  sequences emit a header row ``("key:", "")`` followed by their own rows.
- Sequence elements are labelled by index ("0", "1", ...), like the keys of
  a record.
- A page that is a sequence is flattened element by element and the rows
  are concatenated with no separator rows between records.

Example::

    {"a": 1, "b": {"c": 2, "d": 3}}
    -> [("a", "1"), ("b:", ""), ("c", "2"), ("d", "3")]
"""

from __future__ import annotations

import math
from typing import Any, Iterator, List, NamedTuple, Optional, Tuple

from instasheets.config import api_config
from instasheets.exceptions import FlattenDepthError
from instasheets.utils.json_tree import JsonNode, Primitive, Record, Scalar, Sequence, decode


class Row(NamedTuple):
    label: str
    value: str


def stringify(value: Scalar) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return format_number(value)


def format_number(value: float) -> str:
    """Render a float the way JavaScript's String(number) does.

    Shortest round-trip digits, plain notation from 1e-6 up to 1e21 and
    exponent notation ("1e+21", "1.5e-7") outside that range.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    mantissa, _, exp = repr(abs(value)).partition("e")
    whole, _, frac = mantissa.partition(".")
    all_digits = whole + frac
    digits = all_digits.lstrip("0")
    # value == 0.<digits> * 10**point
    point = len(whole) + int(exp or 0) - (len(all_digits) - len(digits))
    digits = digits.rstrip("0")
    k = len(digits)
    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    e = point - 1
    head = digits[0] if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{head}e{'+' if e > 0 else '-'}{abs(e)}"


def _children(node: JsonNode) -> Iterator[Tuple[str, JsonNode]]:
    if isinstance(node, Record):
        return iter(node.entries)
    if isinstance(node, Sequence):
        return ((str(i), item) for i, item in enumerate(node.items))
    return iter(())


def _flatten_container(node: JsonNode, max_depth: int) -> List[Row]:
    rows: List[Row] = []
    stack = [_children(node)]
    while stack:
        nxt: Optional[Tuple[str, JsonNode]] = next(stack[-1], None)
        if nxt is None:
            stack.pop()
            continue
        label, child = nxt
        if isinstance(child, Primitive):
            rows.append(Row(label, stringify(child.value)))
            continue
        rows.append(Row(f"{label}:", ""))
        if len(stack) >= max_depth:
            raise FlattenDepthError(f"JSON nested deeper than {max_depth} levels")
        stack.append(_children(child))
    return rows


def flatten(page: JsonNode, max_depth: int = api_config.MAX_FLATTEN_DEPTH) -> List[Row]:
    """Flatten one page (record, sequence of records, or scalar) into rows."""
    if isinstance(page, Sequence):
        rows: List[Row] = []
        for index, item in enumerate(page.items):
            if isinstance(item, Primitive):
                rows.append(Row(str(index), stringify(item.value)))
            else:
                rows.extend(_flatten_container(item, max_depth))
        return rows
    if isinstance(page, Record):
        return _flatten_container(page, max_depth)
    if page.value is None:
        return []
    return [Row("data", stringify(page.value))]


def flatten_json(data: Any, max_depth: int = api_config.MAX_FLATTEN_DEPTH) -> List[Row]:
    """Convenience: decode raw JSON data and flatten it."""
    return flatten(decode(data, max_depth=max_depth), max_depth=max_depth)


__all__ = ["Row", "stringify", "format_number", "flatten", "flatten_json"]
