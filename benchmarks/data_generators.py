"""
Test data generators for JSON parsing benchmarks.

Creates JSON documents of different shapes for performance testing:
- Small and large flat objects
- Mixed-type arrays
- Nested and very deep structures
- String-heavy content with escape sequences
"""

import random
import string
from typing import Any

import jstream

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]

DATA_TYPES = [
    "small_object",
    "large_array",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_array": _generate_large_array,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "deep_array": _generate_deep_array,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def _generate_small_object(rng: random.Random) -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return jstream.stringify(data)


def _generate_large_array(rng: random.Random) -> str:
    """Generates a flat array of records (> 100KB)."""
    data = [
        {
            "id": f"txn_{i:06d}",
            "amount": round(rng.uniform(1.0, 1000.0), 2),
            "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
            "status": rng.choice(["completed", "pending", "failed"]),
            "flags": [rng.random() < 0.5 for _ in range(3)],
        }
        for i in range(2000)
    ]
    return jstream.stringify(data)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates an array mixing every value type."""
    makers = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "value": _random_string(rng, 10)},
    ]
    array: list[Any] = [rng.choice(makers)(i) for i in range(500)]
    return jstream.stringify(array)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a bushy nested structure eight levels deep."""

    def create_nested(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}
        return {
            "level": depth,
            "items": [create_nested(depth - 1) for _ in range(2)],
            "nested": create_nested(depth - 1),
        }

    return jstream.stringify(create_nested(8))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates JSON text dense with escape sequences."""

    def escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPES))
            else:
                chars.append(rng.choice(string.ascii_letters + " "))
        return '"' + "".join(chars) + '"'

    strings = [escaped_string() for _ in range(200)]
    unicode = [
        f'"\\u{rng.randint(0x00A0, 0xD7FF):04x}\\ud83d\\ude00"'
        for _ in range(50)
    ]
    return "[" + ",".join(strings + unicode) + "]"


def _generate_deep_array(rng: random.Random) -> str:
    """Generates arrays nested far beyond the interpreter recursion limit."""
    depth = 10_000
    return "[" * depth + "]" * depth


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
