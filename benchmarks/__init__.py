"""
Benchmark suite for jstream parsing and serialization performance.

Compares jstream against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed, event streaming throughput, serialization speed
and memory usage across different data types.
"""
