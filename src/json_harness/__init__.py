"""Parse/serialize latency harness for JSON libraries."""

from json_harness.adapters import ADAPTERS, Adapter, make_adapters
from json_harness.benchmarks import bench_parse, bench_serialize, run_benchmarks
from json_harness.loader import Document, load_document
from json_harness.report import Reporter

__all__ = [
    "ADAPTERS",
    "Adapter",
    "Document",
    "Reporter",
    "bench_parse",
    "bench_serialize",
    "load_document",
    "make_adapters",
    "run_benchmarks",
]
