"""Timing protocol for the parse and serialize benchmarks."""

import gc
import time
from functools import partial
from typing import Callable, Iterator, Sequence

from json_harness.adapters import Adapter
from json_harness.loader import Document
from json_harness.report import Reporter

# Fixed so that numbers stay comparable between runs.
PARSE_TRIALS = 6
PARSE_WARMUP = 3
PARSE_REPEAT = 250

SERIALIZE_TRIALS = 3
SERIALIZE_WARMUP = 0
SERIALIZE_REPEAT = 200

MODES = ("parse", "serialize", "all")

Clock = Callable[[], float]


class AdapterError(RuntimeError):
    """An adapter failed on a document it was expected to handle."""

    def __init__(self, adapter_name: str, document_name: str, cause: BaseException):
        super().__init__(f"{adapter_name} failed on {document_name}: {cause!r}")
        self.adapter_name = adapter_name
        self.document_name = document_name


class Trial:
    """One timed batch of ``repeat`` operations."""

    def __init__(self, adapter_name: str, index: int, seconds: float):
        self.adapter_name = adapter_name
        self.index = index
        self.seconds = seconds

    @property
    def milliseconds(self) -> int:
        return round(self.seconds * 1000)

    def __repr__(self) -> str:
        return f"Trial({self.adapter_name!r}, #{self.index}, {self.seconds:.6f}s)"


def _timed(call: Callable[[], None], clock: Clock) -> float:
    """Run ``call`` with the collector off and return elapsed clock time."""
    gc.collect()
    gc_was_enabled = gc.isenabled()
    gc.disable()
    try:
        start = clock()
        call()
        elapsed = clock() - start
    finally:
        if gc_was_enabled:
            gc.enable()
    return elapsed


def run_trials(
    adapter: Adapter,
    document: Document,
    call: Callable[[], None],
    trials: int,
    warmup: int,
    clock: Clock = time.perf_counter,
) -> Iterator[Trial]:
    """
    Time ``call`` ``trials`` times in a row, yielding all but the warm-up trials.

    Each trial is yielded as soon as it finishes, before the next one starts.

    Args:
        adapter: Adapter under test, used for naming results and errors.
        document: Document under test, used for naming errors.
        call: The batched operation to time.
        trials: Total number of trials to run.
        warmup: Leading trials that are run but not yielded.
        clock: Monotonic clock returning seconds.

    Raises:
        AdapterError: If ``call`` raises.
    """
    for index in range(trials):
        try:
            seconds = _timed(call, clock)
        except Exception as exc:
            raise AdapterError(adapter.name, document.name, exc) from exc
        if index >= warmup:
            yield Trial(adapter.name, index, seconds)


def bench_parse(
    documents: Sequence[Document],
    adapters: Sequence[Adapter],
    reporter: Reporter,
    clock: Clock = time.perf_counter,
) -> None:
    """Run the parse benchmark for every document against every adapter."""
    for ordinal, document in enumerate(documents, start=1):
        reporter.emit_header("Parse", ordinal, document)
        for adapter in adapters:
            call = partial(adapter.parse, document.data, PARSE_REPEAT)
            for trial in run_trials(adapter, document, call, PARSE_TRIALS, PARSE_WARMUP, clock):
                reporter.emit_timing(trial.adapter_name, trial.milliseconds)


def bench_serialize(
    documents: Sequence[Document],
    adapters: Sequence[Adapter],
    reporter: Reporter,
    clock: Clock = time.perf_counter,
) -> None:
    """
    Run the serialize benchmark for every document against every adapter.

    The document is parsed once per adapter before its trials, outside any
    timed region, so only serialization is measured. Adapters without
    serialize support get a single "not supported" line.
    """
    for ordinal, document in enumerate(documents, start=1):
        reporter.emit_header("Serialize", ordinal, document)
        for adapter in adapters:
            if not adapter.supports_serialize:
                reporter.emit_unsupported(adapter.name)
                continue
            try:
                value = adapter.load(document.data)
            except Exception as exc:
                raise AdapterError(adapter.name, document.name, exc) from exc
            call = partial(adapter.dump, value, SERIALIZE_REPEAT)
            for trial in run_trials(
                adapter, document, call, SERIALIZE_TRIALS, SERIALIZE_WARMUP, clock
            ):
                reporter.emit_timing(trial.adapter_name, trial.milliseconds)


def run_benchmarks(
    documents: Sequence[Document],
    adapters: Sequence[Adapter],
    reporter: Reporter,
    mode: str = "parse",
) -> None:
    """
    Run the benchmarks selected by ``mode``.

    Args:
        documents: Loaded input documents.
        adapters: Libraries to measure, in report order.
        reporter: Destination for report lines.
        mode: One of ``MODES``. ``all`` runs parse first, then serialize.
    """
    if mode not in MODES:
        raise ValueError(f"unknown mode {mode!r}, expected one of {MODES}")
    if mode in ("parse", "all"):
        bench_parse(documents, adapters, reporter)
    if mode in ("serialize", "all"):
        bench_serialize(documents, adapters, reporter)
