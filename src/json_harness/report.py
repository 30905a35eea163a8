"""Line-oriented benchmark report."""

from typing import TextIO

import click

from json_harness.loader import Document


class Reporter:
    """
    Writes report lines as results arrive.

    Every line goes through ``click.echo``, which flushes the stream, so an
    interrupted run still leaves a readable partial report.

    Args:
        stream: Text stream to write to. None means stderr.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def _line(self, text: str) -> None:
        click.echo(text, file=self.stream, err=self.stream is None)

    def emit_header(self, kind: str, ordinal: int, document: Document) -> None:
        self._line(f"{kind} File {ordinal} {document.name} ({document.size} bytes)")

    def emit_timing(self, adapter_name: str, milliseconds: int) -> None:
        self._line(f" {adapter_name}: {milliseconds}ms")

    def emit_unsupported(self, adapter_name: str) -> None:
        self._line(f" {adapter_name}: serialize not supported")
