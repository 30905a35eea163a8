"""Load benchmark input files into memory."""

import os
from typing import NamedTuple


class Document(NamedTuple):
    """A named input file held fully in memory."""

    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def load_document(path: str | os.PathLike) -> Document:
    """
    Read a whole file in binary mode.

    The returned bytes are exactly the file contents, with no decoding or
    newline translation.

    Args:
        path: File to read. Its string form becomes the document name.

    Returns:
        The loaded Document.

    Raises:
        OSError: If the file cannot be opened or a read comes up short.
    """
    with open(path, "rb") as f:
        size = os.fstat(f.fileno()).st_size
        # Pipes and procfs report a size of 0, so read to EOF rather than to size.
        data = f.read()
    if len(data) < size:
        raise OSError(f"short read on {os.fspath(path)}: got {len(data)} of {size} bytes")
    return Document(name=os.fspath(path), data=data)


def load_documents(paths) -> list[Document]:
    """Load every path, in order. The first failure aborts the whole load."""
    return [load_document(path) for path in paths]
