"""Whole-file reading and writing helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def read_binary(file_path: PathLike, item_size: int = 1) -> bytes:
    """Read a whole file as raw bytes.

    The file must hold a whole number of items of ``item_size`` bytes;
    a :class:`ValueError` is raised otherwise. A missing or unreadable
    file raises the usual :class:`OSError`.
    """
    if item_size <= 0:
        raise ValueError(f"Item size must be positive, got {item_size}")
    data = Path(file_path).read_bytes()
    if len(data) % item_size != 0:
        raise ValueError(
            f"File size {len(data)} of \"{os.fspath(file_path)}\" "
            f"is not divisible by item size {item_size}"
        )
    return data


def read_string(file_path: PathLike) -> str:
    """Read a whole file as UTF-8 text, keeping line endings untouched."""
    return Path(file_path).read_bytes().decode("utf-8")


def write_binary(path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``path``, replacing any previous content.

    Empty data is refused with a :class:`ValueError`.
    """
    if not data:
        raise ValueError(f"Refusing to write empty data to \"{os.fspath(path)}\"")
    with open(path, "wb") as out:
        out.write(bytes(data))