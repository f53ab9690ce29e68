"""Conversions between scene values and plain YAML nodes."""

from __future__ import annotations

from typing import Any, Iterable

from slamcore.scene.camera import ProjectionType


def encode_vector(vector: Iterable[float]) -> list[float]:
    """Return a vector as a list of floats, ready to be dumped as a YAML sequence."""
    return [float(component) for component in vector]


def decode_vector(node: Any, size: int) -> tuple[float, ...]:
    """Read a YAML sequence of exactly ``size`` numbers as a tuple of floats.

    Raises :class:`ValueError` when the node is not a sequence, has the wrong
    length or holds something that is not a number.
    """
    if not isinstance(node, (list, tuple)):
        raise ValueError(f"Expected a sequence of {size} numbers, got {node!r}")
    if len(node) != size:
        raise ValueError(f"Expected {size} components, got {len(node)}")
    try:
        return tuple(float(component) for component in node)
    except (TypeError, ValueError):
        raise ValueError(f"Vector components must be numbers: {node!r}") from None


def encode_projection_type(projection_type: ProjectionType) -> str:
    """Name of a projection type as written to scene files, e.g. ``"Perspective"``."""
    return ProjectionType(projection_type).display_name


def decode_projection_type(node: Any) -> ProjectionType:
    """Read a projection type from its scalar name.

    Raises :class:`ValueError` for a non-scalar node or an unknown name.
    """
    if not isinstance(node, str):
        raise ValueError(f"Expected a projection type name, got {node!r}")
    for projection_type in ProjectionType:
        if projection_type.display_name == node:
            return projection_type
    raise ValueError(f"Unknown projection type: {node!r}")