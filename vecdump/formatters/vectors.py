"""Text renderings of sparse vectors (CSV and JSON-like)."""

import io
from typing import Optional, Sequence, TextIO

from vecdump.core.types import SparseVector


def format_value(value: float) -> str:
    """Render a vector value the way Python prints floats (``1.5``, ``0.0``)."""
    return repr(float(value))


def write_csv(
    vector: SparseVector,
    sink: TextIO,
    names_as_comments: bool = False,
) -> None:
    """
    Write one CSV line for a vector into a text sink.

    Every position is written, zeros included, in index order. When
    ``names_as_comments`` is set and the vector is named, a ``#<name>``
    line comes first.

    Args:
        vector: Vector to render
        sink: Any object with a ``write(str)`` method
        names_as_comments: Emit the vector name as a comment line

    Raises:
        OSError: If the sink fails to accept the text
    """
    if names_as_comments and vector.name is not None:
        sink.write(f"#{vector.name}\n")

    first = True
    for _, value in vector.iter_all():
        if first:
            first = False
        else:
            sink.write(",")
        sink.write(format_value(value))
    sink.write("\n")


def to_csv(vector: SparseVector, names_as_comments: bool = False) -> str:
    """Render a vector as CSV and return the text."""
    buffer = io.StringIO()
    write_csv(vector, buffer, names_as_comments)
    return buffer.getvalue()


def to_json(
    vector: SparseVector,
    dictionary: Optional[Sequence[Optional[str]]] = None,
) -> str:
    """
    Render the non-zero entries of a vector as ``elts: {label:value, ...}``.

    Labels come from ``dictionary[index]`` when a dictionary is given,
    otherwise the raw index is used. Named vectors are prefixed with
    ``name: <name>`` and a tab.

    Args:
        vector: Vector to render
        dictionary: Optional term list indexed by feature index

    Returns:
        The rendered string (not strict JSON: keys are unquoted)

    Raises:
        IndexError: If the dictionary has no term for a non-zero index
    """
    parts = []
    if vector.name is not None:
        parts.append(f"name: {vector.name}\t")

    entries = []
    for index, value in vector.iter_nonzero():
        if dictionary is not None:
            label = _lookup(dictionary, index)
        else:
            label = str(index)
        entries.append(f"{label}:{format_value(value)}")

    parts.append("elts: {")
    parts.append(", ".join(entries))
    parts.append("}")
    return "".join(parts)


def _lookup(dictionary: Sequence[Optional[str]], index: int) -> str:
    if index >= len(dictionary):
        raise IndexError(
            f"Index {index} out of range for dictionary of size {len(dictionary)}"
        )
    term = dictionary[index]
    if term is None:
        raise IndexError(f"No dictionary term for index {index}")
    return term
