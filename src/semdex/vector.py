# src/semdex/vector.py
"""Vector codec: embeddings <-> canonical ``[v0,v1,...]`` text.

The text form is what vector stores receive (and cast server-side) for both
inserts and distance queries. Values are written with Python's shortest
round-trip float representation, so decode(encode(v)) == v for finite floats.
"""

import math
from collections.abc import Sequence

from semdex.exceptions import VectorParseError

def encode_vector(values: Sequence[float]) -> str:
    """Encode a vector as ``[v0,v1,...]`` with no whitespace.

    Raises:
        VectorParseError: If any value is not a finite number
    """
    parts = []
    for i, value in enumerate(values):
        number = float(value)
        if not math.isfinite(number):
            raise VectorParseError(f"Non-finite value at index {i}: {value!r}")
        parts.append(repr(number))
    return "[" + ",".join(parts) + "]"

def decode_vector(text: str) -> list[float]:
    """Decode ``[v0, v1, ...]`` text into a list of floats.

    Whitespace around the brackets and around each value is ignored.
    ``[]`` decodes to an empty list.

    Raises:
        VectorParseError: If the brackets are missing or a value is not a finite number
    """
    stripped = text.strip()
    if len(stripped) < 2 or stripped[0] != "[" or stripped[-1] != "]":
        raise VectorParseError(f"Vector text must be enclosed in brackets: {_preview(text)}")

    inner = stripped[1:-1].strip()
    # "".split(",") is [""], not []
    if not inner:
        return []

    result = []
    for i, piece in enumerate(inner.split(",")):
        piece = piece.strip()
        try:
            number = float(piece)
        except ValueError:
            raise VectorParseError(f"Invalid number at index {i}: {piece!r}") from None
        if not math.isfinite(number):
            raise VectorParseError(f"Non-finite value at index {i}: {piece!r}")
        result.append(number)
    return result


def _preview(text: str, length: int = 40) -> str:
    return repr(text if len(text) <= length else text[:length] + "...")
