import hashlib
import json
import math
import operator

import numpy as np

from ..errors import IndexOutOfRangeError


def check_size(size) -> int:
    """Validate a matrix side length and return it as a plain ``int``."""
    size = operator.index(size)
    if size < 1:
        raise ValueError(f"graph size must be at least 1, got {size}")
    return size


def check_index(index, size: int) -> int:
    """Validate a vertex index against ``[0, size)``.

    Negative indices are rejected rather than wrapped from the end. Booleans are
    not vertex indices.
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError(f"vertex index must be an integer, got {type(index).__name__}")
    index = operator.index(index)
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(index, size)
    return index


def check_weight(weight) -> float:
    if isinstance(weight, (str, bytes)) or weight is None:
        raise TypeError(f"edge weight must be a real number, got {type(weight).__name__}")
    return float(weight)


def canonicalize(obj):
    """Recursively convert an object into a JSON-serializable structure
    that is independent of internal ordering.
    """
    if isinstance(obj, dict):
        return {
            str(key): canonicalize(obj[key]) for key in sorted(obj.keys(), key=lambda x: str(x))
        }
    elif isinstance(obj, (list, tuple)):
        return [canonicalize(item) for item in obj]
    elif isinstance(obj, float):
        # JSON has no NaN/inf literals
        return obj if math.isfinite(obj) else repr(obj)
    elif isinstance(obj, (int, str, bool)) or obj is None:
        return obj
    elif hasattr(obj, "tolist"):
        return canonicalize(obj.tolist())
    else:
        return str(obj)


def obj_canonicalized_hash(obj) -> str:
    canonical_obj = canonicalize(obj)
    # sort_keys + compact separators keep the serialization byte-stable
    obj_serialized = json.dumps(canonical_obj, sort_keys=True, separators=(",", ":")).encode(
        "utf-8"
    )
    hash_obj = hashlib.sha256()
    hash_obj.update(obj_serialized)
    return hash_obj.hexdigest()
