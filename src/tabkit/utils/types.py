"""Shared typing aliases for TabKit."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]


class TableLike(Protocol):
    """Anything exposing tabulated nodes ``x`` and values ``f``."""

    x: Any
    f: Any


Table: TypeAlias = TableLike | Mapping[str, Any]
