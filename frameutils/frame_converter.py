"""Look-up-table conversion of 8-bit frames into float values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

_TABLE_SIZE = 256


@dataclass
class FrameConverterParams:
    """The values of a conversion table, one per 8-bit input value."""

    values: list = field(default_factory=list)


class FrameConverter:
    """Maps every 8-bit element of a frame through a table of float values."""

    def __init__(self, values: Sequence[float]) -> None:
        self._table = np.array(values, dtype=np.float32).reshape(-1, 1)
        self.params: Optional[FrameConverterParams] = None

    @classmethod
    def from_params(cls, params: FrameConverterParams) -> "FrameConverter":
        """Build a converter from a parameter object, keeping a reference to it."""
        converter = cls(params.values)
        converter.params = params
        return converter

    def convert(self, mat) -> np.ndarray:
        """Return a float32 array of the same shape with every value looked up."""
        frame = np.asarray(mat)
        if frame.dtype != np.uint8:
            raise TypeError(f"frame must hold 8-bit unsigned values, not {frame.dtype}")
        if self._table.shape[0] != _TABLE_SIZE:
            raise ValueError(
                f"conversion table needs {_TABLE_SIZE} values, has {self._table.shape[0]}"
            )
        return self._table[:, 0][frame]

    @property
    def table(self) -> np.ndarray:
        """The conversion table as a column of float32 values."""
        return self._table