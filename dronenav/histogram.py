"""Polar histogram of obstacle distances around the vehicle."""

from __future__ import annotations

# Valid resolutions must fulfil 180 % (2 * ALPHA_RES) == 0,
# e.g. 1, 3, 5, 6, 10, 15, 18, 30, 45, 60.
ALPHA_RES = 6
GRID_LENGTH_Z = 360 // ALPHA_RES
GRID_LENGTH_E = 180 // ALPHA_RES

# Smallest positive normalised single precision float.
FLT_MIN = 1.1754943508222875e-38


class Histogram:
    """Distance to the nearest obstacle for each elevation/azimuth cell.

    Cells are addressed as ``histogram[e, z]`` with the elevation index first.
    Reading wraps both indices around the histogram; writing does not.
    """

    def __init__(self, res: int) -> None:
        self.resolution = res
        self._dist = [[0.0] * (360 // res) for _ in range(180 // res)]

    @property
    def e_dim(self) -> int:
        """Number of elevation cells."""
        return len(self._dist)

    @property
    def z_dim(self) -> int:
        """Number of azimuth cells."""
        return len(self._dist[0]) if self._dist else 0

    @property
    def shape(self) -> tuple[int, int]:
        """``(elevation cells, azimuth cells)``."""
        return self.e_dim, self.z_dim

    def __getitem__(self, index: tuple[int, int]) -> float:
        e, z = index
        return self._dist[e % self.e_dim][z % self.z_dim]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        e, z = index
        if not (0 <= e < self.e_dim and 0 <= z < self.z_dim):
            raise IndexError(f"histogram index {index} out of range {self.shape}")
        self._dist[e][z] = float(value)

    def upsample(self) -> None:
        """Turn a half-resolution histogram into one at ``ALPHA_RES``.

        Every cell is copied into the 2x2 block it covers at full resolution.
        """
        if self.resolution != ALPHA_RES * 2:
            raise RuntimeError(
                "upsample() can only be used on a half resolution histogram"
            )
        self.resolution //= 2
        self._dist = [
            [value for value in row for _ in (0, 1)]
            for row in self._dist
            for _ in (0, 1)
        ]

    def downsample(self) -> None:
        """Turn a histogram at ``ALPHA_RES`` into one with bins twice as large.

        Each new cell holds the mean of the 2x2 block it replaces.
        """
        if self.resolution != ALPHA_RES:
            raise RuntimeError(
                "downsample() can only be used on a full resolution histogram"
            )
        self.resolution *= 2
        self._dist = [
            [
                (a + b + c + d) / 4.0
                for a, b, c, d in zip(top[0::2], top[1::2], bottom[0::2], bottom[1::2])
            ]
            for top, bottom in zip(self._dist[0::2], self._dist[1::2])
        ]

    def set_zero(self) -> None:
        """Reset every cell to zero."""
        for row in self._dist:
            row[:] = [0.0] * len(row)

    def is_empty(self) -> bool:
        """Whether no cell holds a positive distance."""
        return not any(value > FLT_MIN for row in self._dist for value in row)