"""Random sampling helpers and gradient noise for StellarForge.

Every draw in a generation run goes through one ``RandomContext`` so that a
seed reproduces a whole system, textures included.
"""

from __future__ import annotations

import math
import random
from typing import MutableSequence, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

_ERF_A = 0.147
_PERM_SIZE = 256


def inverse_erf(x: float) -> float:
    """Closed-form inverse error function (Winitzki approximation)."""
    if abs(x) >= 1.0:
        return math.copysign(math.inf, x)
    ln_term = math.log(1.0 - x * x)
    part1 = 2.0 / (math.pi * _ERF_A) + ln_term / 2.0
    part2 = ln_term / _ERF_A
    return math.copysign(math.sqrt(math.sqrt(part1 * part1 - part2) - part1), x)


# ---------------------------------------------------------------------------
# Gradient noise
# ---------------------------------------------------------------------------


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t, a, b):
    return a + t * (b - a)


def _grad(hash_: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    h = hash_ & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)


class NoiseField:
    """3-D lattice gradient noise over a shuffled permutation table."""

    def __init__(self, rng: random.Random) -> None:
        table = list(range(_PERM_SIZE))
        # Fisher–Yates, drawing from the shared stream
        for i in range(_PERM_SIZE - 1, 0, -1):
            j = math.floor(rng.random() * (i + 1))
            table[i], table[j] = table[j], table[i]
        self.perm = np.array(table + table, dtype=np.int64)

    def noise(self, x, y, z):
        """Gradient noise at (x, y, z); scalars give a float, arrays an array."""
        x, y, z = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64),
            np.asarray(z, dtype=np.float64),
        )
        fx, fy, fz = np.floor(x), np.floor(y), np.floor(z)
        xi = fx.astype(np.int64) & 255
        yi = fy.astype(np.int64) & 255
        zi = fz.astype(np.int64) & 255
        x, y, z = x - fx, y - fy, z - fz
        u, v, w = _fade(x), _fade(y), _fade(z)

        p = self.perm
        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        result = _lerp(
            w,
            _lerp(
                v,
                _lerp(u, _grad(p[aa], x, y, z), _grad(p[ba], x - 1, y, z)),
                _lerp(u, _grad(p[ab], x, y - 1, z), _grad(p[bb], x - 1, y - 1, z)),
            ),
            _lerp(
                v,
                _lerp(u, _grad(p[aa + 1], x, y, z - 1), _grad(p[ba + 1], x - 1, y, z - 1)),
                _lerp(u, _grad(p[ab + 1], x, y - 1, z - 1), _grad(p[bb + 1], x - 1, y - 1, z - 1)),
            ),
        )
        if result.ndim == 0:
            return float(result)
        return result

    def fbm(self, x, y, z, octaves: int):
        """Fractal sum of ``octaves`` noise layers, normalized to roughly [-1, 1]."""
        total = 0.0
        frequency = 1.0
        amplitude = 1.0
        max_value = 0.0
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        z = np.asarray(z, dtype=np.float64)
        for _ in range(octaves):
            total = total + self.noise(x * frequency, y * frequency, z * frequency) * amplitude
            max_value += amplitude
            amplitude *= 0.5
            frequency *= 2.0
        if max_value == 0.0:
            return 0.0
        return total / max_value


# ---------------------------------------------------------------------------
# Random context
# ---------------------------------------------------------------------------


class RandomContext:
    """Seedable random stream plus the noise field derived from it."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed if seed is not None else random.getrandbits(32)
        self.rng = random.Random(self.seed)
        self.noise = NoiseField(self.rng)

    def random(self) -> float:
        return self.rng.random()

    def uniform(self, lo: float, hi: float) -> float:
        return self.rng.random() * (hi - lo) + lo

    def power_law(self, k: float) -> float:
        """U**k for U ~ Uniform(0, 1); k > 1 skews toward zero."""
        return self.rng.random() ** k

    def log_uniform(self, lo: float, hi: float) -> float:
        return math.exp(self.uniform(math.log(lo), math.log(hi)))

    def chance(self, probability: float) -> bool:
        return self.rng.random() < probability

    def choice(self, seq: Sequence[T]) -> T:
        return seq[math.floor(self.rng.random() * len(seq))]

    def shuffle(self, seq: MutableSequence[T]) -> None:
        for i in range(len(seq) - 1, 0, -1):
            j = math.floor(self.rng.random() * (i + 1))
            seq[i], seq[j] = seq[j], seq[i]

    def numpy_rng(self) -> np.random.Generator:
        """Independent numpy generator seeded from this stream."""
        return np.random.default_rng(self.rng.getrandbits(64))
