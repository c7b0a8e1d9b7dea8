"""Orbital architecture: zones, planet counts and stable orbit placement."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import (
    BOILING_POINT,
    CANDIDATES_PER_PLANET,
    DENSITY_TIERS,
    ECCENTRICITY_SKEW,
    EQ_TEMP_FACTOR,
    FROST_LINE_FACTOR,
    HZ_INNER_FACTOR,
    HZ_OUTER_FACTOR,
    INCLINATION_SKEW,
    LOW_MASS_PLANET_CAP,
    LOW_MASS_STAR,
    MAX_ECCENTRICITY,
    MAX_HOT_FRACTION,
    MAX_INCLINATION_DEG,
    MIN_SPACING_RATIO,
    ORBIT_MAX_AU,
    ORBIT_MIN_AU,
    OUTER_PUSH_FACTOR,
)
from .sampling import RandomContext

if TYPE_CHECKING:
    from .star import Star

logger = logging.getLogger(__name__)


class DensityTier(enum.Enum):
    """How crowded a generated system should be."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"
    DEFAULT = "default"

    @property
    def count_range(self) -> tuple[int, int]:
        lo, hi, _ = DENSITY_TIERS[self.value]
        return lo, hi

    @property
    def cap(self) -> int | None:
        return DENSITY_TIERS[self.value][2]

    @classmethod
    def parse(cls, name: DensityTier | str | None) -> DensityTier:
        """Look up a tier by name, falling back to DEFAULT."""
        if isinstance(name, DensityTier):
            return name
        if name is None:
            return cls.DEFAULT
        try:
            return cls(name.strip().lower())
        except ValueError:
            logger.warning("Unknown density tier %r, using default", name)
            return cls.DEFAULT


@dataclass(frozen=True)
class ZoneBounds:
    """Luminosity-derived distances (AU) that shape a system."""

    frost_line: float
    hz_inner: float
    hz_outer: float
    hot_limit: float  # Inside this, equilibrium temperature exceeds boiling

    @classmethod
    def for_luminosity(cls, luminosity: float) -> ZoneBounds:
        root_l = math.sqrt(luminosity)
        return cls(
            frost_line=FROST_LINE_FACTOR * root_l,
            hz_inner=HZ_INNER_FACTOR * root_l,
            hz_outer=HZ_OUTER_FACTOR * root_l,
            hot_limit=(EQ_TEMP_FACTOR * luminosity**0.25 / BOILING_POINT) ** 2,
        )

    def in_habitable_zone(self, a: float) -> bool:
        return self.hz_inner <= a <= self.hz_outer


@dataclass(frozen=True)
class OrbitalSlot:
    """Orbit of one planet: semi-major axis (AU), eccentricity, inclination (deg)."""

    a: float
    e: float
    inclination: float


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def target_planet_count(ctx: RandomContext, star: Star, tier: DensityTier) -> int:
    """Draw how many planets a system around ``star`` should have."""
    if tier is DensityTier.NONE:
        return 0

    lo, hi = tier.count_range
    count = math.floor(ctx.uniform(lo, hi))
    count += _round_half_up(star.metallicity * 4)
    if tier.cap is not None:
        count = min(count, tier.cap)
    if star.mass < LOW_MASS_STAR and tier is not DensityTier.EXTREME:
        count = min(count, LOW_MASS_PLANET_CAP)
    return max(1, count)


def _accept_stable(candidates: list[float], count: int, hot_limit: float) -> list[float]:
    """Greedy scan keeping well-spaced orbits and few hot ones."""
    stable: list[float] = []
    max_hot = math.floor(count * MAX_HOT_FRACTION)
    hot = 0
    for candidate in candidates:
        if stable and candidate < stable[-1] * MIN_SPACING_RATIO:
            continue
        if candidate < hot_limit:
            if hot >= max_hot:
                continue
            hot += 1
        stable.append(candidate)
        if len(stable) >= count:
            break
    return stable


def _guarantee_outer(stable: list[float], count: int, hz_inner: float) -> None:
    """Push an orbit past the habitable-zone inner edge if too few lie there."""
    min_outer = 2 if count > 10 else 1
    if len(stable) < min_outer:
        return
    if sum(1 for a in stable if a >= hz_inner) >= min_outer:
        return

    start = len(stable) - min_outer
    if stable[start] < hz_inner:
        logger.debug("Moving orbit %d from %.3f AU to %.3f AU", start, stable[start], hz_inner * OUTER_PUSH_FACTOR)
        stable[start] = hz_inner * OUTER_PUSH_FACTOR
    for k in range(start + 1, len(stable)):
        if stable[k] < stable[k - 1] * MIN_SPACING_RATIO:
            stable[k] = stable[k - 1] * MIN_SPACING_RATIO


def generate_orbits(ctx: RandomContext, luminosity: float, count: int) -> list[OrbitalSlot]:
    """Place up to ``count`` stable orbits, innermost first."""
    if count <= 0:
        return []

    zones = ZoneBounds.for_luminosity(luminosity)
    candidates = sorted(
        ctx.log_uniform(ORBIT_MIN_AU, ORBIT_MAX_AU)
        for _ in range(count * CANDIDATES_PER_PLANET)
    )
    stable = _accept_stable(candidates, count, zones.hot_limit)
    _guarantee_outer(stable, count, zones.hz_inner)

    if len(stable) < count:
        logger.debug("Placed %d of %d requested orbits", len(stable), count)

    return [
        OrbitalSlot(
            a=a,
            e=ctx.power_law(ECCENTRICITY_SKEW) * MAX_ECCENTRICITY,
            inclination=ctx.power_law(INCLINATION_SKEW) * MAX_INCLINATION_DEG,
        )
        for a in stable
    ]
