"""Enforce a minimum share of terrestrial planets in crowded systems."""

from __future__ import annotations

import dataclasses
import logging
import math

from ..constants import BALANCE_MIN_PLANETS, MIN_TERRESTRIAL_FRACTION, TEXTURE_SIZE
from .orbits import ZoneBounds
from .physics import PlanetType
from .planet import ForcedType, Planet, create_planet
from .sampling import RandomContext
from .star import Star

logger = logging.getLogger(__name__)

_FORCE_TERRESTRIAL = ForcedType(PlanetType.TERRESTRIAL)


def required_terrestrials(planet_count: int) -> int:
    if planet_count <= BALANCE_MIN_PLANETS:
        return 0
    return math.ceil(planet_count * MIN_TERRESTRIAL_FRACTION)


def balance_population(
    ctx: RandomContext,
    star: Star,
    planets: tuple[Planet, ...],
    zones: ZoneBounds,
    texture_size: int = TEXTURE_SIZE,
) -> tuple[Planet, ...]:
    """Return ``planets`` with enough slots rebuilt as terrestrial worlds.

    Rebuilt slots keep their whole orbit (slot and phase), so ordering by
    semi-major axis is untouched.
    """
    required = required_terrestrials(len(planets))
    current = sum(1 for p in planets if p.planet_type is PlanetType.TERRESTRIAL)
    shortfall = required - current
    if shortfall <= 0:
        return planets

    candidates = [i for i, p in enumerate(planets) if p.planet_type is not PlanetType.TERRESTRIAL]
    ctx.shuffle(candidates)

    balanced = list(planets)
    for index in candidates[:shortfall]:
        old = planets[index]
        rebuilt = create_planet(ctx, star, old.orbit, zones, _FORCE_TERRESTRIAL, texture_size)
        balanced[index] = dataclasses.replace(
            rebuilt,
            longitude_of_ascending_node=old.longitude_of_ascending_node,
            mean_anomaly=old.mean_anomaly,
        )

    logger.debug("Converted %d of %d planets to terrestrial", min(shortfall, len(candidates)), len(planets))
    return tuple(balanced)
