"""Whole-system generation: count, orbits, planets, balancing and names."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import TEXTURE_SIZE
from .balance import balance_population
from .names import name_planets
from .orbits import DensityTier, ZoneBounds, generate_orbits, target_planet_count
from .physics import PlanetType
from .planet import Planet, create_planet
from .sampling import RandomContext
from .star import SpectralClass, Star, generate_star

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemData:
    """Planets in ascending orbital order plus the zone distances (AU)."""

    planets: tuple[Planet, ...]
    frost_line: float
    hz_inner: float
    hz_outer: float

    @property
    def terrestrial_count(self) -> int:
        return sum(1 for p in self.planets if p.planet_type is PlanetType.TERRESTRIAL)


def generate_planets(
    ctx: RandomContext,
    star: Star,
    density: DensityTier | str | None = DensityTier.DEFAULT,
    texture_size: int = TEXTURE_SIZE,
) -> SystemData:
    """Generate the planets orbiting ``star``."""
    tier = DensityTier.parse(density)
    zones = ZoneBounds.for_luminosity(star.luminosity)

    count = target_planet_count(ctx, star, tier)
    orbits = generate_orbits(ctx, star.luminosity, count)

    planets = tuple(
        create_planet(ctx, star, orbit, zones, texture_size=texture_size) for orbit in orbits
    )
    planets = balance_population(ctx, star, planets, zones, texture_size)
    if planets:
        planets = name_planets(ctx, planets)

    logger.debug("Generated %d planets (%s tier) around %s", len(planets), tier.value, star.name)
    return SystemData(
        planets=planets,
        frost_line=zones.frost_line,
        hz_inner=zones.hz_inner,
        hz_outer=zones.hz_outer,
    )


class StellarSystem:
    """A star and its planets, regenerable from a seed."""

    def __init__(
        self,
        spectral_class: SpectralClass | str | None = None,
        density: DensityTier | str | None = DensityTier.DEFAULT,
        seed: int | None = None,
        texture_size: int = TEXTURE_SIZE,
    ) -> None:
        self.context = RandomContext(seed)
        self.seed = self.context.seed
        self.spectral_class = spectral_class
        self.density = DensityTier.parse(density)
        self.texture_size = texture_size

        self.star = generate_star(self.context, spectral_class)
        self.data = generate_planets(self.context, self.star, self.density, texture_size)
        logger.info(
            "System %s (seed %d): %s-class star, %d planets",
            self.star.name, self.seed, self.star.spectral_class.value, len(self.planets),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.star.name!r}, seed={self.seed}, planets={len(self.planets)})"

    @property
    def planets(self) -> tuple[Planet, ...]:
        return self.data.planets

    @property
    def frost_line(self) -> float:
        return self.data.frost_line
