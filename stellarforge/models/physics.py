"""Planet classes, bulk composition and the physical relations between them."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from ..constants import (
    CM_PER_KM,
    EARTH_MASS_G,
    EARTH_RADIUS_KM,
    EQ_TEMP_FACTOR,
    FALLBACK_IRON,
    FALLBACK_SILICATE,
    GREENHOUSE_PRESSURE_RANGE,
    IRON_DENSITY,
    SILICATE_DENSITY,
    WATER_DENSITY,
)


class PlanetType(enum.Enum):
    """Planet classifications."""

    TERRESTRIAL = "Terrestrial"
    MINI_NEPTUNE = "Mini-Neptune"
    ICE_GIANT = "Ice Giant"
    GAS_GIANT = "Gas Giant"

    @property
    def is_giant(self) -> bool:
        """Gas Giants, Ice Giants and Mini-Neptunes share the banded envelope model."""
        return self is not PlanetType.TERRESTRIAL


@dataclass(frozen=True)
class Composition:
    """Mass fractions of iron, silicate, water and hydrogen; always sums to 1."""

    iron: float
    silicate: float
    water: float
    hydrogen: float

    @classmethod
    def normalized(
        cls, iron: float, silicate: float, water: float, hydrogen: float,
    ) -> Composition:
        total = iron + silicate + water + hydrogen
        if total <= 0:
            return cls(FALLBACK_IRON, FALLBACK_SILICATE, 0.0, 0.0)
        return cls(iron / total, silicate / total, water / total, hydrogen / total)

    def without_water(self) -> Composition:
        """Drop the water fraction and renormalize the rest."""
        return Composition.normalized(self.iron, self.silicate, 0.0, self.hydrogen)

    @property
    def total(self) -> float:
        return self.iron + self.silicate + self.water + self.hydrogen

    def as_dict(self) -> dict[str, float]:
        return {
            "iron": self.iron,
            "silicate": self.silicate,
            "water": self.water,
            "hydrogen": self.hydrogen,
        }


def equilibrium_temperature(luminosity: float, a: float) -> float:
    """Blackbody temperature (K) at ``a`` AU from a star of ``luminosity`` L_sun."""
    return EQ_TEMP_FACTOR * luminosity**0.25 / math.sqrt(a)


def surface_temperature(eq_temp: float, pressure: float) -> float:
    """Equilibrium temperature plus the pressure-driven greenhouse term."""
    lo, hi = GREENHOUSE_PRESSURE_RANGE
    if not lo < pressure < hi:
        return eq_temp
    greenhouse = max(0.0, (157.5 * math.log10(pressure) + 35) / 255) * eq_temp
    return eq_temp + greenhouse


def hydrogen_density(temperature: float) -> float:
    """Thermally inflated density (g/cm^3) of a light envelope."""
    return max(0.1, 1.5 - 0.3 * math.log10(max(1.0, temperature)))


def bulk_structure(mass: float, comp: Composition, temperature: float) -> tuple[float, float, float]:
    """Return (radius in Earth radii, radius in km, density in g/cm^3)."""
    mass_g = mass * EARTH_MASS_G
    volume = (
        mass_g * comp.iron / IRON_DENSITY
        + mass_g * comp.silicate / SILICATE_DENSITY
        + mass_g * comp.water / WATER_DENSITY
        + mass_g * comp.hydrogen / hydrogen_density(temperature)
    )
    radius_cm = (3 * volume / (4 * math.pi)) ** (1 / 3)
    radius_km = radius_cm / CM_PER_KM
    return radius_km / EARTH_RADIUS_KM, radius_km, mass_g / volume
