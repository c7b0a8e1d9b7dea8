"""Main-sequence star generation."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass

from ..constants import (
    CLASS_MASS_RANGES,
    FALLBACK_STAR_MASS,
    IMF_MAX_MASS,
    O_CLASS_SKEW,
    SOLAR_TEMPERATURE,
    SPECTRAL_THRESHOLDS,
    SUN_ABSOLUTE_MAGNITUDE,
)
from .names import generate_star_name
from .sampling import RandomContext, inverse_erf

logger = logging.getLogger(__name__)


class SpectralClass(enum.Enum):
    """Harvard spectral classes, hottest first."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"

    @classmethod
    def from_temperature(cls, temperature: float) -> SpectralClass:
        for letter, lower_bound in SPECTRAL_THRESHOLDS:
            if temperature >= lower_bound:
                return cls(letter)
        return cls.M


@dataclass(frozen=True)
class Star:
    """A generated star. Masses, radii and luminosities are solar units."""

    name: str
    mass: float
    radius: float
    luminosity: float
    temperature: float  # Kelvin
    metallicity: float  # [Fe/H] in dex
    absolute_magnitude: float
    spectral_class: SpectralClass

    @property
    def color(self) -> tuple[int, int, int]:
        return kelvin_to_rgb(self.temperature)


def kelvin_to_rgb(kelvin: float) -> tuple[int, int, int]:
    """Approximate blackbody color of a temperature."""
    temp = kelvin / 100.0
    if temp <= 66:
        r = 255.0
        g = 99.4708025861 * math.log(temp) - 161.1195681661
        if temp <= 19:
            b = 0.0
        else:
            b = 138.5177312231 * math.log(temp - 10) - 305.0447927307
    else:
        r = 329.698727446 * (temp - 60) ** -0.1332047592
        g = 288.1221695283 * (temp - 60) ** -0.0755148492
        b = 255.0
    return tuple(max(0, min(255, math.floor(c))) for c in (r, g, b))


# ---------------------------------------------------------------------------
# Mass sampling
# ---------------------------------------------------------------------------


def _parse_class(spectral_class: SpectralClass | str | None) -> SpectralClass | str | None:
    if spectral_class is None or isinstance(spectral_class, SpectralClass):
        return spectral_class
    tag = spectral_class.strip()
    if tag.lower() in ("", "random"):
        return None
    try:
        return SpectralClass(tag.upper())
    except ValueError:
        return tag


def _constrained_mass(ctx: RandomContext, spectral_class: SpectralClass | str) -> float:
    if not isinstance(spectral_class, SpectralClass):
        logger.warning(
            "Unknown spectral class %r, using %.1f solar masses",
            spectral_class, FALLBACK_STAR_MASS,
        )
        return FALLBACK_STAR_MASS
    lo, hi = CLASS_MASS_RANGES[spectral_class.value]
    if spectral_class is SpectralClass.O:
        # Skewed toward the low end of the bracket
        return lo + ctx.power_law(O_CLASS_SKEW) * (hi - lo)
    return ctx.uniform(lo, hi)


def _imf_mass(ctx: RandomContext) -> float:
    """Log-normal initial mass function, truncated below IMF_MAX_MASS."""
    mass = IMF_MAX_MASS
    while mass >= IMF_MAX_MASS:
        u = ctx.uniform(0, 1)
        term = math.sqrt(2) * inverse_erf(2 * u - 1)
        mass = math.exp(-1.3 + 1.1 * term) + 0.08
    return mass


# ---------------------------------------------------------------------------
# Scaling relations
# ---------------------------------------------------------------------------


def mass_luminosity(mass: float) -> float:
    if mass < 0.43:
        return 0.23 * mass**2.3
    elif mass < 2:
        return mass**4
    elif mass < 50:
        return 1.4 * mass**3.5
    else:
        return 32000 * mass


def mass_radius(mass: float) -> float:
    if mass < 1:
        return mass**0.9
    return mass**0.6


def generate_star(
    ctx: RandomContext, spectral_class: SpectralClass | str | None = None,
) -> Star:
    """Generate a star, optionally constrained to a spectral class."""
    target = _parse_class(spectral_class)
    mass = _imf_mass(ctx) if target is None else _constrained_mass(ctx, target)

    luminosity = mass_luminosity(mass)
    radius = mass_radius(mass)

    # Sum of four uniforms approximates a normal spread in dex
    metallicity = (ctx.random() + ctx.random() + ctx.random() + ctx.random() - 2) * 0.4
    z_factor = 10**metallicity
    radius *= z_factor**0.15
    luminosity *= z_factor**-0.1

    temperature = SOLAR_TEMPERATURE * (luminosity / radius**2) ** 0.25
    absolute_magnitude = SUN_ABSOLUTE_MAGNITUDE - 2.5 * math.log10(luminosity)

    star = Star(
        name=generate_star_name(ctx),
        mass=mass,
        radius=radius,
        luminosity=luminosity,
        temperature=temperature,
        metallicity=metallicity,
        absolute_magnitude=absolute_magnitude,
        spectral_class=SpectralClass.from_temperature(temperature),
    )
    logger.debug(
        "Generated %s star %s: M=%.3f L=%.4g T=%.0fK",
        star.spectral_class.value, star.name, mass, luminosity, temperature,
    )
    return star
