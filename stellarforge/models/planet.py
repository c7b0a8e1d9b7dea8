"""Planet classification and physical model."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Union

from ..constants import (
    ATMOSPHERE_CHANCE_PER_MASS,
    ATMOSPHERE_MIN_MASS,
    ATMOSPHERE_SCALE,
    COMPOSITION_RANGES,
    DESICCATION_TEMP,
    GIANT_PRESSURE_FACTOR,
    LOW_MASS_STAR,
    PLANET_COLORS,
    PLANET_MASS_RANGES,
    TERRESTRIAL_DRY_LOG_WATER,
    TERRESTRIAL_IRON,
    TERRESTRIAL_SILICATE,
    TEXTURE_SIZE,
    VOLATILE_DELIVERY_CHANCE,
    VOLATILE_DELIVERY_WATER,
    WATER_RETENTION_MAX_TEMP,
    WET_TERRESTRIAL_COLOR,
)
from .orbits import OrbitalSlot, ZoneBounds
from .physics import (
    Composition,
    PlanetType,
    bulk_structure,
    equilibrium_temperature,
    surface_temperature,
)
from .sampling import RandomContext
from .star import Star
from .texture import PlanetTexture, synthesize_texture

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NaturalRoll:
    """Classify the planet from its zone."""


@dataclass(frozen=True)
class ForcedType:
    """Skip classification and build a planet of ``planet_type``."""

    planet_type: PlanetType


GenerationRequest = Union[NaturalRoll, ForcedType]


@dataclass(frozen=True)
class Planet:
    """A fully generated planet. Only ``name`` is ever replaced afterwards."""

    name: str
    orbit: OrbitalSlot
    longitude_of_ascending_node: float  # radians
    mean_anomaly: float  # radians
    planet_type: PlanetType
    mass: float  # Earth masses
    radius: float  # Earth radii
    radius_km: float
    density: float  # g/cm^3
    composition: Composition
    pressure: float  # atm
    temperature: float  # surface, K
    equilibrium_temperature: float  # K
    color: str
    texture: PlanetTexture = field(repr=False, compare=False)

    @property
    def a(self) -> float:
        return self.orbit.a

    @property
    def e(self) -> float:
        return self.orbit.e

    @property
    def inclination(self) -> float:
        return self.orbit.inclination

    @property
    def is_giant(self) -> bool:
        return self.planet_type.is_giant


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def _roll_type(ctx: RandomContext, a: float, zones: ZoneBounds, star_mass: float) -> PlanetType:
    roll = ctx.random()
    if zones.in_habitable_zone(a):
        if roll < 0.98:
            planet_type = PlanetType.TERRESTRIAL
        elif roll < 0.99:
            planet_type = PlanetType.MINI_NEPTUNE
        else:
            planet_type = PlanetType.GAS_GIANT
    elif a > zones.frost_line:
        if roll < 0.40:
            planet_type = PlanetType.GAS_GIANT
        elif roll < 0.75:
            planet_type = PlanetType.ICE_GIANT
        elif roll < 0.98:
            planet_type = PlanetType.MINI_NEPTUNE
        else:
            planet_type = PlanetType.TERRESTRIAL
    else:
        if roll < 0.03:
            planet_type = PlanetType.GAS_GIANT
        elif roll < 0.08:
            planet_type = PlanetType.ICE_GIANT
        elif roll < 0.25:
            planet_type = PlanetType.MINI_NEPTUNE
        else:
            planet_type = PlanetType.TERRESTRIAL

    # Small disks rarely build giants
    if star_mass < LOW_MASS_STAR and planet_type is PlanetType.GAS_GIANT:
        demote = ctx.random()
        if demote < 0.5:
            planet_type = PlanetType.MINI_NEPTUNE
        elif demote < 0.85:
            planet_type = PlanetType.TERRESTRIAL
    return planet_type


def classify(
    ctx: RandomContext, request: GenerationRequest, a: float, zones: ZoneBounds, star_mass: float,
) -> PlanetType:
    if isinstance(request, ForcedType):
        return request.planet_type
    return _roll_type(ctx, a, zones, star_mass)


# ---------------------------------------------------------------------------
# Composition and atmosphere
# ---------------------------------------------------------------------------


def _terrestrial_water(ctx: RandomContext, a: float, eq_temp: float, zones: ZoneBounds) -> float:
    if eq_temp > WATER_RETENTION_MAX_TEMP:
        return 0.0
    water = 10 ** ctx.uniform(*TERRESTRIAL_DRY_LOG_WATER)
    volatile_rich = a >= zones.hz_inner or a > zones.frost_line * 0.7
    if volatile_rich and ctx.chance(VOLATILE_DELIVERY_CHANCE):
        water = ctx.uniform(*VOLATILE_DELIVERY_WATER)
    return water


def _raw_composition(
    ctx: RandomContext, planet_type: PlanetType, a: float, eq_temp: float, zones: ZoneBounds,
) -> Composition:
    if planet_type is PlanetType.TERRESTRIAL:
        water = _terrestrial_water(ctx, a, eq_temp, zones)
        silicate = ctx.uniform(*TERRESTRIAL_SILICATE)
        iron = ctx.uniform(*TERRESTRIAL_IRON)
        return Composition.normalized(iron, silicate, water, 0.0)

    iron_r, silicate_r, water_r, hydrogen_r = COMPOSITION_RANGES[planet_type.value]
    hydrogen = ctx.uniform(*hydrogen_r)
    water = ctx.uniform(*water_r)
    silicate = ctx.uniform(*silicate_r)
    iron = ctx.uniform(*iron_r)
    return Composition.normalized(iron, silicate, water, hydrogen)


def _pressure(ctx: RandomContext, planet_type: PlanetType, mass: float) -> float:
    if planet_type.is_giant:
        # Display proxy for a bottomless envelope
        return mass * GIANT_PRESSURE_FACTOR
    if mass > ATMOSPHERE_MIN_MASS and ctx.chance(min(1.0, mass * ATMOSPHERE_CHANCE_PER_MASS)):
        return mass**2 * ctx.uniform(*ATMOSPHERE_SCALE)
    return 0.0


def _tint(planet_type: PlanetType, comp: Composition) -> str:
    if planet_type is PlanetType.TERRESTRIAL and comp.water > 0.2:
        return WET_TERRESTRIAL_COLOR
    return PLANET_COLORS[planet_type.value]


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def create_planet(
    ctx: RandomContext,
    star: Star,
    orbit: OrbitalSlot,
    zones: ZoneBounds,
    request: GenerationRequest = NaturalRoll(),
    texture_size: int = TEXTURE_SIZE,
) -> Planet:
    """Classify and physically model the planet occupying ``orbit``."""
    a = orbit.a
    eq_temp = equilibrium_temperature(star.luminosity, a)
    planet_type = classify(ctx, request, a, zones, star.mass)

    lo, hi = PLANET_MASS_RANGES[planet_type.value]
    mass = ctx.log_uniform(lo, hi)

    comp = _raw_composition(ctx, planet_type, a, eq_temp, zones)
    pressure = _pressure(ctx, planet_type, mass)
    temperature = surface_temperature(eq_temp, pressure)

    if planet_type is PlanetType.TERRESTRIAL and temperature > DESICCATION_TEMP and comp.water > 0:
        comp = comp.without_water()

    radius, radius_km, density = bulk_structure(mass, comp, temperature)

    anomaly = ctx.uniform(0, 2 * math.pi)
    lan = ctx.uniform(0, 2 * math.pi)

    texture = synthesize_texture(ctx, planet_type, temperature, comp, pressure, texture_size)

    logger.debug(
        "Planet at %.3f AU: %s, %.2f M_earth, %.0f K, %.3g atm",
        a, planet_type.value, mass, temperature, pressure,
    )
    return Planet(
        name="",
        orbit=orbit,
        longitude_of_ascending_node=lan,
        mean_anomaly=anomaly,
        planet_type=planet_type,
        mass=mass,
        radius=radius,
        radius_km=radius_km,
        density=density,
        composition=comp,
        pressure=pressure,
        temperature=temperature,
        equilibrium_temperature=eq_temp,
        color=_tint(planet_type, comp),
        texture=texture,
    )
