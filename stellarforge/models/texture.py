"""Procedural planet surface textures.

A texture is a square RGBA image of the planet's disc. Giants get banded,
domain-warped cloud decks; terrestrial worlds get lava, ocean or terrain
maps, optionally under a cloud layer. Everything is evaluated on whole
pixel grids with numpy.
"""

from __future__ import annotations

import colorsys
import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pygame

from ..constants import (
    CLOUD_HOT_BOOST,
    CLOUD_HOT_TEMP,
    CLOUD_MIN_PRESSURE,
    CLOUD_THRESHOLD,
    LAVA_BRIGHT,
    LAVA_COOL,
    LAVA_DARK,
    LAVA_TEMP,
    LIQUID_WATER_RANGE,
    OCEAN_WORLD_MIN_WATER,
    SNOW_MAX_TEMP,
    STORM_CHANCE,
    STORM_RADIUS,
    TEXTURE_SIZE,
    VEGETATION_RANGE,
)
from .physics import Composition, PlanetType
from .sampling import RandomContext

logger = logging.getLogger(__name__)

# Positions of the giant color ramp: dark -> base -> light -> base -> accent
_RAMP_STOPS = np.array([0.0, 0.3, 0.6, 0.8, 1.0])


@dataclass(frozen=True, eq=False)
class PlanetTexture:
    """Read-only RGBA pixels, shape (size, size, 4), dtype uint8."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        self.pixels.setflags(write=False)

    @property
    def size(self) -> int:
        return self.pixels.shape[0]

    def to_surface(self) -> pygame.Surface:
        """Copy the pixels into a new per-pixel-alpha pygame surface."""
        return pygame.image.frombytes(self.pixels.tobytes(), (self.size, self.size), "RGBA")

    def save_png(self, path: Path | str) -> Path:
        path = Path(path)
        pygame.image.save(self.to_surface(), str(path))
        return path


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _hsl(hue: float, saturation: float, lightness: float) -> np.ndarray:
    r, g, b = colorsys.hls_to_rgb(hue % 1.0, lightness, saturation)
    return np.array([round(r * 255), round(g * 255), round(b * 255)], dtype=np.float64)


def _mix(t: np.ndarray, a, b) -> np.ndarray:
    """Per-pixel lerp between two RGB colors; t has shape (H, W)."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return a + t[..., None] * (b - a)


def _grid(size: int) -> tuple[np.ndarray, np.ndarray]:
    coords = np.arange(size, dtype=np.float64) / size
    return np.meshgrid(coords, coords)  # nx varies along columns, ny along rows


def _disc_mask(size: int) -> np.ndarray:
    centers = np.arange(size, dtype=np.float64) + 0.5 - size / 2
    dx, dy = np.meshgrid(centers, centers)
    return dx * dx + dy * dy <= (size / 2) ** 2


# ---------------------------------------------------------------------------
# Giant planets
# ---------------------------------------------------------------------------


def _giant_palette(ctx: RandomContext, planet_type: PlanetType, temperature: float) -> list[np.ndarray]:
    hue = ctx.random()
    sat = ctx.uniform(0.3, 0.8)
    light = ctx.uniform(0.4, 0.7)

    if planet_type is PlanetType.GAS_GIANT:
        if temperature < 150:
            # Cold: pale ammonia-cloud yellows
            hue = ctx.uniform(0.08, 0.14)
            sat, light = 0.4, 0.75
        elif temperature > 1000:
            # Hot: blue or magenta, dark
            hue = ctx.uniform(0.6, 0.75) if ctx.random() > 0.5 else ctx.uniform(0.95, 1.05)
            sat, light = 0.8, 0.4
        elif ctx.random() > 0.5:
            hue = ctx.uniform(0.05, 0.15)
    elif planet_type is PlanetType.ICE_GIANT:
        hue = ctx.uniform(0.45, 0.65)
        sat, light = 0.6, 0.65

    base = _hsl(hue, sat, light)
    dark = _hsl(hue, min(1.0, sat + 0.2), max(0.0, light - 0.2))
    bright = _hsl(hue + 0.05, max(0.0, sat - 0.1), min(1.0, light + 0.2))
    accent = _hsl(hue + 0.5, sat, max(0.0, light - 0.1))
    return [dark, base, bright, base, accent]


def _blend_storm(
    bands: np.ndarray, swirl: np.ndarray, nx: np.ndarray, ny: np.ndarray, cx: float, cy: float,
) -> np.ndarray:
    """Fade ``bands`` toward a swirl inside an ellipse twice as wide as it is tall."""
    dist = np.hypot(nx - cx, (ny - cy) * 2.0)
    weight = 1 - dist / STORM_RADIUS
    return np.where(dist < STORM_RADIUS, bands + weight * (swirl + 0.5 - bands), bands)


def _render_giant(
    ctx: RandomContext, planet_type: PlanetType, temperature: float, size: int, seed: float,
) -> np.ndarray:
    palette = _giant_palette(ctx, planet_type, temperature)
    band_scale = ctx.uniform(10, 40)
    turbulence = ctx.uniform(0.5, 3.0)
    detail_scale = ctx.uniform(2, 6)
    has_storm = ctx.random() < STORM_CHANCE
    storm_x = ctx.uniform(0.2, 0.8)
    storm_y = ctx.uniform(0.4, 0.6)

    noise = ctx.noise
    nx, ny = _grid(size)

    # Domain warp: two coarse fields displace the detail lookup
    qx = noise.fbm(nx + seed, ny + seed, 0.0, 2)
    qy = noise.fbm(nx + seed + 5.2, ny + seed + 1.3, 0.0, 2)
    n = noise.fbm(nx * detail_scale + qx * turbulence, ny * band_scale + qy * turbulence, seed, 4)
    bands = np.sin(ny * band_scale + qx * 2.0) + n * 0.5

    if has_storm:
        swirl = noise.fbm(nx * 15, ny * 15, seed + 10, 3)
        bands = _blend_storm(bands, swirl, nx, ny, storm_x, storm_y)

    value = np.clip((bands + 1.5) / 3.0, 0.0, 1.0)
    channels = [
        np.interp(value, _RAMP_STOPS, [color[c] for color in palette]) for c in range(3)
    ]
    return np.stack(channels, axis=-1)


# ---------------------------------------------------------------------------
# Terrestrial planets
# ---------------------------------------------------------------------------


def _terrain_palette(ctx: RandomContext, temperature: float) -> dict[str, np.ndarray]:
    shift_r = (ctx.random() - 0.5) * 40
    shift_g = (ctx.random() - 0.5) * 40
    shift_b = (ctx.random() - 0.5) * 40

    if temperature < 250:
        palette = {
            "sand": (200, 200, 220),
            "rock": (80 + shift_r, 90 + shift_g, 100 + shift_b),
            "grass": (220, 230, 255),
            "forest": (100, 120, 140),
            "ocean": (10, 20, 50),
            "snow": (245, 250, 255),
        }
    elif temperature > 350:
        if ctx.random() > 0.5:
            sand, rock = (200 + abs(shift_r), 120, 80), (100, 60, 50)
        else:
            sand, rock = (220, 200 + abs(shift_g), 140), (120, 110, 90)
        palette = {
            "sand": sand,
            "rock": rock,
            "grass": sand,
            "forest": rock,
            "ocean": (10, 40, 90),
            "snow": (255, 255, 255),
        }
    else:
        palette = {
            "sand": (194 + shift_r, 178 + shift_g, 128 + shift_b),
            "rock": (100, 90, 80),
            "grass": (50 + shift_r * 0.5, 100 + abs(shift_g), 40),
            "forest": (20, 60, 20),
            "ocean": (10, 40, 90),
            "snow": (240, 240, 255),
        }
    palette = {key: np.array(color, dtype=np.float64) for key, color in palette.items()}
    palette["shallow"] = palette["ocean"] + np.array([20.0, 40.0, 30.0])
    return palette


def _land_colors(
    palette: dict[str, np.ndarray], altitude: np.ndarray, moisture: np.ndarray, temperature: float,
) -> np.ndarray:
    """Elevation bands above sea level: sand, grass, forest, rock."""
    veg_lo, veg_hi = VEGETATION_RANGE
    can_have_life = veg_lo <= temperature <= veg_hi

    sand = np.where((moisture > 0.6)[..., None], palette["sand"] * 0.9, palette["sand"])
    rock = np.broadcast_to(palette["rock"], sand.shape)
    if can_have_life:
        lowland = np.where((moisture > 0.4)[..., None], palette["grass"], sand)
        upland = np.where((moisture > 0.3)[..., None], palette["forest"], rock)
    else:
        lowland = sand
        upland = rock

    altitude_3d = altitude[..., None]
    return np.where(
        altitude_3d < 0.05,
        sand,
        np.where(altitude_3d < 0.2, lowland, np.where(altitude_3d < 0.4, upland, rock)),
    )


def _render_terrestrial(
    ctx: RandomContext, temperature: float, comp: Composition, size: int, seed: float,
) -> np.ndarray:
    liquid_lo, liquid_hi = LIQUID_WATER_RANGE
    can_hold_water = liquid_lo <= temperature <= liquid_hi
    is_ocean_world = comp.water > OCEAN_WORLD_MIN_WATER and can_hold_water
    is_lava = temperature > LAVA_TEMP

    palette = _terrain_palette(ctx, temperature)
    terrain_scale = ctx.uniform(2.5, 6.0)
    detail_scale = ctx.uniform(8.0, 15.0)

    noise = ctx.noise
    nx, ny = _grid(size)

    if is_lava:
        crust = noise.fbm(nx * 6, ny * 6, seed + 10, 4)
        glow = crust / 0.45
        molten = _mix(glow, LAVA_BRIGHT, LAVA_COOL)
        molten[..., 2] = 0.0
        return np.where((crust < 0.45)[..., None], molten, np.array(LAVA_DARK, dtype=np.float64))

    if is_ocean_world:
        # Whole-surface ocean; depth shading only
        depth = noise.fbm(nx * 3, ny * 3, seed, 3)
        return _mix(depth, palette["ocean"], palette["shallow"])

    height = noise.fbm(nx * terrain_scale, ny * terrain_scale, seed, 6)
    moisture = noise.fbm(nx * detail_scale + 10, ny * detail_scale + 10, seed + 50, 4)

    sea_level = min(1.0, comp.water * 1000) if can_hold_water and comp.water > 0 else -1.0

    altitude = (height - sea_level) / max(1.0 - sea_level, 1e-6)
    land = _land_colors(palette, altitude, moisture, temperature)
    if temperature < SNOW_MAX_TEMP:
        latitude = np.abs(ny - 0.5) * 2
        land = np.where((latitude > 0.8 - altitude * 0.2)[..., None], palette["snow"], land)

    grain = ctx.numpy_rng().uniform(-7.5, 7.5, size=(size, size))
    land = land + grain[..., None]

    if sea_level <= 0:
        return land
    depth = np.clip(height / sea_level, 0.0, 1.0)
    water = _mix(depth, palette["ocean"], palette["shallow"])
    return np.where((height < sea_level)[..., None], water, land)


def _cloud_alpha(ctx: RandomContext, temperature: float, size: int, seed: float) -> np.ndarray:
    cloud_scale = ctx.uniform(2.5, 4.5)
    nx, ny = _grid(size)
    n = ctx.noise.fbm(nx * cloud_scale, ny * cloud_scale, seed + 99, 4)
    alpha = np.where(n > CLOUD_THRESHOLD, (n - CLOUD_THRESHOLD) * 200, 0.0)
    if temperature > CLOUD_HOT_TEMP:
        alpha = alpha * CLOUD_HOT_BOOST
    return np.minimum(alpha, 255.0)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def synthesize_texture(
    ctx: RandomContext,
    planet_type: PlanetType,
    temperature: float,
    composition: Composition,
    pressure: float,
    size: int = TEXTURE_SIZE,
) -> PlanetTexture:
    """Render the disc of a planet from its physical fields."""
    if size < 1:
        raise ValueError(f"Texture size must be positive, got {size}")

    seed = ctx.random() * 10000

    if planet_type.is_giant:
        rgb = _render_giant(ctx, planet_type, temperature, size, seed)
    else:
        rgb = _render_terrestrial(ctx, temperature, composition, size, seed)
    rgb = np.clip(rgb, 0.0, 255.0)

    cloudy = pressure > CLOUD_MIN_PRESSURE and planet_type not in (
        PlanetType.GAS_GIANT,
        PlanetType.ICE_GIANT,
    )
    if cloudy:
        alpha = _cloud_alpha(ctx, temperature, size, seed)[..., None] / 255.0
        rgb = rgb * (1 - alpha) + 255.0 * alpha

    pixels = np.zeros((size, size, 4), dtype=np.uint8)
    mask = _disc_mask(size)
    pixels[..., :3] = np.where(mask[..., None], np.rint(rgb), 0).astype(np.uint8)
    pixels[..., 3] = np.where(mask, 255, 0)

    logger.debug("Synthesized %dpx %s texture (clouds=%s)", size, planet_type.value, cloudy)
    return PlanetTexture(pixels)
