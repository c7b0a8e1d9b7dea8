"""Tests for planet texture synthesis."""

from __future__ import annotations

import colorsys

import numpy as np
import pygame
import pytest

from stellarforge.models.physics import Composition, PlanetType
from stellarforge.models.sampling import RandomContext
from stellarforge.models.texture import (
    PlanetTexture,
    _blend_storm,
    _cloud_alpha,
    _giant_palette,
    _grid,
    _land_colors,
    _terrain_palette,
    synthesize_texture,
)

SIZE = 32
ROCK = Composition.normalized(0.3, 0.7, 0.0, 0.0)
WET = Composition.normalized(0.2, 0.5, 0.3, 0.0)


def _disc(texture: PlanetTexture) -> np.ndarray:
    return texture.pixels[texture.pixels[..., 3] == 255]


class TestPlanetTexture:
    @pytest.mark.parametrize("planet_type", list(PlanetType))
    def test_shape_and_dtype(self, ctx: RandomContext, planet_type: PlanetType) -> None:
        texture = synthesize_texture(ctx, planet_type, 300.0, ROCK, 1.0, SIZE)
        assert texture.pixels.shape == (SIZE, SIZE, 4)
        assert texture.pixels.dtype == np.uint8
        assert texture.size == SIZE

    def test_read_only(self, ctx: RandomContext) -> None:
        texture = synthesize_texture(ctx, PlanetType.GAS_GIANT, 120.0, ROCK, 5e5, SIZE)
        with pytest.raises(ValueError):
            texture.pixels[0, 0, 0] = 1

    def test_circular_alpha_mask(self, ctx: RandomContext) -> None:
        texture = synthesize_texture(ctx, PlanetType.ICE_GIANT, 80.0, ROCK, 2e4, SIZE)
        alpha = texture.pixels[..., 3]
        assert alpha[0, 0] == 0 and alpha[-1, -1] == 0
        assert alpha[SIZE // 2, SIZE // 2] == 255
        assert set(np.unique(alpha).tolist()) == {0, 255}
        assert not texture.pixels[0, 0, :3].any()

    def test_invalid_size(self, ctx: RandomContext) -> None:
        with pytest.raises(ValueError):
            synthesize_texture(ctx, PlanetType.TERRESTRIAL, 300.0, ROCK, 0.0, 0)

    def test_same_seed_same_pixels(self) -> None:
        a = synthesize_texture(RandomContext(4), PlanetType.TERRESTRIAL, 290.0, ROCK, 2.0, SIZE)
        b = synthesize_texture(RandomContext(4), PlanetType.TERRESTRIAL, 290.0, ROCK, 2.0, SIZE)
        assert np.array_equal(a.pixels, b.pixels)

    def test_fresh_pattern_per_call(self, ctx: RandomContext) -> None:
        a = synthesize_texture(ctx, PlanetType.GAS_GIANT, 300.0, ROCK, 5e5, SIZE)
        b = synthesize_texture(ctx, PlanetType.GAS_GIANT, 300.0, ROCK, 5e5, SIZE)
        assert not np.array_equal(a.pixels, b.pixels)


class TestTerrestrialRegimes:
    def test_lava_world_is_red(self) -> None:
        for seed in range(5):
            texture = synthesize_texture(RandomContext(seed), PlanetType.TERRESTRIAL, 1500.0, ROCK, 0.0, SIZE)
            disc = _disc(texture).astype(int)
            assert np.all(disc[:, 0] > disc[:, 2])

    def test_ocean_world_is_blue(self) -> None:
        for seed in range(5):
            texture = synthesize_texture(RandomContext(seed), PlanetType.TERRESTRIAL, 300.0, WET, 0.0, SIZE)
            disc = _disc(texture).astype(int)
            assert np.all(disc[:, 2] > disc[:, 0])

    def test_dry_world_has_no_ocean_color(self) -> None:
        texture = synthesize_texture(RandomContext(2), PlanetType.TERRESTRIAL, 200.0, ROCK, 0.0, SIZE)
        disc = _disc(texture).astype(int)
        # Deep-ocean blue (10, 20, 50) would give b - r = 40
        assert not np.any((disc[:, 2] - disc[:, 0] >= 40) & (disc[:, 0] < 40))


class TestTerrain:
    @pytest.fixture
    def palette(self) -> dict[str, np.ndarray]:
        return _terrain_palette(RandomContext(0), 300.0)

    @staticmethod
    def _bands(palette, altitude: float, moisture: float, temperature: float) -> np.ndarray:
        shape = (4, 4)
        land = _land_colors(palette, np.full(shape, altitude), np.full(shape, moisture), temperature)
        assert land.shape == (*shape, 3)
        return land[0, 0]

    @pytest.mark.parametrize(
        ("altitude", "moisture", "key"),
        [(0.0, 0.5, "sand"), (0.1, 0.5, "grass"), (0.1, 0.35, "sand"),
         (0.3, 0.35, "forest"), (0.3, 0.1, "rock"), (0.5, 0.9, "rock")],
    )
    def test_elevation_bands(self, palette, altitude: float, moisture: float, key: str) -> None:
        assert np.array_equal(self._bands(palette, altitude, moisture, 300.0), palette[key])

    def test_wet_sand_is_darker(self, palette) -> None:
        assert np.allclose(self._bands(palette, 0.0, 0.7, 300.0), palette["sand"] * 0.9)

    @pytest.mark.parametrize("temperature", [240.0, 249.9, 330.1, 340.0])
    def test_no_vegetation_outside_gate(self, palette, temperature: float) -> None:
        assert np.allclose(self._bands(palette, 0.1, 0.9, temperature), palette["sand"] * 0.9)
        assert np.array_equal(self._bands(palette, 0.3, 0.9, temperature), palette["rock"])

    @pytest.mark.parametrize("temperature", [250.0, 330.0])
    def test_vegetation_at_gate_edges(self, palette, temperature: float) -> None:
        assert np.array_equal(self._bands(palette, 0.3, 0.9, temperature), palette["forest"])

    @pytest.mark.parametrize("temperature", [200.0, 300.0])
    def test_polar_rows_are_snow(self, temperature: float) -> None:
        for seed in range(3):
            texture = synthesize_texture(RandomContext(seed), PlanetType.TERRESTRIAL, temperature, ROCK, 0.0, SIZE)
            for row in (texture.pixels[0], texture.pixels[-1]):
                visible = row[row[:, 3] == 255]
                assert len(visible)
                assert visible[:, :3].min() > 220

    def test_no_snow_when_warm(self) -> None:
        texture = synthesize_texture(RandomContext(1), PlanetType.TERRESTRIAL, 330.0, ROCK, 0.0, SIZE)
        row = texture.pixels[0]
        visible = row[row[:, 3] == 255]
        assert visible[:, :3].min() < 220


class TestGiantPalette:
    @staticmethod
    def _hls(color: np.ndarray) -> tuple[float, float, float]:
        return colorsys.rgb_to_hls(*(color / 255.0))

    def test_cold_gas_giant_pale_yellow(self) -> None:
        for seed in range(20):
            base = _giant_palette(RandomContext(seed), PlanetType.GAS_GIANT, 120.0)[1]
            hue, lightness, saturation = self._hls(base)
            assert 0.07 <= hue <= 0.15
            assert lightness == pytest.approx(0.75, abs=0.02)
            assert saturation == pytest.approx(0.4, abs=0.02)

    def test_hot_gas_giant_blue_or_magenta(self) -> None:
        for seed in range(20):
            base = _giant_palette(RandomContext(seed), PlanetType.GAS_GIANT, 1500.0)[1]
            hue, lightness, saturation = self._hls(base)
            assert 0.59 <= hue <= 0.76 or hue >= 0.94 or hue <= 0.06
            assert lightness == pytest.approx(0.4, abs=0.02)
            assert saturation == pytest.approx(0.8, abs=0.02)

    def test_ice_giant_blue_cyan(self) -> None:
        for seed in range(20):
            base = _giant_palette(RandomContext(seed), PlanetType.ICE_GIANT, 70.0)[1]
            hue, lightness, saturation = self._hls(base)
            assert 0.44 <= hue <= 0.66
            assert lightness == pytest.approx(0.65, abs=0.02)
            assert saturation == pytest.approx(0.6, abs=0.02)

    def test_ramp_order(self) -> None:
        dark, base, bright, middle, _ = _giant_palette(RandomContext(3), PlanetType.ICE_GIANT, 70.0)
        assert np.array_equal(base, middle)
        assert self._hls(dark)[1] < self._hls(base)[1] < self._hls(bright)[1]


class TestStorm:
    def test_blend_inside_ellipse_only(self) -> None:
        nx, ny = _grid(64)
        bands = np.zeros((64, 64))
        swirl = np.ones((64, 64))
        blended = _blend_storm(bands, swirl, nx, ny, 0.5, 0.5)

        # Center takes the swirl value outright
        assert blended[32, 32] == pytest.approx(1.5)
        # 0.094 across is inside; 0.094 down is stretched to 0.19, outside
        assert 0.0 < blended[32, 38] < 1.5
        assert blended[38, 32] == 0.0
        assert blended[0, 0] == 0.0

    def test_weight_falls_off_with_distance(self) -> None:
        nx, ny = _grid(64)
        blended = _blend_storm(np.zeros((64, 64)), np.ones((64, 64)), nx, ny, 0.5, 0.5)
        row = blended[32, 32:42]
        assert np.all(np.diff(row) < 0)


class TestClouds:
    def test_alpha_range(self, ctx: RandomContext) -> None:
        alpha = _cloud_alpha(ctx, 400.0, SIZE, 12.0)
        assert alpha.shape == (SIZE, SIZE)
        assert alpha.min() >= 0.0
        assert alpha.max() <= 255.0

    def test_clouds_only_brighten(self) -> None:
        clear = synthesize_texture(RandomContext(6), PlanetType.TERRESTRIAL, 1500.0, ROCK, 0.0, SIZE)
        assert clear.pixels[..., :3].max() <= 255
        cloudy = synthesize_texture(RandomContext(6), PlanetType.TERRESTRIAL, 1500.0, ROCK, 50.0, SIZE)
        assert np.all(cloudy.pixels[..., :3].astype(int) >= clear.pixels[..., :3].astype(int) - 1)


class TestSurface:
    def test_to_surface(self, ctx: RandomContext) -> None:
        texture = synthesize_texture(ctx, PlanetType.MINI_NEPTUNE, 400.0, ROCK, 5000.0, SIZE)
        surface = texture.to_surface()
        assert isinstance(surface, pygame.Surface)
        assert surface.get_size() == (SIZE, SIZE)
        assert surface.get_at((0, 0)).a == 0
        assert surface.get_at((SIZE // 2, SIZE // 2)).a == 255

    def test_save_png(self, ctx: RandomContext, tmp_path) -> None:
        texture = synthesize_texture(ctx, PlanetType.TERRESTRIAL, 280.0, WET, 1.0, SIZE)
        path = texture.save_png(tmp_path / "planet.png")
        assert path.exists()
        assert pygame.image.load(str(path)).get_size() == (SIZE, SIZE)
