"""Tests for zones, planet counts and orbit placement."""

from __future__ import annotations

import dataclasses
import math

import pytest

from stellarforge.models.orbits import (
    DensityTier,
    ZoneBounds,
    generate_orbits,
    target_planet_count,
)
from stellarforge.models.sampling import RandomContext
from stellarforge.models.star import Star


class TestZoneBounds:
    def test_solar(self) -> None:
        zones = ZoneBounds.for_luminosity(1.0)
        assert zones.frost_line == pytest.approx(2.7)
        assert zones.hz_inner == pytest.approx(0.75)
        assert zones.hz_outer == pytest.approx(1.5)
        assert zones.hot_limit == pytest.approx((278 / 373) ** 2)

    def test_scales_with_root_luminosity(self) -> None:
        zones = ZoneBounds.for_luminosity(16.0)
        assert zones.frost_line == pytest.approx(2.7 * 4)
        assert zones.in_habitable_zone(4.0)
        assert not zones.in_habitable_zone(10.0)


class TestDensityTier:
    @pytest.mark.parametrize(
        ("name", "tier"),
        [("None", DensityTier.NONE), ("low", DensityTier.LOW), (" EXTREME ", DensityTier.EXTREME)],
    )
    def test_parse(self, name: str, tier: DensityTier) -> None:
        assert DensityTier.parse(name) is tier

    def test_parse_fallback(self) -> None:
        assert DensityTier.parse("crowded") is DensityTier.DEFAULT
        assert DensityTier.parse(None) is DensityTier.DEFAULT
        assert DensityTier.parse(DensityTier.HIGH) is DensityTier.HIGH

    def test_caps(self) -> None:
        assert DensityTier.LOW.cap == 5
        assert DensityTier.MEDIUM.cap == 12
        assert DensityTier.HIGH.cap == 30
        assert DensityTier.EXTREME.cap is None


class TestTargetPlanetCount:
    def test_none_tier(self, ctx: RandomContext, sun: Star) -> None:
        assert target_planet_count(ctx, sun, DensityTier.NONE) == 0

    @pytest.mark.parametrize("metallicity", [-0.8, -0.3, 0.0, 0.45, 0.8])
    def test_low_tier_range(self, ctx: RandomContext, sun: Star, metallicity: float) -> None:
        star = dataclasses.replace(sun, metallicity=metallicity)
        for _ in range(100):
            assert 1 <= target_planet_count(ctx, star, DensityTier.LOW) <= 5

    def test_metallicity_adds_planets(self, sun: Star) -> None:
        rich = dataclasses.replace(sun, metallicity=0.5)
        counts = [target_planet_count(RandomContext(s), rich, DensityTier.DEFAULT) for s in range(50)]
        assert all(5 <= c <= 16 for c in counts)

    def test_low_mass_star_cap(self, ctx: RandomContext, sun: Star) -> None:
        dwarf = dataclasses.replace(sun, mass=0.3)
        for _ in range(50):
            assert target_planet_count(ctx, dwarf, DensityTier.HIGH) <= 12

    def test_extreme_ignores_low_mass_cap(self, ctx: RandomContext, sun: Star) -> None:
        dwarf = dataclasses.replace(sun, mass=0.3)
        counts = [target_planet_count(ctx, dwarf, DensityTier.EXTREME) for _ in range(20)]
        assert min(counts) >= 25


class TestGenerateOrbits:
    def test_zero_count(self, ctx: RandomContext) -> None:
        assert generate_orbits(ctx, 1.0, 0) == []

    @pytest.mark.parametrize("seed", range(25))
    @pytest.mark.parametrize("count", [3, 8, 20])
    def test_spacing_and_order(self, seed: int, count: int) -> None:
        orbits = generate_orbits(RandomContext(seed), 1.0, count)
        assert len(orbits) <= count
        for inner, outer in zip(orbits, orbits[1:]):
            assert outer.a >= inner.a * 1.35 * (1 - 1e-12)

    @pytest.mark.parametrize("seed", range(25))
    def test_hot_orbit_quota(self, seed: int) -> None:
        count = 10
        zones = ZoneBounds.for_luminosity(1.0)
        orbits = generate_orbits(RandomContext(seed), 1.0, count)
        hot = [o for o in orbits if o.a < zones.hot_limit]
        assert len(hot) <= math.floor(count * 0.2)

    @pytest.mark.parametrize("seed", range(25))
    @pytest.mark.parametrize("luminosity", [0.01, 1.0, 30.0])
    def test_outer_zone_guarantee(self, seed: int, luminosity: float) -> None:
        zones = ZoneBounds.for_luminosity(luminosity)
        orbits = generate_orbits(RandomContext(seed), luminosity, 6)
        assert any(o.a >= zones.hz_inner for o in orbits)

    def test_bright_star_with_no_cool_candidates(self) -> None:
        # Hot limit lies past the outermost candidate and the hot quota is 0
        assert ZoneBounds.for_luminosity(3e4).hot_limit > 80
        assert generate_orbits(RandomContext(1), 3e4, 3) == []

    def test_bright_star_hot_quota(self) -> None:
        for seed in range(10):
            orbits = generate_orbits(RandomContext(seed), 3e4, 10)
            assert len(orbits) <= 2

    def test_eccentricity_and_inclination_ranges(self) -> None:
        ctx = RandomContext(17)
        for _ in range(20):
            for orbit in generate_orbits(ctx, 1.0, 10):
                assert 0.0 <= orbit.e < 0.5
                assert 0.0 <= orbit.inclination < 20.0
