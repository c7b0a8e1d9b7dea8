from __future__ import annotations

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from stellarforge.models.orbits import OrbitalSlot, ZoneBounds  # noqa: E402
from stellarforge.models.sampling import RandomContext  # noqa: E402
from stellarforge.models.star import SpectralClass, Star  # noqa: E402

# Small textures keep whole-system tests fast
TEXTURE = 8


@pytest.fixture
def ctx() -> RandomContext:
    return RandomContext(seed=1234)


@pytest.fixture
def sun() -> Star:
    return Star(
        name="Sol",
        mass=1.0,
        radius=1.0,
        luminosity=1.0,
        temperature=5778.0,
        metallicity=0.0,
        absolute_magnitude=4.74,
        spectral_class=SpectralClass.G,
    )


@pytest.fixture
def sun_zones() -> ZoneBounds:
    return ZoneBounds.for_luminosity(1.0)


@pytest.fixture
def earth_orbit() -> OrbitalSlot:
    return OrbitalSlot(a=1.0, e=0.0167, inclination=0.0)
