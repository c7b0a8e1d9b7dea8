"""Export / reload generated systems as JSON plus PNG textures.

Uses platformdirs for the default export location:
  Linux:   ~/.local/share/stellarforge/systems/<name>-<seed>/
  macOS:   ~/Library/Application Support/stellarforge/systems/...
  Windows: C:/Users/.../AppData/Local/stellarforge/systems/...

Systems are regenerated from their seed on load; the stored attributes
are for reading by other tools.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from platformdirs import user_data_dir

from ..constants import TEXTURE_SIZE
from .planet import Planet
from .star import SpectralClass, Star
from .system import StellarSystem

logger = logging.getLogger(__name__)

EXPORT_DIR = Path(user_data_dir("stellarforge")) / "systems"
SYSTEM_FILE = "system.json"
FORMAT_VERSION = 1


# ── Serialise helpers ─────────────────────────────────────────────────

def _slug(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9]+", "-", name).strip("-").lower() or "unnamed"


def _star_to_dict(s: Star) -> dict:
    return {
        "name": s.name,
        "mass": s.mass,
        "radius": s.radius,
        "luminosity": s.luminosity,
        "temperature": s.temperature,
        "metallicity": s.metallicity,
        "absolute_magnitude": s.absolute_magnitude,
        "spectral_class": s.spectral_class.value,
    }


def _planet_to_dict(p: Planet, texture_file: str) -> dict:
    return {
        "name": p.name,
        "type": p.planet_type.value,
        "a": p.a,
        "e": p.e,
        "inclination": p.inclination,
        "longitude_of_ascending_node": p.longitude_of_ascending_node,
        "mean_anomaly": p.mean_anomaly,
        "mass": p.mass,
        "radius": p.radius,
        "radius_km": p.radius_km,
        "density": p.density,
        "composition": p.composition.as_dict(),
        "pressure": p.pressure,
        "temperature": p.temperature,
        "equilibrium_temperature": p.equilibrium_temperature,
        "color": p.color,
        "texture": texture_file,
    }


def _request_to_dict(system: StellarSystem) -> dict:
    spectral = system.spectral_class
    if isinstance(spectral, SpectralClass):
        spectral = spectral.value
    return {
        "spectral_class": spectral,
        "density": system.density.value,
        "texture_size": system.texture_size,
    }


def system_to_dict(system: StellarSystem, texture_files: list[str] | None = None) -> dict:
    files = texture_files or [""] * len(system.planets)
    return {
        "version": FORMAT_VERSION,
        "seed": system.seed,
        "request": _request_to_dict(system),
        "star": _star_to_dict(system.star),
        "frost_line": system.data.frost_line,
        "habitable_zone": [system.data.hz_inner, system.data.hz_outer],
        "planets": [_planet_to_dict(p, f) for p, f in zip(system.planets, files)],
    }


def _system_from_dict(d: dict) -> StellarSystem:
    version = d.get("version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        raise ValueError(f"Unsupported system export version {version}")
    request = d.get("request", {})
    return StellarSystem(
        spectral_class=request.get("spectral_class"),
        density=request.get("density"),
        seed=d["seed"],
        texture_size=request.get("texture_size", TEXTURE_SIZE),
    )


# ── Top-level API ─────────────────────────────────────────────────────

def default_directory(system: StellarSystem) -> Path:
    return EXPORT_DIR / f"{_slug(system.star.name)}-{system.seed}"


def save_system(system: StellarSystem, directory: Path | str | None = None) -> Path:
    """Write the system JSON and one PNG per planet; return the JSON path."""
    target = Path(directory) if directory is not None else default_directory(system)
    target.mkdir(parents=True, exist_ok=True)

    texture_files: list[str] = []
    for i, planet in enumerate(system.planets, start=1):
        filename = f"{i:02d}-{_slug(planet.name)}.png"
        planet.texture.save_png(target / filename)
        texture_files.append(filename)

    path = target / SYSTEM_FILE
    path.write_text(json.dumps(system_to_dict(system, texture_files), indent=2))
    logger.info("Exported %s to %s", system.star.name, target)
    return path


def load_system(path: Path | str) -> StellarSystem | None:
    """Regenerate an exported system. Returns None if nothing usable exists.

    ``path`` may be the JSON file or the directory holding it.
    """
    path = Path(path)
    if path.is_dir():
        path = path / SYSTEM_FILE
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, IOError):
        logger.warning("Could not read system export %s", path)
        return None
    return _system_from_dict(data)
