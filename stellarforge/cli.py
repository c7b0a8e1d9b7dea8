"""Command line front end: ``stellarforge generate``."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from .constants import TEXTURE_SIZE
from .models.export import save_system, system_to_dict
from .models.orbits import DensityTier
from .models.system import StellarSystem

_CLASS_CHOICES = ["Random", "O", "B", "A", "F", "G", "K", "M"]
_DENSITY_CHOICES = ["None", "Low", "Medium", "High", "Extreme", "Default"]


def _format_star(system: StellarSystem) -> str:
    star = system.star
    return "\n".join([
        f"{star.name}  ({star.spectral_class.value}-class, seed {system.seed})",
        f"  Mass         {star.mass:.3f} M_sun",
        f"  Radius       {star.radius:.3f} R_sun",
        f"  Luminosity   {star.luminosity:.4g} L_sun",
        f"  Temperature  {star.temperature:,.0f} K",
        f"  Metallicity  {star.metallicity:+.2f} dex",
        f"  Abs. mag     {star.absolute_magnitude:.2f}",
        f"  Frost line   {system.frost_line:.2f} AU",
    ])


def _format_planets(system: StellarSystem) -> str:
    if not system.planets:
        return "No planets."
    header = (
        f"{'#':>2}  {'Name':<16} {'Type':<13} {'a (AU)':>8} {'Mass':>9} "
        f"{'Radius':>7} {'T (K)':>6} {'P (atm)':>10}  Fe/Si/H2O/H"
    )
    rows = [header, "-" * len(header)]
    for i, p in enumerate(system.planets, start=1):
        c = p.composition
        mix = "/".join(f"{f * 100:.0f}" for f in (c.iron, c.silicate, c.water, c.hydrogen))
        rows.append(
            f"{i:>2}  {p.name:<16} {p.planet_type.value:<13} {p.a:>8.2f} {p.mass:>9.2f} "
            f"{p.radius:>7.2f} {p.temperature:>6.0f} {p.pressure:>10.3g}  {mix}"
        )
    return "\n".join(rows)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Procedurally generate star systems."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("generate")
@click.option(
    "--spectral-class", "-c", type=click.Choice(_CLASS_CHOICES, case_sensitive=False),
    default="Random", show_default=True, help="Constrain the star's spectral class.",
)
@click.option(
    "--density", "-d", type=click.Choice(_DENSITY_CHOICES, case_sensitive=False),
    default="Default", show_default=True, help="Planet density tier.",
)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible system.")
@click.option(
    "--texture-size", type=click.IntRange(min=1), default=TEXTURE_SIZE, show_default=True,
    help="Edge length of planet textures in pixels.",
)
@click.option(
    "--export", "export_dir", type=click.Path(file_okay=False, path_type=Path), default=None,
    help="Write system.json and planet textures to this directory.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the system as JSON.")
def generate(
    spectral_class: str,
    density: str,
    seed: int | None,
    texture_size: int,
    export_dir: Path | None,
    as_json: bool,
) -> None:
    """Generate one star system and print it."""
    system = StellarSystem(
        spectral_class=None if spectral_class.lower() == "random" else spectral_class.upper(),
        density=DensityTier.parse(density),
        seed=seed,
        texture_size=texture_size,
    )

    if as_json:
        click.echo(json.dumps(system_to_dict(system), indent=2))
    else:
        click.echo(_format_star(system))
        click.echo()
        click.echo(_format_planets(system))

    if export_dir is not None:
        try:
            path = save_system(system, export_dir)
        except OSError as exc:
            raise click.ClickException(f"Cannot export to {export_dir}: {exc}") from exc
        click.echo(f"Exported to {path}", err=True)


if __name__ == "__main__":
    main()
