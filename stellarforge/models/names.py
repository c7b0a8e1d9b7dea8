"""Flavor names for stars and planets."""

from __future__ import annotations

import dataclasses
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .planet import Planet
    from .sampling import RandomContext


_CATALOG_PREFIXES = [
    "Kepler", "Gliese", "HD", "HIP", "K2", "TOI", "WASP", "CoRoT",
    "Luyten", "Trappist", "Ross", "Wolf",
]

_GREEK_LETTERS = [
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
    "Iota", "Kappa",
]

_CONSTELLATIONS = [
    "Centauri", "Ceti", "Eridani", "Cygni", "Lyrae", "Scorpii",
    "Andromedae", "Draconis", "Cassiopeiae", "Orionis", "Pegasi",
    "Ursae Majoris",
]

MYTHOLOGIES: dict[str, list[str]] = {
    "Norse": [
        "Odin", "Thor", "Loki", "Freya", "Heimdall", "Tyr", "Baldr", "Frigg",
        "Skadi", "Njord", "Freyr", "Idunn", "Bragi", "Forseti", "Sif", "Hel",
        "Fenrir", "Jormungandr", "Surtr", "Ymir", "Aegir", "Ran", "Vidar",
        "Vali", "Magni", "Modi", "Thrud", "Ull", "Sol", "Mani",
    ],
    "Greek": [
        "Zeus", "Hera", "Poseidon", "Demeter", "Ares", "Athena", "Apollo",
        "Artemis", "Hephaestus", "Aphrodite", "Hermes", "Dionysus", "Hades",
        "Hestia", "Persephone", "Eros", "Pan", "Nike", "Nemesis", "Tyche",
        "Hebe", "Helios", "Selene", "Eos", "Gaia", "Uranus", "Cronus", "Rhea",
        "Oceanus", "Tethys",
    ],
    "Roman": [
        "Jupiter", "Juno", "Neptune", "Ceres", "Mars", "Minerva", "Apollo",
        "Diana", "Vulcan", "Venus", "Mercury", "Bacchus", "Pluto", "Vesta",
        "Proserpina", "Cupid", "Faunus", "Victoria", "Fortuna", "Juventas",
        "Sol", "Luna", "Aurora", "Terra", "Caelus", "Saturn", "Ops", "Janus",
        "Quirinus", "Bellona",
    ],
    "Egyptian": [
        "Ra", "Osiris", "Isis", "Horus", "Set", "Anubis", "Thoth", "Bastet",
        "Sekhmet", "Hathor", "Ptah", "Maat", "Geb", "Nut", "Shu", "Tefnut",
        "Amun", "Mut", "Khonsu", "Sobek", "Khepri", "Atum", "Neith", "Serqet",
        "Bes", "Taweret", "Hapi", "Imhotep", "Khnum", "Anuket",
    ],
    "Sumerian": [
        "Anu", "Enlil", "Enki", "Ninhursag", "Inanna", "Utu", "Nanna",
        "Marduk", "Nergal", "Ereshkigal", "Ninurta", "Nabu", "Ishtar",
        "Dumuzi", "Tiamat", "Apsu", "Kingu", "Lahmu", "Lahamu", "Anshar",
        "Kishar", "Sin", "Shamash", "Adad", "Ashur", "Gula", "Nisaba",
        "Nammu", "Ninkasi", "Geshtinanna",
    ],
    "Celtic": [
        "Dagda", "Morrigan", "Lugh", "Brigid", "Nuada", "Ogma", "Manannan",
        "Danu", "Belenus", "Cernunnos", "Epona", "Aengus", "Boann", "Lir",
        "Macha", "Badb", "Nemain", "Goibniu", "Creidhne", "Luchta",
        "Dian Cecht", "Bodb Derg", "Midir", "Arianrhod", "Gwydion",
        "Rhiannon", "Pwyll", "Bran", "Math", "Taliesin",
    ],
    "Japanese": [
        "Amaterasu", "Tsukuyomi", "Susanoo", "Izanagi", "Izanami",
        "Kagutsuchi", "Raijin", "Fujin", "Hachiman", "Inari", "Ebisu",
        "Daikokuten", "Bishamonten", "Benzaiten", "Fukurokuju", "Jurojin",
        "Hotei", "Uzume", "Sarutahiko", "Ninigi", "Konohanasakuya",
        "Omoikane", "Takemikazuchi", "Futsunushi", "Ryujin", "Suijin",
        "Owatatsumi", "Toyotama-hime", "Uke Mochi", "Kuraokami",
    ],
    "Hindu": [
        "Indra", "Agni", "Varuna", "Vayu", "Soma", "Surya", "Yama", "Vishnu",
        "Shiva", "Brahma", "Lakshmi", "Parvati", "Saraswati", "Ganesha",
        "Kartikeya", "Hanuman", "Rama", "Krishna", "Durga", "Kali", "Sita",
        "Radha", "Kubera", "Kama", "Dyaus", "Prithvi", "Ushas", "Rudra",
        "Maruts", "Adityas",
    ],
}


def generate_star_name(ctx: RandomContext) -> str:
    """Generate a catalog-style or Bayer-style star name."""
    style = ctx.random()
    if style < 0.4:
        # "Kepler-186" style
        number = math.floor(ctx.uniform(10, 9000))
        return f"{ctx.choice(_CATALOG_PREFIXES)}-{number}"
    elif style < 0.7:
        # "Alpha Centauri" style
        return f"{ctx.choice(_GREEK_LETTERS)} {ctx.choice(_CONSTELLATIONS)}"
    else:
        # "TOI-1234" style
        number = math.floor(ctx.uniform(100, 5000))
        return f"{ctx.choice(_CATALOG_PREFIXES)}-{number}"


def name_planets(ctx: RandomContext, planets: tuple[Planet, ...]) -> tuple[Planet, ...]:
    """Name planets in orbital order from one shuffled mythology."""
    theme = ctx.choice(list(MYTHOLOGIES))
    names = list(MYTHOLOGIES[theme])
    ctx.shuffle(names)

    named = []
    for i, planet in enumerate(planets):
        name = names[i] if i < len(names) else f"{theme}-{i + 1}"
        named.append(dataclasses.replace(planet, name=name))
    return tuple(named)
