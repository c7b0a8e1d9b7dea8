"""Generation-wide constants for StellarForge."""

# --- Units ---
EARTH_MASS_G = 5.972e27
EARTH_RADIUS_KM = 6371.0
CM_PER_KM = 100_000.0

# --- Star ---
SOLAR_TEMPERATURE = 5778.0
SUN_ABSOLUTE_MAGNITUDE = 4.74
IMF_MAX_MASS = 100.0  # Initial-mass-function draws at or above this are resampled

# Solar-mass brackets for constrained star generation, keyed by spectral letter
CLASS_MASS_RANGES: dict[str, tuple[float, float]] = {
    "O": (16.0, 60.0),
    "B": (2.1, 16.0),
    "A": (1.4, 2.1),
    "F": (1.04, 1.4),
    "G": (0.8, 1.04),
    "K": (0.45, 0.8),
    "M": (0.1, 0.45),
}
O_CLASS_SKEW = 6.0
FALLBACK_STAR_MASS = 1.0

# Lower temperature bound (K) of each spectral class, hottest first
SPECTRAL_THRESHOLDS: list[tuple[str, float]] = [
    ("O", 30000.0),
    ("B", 10000.0),
    ("A", 7500.0),
    ("F", 6000.0),
    ("G", 5200.0),
    ("K", 3700.0),
]

# --- Zones (multiples of sqrt(L)) ---
FROST_LINE_FACTOR = 2.7
HZ_INNER_FACTOR = 0.75
HZ_OUTER_FACTOR = 1.5
EQ_TEMP_FACTOR = 278.0  # Equilibrium temperature of a body at 1 AU from the Sun
BOILING_POINT = 373.0

# --- Orbits ---
ORBIT_MIN_AU = 0.05
ORBIT_MAX_AU = 80.0
CANDIDATES_PER_PLANET = 5
MIN_SPACING_RATIO = 1.35
MAX_HOT_FRACTION = 0.2
OUTER_PUSH_FACTOR = 1.05
ECCENTRICITY_SKEW = 4.0
MAX_ECCENTRICITY = 0.5
INCLINATION_SKEW = 10.0
MAX_INCLINATION_DEG = 20.0

# --- Planet counts: tier -> (low, high, cap) ---
DENSITY_TIERS: dict[str, tuple[int, int, int | None]] = {
    "none": (0, 0, 0),
    "low": (1, 6, 5),
    "medium": (4, 13, 12),
    "high": (12, 31, 30),
    "extreme": (25, 55, None),
    "default": (3, 15, None),
}
LOW_MASS_STAR = 0.5
LOW_MASS_PLANET_CAP = 12

# --- Planets ---
PLANET_MASS_RANGES: dict[str, tuple[float, float]] = {
    "Gas Giant": (50.0, 3000.0),
    "Ice Giant": (10.0, 50.0),
    "Mini-Neptune": (2.0, 15.0),
    "Terrestrial": (0.05, 8.0),
}

# (iron, silicate, water, hydrogen) uniform ranges before normalization
COMPOSITION_RANGES: dict[str, tuple[tuple[float, float], ...]] = {
    "Gas Giant": ((0.005, 0.03), (0.005, 0.03), (0.01, 0.10), (0.85, 0.98)),
    "Ice Giant": ((0.05, 0.15), (0.15, 0.35), (0.40, 0.70), (0.10, 0.25)),
    "Mini-Neptune": ((0.10, 0.30), (0.25, 0.55), (0.20, 0.50), (0.02, 0.15)),
}
TERRESTRIAL_IRON = (0.15, 0.45)
TERRESTRIAL_SILICATE = (0.45, 0.85)
TERRESTRIAL_DRY_LOG_WATER = (-5.0, -3.0)
VOLATILE_DELIVERY_CHANCE = 0.15
VOLATILE_DELIVERY_WATER = (0.05, 0.5)
WATER_RETENTION_MAX_TEMP = 400.0
DESICCATION_TEMP = 450.0

# Fallback split when a composition has nothing left to normalize
FALLBACK_SILICATE = 0.7
FALLBACK_IRON = 0.3

GIANT_PRESSURE_FACTOR = 1000.0
ATMOSPHERE_MIN_MASS = 0.1
ATMOSPHERE_CHANCE_PER_MASS = 0.8
ATMOSPHERE_SCALE = (0.1, 10.0)
GREENHOUSE_PRESSURE_RANGE = (0.01, 1000.0)

# Material densities (g/cm^3)
IRON_DENSITY = 7.0
SILICATE_DENSITY = 3.5
WATER_DENSITY = 1.5

# --- Balancing ---
BALANCE_MIN_PLANETS = 7
MIN_TERRESTRIAL_FRACTION = 0.3

# --- Planet tints (hex, for list displays) ---
PLANET_COLORS: dict[str, str] = {
    "Gas Giant": "#e0c0a0",
    "Ice Giant": "#a0d0e0",
    "Mini-Neptune": "#b0d0d0",
    "Terrestrial": "#a08c76",
}
WET_TERRESTRIAL_COLOR = "#406080"

# --- Textures ---
TEXTURE_SIZE = 256
STORM_CHANCE = 0.3
STORM_RADIUS = 0.15
CLOUD_MIN_PRESSURE = 0.5
CLOUD_THRESHOLD = 0.55
CLOUD_HOT_TEMP = 350.0
CLOUD_HOT_BOOST = 1.2
LAVA_TEMP = 1000.0
LIQUID_WATER_RANGE = (240.0, 373.0)
VEGETATION_RANGE = (250.0, 330.0)
SNOW_MAX_TEMP = 320.0
OCEAN_WORLD_MIN_WATER = 0.01

# Terrestrial palettes (RGB)
LAVA_DARK = (40, 10, 10)
LAVA_BRIGHT = (255, 100, 0)
LAVA_COOL = (150, 20, 0)
