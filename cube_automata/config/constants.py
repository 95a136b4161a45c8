"""Centralized domain constants for cube simulations and analysis.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

NUM_COLORS = 6
"""Number of distinct visible cell colors (0..5)."""

DEFAULT_CUBE_SIZE = 4
"""Default cube side length in cells."""

DEFAULT_MAX_GENERATIONS = 50
"""Default generation cap for a single analyzed run."""

STABILITY_WINDOW = 3
"""Consecutive zero-change ticks after which a run is declared stable."""

OSCILLATION_WINDOW = 20
"""Number of trailing population samples inspected for oscillation."""

MIN_OSCILLATION_PERIOD = 2
"""Smallest oscillation period considered."""

MAX_OSCILLATION_PERIOD = 10
"""Largest oscillation period considered."""

OSCILLATION_REPEATS = 2
"""Number of earlier periods that must match the trailing one."""

MIN_OSCILLATION_SAMPLES = 10
"""Minimum snapshot count before oscillation detection is attempted."""

CLASSIFICATION_WINDOW = 10
"""Trailing snapshot window used by the stable/glider classifiers."""

GLIDER_MOVEMENT_THRESHOLD = 2.0
"""Summed center-of-mass travel above which a run counts as a glider."""

EXPLOSIVE_FRACTION = 0.8
"""Final occupancy fraction above which a run counts as explosive."""

SPATIAL_DISTRIBUTION_SCALE = 10.0
"""Center-of-mass distance that maps to a spatial distribution of 1.0."""

TOP_RULESET_COUNT = 10
"""Number of top-scoring results retained in a batch summary."""

ANALYZER_START_DENSITY = 0.15
"""Fill density of the sparse random start used when no pattern is given."""

BATCH_RANDOM_START_DENSITY = 0.1
"""Fill density of the random start used by batch search (first run)."""

PROGRESS_LOG_INTERVAL = 10
"""Emit a batch progress log line every N completed runs."""

MAX_NUTRIENT_CONVERSION = 0.1
"""Upper bound of stored nutrients converted to energy per tick."""

GLOBAL_FIELD_WEIGHT = 0.1
"""Weight of the uniform external field in the spin update."""

VORTEX_WEIGHT = 0.2
"""Weight of each vortex center's tangential pull in the spin update."""

VORTEX_CORE_RADIUS = 0.1
"""Cells closer than this to a vortex center feel no tangential pull."""

SPIN_COLOR_THRESHOLD = 0.1
"""Spin strength above which a cell's color follows its spin direction."""

TEMPERATURE_DECAY = 0.99
"""Per-tick geometric decay factor of spin temperature."""

MIN_TEMPERATURE = 0.1
"""Floor of the spin temperature."""

MIN_SIGNAL = 0.01
"""Decayed signals at or below this value are not delivered as gate inputs."""

SIGNAL_HISTORY_SIZE = 10
"""Number of past output signals retained per gate for diagnostics."""
