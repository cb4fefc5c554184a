"""Band limits, policy thresholds, stimulus distribution, and run parameters."""

# =============================================================================
# Time
# =============================================================================

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE

# =============================================================================
# Power Bands
# =============================================================================

# Human-readable band labels, in severity order (matches PowerBand values)
BAND_LABELS = ["PowerOff", "Idle", "Climb", "Cruise", "Caution", "RedLine", "OverLimit"]

# Inclusive filtered-RPM limits per named band. Anything below idle_min is
# PowerOff (sub-idle), anything above redline_max is OverLimit.
BAND_RPM_LIMITS = {
    "idle":    (1000, 3500),
    "climb":   (3501, 6000),
    "cruise":  (6001, 9000),
    "caution": (9001, 9799),
    "redline": (9800, 10200),
}

# Advisory text emitted when the engine enters a band
BAND_ADVISORIES = {
    "PowerOff":  "RPM Below Idle: Engine not in normal operating band.",
    "Idle":      "Idle: Value is within range.",
    "Climb":     "Climb: Value is within range.",
    "Cruise":    "Cruise: Value is within range.",
    "Caution":   "Caution: Engine is reaching Redline.",
    "RedLine":   "Warning: Engine may overheat.",
    "OverLimit": "WARNING: RPM ABOVE Defined RedLine (OverLimit).",
}

# Pilot safety zones (coarser than bands): upper inclusive RPM per zone
ZONE_LIMITS = {
    "normal_max":  9000,
    "caution_max": 9799,
}

ZONE_MESSAGES = {
    "BelowIdle": "RPM Below Idle",
    "Normal":    "RPM Within Normal Range",
    "Caution":   "Caution: High RPM",
    "RedLine":   "Redline: Potential Engine Damage",
}

# =============================================================================
# Diagnostic Policy (tuned for a ~50-hour run)
# =============================================================================

FAILURE_REDLINE_SECONDS = 4 * SECONDS_PER_HOUR
MAINTENANCE_REDLINE_SECONDS = 1 * SECONDS_PER_HOUR
MAINTENANCE_CAUTION_SECONDS = 3 * SECONDS_PER_HOUR

DIAGNOSTIC_MESSAGES = {
    "successful":  "SYSTEM CHECK: SUCCESSFUL - Engine within expected use profile",
    "maintenance": "SYSTEM CHECK: MAINTENANCE REQUIRED - Heavy use in CAUTION/REDLINE bands",
    "failure":     "SYSTEM CHECK: SYSTEM FAILURE - Excessive time in REDLINE/OVERLIMIT",
}

# =============================================================================
# Stimulus Distribution
# =============================================================================

# (name, probability, rpm_min, rpm_max); probabilities sum to 1.0
STIMULUS_DISTRIBUTION = [
    ("sub_idle",  0.05, 0.0,     900.0),
    ("idle",      0.15, 1000.0,  3500.0),
    ("climb",     0.25, 3501.0,  6000.0),
    ("cruise",    0.35, 6001.0,  9000.0),
    ("caution",   0.12, 9001.0,  9799.0),
    ("redline",   0.06, 9800.0,  10200.0),
    ("overlimit", 0.02, 10201.0, 11000.0),
]

# =============================================================================
# Simulation Run
# =============================================================================

TICK_SECONDS = 60.0              # 1-minute resolution
TOTAL_TICKS = 50 * 60            # 50-hour endurance run
DEFAULT_LOG_PATH = "flight_log.csv"

FLIGHT_LOG_COLUMNS = [
    "time_step",
    "total_seconds",
    "hours",
    "minutes",
    "seconds",
    "rpm",
    "band",
    "caution_seconds",
    "redline_seconds",
]
