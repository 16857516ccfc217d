"""
Display and formatting constants for measure_system.
"""

# --- Precision ---
DEFAULT_PRECISION = 5          # Digits after the decimal point when nothing else is requested

# --- Symbols ---
PLUS_MINUS = "±"               # Symmetric uncertainty marker
RELATIVE_SYMBOL = "%"          # Suffix for relative (percent) magnitudes
INTERVAL_SEPARATOR = ":="      # Between the measure and its resolved (low, high) interval

# --- Report ---
REPORT_WIDTH = 72              # Width of ruled lines in MeasureReport
UNDEFINED_LABEL = "undefined"  # Shown where a relative figure has no meaning (value == 0)
