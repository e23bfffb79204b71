"""Configuration constants for stylekit."""

import os

# Class toggled on <html> for manual (non-OS-driven) dark mode
# Override via STYLEKIT_DARK_CLASS environment variable
DEFAULT_DARK_CLASS = os.getenv("STYLEKIT_DARK_CLASS", "dark")

# Prefix for generated unique class names (sk-1, sk-2, ...)
CLASS_PREFIX = os.getenv("STYLEKIT_CLASS_PREFIX", "sk")

# Indentation unit for multi-line blocks (@keyframes, @media, :root)
INDENT = "  "

# Fractional keyframe positions render with this many decimals
KEYFRAME_PERCENT_DECIMALS = 2

# Theme file versioning
SCHEMA_VERSION = 1
