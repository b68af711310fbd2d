"""
Settings and configuration for kanaroma.
"""

import os

# Convention used when romanize() is called without one
DEFAULT_CONVENTION = os.environ.get("KANAROMA_CONVENTION", "hepburn").strip().lower()

# Debug mode
DEBUG = os.environ.get("KANAROMA_DEBUG", "").lower() in ("1", "true", "yes")

# Log line format used by the command line interface
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
