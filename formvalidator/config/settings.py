"""
Global settings loaded from environment variables.

All settings have sensible defaults so the engine works out of the box.
Override via environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()
FORMS_DIR = os.getenv("FORMS_DIR", str(PROJECT_ROOT / "forms"))

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")
