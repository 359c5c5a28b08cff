"""
Centralized constants for pinpane.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

PINPANE_CONFIG_DIR = Path.home() / ".config" / "pinpane"
CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "pinpane.log"

# =============================================================================
# PINNING
# =============================================================================

# Used when create_pinned is called without a size: 30% of the frame
DEFAULT_PIN_SIZE = 0.3

# =============================================================================
# LAYOUT LIMITS (in cells)
# =============================================================================

MIN_REGION_WIDTH = 10
MIN_REGION_HEIGHT = 4

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_DEFAULT_SIZE = "PINPANE_DEFAULT_SIZE"
ENV_CONFIG_DIR = "PINPANE_CONFIG_DIR"

ENV_VAR_DEFINITIONS = {
    ENV_DEFAULT_SIZE: {
        "description": "Default size of new pinned regions (ratio < 1 or cells >= 1)",
        "default": str(DEFAULT_PIN_SIZE),
    },
    ENV_CONFIG_DIR: {
        "description": "Directory holding config.json and pinpane.log",
        "default": str(PINPANE_CONFIG_DIR),
    },
}
