"""Configuration module for service_bootstrap

Contains settings, constants, and environment loading shared by the
resource configs.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.absolute()

# Optional environment file with connection settings
ENV_FILE = PROJECT_ROOT / ".env"

# Timeouts (seconds) applied when a variable is not set
DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_VERIFY_TIMEOUT = 2.0

# Values already present in the environment take precedence
load_dotenv(ENV_FILE, override=False)


def env_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))
