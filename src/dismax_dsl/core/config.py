"""
Builder Configuration

Settings that control how a fulltext query is rendered into dismax
parameters. Values are read from the environment at import time.
"""

import os
from enum import Enum


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable."""
    env_value = os.getenv("ENVIRONMENT", Environment.PRODUCTION.value)
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


def _get_precision() -> int:
    """Get and validate DISMAX_BOOST_PRECISION variable."""
    raw = os.getenv("DISMAX_BOOST_PRECISION", "4")
    try:
        precision = int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid DISMAX_BOOST_PRECISION value: '{raw}'.")
    if precision < 0:
        raise RuntimeError("DISMAX_BOOST_PRECISION must not be negative.")
    return precision


class DismaxSettings:
    """Rendering configuration for dismax parameters"""

    # Query handler
    DEF_TYPE: str = os.getenv("DISMAX_DEF_TYPE", "dismax")

    # Highlighting
    HIGHLIGHT_FIELDS: str = os.getenv("DISMAX_HIGHLIGHT_FIELDS", "*")
    HIGHLIGHT_PRE: str = os.getenv("DISMAX_HIGHLIGHT_PRE", "@@@hl@@@")
    HIGHLIGHT_POST: str = os.getenv("DISMAX_HIGHLIGHT_POST", "@@@endhl@@@")

    # Boost rendering (decimal places kept for boosts and factors)
    BOOST_PRECISION: int = _get_precision()

    # Environment
    ENVIRONMENT: Environment = _get_environment()


settings = DismaxSettings()
