from __future__ import annotations

import os
from pathlib import Path

# Both paths are resolved against the working directory the tool is started from.
SCHEMA_PATH = Path("schema") / "edm.v0.4.schema.json"
EXAMPLES_GLOB = "examples/*.ddna.json"
SCHEMA_LABEL = "edm.v0.4"

ERROR_SEPARATOR = "\n  - "

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CRASH = 2

LOG_LEVEL_ENV = "EDM_VALIDATE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def log_level() -> str:
    """Log level name from the environment (read at call time)."""
    return (os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
