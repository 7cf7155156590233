"""Run configuration — which Java files to scan and where to write results.

The configuration file is a JSON object whose ``filePaths`` key lists the
source files to process:

    {"filePaths": ["src/main/java/Foo.java", "src/main/java/Bar.java"]}

Default locations can be overridden with the JAVADECL_CONFIG and
JAVADECL_OUTPUT environment variables, or from the command line.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from javadecl.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_CONFIG_PATH = Path("src/JSON/filePath.json")
DEFAULT_OUTPUT_PATH = Path("output.json")

FILE_PATHS_KEY = "filePaths"


def default_config_path() -> Path:
    """Configuration location, honouring JAVADECL_CONFIG."""
    return Path(os.environ.get("JAVADECL_CONFIG", DEFAULT_CONFIG_PATH))


def default_output_path() -> Path:
    """Output record location, honouring JAVADECL_OUTPUT."""
    return Path(os.environ.get("JAVADECL_OUTPUT", DEFAULT_OUTPUT_PATH))


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

@dataclass
class RunConfig:
    """Validated run configuration."""

    file_paths: list[Union[str, Path]] = field(default_factory=list)  # as configured
    source: Optional[Path] = None  # config file it was read from


def load_config(config_path: Optional[Path] = None) -> RunConfig:
    """
    Read and validate a JSON configuration file.

    Args:
        config_path: Path to the configuration file
                     (default: JAVADECL_CONFIG or src/JSON/filePath.json)

    Returns:
        RunConfig listing the files to process, in configuration order

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid
                            JSON, or lacks a list of path strings
    """
    path = Path(config_path) if config_path is not None else default_config_path()

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Malformed configuration file {path}: {e}") from e

    return parse_config(data, source=path)


def parse_config(data: object, source: Optional[Path] = None) -> RunConfig:
    """Validate already-decoded configuration data."""
    where = f" in {source}" if source is not None else ""

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration{where} must be a JSON object")

    if FILE_PATHS_KEY not in data:
        raise ConfigurationError(f"Missing '{FILE_PATHS_KEY}' key{where}")

    paths = data[FILE_PATHS_KEY]
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ConfigurationError(f"'{FILE_PATHS_KEY}'{where} must be a list of strings")

    return RunConfig(file_paths=list(paths), source=source)
