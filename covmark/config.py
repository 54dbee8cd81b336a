"""Configuration loading and validation.

Usage:
    config = load()                        # defaults + environment
    config = load("covmark.yaml")          # raises ConfigError on bad config
    generate_template("covmark.yaml")      # writes example file to disk
"""

import codecs
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from covmark.source import DEFAULT_ENCODING, DEFAULT_SUFFIX


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration is missing or invalid."""


# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------

@dataclass
class Config:
    suffix: str = DEFAULT_SUFFIX
    encoding: str = DEFAULT_ENCODING


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load(config_path: str | None = None) -> Config:
    """Load and validate configuration.

    With no *config_path* only defaults and the environment are used.
    Environment variables COVMARK_SUFFIX and COVMARK_ENCODING override file
    values.

    Raises:
        ConfigError: if the file is missing, malformed, or holds invalid
                     values.
    """
    raw: dict = {}
    if config_path is not None:
        raw = _read_yaml(config_path)

    coverage = raw.get("coverage") or {}
    if not isinstance(coverage, dict):
        raise ConfigError("'coverage' must be a YAML mapping.")

    suffix   = os.environ.get("COVMARK_SUFFIX")   or coverage.get("suffix",   DEFAULT_SUFFIX)
    encoding = os.environ.get("COVMARK_ENCODING") or coverage.get("encoding", DEFAULT_ENCODING)

    config = Config(suffix=str(suffix or "").strip(), encoding=str(encoding or "").strip())
    _validate(config)
    return config


def _read_yaml(config_path: str) -> dict:
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(
            f"Config file not found: '{config_path}'\n"
            "Run `covmark init` to generate a template."
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse '{config_path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"'{config_path}' is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read '{config_path}': {exc.strerror}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"'{config_path}' must be a YAML mapping at the top level.")
    return raw


def _validate(config: Config) -> None:
    """Raise ConfigError if a field holds an unusable value."""
    errors: list[str] = []

    if not config.suffix:
        errors.append(
            "  - 'coverage.suffix' is empty (or set the COVMARK_SUFFIX environment variable)"
        )
    try:
        codecs.lookup(config.encoding)
    except LookupError:
        errors.append(f"  - 'coverage.encoding' names an unknown codec: '{config.encoding}'")

    if errors:
        raise ConfigError("Invalid configuration:\n" + "\n".join(errors))


# ---------------------------------------------------------------------------
# Template generator (used by `init` command)
# ---------------------------------------------------------------------------

TEMPLATE = """\
coverage:
  # Appended to a document path to find its coverage record file
  suffix: ".cov"
  encoding: "utf-8"
"""


def generate_template(output_path: str = "covmark.yaml") -> None:
    """Write a template covmark.yaml to *output_path*.

    Raises:
        ConfigError: if the file already exists.
    """
    path = Path(output_path)
    if path.exists():
        raise ConfigError(
            f"'{output_path}' already exists. Remove it first or choose a different path."
        )
    path.write_text(TEMPLATE, encoding="utf-8")
