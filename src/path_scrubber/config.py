"""YAML/dict config loader for path-scrubber.

A config file is optional; without one the scrubber runs with the
built-in defaults and writes into $HOME.

Example YAML:

    path_scrubber:
      min_length: 4
      suffix: rs
      output_dir: ~/scrubbed     # null = $HOME
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import EnvironmentUnavailable
from .patterns import DEFAULT_SUFFIX
from .redactor import RedactorConfig
from .strings import DEFAULT_MIN_LENGTH

HOME_ENV = "HOME"


@dataclass
class ScrubberConfig:
    """Everything the CLI needs for one run."""
    min_length: int = DEFAULT_MIN_LENGTH
    suffix: str = DEFAULT_SUFFIX
    output_dir: str | None = None     # None = $HOME

    def redactor_config(self) -> RedactorConfig:
        return RedactorConfig(min_length=self.min_length, suffix=self.suffix)


def _mapping(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a mapping, got {value!r}")
    return value


def load_config(data: dict[str, Any] | None) -> ScrubberConfig:
    """Normalize a config dict (from YAML or inline).

    Raises ValueError naming the offending key when a value has the
    wrong type.
    """
    data = _mapping(data, "config")
    # Support nested under "path_scrubber" key or flat
    if "path_scrubber" in data:
        data = _mapping(data["path_scrubber"], "config key 'path_scrubber'")

    min_length = data.get("min_length", DEFAULT_MIN_LENGTH)
    if isinstance(min_length, bool) or not isinstance(min_length, int):
        raise ValueError(f"config key 'min_length' must be an integer, got {min_length!r}")
    suffix = data.get("suffix", DEFAULT_SUFFIX)
    if not isinstance(suffix, str):
        raise ValueError(f"config key 'suffix' must be a string, got {suffix!r}")
    output_dir = data.get("output_dir")
    if output_dir is not None and not isinstance(output_dir, str):
        raise ValueError(f"config key 'output_dir' must be a string or null, got {output_dir!r}")

    return ScrubberConfig(min_length=min_length, suffix=suffix, output_dir=output_dir)


def load_from_yaml(path: str | Path) -> ScrubberConfig:
    """Load config from a YAML file."""
    import yaml
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"invalid config {path}: {' '.join(str(e).split())}") from e
    try:
        return load_config(data)
    except ValueError as e:
        raise ValueError(f"invalid config {path}: {e}") from e


def home_dir(environ: dict[str, str] | None = None) -> Path:
    """The user's home directory, taken from $HOME only."""
    env = os.environ if environ is None else environ
    value = env.get(HOME_ENV)
    if not value:
        raise EnvironmentUnavailable(HOME_ENV)
    return Path(value)


def resolve_output_dir(config: ScrubberConfig, environ: dict[str, str] | None = None) -> Path:
    """Directory the scrubbed file lands in.

    $HOME is required even when `output_dir` overrides the destination.
    """
    home = home_dir(environ)
    if config.output_dir:
        return Path(config.output_dir).expanduser()
    return home
