"""
Settings.

Plain numeric knobs read once from a YAML file and passed explicitly to the
functions and objects that need them. Nothing here is consulted implicitly
at call time.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from .cache import DEFAULT_CACHE_CAPACITY
from .ranges import DEFAULT_MAX_SPAN
from .widths import DEFAULT_WIDTH, width_for

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / 'config' / 'default.yaml'


@dataclass(frozen=True)
class Settings:
    max_span: int = DEFAULT_MAX_SPAN
    cache_capacity: int = DEFAULT_CACHE_CAPACITY
    num_workers: Optional[int] = None
    width: str = DEFAULT_WIDTH

    def __post_init__(self):
        if self.max_span < 0:
            raise ValueError(f"max_span must be >= 0, got {self.max_span}")
        if self.cache_capacity < 1:
            raise ValueError(f"cache_capacity must be >= 1, got {self.cache_capacity}")
        if self.num_workers is not None and self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {self.num_workers}")
        width_for(self.width)


def load_settings(path: Union[str, Path, None] = None) -> Settings:
    """
    Load settings from a YAML mapping.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. Defaults to config/default.yaml; a missing default file
        yields the built-in defaults.

    Returns
    -------
    Settings

    Raises
    ------
    ValueError
        On unknown keys or invalid values.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return Settings()
        path = DEFAULT_CONFIG_PATH

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{path}: unknown settings {unknown}")

    return Settings(**raw)
