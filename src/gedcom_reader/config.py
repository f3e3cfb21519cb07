import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_reader.yml"
CONFIG_ENV_VAR = "GEDCOM_READER_CONFIG"

DEFAULTS = {
    "paths": {"logs_dir": "logs", "mock_files_dir": "mock_files"},
    "logging": {
        "level": "INFO",
        "file": "gedcom_reader.log",
        "to_file": False,
        "rotate": False,
        "per_module": False,
    },
    "parser": {"duplicate_xref": "last", "require_header": False},
    "debug": False,
}


class GRConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.parser = {**DEFAULTS["parser"], **(data.get("parser") or {})}
        self.debug = bool(data.get("debug", False))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'GRConfig':
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        # Installed without the repository's config/ directory.
        return GRConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    return GRConfig(data)

_config_cache = None

def get_config() -> 'GRConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config_cache() -> None:
    global _config_cache
    _config_cache = None
