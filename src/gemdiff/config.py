import os
from pathlib import Path
from typing import Dict, List

CONFIG_DIR = Path.home() / ".gemdiff"
CONFIG_FILE = CONFIG_DIR / "config"
CACHE_DIR = Path.home() / ".gemdiff_cache"

SOURCES_KEY = "GEMDIFF_SOURCES"
DEFAULT_SOURCE = "https://rubygems.org/"
OUTPUT_DIR = Path("out")


def _read_config(config_file: Path) -> Dict[str, str]:
    config: Dict[str, str] = {}
    if not config_file.exists():
        return config
    try:
        with open(config_file, "r") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                config[key.strip()] = value.strip()
    except (IOError, PermissionError, OSError):
        # unreadable config counts as no config
        return {}
    return config


def _split_sources(value: str) -> List[str]:
    return [s.strip() for s in value.split(",") if s.strip()]


def get_configured_sources(config_file: Path = CONFIG_FILE) -> List[str]:
    """source urls from the environment, falling back to the config file."""
    env_value = os.environ.get(SOURCES_KEY, "")
    if env_value.strip():
        return _split_sources(env_value)
    return _split_sources(_read_config(config_file).get(SOURCES_KEY, ""))


def add_source(url: str, config_file: Path = CONFIG_FILE) -> List[str]:
    """append a source url to the config file, preserving other values."""
    config = _read_config(config_file)
    sources = _split_sources(config.get(SOURCES_KEY, ""))
    if url not in sources:
        sources.append(url)
    config[SOURCES_KEY] = ",".join(sources)

    config_file.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(config_file, "w") as f:
            for key, value in config.items():
                f.write(f"{key}={value}\n")
    except (IOError, PermissionError, OSError) as e:
        raise RuntimeError(f"failed to write config file: {e}") from e
    return sources
