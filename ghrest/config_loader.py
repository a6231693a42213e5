import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

CONFIG_ENV_VAR = "GHREST_CONFIG"
DEFAULT_CONFIG_NAMES = (".ghrest.yml", ".ghrest.yaml")


def _candidates(base_dir: str, explicit: Optional[str]) -> List[Path]:
    if explicit:
        return [Path(explicit)]
    return [Path(base_dir) / name for name in DEFAULT_CONFIG_NAMES]


def load_repo_config(base_dir: str = ".", path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read client overrides from YAML.

    `path` (or $GHREST_CONFIG) points at one file; otherwise the first of
    .ghrest.yml / .ghrest.yaml under `base_dir` is used. Keys are folded to
    settings field names ("Request-Timeout" -> "request_timeout"). A file
    that is unreadable or not a mapping yields {}.
    """
    for candidate in _candidates(base_dir, path or os.getenv(CONFIG_ENV_VAR)):
        if not candidate.is_file():
            continue
        try:
            data = yaml.safe_load(candidate.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Ignoring config file {candidate}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {candidate}: top level is not a mapping")
            return {}
        return {str(k).strip().lower().replace("-", "_"): v for k, v in data.items()}
    return {}


def apply_repo_config(target: Any, conf: Dict[str, Any]) -> List[str]:
    """Set every known key of `conf` on `target`; returns the keys applied."""
    applied = []
    for key, value in conf.items():
        if not hasattr(target, key):
            logger.warning(f"Unknown config key {key!r} ignored")
            continue
        setattr(target, key, value)
        applied.append(key)
    return applied
