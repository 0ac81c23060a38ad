# strongpass/config.py
"""
Runtime settings for StrongPass (logging, HTTP bind address, CLI defaults).
Settings saved as JSON in %APPDATA%/StrongPass/config.json (Windows) or
~/.strongpass/config.json (fallback); STRONGPASS_CONFIG overrides the path.

The password policy is fixed in strongpass.charsets and is not configurable.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "log_level": "WARNING",
    "api_host": "127.0.0.1",
    "api_port": 5000,
    "default_copies": 1,
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "StrongPass")
    return os.path.join(os.path.expanduser("~"), ".strongpass")


def config_path() -> str:
    return os.getenv("STRONGPASS_CONFIG") or os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, coercing each known key to its default's type
    out = DEFAULTS.copy()
    for key, value in data.items():
        default = DEFAULTS.get(key)
        if default is None:
            out[key] = value
            continue
        try:
            if isinstance(value, bool):
                raise TypeError("booleans are not accepted")
            out[key] = type(default)(value)
        except (TypeError, ValueError) as e:
            logger.warning("ignoring config value %s=%r in %s: %s", key, value, p, e)
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p
