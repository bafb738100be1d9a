# -*- coding: utf-8 -*-
"""
config.py - Configuration management for Reply Clipboard
Handles application directories, the bundled version and user preferences
"""

import os
import sys
import json
from pathlib import Path
from dataclasses import dataclass, asdict, fields

# Application identity
APP_NAME = "ReplyClipboard"
APP_DISPLAY_NAME = "Reply Clipboard"
APP_VERSION = "1.0.0"

# Version manifest published alongside the downloads
VERSION_URL = "https://vero.andydragon.com/static/data/replyclipboard/version.json"

# Marker replaced with the current clipboard contents at copy time
PLACEHOLDER = "%%CLIP%%"


def get_app_dir() -> Path:
    """Get application data directory"""
    if sys.platform == "win32":
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base = os.path.expanduser("~/.local/share")
    return Path(base) / APP_NAME


def default_platform() -> str:
    """Manifest key for the running operating system"""
    if sys.platform == "darwin":
        return "macOS"
    if sys.platform == "win32":
        return "windows"
    return "linux"


# Application directories
APP_DIR = get_app_dir()
DATA_DIR = APP_DIR / "data"
CONFIG_FILE = APP_DIR / "config.json"
LOG_FILE = APP_DIR / "replyclipboard.log"


def ensure_dirs():
    """Create application directories if missing"""
    APP_DIR.mkdir(parents=True, exist_ok=True)
    DATA_DIR.mkdir(parents=True, exist_ok=True)


@dataclass
class Config:
    """Application configuration dataclass"""
    # Version check settings
    version_url: str = VERSION_URL
    manifest_platform: str = default_platform()
    check_for_updates_on_launch: bool = True
    request_timeout: float = 120.0

    # Notification settings
    max_toasts: int = 5

    # UI settings
    theme: str = "dark"
    always_on_top: bool = False
    minimize_to_tray: bool = True
    start_minimized: bool = False

    # Logging
    log_level: str = "INFO"

    def save(self, path: Path = None):
        """Save configuration to file"""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: Path = None) -> 'Config':
        """Load configuration from file, ignoring unknown keys"""
        path = path or CONFIG_FILE
        if path.exists():
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                known = {f.name for f in fields(cls)}
                return cls(**{k: v for k, v in data.items() if k in known})
            except (OSError, ValueError, TypeError, AttributeError):
                pass
        return cls()


# Global config instance
config = Config.load()
