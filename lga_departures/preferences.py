"""
Persisted UI preferences.

Preferences live in a single JSON file mapping namespaced keys to
JSON-encoded values, the way a browser's local storage would hold them.
Missing or corrupt values fall back to defaults.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from lga_departures.config import SECONDARY_WATCHLIST_MAX, STATE_FILE, WATCHLIST_MAX

logger = logging.getLogger(__name__)

THEME_KEY = "lgadep.theme"
PANELS_KEY = "lgadep.panels"
WATCHLIST_KEY = "lgadep.wx_watchlist"
SECONDARY_WATCHLIST_KEY = "lgadep.wx_watchlist_secondary"

THEMES = ("dark", "light")
DEFAULT_THEME = "dark"
DEFAULT_PANELS = {
    "computed": True,
    "departure": True,
    "routes": True,
    "navaid": True,
    "weather": True,
}
DEFAULT_WATCHLIST = ["KLGA", "KJFK", "KEWR", "KTEB", "KHPN"]
DEFAULT_SECONDARY_WATCHLIST: List[str] = []


class PreferenceStore:
    """
    Key-value preference file.

    Example:
        prefs = PreferenceStore("~/.lga_departures.json")
        prefs.toggle_theme()
        prefs.add_to_watchlist("KBOS")
    """

    def __init__(self, path: Union[str, Path] = STATE_FILE):
        self.path = Path(path).expanduser()
        self._data: Optional[Dict[str, str]] = None

    # --- Raw storage ---

    def _load(self) -> Dict[str, str]:
        if self._data is not None:
            return self._data
        self._data = {}
        if self.path.exists():
            try:
                with open(self.path) as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    self._data = {str(k): v for k, v in data.items() if isinstance(v, str)}
                else:
                    logger.warning(f"Ignoring preference file {self.path}: not an object")
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Ignoring unreadable preference file {self.path}: {e}")
        return self._data

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, 'w') as f:
            json.dump(self._load(), f, indent=2)
        os.replace(tmp, self.path)

    def get(self, key: str, default: Any = None) -> Any:
        """Decoded value for a key, default when missing or corrupt."""
        raw = self._load().get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Corrupt preference {key}, using default")
            return default

    def set(self, key: str, value: Any) -> None:
        self._load()[key] = json.dumps(value)
        self._save()

    # --- Theme ---

    @property
    def theme(self) -> str:
        value = self.get(THEME_KEY, DEFAULT_THEME)
        return value if value in THEMES else DEFAULT_THEME

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}, expected one of {', '.join(THEMES)}")
        self.set(THEME_KEY, theme)

    def toggle_theme(self) -> str:
        theme = "light" if self.theme == "dark" else "dark"
        self.set_theme(theme)
        return theme

    # --- Panels ---

    @property
    def panels(self) -> Dict[str, bool]:
        """Visibility of every known panel; unknown stored names are dropped."""
        stored = self.get(PANELS_KEY, {})
        panels = dict(DEFAULT_PANELS)
        if isinstance(stored, dict):
            for name, visible in stored.items():
                if name in panels and isinstance(visible, bool):
                    panels[name] = visible
        return panels

    def set_panel(self, name: str, visible: bool) -> Dict[str, bool]:
        if name not in DEFAULT_PANELS:
            raise ValueError(f"Unknown panel {name!r}")
        panels = self.panels
        panels[name] = visible
        self.set(PANELS_KEY, panels)
        return panels

    # --- Watchlists ---

    @property
    def watchlist(self) -> List[str]:
        return self._read_list(WATCHLIST_KEY, DEFAULT_WATCHLIST, WATCHLIST_MAX)

    def add_to_watchlist(self, station: str) -> List[str]:
        return self._add(WATCHLIST_KEY, DEFAULT_WATCHLIST, WATCHLIST_MAX, station)

    def remove_from_watchlist(self, station: str) -> List[str]:
        return self._remove(WATCHLIST_KEY, DEFAULT_WATCHLIST, WATCHLIST_MAX, station)

    @property
    def secondary_watchlist(self) -> List[str]:
        return self._read_list(SECONDARY_WATCHLIST_KEY, DEFAULT_SECONDARY_WATCHLIST, SECONDARY_WATCHLIST_MAX)

    def add_to_secondary_watchlist(self, station: str) -> List[str]:
        return self._add(SECONDARY_WATCHLIST_KEY, DEFAULT_SECONDARY_WATCHLIST, SECONDARY_WATCHLIST_MAX, station)

    def remove_from_secondary_watchlist(self, station: str) -> List[str]:
        return self._remove(SECONDARY_WATCHLIST_KEY, DEFAULT_SECONDARY_WATCHLIST, SECONDARY_WATCHLIST_MAX, station)

    def _read_list(self, key: str, default: List[str], limit: int) -> List[str]:
        stored = self.get(key, None)
        if not isinstance(stored, list):
            return list(default)
        return clean_station_list(stored, limit)

    def _add(self, key: str, default: List[str], limit: int, station: str) -> List[str]:
        ident = (station or "").strip().upper()
        if not ident:
            return self._read_list(key, default, limit)
        stations = clean_station_list([ident] + self._read_list(key, default, limit), limit)
        self.set(key, stations)
        return stations

    def _remove(self, key: str, default: List[str], limit: int, station: str) -> List[str]:
        ident = (station or "").strip().upper()
        stations = [s for s in self._read_list(key, default, limit) if s != ident]
        self.set(key, stations)
        return stations


def clean_station_list(values: List[Any], limit: int) -> List[str]:
    """Uppercase, drop blanks and duplicates (first occurrence kept), cap length."""
    seen = set()
    stations = []
    for value in values:
        if not isinstance(value, str):
            continue
        ident = value.strip().upper()
        if not ident or ident in seen:
            continue
        seen.add(ident)
        stations.append(ident)
    return stations[:limit]
