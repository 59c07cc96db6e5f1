# config_manager.py - JSON config manager

import json
import os

from .logger_utils import Log

DEFAULTS = {
    "dictionary_path": "dictionary.txt",
    "methods": ["bst", "hashmap"],
    "default_method": "bst",
    "max_suggestions": 10,
    "collation": "unicode",  # or "locale" for LC_COLLATE ordering
    "log_path": os.path.join("logs", "spell_dictionary.log"),
    "log_echo": False,
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = json.loads(json.dumps(DEFAULTS))  # deep copy
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                Log.warning(f"[Config] could not read {self.path}, using defaults: {e}")
                return
            if isinstance(loaded, dict):
                self.data.update(loaded)
            else:
                Log.warning(f"[Config] {self.path} is not a JSON object, using defaults")
        else:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def rows(self):
        return [(k, v) for k, v in self.data.items()]

    def set(self, key, val):
        """Set an option, casting to the default's type, and save."""
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        elif kind is list and isinstance(val, str):
            val = [v.strip() for v in val.split(",") if v.strip()]
        else:
            val = kind(val)
        self.data[key] = val
        self.save()
