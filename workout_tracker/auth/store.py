"""本地键值设置存储（JSON 文件）。启动时读取一次，每次修改后同步写回。"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from workout_tracker.config import SETTINGS_PATH, ensure_dirs

logger = logging.getLogger(__name__)


class SettingsStore:
    """键值存储：缺失的键按 False / 空字符串处理。"""

    def __init__(self, path: Optional[Path] = None):
        if path is None:
            ensure_dirs()
        self.path = path or SETTINGS_PATH
        self._values: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read settings from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed settings file %s", self.path)
            return {}
        return data

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._values, f, indent=2, ensure_ascii=False)

    def get_bool(self, key: str) -> bool:
        value = self._values.get(key)
        return value if isinstance(value, bool) else False

    def get_str(self, key: str) -> str:
        value = self._values.get(key)
        return value if isinstance(value, str) else ""

    def set_many(self, values: Dict[str, Any]) -> None:
        """写入多个键并立即保存到文件。"""
        self._values.update(values)
        self._save()

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def remove(self, keys: Iterable[str]) -> None:
        changed = False
        for key in keys:
            if key in self._values:
                del self._values[key]
                changed = True
        if changed:
            self._save()
