"""Named groups of tunable values, saved to and loaded from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, ClassVar, Union

from patiengine.vector import Vector3

DEFAULT_DIRECTORY = Path("Resources/GlobalVariables")

ItemValue = Union[int, float, Vector3, bool]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _checked(value: object) -> ItemValue:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"integer {value} does not fit in 32 bits")
        return value
    if isinstance(value, (float, Vector3)):
        return value
    raise TypeError(f"unsupported item type: {type(value).__name__}")


def _to_json(value: ItemValue) -> object:
    if isinstance(value, Vector3):
        return [value.x, value.y, value.z]
    return value


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class GlobalVariables:
    """A store of int, float, Vector3 and bool items grouped by name."""

    _instance: ClassVar[GlobalVariables | None] = None

    def __init__(self, directory: str | Path = DEFAULT_DIRECTORY) -> None:
        self.directory = Path(directory)
        self._groups: dict[str, dict[str, ItemValue]] = {}

    @classmethod
    def get_instance(cls) -> GlobalVariables:
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def create_group(self, group_name: str) -> None:
        self._groups.setdefault(group_name, {})

    def _path_for(self, group_name: str) -> Path:
        return self.directory / f"{group_name}.json"

    def save_file(self, group_name: str) -> None:
        """Write one group to ``<directory>/<group_name>.json``."""
        if group_name not in self._groups:
            raise KeyError(f"unknown group: {group_name}")
        items = self._groups[group_name]
        root = {group_name: {key: _to_json(value) for key, value in sorted(items.items())}}
        self.directory.mkdir(parents=True, exist_ok=True)
        with self._path_for(group_name).open("w", encoding="utf-8") as stream:
            stream.write(json.dumps(root, indent=4, ensure_ascii=False))
            stream.write("\n")

    def load_files(self) -> None:
        """Load every ``.json`` file in the directory; a missing directory is skipped."""
        if not self.directory.exists():
            return
        for path in sorted(self.directory.iterdir()):
            if path.suffix == ".json":
                self.load_file(path.stem)

    def load_file(self, group_name: str) -> None:
        """Read ``<directory>/<group_name>.json`` into the named group."""
        with self._path_for(group_name).open(encoding="utf-8") as stream:
            root = json.load(stream)
        if not isinstance(root, dict) or group_name not in root:
            raise KeyError(f"group {group_name} not found in its file")
        entries = root[group_name]
        if not isinstance(entries, dict):
            raise ValueError(f"group {group_name} is not a JSON object")
        for key, value in entries.items():
            if isinstance(value, bool):
                self.set_value(group_name, key, value)
            elif isinstance(value, int):
                self.set_value(group_name, key, value)
            elif isinstance(value, float):
                self.set_value(group_name, key, value)
            elif isinstance(value, list) and len(value) == 3:
                if not all(_is_number(component) for component in value):
                    raise TypeError(f"item {key} holds a non-numeric vector component")
                self.set_value(group_name, key, Vector3(*(float(c) for c in value)))

    def add_item(self, group_name: str, key: str, value: ItemValue) -> None:
        """Set ``value`` only if the key is not yet present in the group."""
        group = self._groups.setdefault(group_name, {})
        if key not in group:
            self.set_value(group_name, key, value)

    def set_value(self, group_name: str, key: str, value: ItemValue) -> None:
        checked = _checked(value)
        self._groups.setdefault(group_name, {})[key] = checked

    def _get(self, group_name: str, key: str, accepts: Callable[[object], bool], kind: str):
        if group_name not in self._groups:
            raise KeyError(f"unknown group: {group_name}")
        group = self._groups[group_name]
        if key not in group:
            raise KeyError(f"unknown item {key} in group {group_name}")
        value = group[key]
        if not accepts(value):
            raise TypeError(f"item {key} in group {group_name} is not {kind}")
        return value

    def get_int_value(self, group_name: str, key: str) -> int:
        return self._get(group_name, key, lambda v: type(v) is int, "an int")

    def get_float_value(self, group_name: str, key: str) -> float:
        return self._get(group_name, key, lambda v: isinstance(v, float), "a float")

    def get_vector3_value(self, group_name: str, key: str) -> Vector3:
        return self._get(group_name, key, lambda v: isinstance(v, Vector3), "a Vector3")

    def get_bool_value(self, group_name: str, key: str) -> bool:
        return self._get(group_name, key, lambda v: isinstance(v, bool), "a bool")