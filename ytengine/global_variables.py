"""Named groups of tunable values that can be saved to and loaded from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from ytengine.vector import Vector3

Value = Union[int, float, Vector3]

DEFAULT_DIRECTORY = "Resources/JsonFile/"


def _normalise(value: Value) -> Value:
    """Return a stored copy of ``value``, or raise ``TypeError`` for unsupported types."""
    if isinstance(value, bool):
        raise TypeError("boolean values are not supported")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value
    if isinstance(value, Vector3):
        return Vector3(float(value.x), float(value.y), float(value.z))
    raise TypeError(f"unsupported value type: {type(value).__name__}")


class GlobalVariables:
    """Adjustable items (int, float or Vector3) organised by group name."""

    def __init__(self, directory: str | Path = DEFAULT_DIRECTORY) -> None:
        self.directory = Path(directory)
        self._groups: dict[str, dict[str, Value]] = {}

    def __contains__(self, group_name: object) -> bool:
        return group_name in self._groups

    def _group(self, group_name: str) -> dict[str, Value]:
        try:
            return self._groups[group_name]
        except KeyError:
            raise KeyError(f"no such group: {group_name!r}") from None

    def _item(self, group_name: str, key: str) -> Value:
        group = self._group(group_name)
        try:
            return group[key]
        except KeyError:
            raise KeyError(f"no item {key!r} in group {group_name!r}") from None

    def create_group(self, group_name: str) -> None:
        """Create an empty group unless one with that name already exists."""
        self._groups.setdefault(group_name, {})

    def set_value(self, group_name: str, key: str, value: Value) -> None:
        """Set an item, creating the group if needed and replacing any old value."""
        self._groups.setdefault(group_name, {})[key] = _normalise(value)

    def add_item(self, group_name: str, key: str, value: Value) -> None:
        """Add an item to an existing group only if the key is not yet present."""
        group = self._group(group_name)
        if key not in group:
            self.set_value(group_name, key, value)

    def get_int_value(self, group_name: str, key: str) -> int:
        """Return an integer item; raises ``TypeError`` if it holds another type."""
        value = self._item(group_name, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"item {key!r} does not hold an int")
        return value

    def get_float_value(self, group_name: str, key: str) -> float:
        """Return a float item; raises ``TypeError`` if it holds another type."""
        value = self._item(group_name, key)
        if not isinstance(value, float):
            raise TypeError(f"item {key!r} does not hold a float")
        return value

    def get_vector3_value(self, group_name: str, key: str) -> Vector3:
        """Return a copy of a Vector3 item; raises ``TypeError`` if it holds another type."""
        value = self._item(group_name, key)
        if not isinstance(value, Vector3):
            raise TypeError(f"item {key!r} does not hold a Vector3")
        return Vector3(value.x, value.y, value.z)

    def _path(self, group_name: str) -> Path:
        return self.directory / f"{group_name}.json"

    def save_file(self, group_name: str) -> Path:
        """Write a group to ``<directory>/<group_name>.json`` and return the path."""
        group = self._group(group_name)
        items: dict[str, object] = {}
        for name in sorted(group):
            value = group[name]
            items[name] = [value.x, value.y, value.z] if isinstance(value, Vector3) else value
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(group_name)
        with path.open("w", encoding="utf-8") as stream:
            json.dump({group_name: items}, stream, indent=4, ensure_ascii=False)
            stream.write("\n")
        return path

    def load_files(self) -> None:
        """Load every ``.json`` file in the directory; a missing directory is ignored."""
        if not self.directory.exists():
            return
        for entry in sorted(self.directory.iterdir()):
            if entry.is_file() and entry.suffix == ".json":
                self.load_file(entry.stem)

    def load_file(self, group_name: str) -> None:
        """Load one group's file into memory.

        Raises ``OSError`` if the file cannot be read and ``KeyError`` if it
        does not contain the group.
        """
        with self._path(group_name).open(encoding="utf-8") as stream:
            root = json.load(stream)
        if not isinstance(root, dict) or group_name not in root:
            raise KeyError(f"file does not contain group {group_name!r}")
        for name, value in root[group_name].items():
            if isinstance(value, bool):
                continue
            if isinstance(value, int):
                self.set_value(group_name, name, value)
            elif isinstance(value, float):
                self.set_value(group_name, name, value)
            elif isinstance(value, list) and len(value) == 3:
                self.set_value(group_name, name, Vector3(*(float(c) for c in value)))