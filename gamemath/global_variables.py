"""Named groups of tunable values that can be saved to and loaded from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import ClassVar, Dict, Iterator, Optional, Type, TypeVar, Union

from .vector import Vector3

Item = Union[int, float, Vector3, bool]
T = TypeVar("T", int, float, Vector3, bool)

DEFAULT_DIRECTORY = "resources/globalVariables/"

_ITEM_TYPES = (int, float, Vector3, bool)


class GlobalVariablesError(RuntimeError):
    """Raised when a group, an item or a file cannot be found or understood."""


def _check_item(value: object) -> None:
    if type(value) not in _ITEM_TYPES:
        raise TypeError(
            f"unsupported item type {type(value).__name__}; "
            "expected int, float, bool or Vector3"
        )


def _to_json(value: Item) -> object:
    if isinstance(value, Vector3):
        return [value.x, value.y, value.z]
    return value


def _from_json(key: str, value: object) -> Item:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value
    if isinstance(value, list) and len(value) == 3:
        try:
            return Vector3(*(float(component) for component in value))
        except (TypeError, ValueError) as exc:
            raise GlobalVariablesError(
                f"Unsupported value type for key: {key}"
            ) from exc
    raise GlobalVariablesError(f"Unsupported value type for key: {key}")


class GlobalVariables:
    """An ordered store of groups, each an ordered set of named values."""

    _instance: ClassVar[Optional["GlobalVariables"]] = None

    def __init__(self, directory: Union[str, Path] = DEFAULT_DIRECTORY) -> None:
        self.directory = Path(directory)
        self._groups: Dict[str, Dict[str, Item]] = {}

    @classmethod
    def get_instance(cls) -> "GlobalVariables":
        """The shared store, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def groups(self) -> Dict[str, Dict[str, Item]]:
        """A snapshot of every group and its items, in insertion order."""
        return {name: dict(items) for name, items in self._groups.items()}

    def _group(self, group_name: str) -> Dict[str, Item]:
        try:
            return self._groups[group_name]
        except KeyError:
            raise GlobalVariablesError(f"Group not found: {group_name}") from None

    def create_group(self, group_name: str) -> None:
        """Create an empty group unless it already exists."""
        self._groups.setdefault(group_name, {})

    def set_value(self, group_name: str, key: str, value: Item) -> None:
        """Set or replace an item in an existing group."""
        _check_item(value)
        self._group(group_name)[key] = value

    def get_value(self, group_name: str, key: str, kind: Type[T]) -> T:
        """Return the item, which must be exactly of type ``kind``."""
        group = self._group(group_name)
        try:
            item = group[key]
        except KeyError:
            raise GlobalVariablesError(
                f"Item not found in group '{group_name}': {key}"
            ) from None
        if type(item) is not kind:
            raise GlobalVariablesError(
                f"Type mismatch when getting item '{key}' in group '{group_name}'"
            )
        return item

    def add_value(self, group_name: str, key: str, value: Item) -> None:
        """Add an item only if it is not there yet, creating the group if needed."""
        _check_item(value)
        self.create_group(group_name)
        self._groups[group_name].setdefault(key, value)

    def remove_key(self, group_name: str, key: str) -> None:
        """Remove an item; missing groups or keys are ignored."""
        group = self._groups.get(group_name)
        if group is not None:
            group.pop(key, None)

    def groups_matching(self, search: str) -> Iterator[str]:
        """Names of groups containing ``search``; an empty search matches all."""
        return (name for name in self._groups if not search or search in name)

    def _path_for(self, group_name: str) -> Path:
        return self.directory / f"{group_name}.json"

    def save_file(self, group_name: str) -> Path:
        """Write a group to ``<directory>/<group>.json`` and return the path."""
        group = self._group(group_name)
        root = {group_name: [{key: _to_json(value)} for key, value in group.items()]}
        path = self._path_for(group_name)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as stream:
                json.dump(root, stream, indent=4, ensure_ascii=False)
                stream.write("\n")
        except OSError as exc:
            raise GlobalVariablesError(
                "Failed open data fail for write."
            ) from exc
        return path

    def load_files(self) -> None:
        """Load every ``.json`` file in the directory; a missing directory is ignored."""
        if not self.directory.exists():
            return
        for entry in sorted(self.directory.iterdir()):
            if entry.suffix == ".json":
                self.load_file(entry.stem)

    def load_file(self, group_name: str) -> None:
        """Merge a group from its JSON file; keys already present keep their values."""
        path = self._path_for(group_name)
        try:
            with path.open("r", encoding="utf-8") as stream:
                root = json.load(stream)
        except OSError as exc:
            raise GlobalVariablesError(f"Failed to open file: {path}") from exc
        except json.JSONDecodeError as exc:
            raise GlobalVariablesError(f"Invalid JSON in file: {path}") from exc

        if not isinstance(root, dict) or group_name not in root:
            raise GlobalVariablesError(f"Group not found in JSON file: {group_name}")

        group_data = root[group_name]
        if isinstance(group_data, list):
            entries = group_data
        elif isinstance(group_data, dict):
            entries = list(group_data.values())
        else:
            entries = [group_data]

        self.create_group(group_name)
        for entry in entries:
            if not isinstance(entry, dict):
                raise GlobalVariablesError(
                    f"Invalid item format in JSON file: {group_name}"
                )
            for key, value in entry.items():
                self.add_value(group_name, key, _from_json(key, value))