"""A JSON document loaded from one or more files, with section/parameter access."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, Optional

from frameutils.baselog import BaseLog

_TOKENS = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/|/\*', re.DOTALL)


def strip_json_comments(text: str) -> str:
    """Replace // and /* */ comments outside strings with whitespace."""

    def replace(match: re.Match) -> str:
        token = match.group(0)
        if token.startswith('"'):
            return token
        if token == "/*":
            raise ValueError("unterminated block comment")
        return " "

    return _TOKENS.sub(replace, text)


def _logger() -> logging.Logger:
    return BaseLog.get_core_logger() or logging.getLogger(__name__)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (dict, list)) and not value)


class JsonWrapper:
    """Reads, merges, queries and writes a JSON document."""

    def __init__(self) -> None:
        self.root: Any = None

    def open_file(self, path) -> None:
        """Read and parse a single file."""
        self.open_files([path])

    def open_files(self, paths: Iterable) -> None:
        """Read files in order, each one's top-level keys replacing earlier ones."""
        for path in paths:
            try:
                text = Path(path).read_text(encoding="utf-8")
            except OSError:
                _logger().error("%s file could not be found", path)
                continue
            try:
                parsed = json.loads(strip_json_comments(text))
            except ValueError as error:
                _logger().error("%s", error)
                continue
            if _is_empty(self.root):
                self.root = parsed
            elif isinstance(self.root, dict) and isinstance(parsed, dict):
                self.root.update(parsed)
            else:
                _logger().error("cannot merge %s into the loaded document", path)

    def write_file(self, path) -> None:
        """Write the document in compact form."""
        try:
            with open(path, "w", encoding="utf-8") as file:
                json.dump(self.root, file, separators=(",", ":"), sort_keys=True)
        except (OSError, TypeError, ValueError):
            _logger().error("%s file could not be written", path)

    def _root_object(self) -> dict:
        if self.root is None:
            self.root = {}
        if not isinstance(self.root, dict):
            raise TypeError("document root is not an object")
        return self.root

    def _section_object(self, section: str) -> dict:
        root = self._root_object()
        if root.get(section) is None:
            root[section] = {}
        target = root[section]
        if not isinstance(target, dict):
            raise TypeError(f"section {section!r} is not an object")
        return target

    def set_vector(self, section: str, param: str, value: Iterable) -> None:
        """Store a list under section/param."""
        self.set_param(param, list(value), section)

    def set_param(self, param: str, value: Any, section: Optional[str] = None) -> None:
        """Store a value under param, inside section when one is given."""
        try:
            target = self._root_object() if section is None else self._section_object(section)
            target[param] = value
        except TypeError:
            if section is None:
                _logger().error("Could not serialize %s param", param)
            else:
                _logger().error("Could not serialize %s param from %s section", param, section)
            raise

    def get_section(self, section: str) -> Any:
        """Return the section, adding an empty (null) entry if it is missing."""
        root = self._root_object()
        return root.setdefault(section, None)

    def _lookup(self, param: str, section: Optional[str]) -> Any:
        if not isinstance(self.root, dict):
            raise KeyError(param)
        container = self.root
        if section is not None:
            container = self.root[section]
            if not isinstance(container, dict):
                raise KeyError(param)
        return container[param]

    def get_vector(self, section: str, param: str) -> list:
        """Return the list stored under section/param."""
        try:
            value = self._lookup(param, section)
            if not isinstance(value, list):
                raise TypeError(f"{param!r} in section {section!r} is not a list")
        except (KeyError, TypeError):
            _logger().error("Could not load %s vector from %s section", param, section)
            raise
        return list(value)

    def get_param(self, param: str, section: Optional[str] = None) -> Any:
        """Return the value stored under param, inside section when one is given."""
        try:
            return self._lookup(param, section)
        except KeyError:
            if section is None:
                _logger().error("Could not load %s param", param)
            else:
                _logger().error("Could not load %s param from %s section", param, section)
            raise

    def contains_param(self, param: str, section: Optional[str] = None) -> bool:
        """Tell whether param exists, inside section when one is given."""
        if not isinstance(self.root, dict):
            return False
        container = self.root if section is None else self.root.get(section)
        return isinstance(container, dict) and param in container