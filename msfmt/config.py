"""Workspace configuration support for msfmt."""

from __future__ import annotations

import fnmatch
import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from msfmt.errors import ConfigError
from msfmt.formatting import FormattingOptions, IndentStyle

CONFIG_FILE_NAMES = ("msfmt.toml", ".msfmtrc")
DEFAULT_EXTENSIONS = (".ms",)


@dataclass
class FormatSettings:
    """The ``[format]`` section."""

    indent_style: IndentStyle = IndentStyle.SPACES
    indent_size: int = 4
    multiline_indent_size: int = 2
    # None keeps whatever final newline the original file had.
    insert_final_newline: Optional[bool] = None

    def to_options(self, *, original_text: Optional[str] = None) -> FormattingOptions:
        final_newline = self.insert_final_newline
        if final_newline is None:
            final_newline = bool(original_text) and original_text.endswith("\n")
        return FormattingOptions(
            indent_style=self.indent_style,
            indent_size=self.indent_size,
            multiline_indent_size=self.multiline_indent_size,
            insert_final_newline=final_newline,
        )


@dataclass
class FileSettings:
    """The ``[files]`` section."""

    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: List[str] = field(default_factory=list)

    def matches(self, path: Path) -> bool:
        return path.suffix in self.extensions

    def is_excluded(self, path: Path, root: Path) -> bool:
        try:
            relative = path.resolve().relative_to(root).as_posix()
        except ValueError:
            relative = path.as_posix()
        return any(
            fnmatch.fnmatch(relative, pattern) or fnmatch.fnmatch(path.name, pattern)
            for pattern in self.exclude
        )


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    format: FormatSettings = field(default_factory=FormatSettings)
    files: FileSettings = field(default_factory=FileSettings)
    path: Optional[Path] = None

    @property
    def from_file(self) -> bool:
        return self.path is not None

    def iter_sources(self, directory: Path) -> Iterable[Path]:
        """Yield the formattable files below ``directory`` in a stable order."""
        for path in sorted(directory.rglob("*")):
            if not path.is_file() or not self.files.matches(path):
                continue
            if self.files.is_excluded(path, self.root):
                continue
            yield path


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON: {exc.msg}", path=str(path), line=exc.lineno) from exc


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML: {exc}", path=str(path)) from exc


def _positive_int(section: Dict[str, Any], key: str, default: int, path: Path) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(
            f"'format.{key}' must be a positive integer, got {value!r}",
            path=str(path),
        )
    return value


def _parse_format(data: Dict[str, Any], path: Path) -> FormatSettings:
    section = data.get("format") or {}
    if not isinstance(section, dict):
        raise ConfigError("'format' must be a table", path=str(path))

    style_raw = section.get("indent_style", FormatSettings.indent_style.value)
    try:
        indent_style = IndentStyle(str(style_raw).lower())
    except ValueError:
        raise ConfigError(
            f"'format.indent_style' must be 'spaces' or 'tabs', got {style_raw!r}",
            path=str(path),
        ) from None

    final_newline = section.get("insert_final_newline")
    if final_newline is not None and not isinstance(final_newline, bool):
        raise ConfigError("'format.insert_final_newline' must be a boolean", path=str(path))

    return FormatSettings(
        indent_style=indent_style,
        indent_size=_positive_int(section, "indent_size", FormatSettings.indent_size, path),
        multiline_indent_size=_positive_int(
            section, "multiline_indent_size", FormatSettings.multiline_indent_size, path
        ),
        insert_final_newline=final_newline,
    )


def _string_list(value: Any, key: str, path: Path) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ConfigError(f"'files.{key}' must be a string or a list of strings", path=str(path))


def _parse_files(data: Dict[str, Any], path: Path) -> FileSettings:
    section = data.get("files") or {}
    if not isinstance(section, dict):
        raise ConfigError("'files' must be a table", path=str(path))
    settings = FileSettings()
    if "extensions" in section:
        extensions = _string_list(section["extensions"], "extensions", path)
        settings.extensions = [ext if ext.startswith(".") else f".{ext}" for ext in extensions]
    if "exclude" in section:
        settings.exclude = _string_list(section["exclude"], "exclude", path)
    return settings


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    """Load the workspace configuration rooted at ``root``.

    Without a config file the defaults apply.  An explicit path that does
    not exist is an error.
    """
    root = root.resolve()
    if explicit is not None and not explicit.exists():
        raise ConfigError("Configuration file not found", path=str(explicit))
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return WorkspaceConfig(root=root)

    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a table", path=str(config_path))

    return WorkspaceConfig(
        root=root,
        format=_parse_format(data, config_path),
        files=_parse_files(data, config_path),
        path=config_path,
    )


__all__ = [
    "CONFIG_FILE_NAMES",
    "FileSettings",
    "FormatSettings",
    "WorkspaceConfig",
    "load_workspace_config",
    "locate_config_file",
]
