#!/usr/bin/env python3
"""Load diff presentation settings from diff-config.yaml."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ruamel.yaml import YAML

from string_mappers import StringMappers
from terminal_encoding import TerminalEncoding

CONFIG_FILE_NAME = "diff-config.yaml"
AUTO_ENCODING = "auto"
DEFAULT_TERMINAL_ENCODING = TerminalEncoding.NONE
DEFAULT_DIFF_ENABLED = True
DEFAULT_LEGEND_ENABLED = False


@dataclass
class DiffConfig:
    terminal_encoding: TerminalEncoding = DEFAULT_TERMINAL_ENCODING
    diff_enabled: bool = DEFAULT_DIFF_ENABLED
    legend_enabled: bool = DEFAULT_LEGEND_ENABLED
    string_mappers: StringMappers = field(default_factory=StringMappers.default)

    def __post_init__(self) -> None:
        self.terminal_encoding = TerminalEncoding.parse(self.terminal_encoding)

    @classmethod
    def default(cls) -> "DiffConfig":
        return cls()

    @classmethod
    def load(cls, root: Path | None = None) -> "DiffConfig":
        base_dir = root or Path.cwd()
        config_path = base_dir / CONFIG_FILE_NAME
        if not config_path.exists():
            return cls.default()
        yml = YAML(typ="safe", pure=True)
        data = yml.load(config_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise RuntimeError(f"Invalid {CONFIG_FILE_NAME} format: {config_path}")
        unexpected = [key for key in data if key not in {"terminal_encoding", "diff_enabled", "legend_enabled"}]
        if unexpected:
            raise RuntimeError(f"Unexpected keys in {config_path}: {unexpected}")
        encoding = data.get("terminal_encoding", DEFAULT_TERMINAL_ENCODING.value)
        diff_enabled = data.get("diff_enabled", DEFAULT_DIFF_ENABLED)
        legend_enabled = data.get("legend_enabled", DEFAULT_LEGEND_ENABLED)
        if not isinstance(encoding, str):
            raise RuntimeError(f"Invalid terminal_encoding in {config_path}: {encoding!r}")
        if not isinstance(diff_enabled, bool):
            raise RuntimeError(f"Invalid diff_enabled in {config_path}: {diff_enabled!r}")
        if not isinstance(legend_enabled, bool):
            raise RuntimeError(f"Invalid legend_enabled in {config_path}: {legend_enabled!r}")
        if encoding.strip().lower() == AUTO_ENCODING:
            terminal_encoding = TerminalEncoding.detect()
        else:
            try:
                terminal_encoding = TerminalEncoding.parse(encoding)
            except ValueError as error:
                raise RuntimeError(f"Invalid terminal_encoding in {config_path}: {encoding!r}") from error
        return cls(
            terminal_encoding=terminal_encoding,
            diff_enabled=diff_enabled,
            legend_enabled=legend_enabled,
        )
