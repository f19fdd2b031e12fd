from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.scalarstring import LiteralScalarString

from ..base import InvalidConfiguration
from ..runtime.generator import DEFAULT_CLASS_NAME
from ..runtime.stringifier import DEFAULT_MAX_CELL_LENGTH, MIN_CELL_LENGTH, SupportsStringify

_yaml = YAML(typ="safe")

_dump_yaml = YAML()
_dump_yaml.default_flow_style = False
_dump_yaml.indent(mapping=2, sequence=4, offset=2)


@dataclass(frozen=True)
class TableOptions:
    max_columns: int = 10
    max_rows: int = 10
    # undeclared instance attributes (visible on a sample row only)
    include_fields: bool = False
    # declared attributes, properties, mapping keys
    include_properties: bool = True
    max_cell_length: int = DEFAULT_MAX_CELL_LENGTH
    # overrides max_cell_length when given
    stringifier: SupportsStringify | None = None
    css_class_name: str = DEFAULT_CLASS_NAME
    # None means the built-in stylesheet for css_class_name
    css_text: str | None = None

    def __post_init__(self) -> None:
        if self.max_columns < 0:
            raise InvalidConfiguration(f"max_columns must not be negative, got {self.max_columns}")
        if self.max_rows < 0:
            raise InvalidConfiguration(f"max_rows must not be negative, got {self.max_rows}")
        if self.max_cell_length < MIN_CELL_LENGTH:
            raise InvalidConfiguration(
                f"max_cell_length must be at least {MIN_CELL_LENGTH}, got {self.max_cell_length}"
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "TableOptions":
        """
        Build options from plain data (e.g. a parsed YAML document).
        ``stringifier`` cannot be set this way.
        """
        allowed = {f.name for f in fields(cls)} - {"stringifier"}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise InvalidConfiguration(f"Unknown table option(s): {unknown}")
        return cls(**data)

    def to_mapping(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "stringifier"}


def load_options(path: str | Path) -> TableOptions:
    """
    Load ``TableOptions`` from a YAML file.

    Example file:

        max_rows: 25
        max_columns: 6
        css_class_name: compact
        css_text: |
          .compact td { padding: 1px; }
    """
    path = Path(path)
    data = _yaml.load(path.read_text())
    if data is None:
        return TableOptions()
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Options file {path} did not parse as a mapping/dict")
    return TableOptions.from_mapping(data)


def dump_options(options: TableOptions, path: str | Path) -> None:
    path = Path(path)
    data = options.to_mapping()
    if data["css_text"] is None:
        del data["css_text"]
    elif "\n" in data["css_text"]:
        data["css_text"] = LiteralScalarString(data["css_text"])

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        _dump_yaml.dump(data, f)
