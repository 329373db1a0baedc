"""
Path-keyed override tables.

The IDD type grammar cannot express every idiom of the target language, so
the generator defers to hand-written text for specific schema paths. The
tables are consulted before mechanical derivation, since derivation itself
may fail on shapes it cannot map.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, TYPE_CHECKING

from .config import ConfigError

if TYPE_CHECKING:
    from .schema import TypeDefinition


@dataclass(frozen=True)
class TypeOverride:
    """
    Maps the type expression found at a schema path to a target type name.

    ``source`` is the expression the override was written against; a
    different expression at the same path means the IDD drifted. When
    ``define_types`` is set it is called with the current type scope instead
    of synthesizing anything, and ``target`` is rendered verbatim.
    """

    source: str
    target: str
    define_types: Optional[Callable[["TypeDefinition"], None]] = None


def types_defined_elsewhere(scope: "TypeDefinition") -> None:
    """Override callback for targets declared by hand-written shared types."""
    return None


@dataclass
class OverrideTables:
    """All curated configuration consulted during construction and emission."""

    type_overrides: Dict[str, TypeOverride] = field(default_factory=dict)
    signatures: Dict[str, List[str]] = field(default_factory=dict)
    builders: Dict[str, List[str]] = field(default_factory=dict)
    param_names: Dict[str, str] = field(default_factory=dict)
    method_names: Dict[str, str] = field(default_factory=dict)

    # Import line -> interfaces that need it; an empty tuple means all.
    imports: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    shared_types: Dict[str, List[str]] = field(default_factory=dict)
    base_interfaces: Tuple[str, ...] = ()
    extra_event_values: Dict[str, List[str]] = field(default_factory=dict)
    extra_members: Dict[str, List[str]] = field(default_factory=dict)
    value_constructors: Dict[str, List[str]] = field(default_factory=dict)

    def find_type_override(self, path: str) -> Optional[TypeOverride]:
        """Return the type override registered for a schema path."""
        return self.type_overrides.get(path)

    def signature_for(self, path: str) -> Optional[List[str]]:
        """Return the literal declaration lines replacing a member, if any."""
        return self.signatures.get(path)

    def builder_for(self, path: str) -> Optional[List[str]]:
        """Return literal builder lines replacing a field's builder, if any."""
        return self.builders.get(path)

    def param_name(self, path: str, default: str) -> str:
        return self.param_names.get(path, default)

    def method_name(self, name: str) -> str:
        return self.method_names.get(name, name)

    def imports_for(self, interface_name: str) -> List[str]:
        """Import lines for an interface, in table order."""
        return [
            line
            for line, interfaces in self.imports.items()
            if not interfaces or interface_name in interfaces
        ]

    def shared_types_for(self, interface_name: str) -> List[str]:
        return list(self.shared_types.get(interface_name, []))

    def allows_base(self, base_name: str) -> bool:
        return base_name in self.base_interfaces

    def copy(self) -> "OverrideTables":
        """Return a copy whose tables can be extended without touching this one."""
        return OverrideTables(
            type_overrides=dict(self.type_overrides),
            signatures={k: list(v) for k, v in self.signatures.items()},
            builders={k: list(v) for k, v in self.builders.items()},
            param_names=dict(self.param_names),
            method_names=dict(self.method_names),
            imports=dict(self.imports),
            shared_types={k: list(v) for k, v in self.shared_types.items()},
            base_interfaces=tuple(self.base_interfaces),
            extra_event_values={k: list(v) for k, v in self.extra_event_values.items()},
            extra_members={k: list(v) for k, v in self.extra_members.items()},
            value_constructors={k: list(v) for k, v in self.value_constructors.items()},
        )

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """
        Extend the tables from a configuration mapping.

        Accepted keys: ``type_overrides`` (path -> ``{"from", "to"}``),
        ``signatures``, ``builders`` (path -> list of lines), ``param_names``,
        ``method_names`` (name -> name) and ``base_interfaces`` (list).
        Configuration files cannot supply type definition callbacks.

        Raises:
            ConfigError: If an entry has the wrong shape
        """
        for path, entry in data.get("type_overrides", {}).items():
            if not isinstance(entry, dict) or "from" not in entry or "to" not in entry:
                raise ConfigError(
                    f"Type override for {path} must be an object with 'from' and 'to'"
                )
            self.type_overrides[path] = TypeOverride(
                source=entry["from"], target=entry["to"]
            )

        for table_name in ("signatures", "builders"):
            table = getattr(self, table_name)
            for path, lines in data.get(table_name, {}).items():
                if isinstance(lines, str):
                    lines = [lines]
                if not isinstance(lines, list):
                    raise ConfigError(f"{table_name} entry for {path} must be a list")
                table[path] = [str(line) for line in lines]

        self.param_names.update(data.get("param_names", {}))
        self.method_names.update(data.get("method_names", {}))

        if "base_interfaces" in data:
            merged = list(self.base_interfaces) + list(data["base_interfaces"])
            self.base_interfaces = tuple(dict.fromkeys(merged))
