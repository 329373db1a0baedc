"""
Per-run generation state.

A GenerationContext carries the override tables and the resolver, and owns
the interfaces built from one IDD. Nothing is shared between runs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ...logging_config import get_logger
from .errors import SchemaError
from .overrides import OverrideTables
from .resolver import TypeResolver
from .schema import Interface

logger = get_logger(__name__)


@dataclass
class GenerationContext:
    """Override tables plus the interfaces under construction."""

    overrides: OverrideTables = field(default_factory=OverrideTables)
    interfaces: List[Interface] = field(default_factory=list)

    def __post_init__(self):
        self.resolver = TypeResolver(self.overrides)

    def build(
        self, idd: Dict[str, Any], only: Optional[Iterable[str]] = None
    ) -> List[Interface]:
        """
        Build Interface models for every entry of an IDD.

        Args:
            idd: Mapping of interface name to interface descriptor
            only: Restrict generation to these interface names

        Returns:
            The built interfaces, in document order

        Raises:
            SchemaError: If the document is not a mapping of interfaces
            GeneratorError: On any resolution failure
        """
        if not isinstance(idd, dict):
            raise SchemaError("Interface description must be a JSON object")

        selected = set(only) if only else None
        if selected:
            missing = selected - set(idd)
            if missing:
                raise SchemaError(f"Unknown interfaces: {', '.join(sorted(missing))}")

        for name, descriptor in idd.items():
            if selected is not None and name not in selected:
                continue
            logger.debug("Building interface %s", name)
            self.interfaces.append(Interface(self, name, descriptor))

        logger.info("Built %d interface(s)", len(self.interfaces))
        return self.interfaces
