"""
Element models for an Interface Description Document.

Every element knows its parent, its schema path and its type scope (the
nearest enclosing Interface or NestedClass). Construction is eager and
top-down: building an Interface builds its members, their type references
resolve immediately, and any enums or nested classes they need are
synthesized in the type scope before a child path can be addressed.
"""

from typing import Any, Dict, Iterator, List, Optional

from ...logging_config import get_logger
from .errors import SchemaError
from .naming import to_title
from .resolver import ResolvedType, enum_values

logger = get_logger(__name__)


def normalize_type_descriptor(raw: Any, path: str) -> Optional[Dict[str, Any]]:
    """
    Normalize the ``type`` entry of a member.

    A bare string is an expression; an object carries the expression under
    ``name`` plus ``properties`` for anonymous object types. A missing or
    null type yields None (rendered as void).
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        return {"name": raw}
    if isinstance(raw, dict):
        if "name" in raw:
            if not isinstance(raw["name"], str):
                raise SchemaError(f"Type name must be a string at {path}")
            return raw
        if "properties" in raw:
            return dict(raw, name="Object")
    raise SchemaError(f"Invalid type descriptor at {path}: {raw!r}")


class Element:
    """Base of every node in the element tree."""

    is_type_scope = False

    def __init__(
        self,
        parent: Optional["Element"],
        name: str,
        descriptor: Optional[Dict[str, Any]],
        use_parent_path: bool = False,
        context=None,
    ):
        self.parent = parent
        self.context = context if context is not None else parent.context
        self.name = name
        self.descriptor = descriptor
        if use_parent_path:
            self.path = parent.path
        elif parent is None:
            self.path = name
        else:
            self.path = f"{parent.path}.{name}"
        self.type_scope = self if self.is_type_scope else parent.type_scope

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


class Member(Element):
    """An element with a required/optional flag."""

    @property
    def required(self) -> bool:
        if not self.descriptor:
            return True
        return bool(self.descriptor.get("required", True))

    @property
    def optional(self) -> bool:
        return not self.required


class TypeRef(Element):
    """
    The type of a method result, parameter, field or event.

    Shares the path of its owner, which is also the override key.
    """

    def __init__(self, parent: Member, raw_type: Any):
        descriptor = normalize_type_descriptor(raw_type, parent.path)
        expression = descriptor["name"] if descriptor else None
        super().__init__(parent, expression or "", descriptor, use_parent_path=True)
        self.expression = expression
        self.is_return_type = isinstance(parent, Method)
        self.resolved: ResolvedType = self.context.resolver.resolve(self)

    @property
    def owner(self) -> Member:
        return self.parent

    @property
    def optional(self) -> bool:
        return self.parent.optional

    @property
    def custom_type(self) -> Optional[str]:
        return self.resolved.custom_type

    @property
    def is_nested_class(self) -> bool:
        return self.resolved.is_nested_class

    def derived_class_name(self) -> str:
        """
        Name for an anonymous object type declared by this reference.

        Fields use their own name; other owners are prefixed with their
        parent's name, so ``Page.click.options`` yields ``ClickOptions``.
        """
        owner = self.parent
        if isinstance(owner, Field):
            return to_title(owner.name)
        return to_title(owner.parent.name) + to_title(owner.name)


class TypeDefinition(Element):
    """An element that owns synthesized enums and nested classes."""

    is_type_scope = True

    def __init__(self, *args, **kwargs):
        self.enums: List["Enum"] = []
        self.classes: List["NestedClass"] = []
        super().__init__(*args, **kwargs)

    def find_enum(self, name: str) -> Optional["Enum"]:
        for existing in self.enums:
            if existing.name == name:
                return existing
        return None

    def find_class(self, name: str) -> Optional["NestedClass"]:
        for existing in self.classes:
            if existing.name == name:
                return existing
        return None

    def create_enum(self, name: str, expression: str) -> Optional["Enum"]:
        """
        Create an enum in this scope from a literal union.

        Returns:
            The new Enum, or None if one with this name already exists
        """
        return self.add_enum(Enum(self, name, expression))

    def add_enum(self, new_enum: "Enum") -> Optional["Enum"]:
        if self.find_enum(new_enum.name) is not None:
            logger.debug("Enum %s already defined in %s", new_enum.name, self.path)
            return None
        self.enums.append(new_enum)
        return new_enum

    def create_nested_class(
        self, name: str, parent: Element, descriptor: Dict[str, Any]
    ) -> Optional["NestedClass"]:
        """
        Create a nested class in this scope.

        The first class created under a name wins; later requests for the
        same name are ignored without comparing their properties.

        Args:
            name: Class name
            parent: TypeRef declaring the class
            descriptor: Type descriptor with ``properties``

        Returns:
            The new NestedClass, or None if the name is taken
        """
        if self.find_class(name) is not None:
            logger.debug("Class %s already defined in %s", name, self.path)
            return None
        nested = NestedClass(parent, name, descriptor)
        self.classes.append(nested)
        return nested


class Method(Member):
    """A method or property of an interface."""

    def __init__(self, parent: "Interface", name: str, descriptor: Dict[str, Any]):
        super().__init__(parent, name, descriptor)
        self.kind = descriptor.get("kind", "method")
        self.return_type = TypeRef(self, descriptor.get("type"))
        self.params: List[Param] = []
        args = descriptor.get("args") or {}
        if not isinstance(args, dict):
            raise SchemaError(f"Arguments of {self.path} must be an object")
        for arg_name, arg in args.items():
            if not isinstance(arg, dict):
                raise SchemaError(f"Argument {self.path}.{arg_name} must be an object")
            self.params.append(Param(self, arg.get("name", arg_name), arg))

    def trailing_optional_indices(self) -> Iterator[int]:
        """
        Indices of the trailing run of optional parameters, last first.

        Scanning stops at the first required parameter from the end, so an
        optional parameter followed by a required one is never included.
        """
        for index in range(len(self.params) - 1, -1, -1):
            if self.params[index].required:
                break
            yield index


class Param(Member):
    def __init__(self, parent: Method, name: str, descriptor: Dict[str, Any]):
        super().__init__(parent, name, descriptor)
        self.type = TypeRef(self, descriptor.get("type"))


class Field(Member):
    """A property of a nested class."""

    def __init__(self, parent: "NestedClass", name: str, descriptor: Dict[str, Any]):
        super().__init__(parent, name, descriptor)
        self.type = TypeRef(self, descriptor.get("type"))


class Event(Member):
    def __init__(self, parent: "Interface", name: str, descriptor: Dict[str, Any]):
        super().__init__(parent, name, descriptor)
        self.type = TypeRef(self, descriptor.get("type"))


class Interface(TypeDefinition):
    """A top-level interface of the IDD."""

    def __init__(self, context, name: str, descriptor: Dict[str, Any]):
        if not isinstance(descriptor, dict):
            raise SchemaError(f"Interface {name} must be an object")
        super().__init__(
            None, descriptor.get("name", name), descriptor, context=context
        )
        self.extends: Optional[str] = descriptor.get("extends")
        self.methods: List[Method] = []
        self.events: List[Event] = []

        members = descriptor.get("members", {})
        if not isinstance(members, dict):
            raise SchemaError(f"Members of {self.name} must be an object")

        for member_name, member in members.items():
            if not isinstance(member, dict) or "kind" not in member:
                raise SchemaError(f"Member {self.name}.{member_name} has no kind")
            member_name = member.get("name", member_name)
            kind = member["kind"]
            # Properties become zero-argument methods
            if kind in ("method", "property"):
                self.methods.append(Method(self, member_name, member))
            elif kind == "event":
                self.events.append(Event(self, member_name, member))
            else:
                logger.warning(
                    "Skipping %s.%s of unknown kind %r", self.name, member_name, kind
                )


class NestedClass(TypeDefinition):
    """A class synthesized for an anonymous object type."""

    def __init__(self, parent: TypeRef, name: str, descriptor: Dict[str, Any]):
        super().__init__(parent, name, descriptor, use_parent_path=True)
        self.fields: List[Field] = []
        properties = (descriptor or {}).get("properties") or {}
        if not isinstance(properties, dict):
            raise SchemaError(f"Properties of {self.path} must be an object")
        for field_name, field_descriptor in properties.items():
            if not isinstance(field_descriptor, dict):
                raise SchemaError(
                    f"Property {self.path}.{field_name} must be an object"
                )
            self.fields.append(Field(self, field_name, field_descriptor))

    @property
    def owner_scope(self) -> TypeDefinition:
        """The interface or class this class is declared in."""
        return self.parent.type_scope

    @property
    def is_return_type(self) -> bool:
        return isinstance(self.parent, TypeRef) and self.parent.is_return_type


class Enum(TypeDefinition):
    """An enum synthesized from a literal union."""

    def __init__(self, parent: TypeDefinition, name: str, expression: str):
        super().__init__(parent, name, None)
        self.expression = expression
        self.values = enum_values(expression)

    @property
    def owner_scope(self) -> TypeDefinition:
        return self.parent.type_scope
