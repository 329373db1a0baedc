"""
Java code generator implementation.

Renders one ``public interface`` per IDD interface, with synthesized enums,
option and result classes, overload cascades for trailing optional
parameters and the hand-written pieces from the override tables.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import to_enum_constant, to_title
from ...core.overrides import OverrideTables
from ...core.schema import (
    Enum,
    Field,
    Interface,
    Method,
    NestedClass,
    Param,
    TypeDefinition,
)
from .config import JavaConfig
from .naming import create_java_sanitizer
from .overrides import build_default_overrides
from .types import JavaTypeConfig, JavaTypeMapper

logger = get_logger(__name__)

_SET_RE = re.compile(r"Set<(.+)>")


class JavaGenerator(CodeGenerator):
    """Code generator for synchronous Java API interfaces."""

    def __init__(
        self,
        config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
        overrides: Optional[OverrideTables] = None,
        type_config: Optional[JavaTypeConfig] = None,
    ):
        """
        Initialize Java generator.

        Args:
            config: Generator configuration or a dict of settings
            overrides: Override tables to start from instead of the defaults
            type_config: Type mapping configuration
        """
        super().__init__(config)
        self.config = JavaConfig.from_config(self.config)

        self._base_overrides = overrides
        self.sanitizer = create_java_sanitizer()
        self.type_mapper = JavaTypeMapper(type_config)
        self.overrides: Optional[OverrideTables] = None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return self.config.custom.get("file_extension", ".java")

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def get_override_tables(self) -> OverrideTables:
        """Default Java tables (or the injected ones) plus configured entries."""
        if self._base_overrides is not None:
            tables = self._base_overrides.copy()
        else:
            tables = build_default_overrides()
        tables.update_from_dict(self.config.overrides)
        return tables

    def create_context(self):
        context = super().create_context()
        self.overrides = context.overrides
        return context

    @property
    def indent(self) -> str:
        return self.config.indent

    # Interface

    def generate_interface(self, interface: Interface) -> List[str]:
        """Render a complete Java source file for one interface."""
        output: List[str] = []
        offset = self.indent

        self._write_header(output)
        self._write_imports(output, interface)

        extends = self._extends_clause(interface)
        output.append(f"public interface {interface.name}{extends} {{")
        self._write_shared_types(output, interface, offset)
        self._write_events(output, interface, offset)
        self._write_type_definitions(output, interface, offset)
        for method in interface.methods:
            self._write_method(output, method, offset)
        for line in self.overrides.extra_members.get(interface.name, []):
            output.append(offset + line)
        output.append("}")
        output.append("\n")
        return output

    def _write_header(self, output: List[str]):
        header = self.render_template(
            "header.java.j2",
            {
                "add_license_header": self.config.add_license_header,
                "license": self.config.license,
                "copyright_holder": self.config.copyright_holder,
                "package_name": self.config.package_name,
            },
        )
        output.extend(header.split("\n"))
        output.append("")

    def _write_imports(self, output: List[str], interface: Interface):
        imports = self.overrides.imports_for(interface.name)
        if imports:
            output.extend(imports)
            output.append("")

    def _extends_clause(self, interface: Interface) -> str:
        base = interface.extends
        if not base:
            return ""
        if isinstance(base, list):
            if len(base) != 1:
                logger.debug("Dropping multiple bases of %s: %s", interface.name, base)
                return ""
            base = base[0]
        if not self.overrides.allows_base(base):
            logger.debug("Dropping base %s of %s", base, interface.name)
            return ""
        return f" extends {base}"

    def _write_shared_types(self, output: List[str], interface: Interface, offset: str):
        for template_name in self.overrides.shared_types_for(interface.name):
            text = self.render_template(
                template_name, {"i": self.indent, "interface_name": interface.name}
            )
            for line in text.split("\n"):
                output.append(offset + line if line.strip() else "")
            output.append("")

    def _write_events(self, output: List[str], interface: Interface, offset: str):
        if not interface.events:
            return

        values = list(self.overrides.extra_event_values.get(interface.name, []))
        values.extend(to_enum_constant(event.name) for event in interface.events)

        output.append(f"{offset}enum EventType {{")
        for value in values:
            output.append(f"{offset}{self.indent}{value},")
        output.append(f"{offset}}}")
        output.append("")
        params = "EventType type, Listener<EventType> listener"
        output.append(f"{offset}void addListener({params});")
        output.append(f"{offset}void removeListener({params});")

    # Enums and nested classes

    def _write_type_definitions(
        self, output: List[str], scope: TypeDefinition, offset: str
    ):
        for enum in scope.enums:
            self._write_enum(output, enum, offset)
        for nested in scope.classes:
            self._write_nested_class(output, nested, offset)

    def _write_enum(self, output: List[str], enum: Enum, offset: str):
        access = "public " if isinstance(enum.owner_scope, NestedClass) else ""
        values = ", ".join(enum.values)
        output.append(f"{offset}{access}enum {enum.name} {{ {values} }}")

    def _write_nested_class(self, output: List[str], nested: NestedClass, offset: str):
        access = "public " if isinstance(nested.owner_scope, NestedClass) else ""
        output.append(f"{offset}{access}class {nested.name} {{")

        body = offset + self.indent
        self._write_type_definitions(output, nested, body)

        field_access = "private " if nested.is_return_type else "public "
        for field in nested.fields:
            self._write_field(output, field, body, field_access)
        output.append("")

        if nested.is_return_type:
            for field in nested.fields:
                self._write_getter(output, field, body)
        else:
            self._write_builders(output, nested, body)
        output.append(f"{offset}}}")

    def _write_field(self, output: List[str], field: Field, offset: str, access: str):
        signature = self.overrides.signature_for(field.path)
        if signature is not None:
            output.extend(offset + line for line in signature)
            return
        java_type = self.type_mapper.to_java(field.type)
        output.append(f"{offset}{access}{java_type} {self._field_name(field)};")

    def _write_getter(self, output: List[str], field: Field, offset: str):
        name = self._field_name(field)
        java_type = self.type_mapper.to_java(field.type)
        output.append(f"{offset}public {java_type} {name}() {{")
        output.append(f"{offset}{self.indent}return this.{name};")
        output.append(f"{offset}}}")

    def _write_builders(self, output: List[str], nested: NestedClass, offset: str):
        outer = nested.owner_scope
        if isinstance(outer, NestedClass):
            output.append(f"{offset}{nested.name}() {{")
            output.append(f"{offset}}}")
            output.append(f"{offset}public {outer.name} done() {{")
            output.append(f"{offset}{self.indent}return {outer.name}.this;")
            output.append(f"{offset}}}")
            output.append("")

        for field in nested.fields:
            self._write_builder(output, field, offset, nested.name)

    def _write_builder(
        self, output: List[str], field: Field, offset: str, class_name: str
    ):
        """
        Render the builder method(s) for an option-class field.

        Args:
            output: Lines being collected
            field: Field to render a builder for
            offset: Indentation of the class body
            class_name: Name of the class that owns the field
        """
        builder = self.overrides.builder_for(field.path)
        if builder is not None:
            output.extend(offset + line for line in builder)
            return
        if self.overrides.signature_for(field.path) is not None:
            # Hand-written declaration without a builder
            return

        name = self._field_name(field)
        title = to_title(name)
        java_type = self.type_mapper.to_java(field.type)
        body = offset + self.indent
        with_method = f"{offset}public {class_name} with{title}"
        set_match = _SET_RE.fullmatch(java_type)

        if field.type.is_nested_class:
            output.append(f"{offset}public {java_type} set{title}() {{")
            output.append(f"{body}this.{name} = new {java_type}();")
            output.append(f"{body}return this.{name};")
        elif java_type in self.overrides.value_constructors:
            params = self.overrides.value_constructors[java_type]
            args = ", ".join(param.split()[-1] for param in params)
            output.append(f"{with_method}({', '.join(params)}) {{")
            output.append(f"{body}this.{name} = new {java_type}({args});")
            output.append(f"{body}return this;")
        elif set_match:
            output.append(f"{with_method}({set_match.group(1)}... {name}) {{")
            output.append(f"{body}this.{name} = new HashSet<>(Arrays.asList({name}));")
            output.append(f"{body}return this;")
        else:
            output.append(f"{with_method}({java_type} {name}) {{")
            output.append(f"{body}this.{name} = {name};")
            output.append(f"{body}return this;")
        output.append(f"{offset}}}")

    # Methods

    def _write_method(self, output: List[str], method: Method, offset: str):
        signature = self.overrides.signature_for(method.path)
        if signature is not None:
            output.extend(offset + line for line in signature)
            return

        for count in method.trailing_optional_indices():
            self._write_default_overload(output, method, count, offset)
        output.append(f"{offset}{self._method_declaration(method, method.params)};")

    def _write_default_overload(
        self, output: List[str], method: Method, count: int, offset: str
    ):
        """Render a default method that fills in parameter ``count`` onwards."""
        name = self._method_name(method)
        return_type = self.type_mapper.to_java(method.return_type)
        omitted = self.type_mapper.to_java(method.params[count].type)

        args = [self._param_name(param) for param in method.params[:count]]
        args.append(self.type_mapper.default_value(omitted))
        returns = "" if return_type == "void" else "return "

        declaration = self._method_declaration(method, method.params[:count])
        output.append(f"{offset}default {declaration} {{")
        output.append(f"{offset}{self.indent}{returns}{name}({', '.join(args)});")
        output.append(f"{offset}}}")

    def _method_declaration(self, method: Method, params: List[Param]) -> str:
        return_type = self.type_mapper.to_java(method.return_type)
        param_list = ", ".join(
            f"{self.type_mapper.to_java(param.type)} {self._param_name(param)}"
            for param in params
        )
        return f"{return_type} {self._method_name(method)}({param_list})"

    # Names

    def _method_name(self, method: Method) -> str:
        return self.sanitizer.sanitize_name(self.overrides.method_name(method.name))

    def _param_name(self, param: Param) -> str:
        name = self.overrides.param_name(param.path, param.name)
        return self.sanitizer.sanitize_name(name)

    def _field_name(self, field: Field) -> str:
        return self.sanitizer.sanitize_name(field.name)
