"""apigen: generate language bindings from an interface description document."""

__version__ = "0.1.0"
