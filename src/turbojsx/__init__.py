from .catalog import Assembler, ElementCatalog
from .errors import ConfigurationError, InvalidAttributeError, NamespaceError, TransformError, UnknownElementError
from .namespace import resolve
from .nodes import Attribute, AttributeName, ElementIdentity, Namespace, Value
from .transformer import MarkupTransformer, ResolutionContext, TransformOpts, transform_source, transform_tree

__all__ = [
    "Assembler",
    "Attribute",
    "AttributeName",
    "ConfigurationError",
    "ElementCatalog",
    "ElementIdentity",
    "InvalidAttributeError",
    "MarkupTransformer",
    "Namespace",
    "NamespaceError",
    "ResolutionContext",
    "TransformError",
    "TransformOpts",
    "UnknownElementError",
    "Value",
    "resolve",
    "transform_source",
    "transform_tree",
]
