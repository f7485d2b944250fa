# Architecture model: elements, graph, views, styles, documentation

from archmodel.model.elements import (
    Component,
    Container,
    Element,
    InteractionStyle,
    Location,
    Person,
    Relationship,
    SoftwareSystem,
    Tags,
)
from archmodel.model.errors import (
    ArchitectureModelError,
    ElementReferenceError,
    ExportError,
    ModelValidationError,
)
from archmodel.model.model import Model
from archmodel.model.views import PaperSize, View, ViewKind
from archmodel.model.styles import (
    Border,
    ElementStyle,
    RelationshipStyle,
    Routing,
    Shape,
    Styles,
)
from archmodel.model.documentation import Documentation, Format, Section, SectionType
from archmodel.model.workspace import Workspace

__all__ = [
    "ArchitectureModelError",
    "Border",
    "Component",
    "Container",
    "Documentation",
    "Element",
    "ElementReferenceError",
    "ElementStyle",
    "ExportError",
    "Format",
    "InteractionStyle",
    "Location",
    "Model",
    "ModelValidationError",
    "PaperSize",
    "Person",
    "Relationship",
    "RelationshipStyle",
    "Routing",
    "Section",
    "SectionType",
    "Shape",
    "SoftwareSystem",
    "Styles",
    "Tags",
    "View",
    "ViewKind",
    "Workspace",
]
