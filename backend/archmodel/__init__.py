"""
archmodel - build a software architecture workspace in code and publish it.

 - model/     elements, graph, views, style rules, documentation
 - builder.py the incremental build API (WorkspaceBuilder)
 - export/    workspace JSON, upload client, Mermaid preview
 - samples/   concrete workspaces
 - api/       FastAPI routes over the samples
"""

from archmodel.builder import WorkspaceBuilder
from archmodel.model import (
    ArchitectureModelError,
    ElementReferenceError,
    ExportError,
    InteractionStyle,
    Location,
    ModelValidationError,
    PaperSize,
    Routing,
    Shape,
    Tags,
    Workspace,
)

__all__ = [
    "ArchitectureModelError",
    "ElementReferenceError",
    "ExportError",
    "InteractionStyle",
    "Location",
    "ModelValidationError",
    "PaperSize",
    "Routing",
    "Shape",
    "Tags",
    "Workspace",
    "WorkspaceBuilder",
]
