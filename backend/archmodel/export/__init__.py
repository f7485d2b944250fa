from archmodel.export.serializers import build_document, serialize_workspace, workspace_to_json
from archmodel.export.client import StructurizrClient
from archmodel.export.render_mermaid import render_mermaid

__all__ = [
    "StructurizrClient",
    "build_document",
    "render_mermaid",
    "serialize_workspace",
    "workspace_to_json",
]
