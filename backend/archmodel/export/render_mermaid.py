# backend/archmodel/export/render_mermaid.py
"""
Mermaid preview of a single view.

Useful for eyeballing a workspace locally before it is published. Styles
are resolved from the workspace's style rules by tag at render time.
"""

import re
from typing import Dict, List

from archmodel.model.elements import Element, InteractionStyle
from archmodel.model.styles import Shape
from archmodel.model.views import ViewKind
from archmodel.model.workspace import Workspace


# Mermaid node brackets per shape
MERMAID_SHAPE_MAP = {
    Shape.PERSON: ('(["', '"])'),
    Shape.CYLINDER: ('[("', '")]'),
    Shape.PIPE: ('[("', '")]'),
    Shape.HEXAGON: ('{{"', '"}}'),
    Shape.CIRCLE: ('(("', '"))'),
    Shape.ELLIPSE: ('(("', '"))'),
    Shape.ROUNDED_BOX: ('("', '")'),
}
DEFAULT_BRACKETS = ('["', '"]')


def _node_id(element_id: str) -> str:
    return f"e{element_id}"


def _escape(text: str) -> str:
    return (text or "").replace('"', "#quot;")


def _render_node(workspace: Workspace, element: Element) -> str:
    style = workspace.styles.resolve_element(element.tags)
    opening, closing = MERMAID_SHAPE_MAP.get(style.shape, DEFAULT_BRACKETS)

    label = _escape(element.name)
    technology = getattr(element, "technology", None)
    if technology:
        label += f"<br/>[{_escape(technology)}]"

    return f"{_node_id(element.id)}{opening}{label}{closing}"


def _class_name(tags: List[str]) -> str:
    return "_".join(re.sub(r"\W+", "_", tag) for tag in tags)


def _class_def(workspace: Workspace, element: Element) -> str:
    style = workspace.styles.resolve_element(element.tags)
    parts = []
    if style.background:
        parts.append(f"fill:{style.background}")
    if style.color:
        parts.append(f"color:{style.color}")
    return ",".join(parts)


def render_mermaid(workspace: Workspace, key: str) -> str:
    view = workspace.view(key)
    model = workspace.model

    lines = ["flowchart TD"]
    element_ids = view.element_ids(model)
    elements = [model.get(i) for i in element_ids]

    # -------------------------
    # Boundary around the scope's children
    # -------------------------
    boundary = None
    if view.kind in (ViewKind.CONTAINER, ViewKind.COMPONENT) and view.scope_id:
        boundary = model.get(view.scope_id)

    inside: List[Element] = []
    outside: List[Element] = []
    for element in elements:
        if boundary is not None and getattr(element, "parent_id", "") == boundary.id:
            inside.append(element)
        else:
            outside.append(element)

    if boundary is not None and inside:
        lines.append(f'subgraph {_node_id(boundary.id)}_boundary["{_escape(boundary.name)}"]')
        for element in inside:
            lines.append(f"  {_render_node(workspace, element)}")
        lines.append("end")

    for element in outside:
        lines.append(_render_node(workspace, element))

    # -------------------------
    # Edges
    # -------------------------
    link_styles = []
    for index, rel_id in enumerate(view.relationship_ids(model)):
        rel = model.get_relationship(rel_id)
        label = rel.description
        if rel.technology:
            label += f" [{rel.technology}]"

        style = workspace.styles.resolve_relationship(rel.tags)
        dashed = style.dashed
        if dashed is None:
            dashed = rel.interaction_style == InteractionStyle.ASYNCHRONOUS
        arrow = "-.->" if dashed else "-->"

        lines.append(
            f'{_node_id(rel.source_id)} {arrow}|"{_escape(label)}"| {_node_id(rel.destination_id)}'
        )

        parts = []
        if style.thickness:
            parts.append(f"stroke-width:{style.thickness}px")
        if style.color:
            parts.append(f"stroke:{style.color}")
        if parts:
            link_styles.append(f"linkStyle {index} {','.join(parts)}")

    # -------------------------
    # Styles
    # -------------------------
    # one classDef per distinct tag list, in order of first appearance
    classes: Dict[str, List[str]] = {}
    class_defs: Dict[str, str] = {}
    for element in elements:
        attributes = _class_def(workspace, element)
        if not attributes:
            continue
        name = _class_name(element.tags)
        class_defs.setdefault(name, attributes)
        classes.setdefault(name, []).append(_node_id(element.id))
    for name, attributes in class_defs.items():
        lines.append(f"classDef {name} {attributes}")
        lines.append(f"class {','.join(classes[name])} {name}")
    lines.extend(link_styles)

    return "\n".join(lines)
