# backend/archmodel/export/serializers.py
"""
Workspace -> workspace JSON document.

The document layout is owned by the diagramming service: camelCase keys,
relationships nested under their source element, containers and
components nested under their parent, tags as one comma-joined string.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from archmodel.model.elements import Component, Container, Element, Person, SoftwareSystem
from archmodel.model.errors import ExportError
from archmodel.model.model import Model
from archmodel.model.views import View, ViewKind
from archmodel.model.workspace import Workspace


class Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Model ----

class RelationshipDoc(Document):
    id: str
    source_id: str
    destination_id: str
    description: str
    technology: Optional[str] = None
    tags: str
    interaction_style: str


class ComponentDoc(Document):
    id: str
    name: str
    description: str
    technology: Optional[str] = None
    tags: str
    relationships: List[RelationshipDoc] = Field(default_factory=list)


class ContainerDoc(Document):
    id: str
    name: str
    description: str
    technology: Optional[str] = None
    tags: str
    relationships: List[RelationshipDoc] = Field(default_factory=list)
    components: List[ComponentDoc] = Field(default_factory=list)


class SoftwareSystemDoc(Document):
    id: str
    name: str
    description: str
    location: str
    url: Optional[str] = None
    tags: str
    relationships: List[RelationshipDoc] = Field(default_factory=list)
    containers: List[ContainerDoc] = Field(default_factory=list)


class PersonDoc(Document):
    id: str
    name: str
    description: str
    location: str
    tags: str
    relationships: List[RelationshipDoc] = Field(default_factory=list)


class ModelDoc(Document):
    people: List[PersonDoc] = Field(default_factory=list)
    software_systems: List[SoftwareSystemDoc] = Field(default_factory=list)


# ---- Views ----

class ElementViewDoc(Document):
    id: str


class RelationshipViewDoc(Document):
    id: str


class ViewDoc(Document):
    key: str
    description: str
    software_system_id: Optional[str] = None
    container_id: Optional[str] = None
    paper_size: Optional[str] = None
    enterprise_boundary_visible: Optional[bool] = None
    elements: List[ElementViewDoc] = Field(default_factory=list)
    relationships: List[RelationshipViewDoc] = Field(default_factory=list)


class ElementStyleDoc(Document):
    tag: str
    background: Optional[str] = None
    color: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    font_size: Optional[int] = None
    shape: Optional[str] = None
    border: Optional[str] = None
    opacity: Optional[int] = None


class RelationshipStyleDoc(Document):
    tag: str
    thickness: Optional[int] = None
    color: Optional[str] = None
    dashed: Optional[bool] = None
    routing: Optional[str] = None
    font_size: Optional[int] = None
    width: Optional[int] = None
    position: Optional[int] = None


class StylesDoc(Document):
    elements: List[ElementStyleDoc] = Field(default_factory=list)
    relationships: List[RelationshipStyleDoc] = Field(default_factory=list)


class ConfigurationDoc(Document):
    styles: StylesDoc = Field(default_factory=StylesDoc)


class ViewSetDoc(Document):
    system_landscape_views: List[ViewDoc] = Field(default_factory=list)
    system_context_views: List[ViewDoc] = Field(default_factory=list)
    container_views: List[ViewDoc] = Field(default_factory=list)
    component_views: List[ViewDoc] = Field(default_factory=list)
    configuration: ConfigurationDoc = Field(default_factory=ConfigurationDoc)


# ---- Documentation ----

class SectionDoc(Document):
    element_id: str
    type: str
    order: int
    format: str
    content: str


class DocumentationDoc(Document):
    sections: List[SectionDoc] = Field(default_factory=list)


class WorkspaceDoc(Document):
    id: Optional[int] = None
    name: str
    description: str
    model: ModelDoc
    views: ViewSetDoc
    documentation: DocumentationDoc
    last_modified_date: Optional[str] = None
    last_modified_agent: Optional[str] = None


# -------------------------
# Conversion
# -------------------------

def _tags(tags: List[str]) -> str:
    return ",".join(tags)


def _relationships_from(model: Model, element: Element) -> List[RelationshipDoc]:
    return [
        RelationshipDoc(
            id=rel.id,
            source_id=rel.source_id,
            destination_id=rel.destination_id,
            description=rel.description,
            technology=rel.technology,
            tags=_tags(rel.tags),
            interaction_style=rel.interaction_style.value,
        )
        for rel in model.outgoing(element.id)
    ]


def _component_doc(model: Model, component: Component) -> ComponentDoc:
    return ComponentDoc(
        id=component.id,
        name=component.name,
        description=component.description,
        technology=component.technology,
        tags=_tags(component.tags),
        relationships=_relationships_from(model, component),
    )


def _container_doc(model: Model, container: Container) -> ContainerDoc:
    return ContainerDoc(
        id=container.id,
        name=container.name,
        description=container.description,
        technology=container.technology,
        tags=_tags(container.tags),
        relationships=_relationships_from(model, container),
        components=[_component_doc(model, c) for c in model.components_of(container)],
    )


def _system_doc(model: Model, system: SoftwareSystem) -> SoftwareSystemDoc:
    return SoftwareSystemDoc(
        id=system.id,
        name=system.name,
        description=system.description,
        location=system.location.value,
        url=system.url,
        tags=_tags(system.tags),
        relationships=_relationships_from(model, system),
        containers=[_container_doc(model, c) for c in model.containers_of(system)],
    )


def _person_doc(model: Model, person: Person) -> PersonDoc:
    return PersonDoc(
        id=person.id,
        name=person.name,
        description=person.description,
        location=person.location.value,
        tags=_tags(person.tags),
        relationships=_relationships_from(model, person),
    )


def _view_doc(model: Model, view: View) -> ViewDoc:
    doc = ViewDoc(
        key=view.key,
        description=view.description,
        paper_size=view.paper_size.value if view.paper_size else None,
        elements=[ElementViewDoc(id=i) for i in view.element_ids(model)],
        relationships=[RelationshipViewDoc(id=i) for i in view.relationship_ids(model)],
    )
    if view.kind in (ViewKind.SYSTEM_CONTEXT, ViewKind.CONTAINER):
        doc.software_system_id = view.scope_id
    elif view.kind == ViewKind.COMPONENT:
        doc.container_id = view.scope_id
    if view.kind in (ViewKind.SYSTEM_LANDSCAPE, ViewKind.SYSTEM_CONTEXT):
        doc.enterprise_boundary_visible = True
    return doc


def _enum_value(value):
    return value.value if value is not None else None


def build_document(
    workspace: Workspace,
    workspace_id: Optional[int] = None,
    last_modified_date: Optional[str] = None,
    last_modified_agent: Optional[str] = None,
) -> WorkspaceDoc:
    """The id and last-modified fields are stamped only on upload."""
    model = workspace.model
    views = ViewSetDoc()
    buckets = {
        ViewKind.SYSTEM_LANDSCAPE: views.system_landscape_views,
        ViewKind.SYSTEM_CONTEXT: views.system_context_views,
        ViewKind.CONTAINER: views.container_views,
        ViewKind.COMPONENT: views.component_views,
    }
    for view in workspace.views:
        buckets[view.kind].append(_view_doc(model, view))

    styles = workspace.styles
    views.configuration.styles = StylesDoc(
        elements=[
            ElementStyleDoc(
                tag=s.tag,
                background=s.background,
                color=s.color,
                width=s.width,
                height=s.height,
                font_size=s.font_size,
                shape=_enum_value(s.shape),
                border=_enum_value(s.border),
                opacity=s.opacity,
            )
            for s in styles.element_styles
        ],
        relationships=[
            RelationshipStyleDoc(
                tag=s.tag,
                thickness=s.thickness,
                color=s.color,
                dashed=s.dashed,
                routing=_enum_value(s.routing),
                font_size=s.font_size,
                width=s.width,
                position=s.position,
            )
            for s in styles.relationship_styles
        ],
    )

    return WorkspaceDoc(
        id=workspace_id,
        name=workspace.name,
        description=workspace.description,
        model=ModelDoc(
            people=[_person_doc(model, p) for p in model.people],
            software_systems=[_system_doc(model, s) for s in model.software_systems],
        ),
        views=views,
        documentation=DocumentationDoc(
            sections=[
                SectionDoc(
                    element_id=s.element_id,
                    type=s.section_type,
                    order=s.order,
                    format=s.format.value,
                    content=s.content,
                )
                for s in workspace.documentation.sections
            ]
        ),
        last_modified_date=last_modified_date,
        last_modified_agent=last_modified_agent,
    )


def serialize_workspace(workspace: Workspace) -> Dict[str, Any]:
    """JSON-compatible dict of the whole workspace."""
    return build_document(workspace).model_dump(by_alias=True, exclude_none=True)


def workspace_to_json(workspace: Workspace, **stamp) -> str:
    try:
        return build_document(workspace, **stamp).model_dump_json(by_alias=True, exclude_none=True)
    except ValueError as e:
        raise ExportError(f"could not serialize workspace '{workspace.name}': {e}") from e
