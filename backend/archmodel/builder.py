"""
WorkspaceBuilder - incremental assembly of one architecture workspace.

Usage:
    builder = WorkspaceBuilder("Shop", "Online shop")
    customer = builder.add_person("Customer", "Buys things")
    shop = builder.add_software_system("Shop", "Sells things")
    builder.add_relationship(customer, shop, "Browses")
    builder.add_system_context_view(shop, "Context", "Shop context")
    workspace = builder.build()

Every builder owns its own Model; nothing is shared between builders.
The builder is single-threaded and append-only. build() seals it.
"""

import logging
from typing import Dict, Iterable, Optional, Union

from archmodel.model.documentation import Documentation, Format, Section
from archmodel.model.elements import (
    Component,
    Container,
    Element,
    InteractionStyle,
    Location,
    Person,
    Relationship,
    SoftwareSystem,
)
from archmodel.model.errors import ModelValidationError
from archmodel.model.model import ElementRef, Model, require_text
from archmodel.model.styles import ElementStyle, RelationshipStyle, Styles
from archmodel.model.views import PaperSize, View, ViewKind
from archmodel.model.workspace import Workspace

logger = logging.getLogger(__name__)


class WorkspaceBuilder:
    def __init__(self, name: str, description: str = ""):
        self.name = require_text(name, "workspace name")
        self.description = description or ""
        self.model = Model()
        self.styles = Styles()
        self.documentation = Documentation(self.model)
        self._views: Dict[str, View] = {}
        self._workspace: Optional[Workspace] = None

    # -------------------------
    # Elements
    # -------------------------

    def add_person(
        self,
        name: str,
        description: str = "",
        location: Location = Location.UNSPECIFIED,
        tags: Iterable[str] = (),
    ) -> Person:
        self._check_open()
        return self.model.add_person(name, description, location=location, tags=tags)

    def add_software_system(
        self,
        name: str,
        description: str = "",
        location: Location = Location.INTERNAL,
        url: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> SoftwareSystem:
        self._check_open()
        return self.model.add_software_system(
            name, description, location=location, url=url, tags=tags
        )

    def add_container(
        self,
        system: ElementRef,
        name: str,
        description: str = "",
        technology: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> Container:
        self._check_open()
        return self.model.add_container(system, name, description, technology, tags)

    def add_component(
        self,
        container: ElementRef,
        name: str,
        description: str = "",
        technology: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> Component:
        self._check_open()
        return self.model.add_component(container, name, description, technology, tags)

    # -------------------------
    # Relationships
    # -------------------------

    def add_relationship(
        self,
        source: ElementRef,
        destination: ElementRef,
        description: str,
        technology: Optional[str] = None,
        interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS,
        tags: Iterable[str] = (),
    ) -> Relationship:
        self._check_open()
        return self.model.add_relationship(
            source, destination, description,
            technology=technology,
            interaction_style=interaction_style,
            tags=tags,
        )

    uses = add_relationship

    # -------------------------
    # Views
    # -------------------------

    def add_system_landscape_view(
        self,
        key: str,
        description: str = "",
        paper_size: Optional[PaperSize] = None,
    ) -> View:
        return self._add_view(View(
            key=key,
            description=description,
            kind=ViewKind.SYSTEM_LANDSCAPE,
            paper_size=paper_size,
            include_all_people=True,
            include_all_software_systems=True,
        ))

    def add_system_context_view(
        self,
        system: ElementRef,
        key: str,
        description: str = "",
        paper_size: Optional[PaperSize] = None,
    ) -> View:
        """All software systems and all people, centred on `system`."""
        scope = self.model.resolve(system, SoftwareSystem)
        return self._add_view(View(
            key=key,
            description=description,
            kind=ViewKind.SYSTEM_CONTEXT,
            scope_id=scope.id,
            paper_size=paper_size,
            include_all_people=True,
            include_all_software_systems=True,
        ))

    def add_container_view(
        self,
        system: ElementRef,
        key: str,
        description: str = "",
        paper_size: Optional[PaperSize] = None,
    ) -> View:
        """All people plus every container of `system`."""
        scope = self.model.resolve(system, SoftwareSystem)
        return self._add_view(View(
            key=key,
            description=description,
            kind=ViewKind.CONTAINER,
            scope_id=scope.id,
            paper_size=paper_size,
            include_all_people=True,
            include_all_containers=True,
        ))

    def add_component_view(
        self,
        container: ElementRef,
        key: str,
        description: str = "",
        paper_size: Optional[PaperSize] = None,
        include: Iterable[ElementRef] = (),
    ) -> View:
        """
        Every component of `container`, the sibling containers of its
        system, and any extra elements named in `include`.
        """
        scope = self.model.resolve(container, Container)
        extra_ids = [self.model.resolve(ref).id for ref in include]
        return self._add_view(View(
            key=key,
            description=description,
            kind=ViewKind.COMPONENT,
            scope_id=scope.id,
            paper_size=paper_size,
            include_all_containers=True,
            include_all_components=True,
            extra_ids=extra_ids,
        ))

    def _add_view(self, view: View) -> View:
        self._check_open()
        view.key = require_text(view.key, "view key")
        if view.key in self._views:
            raise ModelValidationError(f"a view with key '{view.key}' already exists")
        self._views[view.key] = view
        logger.debug("added %s view '%s'", view.kind.value, view.key)
        return view

    # -------------------------
    # Styles & documentation
    # -------------------------

    def add_element_style(self, tag: str, **attributes) -> ElementStyle:
        self._check_open()
        return self.styles.add_element_style(tag, **attributes)

    def add_relationship_style(self, tag: str, **attributes) -> RelationshipStyle:
        self._check_open()
        return self.styles.add_relationship_style(tag, **attributes)

    def add_documentation_section(
        self,
        element: ElementRef,
        section_type: str,
        content: str,
        format: Union[Format, str] = Format.MARKDOWN,
    ) -> Section:
        self._check_open()
        target: Element = self.model.resolve(element)
        return self.documentation.add_section(target.id, section_type, content, format)

    # -------------------------
    # Finish
    # -------------------------

    def build(self) -> Workspace:
        """
        Seal the model, styles and documentation and return the workspace.
        Repeat calls return the same value.
        """
        if self._workspace is None:
            self.model.seal()
            self.styles.seal()
            self.documentation.seal()
            self._workspace = Workspace(
                name=self.name,
                description=self.description,
                model=self.model,
                views=self._views,
                styles=self.styles,
                documentation=self.documentation,
            )
            logger.info("built %r", self._workspace)
        return self._workspace

    def _check_open(self) -> None:
        if self._workspace is not None:
            raise ModelValidationError("workspace already built; the builder is sealed")
