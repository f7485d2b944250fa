from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from archmodel.model.elements import Container, SoftwareSystem
from archmodel.model.model import Model


class ViewKind(Enum):
    SYSTEM_LANDSCAPE = "systemLandscape"
    SYSTEM_CONTEXT = "systemContext"
    CONTAINER = "container"
    COMPONENT = "component"


class PaperSize(Enum):
    """Layout size hint passed through to the diagramming service"""
    A6_PORTRAIT = "A6_Portrait"
    A6_LANDSCAPE = "A6_Landscape"
    A5_PORTRAIT = "A5_Portrait"
    A5_LANDSCAPE = "A5_Landscape"
    A4_PORTRAIT = "A4_Portrait"
    A4_LANDSCAPE = "A4_Landscape"
    A3_PORTRAIT = "A3_Portrait"
    A3_LANDSCAPE = "A3_Landscape"
    A2_PORTRAIT = "A2_Portrait"
    A2_LANDSCAPE = "A2_Landscape"
    LETTER_PORTRAIT = "Letter_Portrait"
    LETTER_LANDSCAPE = "Letter_Landscape"
    LEGAL_PORTRAIT = "Legal_Portrait"
    LEGAL_LANDSCAPE = "Legal_Landscape"
    SLIDE_4_3 = "Slide_4_3"
    SLIDE_16_9 = "Slide_16_9"


@dataclass
class View:
    """
    A named selection over the model.

    Only ids and selector flags are stored. The concrete element and
    relationship sets are recomputed from the live model on every call,
    so elements added after the view was created still show up when the
    selector covers them.
    """
    key: str
    description: str
    kind: ViewKind
    scope_id: Optional[str] = None          # software system or container
    paper_size: Optional[PaperSize] = None

    include_all_people: bool = False
    include_all_software_systems: bool = False
    include_all_containers: bool = False   # of the scoped system
    include_all_components: bool = False   # of the scoped container
    extra_ids: List[str] = field(default_factory=list)

    def element_ids(self, model: Model) -> List[str]:
        ids: List[str] = []

        def add(element_id: str):
            if element_id not in ids:
                ids.append(element_id)

        if self.include_all_software_systems:
            for system in model.software_systems:
                add(system.id)

        if self.include_all_people:
            for person in model.people:
                add(person.id)

        if self.include_all_containers:
            system = self._container_scope_system(model)
            if system is not None:
                for container in model.containers_of(system):
                    add(container.id)

        if self.include_all_components:
            container = model.get(self.scope_id) if self.scope_id else None
            if isinstance(container, Container):
                for component in model.components_of(container):
                    add(component.id)

        for element_id in self.extra_ids:
            if element_id in model.elements:
                add(element_id)

        return ids

    def relationship_ids(self, model: Model) -> List[str]:
        """Every relationship with both ends in the view, duplicates included."""
        in_view = set(self.element_ids(model))
        return [
            rel.id
            for rel in model.relationships
            if rel.source_id in in_view and rel.destination_id in in_view
        ]

    def _container_scope_system(self, model: Model) -> Optional[SoftwareSystem]:
        scope = model.get(self.scope_id) if self.scope_id else None
        if isinstance(scope, SoftwareSystem):
            return scope
        if isinstance(scope, Container):
            return model.get(scope.parent_id)
        return None
