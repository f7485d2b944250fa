"""
Model - the element graph of one workspace.

Holds people, software systems, containers and components plus the
directed, labelled relationships between them. Cycles, self-loops and
duplicate edges are all allowed; nothing here walks the graph in an
order-sensitive way.

Ids are sequential strings allocated per Model instance and shared by
elements and relationships, so two models never interfere.
"""

import logging
from typing import Dict, Iterable, List, Optional, Type, TypeVar, Union

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
    coerce_enum,
    merge_tags,
)
from archmodel.model.errors import ElementReferenceError, ModelValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Element)
ElementRef = Union[Element, str]


def require_text(value: Optional[str], what: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ModelValidationError(f"{what} must not be empty")
    return text


class Model:
    def __init__(self):
        self.elements: Dict[str, Element] = {}
        self.relationships: List[Relationship] = []
        self._out: Dict[str, List[Relationship]] = {}
        self._in: Dict[str, List[Relationship]] = {}
        self._next_id = 1
        self._sealed = False

    # -------------------------
    # Lifecycle
    # -------------------------

    def seal(self) -> None:
        """No further additions once the model has been handed to an exporter."""
        self._sealed = True

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def _check_open(self) -> None:
        if self._sealed:
            raise ModelValidationError("model is sealed; it can no longer be modified")

    def _allocate_id(self) -> str:
        new_id = str(self._next_id)
        self._next_id += 1
        return new_id

    # -------------------------
    # Element mutators
    # -------------------------

    def add_person(
        self,
        name: str,
        description: str = "",
        location: Location = Location.UNSPECIFIED,
        tags: Iterable[str] = (),
    ) -> Person:
        self._check_open()
        name = require_text(name, "person name")
        location = coerce_enum(Location, location, "location")
        self._check_top_level_name(name)

        person = Person(
            id=self._allocate_id(),
            name=name,
            description=description or "",
            tags=merge_tags([Tags.ELEMENT, Tags.PERSON], tags),
            location=location,
        )
        return self._register(person)

    def add_software_system(
        self,
        name: str,
        description: str = "",
        location: Location = Location.INTERNAL,
        url: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> SoftwareSystem:
        self._check_open()
        name = require_text(name, "software system name")
        location = coerce_enum(Location, location, "location")
        self._check_top_level_name(name)

        system = SoftwareSystem(
            id=self._allocate_id(),
            name=name,
            description=description or "",
            tags=merge_tags([Tags.ELEMENT, Tags.SOFTWARE_SYSTEM], tags),
            location=location,
            url=url or None,
        )
        return self._register(system)

    def add_container(
        self,
        system: ElementRef,
        name: str,
        description: str = "",
        technology: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> Container:
        self._check_open()
        parent = self.resolve(system, SoftwareSystem)
        name = require_text(name, "container name")
        if any(c.name == name for c in self.containers_of(parent)):
            raise ModelValidationError(
                f"container named '{name}' already exists in '{parent.name}'"
            )

        container = Container(
            id=self._allocate_id(),
            name=name,
            description=description or "",
            tags=merge_tags([Tags.ELEMENT, Tags.CONTAINER], tags),
            parent_id=parent.id,
            technology=technology or None,
        )
        parent.container_ids.append(container.id)
        return self._register(container)

    def add_component(
        self,
        container: ElementRef,
        name: str,
        description: str = "",
        technology: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> Component:
        self._check_open()
        parent = self.resolve(container, Container)
        name = require_text(name, "component name")
        if any(c.name == name for c in self.components_of(parent)):
            raise ModelValidationError(
                f"component named '{name}' already exists in '{parent.name}'"
            )

        component = Component(
            id=self._allocate_id(),
            name=name,
            description=description or "",
            tags=merge_tags([Tags.ELEMENT, Tags.COMPONENT], tags),
            parent_id=parent.id,
            technology=technology or None,
        )
        parent.component_ids.append(component.id)
        return self._register(component)

    def _check_top_level_name(self, name: str) -> None:
        # People and software systems share one namespace
        for el in self.elements.values():
            if isinstance(el, (Person, SoftwareSystem)) and el.name == name:
                raise ModelValidationError(
                    f"a person or software system named '{name}' already exists"
                )

    def _register(self, element: E) -> E:
        self.elements[element.id] = element
        self._out.setdefault(element.id, [])
        self._in.setdefault(element.id, [])
        logger.debug("added %s %s '%s'", element.kind, element.id, element.name)
        return element

    # -------------------------
    # Edge mutators
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
        """
        Attach a directed edge. Both endpoints must already be in this model.
        Self-relationships and duplicates are stored as-is.
        """
        self._check_open()
        src = self.resolve(source)
        dst = self.resolve(destination)
        description = require_text(description, "relationship description")
        interaction_style = coerce_enum(InteractionStyle, interaction_style, "interaction style")

        relationship = Relationship(
            id=self._allocate_id(),
            source_id=src.id,
            destination_id=dst.id,
            description=description,
            technology=technology or None,
            interaction_style=interaction_style,
            tags=merge_tags([Tags.RELATIONSHIP, interaction_style.value], tags),
        )
        self.relationships.append(relationship)
        self._out[src.id].append(relationship)
        self._in[dst.id].append(relationship)
        logger.debug(
            "added relationship %s: %s -> %s '%s'",
            relationship.id, src.name, dst.name, description,
        )
        return relationship

    # -------------------------
    # Queries
    # -------------------------

    def resolve(self, ref: ElementRef, expected: Type[E] = Element) -> E:
        """
        Turn an element or an id into the element stored in this model.

        An element object built by a different model is rejected even if
        its id happens to exist here.
        """
        if isinstance(ref, Element):
            found = self.elements.get(ref.id)
            if found is not ref:
                raise ElementReferenceError(
                    f"{ref.kind} '{ref.name}' does not belong to this model",
                    object_id=ref.id,
                )
        elif isinstance(ref, str):
            found = self.elements.get(ref)
            if found is None:
                raise ElementReferenceError(f"no element with id '{ref}'", object_id=ref)
        else:
            raise ElementReferenceError(f"not an element reference: {ref!r}")

        if not isinstance(found, expected):
            raise ElementReferenceError(
                f"element '{found.name}' is a {found.kind}, expected a {expected.kind}",
                object_id=found.id,
            )
        return found

    def get(self, element_id: str) -> Optional[Element]:
        return self.elements.get(element_id)

    def contains(self, ref: ElementRef) -> bool:
        try:
            self.resolve(ref)
        except ElementReferenceError:
            return False
        return True

    def get_relationship(self, relationship_id: str) -> Optional[Relationship]:
        for rel in self.relationships:
            if rel.id == relationship_id:
                return rel
        return None

    def outgoing(self, element_id: str) -> List[Relationship]:
        return list(self._out.get(element_id, []))

    def incoming(self, element_id: str) -> List[Relationship]:
        return list(self._in.get(element_id, []))

    def of_kind(self, kind: Type[E]) -> List[E]:
        return [el for el in self.elements.values() if isinstance(el, kind)]

    @property
    def people(self) -> List[Person]:
        return self.of_kind(Person)

    @property
    def software_systems(self) -> List[SoftwareSystem]:
        return self.of_kind(SoftwareSystem)

    def containers_of(self, system: SoftwareSystem) -> List[Container]:
        return [self.elements[cid] for cid in system.container_ids]

    def components_of(self, container: Container) -> List[Component]:
        return [self.elements[cid] for cid in container.component_ids]

    def parent_of(self, element: Element) -> Optional[Element]:
        parent_id = getattr(element, "parent_id", "")
        return self.elements.get(parent_id) if parent_id else None
