from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Type, TypeVar

from archmodel.model.errors import ModelValidationError

EnumT = TypeVar("EnumT", bound=Enum)


def coerce_enum(enum_cls: Type[EnumT], value, what: str) -> EnumT:
    """Accept a member, its value, or its name (any case)."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    try:
        return enum_cls[str(value).upper()]
    except KeyError:
        raise ModelValidationError(f"unknown {what} '{value}'") from None


class Location(Enum):
    """Whether an element sits inside or outside the modelled organisation"""
    INTERNAL = "Internal"
    EXTERNAL = "External"
    UNSPECIFIED = "Unspecified"


class InteractionStyle(Enum):
    SYNCHRONOUS = "Synchronous"
    ASYNCHRONOUS = "Asynchronous"


class Tags:
    """Default tags attached to every element / relationship of a kind"""
    ELEMENT = "Element"
    PERSON = "Person"
    SOFTWARE_SYSTEM = "Software System"
    CONTAINER = "Container"
    COMPONENT = "Component"
    RELATIONSHIP = "Relationship"
    SYNCHRONOUS = InteractionStyle.SYNCHRONOUS.value
    ASYNCHRONOUS = InteractionStyle.ASYNCHRONOUS.value


def merge_tags(defaults: List[str], extra) -> List[str]:
    """Defaults first, then free-form tags; duplicates and blanks dropped."""
    tags: List[str] = []
    for tag in list(defaults) + list(extra or ()):
        tag = (tag or "").strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


# ---- Elements ----

@dataclass
class Element:
    id: str
    name: str
    description: str = ""
    tags: List[str] = field(default_factory=list)

    kind = "element"

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


@dataclass
class Person(Element):
    location: Location = Location.UNSPECIFIED

    kind = "person"


@dataclass
class SoftwareSystem(Element):
    location: Location = Location.INTERNAL
    url: Optional[str] = None
    container_ids: List[str] = field(default_factory=list)

    kind = "software_system"


@dataclass
class Container(Element):
    parent_id: str = ""
    technology: Optional[str] = None
    component_ids: List[str] = field(default_factory=list)

    kind = "container"


@dataclass
class Component(Element):
    parent_id: str = ""
    technology: Optional[str] = None

    kind = "component"


# ---- Edges ----

@dataclass
class Relationship:
    id: str
    source_id: str
    destination_id: str
    description: str
    technology: Optional[str] = None
    interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS
    tags: List[str] = field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @property
    def is_self_relationship(self) -> bool:
        return self.source_id == self.destination_id
