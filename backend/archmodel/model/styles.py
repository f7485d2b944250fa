# backend/archmodel/model/styles.py
"""
Style rules - visual attributes keyed by tag.

Rules are never copied onto elements. Renderers and the serializer look
them up by tag when they need them, so a rule added after an element
still applies to it.
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, List, Optional

from archmodel.model.elements import coerce_enum
from archmodel.model.errors import ModelValidationError

logger = logging.getLogger(__name__)


class Shape(Enum):
    BOX = "Box"
    ROUNDED_BOX = "RoundedBox"
    CIRCLE = "Circle"
    ELLIPSE = "Ellipse"
    HEXAGON = "Hexagon"
    CYLINDER = "Cylinder"
    PIPE = "Pipe"
    PERSON = "Person"
    ROBOT = "Robot"
    FOLDER = "Folder"
    WEB_BROWSER = "WebBrowser"
    MOBILE_DEVICE_PORTRAIT = "MobileDevicePortrait"
    MOBILE_DEVICE_LANDSCAPE = "MobileDeviceLandscape"
    COMPONENT = "Component"


class Routing(Enum):
    DIRECT = "Direct"
    ORTHOGONAL = "Orthogonal"
    CURVED = "Curved"


class Border(Enum):
    SOLID = "Solid"
    DASHED = "Dashed"
    DOTTED = "Dotted"


@dataclass
class ElementStyle:
    tag: str
    background: Optional[str] = None
    color: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    font_size: Optional[int] = None
    shape: Optional[Shape] = None
    border: Optional[Border] = None
    opacity: Optional[int] = None


@dataclass
class RelationshipStyle:
    tag: str
    thickness: Optional[int] = None
    color: Optional[str] = None
    dashed: Optional[bool] = None
    routing: Optional[Routing] = None
    font_size: Optional[int] = None
    width: Optional[int] = None
    position: Optional[int] = None


_ENUM_FIELDS = {"shape": Shape, "border": Border, "routing": Routing}


def _coerce(name: str, value):
    enum_cls = _ENUM_FIELDS.get(name)
    if enum_cls is None or value is None:
        return value
    return coerce_enum(enum_cls, value, name)


def _merge(style, attributes: dict):
    allowed = {f.name for f in fields(style)} - {"tag"}
    for name, value in attributes.items():
        if name not in allowed:
            raise ModelValidationError(
                f"'{name}' is not a {type(style).__name__} attribute"
            )
        if value is not None:
            setattr(style, name, _coerce(name, value))
    return style


class Styles:
    """Tag -> style lookup; a repeated tag merges into the existing rule."""

    def __init__(self):
        self._elements: Dict[str, ElementStyle] = {}
        self._relationships: Dict[str, RelationshipStyle] = {}
        self._sealed = False

    def seal(self) -> None:
        self._sealed = True

    def _check_open(self) -> None:
        if self._sealed:
            raise ModelValidationError("styles are sealed; no more rules can be added")

    def add_element_style(self, tag: str, **attributes) -> ElementStyle:
        self._check_open()
        tag = (tag or "").strip()
        if not tag:
            raise ModelValidationError("style tag must not be empty")
        style = self._elements.get(tag) or ElementStyle(tag=tag)
        _merge(style, attributes)
        self._elements[tag] = style
        logger.debug("element style '%s' -> %s", tag, attributes)
        return style

    def add_relationship_style(self, tag: str, **attributes) -> RelationshipStyle:
        self._check_open()
        tag = (tag or "").strip()
        if not tag:
            raise ModelValidationError("style tag must not be empty")
        style = self._relationships.get(tag) or RelationshipStyle(tag=tag)
        _merge(style, attributes)
        self._relationships[tag] = style
        logger.debug("relationship style '%s' -> %s", tag, attributes)
        return style

    def element_style(self, tag: str) -> Optional[ElementStyle]:
        return self._elements.get(tag)

    def relationship_style(self, tag: str) -> Optional[RelationshipStyle]:
        return self._relationships.get(tag)

    @property
    def element_styles(self) -> List[ElementStyle]:
        return list(self._elements.values())

    @property
    def relationship_styles(self) -> List[RelationshipStyle]:
        return list(self._relationships.values())

    def resolve_element(self, tags: List[str]) -> ElementStyle:
        """
        Flatten the rules for an element's tags into one style, later tags
        winning - the same cascade the diagramming service applies.
        """
        resolved = ElementStyle(tag=",".join(tags))
        for tag in tags:
            style = self._elements.get(tag)
            if style is not None:
                _merge(resolved, {
                    f.name: getattr(style, f.name) for f in fields(style) if f.name != "tag"
                })
        return resolved

    def resolve_relationship(self, tags: List[str]) -> RelationshipStyle:
        resolved = RelationshipStyle(tag=",".join(tags))
        for tag in tags:
            style = self._relationships.get(tag)
            if style is not None:
                _merge(resolved, {
                    f.name: getattr(style, f.name) for f in fields(style) if f.name != "tag"
                })
        return resolved
