from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from archmodel.model.elements import coerce_enum
from archmodel.model.errors import ElementReferenceError, ModelValidationError
from archmodel.model.model import Model, require_text


class Format(Enum):
    MARKDOWN = "Markdown"
    ASCIIDOC = "AsciiDoc"


class SectionType:
    CONTEXT = "Context"
    CONTAINERS = "Containers"
    COMPONENTS = "Components"
    CODE = "Code"


@dataclass
class Section:
    element_id: str
    section_type: str   # one of SectionType or free text
    order: int
    content: str
    format: Format = Format.MARKDOWN


class Documentation:
    """Ordered sections, each attached to an element of `model`."""

    def __init__(self, model: Optional[Model] = None):
        self.model = model
        self._sections: List[Section] = []
        self._sealed = False

    def seal(self) -> None:
        self._sealed = True

    @property
    def sections(self) -> Tuple[Section, ...]:
        return tuple(self._sections)

    def add_section(
        self,
        element_id: str,
        section_type: str,
        content: str,
        format: Union[Format, str] = Format.MARKDOWN,
    ) -> Section:
        if self._sealed:
            raise ModelValidationError("documentation is sealed; no more sections can be added")
        if self.model is not None and self.model.get(element_id) is None:
            raise ElementReferenceError(
                f"no element with id '{element_id}'", object_id=element_id
            )
        section = Section(
            element_id=element_id,
            section_type=require_text(section_type, "section type"),
            order=len(self._sections) + 1,
            content=content or "",
            format=coerce_enum(Format, format, "documentation format"),
        )
        self._sections.append(section)
        return section

    def sections_for(self, element_id: str) -> List[Section]:
        return [s for s in self._sections if s.element_id == element_id]
