from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from archmodel.model.documentation import Documentation
from archmodel.model.errors import ElementReferenceError
from archmodel.model.model import Model
from archmodel.model.styles import Styles
from archmodel.model.views import View


class Workspace:
    """
    The finished, sealed result of one build: model, views, styles and
    documentation. This is the only value handed to an exporter.
    """

    def __init__(
        self,
        name: str,
        description: str,
        model: Model,
        views: Mapping[str, View],
        styles: Styles,
        documentation: Documentation,
    ):
        self.name = name
        self.description = description
        self.model = model
        self.styles = styles
        self.documentation = documentation
        self._views = MappingProxyType(dict(views))

    @property
    def views(self) -> Tuple[View, ...]:
        return tuple(self._views.values())

    @property
    def views_by_key(self) -> Mapping[str, View]:
        return self._views

    def view(self, key: str) -> View:
        view: Optional[View] = self._views.get(key)
        if view is None:
            raise ElementReferenceError(f"no view with key '{key}'", object_id=key)
        return view

    def __repr__(self) -> str:
        return (
            f"Workspace(name={self.name!r}, elements={len(self.model.elements)}, "
            f"relationships={len(self.model.relationships)}, views={len(self._views)})"
        )
