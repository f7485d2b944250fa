from typing import Optional


class ArchitectureModelError(Exception):
    """Base error for everything raised while building or exporting a workspace."""


class ElementReferenceError(ArchitectureModelError):
    """An operation referenced an element or view this workspace does not contain."""

    def __init__(self, message: str, object_id: Optional[str] = None):
        super().__init__(message)
        self.object_id = object_id


class ModelValidationError(ArchitectureModelError):
    """Empty or invalid name, label, key or attribute."""


class ExportError(ArchitectureModelError):
    """Serializing or uploading the workspace failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
