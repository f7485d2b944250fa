from archmodel import config as settings
from archmodel.export.client import StructurizrClient
from archmodel.model.errors import ExportError


def get_structurizr_client() -> StructurizrClient:
    return StructurizrClient(
        api_key=settings.STRUCTURIZR_API_KEY,
        api_secret=settings.STRUCTURIZR_API_SECRET,
        api_url=settings.STRUCTURIZR_API_URL,
        timeout=settings.STRUCTURIZR_TIMEOUT,
    )


def get_workspace_id() -> int:
    raw = (settings.STRUCTURIZR_WORKSPACE_ID or "").strip()
    if not raw:
        raise ExportError("STRUCTURIZR_WORKSPACE_ID is not set")
    try:
        return int(raw)
    except ValueError:
        raise ExportError(f"STRUCTURIZR_WORKSPACE_ID must be numeric, got '{raw}'") from None
