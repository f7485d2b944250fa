from fastapi import APIRouter, HTTPException

from archmodel.export.config import get_structurizr_client, get_workspace_id
from archmodel.export.render_mermaid import render_mermaid
from archmodel.export.serializers import serialize_workspace
from archmodel.model.errors import ElementReferenceError, ExportError
from archmodel.model.workspace import Workspace
from archmodel.samples import DEFAULT_SAMPLE, SAMPLE_WORKSPACES
from archmodel.schemas import DiagramResponse, PublishRequest, PublishResponse, ViewSummary

router = APIRouter()


def _build(sample: str) -> Workspace:
    # Fresh build per request; nothing is cached between calls
    factory = SAMPLE_WORKSPACES.get(sample)
    if factory is None:
        raise HTTPException(status_code=404, detail=f"Unknown sample workspace '{sample}'")
    return factory()


@router.get("/samples")
def list_samples():
    return {"samples": sorted(SAMPLE_WORKSPACES)}


@router.get("/workspace")
def get_workspace(sample: str = DEFAULT_SAMPLE):
    return serialize_workspace(_build(sample))


@router.get("/views", response_model=list[ViewSummary])
def list_views(sample: str = DEFAULT_SAMPLE):
    workspace = _build(sample)
    model = workspace.model
    return [
        ViewSummary(
            key=view.key,
            kind=view.kind.value,
            description=view.description,
            paper_size=view.paper_size.value if view.paper_size else None,
            element_count=len(view.element_ids(model)),
            relationship_count=len(view.relationship_ids(model)),
        )
        for view in workspace.views
    ]


@router.get("/views/{key}/mermaid", response_model=DiagramResponse)
def view_mermaid(key: str, sample: str = DEFAULT_SAMPLE):
    workspace = _build(sample)
    try:
        source = render_mermaid(workspace, key)
    except ElementReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return DiagramResponse(type="mermaid", source=source)


@router.post("/publish", response_model=PublishResponse)
def publish(request: PublishRequest):
    workspace = _build(request.sample)
    try:
        workspace_id = request.workspace_id
        if workspace_id is None:
            workspace_id = get_workspace_id()
        get_structurizr_client().put_workspace(workspace_id, workspace)
    except ExportError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return PublishResponse(
        status="success",
        workspace_id=workspace_id,
        elements=len(workspace.model.elements),
        relationships=len(workspace.model.relationships),
    )
