from pydantic import BaseModel
from typing import Optional


class ViewSummary(BaseModel):
    key: str
    kind: str
    description: str
    paper_size: Optional[str] = None
    element_count: int
    relationship_count: int


class DiagramResponse(BaseModel):
    type: str
    source: str


class PublishRequest(BaseModel):
    sample: str = "smart_mobility"
    workspace_id: Optional[int] = None  # falls back to STRUCTURIZR_WORKSPACE_ID


class PublishResponse(BaseModel):
    status: str
    workspace_id: int
    elements: int
    relationships: int
