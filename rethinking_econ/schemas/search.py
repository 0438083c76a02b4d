from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchType(str, Enum):
    all = "all"
    publication = "publication"
    event = "event"
    policy = "policy"
    member = "member"


class SearchResult(BaseModel):
    model_config = ConfigDict(json_schema_serialization_defaults_required=True)

    id: str
    title: str
    description: Optional[str] = None
    url: str
    type: SearchType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    image_url: Optional[str] = None


class SearchResponse(BaseModel):
    model_config = ConfigDict(json_schema_serialization_defaults_required=True)

    results: List[SearchResult] = Field(default_factory=list)
    total_results: int = 0
    page: int = 1
    total_pages: int = 0
    query: str
