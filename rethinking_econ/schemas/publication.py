from datetime import datetime
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rethinking_econ.models.publication import PublicationStatus, PublicationType
from rethinking_econ.schemas.profile import ProfileSummary


TagName = Annotated[str, Field(max_length=100)]


def _clean_names(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    cleaned: list[str] = []
    for value in values:
        value = value.strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return cleaned


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    name: str
    slug: str
    description: Optional[str] = None


class TagRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    name: str
    slug: str


class PublicationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    title: str
    slug: str
    abstract: Optional[str] = None
    content: str
    type: PublicationType
    pdf_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    author_id: Optional[str] = None
    status: PublicationStatus
    featured_order: Optional[int] = None
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class PublicationWithAuthor(PublicationRead):
    author: Optional[ProfileSummary] = None


class PublicationDetail(PublicationWithAuthor):
    categories: List[CategoryRead] = Field(default_factory=list)
    tags: List[TagRead] = Field(default_factory=list)


class PublicationSubmit(BaseModel):
    """Submission by a signed-in author; the caller becomes the author."""

    type: PublicationType
    title: str = Field(..., min_length=1, max_length=256)
    content: str = Field(..., min_length=1)
    abstract: Optional[str] = None
    pdf_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    category_id: Optional[int] = None
    tag_id: Optional[int] = None


class _TaggedInput(BaseModel):
    tags: Optional[List[TagName]] = None
    categories: Optional[List[TagName]] = None

    @field_validator("tags", "categories")
    @classmethod
    def normalize_names(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_names(value)


class PublicationAdminCreate(_TaggedInput):
    author_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=256)
    abstract: Optional[str] = None
    content: str = Field(..., min_length=1)
    type: PublicationType
    status: Literal["draft", "pending_review", "published"] = "published"
    pdf_url: Optional[str] = None
    thumbnail_url: Optional[str] = None


class PublicationAdminUpdate(_TaggedInput):
    author_id: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    abstract: Optional[str] = None
    content: Optional[str] = Field(default=None, min_length=1)
    type: Optional[PublicationType] = None
    status: Optional[PublicationStatus] = None
    pdf_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    featured_order: Optional[int] = None


class PublicationModifications(_TaggedInput):
    """Edits an admin may apply while approving a submission."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    abstract: Optional[str] = None
    content: Optional[str] = Field(default=None, min_length=1)


class PublicationApprove(BaseModel):
    modifications: Optional[PublicationModifications] = None


class RejectionReason(BaseModel):
    reason: str = Field(..., min_length=1)
    details: Optional[str] = None


class PublicationReject(BaseModel):
    rejection_reason: RejectionReason


class BulkDeleteRequest(BaseModel):
    ids: List[int] = Field(..., min_length=1)


class BulkDeleteResponse(BaseModel):
    model_config = ConfigDict(json_schema_serialization_defaults_required=True)

    success: bool = True
    deleted: int
