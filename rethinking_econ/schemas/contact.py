from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from rethinking_econ.models.contact import ContactStatus, InquiryType


class ContactSubmissionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=256)
    message: str = Field(..., min_length=1, max_length=5000)
    inquiry_type: InquiryType

    @field_validator("name", "subject", "message")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be blank")
        return v


class ContactSubmissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, json_schema_serialization_defaults_required=True)

    id: int
    name: str
    email: str
    subject: str
    message: str
    inquiry_type: InquiryType
    status: ContactStatus
    created_at: datetime
    updated_at: datetime


class ContactStatusUpdate(BaseModel):
    status: ContactStatus
