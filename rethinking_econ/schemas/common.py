from pydantic import BaseModel, ConfigDict


class DeleteResponse(BaseModel):
    model_config = ConfigDict(json_schema_serialization_defaults_required=True)

    success: bool = True
    id: int


class SuccessResponse(BaseModel):
    model_config = ConfigDict(json_schema_serialization_defaults_required=True)

    success: bool = True
    message: str | None = None
