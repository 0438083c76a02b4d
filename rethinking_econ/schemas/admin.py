from pydantic import BaseModel, ConfigDict


class AdminCheckResponse(BaseModel):
    model_config = ConfigDict(json_schema_serialization_defaults_required=True)

    is_admin: bool
