from pydantic import BaseModel, Field
from uuid import uuid4


def new_id() -> str:
    """Generate a fresh string identifier"""
    return str(uuid4())


class BaseEntity(BaseModel):
    """Base entity class with common fields"""
    id: str = Field(default_factory=new_id)

    model_config = {
        "validate_assignment": True,
        "use_enum_values": True,
        "populate_by_name": True,
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000"
            }
        }
    }
