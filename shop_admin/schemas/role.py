"""Role API schemas."""

from pydantic import BaseModel, ConfigDict


class RoleResponse(BaseModel):
    """Role option for the user form's role picker."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
