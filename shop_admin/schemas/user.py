"""User API schemas.

Request bodies forbid unknown keys: only the admin-writable attributes and
role_ids are accepted.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shop_admin.shared.utils.parsing import INT4_MAX


class UserCreateRequest(BaseModel):
    """Request body for creating a user."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    discount: int = Field(default=0, ge=0, le=INT4_MAX)
    enterprise_limit: int = Field(default=5, ge=0, le=INT4_MAX)
    show_api_key_view: bool = False
    bill_address_id: int | None = Field(default=None, ge=1, le=INT4_MAX)
    ship_address_id: int | None = Field(default=None, ge=1, le=INT4_MAX)
    role_ids: list[str] | None = Field(
        default=None,
        description="Full role set for the user; blank entries are ignored",
    )


class UserUpdateRequest(BaseModel):
    """Request body for updating a user (partial).

    Omitted fields are left unchanged. role_ids=None leaves roles untouched;
    an empty list clears them.
    """

    model_config = ConfigDict(extra="forbid")

    email: EmailStr | None = None
    discount: int | None = Field(default=None, ge=0, le=INT4_MAX)
    enterprise_limit: int | None = Field(default=None, ge=0, le=INT4_MAX)
    show_api_key_view: bool | None = None
    bill_address_id: int | None = Field(default=None, ge=1, le=INT4_MAX)
    ship_address_id: int | None = Field(default=None, ge=1, le=INT4_MAX)
    role_ids: list[str] | None = None

    def attribute_changes(self) -> dict[str, Any]:
        """Fields the caller actually sent, minus role_ids."""
        changes = self.model_dump(exclude_unset=True, exclude={"role_ids"})
        # email, discount, limits and flags are NOT NULL columns.
        return {
            k: v
            for k, v in changes.items()
            if v is not None or k in ("bill_address_id", "ship_address_id")
        }


class PaginationMeta(BaseModel):
    """Pagination block of the general-mode listing response."""

    model_config = ConfigDict(populate_by_name=True)

    count: int
    page: int
    per_page: int
    pages: int
    prev: int | None
    next: int | None
    from_: int = Field(alias="from")
    to: int


class UserListResponse(BaseModel):
    """General-mode GET /users response."""

    pagination: PaginationMeta
    users: list[dict[str, Any]]


class UserWriteResponse(BaseModel):
    """Response for create/update: the user in default shape plus a status message."""

    message: str
    user: dict[str, Any]
    role_ids: list[int]
