"""Roles API: role options for the user form."""

from fastapi import APIRouter, Depends

from shop_admin.api.v1.dependencies import get_role_repo
from shop_admin.infrastructure.persistence.repositories.role_repo import RoleRepository
from shop_admin.schemas.role import RoleResponse

router = APIRouter()


@router.get("", response_model=list[RoleResponse])
async def list_roles(
    role_repo: RoleRepository = Depends(get_role_repo),
) -> list[RoleResponse]:
    """List roles, one per distinct name."""
    roles = await role_repo.list_distinct_by_name()
    return [RoleResponse(id=r.id, name=r.name) for r in roles]
