"""User admin API: search/list, get, create, update, delete.

Thin routes delegating to UserQueryService (reads) and UserService (writes).
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Request, Response

from shop_admin.api.v1.dependencies import (
    get_user_query_service,
    get_user_repo,
    get_user_service,
)
from shop_admin.api.v1.params import is_interactive, parse_nested_params
from shop_admin.application.dtos.user import UserWriteResult
from shop_admin.application.dtos.user_views import DefaultUserView
from shop_admin.application.services import UserQueryService, UserService
from shop_admin.core.limiter import limit_writes
from shop_admin.domain.enums import JsonShape
from shop_admin.domain.exceptions import ResourceNotFoundException
from shop_admin.infrastructure.persistence.repositories.user_repo import UserRepository
from shop_admin.schemas.user import (
    PaginationMeta,
    UserCreateRequest,
    UserListResponse,
    UserUpdateRequest,
    UserWriteResponse,
)
from shop_admin.shared.utils.parsing import INT4_MAX

router = APIRouter()

UserIdPath = Annotated[int, Path(ge=1, le=INT4_MAX)]


def _write_response(result: UserWriteResult) -> UserWriteResponse:
    return UserWriteResponse(
        message=result.message,
        user=DefaultUserView.from_result(result.user).to_dict(),
        role_ids=list(result.user.role_ids),
    )


@router.get("", response_model=None)
async def list_users(
    request: Request,
    query_service: UserQueryService = Depends(get_user_query_service),
) -> UserListResponse | list[dict[str, Any]]:
    """Search users.

    Interactive requests with a plain ``q`` string get a bare typeahead list
    (prefix match, capped by ``limit``). Everything else treats ``q`` as a
    filter bag and returns one page plus pagination metadata.
    ``json_format=basic`` switches the projection to id/name.
    """
    params = parse_nested_params(request.query_params.multi_items())
    shape = JsonShape.from_param(request.query_params.get("json_format"))
    result_page = await query_service.search(
        params, interactive=is_interactive(request)
    )
    users = query_service.project(result_page, shape)
    if result_page.autocomplete:
        return users
    return UserListResponse(
        pagination=PaginationMeta(**result_page.metadata()),
        users=users,
    )


@router.get("/{user_id}")
async def get_user(
    user_id: UserIdPath,
    user_repo: UserRepository = Depends(get_user_repo),
) -> dict[str, Any]:
    """Get one user in the default shape."""
    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundException("user", user_id)
    return DefaultUserView.from_result(user).to_dict()


@router.post("", response_model=UserWriteResponse, status_code=201)
@limit_writes
async def create_user(
    request: Request,
    body: UserCreateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserWriteResponse:
    """Create a user; role_ids, when given, becomes the user's role set."""
    result = await user_service.create_user(
        body.model_dump(exclude={"role_ids"}), role_ids=body.role_ids
    )
    return _write_response(result)


@router.patch("/{user_id}", response_model=UserWriteResponse)
@limit_writes
async def update_user(
    request: Request,
    user_id: UserIdPath,
    body: UserUpdateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserWriteResponse:
    """Update a user. A discount change sends the discount notification."""
    result = await user_service.update_user(
        user_id, body.attribute_changes(), role_ids=body.role_ids
    )
    return _write_response(result)


@router.delete("/{user_id}", status_code=204)
@limit_writes
async def delete_user(
    request: Request,
    user_id: UserIdPath,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user. Users who own orders cannot be deleted (403)."""
    await user_service.delete_user(user_id)
    return Response(status_code=204)
