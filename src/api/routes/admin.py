from uuid import UUID

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.response import success
from src.app.services.email_sender import EmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    CreateUserUseCase,
    DeactivateUserUseCase,
    DeleteUserUseCase,
    GetUserStatsUseCase,
    ListUsersUseCase,
    UpdateUserRoleUseCase,
)
from src.app.use_cases.schema import CamelModel
from src.depends import get_current_user_id, get_email_sender, get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class CreateUserRequest(CamelModel):
    name: str = ""
    email: str = ""


class UserRoleRequest(CamelModel):
    role: str = ""


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
):
    """
    Create User (admin only)

    The account gets a temporary password which is emailed to the user.

    Raises:
        - 400 Bad Request: missing name or email
        - 403 Forbidden: ADMIN_REQUIRED
        - 409 Conflict: EMAIL_TAKEN
    """
    use_case = CreateUserUseCase(
        uow, email_sender, password_length=ApplicationConfig.TEMP_PASSWORD_LENGTH
    )
    result = await use_case.execute(user_id, request.name, request.email)
    if result.is_err():
        raise_for_error(result.error)
    message = "User created successfully."
    if not result.value.email_sent:
        message += " The welcome email could not be sent."
    return success(data=result.value.user, message=message)


@router.get("/users")
async def list_users(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUsersUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value.users, count=result.value.count)


@router.get("/stats")
async def user_stats(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUserStatsUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.patch("/users/{target_id}/role")
async def update_user_role(
    target_id: UUID,
    request: UserRoleRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateUserRoleUseCase(uow).execute(user_id, target_id, request.role)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="User role updated successfully")


@router.delete("/users/{target_id}/permanent")
async def delete_user(
    target_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteUserUseCase(uow).execute(user_id, target_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(message="User deleted permanently")


@router.delete("/users/{target_id}")
async def deactivate_user(
    target_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeactivateUserUseCase(uow).execute(user_id, target_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="User deactivated successfully")
