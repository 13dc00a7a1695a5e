from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.error import raise_for_error
from src.api.response import success
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.account import ChangePasswordFirstLoginUseCase, GetMeUseCase
from src.app.use_cases.schema import CamelModel
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Account"])


class FirstLoginPasswordRequest(CamelModel):
    current_password: str = ""
    new_password: str = ""


@router.get("/me")
async def get_me(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetMeUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.post("/change-password-first-login")
async def change_password_first_login(
    request: FirstLoginPasswordRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Password On First Login

    Replaces the temporary password emailed on account creation.

    Raises:
        - 400 Bad Request: PASSWORD_TOO_SHORT, NOT_FIRST_LOGIN
        - 401 Unauthorized: INVALID_PASSWORD
    """
    result = await ChangePasswordFirstLoginUseCase(uow).execute(
        user_id, request.current_password, request.new_password
    )
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="Password changed successfully")
