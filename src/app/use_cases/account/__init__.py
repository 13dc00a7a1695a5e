"""Account use cases: the signed-in user's own profile and password."""

from .get_me_use_case import GetMeUseCase
from .change_password_first_login_use_case import (
    MIN_PASSWORD_LENGTH,
    ChangePasswordFirstLoginUseCase,
)

__all__ = [
    "GetMeUseCase",
    "ChangePasswordFirstLoginUseCase",
    "MIN_PASSWORD_LENGTH",
]
