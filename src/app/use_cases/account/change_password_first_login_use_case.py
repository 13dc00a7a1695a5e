import logging
from uuid import UUID

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.identity import load_actor
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .dtos import MeResponse

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class ChangePasswordFirstLoginUseCase:
    """
    Replace the temporary password of an admin-created account.

    Business Rules:
    - Only allowed while is_first_login is set
    - The temporary password must be presented again
    - New password has at least MIN_PASSWORD_LENGTH characters
    - New password hashed with bcrypt cost factor 12; is_first_login cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, current_password: str, new_password: str
    ) -> Result[MeResponse]:
        if len(new_password or "") < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "PASSWORD_TOO_SHORT",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            )

        async with self.uow:
            actor_result = await load_actor(self.uow, user_id)
            if actor_result.is_err():
                return Return.err(actor_result.error)
            user = actor_result.value

            if not user.is_first_login:
                return Return.err(
                    Error(
                        "NOT_FIRST_LOGIN",
                        "This endpoint is only for first-time password setup",
                    )
                )

            # Constant-time comparison against the stored hash
            if not user.password_hash or not bcrypt.checkpw(
                (current_password or "").encode("utf-8"),
                user.password_hash.encode("utf-8"),
            ):
                return Return.err(
                    Error("INVALID_PASSWORD", "Current password is incorrect")
                )

            user.password_hash = bcrypt.hashpw(
                new_password.encode("utf-8"), bcrypt.gensalt(12)
            ).decode("utf-8")
            user.is_first_login = False
            user.updated_at = utc_now()
            user = await self.uow.users.update(user)
            await self.uow.commit()

        logger.info(f"User {user.id} replaced their temporary password")
        return Return.ok(MeResponse.from_entity(user))
