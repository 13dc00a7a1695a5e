"""
Create User Use Case

Accounts are never self-registered: an admin creates them and the new user
receives a temporary password by email.
"""

import logging
import secrets
import string
from uuid import UUID

import bcrypt

from libs.result import Error, Result, Return
from src.app.services import email_templates
from src.app.services.email_sender import EmailSender, send_best_effort
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, UserRole

from .common import load_admin
from .dtos import AdminUserResponse, CreateUserResponse

logger = logging.getLogger(__name__)

PASSWORD_SYMBOLS = "!@#$%^&*"
PASSWORD_ALPHABET = string.ascii_letters + string.digits + PASSWORD_SYMBOLS


def generate_temporary_password(length: int = 12) -> str:
    """Random password with at least one upper, lower, digit and symbol"""
    length = max(length, 4)
    chars = [
        secrets.choice(string.ascii_uppercase),
        secrets.choice(string.ascii_lowercase),
        secrets.choice(string.digits),
        secrets.choice(PASSWORD_SYMBOLS),
    ]
    chars += [secrets.choice(PASSWORD_ALPHABET) for _ in range(length - 4)]
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)


class CreateUserUseCase:
    """
    Use case for creating a user account.

    Business Rules:
    - Admin only
    - Name and email required; email unique (case-insensitive)
    - Temporary password hashed with bcrypt cost factor 12
    - New account: role user, active, must change password on first login
    - Welcome email is best effort; its failure does not undo the account
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: EmailSender,
        password_length: int = 12,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.password_length = password_length

    async def execute(
        self, user_id: UUID, name: str, email: str
    ) -> Result[CreateUserResponse]:
        name = (name or "").strip()
        email = User.normalize_email(email or "")
        if not name:
            return Return.err(Error("NAME_REQUIRED", "Please provide name and email"))
        if not email:
            return Return.err(Error("EMAIL_REQUIRED", "Please provide name and email"))

        async with self.uow:
            admin_result = await load_admin(self.uow, user_id)
            if admin_result.is_err():
                return Return.err(admin_result.error)
            admin = admin_result.value

            if await self.uow.users.get_by_email(email) is not None:
                return Return.err(
                    Error("EMAIL_TAKEN", "User with this email already exists")
                )

            temporary_password = generate_temporary_password(self.password_length)
            password_hash = bcrypt.hashpw(
                temporary_password.encode("utf-8"), bcrypt.gensalt(12)
            ).decode("utf-8")

            user = User(
                name=name,
                email=email,
                password_hash=password_hash,
                role=UserRole.user,
                is_active=True,
                is_first_login=True,
                created_by=admin.id,
            )
            user = await self.uow.users.create(user)
            await self.uow.commit()

        logger.info(f"User {user.id} created by admin {admin.id}")

        email_sent = await send_best_effort(
            self.email_sender,
            email_templates.welcome_email(user, temporary_password),
        )
        return Return.ok(
            CreateUserResponse(
                user=AdminUserResponse.from_entity(user), email_sent=email_sent
            )
        )
