import logging

import httpx

from src.app.errors import DependencyFailure
from src.app.services.email_sender import EmailMessage, EmailSender

logger = logging.getLogger(__name__)


class ResendEmailSender(EmailSender):
    """EmailSender implementation posting to the Resend HTTP API"""

    provider = "resend"

    def __init__(
        self,
        api_key: str,
        api_url: str,
        sender: str,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.sender = sender
        self.timeout = timeout

    async def send(self, message: EmailMessage) -> None:
        if not self.api_key:
            logger.warning(
                f"Email provider not configured, email to {message.to} not sent"
            )
            return

        body = {
            "from": self.sender,
            "to": [message.to],
            "subject": message.subject,
            "text": message.text,
            "html": message.html or f"<p>{message.text}</p>",
        }
        if message.attachments:
            body["attachments"] = message.attachments

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    json=body,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.error(f"Email provider timeout sending to {message.to}")
            raise DependencyFailure(self.provider, "request timed out") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                f"Email provider rejected message to {message.to}: "
                f"{exc.response.status_code} {exc.response.text}"
            )
            raise DependencyFailure(
                self.provider, f"status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.error(f"Email provider unreachable: {exc}")
            raise DependencyFailure(self.provider, str(exc)) from exc

        logger.info(f"Email sent to {message.to}: {message.subject}")
