"""
Outbound email port.

Adapters raise DependencyFailure when the provider rejects or cannot be
reached. Most callers go through send_best_effort; the one path whose
outcome matters (team invitation for an unknown email) calls send directly.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from src.app.errors import DependencyFailure

logger = logging.getLogger(__name__)


@dataclass
class EmailMessage:
    to: str
    subject: str
    text: str
    html: Optional[str] = None
    attachments: List[dict] = field(default_factory=list)


class EmailSender(ABC):
    """Email sender interface - application layer"""

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Send one message, raising DependencyFailure on failure"""
        pass


async def send_best_effort(sender: EmailSender, message: EmailMessage) -> bool:
    """Send and report success; failures are logged, never raised."""
    try:
        await sender.send(message)
        return True
    except DependencyFailure as exc:
        logger.warning(f"Email to {message.to} not sent: {exc}")
        return False
