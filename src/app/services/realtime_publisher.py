from abc import ABC, abstractmethod


class RealtimePublisher(ABC):
    """Real-time push channel interface - application layer

    Delivery is fire-and-forget: no acknowledgement, no retry.
    """

    @abstractmethod
    async def publish(self, channel_key: str, event: str, payload: dict) -> None:
        """Push an event to every connection subscribed to channel_key"""
        pass
