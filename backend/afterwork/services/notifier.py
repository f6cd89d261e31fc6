"""Outbound bot messages via the chat platform's bot message API."""
import logging
from typing import Optional

import httpx

from afterwork.errors import NotifyError

logger = logging.getLogger(__name__)


class Notifier:
    """Posts ``{text, user: {id}}`` to the bot message endpoint.

    Delivery is best-effort: failures are logged and swallowed by ``send``,
    never retried.
    """

    def __init__(
        self,
        api_url: str,
        auth_token: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_url = api_url
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Zoho-oauthtoken {auth_token}",
                "Content-Type": "application/json",
            },
        )

    def deliver(self, user_id: str, text: str) -> None:
        """Send one message; raises NotifyError on any transport or HTTP failure."""
        try:
            response = self._client.post(self.api_url, json={"text": text, "user": {"id": user_id}})
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NotifyError(str(exc)) from exc

    def send(self, user_id: str, text: str) -> bool:
        """Best-effort delivery. Returns whether the message went out."""
        try:
            self.deliver(user_id, text)
        except NotifyError as exc:
            logger.error("Error sending message to user %s: %s", user_id, exc)
            return False
        logger.info("Sent status message to user %s", user_id)
        return True

    def close(self) -> None:
        self._client.close()
