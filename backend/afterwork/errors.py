"""Error taxonomy shared by the service layer and the routers."""


class AfterWorkError(Exception):
    """Base class for all service-level failures."""


class BadRequest(AfterWorkError):
    """Inbound payload is missing the sender id or the message text."""


class NotFound(AfterWorkError):
    """No user record exists for a user expected to have one."""

    def __init__(self, user_id: str):
        super().__init__(f"User record not found: {user_id}")
        self.user_id = user_id


class StoreError(AfterWorkError):
    """A persistence call failed."""


class NotifyError(AfterWorkError):
    """Outbound message delivery failed. Always logged, never surfaced."""
