from typing import Any


class CronitorError(Exception):
    pass


class TransportError(CronitorError):
    def __init__(self, url: str, msg: Any) -> None:
        super().__init__(f"error talking to {url}: {msg!s}")
        self.url = url


class EncodingError(CronitorError):
    pass


class RequestBuildError(EncodingError):
    """The request body could not be serialized or the URL could not be built."""


class ProtocolError(CronitorError):
    """The service answered with an unexpected status code."""

    action = "talk to cronitor"

    def __init__(self, url: str, status_code: int, body: str = "") -> None:
        msg = f"failed to {self.action}: url: {url}, code {status_code}"
        if body:
            msg += f", response: {body}"
        super().__init__(msg)
        self.url = url
        self.status_code = status_code
        self.body = body


class FailedGetMonitorError(ProtocolError):
    action = "get monitor details"


class FailedCreateMonitorError(ProtocolError):
    action = "create monitor"


class FailedUpdateMonitorError(ProtocolError):
    action = "update monitor"


class FailedDeleteMonitorError(ProtocolError):
    action = "delete monitor"


class FailedGetNotificationListError(ProtocolError):
    action = "get notification list"


class FailedCreateNotificationListError(ProtocolError):
    action = "create notification list"


class FailedUpdateNotificationListError(ProtocolError):
    action = "update notification list"


class FailedDeleteNotificationListError(ProtocolError):
    action = "delete notification list"


class ValidationError(CronitorError):
    def __init__(self, msg: Any, problems: list[str] | None = None) -> None:
        super().__init__(str(msg))
        self.problems = problems or []


class MissingKeyError(ValidationError):
    pass


class InvalidListKeyError(ValidationError):
    def __init__(self, key: str) -> None:
        super().__init__(
            "invalid key, only lowercase letters, numbers, dashes and underscores: "
            f"{key}"
        )
        self.key = key
