"""Reasons a server rejects a connection."""

from enum import IntEnum


class RejectType(IntEnum):
    """Why the server rejected the client connection."""

    NONE = 0
    VERSION = 1
    USER_NAME = 2
    USER_CREDENTIALS = 3
    SERVER_PASSWORD = 4
    USERNAME_IN_USE = 5
    SERVER_FULL = 6
    NO_CERTIFICATE = 7
    AUTHENTICATOR_FAIL = 8


_MESSAGES = {
    RejectType.NONE: "none",
    RejectType.VERSION: "wrong client version",
    RejectType.USER_NAME: "invalid username",
    RejectType.USER_CREDENTIALS: "incorrect user credentials",
    RejectType.SERVER_PASSWORD: "incorrect server password",
    RejectType.USERNAME_IN_USE: "username in use",
    RejectType.SERVER_FULL: "server full",
    RejectType.NO_CERTIFICATE: "no certificate",
    RejectType.AUTHENTICATOR_FAIL: "authenticator fail",
}


class RejectError(Exception):
    """Raised when the server rejects the client connection."""

    def __init__(self, reject_type: int = RejectType.NONE, reason: str = "") -> None:
        super().__init__(reject_type, reason)
        self.type = reject_type
        self.reason = reason

    def __str__(self) -> str:
        try:
            message = _MESSAGES[RejectType(self.type)]
        except ValueError:
            message = f"unknown type {int(self.type)}"
        if self.reason:
            message += ": " + self.reason
        return message