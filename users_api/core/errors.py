from enum import Enum
from typing import Optional


class UserErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_EMAIL = "invalid_email"
    ALREADY_EXISTS = "already_exists"
    DOES_NOT_EXIST = "does_not_exist"
    FETCH_FAILED = "fetch_failed"
    DECODE_FAILED = "decode_failed"
    ENCODE_FAILED = "encode_failed"
    WRITE_FAILED = "write_failed"
    DELETE_FAILED = "delete_failed"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    UserErrorKind.INVALID_INPUT: "Error Invalid User Data",
    UserErrorKind.INVALID_EMAIL: "Error Invalid Email",
    UserErrorKind.ALREADY_EXISTS: "Error User Already Exist",
    UserErrorKind.DOES_NOT_EXIST: "Error User Does Not Exist",
    UserErrorKind.FETCH_FAILED: "Failed to fetch record!",
    UserErrorKind.DECODE_FAILED: "Failed to unmarshal record!",
    UserErrorKind.ENCODE_FAILED: "Failed to Marshal record",
    UserErrorKind.WRITE_FAILED: "Failed to dynamo put Item",
    UserErrorKind.DELETE_FAILED: "Failed to Delete Item",
}


class UserError(Exception):
    """Failure of a user operation; every kind maps to a 400 response."""

    def __init__(self, kind: UserErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or kind.message
        super().__init__(self.message)
