from uuid import UUID

from libs.result import Error
from access_control.api.error import ClientError


def parse_uuid(value: str, code: str, label: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(Error(code, f"Invalid {label} format"))
