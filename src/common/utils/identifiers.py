import re
import secrets
from typing import Optional

from common.utils.constants import ROOM_ID_BYTES
from common.utils.custom_exceptions import MalformedIdentifier

ROOM_ID_PATTERN = re.compile(rf"^[0-9a-fA-F]{{{ROOM_ID_BYTES * 2}}}$")

# Update reports a malformed id as a client error, read and delete as a server error.
MALFORMED_ID_STATUS = {
    "get": 500,
    "update": 400,
    "delete": 500,
}


def new_room_id() -> str:
    return secrets.token_hex(ROOM_ID_BYTES)


def validate_room_id(raw: Optional[str], operation: str) -> str:
    """Return the normalised room id or raise MalformedIdentifier.

    Only the shape of the id is checked here; whether a room exists is the
    store's call.
    """
    value = raw if isinstance(raw, str) else ""
    if not ROOM_ID_PATTERN.fullmatch(value):
        raise MalformedIdentifier(value, MALFORMED_ID_STATUS[operation])
    return value.lower()
