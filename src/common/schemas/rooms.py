from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from common.models.rooms import Room
from common.utils.constants import DYNAMODB_NUMBER_LIMIT
from common.utils.custom_exceptions import ValidationFailed


def _whole_price(v: float) -> Union[int, float]:
    return int(v) if v.is_integer() else v


def _storable_room_number(v: int) -> int:
    if abs(v) >= DYNAMODB_NUMBER_LIMIT:
        raise ValueError("Path `roomNumber` is too large")
    return v


class RoomCreateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    room_number: int
    room_type: str
    price_per_night: float = Field(
        gt=0, lt=float(DYNAMODB_NUMBER_LIMIT), allow_inf_nan=False
    )
    is_booked: bool = False

    @field_validator("room_type")
    @classmethod
    def check_room_type(cls, v: str):
        if not v.strip():
            raise ValueError("Path `roomType` is required")
        return v.strip()

    @field_validator("room_number")
    @classmethod
    def check_room_number(cls, v: int):
        return _storable_room_number(v)

    @field_validator("price_per_night")
    @classmethod
    def normalise_price(cls, v: float):
        return _whole_price(v)


class RoomUpdateRequest(BaseModel):
    """Partial update; only the fields present in the payload are validated."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    room_number: Optional[int] = None
    room_type: Optional[str] = None
    price_per_night: Optional[float] = Field(
        default=None, gt=0, lt=float(DYNAMODB_NUMBER_LIMIT), allow_inf_nan=False
    )
    is_booked: Optional[bool] = None

    @field_validator("room_number", "room_type", "price_per_night", "is_booked")
    @classmethod
    def check_not_cleared(cls, v, info):
        # validators only run for fields the caller sent
        if v is None:
            raise ValueError(f"Path `{to_camel(info.field_name)}` is required")
        return v

    @field_validator("room_type")
    @classmethod
    def check_room_type(cls, v: Optional[str]):
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Path `roomType` is required")
        return v.strip()

    @field_validator("room_number")
    @classmethod
    def check_room_number(cls, v: Optional[int]):
        return _storable_room_number(v) if v is not None else v

    @field_validator("price_per_night")
    @classmethod
    def normalise_price(cls, v: Optional[float]):
        return _whole_price(v) if v is not None else v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class RoomResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    room_number: int
    room_type: str
    price_per_night: Union[int, float]
    is_booked: bool

    @classmethod
    def from_room(cls, room: Room) -> "RoomResponse":
        return cls(
            id=room.room_id,
            room_number=room.room_number,
            room_type=room.room_type,
            price_per_night=room.price_per_night,
            is_booked=room.is_booked,
        )


def _describe(err: ValidationError, prefix: str) -> str:
    problems = []
    for e in err.errors():
        field = ".".join(str(part) for part in e.get("loc", ())) or "body"
        problems.append(f"{field}: {e['msg']}")
    return f"{prefix}: " + ", ".join(problems)


def validate_room_create(data: Any) -> RoomCreateRequest:
    try:
        return RoomCreateRequest.model_validate(data)
    except ValidationError as err:
        raise ValidationFailed(_describe(err, "Room validation failed")) from err


def validate_room_update(data: Any) -> RoomUpdateRequest:
    try:
        return RoomUpdateRequest.model_validate(data)
    except ValidationError as err:
        raise ValidationFailed(_describe(err, "Validation failed")) from err
