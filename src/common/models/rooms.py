from typing import Union
from dataclasses import dataclass


@dataclass
class Room:
    room_id: str
    room_number: int
    room_type: str
    price_per_night: Union[int, float]
    is_booked: bool = False
