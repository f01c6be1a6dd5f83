from common.repository.room_repo import RoomRepository
from common.models.rooms import Room
from common.schemas.rooms import RoomCreateRequest, RoomUpdateRequest
from common.utils.custom_exceptions import NotFoundException
from common.utils.identifiers import new_room_id
from typing import List


class RoomService:
    def __init__(self, room_repo: RoomRepository):
        self.room_repo = room_repo

    def create_room(self, req: RoomCreateRequest) -> Room:
        room = Room(
            room_id=new_room_id(),
            room_number=req.room_number,
            room_type=req.room_type,
            price_per_night=req.price_per_night,
            is_booked=req.is_booked,
        )
        self.room_repo.add_room(room)
        return room

    def list_rooms(self) -> List[Room]:
        return self.room_repo.get_all_rooms()

    def get_room(self, room_id: str) -> Room:
        room = self.room_repo.get_room_by_id(room_id)
        if room is None:
            raise NotFoundException("Room", room_id, 404)
        return room

    def update_room(self, room_id: str, req: RoomUpdateRequest) -> Room:
        return self.room_repo.update_room(room_id, req.changes())

    def delete_room(self, room_id: str):
        self.room_repo.delete_room(room_id)
