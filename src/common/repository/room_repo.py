from botocore.exceptions import ClientError
import logging
from dataclasses import replace
from decimal import Decimal
from typing import Optional, List, Union
from boto3.dynamodb.conditions import Attr
from common.models.rooms import Room
from common.utils.custom_exceptions import NotFoundException, RoomAlreadyExists

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types_boto3_dynamodb.service_resource import Table
    from types_boto3_dynamodb import DynamoDBClient
else:
    Table = object
    DynamoDBClient = object


logger = logging.getLogger(__name__)

ROOM_FIELDS = ("room_number", "room_type", "price_per_night", "is_booked")


def _room_key(room_id: str) -> dict:
    return {"pk": f"ROOM#{room_id}", "sk": "DETAILS"}


def _room_number_key(room_number: int) -> dict:
    return {"pk": f"ROOM_NUMBER#{room_number}", "sk": "ROOM"}


def _to_number(value: Decimal) -> Union[int, float]:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _to_attribute(field: str, value):
    if field == "price_per_night":
        return Decimal(str(value))
    return value


def _cancellation_codes(err: ClientError) -> List[str]:
    reasons = err.response.get("CancellationReasons", [])
    return [reason.get("Code", "None") for reason in reasons]


class RoomRepository:
    def __init__(self, table: Table, client: DynamoDBClient = None):
        self.table = table
        self.client = client if client else table.meta.client

    def _from_item(self, item: dict) -> Room:
        return Room(
            room_id=item["pk"].split("ROOM#", 1)[1],
            room_number=int(item["room_number"]),
            room_type=item["room_type"],
            price_per_night=_to_number(item["price_per_night"]),
            is_booked=bool(item.get("is_booked", False)),
        )

    def add_room(self, room: Room):
        room_item = {
            **_room_key(room.room_id),
            "room_number": room.room_number,
            "room_type": room.room_type,
            "price_per_night": _to_attribute("price_per_night", room.price_per_night),
            "is_booked": room.is_booked,
        }
        room_number_item = {
            **_room_number_key(room.room_number),
            "room_id": room.room_id,
        }
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table.name,
                            "Item": room_item,
                            "ConditionExpression": "attribute_not_exists(pk)",
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table.name,
                            "Item": room_number_item,
                            "ConditionExpression": "attribute_not_exists(pk)",
                        }
                    },
                ]
            )
        except ClientError as err:
            codes = _cancellation_codes(err)
            if len(codes) > 1 and codes[1] == "ConditionalCheckFailed":
                raise RoomAlreadyExists(room.room_number) from err
            logger.error(f"Error creating room {room.room_id}: {err}")
            raise
        return room

    def get_all_rooms(self) -> List[Room]:
        scan_kwargs = {
            "FilterExpression": Attr("pk").begins_with("ROOM#")
            & Attr("sk").eq("DETAILS")
        }
        rooms = []
        try:
            resp = self.table.scan(**scan_kwargs)
            rooms.extend(self._from_item(item) for item in resp.get("Items", []))
            while "LastEvaluatedKey" in resp:
                resp = self.table.scan(
                    ExclusiveStartKey=resp["LastEvaluatedKey"], **scan_kwargs
                )
                rooms.extend(self._from_item(item) for item in resp.get("Items", []))
        except ClientError as err:
            logger.error(f"Error retrieving rooms: {err}")
            raise
        return rooms

    def get_room_by_id(self, room_id: str) -> Optional[Room]:
        try:
            response = self.table.get_item(Key=_room_key(room_id))
        except ClientError as err:
            logger.error(f"Error retrieving room by id {room_id}: {err}")
            raise

        item = response.get("Item")
        if not item:
            return None
        return self._from_item(item)

    def update_room(self, room_id: str, changes: dict) -> Room:
        current = self.get_room_by_id(room_id)
        if current is None:
            raise NotFoundException("Room", room_id, 404)
        changes = {k: v for k, v in changes.items() if k in ROOM_FIELDS}
        if not changes:
            return current

        update = {
            "Key": _room_key(room_id),
            "UpdateExpression": "SET "
            + ", ".join(f"#{field}=:{field}" for field in changes),
            "ExpressionAttributeNames": {f"#{field}": field for field in changes},
            "ExpressionAttributeValues": {
                f":{field}": _to_attribute(field, value)
                for field, value in changes.items()
            },
            "ConditionExpression": "attribute_exists(pk)",
        }

        new_number = changes.get("room_number")
        if new_number is None or new_number == current.room_number:
            self._update_details(room_id, update)
        else:
            self._update_with_room_number(room_id, update, current.room_number, new_number)

        return replace(current, **changes)

    def _update_details(self, room_id: str, update: dict):
        try:
            self.table.update_item(**update)
        except ClientError as err:
            if (
                err.response.get("Error", {}).get("Code")
                == "ConditionalCheckFailedException"
            ):
                raise NotFoundException("Room", room_id, 404) from err
            logger.error(f"Error updating room {room_id}: {err}")
            raise

    def _update_with_room_number(
        self, room_id: str, update: dict, old_number: int, new_number: int
    ):
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {"Update": {"TableName": self.table.name, **update}},
                    {
                        "Delete": {
                            "TableName": self.table.name,
                            "Key": _room_number_key(old_number),
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table.name,
                            "Item": {
                                **_room_number_key(new_number),
                                "room_id": room_id,
                            },
                            "ConditionExpression": "attribute_not_exists(pk)",
                        }
                    },
                ]
            )
        except ClientError as err:
            codes = _cancellation_codes(err)
            if codes and codes[0] == "ConditionalCheckFailed":
                raise NotFoundException("Room", room_id, 404) from err
            if len(codes) > 2 and codes[2] == "ConditionalCheckFailed":
                raise RoomAlreadyExists(new_number) from err
            logger.error(f"Error updating room {room_id}: {err}")
            raise

    def delete_room(self, room_id: str):
        current = self.get_room_by_id(room_id)
        if current is None:
            raise NotFoundException("Room", room_id, 404)
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Delete": {
                            "TableName": self.table.name,
                            "Key": _room_key(room_id),
                            "ConditionExpression": "attribute_exists(pk)",
                        }
                    },
                    {
                        "Delete": {
                            "TableName": self.table.name,
                            "Key": _room_number_key(current.room_number),
                        }
                    },
                ]
            )
        except ClientError as err:
            codes = _cancellation_codes(err)
            if codes and codes[0] == "ConditionalCheckFailed":
                raise NotFoundException("Room", room_id, 404) from err
            logger.error(f"Error deleting room {room_id}: {err}")
            raise
