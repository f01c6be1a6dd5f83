import json
import unittest

from common.models.rooms import Room
from common.schemas.rooms import RoomResponse
from common.utils.custom_response import (
    send_custom_response,
    send_error_response,
    send_message_response,
)


class TestCustomResponse(unittest.TestCase):
    def test_error_response_shape(self):
        resp = send_error_response(404, "Room not found")
        self.assertEqual(404, resp["statusCode"])
        self.assertEqual("application/json", resp["headers"]["Content-Type"])
        self.assertEqual({"error": "Room not found"}, json.loads(resp["body"]))

    def test_message_response_shape(self):
        resp = send_message_response(200, "Room deleted successfully")
        self.assertEqual({"message": "Room deleted successfully"}, json.loads(resp["body"]))

    def test_models_are_serialised_by_alias(self):
        rooms = [RoomResponse.from_room(Room("a" * 24, 101, "Single", 100))]
        resp = send_custom_response(200, rooms)
        self.assertEqual(101, json.loads(resp["body"])[0]["roomNumber"])


if __name__ == "__main__":
    unittest.main()
