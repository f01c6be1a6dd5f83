import importlib
import json
import os
import unittest
from unittest.mock import MagicMock, patch

from botocore.exceptions import ClientError
from common.models.rooms import Room
from common.utils.custom_exceptions import RoomAlreadyExists


class CreateRoomTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.env = patch.dict(os.environ, {"TABLE_NAME": "test-table"}, clear=False)
        cls.env.start()
        cls.resource = patch("handlers.rooms.create_room.resource")
        mock_res = cls.resource.start()
        mock_res.return_value.Table.return_value = MagicMock()
        import handlers.rooms.create_room as mod
        cls.mod = importlib.reload(mod)

    @classmethod
    def tearDownClass(cls):
        cls.resource.stop()
        cls.env.stop()

    def setUp(self):
        self.p_create = patch.object(self.mod.room_service, "create_room")
        self.mock_create = self.p_create.start()
        self.mock_create.return_value = Room("a" * 24, 103, "Suite", 200)

    def tearDown(self):
        self.p_create.stop()

    def _event(self, body):
        return {"body": json.dumps(body) if not isinstance(body, str) else body}

    def test_success_returns_201_with_created_room(self):
        resp = self.mod.create_room(
            self._event({"roomNumber": 103, "roomType": "Suite", "pricePerNight": 200}),
            None,
        )
        self.assertEqual(201, resp["statusCode"])
        body = json.loads(resp["body"])
        self.assertEqual("a" * 24, body["id"])
        self.assertEqual(103, body["roomNumber"])
        self.assertEqual(200, body["pricePerNight"])
        self.assertFalse(body["isBooked"])
        req = self.mock_create.call_args.args[0]
        self.assertEqual(103, req.room_number)

    def test_empty_body_returns_400_validation_failed(self):
        resp = self.mod.create_room(self._event({}), None)
        self.assertEqual(400, resp["statusCode"])
        error = json.loads(resp["body"])["error"]
        self.assertRegex(error.lower(), "validation failed")
        self.assertIn("roomNumber", error)
        self.mock_create.assert_not_called()

    def test_missing_body_returns_400_validation_failed(self):
        resp = self.mod.create_room({"body": None}, None)
        self.assertEqual(400, resp["statusCode"])
        self.assertRegex(json.loads(resp["body"])["error"].lower(), "validation failed")

    def test_non_positive_price_returns_400(self):
        resp = self.mod.create_room(
            self._event({"roomNumber": 103, "roomType": "Suite", "pricePerNight": 0}),
            None,
        )
        self.assertEqual(400, resp["statusCode"])
        self.assertIn("pricePerNight", json.loads(resp["body"])["error"])

    def test_invalid_json_returns_400(self):
        resp = self.mod.create_room(self._event("not-json"), None)
        self.assertEqual(400, resp["statusCode"])
        self.assertEqual("Invalid JSON body", json.loads(resp["body"])["error"])

    def test_duplicate_room_number_returns_400(self):
        self.mock_create.side_effect = RoomAlreadyExists(101)
        resp = self.mod.create_room(
            self._event({"roomNumber": 101, "roomType": "Suite", "pricePerNight": 200}),
            None,
        )
        self.assertEqual(400, resp["statusCode"])
        self.assertRegex(json.loads(resp["body"])["error"].lower(), "duplicate key")

    def test_client_error_returns_500(self):
        self.mock_create.side_effect = ClientError(
            {"Error": {"Code": "InternalServerError", "Message": "fail"}},
            "TransactWriteItems",
        )
        resp = self.mod.create_room(
            self._event({"roomNumber": 103, "roomType": "Suite", "pricePerNight": 200}),
            None,
        )
        self.assertEqual(500, resp["statusCode"])
        self.assertEqual("fail", json.loads(resp["body"])["error"])

    def test_generic_error_returns_500_with_message(self):
        self.mock_create.side_effect = RuntimeError("boom")
        resp = self.mod.create_room(
            self._event({"roomNumber": 103, "roomType": "Suite", "pricePerNight": 200}),
            None,
        )
        self.assertEqual(500, resp["statusCode"])
        self.assertEqual("boom", json.loads(resp["body"])["error"])


if __name__ == "__main__":
    unittest.main()
