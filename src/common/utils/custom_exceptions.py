class NotFoundException(Exception):
    def __init__(self, resource: str, identifier: str, status_code: int):
        self.resource = resource
        self.identifier = identifier
        self.status_code = status_code

    def __str__(self):
        return f"{self.resource} not found"


class RoomAlreadyExists(Exception):
    def __init__(self, room_number: int):
        self.room_number = room_number

    def __str__(self):
        return f"duplicate key error: roomNumber {self.room_number} already exists"


class MalformedIdentifier(Exception):
    def __init__(self, value: str, status_code: int):
        self.value = value
        self.status_code = status_code

    def __str__(self):
        return (
            f'Cast to ObjectId failed for value "{self.value}" '
            f'at path "_id" for model "Room"'
        )


class ValidationFailed(Exception):
    pass
