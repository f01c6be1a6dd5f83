from typing import Any
from pydantic import BaseModel
from pydantic_core import to_json


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str


def send_custom_response(status_code: int, body: Any):
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
        },
        "body": to_json(body, by_alias=True).decode(),
    }


def send_error_response(status_code: int, error: str):
    return send_custom_response(status_code, ErrorResponse(error=error))


def send_message_response(status_code: int, message: str):
    return send_custom_response(status_code, MessageResponse(message=message))
