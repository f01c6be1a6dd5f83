import json
import logging
from boto3 import resource
from botocore.exceptions import ClientError

from common.repository.room_repo import RoomRepository
from common.services.room_service import RoomService
from common.schemas.rooms import RoomResponse, validate_room_create
from common.utils.constants import TABLE_NAME, AWS_REGION, LOG_LEVEL
from common.utils.custom_exceptions import RoomAlreadyExists, ValidationFailed
from common.utils.custom_response import send_custom_response, send_error_response

logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

room_repo = RoomRepository(table)
room_service = RoomService(room_repo=room_repo)


def create_room(event, context):
    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        return send_error_response(400, "Invalid JSON body")

    try:
        request_body = validate_room_create(body)
        room = room_service.create_room(request_body)
    except ValidationFailed as err:
        logger.info(f"Rejected room: {err}")
        return send_error_response(400, str(err))
    except RoomAlreadyExists as err:
        logger.info(f"Rejected room: {err}")
        return send_error_response(400, str(err))
    except ClientError as err:
        logger.error(f"AWS client error creating room: {err}")
        return send_error_response(500, err.response["Error"].get("Message", str(err)))
    except Exception as err:
        logger.exception("Unhandled error creating room")
        return send_error_response(500, str(err))

    return send_custom_response(201, RoomResponse.from_room(room))
