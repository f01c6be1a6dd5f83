import logging
from boto3 import resource
from botocore.exceptions import ClientError

from common.repository.room_repo import RoomRepository
from common.services.room_service import RoomService
from common.schemas.rooms import RoomResponse
from common.utils.constants import TABLE_NAME, AWS_REGION, LOG_LEVEL
from common.utils.custom_response import send_custom_response, send_error_response

logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

room_repo = RoomRepository(table)
room_service = RoomService(room_repo=room_repo)


def list_rooms(event, context):
    try:
        rooms = room_service.list_rooms()
    except ClientError as err:
        logger.error(f"AWS client error listing rooms: {err}")
        return send_error_response(500, err.response["Error"].get("Message", str(err)))
    except Exception as err:
        logger.exception("Unhandled error listing rooms")
        return send_error_response(500, str(err))

    return send_custom_response(200, [RoomResponse.from_room(room) for room in rooms])
