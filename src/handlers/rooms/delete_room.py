import logging
from boto3 import resource
from botocore.exceptions import ClientError

from common.repository.room_repo import RoomRepository
from common.services.room_service import RoomService
from common.utils.constants import TABLE_NAME, AWS_REGION, LOG_LEVEL
from common.utils.custom_exceptions import MalformedIdentifier, NotFoundException
from common.utils.custom_response import send_error_response, send_message_response
from common.utils.identifiers import validate_room_id

logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

room_repo = RoomRepository(table)
room_service = RoomService(room_repo=room_repo)


def delete_room(event, context):
    path_params = event.get("pathParameters") or {}

    try:
        room_id = validate_room_id(path_params.get("room_id"), "delete")
        room_service.delete_room(room_id)
    except MalformedIdentifier as err:
        return send_error_response(err.status_code, str(err))
    except NotFoundException as err:
        return send_error_response(err.status_code, str(err))
    except ClientError as err:
        logger.error(f"AWS client error deleting room: {err}")
        return send_error_response(500, err.response["Error"].get("Message", str(err)))
    except Exception as err:
        logger.exception("Unhandled error deleting room")
        return send_error_response(500, str(err))

    return send_message_response(200, "Room deleted successfully")
