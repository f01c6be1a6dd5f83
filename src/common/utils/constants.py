import os

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

ROOM_ID_BYTES = 12

# DynamoDB numbers carry at most 38 significant digits.
DYNAMODB_NUMBER_LIMIT = 10**38
