import boto3

from app.settings import settings

REGION_NAME = settings.REGION
TABLE_NAME = settings.DDB_TABLE_NAME


def get_dynamo_resource():
    return boto3.resource("dynamodb", region_name=REGION_NAME)


def get_table():
    resource = get_dynamo_resource()
    return resource.Table(TABLE_NAME)  # type: ignore


def build_user_pk(user_id: str) -> str:
    """
    Partition key for all user-owned items.
    Example: USER#local
    """
    return f"USER#{user_id}"


PROFILE_SK = "PROFILE"


def build_profile_key(user_id: str) -> dict:
    """
    Full key for the single profile item of a user, e.g.:
    {"PK": "USER#local", "SK": "PROFILE"}
    """
    return {"PK": build_user_pk(user_id), "SK": PROFILE_SK}
