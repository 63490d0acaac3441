import boto3
from ..core.config import settings


def get_dynamodb_client():
    return boto3.resource('dynamodb',
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_REGION,
        endpoint_url=settings.DYNAMODB_ENDPOINT_URL
    )

def get_users_table(dynamodb=None, table_name: str = None):
    dynamodb = dynamodb or get_dynamodb_client()
    return dynamodb.Table(table_name or settings.USERS_TABLE_NAME)
