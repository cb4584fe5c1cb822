import logging
import os

import boto3
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def get_s3_client():
    """Create S3 client."""
    return boto3.client("s3", endpoint_url=os.environ.get("S3_ENDPOINT"))


def get_dynamodb_table(table_name: str):
    """Get a DynamoDB table resource."""
    return boto3.resource("dynamodb").Table(table_name)


def upload_bytes_to_s3(body: bytes, bucket: str, key: str, content_type: str) -> None:
    """Upload a single object to S3 in one request."""
    s3 = get_s3_client()
    s3.put_object(
        Bucket=bucket,
        Key=key,
        Body=body,
        ContentType=content_type,
    )
    logger.debug("Put %d bytes to s3://%s/%s", len(body), bucket, key)
