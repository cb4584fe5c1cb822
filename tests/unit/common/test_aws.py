"""Tests for common.aws module."""

from unittest.mock import patch

from common.aws import get_dynamodb_table, upload_bytes_to_s3


class TestUploadBytesToS3:
    @patch("common.aws.get_s3_client")
    def test_single_put_object(self, mock_client) -> None:
        upload_bytes_to_s3(b"PAR1", "bucket", "raw/key", "application/vnd.apache.parquet")

        mock_client.return_value.put_object.assert_called_once_with(
            Bucket="bucket",
            Key="raw/key",
            Body=b"PAR1",
            ContentType="application/vnd.apache.parquet",
        )


class TestGetDynamodbTable:
    @patch("common.aws.boto3")
    def test_returns_named_table(self, mock_boto3) -> None:
        table = get_dynamodb_table("STATE")

        mock_boto3.resource.assert_called_once_with("dynamodb")
        assert table is mock_boto3.resource.return_value.Table.return_value
