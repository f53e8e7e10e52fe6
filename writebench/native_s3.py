"""Serial writes to S3 through boto3: direct put and transfer manager"""

import os
from pathlib import Path

import boto3
from s3transfer.manager import TransferManager

from .base import WriteStrategy, destination_key
from .config import BackendConfig


SERIAL_PREFIX = "test-serial"
TRANSFER_MANAGER_PREFIX = "test-serial-tm"
ORIGINAL_LENGTH_KEY = "originalLength"


def create_s3_client(config: BackendConfig):
    """S3 client bound to the configured endpoint, region and static credentials"""
    return boto3.client(
        "s3",
        region_name=config.region,
        endpoint_url=config.endpoint,
        aws_access_key_id=config.access_key,
        aws_secret_access_key=config.secret_key,
    )


def create_transfer_manager(s3_client) -> TransferManager:
    return TransferManager(s3_client)


class DirectPutStrategy(WriteStrategy):
    """One synchronous put_object per file"""

    title = "Serial S3"
    target_label = "S3"

    def __init__(self, s3_client, bucket_name: str, log=None):
        super().__init__(log)
        self.s3_client = s3_client
        self.bucket_name = bucket_name

    def write_file(self, path: Path):
        key = destination_key(SERIAL_PREFIX, path)
        with open(path, "rb") as body:
            metadata = {ORIGINAL_LENGTH_KEY: str(os.fstat(body.fileno()).st_size)}
            with self.timed(key):
                self.s3_client.put_object(
                    Bucket=self.bucket_name,
                    Key=key,
                    Body=body,
                    Metadata=metadata,
                )


class TransferManagerStrategy(WriteStrategy):
    """Upload through s3transfer, waiting for each upload before the next one"""

    title = "Serial S3 TransferManager-ed"
    target_label = "S3"

    def __init__(self, transfer_manager: TransferManager, bucket_name: str, log=None):
        super().__init__(log)
        self.transfer_manager = transfer_manager
        self.bucket_name = bucket_name

    def write_file(self, path: Path):
        key = destination_key(TRANSFER_MANAGER_PREFIX, path)
        with self.timed(key):
            future = self.transfer_manager.upload(str(path), self.bucket_name, key)
            future.result()
