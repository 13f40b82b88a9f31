"""S3 presigned URL adapter."""

from dataclasses import dataclass
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from figurine_store.domain.uploads import s3_bucket_host
from figurine_store.services.uploads import ObjectSigner


@dataclass
class Boto3ObjectSigner(ObjectSigner):
    """Signs single-object PUT requests with SigV4."""

    client: Any
    bucket: str
    region: str

    @classmethod
    def create(cls, bucket: str, region: str) -> "Boto3ObjectSigner":
        """Create a signer backed by a virtual-hosted S3 client."""
        client = boto3.client(
            "s3",
            region_name=region,
            config=Config(signature_version="s3v4", s3={"addressing_style": "virtual"}),
        )
        return cls(client=client, bucket=bucket, region=region)

    def generate_put_url(self, key: str, content_type: str, expires_in: int) -> str:
        """Return a presigned PUT URL bound to the key and content type."""
        if not self.bucket:
            raise RuntimeError("S3 bucket name is not configured")
        try:
            return self.client.generate_presigned_url(
                ClientMethod="put_object",
                Params={
                    "Bucket": self.bucket,
                    "Key": key,
                    "ContentType": content_type,
                },
                ExpiresIn=expires_in,
                HttpMethod="PUT",
            )
        except (BotoCoreError, ClientError) as exc:
            raise RuntimeError(f"Failed to presign upload: {exc}") from exc

    def public_url(self, key: str) -> str:
        """Return the virtual-hosted URL for an object."""
        return f"https://{s3_bucket_host(self.bucket, self.region)}/{key}"

    def close(self) -> None:
        """Close the underlying S3 client connections."""
        self.client.close()
