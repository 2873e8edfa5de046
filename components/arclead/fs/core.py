from io import BytesIO
import json
from typing import Any

from fastapi import HTTPException, status
from minio import Minio
from minio.error import S3Error

from arclead.log import get_logger

_log = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
META_PREFIX = "x-amz-meta-"


class Bucket:
    """
    The single object-storage bucket the API persists to.

    Wraps the handful of Minio calls the handlers need: JSON documents are
    read and written whole, photos are stored as raw bytes with their
    content type.
    """

    def __init__(self, client: Minio, name: str, public_base_url: str):
        self.client = client
        self.name = name
        self.public_base_url = public_base_url.rstrip("/")

    def read_text(self, key: str) -> str | None:
        """Object body as text, None when it is missing or can't be read."""
        response = None
        try:
            response = self.client.get_object(bucket_name=self.name, object_name=key)
            return response.read().decode("utf-8")
        except S3Error as e:
            if e.code == "NoSuchKey":
                _log.debug(f"{key} does not exist")
            else:
                _log.error(f"Reading {key} failed: {e}")
            return None
        except Exception as e:
            _log.error(f"Reading {key} failed: {e}")
            return None
        finally:
            if response is not None:
                response.close()
                response.release_conn()

    def read_json(self, key: str) -> Any | None:
        text = self.read_text(key)
        if text is None:
            return None
        return json.loads(text)

    def read_bytes(self, key: str) -> tuple[bytes, str] | None:
        """Object body and content type. Storage errors other than a missing key propagate."""
        response = None
        try:
            response = self.client.get_object(bucket_name=self.name, object_name=key)
            content_type = response.headers.get("Content-Type", "application/octet-stream")
            return response.read(), content_type
        except S3Error as e:
            if e.code == "NoSuchKey":
                return None
            raise
        finally:
            if response is not None:
                response.close()
                response.release_conn()

    def write_json(self, key: str, document: Any):
        self.write_bytes(
            key,
            json.dumps(document, ensure_ascii=False).encode("utf-8"),
            JSON_CONTENT_TYPE,
        )

    def write_bytes(
        self,
        key: str,
        data: bytes,
        content_type: str,
        metadata: dict[str, str] | None = None,
    ):
        _log.debug(f"Writing {len(data)} bytes to {key}")
        self.client.put_object(
            bucket_name=self.name,
            object_name=key,
            data=BytesIO(data),
            length=len(data),
            content_type=content_type,
            metadata=metadata,
        )

    def delete(self, key: str):
        _log.debug(f"Deleting {key}")
        self.client.remove_object(bucket_name=self.name, object_name=key)

    def list_keys(self, prefix: str) -> list[str]:
        # list_objects follows continuation tokens, so every page is returned
        return [
            obj.object_name
            for obj in self.client.list_objects(
                bucket_name=self.name, prefix=prefix, recursive=True
            )
        ]

    def metadata(self, key: str) -> dict[str, str] | None:
        """User metadata of an object, prefix stripped. None when missing."""
        try:
            stat = self.client.stat_object(bucket_name=self.name, object_name=key)
        except S3Error as e:
            if e.code in ("NoSuchKey", "ResourceNotFound"):
                return None
            raise

        return {
            name.lower()[len(META_PREFIX):]: value
            for name, value in (stat.metadata or {}).items()
            if name.lower().startswith(META_PREFIX)
        }

    def url(self, key: str) -> str:
        # Placeholder until the hosting environment hands out real public URLs
        return f"{self.public_base_url}/{key}"


_bucket: Bucket | None = None


def setup_minio(
    endpoint: str,
    access_key: str,
    secret_key: str,
    bucket: str,
    public_base_url: str,
    secure: bool = False,
) -> Bucket:
    global _bucket

    if _bucket:
        _log.debug("Minio connection established, returning existing bucket")
        return _bucket

    _log.info("Setting up Minio client")

    client = Minio(
        endpoint=endpoint, access_key=access_key, secret_key=secret_key, secure=secure
    )

    policy = {
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": "*",
                "Action": "s3:GetObject",
                "Resource": f"arn:aws:s3:::{bucket}/artists/*",
            },
        ],
    }

    found = client.bucket_exists(bucket_name=bucket)
    if not found:
        _log.warning(f"{bucket} does not exist, creating and setting photo read policy")
        client.make_bucket(bucket_name=bucket)
        client.set_bucket_policy(bucket_name=bucket, policy=json.dumps(policy))
        _log.debug("Done")
    else:
        _log.info(f"{bucket} exists.")

    _bucket = Bucket(client, bucket, public_base_url)
    return _bucket


def with_bucket() -> Bucket:
    if _bucket is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Storage Connection Error",
        )

    return _bucket
