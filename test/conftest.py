from types import SimpleNamespace

import pytest
from minio.error import S3Error

from arclead.fs import Bucket


class NoSuchKey(S3Error):
    code = "NoSuchKey"

    def __init__(self, key: str):
        Exception.__init__(self, f"NoSuchKey: {key}")

    def __str__(self):
        return self.args[0]


class FakeResponse:
    def __init__(self, body: bytes, content_type: str):
        self._body = body
        self.headers = {"Content-Type": content_type}

    def read(self) -> bytes:
        return self._body

    def close(self):
        pass

    def release_conn(self):
        pass


class FakeMinio:
    """In-memory stand-in for the Minio client calls the bucket makes"""

    def __init__(self):
        self.objects: dict[str, tuple[bytes, str, dict[str, str]]] = {}
        self.writes: list[str] = []

    def get_object(self, bucket_name: str, object_name: str):
        if object_name not in self.objects:
            raise NoSuchKey(object_name)
        body, content_type, _ = self.objects[object_name]
        return FakeResponse(body, content_type)

    def put_object(
        self,
        bucket_name: str,
        object_name: str,
        data,
        length: int,
        content_type: str = "application/octet-stream",
        metadata: dict[str, str] | None = None,
    ):
        meta = {f"x-amz-meta-{k}": v for k, v in (metadata or {}).items()}
        self.objects[object_name] = (data.read(length), content_type, meta)
        self.writes.append(object_name)

    def remove_object(self, bucket_name: str, object_name: str):
        self.objects.pop(object_name, None)

    def list_objects(self, bucket_name: str, prefix: str | None = None, recursive: bool = False):
        for key in sorted(self.objects):
            if key.startswith(prefix or ""):
                yield SimpleNamespace(object_name=key)

    def stat_object(self, bucket_name: str, object_name: str):
        if object_name not in self.objects:
            raise NoSuchKey(object_name)
        body, content_type, meta = self.objects[object_name]
        return SimpleNamespace(metadata=meta, content_type=content_type, size=len(body))


@pytest.fixture
def minio_client() -> FakeMinio:
    return FakeMinio()


@pytest.fixture
def bucket(minio_client) -> Bucket:
    return Bucket(minio_client, "test-bucket", "https://cdn.example.com/")
