from arclead.fs.core import Bucket, setup_minio, with_bucket
from arclead.fs import layout

__all__ = ["Bucket", "layout", "setup_minio", "with_bucket"]
