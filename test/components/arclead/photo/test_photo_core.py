from arclead import photo as photos
from arclead.fs import layout


def test_upload_keeps_extension_and_type(bucket, minio_client):
    photo_id, url = photos.upload_photo(bucket, "a1", "headshot.png", b"\x89PNG", "image/png")

    key = layout.photo_key("a1", photo_id, "png")
    assert minio_client.objects[key][:2] == (b"\x89PNG", "image/png")
    assert url == f"https://cdn.example.com/{key}"


def test_upload_defaults_to_jpg(bucket):
    photo_id, url = photos.upload_photo(bucket, "a1", "headshot", b"x", None)
    assert url.endswith(f"/photos/{photo_id}.jpg")


def test_list_photos(bucket):
    first, _ = photos.upload_photo(bucket, "a1", "one.jpg", b"1", "image/jpeg")
    second, _ = photos.upload_photo(bucket, "a1", "two.webp", b"2", "image/webp")
    photos.upload_photo(bucket, "a2", "other.jpg", b"3", "image/jpeg")

    listed = photos.list_photos(bucket, "a1")
    assert sorted(p.id for p in listed) == sorted([first, second])
    assert not any(p.isMain for p in listed)


def test_set_main_photo_copies_with_source_type(bucket, minio_client):
    photo_id, _ = photos.upload_photo(bucket, "a1", "one.png", b"\x89PNG", "image/png")

    key = photos.set_main_photo(bucket, "a1", photo_id)

    assert key == "artists/a1/main.png"
    body, content_type, meta = minio_client.objects[key]
    assert (body, content_type) == (b"\x89PNG", "image/png")
    assert meta == {"x-amz-meta-photo-id": photo_id}
    assert photos.main_photo_url(bucket, "a1") == "https://cdn.example.com/artists/a1/main.png"


def test_set_main_photo_replaces_previous(bucket):
    png, _ = photos.upload_photo(bucket, "a1", "one.png", b"png", "image/png")
    jpg, _ = photos.upload_photo(bucket, "a1", "two.jpg", b"jpg", "image/jpeg")

    photos.set_main_photo(bucket, "a1", png)
    photos.set_main_photo(bucket, "a1", jpg)

    assert bucket.list_keys(layout.main_photo_prefix("a1")) == ["artists/a1/main.jpg"]
    assert bucket.read_bytes("artists/a1/main.jpg") == (b"jpg", "image/jpeg")


def test_set_main_photo_unknown(bucket):
    assert photos.set_main_photo(bucket, "a1", "missing") is None
    assert photos.main_photo_url(bucket, "a1") is None


def test_list_photos_flags_main(bucket):
    first, _ = photos.upload_photo(bucket, "a1", "one.jpg", b"1", "image/jpeg")
    second, _ = photos.upload_photo(bucket, "a1", "two.jpg", b"2", "image/jpeg")
    photos.set_main_photo(bucket, "a1", second)

    flags = {p.id: p.isMain for p in photos.list_photos(bucket, "a1")}
    assert flags == {first: False, second: True}


def test_delete_photo_any_extension(bucket):
    bucket.write_bytes(layout.photo_key("a1", "p1", "jpg"), b"1", "image/jpeg")
    bucket.write_bytes(layout.photo_key("a1", "p1", "png"), b"1", "image/png")
    bucket.write_bytes(layout.photo_key("a1", "p10", "jpg"), b"2", "image/jpeg")

    assert photos.delete_photo(bucket, "a1", "p1") == 2
    assert bucket.list_keys(layout.photos_prefix("a1")) == [layout.photo_key("a1", "p10", "jpg")]


def test_main_photo_url_lookup_failure_is_none(bucket, minio_client, monkeypatch):
    def broken(**kwargs):
        raise ConnectionError("bucket unreachable")

    monkeypatch.setattr(minio_client, "list_objects", broken)
    assert photos.main_photo_url(bucket, "a1") is None
