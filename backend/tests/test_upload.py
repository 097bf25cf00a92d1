import os

from mittirang.adapters.media_storage import LocalMediaStorage

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def test_upload_requires_auth(client):
    res = client.post("/api/upload", files={"file": ("a.png", PNG_BYTES, "image/png")})
    assert res.status_code == 401


def test_upload_image_and_serve_it(client, admin_headers, settings):
    res = client.post(
        "/api/upload",
        files={"file": ("boot.PNG", PNG_BYTES, "image/png")},
        headers=admin_headers,
    )
    assert res.status_code == 200
    url = res.json()["url"]
    assert url.startswith("/media/products/")
    assert url.endswith(".png")

    name = url.rsplit("/", 1)[1]
    assert os.path.exists(os.path.join(settings.MEDIA_DIR, "products", name))

    served = client.get(url)
    assert served.status_code == 200
    assert served.content == PNG_BYTES


def test_upload_rejects_non_images(client, admin_headers):
    res = client.post(
        "/api/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["code"] == "invalid_upload"


def test_upload_rejects_large_files(client, admin_headers, settings):
    blob = b"\x00" * (settings.MAX_UPLOAD_BYTES + 1)
    res = client.post(
        "/api/upload",
        files={"file": ("big.jpg", blob, "image/jpeg")},
        headers=admin_headers,
    )
    assert res.status_code == 413
    assert res.json()["code"] == "upload_too_large"


def test_storage_extension_from_content_type(tmp_path):
    storage = LocalMediaStorage(str(tmp_path), url_prefix="/files/")
    url = storage.save(b"data", filename="no-extension", content_type="image/jpeg")
    assert url.startswith("/files/products/")
    assert os.path.splitext(url)[1] in (".jpg", ".jpeg")
    assert storage.health_check() is True
