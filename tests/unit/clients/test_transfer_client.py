from __future__ import annotations

import re

import httpx
import pytest

from src.effect_studio.clients.transfer import TransferClient, derive_extension
from src.effect_studio.errors import TransferError, UploadTargetError
from src.effect_studio.models import SourceFile
from tests.helpers.config import API_BASE, CDN_DOMAIN
from tests.mocks.transport import DummyHTTPResponse, configure_httpx

UPLOAD_ENDPOINT = f"{API_BASE}/get-emd-upload-url"
SIGNED_URL = "https://storage.studio.test/bucket/object?signature=abc"


def make_source(filename: str = "portrait.png", content_type: str = "image/png") -> SourceFile:
    return SourceFile(filename=filename, content_type=content_type, data=b"png-bytes")


def make_client() -> TransferClient:
    return TransferClient(upload_endpoint=UPLOAD_ENDPOINT, cdn_domain=CDN_DOMAIN)


@pytest.mark.asyncio
async def test_upload_composes_cdn_url(monkeypatch) -> None:
    client = configure_httpx(
        monkeypatch,
        get=[DummyHTTPResponse(200, text=SIGNED_URL)],
        put=[DummyHTTPResponse(200)],
    )

    artifact = await make_client().upload(make_source())

    assert re.fullmatch(rf"{re.escape(CDN_DOMAIN)}/[A-Za-z0-9]{{21}}\.png", artifact.url)
    assert artifact.url == f"{CDN_DOMAIN}/{artifact.filename}"

    get_call = client.calls("GET")[0]
    assert get_call["url"] == UPLOAD_ENDPOINT
    assert get_call["params"] == {"fileName": artifact.filename}

    put_call = client.calls("PUT")[0]
    assert put_call["url"] == SIGNED_URL
    assert put_call["content"] == b"png-bytes"
    assert put_call["headers"] == {"Content-Type": "image/png"}


@pytest.mark.asyncio
async def test_upload_target_failure(monkeypatch) -> None:
    client = configure_httpx(monkeypatch, get=[DummyHTTPResponse(500)])

    with pytest.raises(UploadTargetError, match="Internal Server Error"):
        await make_client().upload(make_source())

    assert client.calls("PUT") == []


@pytest.mark.asyncio
async def test_upload_target_empty_body(monkeypatch) -> None:
    configure_httpx(monkeypatch, get=[DummyHTTPResponse(200, text="  ")])

    with pytest.raises(UploadTargetError):
        await make_client().upload(make_source())


@pytest.mark.asyncio
async def test_upload_target_transport_error(monkeypatch) -> None:
    configure_httpx(monkeypatch, get=[httpx.ConnectError("refused")])

    with pytest.raises(UploadTargetError):
        await make_client().upload(make_source())


@pytest.mark.asyncio
async def test_transfer_failure(monkeypatch) -> None:
    configure_httpx(
        monkeypatch,
        get=[DummyHTTPResponse(200, text=SIGNED_URL)],
        put=[DummyHTTPResponse(403)],
    )

    with pytest.raises(TransferError, match="Forbidden"):
        await make_client().upload(make_source())


@pytest.mark.asyncio
async def test_each_upload_uses_new_name(monkeypatch) -> None:
    configure_httpx(
        monkeypatch,
        get=[DummyHTTPResponse(200, text=SIGNED_URL), DummyHTTPResponse(200, text=SIGNED_URL)],
        put=[DummyHTTPResponse(200), DummyHTTPResponse(200)],
    )
    client = make_client()

    first = await client.upload(make_source())
    second = await client.upload(make_source())

    assert first.url != second.url


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("photo.jpeg", "jpeg"),
        ("archive.tar.png", "png"),
        ("noextension", "jpg"),
        ("trailingdot.", "jpg"),
    ],
)
def test_derive_extension(filename: str, expected: str) -> None:
    assert derive_extension(filename) == expected
