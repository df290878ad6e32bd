"""Tests for the WebSocket decoding endpoint."""

import asyncio

from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from gnss_decode import SentenceDecoder
from server.main import _decode_messages_until_disconnect, app

GGA = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
GSV = "$GPGSV,3,1,12,05,58,322,36,02,55,032,,26,50,173,,04,31,085,00*79"


def test_each_frame_is_decoded() -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        websocket.send_text(GGA)
        first = websocket.receive_json()
        websocket.send_text(GSV)
        second = websocket.receive_json()
    assert first["ok"] is True
    assert first["record"]["type"] == "gga"
    assert second["record"]["type"] == "gsv"
    assert second["record"]["checksum"] == "00*79"


def test_malformed_frame_keeps_connection_open() -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        websocket.send_text("$GPGSV,3,1,12,05,58,322,36,02")
        failure = websocket.receive_json()
        websocket.send_text(GGA)
        success = websocket.receive_json()
    assert failure["ok"] is False
    assert failure["error"]["kind"] == "MalformedSentence"
    assert success["ok"] is True


def test_verify_checksum_query_parameter() -> None:
    with (
        TestClient(app) as client,
        client.websocket_connect("/ws?verify_checksum=true") as websocket,
    ):
        websocket.send_text(GGA[:-2] + "FF")
        data = websocket.receive_json()
    assert data["error"]["kind"] == "ChecksumMismatch"


def test_binary_frame_is_invalid_input() -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        websocket.send_bytes(b"$GPZZZ,1")
        failure = websocket.receive_json()
        websocket.send_text(GGA)
        success = websocket.receive_json()
    assert failure["ok"] is False
    assert failure["error"]["kind"] == "InvalidInput"
    assert failure["sentence"] == repr(b"$GPZZZ,1")
    assert success["ok"] is True


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        async def receive(self) -> dict:
            return {"type": "websocket.disconnect", "code": 1000}

    async def _run() -> None:
        await _decode_messages_until_disconnect(MockWebSocket(), SentenceDecoder())  # type: ignore[arg-type]

    asyncio.run(_run())
