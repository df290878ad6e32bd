"""FastAPI web service exposing the NMEA sentence decoder.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Endpoints:

* ``POST /decode`` takes ``{"sentences": [...]}`` and answers with one
  result per sentence, in order. A sentence that cannot be decoded yields
  an error result; the request itself still succeeds.
* ``GET /sentence-types`` lists the sentence types with a dedicated decoder.
* ``ws://<host>:8000/ws`` decodes each received text frame as one sentence
  and replies with its JSON result. A binary frame gets an InvalidInput
  error result.
"""

import logging
from typing import Any

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from gnss_decode import DecodeResult, InvalidInputError, SentenceDecoder
from gnss_decode.nmea import SENTENCE_TYPES
from server.formatters import format_result, format_result_message

logger = logging.getLogger(__name__)

_decoder = SentenceDecoder()
_verifying_decoder = SentenceDecoder(verify_checksum=True)


class DecodeRequest(BaseModel):
    sentences: list[str]


def _select_decoder(verify_checksum: bool) -> SentenceDecoder:
    return _verifying_decoder if verify_checksum else _decoder


app = FastAPI(title="gnss-decode")


@app.get("/sentence-types")
def sentence_types() -> dict[str, list[str]]:
    return {"sentence_types": list(SENTENCE_TYPES)}


@app.post("/decode")
def decode(request: DecodeRequest, verify_checksum: bool = False) -> dict[str, Any]:
    """Decode a batch of sentences.

    Args:
        request: The sentences to decode.
        verify_checksum: Reject sentences whose checksum does not match.
    """
    decoder = _select_decoder(verify_checksum)
    results = [format_result(result) for result in decoder.parse(request.sentences)]
    failed = sum(1 for result in results if not result["ok"])
    if failed:
        logger.info("Decoded %d sentences, %d failed", len(results), failed)
    return {"results": results}


async def _decode_messages_until_disconnect(
    websocket: WebSocket,
    decoder: SentenceDecoder,
) -> None:
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))

            if message.get("text") is not None:
                results = decoder.parse([message["text"]])
            else:
                payload = message.get("bytes") or b""
                error = InvalidInputError("Binary frames are not decoded; send text")
                results = [DecodeResult(sentence=payload, error=error)]

            for result in results:
                await websocket.send_text(format_result_message(result))
    except WebSocketDisconnect:
        logger.info("WebSocket client disconnected")


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket, verify_checksum: bool = False) -> None:
    """Decode sentences streamed by a WebSocket client, one per text frame.

    Args:
        websocket: The incoming WebSocket connection.
        verify_checksum: Reject sentences whose checksum does not match.
    """
    await websocket.accept()
    await _decode_messages_until_disconnect(websocket, _select_decoder(verify_checksum))
