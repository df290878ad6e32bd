"""JSON formatting utilities for decoded sentences."""

import json
from dataclasses import asdict
from typing import Any

from gnss_decode import DecodedRecord, DecodeResult, GenericRecord, NMEADecodeError

__all__ = ["format_error", "format_record", "format_result", "format_result_message"]


def format_record(record: DecodedRecord) -> dict[str, Any]:
    """Convert a decoded record into a JSON-compatible dict.

    The ``type`` key holds the dispatch key (``"rmc"``, ``"gga"``,
    ``"gsv"``) or ``"generic"``. Datetimes become ISO 8601 strings and
    generic field positions become string keys.
    """
    if isinstance(record, GenericRecord):
        return {
            "sentence_type": record.sentence_type,
            "fields": {str(index): value for index, value in record.fields.items()},
            "raw_sentence": record.raw_sentence,
            "type": "generic",
        }

    payload = asdict(record)
    payload["type"] = record.sentence_type[-3:].lower()

    utc_datetime = payload.get("utc_datetime")
    if utc_datetime is not None:
        payload["utc_datetime"] = utc_datetime.isoformat()
    return payload


def format_error(error: NMEADecodeError) -> dict[str, str]:
    """Describe a decoding error by kind and message."""
    return {"kind": error.kind, "message": str(error)}


def format_result(result: DecodeResult) -> dict[str, Any]:
    """Convert one per-sentence decoding outcome into a JSON-compatible dict."""
    if result.record is not None:
        return {"ok": True, "record": format_record(result.record)}

    sentence = result.sentence if isinstance(result.sentence, str) else repr(result.sentence)
    return {"ok": False, "sentence": sentence, "error": format_error(result.error)}


def format_result_message(result: DecodeResult) -> str:
    """Serialize a decoding outcome into a JSON string for WebSocket transmission."""
    return json.dumps(format_result(result))
