"""
JSON codec for Nexus staging API payloads.

Some payload types travel wrapped one level deeper as ``{"data": <object>}``.
A model opts into this by setting the class flag ``wrap_in_envelope``; the
codec wraps such payloads when encoding and unwraps them, when wrapped, when
decoding. All other payloads are encoded and decoded as they are.
"""

import json
import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..exceptions import StagingContractError
from ..utils.constants import ENVELOPE_KEY, MAX_LOGGED_BODY_LENGTH

M = TypeVar("M", bound=BaseModel)


def _wraps_in_envelope(model_cls: Type[BaseModel]) -> bool:
    return bool(getattr(model_cls, "wrap_in_envelope", False))


def encode_payload(payload: BaseModel) -> Any:
    """
    Convert a payload model into its JSON-compatible wire form.

    Args:
        payload: Model instance to encode

    Returns:
        JSON-compatible object, wrapped as {"data": ...} for envelope types
    """
    data = payload.model_dump(mode="json", by_alias=True)
    if _wraps_in_envelope(type(payload)):
        return {ENVELOPE_KEY: data}
    return data


def encode_json(payload: BaseModel) -> bytes:
    """Encode a payload model as a UTF-8 JSON request body."""
    return json.dumps(encode_payload(payload)).encode("utf-8")


def decode_payload(model_cls: Type[M], data: Any) -> M:
    """
    Build a payload model from decoded JSON.

    Args:
        model_cls: Model class to decode into
        data: Object produced by the JSON parser

    Returns:
        Validated model instance

    Raises:
        pydantic.ValidationError: If the data does not match the model
    """
    if _wraps_in_envelope(model_cls) and isinstance(data, dict) and ENVELOPE_KEY in data:
        data = data[ENVELOPE_KEY]
    return model_cls.model_validate(data)


def decode_response(model_cls: Type[M], response: httpx.Response, action: str) -> Optional[M]:
    """
    Decode the body of a successful response.

    Args:
        model_cls: Model class to decode into
        response: Successful HTTP response
        action: Description of the request, used in error messages

    Returns:
        Model instance, or None when the response has no body

    Raises:
        StagingContractError: If the body is not valid JSON or does not match the model
    """
    if not response.content.strip():
        return None

    try:
        data = response.json()
    except ValueError as e:
        logging.debug("Response body: %s", response.text[:MAX_LOGGED_BODY_LENGTH])
        raise StagingContractError(f"Invalid JSON in response to {action}: {e}") from e

    try:
        return decode_payload(model_cls, data)
    except ValidationError as e:
        logging.debug("Response body: %s", response.text[:MAX_LOGGED_BODY_LENGTH])
        raise StagingContractError(f"Unexpected response to {action}: {e}") from e


__all__ = ["encode_payload", "encode_json", "decode_payload", "decode_response"]
