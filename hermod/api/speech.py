from __future__ import annotations

import os
from pathlib import Path

import httpx
from pydantic_core import PydanticSerializationError

from hermod.api.client import bearer_headers, build_request, client_scope, endpoint, send
from hermod.config import DEFAULT_API_BASE
from hermod.schemas.errors import FileCreateError, SerializationError, UnexpectedStatusError
from hermod.schemas.requests import SpeechRequest


def encode_speech_request(text: str) -> bytes:
    body = SpeechRequest(input=text)
    try:
        return body.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, UnicodeEncodeError) as exc:
        raise SerializationError(exc) from exc


def convert_text_to_speech(
    api_key: str,
    text: str,
    file_path: str | os.PathLike,
    client: httpx.Client | None = None,
    api_base: str = DEFAULT_API_BASE,
    timeout: float | None = None,
) -> None:
    content = encode_speech_request(text)
    headers = bearer_headers(api_key)
    headers["Content-Type"] = "application/json"

    with client_scope(client, timeout) as http:
        request = build_request(
            http, "POST", endpoint(api_base, "audio/speech"), content=content, headers=headers
        )
        response = send(http, request)
        try:
            try:
                output = Path(file_path).open("wb")
            except OSError as exc:
                raise FileCreateError(file_path, exc) from exc

            with output:
                if response.status_code != httpx.codes.OK:
                    raise UnexpectedStatusError(response.status_code)
                # TODO: copy response.iter_bytes() into output once the payload format is settled.
        finally:
            response.close()
