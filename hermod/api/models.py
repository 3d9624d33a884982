from __future__ import annotations

import httpx
from pydantic import ValidationError

from hermod.api.client import bearer_headers, build_request, client_scope, endpoint, read_body, send
from hermod.config import DEFAULT_API_BASE
from hermod.schemas.errors import DeserializationError
from hermod.schemas.responses import ModelListResponse, ModelObject


def list_models(
    api_key: str,
    client: httpx.Client | None = None,
    api_base: str = DEFAULT_API_BASE,
    timeout: float | None = None,
) -> list[ModelObject]:
    with client_scope(client, timeout) as http:
        request = build_request(
            http, "GET", endpoint(api_base, "models"), headers=bearer_headers(api_key)
        )
        response = send(http, request)
        try:
            print(f"Response Status Code: {response.status_code}")
            body = read_body(response)
        finally:
            response.close()

    # Parsed regardless of status; an error object without "data" yields no models.
    try:
        listing = ModelListResponse.model_validate_json(body)
    except ValidationError as exc:
        raise DeserializationError(exc) from exc

    return list(listing.data)
