import json
from typing import Any

from fastapi import Request
from starlette.datastructures import UploadFile

from adreview.api.exceptions import RequestParsingError
from adreview.intake.models import UploadedFile

DEFAULT_CONTENT_TYPE = "application/octet-stream"


async def read_upload(upload: UploadFile | None) -> UploadedFile | None:
    """Read a multipart file fully; an empty field with no filename counts as absent."""
    if upload is None:
        return None
    content = await upload.read()
    if not upload.filename and not content:
        return None
    return UploadedFile(
        filename=upload.filename or "",
        content=content,
        content_type=upload.content_type or DEFAULT_CONTENT_TYPE,
    )


async def read_analysis_request(
    request: Request,
    field_names: tuple[str, ...],
) -> tuple[dict[str, Any], UploadedFile | None]:
    """Collect JSON fields and the optional image from a JSON or multipart body.

    Multipart callers send each field as a JSON-encoded string.

    Raises:
        RequestParsingError: if the body or a field is not valid JSON.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except json.JSONDecodeError as exc:
            raise RequestParsingError(f"Request body is not valid JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise RequestParsingError("Request body must be a JSON object")
        return {name: body.get(name) for name in field_names}, None

    form = await request.form()
    fields = {name: _decode_field(name, form.get(name)) for name in field_names}
    image = form.get("image")
    upload = await read_upload(image) if isinstance(image, UploadFile) else None
    return fields, upload


def _decode_field(name: str, raw: object) -> Any:
    if raw is None or isinstance(raw, UploadFile):
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise RequestParsingError(f"Field '{name}' is not valid JSON: {exc}") from exc
