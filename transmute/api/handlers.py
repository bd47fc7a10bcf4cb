from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query, status

from transmute.dependencies import get_media_converter_service
from transmute.media.catalog import classify_media, target_formats
from transmute.media.exceptions import (
    DecodeError,
    InvalidInputError,
    MediaConversionError,
    MediaIOError,
)
from transmute.media.types import ConversionRequest
from transmute.models import (
    ConvertRequest,
    ConvertResponse,
    FormatsResponse,
    SaveRequest,
    SaveResponse,
)
from transmute.services.media_converter import MediaConverterService

router = APIRouter()
media_router = APIRouter(prefix="/media", tags=["media"])


def _status_for(error: MediaConversionError | None) -> int:
    if isinstance(error, InvalidInputError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, DecodeError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@media_router.post("/convert", response_model=ConvertResponse)
async def convert_file(
    request: ConvertRequest,
    service: MediaConverterService = Depends(get_media_converter_service),
) -> ConvertResponse:
    outcome = await service.convert(
        ConversionRequest(input_path=request.input_path, output_format=request.output_format)
    )
    if not outcome.ok:
        raise HTTPException(status_code=_status_for(outcome.error), detail=outcome.message)
    return ConvertResponse(output_path=str(outcome.output_path))


@media_router.post("/save", response_model=SaveResponse)
async def save_file_locally(
    request: SaveRequest,
    service: MediaConverterService = Depends(get_media_converter_service),
) -> SaveResponse:
    try:
        destination = service.save(Path(request.source), Path(request.destination))
    except MediaIOError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return SaveResponse(destination=str(destination))


@media_router.get("/formats", response_model=FormatsResponse)
async def list_formats(filename: str = Query(..., min_length=1)) -> FormatsResponse:
    kind = classify_media(filename)
    return FormatsResponse(kind=kind.value, formats=target_formats(kind))


router.include_router(media_router)
