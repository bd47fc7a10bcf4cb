from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    input_path: str = Field(..., min_length=1, description="Filesystem path of the file to convert")
    output_format: str = Field(..., min_length=1, description="Target format, e.g. png, ico or svg")


class ConvertResponse(BaseModel):
    output_path: str = Field(..., description="Absolute path of the converted file in the scratch directory")


class SaveRequest(BaseModel):
    source: str = Field(..., min_length=1, description="Converted file to copy")
    destination: str = Field(..., min_length=1, description="Path chosen by the user")


class SaveResponse(BaseModel):
    destination: str


class FormatsResponse(BaseModel):
    kind: str
    formats: List[str] = Field(default_factory=list)
