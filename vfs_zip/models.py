from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ResolveRequest(BaseModel):
    options: Dict[str, Any] = Field(default_factory=dict, examples=[{"zip:charset": "utf8"}])


class ResolveResponse(BaseModel):
    options: Dict[str, Any] = Field(default_factory=dict, examples=[{"zip:charset": "UTF-8"}])


class OptionNamesResponse(BaseModel):
    names: List[str] = Field(default_factory=list)


class DetectResponse(BaseModel):
    option: Dict[str, str]
    detected: Optional[str] = Field(default=None, examples=["cp1252"])
    sample_bytes: int = 0

class HealthResponse(BaseModel):
    ok: bool = True
