"""
Canvas Item Schema

One user-created annotation on a strategy canvas (card, sticky note, frame...).
Items are read-only to the engine: the store hands out frozen models so a
classification pass can never observe a half-written item.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger("canvas.schemas.canvas_item")


class SemanticType(str, Enum):
    """Declared role of a canvas item"""
    STICKY = "sticky"
    OPPORTUNITY = "opportunity"
    RISK = "risk"
    ACTION = "action"
    FRAME = "frame"
    TEXT = "text"
    OTHER = "other"


# Types counted toward execution metrics
STRATEGY_TYPES = frozenset({
    SemanticType.STICKY,
    SemanticType.OPPORTUNITY,
    SemanticType.RISK,
    SemanticType.ACTION,
    SemanticType.FRAME,
    SemanticType.TEXT,
})

# Epoch values above this are milliseconds (JS Date.getTime())
_EPOCH_MS_THRESHOLD = 100_000_000_000


def is_strategy_relevant(semantic_type: SemanticType) -> bool:
    return semantic_type in STRATEGY_TYPES


class CanvasItem(BaseModel):
    """
    A single canvas item as supplied by the item store.

    Accepts camelCase keys from the store (semanticType, createdAt) as well
    as snake_case. Malformed fields degrade to defaults instead of raising.

    Unknown types map to SemanticType.OTHER; the declared type string is
    kept in `type_name` for per-type counts.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    semantic_type: SemanticType = Field(default=SemanticType.OTHER, alias="semanticType")
    content: str = ""
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    type_name: str = Field(default="", alias="typeName")

    @model_validator(mode="before")
    @classmethod
    def _keep_declared_type(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "typeName" in data or "type_name" in data:
            return data
        raw = data.get("semanticType", data.get("semantic_type"))
        if isinstance(raw, SemanticType):
            raw = raw.value
        data = dict(data)
        data["typeName"] = str(raw).strip().lower() if raw is not None else ""
        return data

    @field_validator("type_name", mode="before")
    @classmethod
    def _coerce_type_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("semantic_type", mode="before")
    @classmethod
    def _coerce_semantic_type(cls, value: Any) -> SemanticType:
        if isinstance(value, SemanticType):
            return value
        if value is None:
            return SemanticType.OTHER
        try:
            return SemanticType(str(value).strip().lower())
        except ValueError:
            return SemanticType.OTHER

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("created_at", mode="before")
    @classmethod
    def _coerce_created_at(cls, value: Any) -> Optional[datetime]:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            seconds = value / 1000 if value > _EPOCH_MS_THRESHOLD else value
            try:
                return datetime.fromtimestamp(seconds)
            except (OverflowError, OSError, ValueError):
                logger.warning("Ignoring out-of-range timestamp: %r", value)
                return None
        if isinstance(value, str):
            text = value.strip()
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text)
            except ValueError:
                logger.warning("Ignoring unparsable timestamp: %r", value)
                return None
        return None


class Board(BaseModel):
    """A named collection of canvas items, in store-insertion order"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    items: List[CanvasItem] = Field(default_factory=list)
