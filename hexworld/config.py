"""Validated map settings supplied by the host application."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .coord.integers import U8_MAX
from .map.context import HexMapContext
from .map.tile_map import HexMap

logger = logging.getLogger(__name__)


class MapSettings(BaseModel):
    """Map dimensions as read from the host's configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = Field(ge=0, le=U8_MAX)
    height: int = Field(ge=0, le=U8_MAX)
    wrap_x: bool

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MapSettings":
        """Validate an untrusted mapping, raising ``pydantic.ValidationError``."""

        return cls.model_validate(dict(data))

    def to_context(self) -> HexMapContext:
        return HexMapContext(width=self.width, height=self.height, wrap_x=self.wrap_x)

    def build_map(self) -> HexMap:
        logger.debug("Building map from settings %s", self.model_dump())
        return HexMap.from_context(self.to_context())


__all__ = ["MapSettings"]
