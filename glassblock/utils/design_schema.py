from typing import List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from .limits import LIMITS


class _Doc(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WindowDoc(_Doc):
    width: int = Field(default=LIMITS.default_width, ge=LIMITS.min_dimension, le=LIMITS.max_dimension)
    height: int = Field(default=LIMITS.default_height, ge=LIMITS.min_dimension, le=LIMITS.max_dimension)


class BlockSupplyDoc(_Doc):
    num_colors: int = Field(default=LIMITS.default_num_colors, ge=1, le=LIMITS.max_colors, alias="numColors")
    colors: List[str] = Field(default_factory=list)
    block_counts: List[int] = Field(default_factory=list, alias="blockCounts")


class DesignDoc(_Doc):
    num_windows: int = Field(default=LIMITS.default_num_windows, ge=1, le=LIMITS.max_windows, alias="numWindows")
    windows: List[WindowDoc] = Field(default_factory=list)
    block_supply: BlockSupplyDoc = Field(default_factory=BlockSupplyDoc, alias="blockSupply")


def dump(doc: _Doc) -> Dict[str, Any]:
    return doc.model_dump(by_alias=True)


def design_json_schema() -> Dict[str, Any]:
    """JSON Schema of the serialized design document, camelCase keys."""
    return DesignDoc.model_json_schema(by_alias=True)
