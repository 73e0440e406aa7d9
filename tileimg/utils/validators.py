"""YAML schema validation for tileimg configuration.

Validates the configuration document (``tileimg.v1`` schema) with
pydantic before it is turned into frozen runtime dataclasses by
``tileimg.configs.loader``.

Schema (all sections optional when merged over the shipped defaults)::

    schema: tileimg.v1
    image:  {width: 200, height: 200}
    grid:   {columns: 4, rows: 4, pad: 5}
    style:  {background: white, stroke: black, fill: none, line_width: 2}

Units:
    - Sizes, padding and line width: pixels
    - Colors: names or "R,G,B" strings, resolved at render time

Usage:
    from tileimg.utils import validators
    cfg = validators.TileImgConfigV1(**raw_dict)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ImageConfig(BaseModel):
    """Output canvas size."""
    model_config = ConfigDict(extra="forbid")

    width: int = Field(200, gt=0, description="Image width (px)")
    height: int = Field(200, gt=0, description="Image height (px)")


class GridLayout(BaseModel):
    """Logical grid partition and cell padding."""
    model_config = ConfigDict(extra="forbid")

    columns: int = Field(4, gt=0, description="Tile columns")
    rows: int = Field(4, gt=0, description="Tile rows")
    pad: int = Field(5, ge=0, description="Inward cell padding (px)")


class StyleConfig(BaseModel):
    """Colors and stroke width."""
    model_config = ConfigDict(extra="forbid")

    background: str = Field("white", description="Background color")
    stroke: str = Field("black", description="Stroke color")
    fill: str = Field("none", description="Default fill color")
    line_width: float = Field(
        2.0, ge=0.0, allow_inf_nan=False, description="Stroke width (px)"
    )

    @field_validator('background', 'stroke', 'fill')
    @classmethod
    def validate_color_token(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("color must be a non-empty name or 'R,G,B' triplet")
        return v


class TileImgConfigV1(BaseModel):
    """Complete tileimg configuration (tileimg.v1 schema)."""
    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field("tileimg.v1", alias="schema")
    image: ImageConfig = Field(default_factory=ImageConfig)
    grid: GridLayout = Field(default_factory=GridLayout)
    style: StyleConfig = Field(default_factory=StyleConfig)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "tileimg.v1":
            raise ValueError(f"schema must be 'tileimg.v1', got {v}")
        return v
