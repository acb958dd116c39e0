"""Pydantic models for URL recipe extraction."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParsedAmount(BaseModel):
    """A numeric quantity with an optional unit, as parsed from text."""

    model_config = ConfigDict(frozen=True)

    value: float = 1.0
    unit: Optional[str] = None
    original: str = ""


class AmountRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class ExtractedIngredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    amount: Optional[str] = None
    unit: Optional[str] = None


class ExtractedInstruction(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: str


class ExtractedRecipe(BaseModel):
    """A normalized recipe extracted from a web page.

    Serialized with camelCase keys; absent fields are omitted by
    ``to_response``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: Optional[str] = None
    prep_time: Optional[int] = Field(None, alias="prepTime")
    cook_time: Optional[int] = Field(None, alias="cookTime")
    total_time: Optional[int] = Field(None, alias="totalTime")
    servings: Optional[int] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    ingredients: List[ExtractedIngredient] = Field(default_factory=list)
    instructions: List[ExtractedInstruction] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("recipe name must not be empty")
        return value

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ParseResult(BaseModel):
    """Result of a recipe extraction attempt."""

    success: bool
    recipe: Optional[ExtractedRecipe] = None
    parser_strategy: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)
    error_code: Optional[str] = None
    error_message: Optional[str] = None
