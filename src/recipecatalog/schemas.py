"""Recipe snapshot schemas shared by the engine and the API."""

from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    """A single ingredient line as stored on a recipe."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    quantity: float = Field(ge=0, allow_inf_nan=False)
    unit: str
    scalable: bool = True


class Recipe(BaseModel):
    """Recipe snapshot supplied by the recipe store.

    Only the fields the shopping list and scaling code read are declared;
    the rest of the catalog record is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str = ""
    servings: float = Field(gt=0, allow_inf_nan=False)
    ingredients: list[Ingredient] = Field(default_factory=list)
