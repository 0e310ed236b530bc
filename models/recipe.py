"""
Recipe model - the catalog's read-only recipe record.
"""

from pydantic import BaseModel, Field


class Recipe(BaseModel):
    """
    A recipe as served by the catalog.

    Steps are ordered instructions; the hands-free navigator reads them
    aloud one at a time, so a recipe always carries at least one.
    """
    id: int
    title: str = Field(..., max_length=200)
    image: str = Field("", description="Image URL")
    time: int = Field(0, ge=0, description="Total time in minutes")
    ingredients: list[str] = Field(default_factory=list)
    steps: list[str] = Field(..., min_length=1, description="Ordered instruction steps")

    class Config:
        frozen = True

    @property
    def total_steps(self) -> int:
        return len(self.steps)
