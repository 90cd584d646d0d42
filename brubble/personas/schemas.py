from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class PersonaCategory(StrEnum):
    political = "political"
    generational = "generational"
    geographic = "geographic"


class PoliticalLeaning(StrEnum):
    progressive = "progressive"
    centrist = "centrist"
    conservative = "conservative"


class PersonaAttributes(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: str | None = None  # age bracket, e.g. "18-25"
    location: str | None = None
    political_leaning: PoliticalLeaning | None = None
    interests: list[str] = Field(default_factory=list)


class Persona(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: PersonaCategory
    attributes: PersonaAttributes = Field(default_factory=PersonaAttributes)
    color: str
    icon: str | None = None


class PlatformInfo(BaseModel):
    id: str
    name: str
    icon: str
    enabled: bool
