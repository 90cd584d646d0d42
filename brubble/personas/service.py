from brubble.config import Settings
from brubble.personas.schemas import (
    Persona,
    PersonaAttributes,
    PersonaCategory,
    PlatformInfo,
    PoliticalLeaning,
)

DEFAULT_PERSONAS: list[Persona] = [
    Persona(
        id="progressive",
        name="Progressive",
        category=PersonaCategory.political,
        attributes=PersonaAttributes(political_leaning=PoliticalLeaning.progressive),
        color="#3B82F6",
    ),
    Persona(
        id="conservative",
        name="Conservative",
        category=PersonaCategory.political,
        attributes=PersonaAttributes(political_leaning=PoliticalLeaning.conservative),
        color="#EF4444",
    ),
    Persona(
        id="centrist",
        name="Centrist",
        category=PersonaCategory.political,
        attributes=PersonaAttributes(political_leaning=PoliticalLeaning.centrist),
        color="#8B5CF6",
    ),
    Persona(
        id="gen_z",
        name="Gen Z",
        category=PersonaCategory.generational,
        attributes=PersonaAttributes(age="18-25"),
        color="#10B981",
    ),
    Persona(
        id="millennial",
        name="Millennial",
        category=PersonaCategory.generational,
        attributes=PersonaAttributes(age="26-40"),
        color="#F59E0B",
    ),
    Persona(
        id="gen_x_plus",
        name="Gen X+",
        category=PersonaCategory.generational,
        attributes=PersonaAttributes(age="40+"),
        color="#6366F1",
    ),
    Persona(
        id="urban_us",
        name="Urban US",
        category=PersonaCategory.geographic,
        attributes=PersonaAttributes(location="US Urban"),
        color="#EC4899",
    ),
    Persona(
        id="rural_us",
        name="Rural US",
        category=PersonaCategory.geographic,
        attributes=PersonaAttributes(location="US Rural"),
        color="#84CC16",
    ),
    Persona(
        id="european",
        name="European",
        category=PersonaCategory.geographic,
        attributes=PersonaAttributes(location="Europe"),
        color="#06B6D4",
    ),
]


class PersonaService:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def list_personas(self) -> list[Persona]:
        return list(DEFAULT_PERSONAS)

    def list_platforms(self) -> list[PlatformInfo]:
        """Platforms shown in the UI, enabled when their credentials are present."""
        s = self._settings
        return [
            PlatformInfo(
                id="google",
                name="Google Search",
                icon="🔍",
                enabled=bool(s.google_api_key and s.google_search_engine_id),
            ),
            PlatformInfo(
                id="youtube", name="YouTube", icon="📹", enabled=bool(s.youtube_api_key)
            ),
            PlatformInfo(id="reddit", name="Reddit", icon="💬", enabled=True),
            PlatformInfo(id="news", name="News", icon="📰", enabled=True),
            PlatformInfo(
                id="twitter", name="Twitter/X", icon="🐦", enabled=bool(s.twitter_bearer_token)
            ),
        ]
