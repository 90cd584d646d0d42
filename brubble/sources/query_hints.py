"""Persona-conditioned query suffixes.

Each provider has its own vocabulary, so each declares its own ``QueryHints``
table. Lookups are plain dictionary reads keyed on persona attributes.
"""

from dataclasses import dataclass, field

from brubble.personas.schemas import Persona, PersonaCategory

ANY = "*"


@dataclass(frozen=True)
class QueryHints:
    # political leaning -> suffix, ANY for leanings not listed
    political: dict[str, str] = field(default_factory=dict)
    # age bracket -> suffix, ANY for brackets not listed
    generational: dict[str, str] = field(default_factory=dict)
    # (location substring, suffix); first match wins
    geographic: tuple[tuple[str, str], ...] = ()
    # appended for every non-political persona
    non_political: str = ""

    def suffixes(self, persona: Persona) -> list[str]:
        attrs = persona.attributes
        parts: list[str] = []

        if persona.category == PersonaCategory.political:
            leaning = attrs.political_leaning.value if attrs.political_leaning else ""
            parts.append(self.political.get(leaning, self.political.get(ANY, "")))
        else:
            parts.append(self.non_political)

        if persona.category == PersonaCategory.generational:
            parts.append(self.generational.get(attrs.age or "", self.generational.get(ANY, "")))

        if persona.category == PersonaCategory.geographic and attrs.location:
            for needle, suffix in self.geographic:
                if needle in attrs.location:
                    parts.append(suffix)
                    break

        return [p for p in parts if p]

    def apply(self, query: str, persona: Persona) -> str:
        return " ".join([query, *self.suffixes(persona)])


NO_HINTS = QueryHints()

YOUTUBE_HINTS = QueryHints(
    political={
        "progressive": "progressive perspective climate",
        "conservative": "conservative perspective traditional",
        ANY: "balanced analysis",
    },
    generational={
        "18-25": "trending viral",
        "26-40": "explained analysis",
        ANY: "documentary history",
    },
)

REDDIT_HINTS = QueryHints(
    political={
        "progressive": "subreddit:politics OR subreddit:progressive",
        "conservative": "subreddit:conservative OR subreddit:republican",
        ANY: "subreddit:neutralpolitics OR subreddit:moderatepolitics",
    },
    generational={
        "18-25": "subreddit:genz",
        "26-40": "subreddit:millennials",
        ANY: "subreddit:genx",
    },
)

TWITTER_HINTS = QueryHints(
    political={
        "progressive": "(climate OR equality OR justice) -is:retweet",
        "conservative": "(traditional OR security OR freedom) -is:retweet",
        ANY: "(policy OR analysis) -is:retweet",
    },
    generational={"18-25": "lang:en"},
    non_political="-is:retweet",
)

GOOGLE_HINTS = QueryHints(
    political={
        "progressive": "progressive left-wing liberal",
        "conservative": "conservative right-wing traditional",
        ANY: "centrist moderate balanced",
    },
    geographic=(
        ("US", "site:.us OR site:america"),
        ("Europe", "site:.eu OR site:europe"),
    ),
)

NEWSAPI_HINTS = QueryHints(
    political={
        "progressive": "progressive",
        "conservative": "conservative",
    },
)
