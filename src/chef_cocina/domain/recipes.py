"""Domain models for recipes detected in assistant replies."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RecipeDraft:
    """Recipe parsed from a single assistant reply."""

    title: str
    ingredients: list[str] = field(default_factory=list)
    steps: list[str] = field(default_factory=list)
