"""Recipe detection in assistant replies and forwarding to the parent page.

Replies are free text produced by the model, so extraction is heuristic:
it looks for an ingredients section followed by a steps section and pulls a
title from the usual "te sugiero un ..." phrasing. Anything it cannot parse
is treated as "no recipe".
"""

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from chef_cocina.domain.recipes import RecipeDraft
from chef_cocina.persona import DEFAULT_RECIPE_TITLE

logger = logging.getLogger(__name__)

NEW_RECIPE_MESSAGE_TYPE = "NEW_RECIPE"
MIN_STEP_LENGTH = 6

_EMOJI = (
    "\U0001f000-\U0001faff"
    "\u2600-\u27bf"
    "\u2b00-\u2bff"
    "\ufe0f\u200d"
)
_EMOJI_RE = re.compile(f"[{_EMOJI}]+")

_INGREDIENT_MARKERS = ("ingredientes:", "ingredients:")
_STEP_MARKERS = ("pasos:", "instrucciones:", "steps:", "instructions:")

_SUGGESTION_TITLE_RE = re.compile(
    r"(?:te propongo|te sugiero|te recomiendo|i suggest|i recommend)"
    r"\s+(?:una?|an?)\s+(.*?)\s*(?:[,.!]|$)",
    re.IGNORECASE | re.MULTILINE,
)
_DISH_TITLE_RE = re.compile(
    r"(?:receta de|plato de|deliciosa?|delicioso|recipe (?:of|for)|dish of)"
    r"\s+(.*?)\s*(?:[,.!]|$)",
    re.IGNORECASE | re.MULTILINE,
)
_LINE_PREFIX_RE = re.compile(r"^(?:receta|plato|recipe|dish)\s*[:\-]?\s*", re.IGNORECASE)
_INGREDIENTS_BLOCK_RE = re.compile(
    r"(?:ingredientes|ingredients)\s*:[*\s]*(.*?)\n[ \t*#]*"
    r"(?:pasos|instrucciones|steps|instructions)\s*:",
    re.IGNORECASE | re.DOTALL,
)
_STEPS_BLOCK_RE = re.compile(
    r"(?:pasos|instrucciones|steps|instructions)\s*:[*]*(.*)",
    re.IGNORECASE | re.DOTALL,
)
_BULLET_RE = re.compile(f"^(?:[-•*·]|[{_EMOJI}]+)\\s*")
_NUMBERED_ITEM_RE = re.compile(r"\n\s*\d+\.\s*")


def extract_recipe(text: str) -> RecipeDraft | None:
    """Return the recipe found in an assistant reply, if any."""
    try:
        lowered = text.lower()
        if not any(marker in lowered for marker in _INGREDIENT_MARKERS):
            return None
        if not any(marker in lowered for marker in _STEP_MARKERS):
            return None
        ingredients = extract_ingredients(text)
        if not ingredients:
            return None
        return RecipeDraft(
            title=extract_title(text),
            ingredients=ingredients,
            steps=extract_steps(text),
        )
    except Exception:
        logger.exception("Recipe extraction failed")
        return None


def extract_title(text: str) -> str:
    """Pick a recipe title from the reply text."""
    for pattern in (_SUGGESTION_TITLE_RE, _DISH_TITLE_RE):
        match = pattern.search(text)
        if match:
            title = _clean_title(match.group(1))
            if title:
                return title

    for line in text.splitlines():
        if not line.strip():
            continue
        title = _clean_title(_LINE_PREFIX_RE.sub("", line.strip()))
        if title:
            return title
        break
    return DEFAULT_RECIPE_TITLE


def extract_ingredients(text: str) -> list[str]:
    """Return ingredient lines between the ingredients and steps headings."""
    match = _INGREDIENTS_BLOCK_RE.search(text)
    if not match:
        return []
    ingredients = []
    for raw_line in match.group(1).splitlines():
        line = _BULLET_RE.sub("", raw_line.strip()).strip()
        if not line or line.lower().rstrip(":") in {"ingredientes", "ingredients"}:
            continue
        ingredients.append(line)
    return ingredients


def extract_steps(text: str) -> list[str]:
    """Return the numbered steps after the steps heading."""
    match = _STEPS_BLOCK_RE.search(text)
    if not match:
        return []
    chunks = _NUMBERED_ITEM_RE.split("\n" + match.group(1).strip())
    steps = [chunk.strip() for chunk in chunks]
    return [step for step in steps if len(step) >= MIN_STEP_LENGTH]


def _clean_title(raw: str) -> str:
    title = _EMOJI_RE.sub("", raw)
    title = title.replace("¡", "").replace("!", "").strip(" *:-")
    return title[:1].upper() + title[1:]


class RecipeOutputPort(Protocol):
    """One-way channel to the page embedding the chat."""

    async def send(self, message: dict[str, object]) -> None:
        """Deliver a message; no reply is expected."""


@dataclass
class RecipeNotifier:
    """Forwards detected recipes to the embedding page."""

    port: RecipeOutputPort

    async def notify(self, draft: RecipeDraft) -> None:
        """Send the recipe, logging and dropping any delivery failure."""
        message = recipe_message(draft)
        try:
            await self.port.send(message)
        except Exception:
            logger.exception("Failed to forward recipe", extra={"title": draft.title})


def recipe_message(draft: RecipeDraft) -> dict[str, object]:
    """Serialize a recipe into the tagged message the parent page expects."""
    return {
        "type": NEW_RECIPE_MESSAGE_TYPE,
        "data": {
            "title": draft.title,
            "ingredients": list(draft.ingredients),
            "steps": list(draft.steps),
        },
    }


@dataclass
class RecipeService:
    """Runs recipe detection over replies and notifies on a hit."""

    notifier: RecipeNotifier

    async def process_reply(self, text: str) -> RecipeDraft | None:
        """Extract a recipe from the reply and forward it when found."""
        draft = extract_recipe(text)
        if draft is None:
            logger.info("No structured recipe detected in reply")
            return None
        logger.info(
            "Recipe detected",
            extra={"title": draft.title, "ingredients": len(draft.ingredients)},
        )
        await self.notifier.notify(draft)
        return draft
