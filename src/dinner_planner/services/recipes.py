"""Recipe import from web pages using JSON-LD or meta tags."""

import json
import logging
import re
from dataclasses import dataclass

import httpx
import lxml.html
from lxml import etree

from dinner_planner.adapters.recipe_page_client import RecipePageClient
from dinner_planner.domain.meals import Ingredient
from dinner_planner.domain.recipes import ParsedRecipe

_logger = logging.getLogger(__name__)

DEFAULT_COOK_TIME_MINUTES = 30
MAX_KEYWORD_TAGS = 3
MAX_TAGS = 5

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")
_NUMBER_RE = re.compile(r"(\d+(?:\.\d+)?)")
_MASS_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(mg|g)?")
_INGREDIENT_RE = re.compile(
    r"^([\d\s/½⅓⅔¼¾⅛⅜⅝⅞]+\s*(?:cups?|tbsp|tsp|oz|lb|g|kg|ml|l|teaspoons?|"
    r"tablespoons?|ounces?|pounds?|grams?|kilograms?|milliliters?|liters?)?)"
    r"\s+(.+)$",
    re.IGNORECASE,
)

_GRAM_FIELDS = {
    "protein_g": "proteinContent",
    "fat_g": "fatContent",
    "saturated_fat_g": "saturatedFatContent",
    "trans_fat_g": "transFatContent",
    "carbs_g": "carbohydrateContent",
    "fiber_g": "fiberContent",
    "sugar_g": "sugarContent",
}
_MILLIGRAM_FIELDS = {
    "sodium_mg": "sodiumContent",
    "cholesterol_mg": "cholesterolContent",
}


@dataclass
class RecipeImportService:
    """Fetches recipe pages and normalizes them into ParsedRecipe records."""

    page_client: RecipePageClient

    async def parse_url(self, url: str) -> ParsedRecipe | None:
        """Fetch and parse a recipe page, returning None on failure."""
        try:
            html = await self.page_client.fetch_html(url)
        except httpx.HTTPError as exc:
            _logger.warning("Recipe fetch failed: url=%s error=%s", url, exc)
            return None
        recipe = parse_recipe_html(html, url)
        if recipe is None:
            _logger.warning("No recipe found on page: url=%s", url)
        return recipe


def parse_recipe_html(html: str, url: str) -> ParsedRecipe | None:
    """Parse recipe data from page HTML."""
    try:
        document = lxml.html.document_fromstring(html)
    except (etree.ParserError, ValueError):
        return None
    return _parse_json_ld(document) or _parse_meta_tags(document, url)


def _parse_json_ld(document: lxml.html.HtmlElement) -> ParsedRecipe | None:
    for raw in document.xpath('//script[contains(@type, "ld+json")]/text()'):
        try:
            data = json.loads(raw)
        except ValueError:
            continue
        recipes = _find_recipes(data)
        if recipes:
            return _recipe_from_json_ld(recipes[0])
    return None


def _find_recipes(data: object) -> list[dict[str, object]]:
    """Collect Recipe objects from nested JSON-LD lists and @graph entries."""
    found: list[dict[str, object]] = []
    if isinstance(data, list):
        for item in data:
            found.extend(_find_recipes(item))
    elif isinstance(data, dict):
        kind = data.get("@type")
        if kind == "Recipe" or (isinstance(kind, list) and "Recipe" in kind):
            found.append(data)
        graph = data.get("@graph")
        if isinstance(graph, list):
            found.extend(_find_recipes(graph))
    return found


def _recipe_from_json_ld(recipe: dict[str, object]) -> ParsedRecipe:
    duration = recipe.get("totalTime") or recipe.get("cookTime") or recipe.get(
        "prepTime"
    )
    raw_ingredients = recipe.get("recipeIngredient")
    return ParsedRecipe(
        name=str(recipe.get("name") or "Untitled Recipe").strip(),
        cook_time_minutes=parse_duration(duration) or DEFAULT_COOK_TIME_MINUTES,
        ingredients=parse_ingredients(
            raw_ingredients if isinstance(raw_ingredients, list) else []
        ),
        instructions=parse_instructions(recipe.get("recipeInstructions")),
        image_url=_parse_image_url(recipe.get("image")),
        servings=_parse_servings(recipe.get("recipeYield")),
        nutrition=parse_nutrition(recipe.get("nutrition")),
        tags=_parse_tags(recipe),
        source_url=str(recipe.get("url") or ""),
    )


def parse_duration(value: object) -> int | None:
    """Convert an ISO-8601 duration (PT1H30M) or bare number to minutes."""
    if not isinstance(value, str) or not value:
        return None
    match = _DURATION_RE.search(value)
    if match and (match.group(1) or match.group(2)):
        return int(match.group(1) or 0) * 60 + int(match.group(2) or 0)
    number = re.search(r"(\d+)", value)
    if number:
        return int(number.group(1))
    return None


def parse_ingredients(lines: list[object]) -> list[Ingredient]:
    """Split leading quantities from ingredient lines."""
    ingredients = []
    for line in lines:
        if not isinstance(line, str):
            continue
        text = line.strip()
        match = _INGREDIENT_RE.match(text)
        if match:
            ingredient = Ingredient(
                name=match.group(2).strip(), quantity=match.group(1).strip()
            )
        else:
            ingredient = Ingredient(name=text)
        if ingredient.name:
            ingredients.append(ingredient)
    return ingredients


def parse_instructions(value: object) -> list[str]:
    """Flatten HowToStep/HowToSection/string instructions into unique steps."""
    steps: list[str] = []
    _walk_instructions(value, steps)
    return list(dict.fromkeys(steps))


def _walk_instructions(value: object, steps: list[str]) -> None:
    if not value:
        return
    if isinstance(value, str):
        parts = [part.strip() for part in value.splitlines() if part.strip()]
        for part in parts if len(parts) > 1 else [value]:
            _push_step(part, steps)
    elif isinstance(value, list):
        for item in value:
            _walk_instructions(item, steps)
    elif isinstance(value, dict):
        elements = value.get("itemListElement")
        if isinstance(elements, list):
            for item in elements:
                _walk_instructions(item, steps)
        text = value.get("text")
        if isinstance(text, str):
            _push_step(text, steps)
        elif isinstance(value.get("name"), str):
            _push_step(value["name"], steps)


def _push_step(text: str, steps: list[str]) -> None:
    cleaned = " ".join(text.split())
    if cleaned:
        steps.append(cleaned)


def _parse_image_url(image: object) -> str | None:
    if not image:
        return None
    if isinstance(image, str):
        return image
    if isinstance(image, list):
        for item in image:
            url = _parse_image_url(item)
            if url:
                return url
        return None
    if isinstance(image, dict):
        url = image.get("url")
        if isinstance(url, str):
            return url
        if isinstance(url, list):
            return next((item for item in url if isinstance(item, str)), None)
    return None


def _parse_servings(value: object) -> int | None:
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, int | float):
        return round(value)
    if isinstance(value, str):
        return _first_int(value)
    if isinstance(value, list):
        for item in value:
            servings = _parse_servings(item)
            if servings:
                return servings
    return None


def _first_int(text: str) -> int | None:
    match = _NUMBER_RE.search(text)
    return round(float(match.group(1))) if match else None


def parse_nutrition(value: object) -> dict[str, float] | None:
    """Extract calories and macro masses, normalizing g/mg units."""
    if not isinstance(value, dict):
        return None
    nutrition: dict[str, float] = {}
    calories = _parse_number(value.get("calories"))
    if calories is not None:
        nutrition["calories"] = round(calories)
    for key, source in _GRAM_FIELDS.items():
        grams = _parse_mass(value.get(source), target="g")
        if grams is not None:
            nutrition[key] = grams
    for key, source in _MILLIGRAM_FIELDS.items():
        milligrams = _parse_mass(value.get(source), target="mg")
        if milligrams is not None:
            nutrition[key] = milligrams
    return nutrition or None


def _parse_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        match = _NUMBER_RE.search(value)
        if match:
            return float(match.group(1))
    return None


def _parse_mass(value: object, target: str) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if not isinstance(value, str):
        return None
    match = _MASS_RE.search(value.lower())
    if not match:
        return None
    amount = float(match.group(1))
    unit = match.group(2)
    if target == "g" and unit == "mg":
        return amount / 1000
    if target == "mg" and unit == "g":
        return amount * 1000
    return amount


def _parse_tags(recipe: dict[str, object]) -> list[str]:
    tags: list[str] = []
    for key in ("recipeCuisine", "recipeCategory"):
        value = recipe.get(key)
        if isinstance(value, list):
            tags.extend(str(item).lower() for item in value)
        elif value:
            tags.append(str(value).lower())
    keywords = recipe.get("keywords")
    if isinstance(keywords, str):
        words = [word.strip().lower() for word in keywords.split(",")]
    elif isinstance(keywords, list):
        words = [str(word).lower() for word in keywords]
    else:
        words = []
    tags.extend(words[:MAX_KEYWORD_TAGS])
    return list(dict.fromkeys(tag for tag in tags if tag))[:MAX_TAGS]


def _parse_meta_tags(
    document: lxml.html.HtmlElement, url: str
) -> ParsedRecipe | None:
    title = _meta_content(document, "og:title") or " ".join(
        (document.findtext(".//title") or "").split()
    )
    if not title:
        return None
    return ParsedRecipe(
        name=title,
        cook_time_minutes=DEFAULT_COOK_TIME_MINUTES,
        ingredients=[],
        image_url=_meta_content(document, "og:image"),
        source_url=url,
    )


def _meta_content(document: lxml.html.HtmlElement, key: str) -> str | None:
    """Return a meta tag's content, matched by property or name."""
    for content in document.xpath(
        "//meta[@property=$key or @name=$key]/@content", key=key
    ):
        value = " ".join(content.split())
        if value:
            return value
    return None
