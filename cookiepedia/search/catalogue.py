# ruff: noqa: E501
"""Built-in recipe catalogue used when the LLM is unavailable."""

from __future__ import annotations

import re
from dataclasses import asdict
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Recipe:
    id: int
    name: str
    type: str
    difficulty: str
    cook_time: str
    rating: float
    image: str
    ingredients: tuple[str, ...]
    tags: tuple[str, ...]

    @property
    def minutes(self) -> int:
        match = re.match(r"\d+", self.cook_time)
        return int(match.group()) if match else 0

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["cookTime"] = data.pop("cook_time")
        data["ingredients"] = list(self.ingredients)
        data["tags"] = list(self.tags)
        data["description"] = f"Delicious {self.name.lower()} recipe"
        return data


RECIPES: tuple[Recipe, ...] = (
    Recipe(
        id=1,
        name="Classic Chocolate Chip Cookies",
        type="cookie",
        difficulty="easy",
        cook_time="25 minutes",
        rating=4.8,
        image="/images/Recipe1.avif",
        ingredients=("flour", "butter", "sugar", "chocolate chips", "eggs", "vanilla"),
        tags=("classic", "popular", "family-friendly", "sweet"),
    ),
    Recipe(
        id=2,
        name="Spicy Chocolate Chip Cookies",
        type="cookie",
        difficulty="medium",
        cook_time="30 minutes",
        rating=4.6,
        image="/images/Recipe2.avif",
        ingredients=("flour", "butter", "brown sugar", "chocolate chips", "cayenne", "cinnamon"),
        tags=("spicy", "unique", "chocolate", "bold"),
    ),
    Recipe(
        id=3,
        name="Lemon & Lavender Shortbread",
        type="shortbread",
        difficulty="medium",
        cook_time="35 minutes",
        rating=4.7,
        image="/images/Recipe3.avif",
        ingredients=("flour", "butter", "lemon zest", "lavender", "powdered sugar"),
        tags=("floral", "citrus", "elegant", "tea-time"),
    ),
    Recipe(
        id=4,
        name="Rosemary-Infused Snickerdoodles",
        type="cookie",
        difficulty="medium",
        cook_time="28 minutes",
        rating=4.5,
        image="/images/Recipe4.jpg",
        ingredients=("flour", "butter", "sugar", "cinnamon", "rosemary", "cream of tartar"),
        tags=("herb", "unique", "soft", "aromatic"),
    ),
    Recipe(
        id=5,
        name="Matcha White Chocolate Macarons",
        type="macaron",
        difficulty="hard",
        cook_time="45 minutes",
        rating=4.9,
        image="/images/Recipe5.avif",
        ingredients=("almond flour", "powdered sugar", "egg whites", "matcha powder", "white chocolate"),
        tags=("japanese", "green tea", "delicate", "sophisticated"),
    ),
    Recipe(
        id=6,
        name="Cardamom & Pistachio Biscotti",
        type="biscotti",
        difficulty="medium",
        cook_time="50 minutes",
        rating=4.4,
        image="/images/Recipe6.jpg",
        ingredients=("flour", "sugar", "eggs", "cardamom", "pistachios", "baking powder"),
        tags=("italian", "crunchy", "coffee-pairing", "nuts"),
    ),
    Recipe(
        id=7,
        name="Gingerbread People",
        type="cookie",
        difficulty="easy",
        cook_time="40 minutes",
        rating=4.6,
        image="/images/Recipe7.avif",
        ingredients=("flour", "molasses", "ginger", "cinnamon", "cloves", "butter"),
        tags=("holiday", "spiced", "decorative", "traditional"),
    ),
    Recipe(
        id=8,
        name="Classic Oatmeal Raisin",
        type="cookie",
        difficulty="easy",
        cook_time="22 minutes",
        rating=4.3,
        image="/images/Recipe8.avif",
        ingredients=("oats", "flour", "raisins", "butter", "brown sugar", "cinnamon"),
        tags=("healthy", "chewy", "breakfast", "fiber"),
    ),
    Recipe(
        id=9,
        name="Peanut Butter Blossoms",
        type="cookie",
        difficulty="easy",
        cook_time="25 minutes",
        rating=4.7,
        image="/images/Recipe1.webp",
        ingredients=("peanut butter", "flour", "sugar", "eggs", "chocolate kisses"),
        tags=("peanut butter", "chocolate", "classic", "kids-favorite"),
    ),
    Recipe(
        id=10,
        name="Salted Caramel Cookies",
        type="cookie",
        difficulty="medium",
        cook_time="32 minutes",
        rating=4.8,
        image="/images/Recipe2.webp",
        ingredients=("flour", "butter", "caramel", "sea salt", "brown sugar", "vanilla"),
        tags=("salted", "caramel", "gourmet", "sweet-salty"),
    ),
    Recipe(
        id=11,
        name="Double Chocolate Brownies",
        type="brownie",
        difficulty="easy",
        cook_time="35 minutes",
        rating=4.9,
        image="/images/Recipe3.webp",
        ingredients=("dark chocolate", "butter", "sugar", "eggs", "flour", "cocoa powder"),
        tags=("chocolate", "fudgy", "rich", "decadent"),
    ),
    Recipe(
        id=12,
        name="Vanilla Bean Macaroons",
        type="macaroon",
        difficulty="medium",
        cook_time="30 minutes",
        rating=4.5,
        image="/images/Recipe4.jpg",
        ingredients=("coconut", "egg whites", "sugar", "vanilla bean", "almond extract"),
        tags=("coconut", "vanilla", "gluten-free", "chewy"),
    ),
    Recipe(
        id=13,
        name="Cinnamon Sugar Snaps",
        type="cookie",
        difficulty="easy",
        cook_time="20 minutes",
        rating=4.4,
        image="/images/Recipe7.webp",
        ingredients=("flour", "butter", "cinnamon", "sugar", "baking soda", "cream of tartar"),
        tags=("cinnamon", "crispy", "simple", "quick"),
    ),
    Recipe(
        id=14,
        name="Almond Biscotti",
        type="biscotti",
        difficulty="medium",
        cook_time="55 minutes",
        rating=4.6,
        image="/images/Recipe8.avif",
        ingredients=("flour", "almonds", "sugar", "eggs", "baking powder", "almond extract"),
        tags=("italian", "almonds", "crunchy", "coffee"),
    ),
    Recipe(
        id=15,
        name="Lemon Bars",
        type="bar",
        difficulty="medium",
        cook_time="40 minutes",
        rating=4.7,
        image="/images/Recipe5.jpg",
        ingredients=("flour", "butter", "lemon juice", "lemon zest", "powdered sugar", "eggs"),
        tags=("citrus", "tangy", "bars", "summer"),
    ),
    Recipe(
        id=16,
        name="Snickerdoodles",
        type="cookie",
        difficulty="easy",
        cook_time="25 minutes",
        rating=4.5,
        image="/images/Recipe6.jpg",
        ingredients=("flour", "butter", "sugar", "cinnamon", "cream of tartar", "baking soda"),
        tags=("cinnamon", "soft", "classic", "comfort"),
    ),
    Recipe(
        id=17,
        name="Chocolate Crinkles",
        type="cookie",
        difficulty="easy",
        cook_time="28 minutes",
        rating=4.6,
        image="/images/Recipe1.avif",
        ingredients=("cocoa powder", "flour", "sugar", "eggs", "powdered sugar", "oil"),
        tags=("chocolate", "crackled", "festive", "soft"),
    ),
    Recipe(
        id=18,
        name="Sugar Cookies",
        type="cookie",
        difficulty="easy",
        cook_time="30 minutes",
        rating=4.4,
        image="/images/Recipe2.avif",
        ingredients=("flour", "butter", "sugar", "eggs", "vanilla", "baking powder"),
        tags=("classic", "decorative", "vanilla", "versatile"),
    ),
    Recipe(
        id=19,
        name="Thumbprint Cookies",
        type="cookie",
        difficulty="easy",
        cook_time="25 minutes",
        rating=4.5,
        image="/images/Recipe3.avif",
        ingredients=("flour", "butter", "sugar", "jam", "nuts", "vanilla"),
        tags=("jam-filled", "nuts", "colorful", "elegant"),
    ),
    Recipe(
        id=20,
        name="Molasses Cookies",
        type="cookie",
        difficulty="easy",
        cook_time="26 minutes",
        rating=4.3,
        image="/images/Recipe4.jpg",
        ingredients=("flour", "molasses", "ginger", "cinnamon", "cloves", "butter"),
        tags=("spiced", "soft", "molasses", "traditional"),
    ),
)

CATEGORIES: tuple[dict[str, Any], ...] = (
    {"name": "Cookies", "count": 45, "icon": "🍪"},
    {"name": "Brownies", "count": 12, "icon": "🍫"},
    {"name": "Macarons", "count": 8, "icon": "🧁"},
    {"name": "Biscotti", "count": 6, "icon": "🥖"},
    {"name": "Holiday Treats", "count": 15, "icon": "🎄"},
    {"name": "Gluten-Free", "count": 18, "icon": "🌾"},
    {"name": "Vegan", "count": 22, "icon": "🌱"},
    {"name": "Quick & Easy", "count": 35, "icon": "⚡"},
)


def by_category(category: str) -> list[Recipe]:
    category = category.lower()
    return [r for r in RECIPES if r.type == category or category in r.tags]


def by_difficulty(difficulty: str) -> list[Recipe]:
    difficulty = difficulty.lower()
    return [r for r in RECIPES if r.difficulty == difficulty]


def popular(limit: int = 10) -> list[Recipe]:
    return sorted(RECIPES, key=lambda r: r.rating, reverse=True)[:limit]


def quick(max_minutes: int = 30) -> list[Recipe]:
    return [r for r in RECIPES if r.minutes <= max_minutes]
