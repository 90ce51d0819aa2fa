from __future__ import annotations

SUGGESTION_FIELDS = (
    "id, name, type, difficulty (easy/medium/hard), cookTime, rating, image, "
    "ingredients (list of strings), tags (list of strings), description"
)

CHAT_SYSTEM_PROMPT = (
    "You are Cookiepedia's baking assistant. Answer questions about cookies, "
    "desserts, ingredients and techniques. Keep answers short and practical, "
    "and say so when a question is not about food."
)


def build_suggestions_prompt(query: str, limit: int) -> str:
    """Prompt asking for ``limit`` recipe suggestions as a JSON array."""

    return (
        "You are a professional chef and recipe expert. "
        f'Suggest {limit} recipes relevant to the search query "{query}".\n\n'
        "Return ONLY a JSON array (no markdown). Each item is an object with: "
        f"{SUGGESTION_FIELDS}.\n\n"
        "Guidelines:\n"
        "- Ratings between 4.0 and 5.0, realistic cook times such as '25 minutes'.\n"
        "- 4 to 8 main ingredients and 2 to 4 tags per recipe.\n"
        "- Descriptions under 50 words.\n"
        '- Use image paths "/images/Recipe1.avif" to "/images/Recipe8.avif".\n'
    )


def build_popular_prompt(limit: int = 10) -> str:
    return (
        f"List {limit} popular cookie and dessert recipe search terms. "
        "Return ONLY a JSON array of strings, no additional text. Cover classic "
        "cookies, brownies and bars, holiday favorites and trending desserts."
    )
