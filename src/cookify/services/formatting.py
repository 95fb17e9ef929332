"""Display helpers for nutrient values and text."""


def format_nutrient(amount: float, unit: str) -> str:
    """Round to one decimal and append the unit, e.g. ``12.3g``."""
    rounded = round(amount * 10) / 10
    if rounded.is_integer():
        return f"{int(rounded)}{unit}"
    return f"{rounded}{unit}"


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
