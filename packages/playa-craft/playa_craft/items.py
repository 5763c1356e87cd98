"""Item type identifiers."""
from __future__ import annotations

ItemType = str

FOOD_AND_DRINK: frozenset[ItemType] = frozenset({
    "Water", "Grilled Cheese", "Energy Bar", "Fruit Salad", "Smoothie",
    "Popsicle", "Burrito", "Taco", "Ice Cream", "Corn Dog", "Funnel Cake",
    "Nachos", "Cotton Candy", "Beer", "Vodka",
})

LIGHT_BULBS: frozenset[ItemType] = frozenset({
    "Light Bulb", "Light Bulb White", "Light Bulb Red", "Light Bulb Green",
    "Light Bulb Blue", "Light Bulb Orange", "Light Bulb Purple",
    "Light Bulb Rainbow",
})

MATERIALS: frozenset[ItemType] = frozenset({
    "Trinket", "Clothing", "Gas Can", "Battery", "Ducting", "Bucket",
    "Zip Tie", "Glitter", "Rope", "Plastic Bag", "Furry Hat", "Boots",
    "Cat Head", "POI", "Fire Spinning",
})

CRAFTED: frozenset[ItemType] = frozenset({
    "Totem", "Swamp Cooler", "Cape", "Costume",
})

ITEM_TYPES: frozenset[ItemType] = FOOD_AND_DRINK | LIGHT_BULBS | MATERIALS | CRAFTED


def is_item_type(name: str) -> bool:
    return name in ITEM_TYPES
