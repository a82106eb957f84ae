"""
Ingredient Categorization
Maps free-text ingredient names to grocery aisle categories.

Matching rules:
1. Exact key match on the lower-cased, trimmed name
2. Otherwise the first table key where either string contains the other
3. Otherwise "other"

Table order matters for names containing several known keys:
"chicken broth" is meat because "chicken" is declared before "broth".
"""

from typing import Dict

from models.grocery_list import GroceryCategory


INGREDIENT_CATEGORIES: Dict[str, GroceryCategory] = {
    # Produce
    "apple": GroceryCategory.produce,
    "banana": GroceryCategory.produce,
    "orange": GroceryCategory.produce,
    "lemon": GroceryCategory.produce,
    "lime": GroceryCategory.produce,
    "onion": GroceryCategory.produce,
    "garlic": GroceryCategory.produce,
    "tomato": GroceryCategory.produce,
    "potato": GroceryCategory.produce,
    "carrot": GroceryCategory.produce,
    "celery": GroceryCategory.produce,
    "bell pepper": GroceryCategory.produce,
    "mushroom": GroceryCategory.produce,
    "spinach": GroceryCategory.produce,
    "lettuce": GroceryCategory.produce,
    "cucumber": GroceryCategory.produce,
    "avocado": GroceryCategory.produce,
    "broccoli": GroceryCategory.produce,
    "cauliflower": GroceryCategory.produce,
    "zucchini": GroceryCategory.produce,
    "ginger": GroceryCategory.produce,
    "herbs": GroceryCategory.produce,
    "parsley": GroceryCategory.produce,
    "cilantro": GroceryCategory.produce,
    "basil": GroceryCategory.produce,
    "mint": GroceryCategory.produce,

    # Dairy
    "milk": GroceryCategory.dairy,
    "butter": GroceryCategory.dairy,
    "cheese": GroceryCategory.dairy,
    "cream": GroceryCategory.dairy,
    "yogurt": GroceryCategory.dairy,
    "sour cream": GroceryCategory.dairy,
    "cottage cheese": GroceryCategory.dairy,
    "cream cheese": GroceryCategory.dairy,
    "mozzarella": GroceryCategory.dairy,
    "cheddar": GroceryCategory.dairy,
    "parmesan": GroceryCategory.dairy,
    "eggs": GroceryCategory.dairy,

    # Meat
    "chicken": GroceryCategory.meat,
    "beef": GroceryCategory.meat,
    "pork": GroceryCategory.meat,
    "turkey": GroceryCategory.meat,
    "lamb": GroceryCategory.meat,
    "bacon": GroceryCategory.meat,
    "sausage": GroceryCategory.meat,
    "ham": GroceryCategory.meat,
    "ground beef": GroceryCategory.meat,
    "ground turkey": GroceryCategory.meat,
    "ground chicken": GroceryCategory.meat,

    # Seafood
    "salmon": GroceryCategory.seafood,
    "tuna": GroceryCategory.seafood,
    "shrimp": GroceryCategory.seafood,
    "cod": GroceryCategory.seafood,
    "tilapia": GroceryCategory.seafood,
    "crab": GroceryCategory.seafood,
    "lobster": GroceryCategory.seafood,
    "scallops": GroceryCategory.seafood,
    "mussels": GroceryCategory.seafood,

    # Pantry
    "flour": GroceryCategory.pantry,
    "sugar": GroceryCategory.pantry,
    "brown sugar": GroceryCategory.pantry,
    "rice": GroceryCategory.pantry,
    "pasta": GroceryCategory.pantry,
    "oats": GroceryCategory.pantry,
    "quinoa": GroceryCategory.pantry,
    "beans": GroceryCategory.pantry,
    "lentils": GroceryCategory.pantry,
    "chickpeas": GroceryCategory.pantry,
    "black beans": GroceryCategory.pantry,
    "kidney beans": GroceryCategory.pantry,
    "canned tomatoes": GroceryCategory.pantry,
    "tomato sauce": GroceryCategory.pantry,
    "tomato paste": GroceryCategory.pantry,
    "broth": GroceryCategory.pantry,
    "stock": GroceryCategory.pantry,
    "coconut milk": GroceryCategory.pantry,
    "nuts": GroceryCategory.pantry,
    "almonds": GroceryCategory.pantry,
    "walnuts": GroceryCategory.pantry,
    "pecans": GroceryCategory.pantry,
    "peanuts": GroceryCategory.pantry,
    "seeds": GroceryCategory.pantry,

    # Spices
    "salt": GroceryCategory.spices,
    "pepper": GroceryCategory.spices,
    "black pepper": GroceryCategory.spices,
    "paprika": GroceryCategory.spices,
    "cumin": GroceryCategory.spices,
    "oregano": GroceryCategory.spices,
    "thyme": GroceryCategory.spices,
    "rosemary": GroceryCategory.spices,
    "sage": GroceryCategory.spices,
    "cinnamon": GroceryCategory.spices,
    "nutmeg": GroceryCategory.spices,
    "garam masala": GroceryCategory.spices,
    "curry powder": GroceryCategory.spices,
    "chili powder": GroceryCategory.spices,
    "red pepper flakes": GroceryCategory.spices,
    "garlic powder": GroceryCategory.spices,
    "onion powder": GroceryCategory.spices,
    "bay leaves": GroceryCategory.spices,

    # Condiments
    "olive oil": GroceryCategory.condiments,
    "vegetable oil": GroceryCategory.condiments,
    "coconut oil": GroceryCategory.condiments,
    "vinegar": GroceryCategory.condiments,
    "balsamic vinegar": GroceryCategory.condiments,
    "apple cider vinegar": GroceryCategory.condiments,
    "soy sauce": GroceryCategory.condiments,
    "worcestershire sauce": GroceryCategory.condiments,
    "hot sauce": GroceryCategory.condiments,
    "mustard": GroceryCategory.condiments,
    "ketchup": GroceryCategory.condiments,
    "mayonnaise": GroceryCategory.condiments,
    "honey": GroceryCategory.condiments,
    "maple syrup": GroceryCategory.condiments,
    "vanilla extract": GroceryCategory.condiments,
    "lemon juice": GroceryCategory.condiments,
    "lime juice": GroceryCategory.condiments,

    # Frozen
    "frozen vegetables": GroceryCategory.frozen,
    "frozen fruit": GroceryCategory.frozen,
    "ice cream": GroceryCategory.frozen,
    "frozen pizza": GroceryCategory.frozen,

    # Bakery
    "bread": GroceryCategory.bakery,
    "rolls": GroceryCategory.bakery,
    "bagels": GroceryCategory.bakery,
    "tortillas": GroceryCategory.bakery,
    "pita bread": GroceryCategory.bakery,

    # Beverages
    "water": GroceryCategory.beverages,
    "juice": GroceryCategory.beverages,
    "coffee": GroceryCategory.beverages,
    "tea": GroceryCategory.beverages,
    "soda": GroceryCategory.beverages,
    "wine": GroceryCategory.beverages,
    "beer": GroceryCategory.beverages,
}


def categorize_ingredient(ingredient_name: str) -> GroceryCategory:
    """
    Categorize ingredient using the lookup table.

    Args:
        ingredient_name: Ingredient name as written, any casing

    Returns:
        Matching category, GroceryCategory.other if nothing matches
    """
    ingredient_lower = (ingredient_name or "").lower().strip()
    if not ingredient_lower:
        return GroceryCategory.other

    if ingredient_lower in INGREDIENT_CATEGORIES:
        return INGREDIENT_CATEGORIES[ingredient_lower]

    for keyword, category in INGREDIENT_CATEGORIES.items():
        if keyword in ingredient_lower or ingredient_lower in keyword:
            return category

    return GroceryCategory.other
