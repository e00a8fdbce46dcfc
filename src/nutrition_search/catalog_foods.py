"""Base table for the local food catalog (macros per 100g)."""

from nutrition_search.domain.catalog import BaseFood, CookingMethod, FoodCategory

_P = FoodCategory.PROTEIN
_C = FoodCategory.CARB
_F = FoodCategory.FAT
_FR = FoodCategory.FRUIT
_V = FoodCategory.VEG
_D = FoodCategory.DAIRY
_S = FoodCategory.SNACK
_DR = FoodCategory.DRINK

COOKING_METHODS: tuple[CookingMethod, ...] = (
    CookingMethod("Grilled", 1.0, 1.0, 1.0, 0),
    CookingMethod("Fried", 1.4, 1.0, 1.1, 12),
    CookingMethod("Breaded", 1.5, 1.0, 1.3, 10),
    CookingMethod("Roasted", 1.1, 1.0, 1.0, 3),
    CookingMethod("Boiled", 0.9, 0.95, 0.95, 0),
    CookingMethod("Steamed", 0.95, 1.0, 1.0, 0),
    CookingMethod("Sautéed", 1.15, 1.0, 1.0, 5),
    CookingMethod("Baked", 1.0, 1.0, 1.0, 0),
    CookingMethod("Raw", 1.0, 1.0, 1.0, 0),
)

# Base names that never get a "Raw" variant.
NO_RAW_VARIANT = ("Chicken", "Turkey", "Pork")

BASE_FOODS: tuple[BaseFood, ...] = (
    # Meat and poultry
    BaseFood("Chicken Breast", 165, 31, 0, 3.6, _P, variations=True),
    BaseFood("Chicken Thigh", 209, 26, 0, 10.9, _P, variations=True),
    BaseFood("Chicken Wing", 203, 20, 0, 13, _P, True, 40, "wing"),
    BaseFood("Chicken Drumstick", 160, 18, 0, 9, _P, True, 80, "drumstick"),
    BaseFood("Ground Chicken", 180, 25, 0, 9, _P, variations=True),
    BaseFood("Turkey Breast", 135, 30, 0, 1, _P, variations=True),
    BaseFood("Ground Turkey", 150, 22, 0, 8, _P, variations=True),
    BaseFood("Beef Steak (Sirloin)", 250, 26, 0, 15, _P, variations=True),
    BaseFood("Beef Steak (Ribeye)", 290, 24, 0, 22, _P, variations=True),
    BaseFood("Ground Beef (80/20)", 254, 17, 0, 20, _P, variations=True),
    BaseFood("Ground Beef (90/10)", 176, 20, 0, 10, _P, variations=True),
    BaseFood("Pork Chop", 231, 24, 0, 14, _P, variations=True),
    BaseFood("Pork Loin", 242, 27, 0, 14, _P, variations=True),
    BaseFood("Bacon", 541, 37, 1.4, 42, _P, portion=15, unit="slice"),
    BaseFood("Lamb Chop", 294, 25, 0, 21, _P, variations=True),
    BaseFood("Duck Breast", 337, 19, 0, 28, _P, variations=True),
    BaseFood("Venison", 158, 30, 0, 3, _P, variations=True),
    # Seafood
    BaseFood("Salmon", 208, 20, 0, 13, _P, variations=True),
    BaseFood("Tuna Steak", 130, 28, 0, 1, _P, variations=True),
    BaseFood("Cod", 82, 18, 0, 0.7, _P, variations=True),
    BaseFood("Tilapia", 96, 20, 0, 1.7, _P, variations=True),
    BaseFood("Shrimp", 99, 24, 0.2, 0.3, _P, variations=True),
    BaseFood("Lobster", 89, 19, 0, 0.9, _P, variations=True),
    BaseFood("Crab", 83, 18, 0, 0.7, _P, variations=True),
    BaseFood("Scallops", 111, 20, 5, 0.8, _P, variations=True),
    BaseFood("Sardines", 208, 25, 0, 11, _P),
    BaseFood("Canned Tuna (Water)", 116, 26, 0, 1, _P, portion=165, unit="can"),
    # Eggs and dairy
    BaseFood("Egg (Whole)", 143, 13, 0.7, 9.5, _P, True, 50, "egg"),
    BaseFood("Egg White", 52, 11, 0.7, 0.2, _P, portion=33, unit="white"),
    BaseFood("Egg Yolk", 322, 16, 3.6, 26, _F, portion=17, unit="yolk"),
    BaseFood("Milk (Whole)", 60, 3.2, 4.8, 3.3, _D, portion=244, unit="cup"),
    BaseFood("Milk (2%)", 50, 3.3, 4.8, 2, _D, portion=244, unit="cup"),
    BaseFood("Milk (Skim)", 34, 3.4, 5, 0.1, _D, portion=244, unit="cup"),
    BaseFood(
        "Almond Milk (Unsweetened)", 13, 0.4, 0.6, 1.1, _D, portion=244, unit="cup"
    ),
    BaseFood("Oat Milk", 50, 1, 8, 2, _D, portion=244, unit="cup"),
    BaseFood("Soy Milk", 54, 3.3, 6, 1.8, _D, portion=244, unit="cup"),
    BaseFood("Greek Yogurt (Plain)", 59, 10, 3.6, 0.4, _D, portion=170, unit="cup"),
    BaseFood("Cottage Cheese", 98, 11, 3.4, 4.3, _D, portion=226, unit="cup"),
    BaseFood("Cheddar Cheese", 403, 25, 1.3, 33, _F, portion=28, unit="slice"),
    BaseFood("Mozzarella", 300, 22, 2.2, 22, _F, portion=28, unit="oz"),
    BaseFood("Parmesan", 431, 38, 4.1, 29, _F, portion=5, unit="tbsp"),
    BaseFood("Feta", 264, 14, 4, 21, _F, portion=28, unit="oz"),
    BaseFood("Butter", 717, 0.9, 0.1, 81, _F, portion=14, unit="tbsp"),
    BaseFood("Heavy Cream", 340, 2.8, 2.7, 36, _F, portion=15, unit="tbsp"),
    # Plant protein
    BaseFood("Tofu (Firm)", 144, 17, 3, 9, _P, variations=True),
    BaseFood("Tofu (Silken)", 62, 7, 2, 3, _P),
    BaseFood("Tempeh", 192, 20, 8, 11, _P, variations=True),
    BaseFood("Seitan", 370, 75, 14, 2, _P, variations=True),
    BaseFood("Edamame", 121, 12, 9, 5, _P),
    BaseFood("Black Beans", 132, 9, 24, 0.5, _C, portion=172, unit="cup"),
    BaseFood("Kidney Beans", 127, 9, 23, 0.5, _C, portion=177, unit="cup"),
    BaseFood("Chickpeas", 164, 9, 27, 2.6, _C, portion=164, unit="cup"),
    BaseFood("Lentils", 116, 9, 20, 0.4, _C, portion=198, unit="cup"),
    BaseFood("Hummus", 166, 8, 14, 10, _F, portion=15, unit="tbsp"),
    # Vegetables
    BaseFood("Broccoli", 34, 2.8, 7, 0.4, _V, variations=True),
    BaseFood("Cauliflower", 25, 1.9, 5, 0.3, _V, variations=True),
    BaseFood("Spinach", 23, 2.9, 3.6, 0.4, _V, variations=True),
    BaseFood("Kale", 49, 4.3, 8.8, 0.9, _V, variations=True),
    BaseFood("Asparagus", 20, 2.2, 3.9, 0.1, _V, variations=True),
    BaseFood("Green Beans", 31, 1.8, 7, 0.2, _V, variations=True),
    BaseFood("Brussels Sprouts", 43, 3.4, 9, 0.3, _V, variations=True),
    BaseFood("Carrot", 41, 0.9, 10, 0.2, _V, variations=True),
    BaseFood("Bell Pepper", 26, 1, 6, 0.3, _V, variations=True),
    BaseFood("Cucumber", 15, 0.7, 3.6, 0.1, _V),
    BaseFood("Tomato", 18, 0.9, 3.9, 0.2, _V),
    BaseFood("Zucchini", 17, 1.2, 3.1, 0.3, _V, variations=True),
    BaseFood("Eggplant", 25, 1, 6, 0.2, _V, variations=True),
    BaseFood("Onion", 40, 1.1, 9, 0.1, _V, variations=True),
    BaseFood("Garlic", 149, 6.4, 33, 0.5, _V, portion=3, unit="clove"),
    BaseFood("Mushroom", 22, 3.1, 3.3, 0.3, _V, variations=True),
    BaseFood("Corn", 86, 3.2, 19, 1.2, _C, variations=True),
    BaseFood("Potato (White)", 77, 2, 17, 0.1, _C, variations=True),
    BaseFood("Sweet Potato", 86, 1.6, 20, 0.1, _C, variations=True),
    BaseFood("Avocado", 160, 2, 8.5, 15, _F, portion=200, unit="fruit"),
    # Fruit
    BaseFood("Apple", 52, 0.3, 14, 0.2, _FR, portion=182, unit="medium"),
    BaseFood("Banana", 89, 1.1, 23, 0.3, _FR, portion=118, unit="medium"),
    BaseFood("Orange", 47, 0.9, 12, 0.1, _FR, portion=131, unit="medium"),
    BaseFood("Strawberry", 32, 0.7, 7.7, 0.3, _FR, portion=152, unit="cup"),
    BaseFood("Blueberry", 57, 0.7, 14, 0.3, _FR, portion=148, unit="cup"),
    BaseFood("Raspberry", 52, 1.2, 12, 0.7, _FR, portion=123, unit="cup"),
    BaseFood("Blackberry", 43, 1.4, 10, 0.5, _FR, portion=144, unit="cup"),
    BaseFood("Watermelon", 30, 0.6, 8, 0.2, _FR, portion=152, unit="cup"),
    BaseFood("Pineapple", 50, 0.5, 13, 0.1, _FR, portion=165, unit="cup"),
    BaseFood("Mango", 60, 0.8, 15, 0.4, _FR, portion=336, unit="fruit"),
    BaseFood("Peach", 39, 0.9, 10, 0.3, _FR, portion=150, unit="medium"),
    BaseFood("Pear", 57, 0.4, 15, 0.1, _FR, portion=178, unit="medium"),
    BaseFood("Grapes", 69, 0.7, 18, 0.2, _FR, portion=151, unit="cup"),
    BaseFood("Kiwi", 61, 1.1, 15, 0.5, _FR, portion=69, unit="fruit"),
    BaseFood("Lemon", 29, 1.1, 9, 0.3, _FR, portion=58, unit="fruit"),
    # Grains and pasta
    BaseFood("White Rice", 130, 2.7, 28, 0.3, _C, portion=158, unit="cup"),
    BaseFood("Brown Rice", 111, 2.6, 23, 0.9, _C, portion=195, unit="cup"),
    BaseFood("Jasmine Rice", 129, 2.5, 28, 0.2, _C, portion=158, unit="cup"),
    BaseFood("Basmati Rice", 121, 3.5, 25, 0.4, _C, portion=163, unit="cup"),
    BaseFood("Quinoa", 120, 4.4, 21, 1.9, _C, portion=185, unit="cup"),
    BaseFood("Oats (Rolled)", 379, 13, 68, 6.5, _C, portion=81, unit="cup"),
    BaseFood("Pasta (Spaghetti)", 158, 6, 31, 0.9, _C, portion=140, unit="cup"),
    BaseFood("Pasta (Penne)", 157, 5.8, 31, 0.9, _C, portion=140, unit="cup"),
    BaseFood("Bread (White)", 265, 9, 49, 3.2, _C, portion=30, unit="slice"),
    BaseFood("Bread (Whole Wheat)", 247, 13, 41, 3.4, _C, portion=30, unit="slice"),
    BaseFood("Sourdough Bread", 289, 10, 56, 2, _C, portion=60, unit="slice"),
    BaseFood("Bagel", 250, 10, 49, 1.5, _C, portion=100, unit="bagel"),
    BaseFood("Tortilla (Flour)", 300, 8, 50, 7, _C, portion=50, unit="piece"),
    BaseFood("Tortilla (Corn)", 218, 6, 45, 3, _C, portion=28, unit="piece"),
    BaseFood("Couscous", 112, 3.8, 23, 0.2, _C, portion=157, unit="cup"),
    # Nuts, seeds and snacks
    BaseFood("Almonds", 579, 21, 22, 50, _S, portion=28, unit="oz"),
    BaseFood("Walnuts", 654, 15, 14, 65, _S, portion=28, unit="oz"),
    BaseFood("Peanuts", 567, 26, 16, 49, _S, portion=28, unit="oz"),
    BaseFood("Cashews", 553, 18, 30, 44, _S, portion=28, unit="oz"),
    BaseFood("Peanut Butter", 588, 25, 20, 50, _F, portion=16, unit="tbsp"),
    BaseFood("Chia Seeds", 486, 17, 42, 31, _S, portion=12, unit="tbsp"),
    BaseFood("Flax Seeds", 534, 18, 29, 42, _S, portion=10, unit="tbsp"),
    BaseFood("Popcorn (Air Popped)", 387, 13, 78, 4.5, _S, portion=8, unit="cup"),
    BaseFood("Potato Chips", 536, 7, 53, 35, _S, portion=28, unit="oz"),
    BaseFood("Dark Chocolate (70%)", 598, 8, 46, 43, _S, portion=28, unit="oz"),
    # Oils and condiments
    BaseFood("Olive Oil", 884, 0, 0, 100, _F, portion=14, unit="tbsp"),
    BaseFood("Coconut Oil", 862, 0, 0, 100, _F, portion=14, unit="tbsp"),
    BaseFood("Mayonnaise", 680, 1, 1, 75, _F, portion=14, unit="tbsp"),
    BaseFood("Ketchup", 100, 1, 26, 0, _C, portion=17, unit="tbsp"),
    BaseFood("Mustard", 66, 4, 5, 3, _S, portion=5, unit="tsp"),
    BaseFood("Soy Sauce", 53, 8, 5, 0, _S, portion=16, unit="tbsp"),
    BaseFood("Honey", 304, 0.3, 82, 0, _C, portion=21, unit="tbsp"),
    BaseFood("Maple Syrup", 260, 0, 67, 0, _C, portion=20, unit="tbsp"),
    # Beverages
    BaseFood("Coffee (Black)", 1, 0.1, 0, 0, _DR, portion=237, unit="cup"),
    BaseFood("Tea (Black)", 1, 0, 0.3, 0, _DR, portion=237, unit="cup"),
    BaseFood("Orange Juice", 45, 0.7, 10, 0.2, _DR, portion=248, unit="cup"),
    BaseFood("Apple Juice", 46, 0.1, 11, 0.1, _DR, portion=248, unit="cup"),
    BaseFood("Cola", 42, 0, 11, 0, _DR, portion=330, unit="can"),
    BaseFood("Beer", 43, 0.5, 3.6, 0, _DR, portion=355, unit="can"),
    BaseFood("Red Wine", 85, 0.1, 2.6, 0, _DR, portion=147, unit="glass"),
)
