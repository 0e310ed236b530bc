"""
Seed recipe catalog.

The catalog is read-only and small enough to live in memory; RecipeService
serves it by ID and by ingredient search.
"""

from models.recipe import Recipe


SEED_RECIPES = [
    Recipe(
        id=1,
        title="Classic Spaghetti Bolognese",
        image="https://images.unsplash.com/photo-1589227365533-5f830a79a378?auto=format&fit=crop&w=1287&q=80",
        time=45,
        ingredients=["pasta", "onion", "tomato", "ground beef", "garlic"],
        steps=[
            "Heat olive oil in a large skillet over medium-high heat. Add onion and garlic; cook and stir until softened, about 5 minutes.",
            "Add ground beef and cook until browned and crumbly, 5 to 7 minutes. Drain excess grease.",
            "Stir in crushed tomatoes, tomato paste, water, sugar, basil, oregano, salt, and pepper. Bring to a simmer, then reduce heat to low, cover, and let simmer for at least 1 hour, stirring occasionally.",
            "Meanwhile, bring a large pot of lightly salted water to a boil. Cook spaghetti in the boiling water, stirring occasionally, until tender yet firm to the bite, about 12 minutes. Drain.",
            "Serve sauce over hot spaghetti.",
        ],
    ),
    Recipe(
        id=2,
        title="Tomato and Onion Bruschetta",
        image="https://images.unsplash.com/photo-1505253716362-afb74bf60d44?auto=format&fit=crop&w=1470&q=80",
        time=20,
        ingredients=["tomato", "onion", "bread", "garlic", "basil"],
        steps=[
            "Preheat your oven's broiler.",
            "Combine diced tomatoes, chopped onion, minced garlic, and fresh basil in a medium bowl.",
            "Drizzle with olive oil and season with salt and pepper to taste. Let it sit for about 10 minutes for the flavors to meld.",
            "Slice the bread into 1/2-inch thick slices. Arrange on a baking sheet.",
            "Broil for 1 to 2 minutes per side, or until lightly golden.",
            "Rub one side of each toast slice with the cut side of a garlic clove.",
            "Top the toasted bread with the tomato mixture and serve immediately.",
        ],
    ),
    Recipe(
        id=3,
        title="Simple Chicken Curry",
        image="https://images.unsplash.com/photo-1598515214211-89d3c7373094?auto=format&fit=crop&w=1319&q=80",
        time=35,
        ingredients=["chicken", "onion", "tomato", "ginger", "garlic", "curry powder"],
        steps=[
            "Heat oil in a large pot or Dutch oven over medium heat.",
            "Add chopped onion and cook until soft and translucent.",
            "Stir in minced garlic and grated ginger, and cook for another minute until fragrant.",
            "Add chicken pieces and sear on all sides.",
            "Sprinkle in curry powder, turmeric, and cumin. Stir to coat the chicken.",
            "Pour in chopped tomatoes and coconut milk. Season with salt.",
            "Bring to a simmer, then reduce heat, cover, and cook for 20-25 minutes, or until chicken is cooked through. Garnish with cilantro before serving.",
        ],
    ),
    Recipe(
        id=4,
        title="Hearty Lentil Soup",
        image="https://images.unsplash.com/photo-1623059521999-95213c3a9a5f?auto=format&fit=crop&w=1287&q=80",
        time=50,
        ingredients=["lentils", "onion", "carrot", "celery", "tomato", "garlic"],
        steps=[
            "Heat olive oil in a large pot or Dutch oven over medium heat.",
            "Add chopped onion, carrots, and celery. Cook until softened, about 5-7 minutes.",
            "Add minced garlic and cook for another minute until fragrant.",
            "Stir in rinsed lentils, diced tomatoes, vegetable broth, and dried thyme.",
            "Bring to a boil, then reduce heat and simmer for 30-40 minutes, or until lentils are tender.",
            "Season with salt and pepper to taste. For a creamier soup, you can use an immersion blender for a few seconds.",
            "Serve hot, garnished with fresh parsley.",
        ],
    ),
]
