"""
Static seed data for the in-memory catalog.

The store is populated from these records at startup when
``settings.seed_on_startup`` is enabled. Identifiers are fixed so clients
and tests can reference them directly.
"""

from __future__ import annotations

from .models import Category, Product, Review

KITCHEN_ID = "c01b1ff4-f894-4ef2-b27a-22aacc2fca70"
GARDEN_ID = "34115aac-0ff5-4859-8f43-10e8db23602b"
SPORTS_ID = "d914aec0-25b2-4103-9ed8-225d39018d1d"

CATEGORIES: list[dict] = [
    {"id": KITCHEN_ID, "name": "Kitchen"},
    {"id": GARDEN_ID, "name": "Garden"},
    {"id": SPORTS_ID, "name": "Sports"},
]

PRODUCTS: list[dict] = [
    {
        "id": "53a0724c-a416-4cac-ae45-bfaedce1f147",
        "name": "Steel Pot",
        "description": "Silver steel pot that is perfect for cooking",
        "quantity": 230,
        "price": 42.44,
        "on_sale": False,
        "image": "img-1",
        "category_id": KITCHEN_ID,
    },
    {
        "id": "c2af9adc-d0b8-4d44-871f-cef66f86f7f6",
        "name": "Salad Bowl",
        "description": "Round wooden bowl perfect for tossing and making salads",
        "quantity": 33,
        "price": 53.5,
        "on_sale": True,
        "image": "img-2",
        "category_id": KITCHEN_ID,
    },
    {
        "id": "2c931e7e-510f-49e5-aed6-d6b44087e5a1",
        "name": "Spoon",
        "description": "Small and delicate spoon",
        "quantity": 4266,
        "price": 1.33,
        "on_sale": False,
        "image": "img-3",
        "category_id": KITCHEN_ID,
    },
    {
        "id": "b6a4c5c9-9f1e-4a3d-8c1b-4f2e7d0a9b31",
        "name": "Shovel",
        "description": "Grey rounded shovel for digging",
        "quantity": 753,
        "price": 332.0,
        "on_sale": False,
        "image": "img-4",
        "category_id": GARDEN_ID,
    },
    {
        "id": "e1f0d62a-3b47-4c8e-9a55-7d2c61b0f8e4",
        "name": "Fertilizer",
        "description": "Nitrogen based fertilizer",
        "quantity": 53453,
        "price": 23.11,
        "on_sale": True,
        "image": "img-5",
        "category_id": GARDEN_ID,
    },
    {
        "id": "404daf2a-9b97-4b99-b9af-614d07f818d7",
        "name": "Basketball",
        "description": "Outdoor basketball",
        "quantity": 3424,
        "price": 59.99,
        "on_sale": True,
        "image": "img-6",
        "category_id": SPORTS_ID,
    },
    {
        "id": "7f4c2e1b-6a8d-4b0e-92f3-5c1d8e7a6b40",
        "name": "Golf Clubs",
        "description": "Good for golfing",
        "quantity": 3,
        "price": 427.0,
        "on_sale": False,
        "image": "img-7",
        "category_id": SPORTS_ID,
    },
    {
        "id": "f9a3b8d2-1c5e-4e7f-a0b6-2d8c4e6f1a73",
        "name": "Baseball Gloves",
        "description": "Professional catcher gloves",
        "quantity": 745,
        "price": 51.77,
        "on_sale": True,
        "image": "img-8",
        "category_id": SPORTS_ID,
    },
    {
        "id": "0d6e8f2a-4b9c-4a1d-b3e5-9c7f1a2b8d64",
        "name": "Soccer Ball",
        "description": "Round ball",
        "quantity": 734,
        "price": 93.44,
        "on_sale": False,
        "image": "img-9",
        "category_id": SPORTS_ID,
    },
]

REVIEWS: list[dict] = [
    {
        "id": "6a9b5d2f-8c1e-4f3a-9b7d-0e2c4a6f8b11",
        "date": "2021-01-01",
        "title": "This is bad",
        "comment": "when i bought this it broke the stove",
        "rating": 5,
        "product_id": "53a0724c-a416-4cac-ae45-bfaedce1f147",
    },
    {
        "id": "3e7c1a9d-5b2f-4d8e-a6c0-1f4b7d9e2a35",
        "date": "2021-02-11",
        "title": "Heavy but solid",
        "comment": "Takes a while to heat up, cooks evenly",
        "rating": 4,
        "product_id": "53a0724c-a416-4cac-ae45-bfaedce1f147",
    },
    {
        "id": "9c2e4f6a-1d3b-4e5c-8a7f-6b0d2c4e8f52",
        "date": "2021-03-04",
        "title": "Fine for salads",
        "comment": "Does the job, nothing special",
        "rating": 3,
        "product_id": "c2af9adc-d0b8-4d44-871f-cef66f86f7f6",
    },
    {
        "id": "1b3d5f7a-9c2e-4a6b-8d0f-3e5a7c9b1d63",
        "date": "2021-03-15",
        "title": "Bent on day one",
        "comment": "Too thin for ice cream",
        "rating": 2,
        "product_id": "2c931e7e-510f-49e5-aed6-d6b44087e5a1",
    },
    {
        "id": "5d7f9b1c-3e5a-4c8d-a2f4-6b8d0e2a4c74",
        "date": "2021-04-02",
        "title": "Useless",
        "comment": "Lost it in the drawer",
        "rating": 1,
        "product_id": "2c931e7e-510f-49e5-aed6-d6b44087e5a1",
    },
    {
        "id": "8f0b2d4e-6a8c-4e1f-b3d5-7a9c1e3f5b85",
        "date": "2021-04-20",
        "title": "Digs well",
        "comment": "Sturdy handle",
        "rating": 5,
        "product_id": "b6a4c5c9-9f1e-4a3d-8c1b-4f2e7d0a9b31",
    },
    {
        "id": "2a4c6e8f-0b2d-4f5a-9c7e-1d3f5b7a9c96",
        "date": "2021-05-09",
        "title": "Great grip",
        "comment": "Holds air for weeks",
        "rating": 5,
        "product_id": "404daf2a-9b97-4b99-b9af-614d07f818d7",
    },
    {
        "id": "4c6e8a0b-2d4f-4a7c-8e9a-3f5b7d9c1ea7",
        "date": "2021-05-28",
        "title": "Good bounce",
        "comment": "Surface wears on asphalt",
        "rating": 4,
        "product_id": "404daf2a-9b97-4b99-b9af-614d07f818d7",
    },
    {
        "id": "7e9a1c3d-5f7b-4d0e-a2c4-6e8a0c2e4fb8",
        "date": "2021-06-13",
        "title": "Improved my swing",
        "comment": "Pricey but worth it",
        "rating": 4,
        "product_id": "7f4c2e1b-6a8d-4b0e-92f3-5c1d8e7a6b40",
    },
    {
        "id": "0a2c4e6b-8d0f-4b3a-9e5c-7a9c1e3b5dc9",
        "date": "2021-07-01",
        "title": "Stiff leather",
        "comment": "Needs a long break-in",
        "rating": 2,
        "product_id": "f9a3b8d2-1c5e-4e7f-a0b6-2d8c4e6f1a73",
    },
    {
        "id": "c3e5a7b9-1d3f-4c6e-8a0b-2c4e6a8c0eda",
        "date": "2021-07-19",
        "title": "Kids love it",
        "comment": "Solid stitching",
        "rating": 5,
        "product_id": "0d6e8f2a-4b9c-4a1d-b3e5-9c7f1a2b8d64",
    },
    {
        "id": "e5a7c9d1-3f5b-4e8a-a0c2-4e6a8c0e2feb",
        "date": "2021-08-08",
        "title": "Loses pressure",
        "comment": "Needs pumping before every game",
        "rating": 3,
        "product_id": "0d6e8f2a-4b9c-4a1d-b3e5-9c7f1a2b8d64",
    },
]


def seed_categories() -> list[Category]:
    return [Category(**row) for row in CATEGORIES]


def seed_products() -> list[Product]:
    return [Product(**row) for row in PRODUCTS]


def seed_reviews() -> list[Review]:
    return [Review(**row) for row in REVIEWS]
