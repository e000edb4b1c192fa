"""
Tests for GraphQL query resolvers against the seed catalog
"""

import pytest

SPORTS_ID = "d914aec0-25b2-4103-9ed8-225d39018d1d"
BASKETBALL_ID = "404daf2a-9b97-4b99-b9af-614d07f818d7"
FERTILIZER_ID = "e1f0d62a-3b47-4c8e-9a55-7d2c61b0f8e4"


@pytest.mark.asyncio
async def test_hello(execute):
    result = await execute("query SayHelloWorld { hello }")

    assert result.errors is None
    assert result.data == {"hello": "Hello World!"}


@pytest.mark.asyncio
async def test_categories_names(execute):
    result = await execute("query { categories { name } }")

    assert result.errors is None
    assert result.data["categories"] == [
        {"name": "Kitchen"},
        {"name": "Garden"},
        {"name": "Sports"},
    ]


@pytest.mark.asyncio
async def test_category_by_id(execute):
    result = await execute(
        "query GetCategory($id: ID!) { category(id: $id) { id } }",
        {"id": SPORTS_ID},
    )

    assert result.errors is None
    assert result.data["category"] == {"id": SPORTS_ID}


@pytest.mark.asyncio
async def test_missing_category_and_product_are_null(execute):
    result = await execute(
        'query { category(id: "missing") { id } product(id: "missing") { id } }'
    )

    assert result.errors is None
    assert result.data == {"category": None, "product": None}


@pytest.mark.asyncio
async def test_product_by_id(execute):
    result = await execute(
        "query GetProduct($id: ID!) { product(id: $id) { id name price onSale } }",
        {"id": BASKETBALL_ID},
    )

    assert result.errors is None
    assert result.data["product"] == {
        "id": BASKETBALL_ID,
        "name": "Basketball",
        "price": 59.99,
        "onSale": True,
    }


@pytest.mark.asyncio
async def test_products_names_in_order(execute):
    result = await execute("query { products { name } }")

    assert result.errors is None
    assert [p["name"] for p in result.data["products"]] == [
        "Steel Pot",
        "Salad Bowl",
        "Spoon",
        "Shovel",
        "Fertilizer",
        "Basketball",
        "Golf Clubs",
        "Baseball Gloves",
        "Soccer Ball",
    ]


@pytest.mark.asyncio
async def test_products_filtered(execute):
    result = await execute(
        "query Filtered($filter: ProductsFilterInput) { products(filter: $filter) { name } }",
        {"filter": {"onSale": True, "avgRating": 3}},
    )

    assert result.errors is None
    assert [p["name"] for p in result.data["products"]] == ["Salad Bowl", "Basketball"]


@pytest.mark.asyncio
async def test_empty_filter_returns_everything(execute):
    result = await execute("query { products(filter: {}) { name } }")

    assert result.errors is None
    assert len(result.data["products"]) == 9


@pytest.mark.asyncio
async def test_category_products_nested_and_filtered(execute):
    result = await execute(
        """
        query Sports($id: ID!) {
          category(id: $id) {
            name
            all: products { name }
            onSale: products(filter: { onSale: true }) { name }
          }
        }
        """,
        {"id": SPORTS_ID},
    )

    assert result.errors is None
    category = result.data["category"]
    assert category["name"] == "Sports"
    assert [p["name"] for p in category["all"]] == [
        "Basketball",
        "Golf Clubs",
        "Baseball Gloves",
        "Soccer Ball",
    ]
    assert [p["name"] for p in category["onSale"]] == ["Basketball", "Baseball Gloves"]


@pytest.mark.asyncio
async def test_product_category_and_reviews(execute):
    result = await execute(
        """
        query GetProduct($id: ID!) {
          product(id: $id) {
            category { id name }
            reviews { title rating }
          }
        }
        """,
        {"id": BASKETBALL_ID},
    )

    assert result.errors is None
    product = result.data["product"]
    assert product["category"] == {"id": SPORTS_ID, "name": "Sports"}
    assert [r["rating"] for r in product["reviews"]] == [5, 4]


@pytest.mark.asyncio
async def test_product_without_reviews(execute):
    result = await execute(
        "query GetProduct($id: ID!) { product(id: $id) { reviews { id } } }",
        {"id": FERTILIZER_ID},
    )

    assert result.errors is None
    assert result.data["product"]["reviews"] == []


@pytest.mark.asyncio
async def test_every_product_resolves_its_category(execute):
    result = await execute("query { products { name category { name } } }")

    assert result.errors is None
    by_name = {p["name"]: p["category"]["name"] for p in result.data["products"]}
    assert by_name["Spoon"] == "Kitchen"
    assert by_name["Fertilizer"] == "Garden"
    assert by_name["Soccer Ball"] == "Sports"


@pytest.mark.asyncio
async def test_dangling_category_reference_resolves_to_null(store, execute):
    product = store.insert_product(
        {
            "name": "Orphan",
            "description": "Points nowhere",
            "quantity": 1,
            "price": 1.0,
            "on_sale": False,
            "image": "img",
            "category_id": "no-such-category",
        }
    )

    result = await execute(
        "query GetProduct($id: ID!) { product(id: $id) { name category { id } } }",
        {"id": product.id},
    )

    assert result.errors is None
    assert result.data["product"] == {"name": "Orphan", "category": None}


@pytest.mark.asyncio
async def test_product_id_argument_is_required(execute):
    result = await execute("query { product { id } }")

    assert result.errors is not None
    assert result.data is None
