"""
Tests for the GraphQL schema contract
"""

import pytest

from storefront.graphql.schema import schema, validate_schema

graphql_schema = schema._schema


def test_validate_schema_passes():
    validate_schema()


@pytest.mark.parametrize(
    ("field", "return_type", "args"),
    [
        ("hello", "String", {}),
        ("products", "[Product!]!", {"filter": "ProductsFilterInput"}),
        ("product", "Product", {"id": "ID!"}),
        ("categories", "[Category!]!", {}),
        ("category", "Category", {"id": "ID!"}),
    ],
)
def test_query_fields(field, return_type, args):
    definition = graphql_schema.query_type.fields[field]

    assert str(definition.type) == return_type
    assert {name: str(arg.type) for name, arg in definition.args.items()} == args


@pytest.mark.parametrize(
    ("field", "return_type", "args"),
    [
        ("addCategory", "Category!", {"input": "AddCategoryInput!"}),
        ("addProduct", "Product!", {"input": "AddProductInput!"}),
        ("addReview", "Review!", {"input": "AddReviewInput!"}),
        ("deleteCategory", "Boolean!", {"id": "ID!"}),
        ("deleteProduct", "Boolean!", {"id": "ID!"}),
        ("deleteReview", "Boolean!", {"id": "ID!"}),
        ("updateCategory", "Category", {"id": "ID!", "input": "UpdateCategoryInput!"}),
        ("updateProduct", "Product", {"id": "ID!", "input": "UpdateProductInput!"}),
        ("updateReview", "Review", {"id": "ID!", "input": "UpdateReviewInput!"}),
    ],
)
def test_mutation_fields(field, return_type, args):
    definition = graphql_schema.mutation_type.fields[field]

    assert str(definition.type) == return_type
    assert {name: str(arg.type) for name, arg in definition.args.items()} == args


def test_object_type_fields():
    product = graphql_schema.get_type("Product")
    category = graphql_schema.get_type("Category")
    review = graphql_schema.get_type("Review")

    assert {name: str(f.type) for name, f in product.fields.items()} == {
        "id": "ID!",
        "name": "String!",
        "description": "String!",
        "quantity": "Int!",
        "price": "Float!",
        "onSale": "Boolean!",
        "image": "String!",
        "category": "Category",
        "reviews": "[Review!]!",
    }
    assert {name: str(f.type) for name, f in category.fields.items()} == {
        "id": "ID!",
        "name": "String!",
        "products": "[Product!]!",
    }
    assert {name: str(f.type) for name, f in review.fields.items()} == {
        "id": "ID!",
        "date": "String!",
        "title": "String!",
        "comment": "String!",
        "rating": "Int!",
    }


def test_input_types():
    filter_input = graphql_schema.get_type("ProductsFilterInput")
    product_input = graphql_schema.get_type("AddProductInput")
    review_input = graphql_schema.get_type("UpdateReviewInput")

    assert {name: str(f.type) for name, f in filter_input.fields.items()} == {
        "onSale": "Boolean",
        "avgRating": "Int",
    }
    assert str(product_input.fields["categoryId"].type) == "String"
    assert str(product_input.fields["price"].type) == "Float!"
    assert str(review_input.fields["productId"].type) == "ID!"
