"""
Tests for request logging helpers
"""

import pytest

from storefront.middleware import operation_name_from_payload, sanitize_query_params


def test_sanitize_query_params():
    params = {"page": "2", "access_token": "abc", "Password": "x"}

    assert sanitize_query_params(params) == {
        "page": "2",
        "access_token": "[REDACTED]",
        "Password": "[REDACTED]",
    }


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"operationName": "GetProduct", "query": "query Other { hello }"}, "GetProduct"),
        ({"query": "query SayHelloWorld { hello }"}, "SayHelloWorld"),
        ({"query": "mutation AddCat { addCategory(input: {name: \"x\"}) { id } }"}, "mutation:AddCat"),
        ({"query": "{ hello }"}, "unnamed_operation"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({"query": ""}, None),
        ({}, None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected
