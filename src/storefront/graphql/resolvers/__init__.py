"""Resolver package for the GraphQL schema.

Each sibling module holds the async functions referenced by the GraphQL
types, queries and mutations. They read and write the catalog store
found in ``info.context``.
"""
