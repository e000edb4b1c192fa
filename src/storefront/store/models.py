"""Pydantic records held by the in-memory catalog store."""

from __future__ import annotations

from pydantic import BaseModel


class Category(BaseModel):
    id: str
    name: str


class Product(BaseModel):
    id: str
    name: str
    description: str
    quantity: int
    price: float
    on_sale: bool
    image: str
    category_id: str | None = None


class Review(BaseModel):
    id: str
    date: str
    title: str
    comment: str
    rating: int  # expected 1-5, not range checked
    product_id: str
