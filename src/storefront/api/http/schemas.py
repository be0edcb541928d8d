"""Response bodies of the storefront API."""

from pydantic import BaseModel

from storefront.entities.service.product import Product, SearchResult


class ErrorResponse(BaseModel):
    error: str


class CategoriesResponse(BaseModel):
    categories: list[str]


class SearchResponse(BaseModel):
    products: list[SearchResult]


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    pages: int


class ProductListResponse(BaseModel):
    products: list[Product]
    pagination: Pagination


class FeaturedResponse(BaseModel):
    featuredProducts: list[Product]


class RelatedResponse(BaseModel):
    relatedProducts: list[Product]


class HealthResponse(BaseModel):
    status: str
