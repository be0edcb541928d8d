"""Product catalogue API router."""

import math

from fastapi import APIRouter, Depends
from loguru import logger
from pymongo.errors import PyMongoError

from storefront.api.http.deps import get_product_repository
from storefront.api.http.schemas import (
    CategoriesResponse,
    ErrorResponse,
    FeaturedResponse,
    Pagination,
    ProductListResponse,
    RelatedResponse,
)
from storefront.core.errors import DatabaseUnavailable, ProductNotFound
from storefront.entities.service.product import Product, ProductRepository
from storefront.runtime.context import get_config
from storefront.utils.parsing import parse_int

router = APIRouter()

_ERRORS = {500: {"model": ErrorResponse}}
_LOOKUP_ERRORS = {404: {"model": ErrorResponse}, **_ERRORS}


@router.get("/categories", response_model=CategoriesResponse, responses=_ERRORS)
def list_categories(
    repository: ProductRepository = Depends(get_product_repository),
) -> CategoriesResponse:
    """Every distinct product category."""
    try:
        categories = repository.distinct_categories()
    except PyMongoError as e:
        logger.exception("Error fetching categories")
        raise DatabaseUnavailable() from e
    return CategoriesResponse(categories=categories)


@router.get("/products", response_model=ProductListResponse, responses=_ERRORS)
def list_products(
    category: str | None = None,
    search: str | None = None,
    page: str | None = None,
    limit: str | None = None,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductListResponse:
    """Newest products first, optionally filtered, one page at a time."""
    page_number = max(parse_int(page) or 1, 1)
    page_size = parse_int(limit)
    # negative sizes would turn into a negative skip
    if page_size is None or page_size < 0:
        page_size = get_config().catalog.page_size

    try:
        result = repository.list_page(
            category=category, search=search, page=page_number, limit=page_size
        )
    except PyMongoError as e:
        logger.exception("Error fetching products")
        raise DatabaseUnavailable() from e

    if page_size > 0:
        pages = math.ceil(result.total / page_size)
    else:
        # a zero limit returns everything on one page
        pages = 1 if result.total else 0

    return ProductListResponse(
        products=result.products,
        pagination=Pagination(
            total=result.total, page=page_number, limit=page_size, pages=pages
        ),
    )


@router.get("/featured", response_model=FeaturedResponse, responses=_ERRORS)
def featured_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> FeaturedResponse:
    """Top-rated product per featured category, topped up from the rest."""
    catalog = get_config().catalog
    try:
        products = repository.featured(
            catalog.featured_categories, catalog.featured_count
        )
    except PyMongoError as e:
        logger.exception("Error fetching featured products")
        raise DatabaseUnavailable() from e
    return FeaturedResponse(featuredProducts=products)


@router.get(
    "/products/related/{product_id}",
    response_model=RelatedResponse,
    responses=_LOOKUP_ERRORS,
)
def related_products(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> RelatedResponse:
    """Best-rated products from the same category as ``product_id``."""
    try:
        product = repository.get_by_id(parse_int(product_id))
        if product is None:
            raise ProductNotFound()
        related = repository.related(product, get_config().catalog.related_count)
    except PyMongoError as e:
        logger.exception("Error fetching related products")
        raise DatabaseUnavailable() from e
    return RelatedResponse(relatedProducts=related)


@router.get(
    "/products/{product_id}", response_model=Product, responses=_LOOKUP_ERRORS
)
def get_product(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Get a product by its numeric ID."""
    try:
        product = repository.get_by_id(parse_int(product_id))
    except PyMongoError as e:
        logger.exception("Error fetching product")
        raise DatabaseUnavailable() from e
    if product is None:
        raise ProductNotFound()
    return product
