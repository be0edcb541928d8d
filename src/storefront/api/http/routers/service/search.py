"""Full-text product search router."""

from fastapi import APIRouter, Depends
from loguru import logger
from pymongo.errors import PyMongoError

from storefront.api.http.deps import get_product_repository
from storefront.api.http.schemas import ErrorResponse, SearchResponse
from storefront.core.errors import DatabaseUnavailable, QueryParameterRequired
from storefront.entities.service.product import ProductRepository
from storefront.runtime.context import get_config
from storefront.utils.parsing import parse_int

router = APIRouter()


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def search_products(
    q: str | None = None,
    limit: str | None = None,
    repository: ProductRepository = Depends(get_product_repository),
) -> SearchResponse:
    """Products matching ``q``, most relevant first, at most ``limit`` of them."""
    if not q:
        raise QueryParameterRequired()

    max_results = parse_int(limit)
    if max_results is None:
        max_results = get_config().search.default_limit

    try:
        products = repository.text_search(q, max_results)
    except PyMongoError as e:
        logger.exception("Error searching products")
        raise DatabaseUnavailable() from e
    return SearchResponse(products=products)
