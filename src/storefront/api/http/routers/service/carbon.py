"""Product carbon footprint router."""

from fastapi import APIRouter, Depends
from loguru import logger
from pymongo.errors import PyMongoError

from storefront.api.http.deps import get_product_repository
from storefront.api.http.schemas import ErrorResponse
from storefront.core.carbon import CarbonFootprint, estimate_footprint
from storefront.core.errors import DatabaseUnavailable, ProductNotFound
from storefront.entities.service.product import ProductRepository
from storefront.runtime.context import get_config
from storefront.utils.parsing import parse_int

router = APIRouter()


@router.get(
    "/carbon/{product_id}",
    response_model=CarbonFootprint,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def product_carbon_footprint(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> CarbonFootprint:
    """Footprint of one product against its conventional equivalent."""
    try:
        product = repository.get_by_id(parse_int(product_id))
    except PyMongoError as e:
        logger.exception("Error fetching carbon footprint data")
        raise DatabaseUnavailable() from e
    if product is None:
        raise ProductNotFound()
    return estimate_footprint(product, get_config().carbon)
