"""FastAPI dependency implementations."""

from fastapi import Depends, Request

from storefront.api.http.app_data import ApplicationDependencies
from storefront.core.services import MongoConnectionService, StripeClientService
from storefront.entities.service.product import ProductRepository


def get_database_service(request: Request) -> MongoConnectionService:
    """Get the shared MongoDB connection service."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_payment_service(request: Request) -> StripeClientService:
    """Get the Stripe client service."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.payment_service


def get_product_repository(
    database: MongoConnectionService = Depends(get_database_service),
) -> ProductRepository:
    """Repository bound to the products collection."""
    return ProductRepository(database.get_products_collection())
