from dataclasses import dataclass

from storefront.core.services import MongoConnectionService, StripeClientService


@dataclass
class ApplicationDependencies:
    database_service: MongoConnectionService
    payment_service: StripeClientService
