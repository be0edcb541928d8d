"""Core services exports."""

# Database Service
from .database.db_session import MongoConnectionService

# Payment Services
from .payment.stripe_client import StripeClientService

__all__ = [
    "MongoConnectionService",
    "StripeClientService",
]
