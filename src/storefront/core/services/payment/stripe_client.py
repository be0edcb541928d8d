"""Lazily built Stripe client handle."""

import threading

import stripe
from loguru import logger

from storefront.core.errors import PaymentConfigurationError


class StripeClientService:
    """Builds one ``stripe.StripeClient`` from the publishable key and reuses it."""

    def __init__(self, publishable_key: str | None) -> None:
        self._publishable_key = publishable_key
        self._client: stripe.StripeClient | None = None
        self._lock = threading.Lock()

    def get_client(self) -> stripe.StripeClient:
        """Return the memoized client, creating it on the first call.

        Raises:
            PaymentConfigurationError: if no publishable key is configured.
                Nothing is constructed in that case.
        """
        client = self._client
        if client is not None:
            return client

        with self._lock:
            if self._client is None:
                if not self._publishable_key:
                    raise PaymentConfigurationError(
                        "STRIPE_PUBLISHABLE_KEY is not defined in environment variables"
                    )
                logger.info("Initializing Stripe client")
                self._client = stripe.StripeClient(self._publishable_key)
            return self._client
