"""Product repository for data access operations."""

from collections.abc import Iterable
from typing import Any

from pymongo import ASCENDING, DESCENDING, TEXT
from pymongo.collection import Collection

from .entity import Product, ProductPage, SearchResult

# Mongo's internal identity never leaves the repository
_PUBLIC_FIELDS = {"_id": 0}
_TEXT_SCORE = {"$meta": "textScore"}

# BSON stores integers as signed 64-bit; nothing outside can be an id
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ProductRepository:
    """Data-access layer for products stored in a MongoDB collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def get_by_id(self, product_id: int | None) -> Product | None:
        """Find the product whose numeric ``id`` equals ``product_id``.

        ``None`` stands for an unparseable id and never matches, not even
        documents that lack an ``id`` field. Ids outside the signed 64-bit
        range cannot be stored and miss the same way.
        """
        if product_id is None or not _INT64_MIN <= product_id <= _INT64_MAX:
            return None
        doc = self._collection.find_one({"id": product_id}, _PUBLIC_FIELDS)
        if doc is None:
            return None
        return Product.model_validate(doc)

    def distinct_categories(self) -> list[str]:
        return list(self._collection.distinct("category"))

    def text_search(self, query: str, limit: int) -> list[SearchResult]:
        """Full-text search ranked by relevance, best match first.

        ``limit`` is handed to the driver as-is; zero means no limit and a
        negative value returns a single batch of ``abs(limit)`` documents.
        """
        cursor = (
            self._collection.find(
                {"$text": {"$search": query}},
                {**_PUBLIC_FIELDS, "score": _TEXT_SCORE},
            )
            .sort([("score", _TEXT_SCORE)])
            .limit(limit)
        )
        return [SearchResult.model_validate(doc) for doc in cursor]

    def list_page(
        self,
        *,
        category: str | None = None,
        search: str | None = None,
        page: int = 1,
        limit: int = 12,
    ) -> ProductPage:
        """Newest-first listing filtered by category and text search."""
        query: dict[str, Any] = {}
        if category and category != "all":
            query["category"] = category
        if search:
            query["$text"] = {"$search": search}

        cursor = (
            self._collection.find(query, _PUBLIC_FIELDS)
            .sort("createdAt", DESCENDING)
            .skip((page - 1) * limit)
            .limit(limit)
        )
        products = [Product.model_validate(doc) for doc in cursor]
        total = self._collection.count_documents(query)
        return ProductPage(products=products, total=total)

    def top_rated(self, query: dict[str, Any], limit: int) -> list[Product]:
        cursor = (
            self._collection.find(query, _PUBLIC_FIELDS)
            .sort("rating", DESCENDING)
            .limit(limit)
        )
        return [Product.model_validate(doc) for doc in cursor]

    def featured(self, categories: Iterable[str], count: int) -> list[Product]:
        """Best-rated product of each featured category, topped up to ``count``."""
        featured: list[Product] = []
        for category in categories:
            featured.extend(self.top_rated({"category": category}, 1))

        if len(featured) < count:
            seen = [product.category for product in featured]
            featured.extend(
                self.top_rated({"category": {"$nin": seen}}, count - len(featured))
            )
        return featured

    def related(self, product: Product, limit: int) -> list[Product]:
        """Best-rated products sharing ``product``'s category, excluding it."""
        return self.top_rated(
            {"category": product.category, "id": {"$ne": product.id}}, limit
        )

    def ensure_indexes(self) -> list[str]:
        """Create the indexes the queries above rely on."""
        return [
            self._collection.create_index([("id", ASCENDING)], unique=True),
            self._collection.create_index([("category", ASCENDING)]),
            self._collection.create_index([("name", TEXT), ("description", TEXT)]),
        ]

    def replace_all(self, products: Iterable[Product]) -> int:
        """Drop every stored product and insert ``products`` instead."""
        docs = [product.model_dump() for product in products]
        self._collection.delete_many({})
        if not docs:
            return 0
        result = self._collection.insert_many(docs)
        return len(result.inserted_ids)
