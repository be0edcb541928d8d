"""Entity: Product."""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalogue product as stored in the products collection.

    Only the fields the service reasons about are declared; every other
    display field (name, images, rating, ...) is kept as an extra and
    returned untouched.
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(description="Public numeric identifier, distinct from Mongo's _id")
    category: str = Field(description="Catalogue category")
    price: int | float = Field(
        description="Price in either minor or major units, see format_price"
    )


class SearchResult(Product):
    """A product annotated with its full-text relevance score."""

    score: float = Field(description="Text match quality, used only for ordering")


class ProductPage(BaseModel):
    """One page of a catalogue listing."""

    products: list[Product]
    total: int
