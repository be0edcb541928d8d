"""Create/edit dialog hosting the product form."""

from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from markupsafe import Markup

from storefront.web.rendering import render_fragment

SubmitHandler = Callable[[Mapping[str, Any]], Awaitable[Any]]
CloseHandler = Callable[[], Any]


class ProductModal:
    """Dialog state for creating or editing a product.

    ``is_open`` only seeds the initial state. Later changes on the caller's
    side are not picked up; use ``set_open`` to drive the dialog directly.
    """

    def __init__(
        self,
        *,
        is_open: bool = False,
        on_submit: SubmitHandler,
        on_close: CloseHandler | None = None,
        initial_data: Mapping[str, Any] | None = None,
    ) -> None:
        self._open = bool(is_open)
        self._on_submit = on_submit
        self._on_close = on_close
        self.initial_data = initial_data

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def title(self) -> str:
        return "Edit Product" if self.initial_data else "Add New Product"

    def set_open(self, value: bool) -> None:
        """Mirror of the dialog's open-change event; no callbacks fire."""
        self._open = bool(value)

    def close(self) -> None:
        self._open = False
        if self._on_close is not None:
            self._on_close()

    async def submit(self, data: Mapping[str, Any]) -> None:
        """Hand ``data`` to the submit handler, then close.

        If the handler raises, the dialog stays open and the error propagates.
        """
        await self._on_submit(data)
        self.close()

    def render(self, categories: Iterable[str] = ()) -> Markup:
        form = render_fragment(
            "product_form.html.j2",
            product=dict(self.initial_data or {}),
            categories=list(categories),
        )
        return render_fragment(
            "product_modal.html.j2", open=self._open, title=self.title, form=form
        )
