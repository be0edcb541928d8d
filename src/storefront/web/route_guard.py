"""Authentication/authorization gate for protected pages.

The guard is a small state machine driven by explicit auth-state updates:

    LOADING ──update──▶ UNAUTHORIZED  (navigate to /login)
                    ├─▶ FORBIDDEN     (navigate to /)
                    └─▶ AUTHORIZED

Navigation happens in ``update``; ``render`` never has side effects.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger
from markupsafe import Markup

from storefront.web.rendering import render_fragment

LOGIN_PATH = "/login"
HOME_PATH = "/"

PROTECTED_PREFIXES = ("/profile", "/orders", "/checkout", "/wishlist")
ADMIN_PREFIXES = ("/admin",)


class GuardState(str, Enum):
    LOADING = "loading"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    AUTHORIZED = "authorized"


class Access(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


_REDIRECTS = {
    GuardState.UNAUTHORIZED: LOGIN_PATH,
    GuardState.FORBIDDEN: HOME_PATH,
}


@dataclass(frozen=True)
class AuthState:
    """What the auth provider currently knows about the visitor."""

    user: Mapping[str, Any] | None = None
    is_admin: bool = False
    loading: bool = True


def evaluate(auth: AuthState, require_admin: bool = False) -> GuardState:
    if auth.loading:
        return GuardState.LOADING
    if auth.user is None:
        return GuardState.UNAUTHORIZED
    if require_admin and not auth.is_admin:
        return GuardState.FORBIDDEN
    return GuardState.AUTHORIZED


def required_access(path: str) -> Access:
    """Access level a page path needs, matched by prefix."""
    if path.startswith(ADMIN_PREFIXES):
        return Access.ADMIN
    if path.startswith(PROTECTED_PREFIXES):
        return Access.AUTHENTICATED
    return Access.PUBLIC


class RouteGuard:
    """Gate for one protected page.

    Args:
        navigate: called with the redirect target when the guard decides the
            visitor must leave the page.
        require_admin: whether an authenticated non-admin is turned away.
    """

    def __init__(self, navigate: Callable[[str], Any], *, require_admin: bool = False) -> None:
        self._navigate = navigate
        self.require_admin = require_admin
        self.state = GuardState.LOADING

    @classmethod
    def for_path(cls, path: str, navigate: Callable[[str], Any]) -> "RouteGuard | None":
        """Guard matching ``path``'s access level, or None for public pages."""
        access = required_access(path)
        if access is Access.PUBLIC:
            return None
        return cls(navigate, require_admin=access is Access.ADMIN)

    @property
    def pending_redirect(self) -> str | None:
        return _REDIRECTS.get(self.state)

    def update(self, auth: AuthState) -> GuardState:
        """Apply a new auth state, navigating away if the page is now off limits."""
        previous = self.state
        self.state = evaluate(auth, self.require_admin)

        target = self.pending_redirect
        if target is not None and self.state is not previous:
            logger.debug("Route guard {} -> {}, redirecting to {}", previous.value, self.state.value, target)
            self._navigate(target)
        return self.state

    def render(self, children: str) -> Markup:
        if self.state is GuardState.LOADING:
            return render_fragment("spinner.html.j2")
        if self.state is GuardState.AUTHORIZED:
            return Markup(children)
        return Markup("")
