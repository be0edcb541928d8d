"""Tests for the route guard state machine."""

from unittest.mock import MagicMock

import pytest

from storefront.web.route_guard import (
    Access,
    AuthState,
    GuardState,
    RouteGuard,
    evaluate,
    required_access,
)

_USER = {"email": "asha@example.com"}
_LOADING = AuthState()
_ANONYMOUS = AuthState(user=None, loading=False)
_CUSTOMER = AuthState(user=_USER, loading=False)
_ADMIN = AuthState(user=_USER, is_admin=True, loading=False)


@pytest.mark.parametrize(
    ("auth", "require_admin", "expected"),
    [
        (_LOADING, False, GuardState.LOADING),
        (_LOADING, True, GuardState.LOADING),
        (_ANONYMOUS, False, GuardState.UNAUTHORIZED),
        (_ANONYMOUS, True, GuardState.UNAUTHORIZED),
        (_CUSTOMER, False, GuardState.AUTHORIZED),
        (_CUSTOMER, True, GuardState.FORBIDDEN),
        (_ADMIN, True, GuardState.AUTHORIZED),
    ],
)
def test_evaluate(auth, require_admin, expected):
    assert evaluate(auth, require_admin) is expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/", Access.PUBLIC),
        ("/products/3", Access.PUBLIC),
        ("/profile", Access.AUTHENTICATED),
        ("/orders/17", Access.AUTHENTICATED),
        ("/checkout", Access.AUTHENTICATED),
        ("/wishlist", Access.AUTHENTICATED),
        ("/admin/products", Access.ADMIN),
    ],
)
def test_required_access(path, expected):
    assert required_access(path) is expected


class TestRouteGuard:
    def test_starts_loading_with_spinner(self):
        guard = RouteGuard(MagicMock())

        assert guard.state is GuardState.LOADING
        assert "animate-spin" in guard.render("<p>secret</p>")

    def test_loading_update_does_not_navigate(self):
        navigate = MagicMock()
        guard = RouteGuard(navigate, require_admin=True)

        assert guard.update(_LOADING) is GuardState.LOADING

        navigate.assert_not_called()
        assert guard.pending_redirect is None

    def test_unauthenticated_redirects_to_login(self):
        navigate = MagicMock()
        guard = RouteGuard(navigate)

        assert guard.update(_ANONYMOUS) is GuardState.UNAUTHORIZED

        navigate.assert_called_once_with("/login")
        assert guard.pending_redirect == "/login"
        assert guard.render("<p>secret</p>") == ""

    def test_non_admin_redirects_home(self):
        navigate = MagicMock()
        guard = RouteGuard(navigate, require_admin=True)

        guard.update(_CUSTOMER)

        navigate.assert_called_once_with("/")
        assert guard.render("<p>secret</p>") == ""

    def test_authorized_renders_children(self):
        navigate = MagicMock()
        guard = RouteGuard(navigate, require_admin=True)

        guard.update(_LOADING)
        guard.update(_ADMIN)

        navigate.assert_not_called()
        assert guard.pending_redirect is None
        assert guard.render("<p>secret</p>") == "<p>secret</p>"

    def test_repeated_update_navigates_once(self):
        navigate = MagicMock()
        guard = RouteGuard(navigate)

        guard.update(_ANONYMOUS)
        guard.update(_ANONYMOUS)

        navigate.assert_called_once_with("/login")

    def test_render_has_no_side_effects(self):
        navigate = MagicMock()
        guard = RouteGuard(navigate)
        guard.update(_ANONYMOUS)
        navigate.reset_mock()

        guard.render("<p>secret</p>")
        guard.render("<p>secret</p>")

        navigate.assert_not_called()

    def test_logout_after_authorization_redirects(self):
        navigate = MagicMock()
        guard = RouteGuard(navigate)

        guard.update(_CUSTOMER)
        guard.update(_ANONYMOUS)

        navigate.assert_called_once_with("/login")


class TestForPath:
    def test_public_path_has_no_guard(self):
        assert RouteGuard.for_path("/products", MagicMock()) is None

    def test_admin_path_requires_admin(self):
        guard = RouteGuard.for_path("/admin", MagicMock())

        assert guard is not None
        assert guard.require_admin

    def test_protected_path_requires_login_only(self):
        guard = RouteGuard.for_path("/orders", MagicMock())

        assert guard is not None
        assert not guard.require_admin
