from markupsafe import Markup

from storefront.web.rendering import render_fragment

# Auth pages draw their own full-screen layout
AUTH_PATHS = frozenset({"/login", "/signup", "/forgot-password"})


def is_auth_path(pathname: str) -> bool:
    return pathname in AUTH_PATHS


def render_default_layout(pathname: str, children: str) -> Markup:
    """Wrap page content in the padded container unless on an auth page."""
    content = Markup(children)
    if is_auth_path(pathname):
        return content
    return render_fragment("default_layout.html.j2", children=content)
