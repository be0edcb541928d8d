from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from storefront.utils.formatting import cn, format_price


@lru_cache(maxsize=1)
def get_template_env() -> Environment:
    """Get Jinja2 environment for the storefront's HTML fragments."""
    template_dir = Path(__file__).parent / "templates"
    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["price"] = format_price
    env.globals["cn"] = cn
    return env


def render_fragment(template_name: str, **context) -> Markup:
    """Render a template to markup that can be nested in another fragment."""
    template = get_template_env().get_template(template_name)
    return Markup(template.render(**context))
