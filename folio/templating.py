"""Template rendering utilities."""

from typing import Any, Dict, Optional

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from .exceptions import RenderError


_env: Optional[Environment] = None


def get_environment() -> Environment:
    """Return the shared Jinja2 environment for the packaged templates."""
    global _env
    if _env is None:
        _env = Environment(
            loader=PackageLoader("folio", "templates"),
            autoescape=select_autoescape(["html", "xml"]),
            keep_trailing_newline=True,
        )
    return _env


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Render a packaged template with context.

    Raises:
        RenderError: If the template is missing or fails to render
    """
    try:
        template = get_environment().get_template(template_name)
        return template.render(**context)
    except TemplateError as e:
        raise RenderError(f"Failed to render {template_name}: {e}", template=template_name)
