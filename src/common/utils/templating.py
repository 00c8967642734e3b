import os
from typing import Any, Dict

import jinja2

# src/common/utils/templating.py -> src/templates
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
TEMPLATE_DIR = os.path.join(BASE_DIR, "templates")
STATIC_DIR = os.path.join(BASE_DIR, "static")

template_loader = jinja2.FileSystemLoader(searchpath=TEMPLATE_DIR)
template_env = jinja2.Environment(
    loader=template_loader,
    autoescape=True,
    undefined=jinja2.StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)

def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """
    Render a template from src/templates.

    Args:
        template_name (str): Path of the template relative to the templates directory.
        context (Dict[str, Any]): Variables made available to the template.

    Returns:
        str: The rendered markup.
    """
    template = template_env.get_template(template_name)
    return template.render(**context)
