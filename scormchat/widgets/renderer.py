"""Page fragment renderer for HTML templates with Jinja2 support"""

import os
from typing import Dict, Any, Optional
from jinja2 import Environment, ChoiceLoader, DictLoader, FileSystemLoader


BUILTIN_TEMPLATES = {
    "learner_info.html": (
        '<span class="text-white font-medium">Welcome, <strong>{{ name }}</strong></span>\n'
        '<span class="text-white/80 text-sm">Progress: {{ progress }}</span>'
    ),
    "no_package.html": (
        "<h1>No Test Package Found</h1>\n"
        "<p>Run <code>{{ command }}</code> first.</p>"
    ),
    "no_content.html": (
        "<h1>No Content Extracted</h1>\n"
        "<p>Run <code>{{ command }}</code> first.</p>"
    ),
}


class PageTemplateRenderer:
    """Renders page fragments from Jinja2 templates or inline HTML strings

    Built-in templates cover the learner summary and the test server's hint
    pages. Files in ``template_dir`` (when it exists) take precedence over
    the built-ins with the same name. Output is always autoescaped.

    Example:
        renderer = PageTemplateRenderer()
        html = renderer.render("learner_info.html", {"name": "Ada", "progress": "completed"})
    """

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize renderer

        Args:
            template_dir: Directory with template overrides (optional)
        """
        self.template_dir = template_dir
        loaders = []
        if template_dir and os.path.exists(template_dir):
            loaders.append(FileSystemLoader(template_dir))
        loaders.append(DictLoader(BUILTIN_TEMPLATES))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=True  # learner names come from the LMS
        )

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a named template

        Raises:
            TemplateNotFound: If no loader provides the template
        """
        template = self.env.get_template(template_name)
        return template.render(**context)
