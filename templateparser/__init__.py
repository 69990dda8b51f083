"""
Bracketed text templates with scoped property resolution.

Public surface:
    TemplateEngine, template_apply
"""

from templateparser.engine import TemplateEngine, __version__, template_apply

__all__ = ["TemplateEngine", "template_apply", "__version__"]
