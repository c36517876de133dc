"""Application services layer."""

from .template_store import TemplateStore, validate_template_name

__all__ = ["TemplateStore", "validate_template_name"]
