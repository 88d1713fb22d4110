"""Template selection and import for template-starter."""

from .importer import import_template
from .selection import CUSTOM_CHOICE, TemplateSelection, ask_setup_args

__all__ = [
    "CUSTOM_CHOICE",
    "TemplateSelection",
    "ask_setup_args",
    "import_template",
]
