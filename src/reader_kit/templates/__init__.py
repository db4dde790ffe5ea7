from .generator import default_library, generate_template
from .template import CopyTemplate
from .templates_library import DEFAULT_TEMPLATES_DIR, TemplatesLibrary

__all__ = [
    "CopyTemplate",
    "DEFAULT_TEMPLATES_DIR",
    "TemplatesLibrary",
    "default_library",
    "generate_template",
]
