from consolelog.core.template.colors import (
    LEVEL_COLORS,
    RESET,
    ColorFunc,
    color_code,
    color_func,
    print_clean,
    reset_code,
)
from consolelog.core.template.template import (
    DEFAULT_TEMPLATE,
    Template,
    new_template_default,
)

__all__ = [
    "ColorFunc",
    "DEFAULT_TEMPLATE",
    "LEVEL_COLORS",
    "RESET",
    "Template",
    "color_code",
    "color_func",
    "new_template_default",
    "print_clean",
    "reset_code",
]
