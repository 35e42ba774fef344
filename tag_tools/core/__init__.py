"""
Core building blocks shared by the selector and template packages.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .config import ToolConfig, load_config, save_config, validate_config
from .exceptions import (
    ConfigurationError,
    DanglingCombinatorError,
    SelectorParseError,
    SelectorTypeError,
    TagToolsError,
    TemplateError,
    TemplateTypeError,
    UnsupportedTokenError,
    UnterminatedCodeBlockError,
)

__all__ = [
    "ToolConfig",
    "load_config",
    "save_config",
    "validate_config",
    "TagToolsError",
    "SelectorParseError",
    "UnsupportedTokenError",
    "DanglingCombinatorError",
    "SelectorTypeError",
    "TemplateError",
    "UnterminatedCodeBlockError",
    "TemplateTypeError",
    "ConfigurationError",
]
