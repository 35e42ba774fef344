"""
CLI commands for tag tools.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .main import cli

__all__ = ["cli"]
