"""
Shared pytest fixtures.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so tests do not leak them."""
    yield
    logger = logging.getLogger("tag_tools")
    for handler in list(logger.handlers):
        if getattr(handler, "_tag_tools_handler", False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
