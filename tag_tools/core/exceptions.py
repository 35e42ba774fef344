"""
Base exception hierarchy for tag tools operations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""


class TagToolsError(Exception):
    """Base exception for tag tools operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class SelectorParseError(TagToolsError, ValueError):
    """Raised when a CSS selector string cannot be parsed."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message, code=code or "SELECTOR_PARSE_ERROR", details=details)


class UnsupportedTokenError(SelectorParseError):
    """Raised when a selector uses CSS syntax outside the supported subset."""

    def __init__(self, message: str, character: str, details: dict = None):
        """
        Initialize unsupported token error.

        Args:
            message: Error message
            character: Offending character (one of `,`, `[`, `~`, `+`, `:`)
            details: Optional additional details
        """
        details = dict(details or {})
        details.setdefault("character", character)
        super().__init__(message, code="UNSUPPORTED_TOKEN", details=details)
        self.character = character


class DanglingCombinatorError(SelectorParseError):
    """Raised when a `>` combinator starts or ends a selector."""

    def __init__(self, message: str, position: str, details: dict = None):
        """
        Initialize dangling combinator error.

        Args:
            message: Error message
            position: "first" or "last"
            details: Optional additional details
        """
        details = dict(details or {})
        details.setdefault("position", position)
        super().__init__(message, code="DANGLING_COMBINATOR", details=details)
        self.position = position


class SelectorTypeError(TagToolsError, TypeError):
    """Raised when a value cannot be converted into a selector or selector list."""

    def __init__(self, message: str, value_type: str = None, details: dict = None):
        super().__init__(message, code="SELECTOR_TYPE_ERROR", details=details)
        self.value_type = value_type


class TemplateError(TagToolsError, ValueError):
    """Raised when template text cannot be split into segments."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message, code=code or "TEMPLATE_ERROR", details=details)


class UnterminatedCodeBlockError(TemplateError):
    """Raised when a template ends inside a `{{ ... }}` code block."""

    def __init__(
        self,
        message: str,
        state: str = None,
        position: int = None,
        details: dict = None,
    ):
        """
        Initialize unterminated code block error.

        Args:
            message: Error message
            state: Name of the lexer state the scan ended in
            position: Offset where the unterminated code block was opened
            details: Optional additional details
        """
        details = dict(details or {})
        details.setdefault("state", state)
        details.setdefault("position", position)
        super().__init__(message, code="UNTERMINATED_CODE_BLOCK", details=details)
        self.state = state
        self.position = position


class TemplateTypeError(TagToolsError, TypeError):
    """Raised when template input is not a single string."""

    def __init__(self, message: str, value_type: str = None, details: dict = None):
        super().__init__(message, code="TEMPLATE_TYPE_ERROR", details=details)
        self.value_type = value_type


class ConfigurationError(TagToolsError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: str = None, details: dict = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that is invalid
            details: Optional additional details
        """
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
        self.config_key = config_key
