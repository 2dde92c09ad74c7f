"""
Error types raised while printing subgraph SDL
"""

from enum import Enum
from typing import Any, Dict, Optional

from graphql import GraphQLError


class ErrorCode(Enum):
    """Error codes for schema printing failures"""

    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
    INVALID_FEDERATION_VERSION = "INVALID_FEDERATION_VERSION"
    INVALID_ARGUMENT_VALUE = "INVALID_ARGUMENT_VALUE"


class SchemaPrintError(Exception):
    """Base exception for schema printing errors"""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        extensions: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.extensions = extensions or {}

    def to_graphql_error(self) -> GraphQLError:
        """Convert to GraphQL error"""
        extensions = {
            "code": self.code.value,
            **self.extensions
        }

        return GraphQLError(
            message=self.message,
            extensions=extensions
        )


class UnsupportedTypeError(SchemaPrintError):
    """The printer met a named type kind it cannot build a node for"""

    def __init__(self, type_name: str, type_class: str):
        super().__init__(
            message=f"Cannot build a type definition for {type_name} ({type_class})",
            code=ErrorCode.UNSUPPORTED_TYPE,
            extensions={
                "type_name": type_name,
                "type_class": type_class
            }
        )


class UnsupportedOperationError(SchemaPrintError):
    """Unknown root operation name"""

    def __init__(self, operation: str):
        super().__init__(
            message=f"Unknown root operation: {operation}",
            code=ErrorCode.UNSUPPORTED_OPERATION,
            extensions={"operation": operation}
        )


class InvalidFederationVersionError(SchemaPrintError, ValueError):
    """Federation version whose major part is not 1 or 2"""

    def __init__(self, version: str):
        super().__init__(
            message=f"Unsupported federation version: {version!r}",
            code=ErrorCode.INVALID_FEDERATION_VERSION,
            extensions={"version": version}
        )


class InvalidArgumentValueError(SchemaPrintError, ValueError):
    """Directive argument value with no GraphQL literal form"""

    def __init__(self, value: Any):
        super().__init__(
            message=f"No GraphQL literal for directive argument value {value!r}",
            code=ErrorCode.INVALID_ARGUMENT_VALUE,
            extensions={"value": repr(value)}
        )
