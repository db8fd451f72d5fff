"""Error Hierarchy: typed payment errors with stable, machine-readable codes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - Codes are part of the public API: never rename an existing one
    - to_response() never carries internal detail (builder text, Horizon bodies)
    - ServerError is the only 500-level error; every unexpected failure collapses into it

Design Decisions:
    - One subclass per failure mode, raised by the stage that detects it and
      converted to JSON by the FastAPI handler in api/error_handlers.py
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and client handling."""
    VALIDATION = "validation"
    RESOLUTION = "resolution"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class PaymentError(Exception):
    """Base exception for every terminal failure of the payment pipeline."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the JSON error object returned to the caller."""
        return {"code": self.code, "message": self.message}


# ─── Request Validation (400) ───────────────────────────────────

class InvalidSourceError(PaymentError):
    def __init__(self):
        super().__init__(
            "source parameter is invalid.",
            "invalid_source", ErrorCategory.VALIDATION,
        )


class CannotResolveDestinationError(PaymentError):
    def __init__(self):
        super().__init__(
            "Cannot resolve federated Stellar address.",
            "cannot_resolve_destination", ErrorCategory.RESOLUTION,
        )


class InvalidDestinationError(PaymentError):
    def __init__(self):
        super().__init__(
            "destination parameter is invalid.",
            "invalid_destination", ErrorCategory.VALIDATION,
        )


class InvalidTypeError(PaymentError):
    def __init__(self):
        super().__init__(
            "type parameter is invalid.",
            "invalid_type", ErrorCategory.VALIDATION,
        )


class MissingParamMemoError(PaymentError):
    def __init__(self):
        super().__init__(
            "memo and memo_type parameters must be set together.",
            "missing_parameter_memo", ErrorCategory.VALIDATION,
        )


class CannotUseMemoError(PaymentError):
    """Request carries a memo but federation already returned one."""
    def __init__(self):
        super().__init__(
            "Memo given in request but federation returned memo fields.",
            "cannot_use_memo", ErrorCategory.BUSINESS_RULE,
        )


class InvalidMemoError(PaymentError):
    def __init__(self):
        super().__init__(
            "memo parameter is invalid.",
            "invalid_memo", ErrorCategory.VALIDATION,
        )


class MissingParamAssetError(PaymentError):
    def __init__(self):
        super().__init__(
            "asset code and asset issuer parameters must be set together.",
            "missing_parameter_asset", ErrorCategory.VALIDATION,
        )


class InvalidIssuerError(PaymentError):
    def __init__(self):
        super().__init__(
            "asset_issuer parameter is invalid.",
            "invalid_issuer", ErrorCategory.VALIDATION,
        )


class MalformedAssetCodeError(PaymentError):
    def __init__(self):
        super().__init__(
            "asset_code parameter is invalid.",
            "asset_code_invalid", ErrorCategory.VALIDATION,
        )


class InvalidAmountError(PaymentError):
    def __init__(self):
        super().__init__(
            "amount parameter is invalid.",
            "invalid_amount", ErrorCategory.VALIDATION,
        )


class SourceNotExistError(PaymentError):
    def __init__(self):
        super().__init__(
            "Source account does not exist.",
            "source_not_exist", ErrorCategory.RESOURCE_NOT_FOUND,
        )


# ─── Internal (500) ─────────────────────────────────────────────

class ServerError(PaymentError):
    """Catch-all for internal failures. Detail goes to the log, not the client."""
    def __init__(self):
        super().__init__(
            "Server error.",
            "server_error", ErrorCategory.INTERNAL, 500,
        )
