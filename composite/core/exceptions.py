"""Custom exceptions for the composite package."""

from typing import Optional, Any, Dict


class CompositeError(Exception):
    """Base exception for composite errors."""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        result = {"message": self.message}
        if self.code:
            result["code"] = self.code
        if self.details:
            result["details"] = self.details
        return result


class InvalidOperandError(CompositeError):
    """Raised when an arithmetic method receives an unusable operand."""
    def __init__(self, message: str, operand: Optional[Any] = None, code: str = "INVALID_OPERAND"):
        super().__init__(message, code=code, details={"operand": repr(operand)})
        self.operand = operand


class OperandTypeError(InvalidOperandError, TypeError):
    """Raised when an operand is not an integer."""
    def __init__(self, message: str, operand: Optional[Any] = None):
        super().__init__(message, operand=operand, code="INVALID_OPERAND")


class OperandRangeError(InvalidOperandError, ValueError):
    """Raised when an integer operand falls outside the 32-bit range."""
    def __init__(self, message: str, operand: Optional[Any] = None):
        super().__init__(message, operand=operand, code="OPERAND_OUT_OF_RANGE")


class ConfigurationError(CompositeError):
    """Raised when settings fail validation."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
