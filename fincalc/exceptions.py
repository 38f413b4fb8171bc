"""Custom exceptions for FinCalc."""


class FinCalcError(Exception):
    """Base exception for all FinCalc errors."""
    
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidInputError(FinCalcError):
    """Raised when a calculator input is missing, non-numeric, or out of range."""
    
    def __init__(self, field: str, value=None, reason: str = None):
        details = {
            'field': field,
            'value': value
        }
        if reason:
            details['reason'] = reason
        
        message = f"Invalid value for '{field}'"
        if reason:
            message = f"Invalid value for '{field}': {reason}"
        
        super().__init__(message, details)
        self.field = field
        self.value = value
        self.reason = reason
