"""Result pattern for returning calculator outcomes to a presentation layer.

Calculators raise InvalidInputError; the form layer converts those into a
failed Result so the caller decides how to show the message instead of
handling exceptions itself.
"""
from dataclasses import dataclass
from typing import Optional, TypeVar, Generic

T = TypeVar('T')


@dataclass
class Result(Generic[T]):
    """Represents the outcome of a calculation.
    
    Attributes:
        success: Whether the calculation succeeded.
        value: The computed result on success, None on failure.
        error: User-facing message on failure, None on success.
        error_type: Category of error (see ErrorType).
        
    Usage:
        result = form.calculate()
        if result:
            show(result.value)
        else:
            alert(result.error)
    """
    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    
    @classmethod
    def ok(cls, value: T = None) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, value=value)
    
    @classmethod
    def fail(cls, error: str, error_type: str = None) -> 'Result[T]':
        """Create a failure result.
        
        Args:
            error: Message describing what went wrong.
            error_type: Optional error category for programmatic handling.
            
        Returns:
            A Result with success=False and error details.
        """
        return cls(success=False, error=error, error_type=error_type)
    
    def __bool__(self) -> bool:
        return self.success
    
    def unwrap(self) -> T:
        """Get the value, raising an exception if the calculation failed.
        
        Raises:
            ValueError: If the calculation failed.
        """
        if not self.success:
            raise ValueError(f"Result unwrap failed: {self.error}")
        return self.value
    
    def unwrap_or(self, default: T) -> T:
        """Get the value or a default if the calculation failed."""
        return self.value if self.success else default


class ErrorType:
    """Standard error type constants."""
    VALIDATION = "VALIDATION"
