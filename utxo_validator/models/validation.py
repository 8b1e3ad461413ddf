# utxo_validator/models/validation.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple


class ValidationErrorKind(Enum):
    """Closed set of rules a transaction can violate"""
    ZERO_AMOUNT_OUTPUT = "ZERO_AMOUNT_OUTPUT"
    UTXO_NOT_FOUND = "UTXO_NOT_FOUND"
    AMOUNT_MISMATCH = "AMOUNT_MISMATCH"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    DOUBLE_SPENDING = "DOUBLE_SPENDING"


@dataclass(frozen=True)
class ValidationError:
    """A single validation finding. This is a value, never raised."""
    kind: ValidationErrorKind
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'message': self.message}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValidationError':
        return cls(kind=ValidationErrorKind(data['kind']), message=data['message'])


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: Tuple[ValidationError, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'errors', tuple(self.errors))
        if self.valid != (len(self.errors) == 0):
            raise ValueError("valid must be True exactly when there are no errors")

    @classmethod
    def from_errors(cls, errors: Iterable[ValidationError]) -> 'ValidationResult':
        errors = tuple(errors)
        return cls(valid=len(errors) == 0, errors=errors)

    def kinds(self) -> List[ValidationErrorKind]:
        """Error kinds in the order they were recorded"""
        return [error.kind for error in self.errors]

    def errors_of(self, kind: ValidationErrorKind) -> List[ValidationError]:
        return [error for error in self.errors if error.kind is kind]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'errors': [error.to_dict() for error in self.errors]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValidationResult':
        return cls.from_errors(ValidationError.from_dict(e) for e in data.get('errors', []))
