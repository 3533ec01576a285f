# utils/validation.py
"""
Validation result types shared by the Sections and Products forms

Version: 1.0.0

Levels:
- BLOCK: Hard stop, the form cannot be submitted
- WARNING: Soft warning, shown but does not stop submission
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class ValidationLevel(Enum):
    """Validation severity levels"""
    BLOCK = "BLOCK"
    WARNING = "WARNING"


@dataclass
class ValidationResult:
    """Single validation result"""
    rule_id: str
    level: ValidationLevel
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_blocking(self) -> bool:
        return self.level == ValidationLevel.BLOCK

    @property
    def is_warning(self) -> bool:
        return self.level == ValidationLevel.WARNING


@dataclass
class ValidationResults:
    """Collection of validation results"""
    results: List[ValidationResult] = field(default_factory=list)

    def add_block(self, rule_id: str, message: str, **details):
        self.results.append(ValidationResult(rule_id, ValidationLevel.BLOCK, message, details))

    def add_warning(self, rule_id: str, message: str, **details):
        self.results.append(ValidationResult(rule_id, ValidationLevel.WARNING, message, details))

    @property
    def has_blocks(self) -> bool:
        return any(r.is_blocking for r in self.results)

    @property
    def has_warnings(self) -> bool:
        return any(r.is_warning for r in self.results)

    @property
    def blocks(self) -> List[ValidationResult]:
        return [r for r in self.results if r.is_blocking]

    @property
    def warnings(self) -> List[ValidationResult]:
        return [r for r in self.results if r.is_warning]

    @property
    def is_valid(self) -> bool:
        return not self.has_blocks

    def rule_ids(self) -> List[str]:
        return [r.rule_id for r in self.results]

    def __bool__(self) -> bool:
        return self.is_valid

    def __len__(self) -> int:
        return len(self.results)
