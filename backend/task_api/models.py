"""Pydantic models shared by the task and validation endpoints."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

DEFAULT_DESCRIPTION = "Test case"


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TestCase(CamelModel):
    """A single string submitted for validation."""

    __test__ = False  # not a pytest test class
    model_config = ConfigDict(frozen=True)

    test_string: str
    description: Optional[str] = None


class ValidationResult(CamelModel):
    """Outcome of validating one ``TestCase``."""

    model_config = ConfigDict(frozen=True)

    test_string: str
    description: str = DEFAULT_DESCRIPTION
    is_valid: bool
    result: Literal["passed", "failed"]


class BatchSummary(CamelModel):
    """Aggregate counts over a batch of validation results."""

    model_config = ConfigDict(frozen=True)

    total: int
    passed: int
    failed: int
    pass_rate: float

    @field_serializer("pass_rate", when_used="json")
    def _render_pass_rate(self, value: float) -> str:
        return f"{value:.2f}%"


class BatchResult(CamelModel):
    results: List[ValidationResult]
    summary: BatchSummary


class BatchRequest(CamelModel):
    """Payload of ``POST /api/validate-batch``."""

    test_cases: List[TestCase]


class ValidateStringResponse(CamelModel):
    success: bool = True
    test_string: str
    description: str
    is_valid: bool
    result: Literal["passed", "failed"]
    message: str


class BatchResponse(BatchResult):
    success: bool = True


class Task(BaseModel):
    """A task kept in the in-memory task store."""

    id: int
    title: str
    completed: bool = False


class TaskCreate(BaseModel):
    # Optional so that a missing title is reported as 400 by the endpoint.
    title: Optional[str] = None
