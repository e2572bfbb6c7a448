"""
Pydantic models for the build orchestration layer.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .markup_repair.models import ValidationReport


class BuildAttempt(BaseModel):
    """One invocation of the deck compiler."""
    strategy: str = Field(description="normal | stripped | minimal")
    success: bool
    returncode: Optional[int] = None
    stderr: str = Field(default="", description="Compiler stderr for this attempt")


class BuildOutcome(BaseModel):
    """Result of a full escalating build run."""
    success: bool = False
    strategy: Optional[str] = Field(default=None, description="Strategy that produced a successful build")
    attempts: List[BuildAttempt] = Field(default_factory=list)
    error_line: Optional[int] = Field(default=None, description="Line reported by the first failed build")
    error_context: str = Field(default="", description="Document lines around error_line")
    validation: Optional[ValidationReport] = Field(
        default=None, description="Pre-check findings when the deck was sanitized first"
    )

    @property
    def last_stderr(self) -> str:
        return self.attempts[-1].stderr if self.attempts else ""
