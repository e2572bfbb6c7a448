"""
Value types for the markup repair pipeline.

Dataclasses carry the intermediate results between passes (tokens, protected
regions, balance findings). The pydantic ValidationReport is what callers get
back from the advisory validator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


class TagKind(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    SELF_CLOSING = "self_closing"


@dataclass
class TagToken:
    """A tag-shaped sequence found in the working text."""
    name: str      # Case-folded element name
    kind: TagKind
    start: int     # Source span [start, end) in the scanned text
    end: int
    raw: str       # Exact source text of the tag


class RegionKind(str, Enum):
    FENCED = "F"
    INLINE = "I"


@dataclass
class VerbatimRegion:
    """A code region lifted out of the document during a repair pass."""
    kind: RegionKind
    index: int          # Discovery order within its kind
    text: str           # Original bytes, restored verbatim
    placeholder: str


@dataclass
class ProtectedDocument:
    """Masked working text plus the regions needed to restore it."""
    text: str
    marker: str
    regions: List[VerbatimRegion] = field(default_factory=list)

    def lookup(self) -> Dict[str, VerbatimRegion]:
        return {region.placeholder: region for region in self.regions}


@dataclass
class BalanceReport:
    """Tag balance findings for one scan."""
    orphan_closers: List[TagToken] = field(default_factory=list)
    unclosed_openers: List[TagToken] = field(default_factory=list)  # Innermost last

    @property
    def balanced(self) -> bool:
        return not self.orphan_closers and not self.unclosed_openers


class ValidationReport(BaseModel):
    """Advisory result of the structural validator."""
    valid: bool = Field(description="True when no suspicious structure was found")
    errors: List[str] = Field(default_factory=list, description="Human-readable findings")
