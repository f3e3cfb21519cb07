from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from gedcom_reader.core.diagnostics import DiagnosticLog

DUPLICATE_XREF_POLICIES = ("first", "last")


@dataclass(frozen=True)
class ParsePolicy:
    """
    Caller-tunable parse behaviour.

    duplicate_xref:  which declaration the symbol table keeps ("first"/"last").
    require_header:  treat a document without HEAD as unusable.
    """

    duplicate_xref: str = "last"
    require_header: bool = False

    def __post_init__(self) -> None:
        if self.duplicate_xref not in DUPLICATE_XREF_POLICIES:
            raise ValueError(
                f"duplicate_xref must be one of {DUPLICATE_XREF_POLICIES}, "
                f"got {self.duplicate_xref!r}"
            )

    @classmethod
    def from_config(cls, cfg: Any) -> "ParsePolicy":
        section = getattr(cfg, "parser", None) or {}
        return cls(
            duplicate_xref=str(section.get("duplicate_xref", "last")).lower(),
            require_header=bool(section.get("require_header", False)),
        )


@dataclass
class ParseContext:
    """
    State owned by a single parse invocation.
    Nothing here escapes the call except the finished diagnostics list.
    """

    policy: ParsePolicy = field(default_factory=ParsePolicy)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

