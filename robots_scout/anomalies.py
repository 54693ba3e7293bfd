# File: robots_scout/anomalies.py
"""
Anomalies: everything in a robots.txt file that is observed but not acted upon.

Each category is a frozen dataclass carrying the raw strings involved. Headers and
one-line descriptions come from the static tables at the bottom of the module, so
adding a category means adding a class and two table rows.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Dict

if TYPE_CHECKING:
    from robots_scout.rules import Rule


class AnomalyKind(str, Enum):
    COMMENT = "comment"
    CASING = "casing"
    ORPHAN_RULE = "orphan_rule"
    RECURSED_USER_AGENT = "recursed_user_agent"
    REDUNDANT_WILDCARD_USER_AGENT = "redundant_wildcard_user_agent"
    MISS_SECTIONED_DIRECTIVE = "miss_sectioned_directive"
    UNKNOWN_DIRECTIVE = "unknown_directive"
    BAD_ARGUMENT = "bad_argument"
    UNKNOWN_FORMAT = "unknown_format"


@dataclass(frozen=True)
class Anomaly:
    """Base class of all anomaly categories."""

    kind: ClassVar[AnomalyKind]

    @property
    def header(self) -> str:
        return _HEADERS[self.kind]

    def describe(self) -> str:
        return _FORMATTERS[self.kind](self)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form used by reports."""
        data: Dict[str, Any] = {"kind": self.kind.value, "header": self.header}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.to_dict() if hasattr(value, "to_dict") else value
        return data

    def __str__(self) -> str:
        return f"{self.header}: {self.describe()}"


@dataclass(frozen=True)
class Comment(Anomaly):
    """A comment and the line it was attached to (empty or ``[EOF]`` when none followed)."""

    kind: ClassVar[AnomalyKind] = AnomalyKind.COMMENT
    text: str
    context: str


@dataclass(frozen=True)
class Casing(Anomaly):
    """A directive recognised only after upper-casing its first character."""

    kind: ClassVar[AnomalyKind] = AnomalyKind.CASING
    directive: str
    argument: str


@dataclass(frozen=True)
class OrphanRule(Anomaly):
    """An Allow/Disallow line outside of any agent section."""

    kind: ClassVar[AnomalyKind] = AnomalyKind.ORPHAN_RULE
    rule: Rule


@dataclass(frozen=True)
class RecursedUserAgent(Anomaly):
    """A User-agent line inside a section that already has rules; the name is dropped."""

    kind: ClassVar[AnomalyKind] = AnomalyKind.RECURSED_USER_AGENT
    name: str


@dataclass(frozen=True)
class RedundantWildcardUserAgent(Anomaly):
    """A specific agent name sharing a section with the ``*`` wildcard."""

    kind: ClassVar[AnomalyKind] = AnomalyKind.REDUNDANT_WILDCARD_USER_AGENT
    name: str


@dataclass(frozen=True)
class MissSectionedDirective(Anomaly):
    """A section-only directive at the root, or a root-only directive in a section."""

    kind: ClassVar[AnomalyKind] = AnomalyKind.MISS_SECTIONED_DIRECTIVE
    directive: str
    argument: str


@dataclass(frozen=True)
class UnknownDirective(Anomaly):
    kind: ClassVar[AnomalyKind] = AnomalyKind.UNKNOWN_DIRECTIVE
    directive: str
    argument: str


@dataclass(frozen=True)
class BadArgument(Anomaly):
    """A recognised directive whose argument does not validate."""

    kind: ClassVar[AnomalyKind] = AnomalyKind.BAD_ARGUMENT
    directive: str
    argument: str


@dataclass(frozen=True)
class UnknownFormat(Anomaly):
    """A non-empty, non-comment line without a ``:`` separator."""

    kind: ClassVar[AnomalyKind] = AnomalyKind.UNKNOWN_FORMAT
    line: str


# --------------------------------------------------------------------------- #
# Presentation tables                                                         #
# --------------------------------------------------------------------------- #

_HEADERS: Dict[AnomalyKind, str] = {
    AnomalyKind.COMMENT: "Comment",
    AnomalyKind.CASING: "Casing",
    AnomalyKind.ORPHAN_RULE: "Orphan rule",
    AnomalyKind.RECURSED_USER_AGENT: "Recursed user-agent",
    AnomalyKind.REDUNDANT_WILDCARD_USER_AGENT: "Redundant wildcard user-agent",
    AnomalyKind.MISS_SECTIONED_DIRECTIVE: "Miss-sectioned directive",
    AnomalyKind.UNKNOWN_DIRECTIVE: "Unknown directive",
    AnomalyKind.BAD_ARGUMENT: "Bad argument",
    AnomalyKind.UNKNOWN_FORMAT: "Unknown format",
}

_FORMATTERS: Dict[AnomalyKind, Callable[[Any], str]] = {
    AnomalyKind.COMMENT: lambda a: f"{a.text!r} on {a.context!r}",
    AnomalyKind.CASING: lambda a: f"{a.directive}: {a.argument}",
    AnomalyKind.ORPHAN_RULE: lambda a: str(a.rule),
    AnomalyKind.RECURSED_USER_AGENT: lambda a: f"User-agent: {a.name}",
    AnomalyKind.REDUNDANT_WILDCARD_USER_AGENT: lambda a: f"User-agent: {a.name}",
    AnomalyKind.MISS_SECTIONED_DIRECTIVE: lambda a: f"{a.directive}: {a.argument}",
    AnomalyKind.UNKNOWN_DIRECTIVE: lambda a: f"{a.directive}: {a.argument}",
    AnomalyKind.BAD_ARGUMENT: lambda a: f"{a.directive}: {a.argument}",
    AnomalyKind.UNKNOWN_FORMAT: lambda a: repr(a.line),
}

__all__ = [
    "Anomaly",
    "AnomalyKind",
    "BadArgument",
    "Casing",
    "Comment",
    "MissSectionedDirective",
    "OrphanRule",
    "RecursedUserAgent",
    "RedundantWildcardUserAgent",
    "UnknownDirective",
    "UnknownFormat",
]
