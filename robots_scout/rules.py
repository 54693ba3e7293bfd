# File: robots_scout/rules.py
"""
Allow/Disallow rules and the agent sections that group them.

Rules order by specificity (number of non-empty path segments); at equal
specificity a Disallow sorts before an Allow, so in an ascending scan the Allow
is seen last and wins the tie. Sections order by the shortest of their names,
with wildcard sections last.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Sequence, Tuple

from robots_scout.anomalies import (
    Anomaly,
    RecursedUserAgent,
    RedundantWildcardUserAgent,
)
from robots_scout.parser.wildcard import WILDCARD, matches
from robots_scout.utils import path_segments, path_specificity

ROOT_PATH = "/"


@dataclass(frozen=True)
class Rule:
    """A single path rule. Use :class:`Allow`, :class:`Disallow` or :meth:`Rule.new`.

    ``<``/``<=``/``>``/``>=`` and :meth:`compare` look only at ``(specificity,
    allowance)``, while ``==`` and ``hash`` are the dataclass ones (type and
    path). ``Disallow("/a")`` and ``Disallow("/b")`` are therefore neither less
    nor greater than each other, yet not equal. The four operators are written
    out because ``functools.total_ordering`` would derive ``<=`` from ``==``.
    """

    path: str = ROOT_PATH

    allowance: ClassVar[bool] = False
    directive: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if not self.path:
            object.__setattr__(self, "path", ROOT_PATH)

    @staticmethod
    def new(allowance: bool, path: str) -> Rule:
        return Allow(path) if allowance else Disallow(path)

    @property
    def specificity(self) -> int:
        return path_specificity(self.path)

    def applies(self, url_path: str) -> bool:
        """True if this rule governs *url_path*.

        Every segment of the rule must match (with ``*`` wildcards) the segment at
        the same depth of the URL path; the URL may be deeper than the rule.
        """
        if self.path == ROOT_PATH:
            return True
        rule_segments = path_segments(self.path)
        url_segments = path_segments(url_path)
        if len(url_segments) < len(rule_segments):
            return False
        return all(matches(url_seg, rule_seg) for url_seg, rule_seg in zip(url_segments, rule_segments))

    # ordering ------------------------------------------------------------- #

    def order_key(self) -> Tuple[int, bool]:
        return self.specificity, self.allowance

    def compare(self, other: Rule) -> int:
        """Three-way comparison: -1, 0 or 1."""
        left, right = self.order_key(), other.order_key()
        return (left > right) - (left < right)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self.order_key() < other.order_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self.order_key() <= other.order_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self.order_key() > other.order_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self.order_key() >= other.order_key()

    def to_dict(self) -> Dict[str, Any]:
        return {"allow": self.allowance, "path": self.path}

    def __str__(self) -> str:
        return f"{self.directive}: {self.path}"


@dataclass(frozen=True)
class Allow(Rule):
    allowance: ClassVar[bool] = True
    directive: ClassVar[str] = "Allow"


@dataclass(frozen=True)
class Disallow(Rule):
    allowance: ClassVar[bool] = False
    directive: ClassVar[str] = "Disallow"


@dataclass
class AgentSection:
    """Rules following one or more ``User-agent`` lines, plus the anomalies seen there.

    A section is built up by the parser and then frozen by :meth:`close`: the
    collections become tuples (rules sorted) and further ``add_*`` calls raise
    ``RuntimeError``.
    """

    names: Sequence[str]
    rules: Sequence[Rule] = field(default_factory=list)
    anomalies: Sequence[Anomaly] = field(default_factory=list)
    closed: bool = field(default=False, compare=False, repr=False)

    @classmethod
    def new(cls, name: str) -> AgentSection:
        return cls(names=[name])

    @property
    def is_wildcard(self) -> bool:
        return WILDCARD in self.names

    @property
    def specificity(self) -> int:
        """Length of the shortest name."""
        return min((len(name) for name in self.names), default=0)

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError(f"section {list(self.names)!r} is closed")

    def add_agent(self, name: str) -> None:
        """Add another name to the section, unless rules were already declared.

        A User-agent line after rules is ambiguous (a new group without a blank
        line); the name is dropped and recorded as RecursedUserAgent.
        """
        self._check_open()
        if self.rules:
            self.anomalies.append(RecursedUserAgent(name))
            return
        if (name == WILDCARD or self.is_wildcard) and name not in self.names:
            self.anomalies.append(RedundantWildcardUserAgent(name))
        self.names.append(name)

    def add_rule(self, rule: Rule) -> None:
        self._check_open()
        self.rules.append(rule)

    def add_anomaly(self, anomaly: Anomaly) -> None:
        self._check_open()
        self.anomalies.append(anomaly)

    def close(self) -> AgentSection:
        """Sort the rules and freeze the section; idempotent."""
        if not self.closed:
            self.names = tuple(self.names)
            self.rules = tuple(sorted(self.rules))
            self.anomalies = tuple(self.anomalies)
            self.closed = True
        return self

    def applies(self, agent: str) -> bool:
        return any(name == WILDCARD or agent.startswith(name) for name in self.names)

    def order_key(self) -> Tuple[bool, int]:
        return self.is_wildcard, self.specificity

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AgentSection):
            return NotImplemented
        return self.order_key() < other.order_key()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "names": list(self.names),
            "rules": [rule.to_dict() for rule in self.rules],
            "anomalies": [anomaly.to_dict() for anomaly in self.anomalies],
        }


__all__ = ["ROOT_PATH", "Rule", "Allow", "Disallow", "AgentSection"]
