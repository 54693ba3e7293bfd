# File: robots_scout/parser/robots_parser.py
"""robots_scout.parser.robots_parser: line-by-line state machine turning robots.txt text into a RobotsDocument.

Two layers of state. At the root the parser is either idle, buffering a comment
that has not yet seen its context, or inside an agent section. Inside a section a
second, section-local layer tracks its own comment buffer. Each transition
returns the next state object; the enclosing state holds the section state by
value and replaces it on every line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Union

from robots_scout.anomalies import (
    Anomaly,
    BadArgument,
    Casing,
    Comment,
    MissSectionedDirective,
    OrphanRule,
    UnknownDirective,
    UnknownFormat,
)
from robots_scout.document import RobotsDocument
from robots_scout.logger import get_logger
from robots_scout.parser.directives import (
    InvalidArgument,
    NewAgent,
    NewRule,
    NewSitemap,
    interpret,
    is_miscased,
    normalize_casing,
)
from robots_scout.rules import AgentSection
from robots_scout.utils import SiteUrl, UrlLike

logger = get_logger("parser")

EOF_CONTEXT = "[EOF]"
COMMENT_MARK = "#"
SEPARATOR = ":"

_ARGUMENT_LEAD = re.compile(r"^[\s:]+")


def _buffer(pending: Optional[str], line: str) -> str:
    return line if pending is None else f"{pending}\n{line}"


def _flush(sink: Callable[[Anomaly], None], pending: Optional[str], context: str) -> None:
    if pending is not None:
        sink(Comment(pending, context))


@dataclass
class _Draft:
    """Document contents collected while parsing."""

    host: SiteUrl
    sitemaps: List[SiteUrl] = field(default_factory=list)
    agents: List[AgentSection] = field(default_factory=list)
    anomalies: List[Anomaly] = field(default_factory=list)

    def build(self) -> RobotsDocument:
        return RobotsDocument(
            host=self.host,
            sitemaps=tuple(self.sitemaps),
            agents=tuple(sorted(self.agents)),
            anomalies=tuple(self.anomalies),
        )


# --------------------------------------------------------------------------- #
# Section-local layer                                                         #
# --------------------------------------------------------------------------- #


class _SectionState:
    __slots__ = ("section", "pending")

    def __init__(self, section: AgentSection, pending: Optional[str] = None) -> None:
        self.section = section
        self.pending = pending

    def comment(self, line: str) -> _SectionState:
        return _SectionState(self.section, _buffer(self.pending, line))

    def context_comment(self, context: str, comment: str) -> _SectionState:
        _flush(self.section.add_anomaly, self.pending, context)
        self.section.add_anomaly(Comment(comment, context))
        return _SectionState(self.section)

    def directive(self, name: str, argument: str, host: SiteUrl) -> _SectionState:
        section = self.section
        _flush(section.add_anomaly, self.pending, f"{name}: {argument}")
        if is_miscased(name):
            section.add_anomaly(Casing(name, argument))
        directive = normalize_casing(name)

        action = interpret(name, argument, host)
        if isinstance(action, NewAgent):
            section.add_agent(action.name)
        elif isinstance(action, NewRule):
            section.add_rule(action.rule)
        elif isinstance(action, NewSitemap):
            section.add_anomaly(MissSectionedDirective(directive, argument))
        elif isinstance(action, InvalidArgument):
            section.add_anomaly(BadArgument(directive, argument))
        else:
            section.add_anomaly(UnknownDirective(directive, argument))
        return _SectionState(section)

    def anomaly(self, line: str) -> _SectionState:
        if self.pending is not None:
            self.section.add_anomaly(Comment(self.pending, line))
        else:
            self.section.add_anomaly(UnknownFormat(line))
        return _SectionState(self.section)

    def close(self, context: str) -> AgentSection:
        _flush(self.section.add_anomaly, self.pending, context)
        return self.section.close()


# --------------------------------------------------------------------------- #
# Root layer                                                                  #
# --------------------------------------------------------------------------- #


class _RootState:
    """Outside of any agent section, optionally holding a buffered comment."""

    __slots__ = ("draft", "pending")

    def __init__(self, draft: _Draft, pending: Optional[str] = None) -> None:
        self.draft = draft
        self.pending = pending

    def empty_line(self) -> _State:
        _flush(self.draft.anomalies.append, self.pending, "")
        return _RootState(self.draft)

    def comment(self, line: str) -> _State:
        return _RootState(self.draft, _buffer(self.pending, line))

    def context_comment(self, context: str, comment: str) -> _State:
        _flush(self.draft.anomalies.append, self.pending, context)
        self.draft.anomalies.append(Comment(comment, context))
        return _RootState(self.draft)

    def directive(self, name: str, argument: str) -> _State:
        draft = self.draft
        _flush(draft.anomalies.append, self.pending, f"{name}: {argument}")
        if is_miscased(name):
            draft.anomalies.append(Casing(name, argument))
        directive = normalize_casing(name)

        action = interpret(name, argument, draft.host)
        if isinstance(action, NewAgent):
            return _AgentState(draft, _SectionState(AgentSection.new(action.name)))
        if isinstance(action, NewRule):
            draft.anomalies.append(OrphanRule(action.rule))
        elif isinstance(action, NewSitemap):
            draft.sitemaps.append(action.url)
        elif isinstance(action, InvalidArgument):
            draft.anomalies.append(BadArgument(directive, argument))
        else:
            draft.anomalies.append(UnknownDirective(directive, argument))
        return _RootState(draft)

    def anomaly(self, line: str) -> _State:
        if self.pending is not None:
            self.draft.anomalies.append(Comment(self.pending, line))
        else:
            self.draft.anomalies.append(UnknownFormat(line))
        return _RootState(self.draft)

    def eof(self) -> RobotsDocument:
        _flush(self.draft.anomalies.append, self.pending, EOF_CONTEXT)
        return self.draft.build()


class _AgentState:
    """Inside an agent section; section-level lines go to the nested state."""

    __slots__ = ("draft", "inner")

    def __init__(self, draft: _Draft, inner: _SectionState) -> None:
        self.draft = draft
        self.inner = inner

    def empty_line(self) -> _State:
        self.draft.agents.append(self.inner.close(""))
        return _RootState(self.draft)

    def comment(self, line: str) -> _State:
        return _AgentState(self.draft, self.inner.comment(line))

    def context_comment(self, context: str, comment: str) -> _State:
        return _AgentState(self.draft, self.inner.context_comment(context, comment))

    def directive(self, name: str, argument: str) -> _State:
        return _AgentState(self.draft, self.inner.directive(name, argument, self.draft.host))

    def anomaly(self, line: str) -> _State:
        return _AgentState(self.draft, self.inner.anomaly(line))

    def eof(self) -> RobotsDocument:
        self.draft.agents.append(self.inner.close(EOF_CONTEXT))
        return self.draft.build()


_State = Union[_RootState, _AgentState]


# --------------------------------------------------------------------------- #
# Driver                                                                      #
# --------------------------------------------------------------------------- #


def _lines(text: str) -> Iterator[str]:
    """Trimmed lines split on ``\\n`` / ``\\r\\n``; a final newline adds no empty line."""
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for raw in lines:
        yield raw.strip()


def _consume(state: _State, line: str) -> _State:
    if not line:
        return state.empty_line()

    if line.startswith(COMMENT_MARK):
        return state.comment(line)
    if COMMENT_MARK in line:
        content, _, remark = line.partition(COMMENT_MARK)
        content = content.strip()
        state = state.context_comment(content, COMMENT_MARK + remark)
        line = content

    if SEPARATOR in line:
        name, _, argument = line.partition(SEPARATOR)
        return state.directive(name.rstrip(), _ARGUMENT_LEAD.sub("", argument))
    return state.anomaly(line)


def parse(host: UrlLike, text: str) -> RobotsDocument:
    """Parse robots.txt *text* served by *host*.

    Never fails on content: malformed, misplaced or unknown lines are recorded
    as anomalies on the returned document. Raises ValueError only when *host*
    is a string that is not an absolute http(s) URL.
    """
    site = host if isinstance(host, SiteUrl) else SiteUrl.parse_absolute(host)
    state: _State = _RootState(_Draft(site))
    for line in _lines(text):
        state = _consume(state, line)
    document = state.eof()
    logger.debug(
        "Parsed robots.txt for %s: %d sections, %d sitemaps, %d anomalies",
        site.host,
        len(document.agents),
        len(document.sitemaps),
        len(document.get_all_anomalies()),
    )
    return document


__all__ = ["EOF_CONTEXT", "parse"]
