# File: robots_scout/parser/directives.py
"""
Directive interpretation: ``name: value`` pair -> structured action.

The interpreter is pure. It never records anomalies itself; callers inspect the
returned action (and :func:`is_miscased`) and record whatever applies at their
level of the document.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from robots_scout.rules import Rule
from robots_scout.utils import SiteUrl

USER_AGENT = "User-agent"
ALLOW = "Allow"
DISALLOW = "Disallow"
SITEMAP = "Sitemap"


@dataclass(frozen=True)
class NewAgent:
    name: str


@dataclass(frozen=True)
class NewRule:
    rule: Rule


@dataclass(frozen=True)
class NewSitemap:
    url: SiteUrl


@dataclass(frozen=True)
class InvalidArgument:
    """A recognised directive with an argument that does not validate."""

    reason: str


@dataclass(frozen=True)
class Unknown:
    pass


Action = Union[NewAgent, NewRule, NewSitemap, InvalidArgument, Unknown]


def is_miscased(directive: str) -> bool:
    """True when the directive starts with a lower-case letter."""
    return directive[:1].islower()


def normalize_casing(directive: str) -> str:
    """Upper-case the first character; the rest is left untouched."""
    return directive[:1].upper() + directive[1:]


def _user_agent(argument: str, host: Optional[SiteUrl]) -> Action:
    if not argument:
        return InvalidArgument("empty user-agent name")
    return NewAgent(argument)


def _allow(argument: str, host: Optional[SiteUrl]) -> Action:
    return NewRule(Rule.new(True, argument))


def _disallow(argument: str, host: Optional[SiteUrl]) -> Action:
    return NewRule(Rule.new(False, argument))


def _sitemap(argument: str, host: Optional[SiteUrl]) -> Action:
    # root-relative locations are resolved against the document host
    if host is not None and argument.startswith("/") and not argument.startswith("//"):
        return NewSitemap(host.with_path(argument))
    try:
        return NewSitemap(SiteUrl.parse_absolute(argument))
    except ValueError as exc:
        return InvalidArgument(str(exc))


_HANDLERS: Dict[str, Callable[[str, Optional[SiteUrl]], Action]] = {
    USER_AGENT: _user_agent,
    ALLOW: _allow,
    DISALLOW: _disallow,
    SITEMAP: _sitemap,
}


def interpret(directive: str, argument: str, host: Optional[SiteUrl] = None) -> Action:
    """Map a directive line onto an :data:`Action`.

    Args:
        directive: the directive name as written; a lower-case first letter is
            normalised before lookup.
        argument: the value after the ``:``, already stripped.
        host: document host used to resolve root-relative sitemap paths.
    """
    handler = _HANDLERS.get(normalize_casing(directive))
    if handler is None:
        return Unknown()
    return handler(argument, host)


__all__ = [
    "Action",
    "InvalidArgument",
    "NewAgent",
    "NewRule",
    "NewSitemap",
    "Unknown",
    "interpret",
    "is_miscased",
    "normalize_casing",
]
