# File: robots_scout/document.py
"""
The parsed robots.txt document and the permission queries answered from it.
"""
from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Any, Dict, Iterable, List, Tuple

from robots_scout.anomalies import Anomaly
from robots_scout.rules import AgentSection, Rule
from robots_scout.utils import SiteUrl, UrlLike, path_of


@dataclass(frozen=True)
class RobotsDocument:
    """Result of :func:`robots_scout.parse`. Read-only; safe to share between callers."""

    host: SiteUrl
    sitemaps: Tuple[SiteUrl, ...] = ()
    agents: Tuple[AgentSection, ...] = ()
    anomalies: Tuple[Anomaly, ...] = ()

    def robots_url(self) -> SiteUrl:
        return self.host.robots_url()

    def get_sitemaps(self) -> List[SiteUrl]:
        return list(self.sitemaps)

    def get_toplevel_anomalies(self) -> List[Anomaly]:
        return list(self.anomalies)

    def get_agent_anomalies(self, agent: str) -> List[Anomaly]:
        """Anomalies of every section applying to *agent*, in section order."""
        return list(chain.from_iterable(s.anomalies for s in self.sections_for(agent)))

    def get_all_anomalies(self) -> List[Anomaly]:
        return list(chain(self.anomalies, *(s.anomalies for s in self.agents)))

    def sections_for(self, agent: str) -> List[AgentSection]:
        return [section for section in self.agents if section.applies(agent)]

    def rules_for(self, agent: str) -> List[Rule]:
        """Rules applying to *agent* in resolution order (least specific first).

        Wildcard sections come first, followed by the named sections in their
        document order (shortest name first). Each section contributes its rules
        already sorted by specificity; nothing is re-sorted across sections.
        """
        sections = self.sections_for(agent)
        ordered: Iterable[AgentSection] = chain(
            (s for s in sections if s.is_wildcard),
            (s for s in sections if not s.is_wildcard),
        )
        return list(chain.from_iterable(s.rules for s in ordered))

    def is_allowed(self, url: UrlLike, agent: str) -> bool:
        """May *agent* fetch *url*? The last applicable rule decides; no rule means allowed."""
        path = path_of(url)
        allowed = True
        for rule in self.rules_for(agent):
            if rule.applies(path):
                allowed = rule.allowance
        return allowed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "host": str(self.host),
            "sitemaps": [str(url) for url in self.sitemaps],
            "agents": [section.to_dict() for section in self.agents],
            "anomalies": [anomaly.to_dict() for anomaly in self.anomalies],
        }


__all__ = ["RobotsDocument"]
