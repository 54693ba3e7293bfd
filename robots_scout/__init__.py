# robots_scout/__init__.py
"""
RobotsScout package initializer.
Defines package version and exposes the parser and document model.
"""
__version__ = "0.1.0"

from robots_scout.anomalies import Anomaly, AnomalyKind
from robots_scout.document import RobotsDocument
from robots_scout.parser.robots_parser import parse
from robots_scout.parser.wildcard import matches
from robots_scout.rules import AgentSection, Allow, Disallow, Rule
from robots_scout.utils import SiteUrl

__all__ = [
    "AgentSection",
    "Allow",
    "Anomaly",
    "AnomalyKind",
    "Disallow",
    "RobotsDocument",
    "Rule",
    "SiteUrl",
    "matches",
    "parse",
]
