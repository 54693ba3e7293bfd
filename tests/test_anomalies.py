# File: tests/test_anomalies.py
from robots_scout.anomalies import (
    AnomalyKind,
    BadArgument,
    Casing,
    Comment,
    MissSectionedDirective,
    OrphanRule,
    RecursedUserAgent,
    RedundantWildcardUserAgent,
    UnknownDirective,
    UnknownFormat,
)
from robots_scout.rules import Disallow

ONE_OF_EACH = [
    Comment("# x", "Allow: /"),
    Casing("allow", "/"),
    OrphanRule(Disallow("/x")),
    RecursedUserAgent("b"),
    RedundantWildcardUserAgent("Bot"),
    MissSectionedDirective("Sitemap", "https://example.com/s.xml"),
    UnknownDirective("Crawl-delay", "10"),
    BadArgument("Sitemap", "nope"),
    UnknownFormat("garbage"),
]


def test_every_kind_is_covered():
    assert {a.kind for a in ONE_OF_EACH} == set(AnomalyKind)


def test_every_kind_renders():
    for anomaly in ONE_OF_EACH:
        text = str(anomaly)
        assert text.startswith(anomaly.header + ": ")
        assert anomaly.describe() in text


def test_rendering():
    assert str(Comment("# x", "Allow: /")) == "Comment: '# x' on 'Allow: /'"
    assert str(OrphanRule(Disallow("/x"))) == "Orphan rule: Disallow: /x"
    assert str(UnknownFormat("garbage")) == "Unknown format: 'garbage'"


def test_to_dict():
    assert OrphanRule(Disallow("/x")).to_dict() == {
        "kind": "orphan_rule",
        "header": "Orphan rule",
        "rule": {"allow": False, "path": "/x"},
    }
    assert Casing("allow", "/").to_dict() == {
        "kind": "casing",
        "header": "Casing",
        "directive": "allow",
        "argument": "/",
    }


def test_structural_equality_and_hashing():
    assert Comment("# x", "") == Comment("# x", "")
    assert Comment("# x", "") != Comment("# x", "[EOF]")
    assert UnknownDirective("A", "b") != BadArgument("A", "b")
    assert len(set(ONE_OF_EACH + ONE_OF_EACH)) == len(ONE_OF_EACH)
