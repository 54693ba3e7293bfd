# File: tests/conftest.py
import pytest

from robots_scout import SiteUrl

#: the simplest robots.txt file
ROBOTS_SIMPLE = "User-agent:* \nDisallow:/ \n"

#: overlapping agent names with interacting Allow/Disallow rules
ROBOTS_OVERLAPPING = (
    "User-agent:* \n"
    "Disallow:/foo \n"
    "\n"
    "User-agent:Bot \n"
    "Allow:/foo/bar \n"
    "\n"
    "User-agent:Bot-1 \n"
    "Disallow:/foo/bar/baz \n"
)

ROBOTS_SITEMAPS = (
    "Sitemap:http://www.example.web/sitemap.xml \n"
    "Sitemap:http://www.example.web/sitemaps/archive1.xml \n"
    "Sitemap:https://www.example.web/a/man/with/three/buttons/sitemap.xml \n"
)

#: closer to what is found in the wild: grouped agents, wildcards, comments, sitemaps
ROBOTS_WILD = (
    "User-agent:* \n"
    "Disallow:/admin/ \n"
    "Disallow:/cgi/ \n"
    "Disallow:/beta/ \n"
    "Disallow:/*/comments/*/ \n"
    "Disallow:/*.embed \n"
    "\n"
    "# 80legs \n"
    "User-agent: 008 \n"
    "User-agent: voltron \n"
    "Disallow:/ \n"
    "\n"
    "User-agent: bender \n"
    "Disallow: /my_shiny_metal_ass \n"
    "\n"
    "Sitemap: https://www.example.web/sitemaps/sitemap-section.xml \n"
    "Sitemap: https://www.example.web/sitemaps/foo/index.xml \n"
)


@pytest.fixture()
def host() -> SiteUrl:
    """Host identity the test documents are served from."""
    return SiteUrl.parse_absolute("https://example.com/")


@pytest.fixture()
def robots_simple() -> str:
    return ROBOTS_SIMPLE


@pytest.fixture()
def robots_overlapping() -> str:
    return ROBOTS_OVERLAPPING


@pytest.fixture()
def robots_sitemaps() -> str:
    return ROBOTS_SITEMAPS


@pytest.fixture()
def robots_wild() -> str:
    return ROBOTS_WILD
