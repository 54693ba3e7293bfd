# File: robots_scout/utils.py
"""robots_scout.utils: Представление URL хоста и путей, с которыми работает парсер robots.txt."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Sequence, Union
from urllib.parse import urlsplit, urlunsplit

from pydantic import HttpUrl, TypeAdapter, ValidationError

__all__: Sequence[str] = (
    "SiteUrl",
    "UrlLike",
    "path_of",
    "path_segments",
    "path_specificity",
)

_HTTP_URL: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)
_PATH_END = re.compile(r"[?#]")


@dataclass(frozen=True, slots=True)
class SiteUrl:
    """Неизменяемый URL: схема, хост, путь. Изменение пути возвращает копию."""

    scheme: str
    netloc: str
    path: str = "/"
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, url: str) -> SiteUrl:
        """Разбирает произвольную строку URL без проверки абсолютности."""
        parts = urlsplit(url.strip())
        return cls(parts.scheme.lower(), parts.netloc, parts.path or "/", parts.query, parts.fragment)

    @classmethod
    def parse_absolute(cls, url: str) -> SiteUrl:
        """Разбирает абсолютный http(s) URL; иначе бросает ValueError."""
        try:
            _HTTP_URL.validate_python(url.strip())
        except ValidationError as exc:
            raise ValueError(f"Not an absolute http(s) URL: {url!r}") from exc
        return cls.parse(url)

    @property
    def host(self) -> str:
        return self.netloc.lower()

    def same_host(self, other: SiteUrl) -> bool:
        """Сравнивает хосты без учёта регистра (и схемы)."""
        return self.host == other.host

    def with_path(self, path: str) -> SiteUrl:
        """Возвращает копию с заменённым путём; query и fragment сбрасываются."""
        if not path.startswith("/"):
            path = "/" + path
        return replace(self, path=path, query="", fragment="")

    def robots_url(self) -> SiteUrl:
        """Предполагаемое расположение robots.txt в корне хоста."""
        return self.with_path("/robots.txt")

    def __str__(self) -> str:
        return urlunsplit((self.scheme, self.netloc, self.path, self.query, self.fragment))


UrlLike = Union[SiteUrl, str]


def path_of(url: UrlLike) -> str:
    """Путь URL или «голого» пути; пустой путь считается корнем."""
    if isinstance(url, SiteUrl):
        return url.path or "/"
    text = url.strip()
    if "://" in text:
        return urlsplit(text).path or "/"
    # голый путь: "//admin" остаётся путём, а не хостом
    return _PATH_END.split(text, maxsplit=1)[0] or "/"


def path_segments(path: str) -> list[str]:
    """Непустые сегменты пути, разделённые '/'."""
    return [segment for segment in path.split("/") if segment]


def path_specificity(path: str) -> int:
    """Специфичность пути: число непустых сегментов."""
    return len(path_segments(path))
