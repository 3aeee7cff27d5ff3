from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    publication_date: datetime
    lead: str | None = None
    body: str | None = None
    sections: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_section(self, label: str) -> bool:
        return label in (self.sections or [])

    def primary_section(self, fallback: str) -> str:
        if self.sections:
            return self.sections[0]
        return fallback


@dataclass(frozen=True)
class ScoredArticle:
    article: Article
    score: float


@dataclass
class ArticleStatistics:
    total_articles: int
    section_distribution: dict[str, int] = field(default_factory=dict)
    oldest_article: datetime | None = None
    newest_article: datetime | None = None
    average_word_count: int = 0
