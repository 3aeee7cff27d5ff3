from __future__ import annotations

import logging
from datetime import datetime, timedelta

from .config import DEFAULT_CONFIG, RankingConfig
from .models import Article, ScoredArticle
from .scoring import interest_score, similarity


log = logging.getLogger(__name__)


def _newest_first(articles: list[Article]) -> list[Article]:
    return sorted(articles, key=lambda item: item.publication_date, reverse=True)


def _pick_by_score(scored: list[ScoredArticle], max_items: int) -> list[Article]:
    # sorted() is stable, so equal scores keep snapshot order.
    ranked = sorted(scored, key=lambda item: item.score, reverse=True)
    return [item.article for item in ranked[:max_items]]


def group_by_primary_section(
    articles: list[Article],
    config: RankingConfig = DEFAULT_CONFIG,
) -> dict[str, list[Article]]:
    grouped: dict[str, list[Article]] = {}
    for article in articles:
        grouped.setdefault(article.primary_section(config.fallback_section), []).append(article)
    return grouped


def interesting_articles(
    articles: list[Article],
    limit: int,
    now: datetime,
    config: RankingConfig = DEFAULT_CONFIG,
) -> list[Article]:
    scored = [ScoredArticle(article, interest_score(article, now, config)) for article in articles]
    picks = _pick_by_score(scored, limit)
    log.debug('Picked %d of %d article(s) by interest (limit=%d).', len(picks), len(articles), limit)
    return picks


def interesting_articles_diversified(
    articles: list[Article],
    limit: int,
    now: datetime,
    config: RankingConfig = DEFAULT_CONFIG,
) -> list[Article]:
    '''
    Cap each primary section's share, then merge newest first.

    Each section keeps its best `max(1, limit // section_count)` articles by interest
    score. The merged picks are ordered by publication date, not by score.
    '''
    grouped = group_by_primary_section(articles, config)
    if not grouped:
        return []
    per_section = max(1, limit // len(grouped))

    picks: list[Article] = []
    for section_articles in grouped.values():
        scored = [ScoredArticle(article, interest_score(article, now, config)) for article in section_articles]
        picks.extend(_pick_by_score(scored, per_section))

    result = _newest_first(picks)[:limit]
    log.debug(
        'Diversified %d section(s) at %d per section into %d article(s).',
        len(grouped),
        per_section,
        len(result),
    )
    return result


def top_stories(
    articles: list[Article],
    count: int,
    now: datetime,
    config: RankingConfig = DEFAULT_CONFIG,
) -> list[Article]:
    return interesting_articles(articles, count, now, config)


def daily_digest(
    articles: list[Article],
    now: datetime,
    config: RankingConfig = DEFAULT_CONFIG,
) -> list[Article]:
    return interesting_articles_diversified(articles, config.digest_size, now, config)


def trending_by_section(
    articles: list[Article],
    section: str,
    count: int,
    now: datetime,
    config: RankingConfig = DEFAULT_CONFIG,
) -> list[Article]:
    cutoff = now - timedelta(days=config.trending_window_days)
    matches = [
        article
        for article in articles
        if article.has_section(section) and article.publication_date > cutoff
    ]
    return _newest_first(matches)[:count]


def highlights_by_category(
    articles: list[Article],
    per_category: int,
    config: RankingConfig = DEFAULT_CONFIG,
) -> dict[str, list[Article]]:
    highlights: dict[str, list[Article]] = {}
    for category in config.highlight_categories:
        picks = _newest_first([article for article in articles if article.has_section(category)])[:per_category]
        # Categories without a match are left out, not mapped to [].
        if picks:
            highlights[category] = picks
    return highlights


def recent_breaking_news(
    articles: list[Article],
    hours: int,
    now: datetime,
    config: RankingConfig = DEFAULT_CONFIG,
) -> list[Article]:
    cutoff = now - timedelta(hours=hours)
    matches = [
        article
        for article in articles
        if article.publication_date > cutoff and article.has_section(config.breaking_news_section)
    ]
    return _newest_first(matches)


def similar_articles(
    target: Article,
    articles: list[Article],
    count: int,
    config: RankingConfig = DEFAULT_CONFIG,
) -> list[Article]:
    scored = [
        ScoredArticle(article, similarity(target, article, config))
        for article in articles
        if article.id != target.id
    ]
    positive = [item for item in scored if item.score > 0]
    return _pick_by_score(positive, count)
