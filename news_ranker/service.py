from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from . import curation
from .analysis import analyze_articles
from .config import DEFAULT_CONFIG, RankingConfig
from .models import Article, ArticleStatistics
from .utils import utc_now


log = logging.getLogger(__name__)


class ArticleService:
    '''
    Runs ranking operations against a repository.

    Every operation fetches one snapshot and reads the clock once, so all articles in
    a call are scored against the same "now".
    '''

    def __init__(
        self,
        repository,
        config: RankingConfig = DEFAULT_CONFIG,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.config = config
        self.clock = clock

    def _snapshot(self) -> list[Article]:
        articles = list(self.repository.fetch_all())
        log.debug('Fetched snapshot of %d article(s).', len(articles))
        return articles

    def interesting_articles(self, limit: int) -> list[Article]:
        return curation.interesting_articles(self._snapshot(), limit, self.clock(), self.config)

    def interesting_articles_diversified(self, limit: int) -> list[Article]:
        return curation.interesting_articles_diversified(self._snapshot(), limit, self.clock(), self.config)

    def top_stories(self, count: int) -> list[Article]:
        return curation.top_stories(self._snapshot(), count, self.clock(), self.config)

    def daily_digest(self) -> list[Article]:
        return curation.daily_digest(self._snapshot(), self.clock(), self.config)

    def trending_by_section(self, section: str, count: int) -> list[Article]:
        return curation.trending_by_section(self._snapshot(), section, count, self.clock(), self.config)

    def highlights_by_category(self, per_category: int) -> dict[str, list[Article]]:
        return curation.highlights_by_category(self._snapshot(), per_category, self.config)

    def recent_breaking_news(self, hours: int) -> list[Article]:
        return curation.recent_breaking_news(self._snapshot(), hours, self.clock(), self.config)

    def similar_articles(self, article_id, count: int) -> list[Article]:
        target = self.repository.fetch_by_id(article_id)
        if target is None:
            log.info('No article with id %s; nothing to compare.', article_id)
            return []
        return curation.similar_articles(target, self._snapshot(), count, self.config)

    def statistics(self) -> ArticleStatistics:
        return analyze_articles(self._snapshot(), self.clock())
