from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import datetime

from .models import Article, ArticleStatistics
from .utils import word_count


log = logging.getLogger(__name__)


def analyze_articles(articles: Iterable[Article], now: datetime) -> ArticleStatistics:
    '''
    Summarize a snapshot in one pass.

    The date range folds from `now` (oldest) and the minimum datetime (newest), so an
    empty snapshot reports oldest == now and newest == datetime.min.
    '''
    section_counts: Counter[str] = Counter()
    oldest = now
    newest = datetime.min.replace(tzinfo=now.tzinfo)
    total_words = 0
    total = 0

    for article in articles:
        total += 1
        # dict.fromkeys keeps first-seen order and drops repeated labels.
        section_counts.update(dict.fromkeys(article.sections or [], 1))
        if article.publication_date < oldest:
            oldest = article.publication_date
        if article.publication_date > newest:
            newest = article.publication_date
        total_words += word_count(article.body)

    log.debug('Analyzed %d article(s) covering %d section(s).', total, len(section_counts))
    return ArticleStatistics(
        total_articles=total,
        section_distribution=dict(section_counts),
        oldest_article=oldest,
        newest_article=newest,
        average_word_count=total_words // total if total else 0,
    )
