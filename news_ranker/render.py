##########################################################################################
#
# Script name: render.py
#
# Description: JSON rendering of ranked articles, highlight maps and statistics.
#
##########################################################################################

import json
from datetime import datetime
from pathlib import Path

from .models import Article, ArticleStatistics


# ****************************************************************************************
# Functions
# ****************************************************************************************


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def article_to_json(article: Article) -> dict:
    return {
        'id': article.id,
        'title': article.title,
        'lead': article.lead,
        'body': article.body,
        'publication_date': _iso(article.publication_date),
        'sections': list(article.sections) if article.sections is not None else None,
        'created_at': _iso(article.created_at),
        'updated_at': _iso(article.updated_at),
    }


def statistics_to_json(stats: ArticleStatistics) -> dict:
    return {
        'total_articles': stats.total_articles,
        'section_distribution': dict(stats.section_distribution),
        'oldest_article': _iso(stats.oldest_article),
        'newest_article': _iso(stats.newest_article),
        'average_word_count': stats.average_word_count,
    }


def to_payload(result):
    if isinstance(result, ArticleStatistics):
        return statistics_to_json(result)
    if isinstance(result, dict):
        return {key: [article_to_json(article) for article in articles] for key, articles in result.items()}
    return [article_to_json(article) for article in result]


def render_json(result) -> str:
    return json.dumps(to_payload(result), ensure_ascii=False, indent=2)


def write_json(result, output_path: str | Path) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_json(result) + '\n', encoding='utf-8')
    return path
