##########################################################################################
#
# Script name: repository.py
#
# Description: In-memory article store and loader for YAML/JSON article snapshots.
#
##########################################################################################

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import yaml

from .models import Article
from .utils import parse_datetime_value


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

log = logging.getLogger(__name__)


# ****************************************************************************************
# Exceptions
# ****************************************************************************************


class Error(Exception):
    '''
    Base class for exceptions in this module.
    '''
    pass


class ArticleLoadError(Error):
    '''
    Raised when a snapshot file or one of its records cannot be turned into articles.
    '''
    def __init__(self, source, reason):
        self.message = f'Failed to load articles from {source}: {reason}'
        super().__init__(self.message)


class DuplicateArticleError(Error):
    '''
    Raised when two articles in one snapshot share an id.
    '''
    def __init__(self, article_id):
        self.message = f'Duplicate article id: {article_id}'
        super().__init__(self.message)


# ****************************************************************************************
# Repository
# ****************************************************************************************


class ArticleRepository:
    '''
    Read-only article store answering the two calls the ranker needs.
    '''

    def __init__(self, articles: list[Article] | None = None):
        self._articles: list[Article] = []
        self._by_id: dict[str, Article] = {}
        for article in articles or []:
            if article.id in self._by_id:
                raise DuplicateArticleError(article.id)
            self._articles.append(article)
            self._by_id[article.id] = article

    def __len__(self) -> int:
        return len(self._articles)

    def fetch_all(self) -> list[Article]:
        return list(self._articles)

    def fetch_by_id(self, article_id) -> Article | None:
        return self._by_id.get(str(article_id))

    @classmethod
    def from_file(cls, path: str | Path) -> 'ArticleRepository':
        return cls(load_articles(path))


# ****************************************************************************************
# Functions
# ****************************************************************************************


def _optional_text(value) -> str | None:
    if value is None:
        return None
    return str(value)


def _parse_sections(value, source) -> list[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ArticleLoadError(source, f'sections must be a list, got {type(value).__name__}')
    return [str(item) for item in value]


def make_article(record: dict, source='<memory>') -> Article:
    if not isinstance(record, dict):
        raise ArticleLoadError(source, f'article record must be a mapping, got {type(record).__name__}')
    if record.get('id') is None:
        raise ArticleLoadError(source, 'article record without id')
    article_id = str(record['id'])

    raw_date = record.get('publication_date', record.get('publicationDate'))
    publication_date = parse_datetime_value(raw_date)
    if publication_date is None:
        raise ArticleLoadError(source, f'article {article_id} has no valid publication date ({raw_date!r})')

    return Article(
        id=article_id,
        title=str(record.get('title') or ''),
        lead=_optional_text(record.get('lead')),
        body=_optional_text(record.get('body')),
        publication_date=publication_date,
        sections=_parse_sections(record.get('sections'), source),
        created_at=parse_datetime_value(record.get('created_at', record.get('createdAt'))),
        updated_at=parse_datetime_value(record.get('updated_at', record.get('updatedAt'))),
    )


def load_articles(path: str | Path) -> list[Article]:
    '''
    Read a YAML or JSON snapshot: a list of records, or a mapping with an `articles` list.
    '''
    with open(path, 'r', encoding='utf-8') as handle:
        try:
            payload = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ArticleLoadError(path, exc) from exc

    if payload is None:
        records = []
    elif isinstance(payload, dict):
        records = payload.get('articles') or []
    else:
        records = payload
    if not isinstance(records, list):
        raise ArticleLoadError(path, 'articles must be a list')

    articles = [make_article(record, source=path) for record in records]
    log.info('Loaded %d article(s) from %s.', len(articles), path)
    return articles


def build_sample_articles(now: datetime | None = None) -> list[Article]:
    if now is None:
        now = datetime.now(timezone.utc)
    templates = [
        ('Le Conseil fédéral présente son budget', ['Actualités', 'Suisse'], 0),
        ('Victoire à domicile pour le HC Genève', ['Sport', 'Hockey'], 1),
        ('Ouverture du festival de jazz de Montreux', ['Culture', 'Musique'], 2),
        ('Les taux hypothécaires repartent à la hausse', ['Économie'], 3),
        ('Un nouveau sentier didactique dans le Jura', [], 5),
        ('Alerte météo sur le bassin lémanique', ['Breaking', 'Actualités'], 0),
    ]
    articles: list[Article] = []
    for idx in range(18):
        title, sections, days_old = templates[idx % len(templates)]
        published = now - timedelta(days=days_old + idx // len(templates) * 10, hours=idx)
        body = ' '.join(['Texte de démonstration.'] * (10 + idx * 3))
        articles.append(
            Article(
                id=str(idx + 1),
                title=f'{title} ({idx + 1})',
                lead=f'Résumé pour {title.lower()}.' if idx % 2 == 0 else None,
                body=body,
                publication_date=published,
                sections=list(sections) or None,
                created_at=published,
                updated_at=published,
            )
        )
    return articles
