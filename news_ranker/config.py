##########################################################################################
#
# Script name: config.py
#
# Description: Section labels, ranking windows and CLI defaults for the article ranker.
#
##########################################################################################

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

# Sections that earn the biggest priority boost. "Breaking" is the English alias.
BREAKING_SECTIONS = [
    'Actualités',
    'Breaking',
]

MAJOR_SECTIONS = [
    'Sport',
    'Culture',
]

HIGHLIGHT_CATEGORIES = [
    'Sport',
    'Culture',
    'Actualités',
    'Économie',
]

BREAKING_NEWS_SECTION = 'Actualités'
FALLBACK_SECTION = 'Divers'

BREAKING_SECTION_BONUS = 15.0
MAJOR_SECTION_BONUS = 10.0

TRENDING_WINDOW_DAYS = 30
SIMILARITY_WINDOW_DAYS = 7
DIGEST_SIZE = 10

DEFAULT_INTERESTING_LIMIT = 10
DEFAULT_STORY_COUNT = 5
DEFAULT_ARTICLES_PER_CATEGORY = 3
DEFAULT_BREAKING_HOURS = 24

_LIST_KEYS = ('breaking_sections', 'major_sections', 'highlight_categories')
_STR_KEYS = ('breaking_news_section', 'fallback_section')
_INT_KEYS = ('trending_window_days', 'similarity_window_days', 'digest_size')


@dataclass(frozen=True)
class RankingConfig:
    breaking_sections: tuple[str, ...] = field(default_factory=lambda: tuple(BREAKING_SECTIONS))
    major_sections: tuple[str, ...] = field(default_factory=lambda: tuple(MAJOR_SECTIONS))
    highlight_categories: tuple[str, ...] = field(default_factory=lambda: tuple(HIGHLIGHT_CATEGORIES))
    breaking_news_section: str = BREAKING_NEWS_SECTION
    fallback_section: str = FALLBACK_SECTION
    trending_window_days: int = TRENDING_WINDOW_DAYS
    similarity_window_days: int = SIMILARITY_WINDOW_DAYS
    digest_size: int = DIGEST_SIZE


DEFAULT_CONFIG = RankingConfig()


# ****************************************************************************************
# Functions
# ****************************************************************************************


def load_ranking_config(path: str | Path) -> RankingConfig:
    '''
    Read a YAML mapping of ranking settings on top of the defaults.

    Unknown keys are ignored. List settings must be YAML lists.
    '''
    with open(path, 'r', encoding='utf-8') as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ValueError(f'Ranking config {path} must be a mapping')

    overrides: dict = {}
    for key in _LIST_KEYS:
        if key not in payload:
            continue
        value = payload[key]
        if not isinstance(value, list):
            raise ValueError(f'config.{key} must be a list')
        overrides[key] = tuple(str(item) for item in value)
    for key in _STR_KEYS:
        if key in payload:
            overrides[key] = str(payload[key])
    for key in _INT_KEYS:
        if key in payload:
            overrides[key] = int(payload[key])
    return replace(DEFAULT_CONFIG, **overrides)
