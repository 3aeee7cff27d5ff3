##########################################################################################
#
# Script name: scoring.py
#
# Description: Interest score for a single article and similarity between two articles.
#
##########################################################################################

from __future__ import annotations

from datetime import datetime

from .config import (
    BREAKING_SECTION_BONUS,
    DEFAULT_CONFIG,
    MAJOR_SECTION_BONUS,
    RankingConfig,
)
from .models import Article
from .utils import whole_days_between


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

RECENCY_MAX = 50.0
RECENCY_DECAY_PER_DAY = 2.0
LEAD_BONUS = 5.0
BODY_THRESHOLDS = ((200, 10.0), (500, 5.0))
SECTION_POINTS = 5.0
SECTION_POINTS_CAP = 15.0

OVERLAP_WEIGHT = 70.0
PROXIMITY_MAX = 30.0
PROXIMITY_DECAY_PER_DAY = 4.0


# ****************************************************************************************
# Functions
# ****************************************************************************************


def _recency_score(article: Article, now: datetime) -> float:
    days_old = whole_days_between(article.publication_date, now)
    return max(0.0, RECENCY_MAX - days_old * RECENCY_DECAY_PER_DAY)


def _richness_score(article: Article) -> float:
    score = LEAD_BONUS if article.lead else 0.0
    body_length = len(article.body or '')
    for threshold, points in BODY_THRESHOLDS:
        if body_length > threshold:
            score += points
    return score


def _priority_bonus(sections: list[str], config: RankingConfig) -> float:
    # First matching section decides, in the article's own order.
    for section in sections:
        if section in config.breaking_sections:
            return BREAKING_SECTION_BONUS
        if section in config.major_sections:
            return MAJOR_SECTION_BONUS
    return 0.0


def interest_score(article: Article, now: datetime, config: RankingConfig = DEFAULT_CONFIG) -> float:
    '''
    Heuristic interest of one article at time `now`.

    Adds recency (up to 50, more for future-dated articles), lead and body richness
    (up to 20), topic breadth (up to 15) and a priority-section boost (15 or 10).
    '''
    sections = article.sections or []
    score = _recency_score(article, now)
    score += _richness_score(article)
    score += min(SECTION_POINTS_CAP, SECTION_POINTS * len(sections))
    score += _priority_bonus(sections, config)
    return score


def section_overlap(first: Article, second: Article) -> float:
    if not first.sections or not second.sections:
        return 0.0
    first_set = set(first.sections)
    second_set = set(second.sections)
    union = first_set | second_set
    if not union:
        return 0.0
    return len(first_set & second_set) / len(union) * OVERLAP_WEIGHT


def time_proximity(first: Article, second: Article, config: RankingConfig = DEFAULT_CONFIG) -> float:
    days_apart = abs(whole_days_between(first.publication_date, second.publication_date))
    if days_apart > config.similarity_window_days:
        return 0.0
    return max(0.0, PROXIMITY_MAX - days_apart * PROXIMITY_DECAY_PER_DAY)


def similarity(first: Article, second: Article, config: RankingConfig = DEFAULT_CONFIG) -> float:
    '''Section-set Jaccard overlap (up to 70) plus publication proximity (up to 30).'''
    return section_overlap(first, second) + time_proximity(first, second, config)
