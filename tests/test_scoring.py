##########################################################################################
#
# Script name: test_scoring.py
#
# Description: Interest score terms and the first-match priority rule.
#
##########################################################################################

from datetime import datetime, timedelta, timezone

import pytest

from news_ranker.config import RankingConfig
from news_ranker.models import Article
from news_ranker.scoring import interest_score


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _article(**overrides) -> Article:
    fields = {
        'id': 'a1',
        'title': 'Title',
        'publication_date': NOW,
    }
    fields.update(overrides)
    return Article(**fields)


def test_rich_sport_article_published_today_scores_ninety() -> None:
    article = _article(lead='A lead', body='x' * 600, sections=['Sport', 'Culture'])
    assert interest_score(article, NOW) == 90


def test_bare_article_only_gets_recency() -> None:
    assert interest_score(_article(), NOW) == 50


@pytest.mark.parametrize(
    ('age', 'expected'),
    [
        (timedelta(days=10), 30),
        (timedelta(days=1, hours=23), 48),
        (timedelta(days=25), 0),
        (timedelta(days=40), 0),
    ],
)
def test_recency_decays_two_points_per_whole_day(age: timedelta, expected: float) -> None:
    assert interest_score(_article(publication_date=NOW - age), NOW) == expected


def test_future_article_gets_more_than_fifty_recency_points() -> None:
    article = _article(publication_date=NOW + timedelta(days=2))
    assert interest_score(article, NOW) == 54


@pytest.mark.parametrize(
    ('length', 'expected'),
    [(200, 50), (201, 60), (500, 60), (501, 65)],
)
def test_body_length_thresholds_stack(length: int, expected: float) -> None:
    assert interest_score(_article(body='b' * length), NOW) == expected


def test_empty_lead_earns_nothing() -> None:
    assert interest_score(_article(lead=''), NOW) == 50
    assert interest_score(_article(lead='Something'), NOW) == 55


def test_section_count_term_is_capped_at_fifteen() -> None:
    article = _article(sections=['A', 'B', 'C', 'D'])
    assert interest_score(article, NOW) == 65


def test_priority_bonus_uses_first_matching_section() -> None:
    major_first = _article(sections=['Sport', 'Actualités'])
    breaking_first = _article(sections=['Actualités', 'Sport'])
    # 50 recency + 10 for two sections, then the bonus of the first match only.
    assert interest_score(major_first, NOW) == 70
    assert interest_score(breaking_first, NOW) == 75


def test_priority_bonus_skips_unknown_sections_before_a_match() -> None:
    article = _article(sections=['Suisse', 'Breaking'])
    assert interest_score(article, NOW) == 75


def test_priority_labels_come_from_config() -> None:
    config = RankingConfig(breaking_sections=('Météo',), major_sections=())
    article = _article(sections=['Sport', 'Météo'])
    assert interest_score(article, NOW, config) == 75


def test_score_is_non_negative_and_deterministic() -> None:
    article = _article(publication_date=NOW - timedelta(days=400), sections=[])
    first = interest_score(article, NOW)
    assert first >= 0
    assert interest_score(article, NOW) == first
