##########################################################################################
#
# Script name: test_main.py
#
# Description: CLI subcommands against a snapshot file and a fixed reference time.
#
##########################################################################################

import json
from pathlib import Path

import pytest

from news_ranker.main import main


NOW = '2026-03-01T12:00:00Z'


def _snapshot(tmp_path: Path) -> Path:
    path = tmp_path / 'articles.json'
    records = [
        {
            'id': 1,
            'title': 'Derby',
            'lead': 'Résumé',
            'body': 'x' * 600,
            'publication_date': '2026-03-01T11:00:00Z',
            'sections': ['Sport', 'Culture'],
        },
        {
            'id': 2,
            'title': 'Concert',
            'publication_date': '2026-02-26T11:00:00Z',
            'sections': ['Sport'],
        },
        {
            'id': 3,
            'title': 'Incendie',
            'publication_date': '2026-03-01T08:00:00Z',
            'sections': ['Actualités'],
        },
    ]
    path.write_text(json.dumps(records), encoding='utf-8')
    return path


def _run(tmp_path: Path, capsys, *command: str):
    argv = [
        '--articles',
        str(_snapshot(tmp_path)),
        '--now',
        NOW,
        '--log-file',
        str(tmp_path / 'news_ranker.log'),
        '-q',
        *command,
    ]
    code = main(argv)
    return code, capsys.readouterr().out


def test_top_stories_prints_json(tmp_path: Path, capsys) -> None:
    code, out = _run(tmp_path, capsys, 'top-stories', '--count', '1')
    assert code == 0
    payload = json.loads(out)
    assert [item['id'] for item in payload] == ['1']
    assert payload[0]['publication_date'] == '2026-03-01T11:00:00+00:00'


def test_similar_prints_ranked_neighbours(tmp_path: Path, capsys) -> None:
    code, out = _run(tmp_path, capsys, 'similar', '1')
    assert code == 0
    # 35 + 18 for article 2, 0 + 30 for article 3.
    assert [item['id'] for item in json.loads(out)] == ['2', '3']


def test_similar_with_unknown_id_prints_empty_list(tmp_path: Path, capsys) -> None:
    code, out = _run(tmp_path, capsys, 'similar', '404')
    assert code == 0
    assert json.loads(out) == []


def test_highlights_and_breaking_news(tmp_path: Path, capsys) -> None:
    _, out = _run(tmp_path, capsys, 'highlights', '--per-category', '1')
    highlights = json.loads(out)
    assert set(highlights) == {'Sport', 'Culture', 'Actualités'}
    assert [item['id'] for item in highlights['Sport']] == ['1']

    _, out = _run(tmp_path, capsys, 'breaking-news', '--hours', '6')
    assert [item['id'] for item in json.loads(out)] == ['3']


def test_statistics_command(tmp_path: Path, capsys) -> None:
    _, out = _run(tmp_path, capsys, 'statistics')
    stats = json.loads(out)
    assert stats['total_articles'] == 3
    assert stats['section_distribution'] == {'Sport': 2, 'Culture': 1, 'Actualités': 1}
    assert stats['average_word_count'] == 0


def test_output_file(tmp_path: Path, capsys) -> None:
    target = tmp_path / 'out' / 'digest.json'
    code, out = _run(tmp_path, capsys, '--output', str(target), 'daily-digest')
    assert code == 0
    assert out == ''
    assert len(json.loads(target.read_text(encoding='utf-8'))) == 3


def test_missing_snapshot_exits_with_error(tmp_path: Path) -> None:
    argv = [
        '--articles',
        str(tmp_path / 'missing.json'),
        '--log-file',
        str(tmp_path / 'news_ranker.log'),
        '-q',
        'statistics',
    ]
    assert main(argv) == 1


def test_negative_count_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(['--sample', '--log-file', str(tmp_path / 'log'), 'top-stories', '--count', '-1'])


def test_invalid_now_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(['--sample', '--now', 'soon', '--log-file', str(tmp_path / 'log'), 'statistics'])
