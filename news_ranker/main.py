##########################################################################################
#
# Script name: main.py
#
# Description: CLI entrypoint for ranking, diversifying and comparing news articles.
#
##########################################################################################

import argparse
import logging
import sys
from datetime import date, datetime

from .config import (
    DEFAULT_ARTICLES_PER_CATEGORY,
    DEFAULT_BREAKING_HOURS,
    DEFAULT_CONFIG,
    DEFAULT_INTERESTING_LIMIT,
    DEFAULT_STORY_COUNT,
    load_ranking_config,
)
from .render import render_json, write_json
from .repository import ArticleRepository, Error, build_sample_articles, load_articles
from .service import ArticleService
from .utils import parse_datetime_value, utc_now


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

log = logging.getLogger('news_ranker')
log.setLevel(logging.DEBUG)
log.propagate = False
formatter = logging.Formatter(
    '%(asctime)-15s [%(funcName)25s:%(lineno)-5s] %(levelname)-8s %(message)s'
)
DEFAULT_LOG_FILE = 'news_ranker.log'


# ****************************************************************************************
# Functions
# ****************************************************************************************


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected an integer, got {value!r}')
    if parsed < 0:
        raise argparse.ArgumentTypeError(f'expected a non-negative integer, got {parsed}')
    return parsed


def _timestamp(value: str) -> datetime:
    parsed = parse_datetime_value(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f'expected an ISO 8601 timestamp, got {value!r}')
    return parsed


def _configure_logging(args: argparse.Namespace) -> None:
    for handler in log.handlers[:]:
        log.removeHandler(handler)
        handler.close()

    fh = logging.FileHandler(args.log_file, mode='w', encoding='utf-8')
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    log.addHandler(fh)

    # stdout carries the JSON result, so console logging goes to stderr.
    ch = logging.StreamHandler(sys.stderr)
    if args.verbose:
        ch.setLevel(logging.DEBUG)
    elif args.quiet:
        ch.setLevel(logging.ERROR)
    else:
        ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    log.addHandler(ch)


def build_service(args: argparse.Namespace) -> ArticleService:
    now = args.now
    clock = (lambda: now) if now is not None else utc_now
    config = load_ranking_config(args.config) if args.config else DEFAULT_CONFIG

    if args.sample:
        articles = build_sample_articles(now or utc_now())
        log.debug('Using %d sample article(s).', len(articles))
    else:
        articles = load_articles(args.articles)
    return ArticleService(ArticleRepository(articles), config=config, clock=clock)


def run_command(service: ArticleService, args: argparse.Namespace):
    command = args.command
    if command == 'interesting':
        return service.interesting_articles(args.limit)
    if command == 'diversified':
        return service.interesting_articles_diversified(args.limit)
    if command == 'top-stories':
        return service.top_stories(args.count)
    if command == 'daily-digest':
        return service.daily_digest()
    if command == 'trending':
        return service.trending_by_section(args.section, args.count)
    if command == 'highlights':
        return service.highlights_by_category(args.per_category)
    if command == 'breaking-news':
        return service.recent_breaking_news(args.hours)
    if command == 'similar':
        return service.similar_articles(args.article_id, args.count)
    if command == 'statistics':
        return service.statistics()
    raise ValueError(f'Unknown command: {command}')


# ****************************************************************************************
# Handle the arguments
# ****************************************************************************************


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Rank, diversify and compare news articles.')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--articles', help='Path to a YAML or JSON article snapshot.')
    source.add_argument('--sample', action='store_true', help='Use built-in sample articles.')
    parser.add_argument('--config', default=None, help='Path to a ranking config YAML.')
    parser.add_argument(
        '--now',
        type=_timestamp,
        default=None,
        help='Reference time (ISO 8601) used instead of the current time.',
    )
    parser.add_argument('--output', default=None, help='Write the JSON result to this file instead of stdout.')
    parser.add_argument('--log-file', default=DEFAULT_LOG_FILE, help='Path of the debug log file.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output to stderr.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Minimal stderr output.')

    commands = parser.add_subparsers(dest='command', required=True)

    interesting = commands.add_parser('interesting', help='Most interesting articles.')
    interesting.add_argument('--limit', type=_non_negative_int, default=DEFAULT_INTERESTING_LIMIT)

    diversified = commands.add_parser('diversified', help='Interesting articles spread across sections.')
    diversified.add_argument('--limit', type=_non_negative_int, default=DEFAULT_INTERESTING_LIMIT)

    top = commands.add_parser('top-stories', help='Top stories by interest.')
    top.add_argument('--count', type=_non_negative_int, default=DEFAULT_STORY_COUNT)

    commands.add_parser('daily-digest', help='Diversified digest of the day.')

    trending = commands.add_parser('trending', help='Newest articles of a section in the last 30 days.')
    trending.add_argument('section')
    trending.add_argument('--count', type=_non_negative_int, default=DEFAULT_STORY_COUNT)

    highlights = commands.add_parser('highlights', help='Newest articles for each main category.')
    highlights.add_argument('--per-category', type=_non_negative_int, default=DEFAULT_ARTICLES_PER_CATEGORY)

    breaking = commands.add_parser('breaking-news', help='Breaking news from the last hours.')
    breaking.add_argument('--hours', type=_non_negative_int, default=DEFAULT_BREAKING_HOURS)

    similar = commands.add_parser('similar', help='Articles similar to one article.')
    similar.add_argument('article_id')
    similar.add_argument('--count', type=_non_negative_int, default=DEFAULT_STORY_COUNT)

    commands.add_parser('statistics', help='Summary statistics of the collection.')
    return parser


def handle_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    log.debug('Checking script requirements...')
    if not args.verbose and not args.quiet:
        log.debug('No output level specified. Defaulting to INFO.')

    log.info('++++++++++++++++++++++++++++++++++++++++++++++')
    log.info('+  news-ranker %s', args.command)
    log.info('+  Python Version: %s', sys.version.split()[0])
    log.info('+  Today is: %s', date.today())
    log.info('++++++++++++++++++++++++++++++++++++++++++++++')
    return args


# ****************************************************************************************
# Main
# ****************************************************************************************


def main(argv: list[str] | None = None) -> int:
    args = handle_args(argv)
    try:
        service = build_service(args)
        result = run_command(service, args)
    except (Error, OSError, ValueError) as exc:
        log.error('%s', exc)
        return 1

    if args.output:
        path = write_json(result, args.output)
        log.info('Wrote %s result to %s', args.command, path)
    else:
        print(render_json(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
