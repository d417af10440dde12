"""
Command line interface for weighted record sampling.

Usage:
    # Eight random continents, weighted by population
    rndrec draw data/continent_population.csv -n 8

    # Observed frequencies over 100,000 draws
    rndrec report data/continent_population.csv

    # Cumulative weight index
    rndrec dump data/continent_population.csv

    # Names from census tables built by scripts/build_name_tables.py
    rndrec names --dir data/us -n 16
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import Settings, get_settings
from .loader import sampler_from_file
from .names import FEMALE_NAME_FILE, LAST_NAME_FILE, MALE_NAME_FILE, NameGenerator
from .report import format_report, frequency_report

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _table_options(parser: argparse.ArgumentParser, settings: Settings) -> None:
    weight = parser.add_mutually_exclusive_group()
    default_col = 'uniform' if settings.weight_col is None else settings.weight_col
    weight.add_argument('--weight-col', type=int, default=None,
                        help=f'Index of the weight field (default: {default_col})')
    weight.add_argument('--uniform', action='store_true', default=False,
                        help='Weigh every record equally')
    parser.add_argument('--sep', type=str, default=settings.field_separator,
                        help=f'Field separator (default: {settings.field_separator!r})')


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rndrec',
        description='Draw records at random according to their relative weight',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rndrec draw data/continent_population.csv -n 8
  rndrec report data/continent_population.csv --draws 100000
  rndrec dump data/continent_population.csv
  rndrec names --dir data/us -n 16

Defaults can be set with RNDREC_* environment variables (e.g. RNDREC_SEED=42).
        """
    )
    parser.add_argument('--seed', type=int, default=settings.seed,
                        help=f'Random seed (default: {settings.seed})')
    parser.add_argument('--log-level', type=str, default=settings.log_level,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help=f'Logging level (default: {settings.log_level})')

    commands = parser.add_subparsers(dest='command', required=True)

    draw = commands.add_parser('draw', help='Print random records')
    draw.add_argument('file', type=Path, help='Delimited table, one record per line')
    draw.add_argument('-n', '--count', type=int, default=1,
                      help='Number of records to draw (default: 1)')
    _table_options(draw, settings)

    report = commands.add_parser('report', help='Print observed frequency of each key')
    report.add_argument('file', type=Path, help='Delimited table, one record per line')
    report.add_argument('--draws', type=int, default=settings.report_draws,
                        help=f'Number of draws (default: {settings.report_draws})')
    report.add_argument('--key-field', type=int, default=0,
                        help='Index of the field used as key (default: 0)')
    _table_options(report, settings)

    dump = commands.add_parser('dump', help='Print the cumulative weight index')
    dump.add_argument('file', type=Path, help='Delimited table, one record per line')
    _table_options(dump, settings)

    names = commands.add_parser('names', help='Print random person names')
    names.add_argument('--dir', type=Path, default=Path(settings.names_dir),
                       help=f'Directory holding the name tables (default: {settings.names_dir})')
    names.add_argument('--last', type=Path, help=f'Last name table (default: DIR/{LAST_NAME_FILE})')
    names.add_argument('--female', type=Path, help=f'Female first name table (default: DIR/{FEMALE_NAME_FILE})')
    names.add_argument('--male', type=Path, help=f'Male first name table (default: DIR/{MALE_NAME_FILE})')
    names.add_argument('-n', '--count', type=int, default=16,
                       help='Number of names (default: 16)')
    names.add_argument('--female-share', type=float, default=settings.female_share,
                       help=f'Share of female names (default: {settings.female_share})')
    names.add_argument('--sep', type=str, default=settings.field_separator,
                       help=f'Field separator (default: {settings.field_separator!r})')

    return parser


def _weight_col(args: argparse.Namespace, settings: Settings) -> Optional[int]:
    """--uniform, then an explicit --weight-col, then the configured default"""
    if args.uniform:
        return None
    if args.weight_col is not None:
        return args.weight_col
    return settings.weight_col


def _load(args: argparse.Namespace, settings: Settings):
    return sampler_from_file(args.file, _weight_col(args, settings), args.sep, args.seed)


def run(args: argparse.Namespace, settings: Settings) -> None:
    if args.command == 'draw':
        sampler = _load(args, settings)
        for fields in sampler.sample(args.count):
            print(args.sep.join(fields))

    elif args.command == 'report':
        sampler = _load(args, settings)
        frequencies = frequency_report(sampler, args.draws, args.key_field)
        for line in format_report(frequencies):
            print(line)

    elif args.command == 'dump':
        print(_load(args, settings), end='')

    elif args.command == 'names':
        generator = NameGenerator.from_files(
            args.last or args.dir / LAST_NAME_FILE,
            args.female or args.dir / FEMALE_NAME_FILE,
            args.male or args.dir / MALE_NAME_FILE,
            field_sep=args.sep,
            female_share=args.female_share,
            seed=args.seed,
        )
        for name in generator.generate_many(args.count):
            print(name)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error(f"✗ Invalid RNDREC_* configuration: {e}")
        return 1

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        run(args, settings)
    except ValueError as e:
        logger.error(f"✗ {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
