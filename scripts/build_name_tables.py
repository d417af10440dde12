#!/usr/bin/env python3
"""
Census Name Table Builder
Converts 1990 US census name frequency files into rndrec name tables

The census bureau publishes the data with the following statement:

    Copyright protection is not available for any work of the United States
    Government (Title 17 U.S.C., Section 105). Thus you are free to reproduce
    census materials as you see fit. We would ask, however, that you cite the
    Census Bureau as the source.

Input files (http://www2.census.gov/topics/genealogy/1990surnames/):
    dist.all.last, dist.female.first, dist.male.first

Usage:
    python build_name_tables.py --input-dir ./census_cache --output-dir ../data/us

    # With a corrections file listing names that need special punctuation
    python build_name_tables.py --input-dir ./census_cache --output-dir ../data/us \\
        --corrections ../data/census/corrections.txt
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

# JAMES          3.318  3.318      1
CENSUS_LINE = re.compile(r"^(\S+)\s+(\d+\.\d+)\s+(\d+\.\d+)\s+(\d+)$")

APOSTROPHE = re.compile(r"'")

# Frequencies (percent of population) at or below this are dropped
MIN_FREQUENCY = 0.002

# Census input file -> rndrec table
NAME_FILES = [
    ('dist.all.last', 'name_last.csv'),
    ('dist.female.first', 'name_first_female.csv'),
    ('dist.male.first', 'name_first_male.csv'),
]


# =============================================================================
# PARSING
# =============================================================================

def load_corrections(path: Path) -> Dict[str, str]:
    """
    Load names that need special punctuation or capitalization.

    Each line holds one correctly spelled name (e.g. "O'Brien", "McDonald").
    The census spelling is the name upper-cased without apostrophes.

    Returns:
        Mapping of census spelling to corrected spelling
    """
    corrections = {}
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            name = line.strip()
            if name:
                corrections[APOSTROPHE.sub('', name).upper()] = name
    logger.info(f"  → Loaded {len(corrections)} name corrections")
    return corrections


def normalize_name(name: str, corrections: Dict[str, str]) -> str:
    """Corrected spelling if known, otherwise first letter upper, rest lower"""
    if name in corrections:
        return corrections[name]
    if len(name) > 1:
        return name[:1] + name[1:].lower()
    return name


def parse_census_line(line: str) -> Optional[Tuple[str, float]]:
    """
    Parse one census line into (NAME, frequency).

    Returns:
        None if the line does not have the census layout
    """
    match = CENSUS_LINE.match(line.strip())
    if match is None:
        return None
    return match.group(1), float(match.group(2))


def build_table(
    lines: List[str],
    corrections: Dict[str, str],
    min_frequency: float = MIN_FREQUENCY
) -> pd.DataFrame:
    """
    Convert census lines into a name/weight table.

    Args:
        lines: Raw census file lines
        corrections: Output of load_corrections()
        min_frequency: Entries with a frequency at or below this are dropped

    Returns:
        DataFrame with 'name' and 'weight' columns, in census order
    """
    rows = []
    for line in lines:
        if not line.strip():
            continue
        parsed = parse_census_line(line)
        if parsed is None:
            logger.warning(f"Match error: [{line.rstrip()}]")
            continue
        name, frequency = parsed
        if frequency > min_frequency:
            rows.append((normalize_name(name, corrections), frequency))

    return pd.DataFrame(rows, columns=['name', 'weight'])


def process_file(
    in_path: Path,
    out_path: Path,
    corrections: Dict[str, str],
    min_frequency: float = MIN_FREQUENCY
) -> int:
    """
    Convert one census file into a pipe-delimited name|weight table.

    Returns:
        Number of names written
    """
    with open(in_path, 'r', encoding='utf-8') as f:
        table = build_table(f.readlines(), corrections, min_frequency)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(out_path, sep='|', header=False, index=False, float_format='%.3f')
    logger.info(f"  → {in_path.name}: {len(table)} names written to {out_path}")
    return len(table)


# =============================================================================
# MAIN PIPELINE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Convert US census name files into rndrec name tables',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert the three census files in ./census_cache
  python build_name_tables.py --input-dir ./census_cache --output-dir ../data/us

  # Keep only names above 0.01 percent of the population
  python build_name_tables.py --input-dir ./census_cache --output-dir ../data/us --min-frequency 0.01
        """
    )

    parser.add_argument('--input-dir', type=Path, required=True,
                        help='Directory holding dist.all.last, dist.female.first, dist.male.first')
    parser.add_argument('--output-dir', type=Path, required=True,
                        help='Directory for the pipe-delimited name tables')
    parser.add_argument('--corrections', type=Path,
                        help='File of correctly punctuated names, one per line')
    parser.add_argument('--min-frequency', type=float, default=MIN_FREQUENCY,
                        help=f'Drop names at or below this frequency (default: {MIN_FREQUENCY})')

    args = parser.parse_args(argv)

    logger.info("="*60)
    logger.info("CENSUS NAME TABLES")
    logger.info("="*60)

    try:
        corrections = load_corrections(args.corrections) if args.corrections else {}

        total = 0
        for in_name, out_name in NAME_FILES:
            total += process_file(
                args.input_dir / in_name,
                args.output_dir / out_name,
                corrections,
                args.min_frequency
            )

        logger.info("="*60)
        logger.info(f"✓ COMPLETE: {total} names in {len(NAME_FILES)} tables")
        logger.info("="*60)

    except OSError as e:
        logger.error(f"✗ Conversion failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
