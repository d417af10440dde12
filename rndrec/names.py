"""
Plausible person names from census frequency tables.

Combines three samplers (last names, female first names, male first names)
built from the pipe-delimited tables written by scripts/build_name_tables.py.
Names come out distributed like the 1990 US census population, e.g.
"Evelyn M Perkins".
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .loader import DEFAULT_FIELD_SEP, sampler_from_file
from .sampler import WeightedSampler, make_rng

logger = logging.getLogger(__name__)

# Table file names produced by the census preprocessing script
LAST_NAME_FILE = 'name_last.csv'
FEMALE_NAME_FILE = 'name_first_female.csv'
MALE_NAME_FILE = 'name_first_male.csv'

DEFAULT_FEMALE_SHARE = 0.8


class NameGenerator:
    """
    Generates "First M Last" names.

    Each name is female with probability female_share. The middle initial is
    the first letter of a second draw from the same first-name table.
    """

    def __init__(
        self,
        last_names: WeightedSampler,
        female_names: WeightedSampler,
        male_names: WeightedSampler,
        female_share: float = DEFAULT_FEMALE_SHARE,
        seed: Optional[int] = 0
    ):
        """
        Args:
            last_names: Sampler over last-name records (name in field 0)
            female_names: Sampler over female first-name records
            male_names: Sampler over male first-name records
            female_share: Probability that a generated name is female
            seed: Seed for the female/male choice
        """
        if not 0.0 <= female_share <= 1.0:
            raise ValueError(f"female_share must be within [0, 1], got {female_share}")

        self.last_names = last_names
        self.female_names = female_names
        self.male_names = male_names
        self.female_share = female_share
        self._rng = make_rng(seed)

    @classmethod
    def from_files(
        cls,
        last_path: Union[str, Path],
        female_path: Union[str, Path],
        male_path: Union[str, Path],
        weight_col: int = 1,
        field_sep: str = DEFAULT_FIELD_SEP,
        female_share: float = DEFAULT_FEMALE_SHARE,
        seed: Optional[int] = 0
    ) -> "NameGenerator":
        """
        Load the three name tables and build a generator.

        Each table gets its own seed derived from seed so that the tables
        do not draw in lockstep.
        """
        seeds = [None] * 4 if seed is None else [seed + j for j in range(4)]

        last_names = sampler_from_file(last_path, weight_col, field_sep, seeds[0])
        female_names = sampler_from_file(female_path, weight_col, field_sep, seeds[1])
        male_names = sampler_from_file(male_path, weight_col, field_sep, seeds[2])

        logger.info(
            f"Name tables loaded: {len(last_names)} last, "
            f"{len(female_names)} female, {len(male_names)} male"
        )
        return cls(last_names, female_names, male_names, female_share, seeds[3])

    @classmethod
    def from_directory(cls, directory: Union[str, Path], **kwargs) -> "NameGenerator":
        """Load name_last.csv, name_first_female.csv and name_first_male.csv"""
        directory = Path(directory)
        return cls.from_files(
            directory / LAST_NAME_FILE,
            directory / FEMALE_NAME_FILE,
            directory / MALE_NAME_FILE,
            **kwargs
        )

    def generate(self) -> str:
        """Generate one name"""
        if self._rng.random() < self.female_share:
            first_names = self.female_names
        else:
            first_names = self.male_names

        first = first_names.draw()[0]
        middle = first_names.draw()[0]
        last = self.last_names.draw()[0]
        return f"{first} {middle[:1]} {last}"

    def generate_many(self, count: int) -> List[str]:
        """Generate count names"""
        return [self.generate() for _ in range(count)]
