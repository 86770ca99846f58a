"""Python mirror of RandomIpfsNft's breed table.

Chances are cumulative upper bounds over a 0-99 roll: a roll below 10 is
a pug, below 40 a shiba inu, anything else a st. bernard.
"""
from enum import IntEnum

MAX_CHANCE_VALUE = 100
CHANCE_ARRAY = (10, 40, MAX_CHANCE_VALUE)


class Breed(IntEnum):
    PUG = 0
    SHIBA_INU = 1
    ST_BERNARD = 2


def breed_from_modded_rng(modded_rng: int) -> Breed:
    cumulative_sum = 0
    for index, chance in enumerate(CHANCE_ARRAY):
        if cumulative_sum <= modded_rng < chance:
            return Breed(index)
        cumulative_sum = chance
    raise ValueError(f"{modded_rng} out of range [0, {MAX_CHANCE_VALUE})")


def breed_from_random_word(random_word: int) -> Breed:
    return breed_from_modded_rng(random_word % MAX_CHANCE_VALUE)
