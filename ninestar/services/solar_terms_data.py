"""Static solar-term tables for the fixed-calendar and astronomical sources."""

from __future__ import annotations

from typing import Dict, List, Tuple

# Order in which the twelve month-opening terms occur inside a solar year.
# Index 0 (Li Chun) opens the Feb month, index 11 (Xiao Han) opens the Jan
# month and falls in the following Gregorian year.
TERM_KEYS: Tuple[str, ...] = (
    "li_chun",
    "jing_zhe",
    "qing_ming",
    "li_xia",
    "mang_zhong",
    "xiao_shu",
    "li_qiu",
    "bai_lu",
    "han_lu",
    "li_dong",
    "da_xue",
    "xiao_han",
)

TERM_NAMES: Dict[str, str] = {
    "li_chun": "Li Chun (立春)",
    "jing_zhe": "Jing Zhe (惊蛰)",
    "qing_ming": "Qing Ming (清明)",
    "li_xia": "Li Xia (立夏)",
    "mang_zhong": "Mang Zhong (芒种)",
    "xiao_shu": "Xiao Shu (小暑)",
    "li_qiu": "Li Qiu (立秋)",
    "bai_lu": "Bai Lu (白露)",
    "han_lu": "Han Lu (寒露)",
    "li_dong": "Li Dong (立冬)",
    "da_xue": "Da Xue (大雪)",
    "xiao_han": "Xiao Han (小寒)",
}

# (month, day, year_offset) of each term under the fixed calendar. Every
# boundary is pinned to 12:00 UTC on that date.
FIXED_TERM_DATES: Tuple[Tuple[int, int, int], ...] = (
    (2, 4, 0),
    (3, 6, 0),
    (4, 5, 0),
    (5, 6, 0),
    (6, 6, 0),
    (7, 7, 0),
    (8, 8, 0),
    (9, 8, 0),
    (10, 8, 0),
    (11, 8, 0),
    (12, 7, 0),
    (1, 6, 1),
)

FIXED_TERM_HOUR_UTC = 12

# Full twelve-term rows in UTC: (month, day, hour, minute, year_offset).
ASTRONOMICAL_TERMS: Dict[int, List[Tuple[int, int, int, int, int]]] = {
    1978: [
        (2, 3, 22, 27, 0), (3, 5, 16, 23, 0), (4, 4, 20, 59, 0), (5, 5, 14, 8, 0),
        (6, 5, 18, 10, 0), (7, 7, 4, 23, 0), (8, 7, 13, 55, 0), (9, 7, 16, 38, 0),
        (10, 8, 7, 15, 0), (11, 7, 11, 24, 0), (12, 7, 4, 17, 0), (1, 5, 15, 32, 1),
    ],
    1990: [
        (2, 4, 1, 15, 0), (3, 5, 19, 11, 0), (4, 4, 23, 43, 0), (5, 5, 16, 44, 0),
        (6, 5, 20, 47, 0), (7, 7, 7, 8, 0), (8, 7, 16, 55, 0), (9, 7, 19, 54, 0),
        (10, 8, 10, 36, 0), (11, 7, 14, 52, 0), (12, 7, 7, 47, 0), (1, 5, 18, 56, 1),
    ],
    1996: [
        (2, 4, 6, 8, 0), (3, 5, 0, 2, 0), (4, 4, 4, 43, 0), (5, 4, 21, 53, 0),
        (6, 5, 1, 54, 0), (7, 6, 12, 7, 0), (8, 6, 21, 54, 0), (9, 7, 0, 55, 0),
        (10, 7, 15, 45, 0), (11, 6, 19, 59, 0), (12, 6, 12, 55, 0), (1, 5, 0, 8, 1),
    ],
    2000: [
        (2, 4, 11, 14, 0), (3, 5, 5, 7, 0), (4, 4, 9, 32, 0), (5, 5, 2, 31, 0),
        (6, 5, 6, 29, 0), (7, 6, 16, 41, 0), (8, 7, 2, 29, 0), (9, 7, 5, 27, 0),
        (10, 7, 20, 12, 0), (11, 7, 0, 24, 0), (12, 6, 17, 14, 0), (1, 5, 4, 21, 1),
    ],
    2024: [
        (2, 4, 8, 27, 0), (3, 5, 2, 23, 0), (4, 4, 7, 2, 0), (5, 5, 0, 10, 0),
        (6, 5, 4, 10, 0), (7, 6, 14, 20, 0), (8, 7, 0, 9, 0), (9, 7, 3, 11, 0),
        (10, 7, 18, 0, 0), (11, 6, 22, 20, 0), (12, 6, 15, 17, 0), (1, 5, 2, 33, 1),
    ],
    2025: [
        (2, 3, 14, 10, 0), (3, 5, 8, 7, 0), (4, 4, 12, 48, 0), (5, 5, 5, 57, 0),
        (6, 5, 9, 56, 0), (7, 6, 20, 5, 0), (8, 7, 5, 51, 0), (9, 7, 8, 52, 0),
        (10, 7, 23, 41, 0), (11, 7, 4, 4, 0), (12, 6, 21, 5, 0), (1, 5, 8, 23, 1),
    ],
    2026: [
        (2, 3, 19, 52, 0), (3, 5, 13, 59, 0), (4, 4, 18, 39, 0), (5, 5, 11, 49, 0),
        (6, 5, 15, 48, 0), (7, 7, 1, 57, 0), (8, 7, 11, 42, 0), (9, 7, 14, 41, 0),
        (10, 8, 5, 29, 0), (11, 7, 9, 52, 0), (12, 7, 2, 52, 0), (1, 5, 14, 10, 1),
    ],
}

# Li Chun instants in UTC (month, day, hour, minute) for years where only the
# year boundary has been tabulated.
LI_CHUN_INSTANTS: Dict[int, Tuple[int, int, int, int]] = {
    1920: (2, 5, 2, 23),
    1954: (2, 4, 8, 26),
    1963: (2, 4, 12, 51),
    1970: (2, 4, 5, 11),
    1971: (2, 4, 11, 27),
    1972: (2, 4, 17, 17),
    1977: (2, 3, 22, 24),
    1980: (2, 4, 15, 53),
    1985: (2, 3, 21, 0),
    1986: (2, 4, 2, 50),
    1990: (2, 4, 2, 8),
    1994: (2, 4, 13, 5),
    1995: (2, 4, 7, 15),
    1998: (2, 4, 0, 44),
    1999: (2, 4, 6, 33),
    2000: (2, 4, 12, 23),
    2005: (2, 3, 17, 30),
    2008: (2, 4, 10, 59),
    2010: (2, 3, 22, 38),
    2015: (2, 4, 3, 45),
    2020: (2, 4, 8, 53),
    2021: (2, 3, 22, 59),
    2022: (2, 4, 4, 51),
    2023: (2, 4, 10, 43),
    2024: (2, 4, 8, 11),
    2025: (2, 3, 22, 10),
}

VERIFIED_RANGE = (1920, 2030)
HISTORICAL_RANGE = (1800, 1919)
