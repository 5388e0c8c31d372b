from typing import Final

DEFAULT_SHELF_LIFE_DAYS: Final[int] = 7
DEFAULT_CATEGORY: Final[str] = "other"

# Readability rounding for scaled quantities (1/8, 1/4, 1/3, 1/2, 2/3, 3/4)
COMMON_FRACTIONS: Final[tuple] = (0.125, 0.25, 0.33, 0.5, 0.67, 0.75)
ROUND_DOWN_BELOW: Final[float] = 0.05
ROUND_UP_ABOVE: Final[float] = 0.95

# Northern hemisphere
SEASON_MONTHS: Final[dict[str, tuple]] = {
    "spring": (3, 4, 5),
    "summer": (6, 7, 8),
    "fall": (9, 10, 11),
    "winter": (12, 1, 2),
}
SEASONS: Final[tuple] = ("spring", "summer", "fall", "winter")

# Waste-optimized planning weights
SHELF_STABLE_SCORE: Final[int] = 100
OVERLAP_BONUS: Final[int] = 20

BACKUP_FILENAME_FORMAT: Final[str] = "grocermator-backup-%Y-%m-%d.json"
