from __future__ import annotations

import dataclasses
from typing import Iterator

MONTH_ABBRS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month < 1 or month > 12:
        return 0
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclasses.dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h


@dataclasses.dataclass(frozen=True)
class TextSpot:
    x: int
    y: int
    size: float


@dataclasses.dataclass(frozen=True)
class LayoutConfig:
    block_size: int = 10
    space_size: int = 2
    year_spacing: int = 20
    month_grid_width: int = 4  # columns per month
    month_grid_height: int = 8  # rows per month, 4 * 8 >= 31

    @property
    def cell(self) -> int:
        return self.block_size + self.space_size

    @property
    def month_label_height(self) -> int:
        return self.block_size * 2

    @property
    def year_label_width(self) -> int:
        return self.block_size * 5

    @property
    def summary_width(self) -> int:
        return self.block_size * 45

    @property
    def month_spacing(self) -> int:
        return self.space_size * 3

    @property
    def year_height(self) -> int:
        return self.month_grid_height * self.cell + self.month_label_height

    @property
    def month_width(self) -> int:
        return self.month_grid_width * self.cell + self.month_spacing


class CalendarLayout:
    """
    Pixel geometry for a stack of year bands, most recent year at index 0.

    Each band holds a year label on the left, twelve 4x8 month grids, and a
    summary/legend column on the right. Everything is derived from
    `LayoutConfig` and the number of years; nothing is cached.
    """

    def __init__(self, config: LayoutConfig, years_count: int) -> None:
        if years_count < 0:
            raise ValueError(f"years_count must be non-negative, got {years_count}")
        self.config = config
        self.years_count = years_count

    @property
    def width(self) -> int:
        c = self.config
        return c.year_label_width + 12 * c.month_width + c.summary_width + c.space_size * 4

    @property
    def height(self) -> int:
        c = self.config
        return (c.year_height + c.year_spacing) * self.years_count

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def year_offset(self, year_index: int) -> int:
        c = self.config
        return year_index * (c.year_height + c.year_spacing)

    def month_x_offset(self, month: int) -> int:
        c = self.config
        return c.year_label_width + (month - 1) * c.month_width

    def year_label(self, year_index: int) -> TextSpot:
        c = self.config
        y = self.year_offset(year_index) + c.year_height // 2 - c.block_size // 2
        return TextSpot(x=5, y=y, size=c.block_size * 1.6)

    def month_label(self, year_index: int, month: int) -> TextSpot:
        return TextSpot(x=self.month_x_offset(month), y=self.year_offset(year_index), size=self.config.block_size * 1.2)

    def day_block(self, year_index: int, year: int, month: int, day: int) -> Rect | None:
        """Block for one calendar day, or None when (year, month, day) is not a real date."""
        if day < 1 or day > days_in_month(year, month):
            return None
        c = self.config
        col = (day - 1) % c.month_grid_width
        row = (day - 1) // c.month_grid_width
        if row >= c.month_grid_height:
            return None
        x = self.month_x_offset(month) + col * c.cell
        y = self.year_offset(year_index) + c.month_label_height + row * c.cell
        return Rect(x=x, y=y, w=c.block_size, h=c.block_size)

    def iter_day_blocks(self, year_index: int, year: int, month: int) -> Iterator[tuple[int, Rect]]:
        for day in range(1, days_in_month(year, month) + 1):
            rect = self.day_block(year_index, year, month, day)
            if rect is not None:
                yield day, rect

    def separator(self, year_index: int) -> Rect | None:
        if year_index <= 0:
            return None
        y = self.year_offset(year_index) - self.config.year_spacing // 2
        return Rect(x=0, y=y, w=self.width, h=1)

    @property
    def summary_x(self) -> int:
        c = self.config
        return self.width - c.summary_width - c.space_size * 2

    @property
    def legend_x(self) -> int:
        return self.summary_x + self.config.block_size * 20

    def summary_line(self, year_index: int, line: int) -> TextSpot:
        c = self.config
        y = self.year_offset(year_index) + c.block_size + line * c.cell
        return TextSpot(x=self.summary_x, y=y, size=c.block_size * 0.8)

    def legend_square(self, year_index: int, row: int) -> Rect | None:
        """Colored square for legend row `row` (0 for bucket 1), or None if it does not fit."""
        c = self.config
        y = self.year_offset(year_index) + (row + 7) * c.cell
        rect = Rect(x=self.legend_x, y=y, w=c.block_size, h=c.block_size)
        if rect.right > self.width or rect.bottom > self.height:
            return None
        return rect

    def legend_text(self, year_index: int, row: int) -> TextSpot | None:
        c = self.config
        x = self.legend_x + c.block_size + c.space_size * 2
        if x + c.block_size * 15 > self.width:
            return None
        y = self.year_offset(year_index) + (row + 7) * c.cell
        return TextSpot(x=x, y=y, size=c.block_size * 0.8)
