from __future__ import annotations

import argparse
import unicodedata

import bsdual
from bsdual.core.types import MonthGrid


def _width(s: str) -> int:
    # Devanagari combining signs take no column
    return sum(1 for ch in s if unicodedata.category(ch) not in ("Mn", "Mc"))


def ljust(s: str, w: int) -> str:
    return s + " " * max(0, w - _width(s))


def render_grid(grid: MonthGrid, w: int = 6) -> list[str]:
    lines = [" ".join(ljust(name, w) for name in grid.day_names)]
    lines.append("-" * ((w + 1) * 7 - 1))

    cells = [None] * grid.leading_blanks + list(grid.cells)
    for i in range(0, len(cells), 7):
        wk = cells[i:i + 7]
        wk += [None] * (7 - len(wk))
        top = []
        bot = []
        for c in wk:
            if c is None:
                top.append(ljust("", w))
                bot.append(ljust("", w))
                continue
            mark = "*" if c.selected else ""
            top.append(ljust(f"{c.label}{mark}", w))
            bot.append(ljust(c.secondary_label, w))
        lines.append(" ".join(top).rstrip())
        lines.append(" ".join(bot).rstrip())
    return lines


def print_month(cursor: bsdual.MonthCursor) -> None:
    labels = bsdual.header_labels(cursor)
    print(labels.primary)
    print(labels.secondary_range)
    print()
    for line in render_grid(bsdual.month_grid(cursor)):
        print(line)
    text = bsdual.selected_text(cursor)
    if text:
        print()
        print(f"selected: {text}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month grid with paired BS/AD day numbers."
    )
    p.add_argument("--lang", choices=["np", "en"], default="np")
    p.add_argument("--value", help="YYYY-MM-DD in the primary calendar (default: today)")
    p.add_argument("--advance", type=int, default=0, help="months to move before printing")
    p.add_argument("--oracle", default=bsdual.DEFAULT_ORACLE)
    args = p.parse_args(argv)

    cursor = bsdual.init_cursor(args.value, language=args.lang, oracle=args.oracle)
    if args.advance:
        cursor = bsdual.advance(cursor, args.advance)
    print_month(cursor)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
