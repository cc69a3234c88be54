# tests/test_grid.py

import bsdual


def test_np_grid(poush_np):
    grid = bsdual.month_grid(poush_np)
    assert (grid.year, grid.month, grid.calendar) == (2081, 8, "bs")
    assert grid.leading_blanks == 1  # 2024-12-16 is a Monday
    assert grid.day_names[0] == "आईत"
    assert len(grid.cells) == 29

    first = grid.cells[0]
    assert (first.day, first.label, first.secondary_label) == (1, "१", "16")
    assert first.date.ad() == (2024, 11, 16)

    assert [c.day for c in grid.cells if c.selected] == [17]


def test_en_grid(january_en):
    grid = bsdual.month_grid(january_en)
    assert grid.leading_blanks == 3  # 2025-01-01 is a Wednesday
    assert grid.day_names == ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
    assert len(grid.cells) == 31
    assert grid.cells[0].label == "1"
    assert grid.cells[0].secondary_label == "१७"
    assert grid.cells[13].secondary_label == "१"  # Magh 1
    assert grid.cells[0].selected


def test_grid_selection_is_month_specific(poush_np):
    grid = bsdual.month_grid(bsdual.advance(bsdual.advance(poush_np, 1), -1))
    assert [c.day for c in grid.cells if c.selected] == [17]

    moved = bsdual.MonthCursor(
        anchor=bsdual.MonthAnchor(2081, 9, 2025, 1),
        language="np",
        oracle="fake",
        selected=poush_np.selected,
    )
    assert not any(c.selected for c in bsdual.month_grid(moved).cells)


def test_grid_without_selection():
    grid = bsdual.month_grid(bsdual.init_cursor(oracle="fake"))
    assert not any(c.selected for c in grid.cells)
