# piperush/tests/pipes_unit.py
import random

from piperush.game.config import FieldConfig, GAP_MIN, GAP_MAX, ROW_SPACING
from piperush.game.pipes import PipePool, PipeRow, RowCrossed


def lone_row_pool(y: float, crossed: bool = False) -> PipePool:
    pool = PipePool(FieldConfig(), seed=0)
    pool.rows = [PipeRow(y=y, left_gap_size=50, right_gap_size=80,
                         field_width=360, crossed=crossed)]
    return pool


def test_row_geometry():
    r = PipeRow(y=0.0, left_gap_size=50, right_gap_size=80, field_width=360)
    assert r.left_gap_start == 50
    assert r.right_gap_end == 280
    assert r.gap_width == 230


def test_initialize_layout():
    pool = PipePool(FieldConfig(), seed=1)
    assert [r.y for r in pool.rows] == [0.0, -130.0, -260.0, -390.0, -520.0]
    for r in pool.rows:
        assert not r.crossed
        assert GAP_MIN <= r.left_gap_size <= GAP_MAX
        assert GAP_MIN <= r.right_gap_size <= GAP_MAX
        assert r.right_gap_end == 360 - r.right_gap_size


def test_same_seed_same_gaps():
    a = PipePool(FieldConfig(), seed=99)
    b = PipePool(FieldConfig(), seed=99)
    assert [(r.left_gap_size, r.right_gap_size) for r in a.rows] == \
           [(r.left_gap_size, r.right_gap_size) for r in b.rows]


def test_injected_rng_is_used():
    rng = random.Random(4)
    expected = random.Random(4)
    pool = PipePool(FieldConfig(), rng=rng)
    first = pool.rows[0]
    assert first.left_gap_size == expected.randint(GAP_MIN, GAP_MAX)
    assert first.right_gap_size == expected.randint(GAP_MIN, GAP_MAX)


def test_initialize_resets_layout():
    pool = PipePool(FieldConfig(), seed=2)
    for _ in range(400):
        pool.step(2.0)
    pool.initialize()
    assert [r.y for r in pool.rows] == [0.0, -130.0, -260.0, -390.0, -520.0]
    assert not any(r.crossed for r in pool.rows)


def test_crossing_fires_once():
    pool = lone_row_pool(-130.0)
    fired_at = []
    for tick in range(1, 240):
        events = pool.advance(2.0)
        if events:
            fired_at.append(tick)
            assert events == [RowCrossed(row_id=0, y=322.0)]
    # -130 + 2*225 == 320 is not past the midpoint; 322 is
    assert fired_at == [226]
    assert pool.rows[0].crossed


def test_crossing_spawns_unadvanced_row_above_field():
    pool = lone_row_pool(319.0)
    events = pool.advance(2.0)
    assert len(events) == 1
    assert len(pool.rows) == 2
    assert pool.rows[1].y == -ROW_SPACING
    assert not pool.rows[1].crossed


def test_reap_drops_rows_below_field_only():
    pool = PipePool(FieldConfig(), seed=0)
    pool.rows = [
        PipeRow(y=639.0, left_gap_size=50, right_gap_size=50, field_width=360, crossed=True),
        PipeRow(y=100.0, left_gap_size=60, right_gap_size=60, field_width=360),
        PipeRow(y=638.0, left_gap_size=70, right_gap_size=70, field_width=360, crossed=True),
    ]
    events = pool.step(2.0)
    assert events == []
    assert [r.y for r in pool.rows] == [102.0, 640.0]
    assert [r.left_gap_size for r in pool.rows] == [60, 70]


def test_reap_returns_count():
    pool = lone_row_pool(700.0, crossed=True)
    assert pool.reap() == 1
    assert len(pool) == 0


def test_cross_and_exit_are_separate_ticks():
    # Large speed: a row may cross the midpoint and leave the field in consecutive ticks
    pool = lone_row_pool(300.0)
    events = pool.step(200.0)      # 500: crossed, still on screen
    assert len(events) == 1 and any(r.row_id == 0 for r in pool.rows)
    events = pool.step(200.0)      # 700: reaped, no second crossing
    assert events == []
    assert all(r.row_id != 0 for r in pool.rows)


def test_rows_stay_within_field_after_step():
    pool = PipePool(FieldConfig(), seed=8)
    for _ in range(2000):
        pool.step(2.5)
        assert all(r.y <= 640 for r in pool.rows)
        assert len(pool) >= 1


def test_narrow_field_keeps_corridor_passable():
    cfg = FieldConfig(width=200, initial_rows=200)
    pool = PipePool(cfg, seed=11)
    for r in pool.rows:
        assert r.gap_width >= cfg.player_w
        assert r.left_gap_start >= 0 and r.right_gap_end <= cfg.width


def test_pool_iterates_its_rows_in_order():
    pool = PipePool(FieldConfig(), seed=3)
    assert list(pool) == pool.rows
    assert [r.row_id for r in pool] == [0, 1, 2, 3, 4]


def test_initialize_restarts_row_ids():
    pool = PipePool(FieldConfig(), seed=2)
    for _ in range(400):
        pool.step(2.0)
    assert max(r.row_id for r in pool) > 4
    pool.initialize()
    fresh = PipePool(FieldConfig(), seed=2)
    assert [r.row_id for r in pool] == [r.row_id for r in fresh] == [0, 1, 2, 3, 4]
