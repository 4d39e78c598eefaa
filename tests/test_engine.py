"""Tests for the frame driver: layers, loop timing and marker ownership."""

import pytest

from flowline.config import SketchConfig
from flowline.constants import BG_COLOR, LINE_COLOR, TOTAL_LOOP_FRAMES
from flowline.engine import FrameDriver
from flowline.logo import left_leg, right_leg


def make_driver(**kwargs) -> FrameDriver:
    kwargs.setdefault("seed", 42)
    kwargs.setdefault("width", 800)
    return FrameDriver(SketchConfig(**kwargs))


# --- Initialization ---

def test_driver_defaults():
    driver = FrameDriver()
    assert driver.clock.fps == 60
    assert driver.clock.total_frames == TOTAL_LOOP_FRAMES
    assert driver.clock.frame_number == 0
    assert len(driver.markers) == 6
    assert isinstance(driver.seed, int)


def test_markers_start_evenly_spaced():
    driver = make_driver()
    assert [m.progress for m in driver.markers] == [i / 6 for i in range(6)]


def test_markers_view_is_a_tuple():
    driver = make_driver()
    assert isinstance(driver.markers, tuple)


def test_explicit_seed_is_kept():
    assert make_driver(seed=1234).seed == 1234


# --- Frame composition ---

def test_frame_draw_order(canvas):
    driver = make_driver()
    driver.step(canvas)
    assert canvas.kinds() == ["clear"] + ["path"] + ["circle"] * 6 + ["gradient_polygon", "polygon"]


def test_frame_contents(canvas):
    driver = make_driver()
    driver.step(canvas)
    clear, path = canvas.calls[0], canvas.calls[1]
    assert clear.args["color"] == BG_COLOR
    assert path.args["color"] == LINE_COLOR
    assert path.args["weight"] == 3
    assert path.args["transform"].ty == 400
    assert len(path.args["points"]) == 401
    assert canvas.calls[-2].args["points"] == left_leg()
    assert canvas.calls[-1].args["points"] == right_leg()


def test_step_returns_context(canvas):
    driver = make_driver()
    ctx = driver.step(canvas)
    assert ctx.frame_number == 1
    assert ctx.progress == pytest.approx(1 / TOTAL_LOOP_FRAMES)
    assert (ctx.width, ctx.height) == (800, 800)


def test_step_advances_markers(canvas):
    driver = make_driver()
    before = [m.progress for m in driver.markers]
    driver.step(canvas)
    after = [m.progress for m in driver.markers]
    assert after == [pytest.approx(b + m.speed) for b, m in zip(before, driver.markers)]


def test_loop_wraps_after_total_frames(canvas):
    driver = make_driver()
    progresses = [driver.step(canvas).progress for _ in range(TOTAL_LOOP_FRAMES)]
    assert progresses[-1] == 0.0
    assert progresses[-2] == pytest.approx((TOTAL_LOOP_FRAMES - 1) / TOTAL_LOOP_FRAMES)


def test_markers_stay_in_range_over_many_frames(make_canvas):
    canvas = make_canvas(200, 100)
    driver = make_driver(width=200, height=100)
    for _ in range(3000):
        driver.step(canvas)
        canvas.calls.clear()
        assert all(0.0 <= m.progress < 1.0 for m in driver.markers)
    assert len(driver.markers) == 6


# --- Layers ---

def test_added_layers_run_after_defaults(canvas):
    driver = make_driver()
    seen = []
    driver.add_layer(lambda c, ctx: seen.append((len(c.calls), ctx.frame_number)))
    driver.step(canvas)
    driver.step(canvas)
    assert seen == [(10, 1), (20, 2)]


def test_layers_run_in_registration_order(canvas):
    driver = make_driver()
    order = []
    driver.add_layer(lambda c, ctx: order.append("first"))
    driver.add_layer(lambda c, ctx: order.append("second"))
    driver.step(canvas)
    assert order == ["first", "second"]


# --- run() and hooks ---

def test_run_steps_n_frames(canvas):
    driver = make_driver()
    driver.run(canvas, 5)
    assert driver.clock.frame_number == 5
    assert len(canvas.of_kind("clear")) == 5


def test_run_fires_hooks_around_frames(canvas):
    driver = make_driver()
    events = []
    driver.on_start(lambda c, ctx: events.append(("start", ctx.frame_number)))
    driver.on_stop(lambda c, ctx: events.append(("stop", ctx.frame_number)))
    driver.run(canvas, 3)
    assert events == [("start", 0), ("stop", 3)]


def test_step_does_not_fire_hooks(canvas):
    driver = make_driver()
    events = []
    driver.on_start(lambda c, ctx: events.append("start"))
    driver.step(canvas)
    assert events == []


# --- Determinism ---

def test_same_seed_same_trajectories(make_canvas):
    a, b = make_driver(seed=7), make_driver(seed=7)
    canvas_a, canvas_b = make_canvas(), make_canvas()
    a.run(canvas_a, 50)
    b.run(canvas_b, 50)
    centers_a = [c.args["center"] for c in canvas_a.of_kind("circle")]
    centers_b = [c.args["center"] for c in canvas_b.of_kind("circle")]
    assert centers_a == centers_b


def test_different_seeds_different_speeds():
    a, b = make_driver(seed=1), make_driver(seed=2)
    assert [m.speed for m in a.markers] != [m.speed for m in b.markers]
