"""Tests for the array renderers."""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from algorithms.linear_search import linear_search
from algorithms.step import Marker
from ui.canvas import pill_state, render_array, render_step, render_text


def test_pill_state_priority():
    m = Marker(active_index=2, found_index=2, low=0, high=4)
    assert pill_state(2, m) == "found"
    assert pill_state(0, m) == "lowhigh"
    assert pill_state(4, m) == "lowhigh"
    assert pill_state(1, m) == "default"
    assert pill_state(1, Marker(active_index=1, low=1, high=3)) == "active"


def test_bounds_need_both_ends():
    assert pill_state(0, Marker(low=0)) == "default"
    assert pill_state(3, Marker(high=3)) == "default"


def test_render_array_one_pill_per_value():
    svg = render_array([4, 8, 15, 16, 23], Marker(active_index=1))
    assert svg.startswith("<svg")
    assert svg.count('<g class="pill') == 5
    assert svg.count('class="pill active"') == 1
    assert 'data-index="4"' in svg
    assert ">23</text>" in svg


def test_render_array_wraps_long_arrays():
    short = render_array(list(range(5)))
    long = render_array(list(range(50)))
    assert long.count('<g class="pill') == 50
    height = lambda svg: int(svg.split('height="')[1].split('"')[0])
    assert height(long) > height(short)


def test_render_text():
    assert render_text([1, 2, 3]) == " 1   2   3 "
    assert render_text([1, 2, 3], Marker(active_index=1)) == " 1  [2]  3 "
    assert render_text([1, 2, 3], Marker(active_index=1, low=0, high=2)) == "|1| [2] |3|"
    assert render_text([1, 2, 3], Marker(found_index=0)) == "*1*  2   3 "


def test_render_step():
    step = list(linear_search([7, 9], 9))[1]
    assert render_step(step, as_text=True) == " 7  [9]"
    assert 'class="pill active"' in render_step(step)
