"""Tests for the terminal driver."""
import io
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from cli import main, parse_values


def _run(*argv):
    out = io.StringIO()
    code = main(list(argv) + ["--no-delay"], out=out)
    return code, out.getvalue()


def test_linear_search_frames():
    code, text = _run("linear_search", "--values", "1,2,3,4,5", "--target", "4")
    assert code == 0
    assert " 1   2   3  [4]  5     Checking index 3 (value=4)" in text
    assert " 1   2   3  *4*  5     Found 4 at index 3 using Linear Search." in text
    assert "== Linear Search ==" in text


def test_walkthrough_sorts_then_searches():
    code, text = _run("bubble_sort", "binary_search", "--values", "5,3,1,4,2", "--target", "2")
    assert code == 0
    assert "Array sorted (Bubble Sort). Now Binary Search will work correctly." in text
    assert "low=0, high=1, mid=0 (value=1)" in text
    assert text.rstrip().endswith("Found 2 at index 1 using Binary Search.")


def test_refused_run_exits_non_zero():
    code, text = _run("binary_search", "--values", "4,1,3", "--target", "3")
    assert code == 1
    assert "Binary Search requires a sorted array. Click Bubble Sort first." in text


def test_random_array():
    code, text = _run("linear_search", "--size", "8", "--seed", "3", "--target", "1000")
    assert code == 0
    assert text.startswith("Generated an array of 8 numbers.")
    assert "1000 not found using Linear Search." in text


def test_parse_values():
    assert parse_values("3, 1,2") == [3, 1, 2]
    with pytest.raises(Exception):
        parse_values("1,x")
