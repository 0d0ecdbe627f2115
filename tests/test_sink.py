import numpy as np
import pytest

from gizmos.render.opengl import batch_rgba, split_batches
from gizmos.render.sink import LineBatchSink


def test_same_style_merges_into_one_batch():
    sink = LineBatchSink()
    sink.add_line((0, 0, 0), (1, 0, 0))
    sink.add_line((0, 0, 0), (0, 1, 0))
    assert len(sink.batches) == 1
    assert sink.segment_count == 2


def test_style_change_starts_new_batch():
    sink = LineBatchSink()
    sink.add_line((0, 0, 0), (1, 0, 0))
    sink.color = (1.0, 0.0, 0.0)
    sink.add_line((0, 0, 0), (0, 1, 0))
    sink.always_on_top = False
    sink.add_line((0, 0, 0), (0, 0, 1))
    assert [b.color for b in sink.batches] == [(1.0, 1.0, 1.0), (1.0, 0.0, 0.0), (1.0, 0.0, 0.0)]
    assert [b.always_on_top for b in sink.batches] == [True, True, False]


def test_add_lines_pairs():
    sink = LineBatchSink()
    sink.add_lines([(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 2, 0)])
    segments = sink.segments()
    assert segments.shape == (2, 2, 3)
    assert segments.dtype == np.float32
    np.testing.assert_allclose(segments[1], [[0, 1, 0], [0, 2, 0]])


def test_add_lines_odd_count_raises():
    sink = LineBatchSink()
    with pytest.raises(ValueError):
        sink.add_lines([(0, 0, 0), (1, 0, 0), (2, 0, 0)])


def test_add_path_open_closed_and_degenerate():
    sink = LineBatchSink()
    square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    sink.add_path(square, False)
    assert sink.segment_count == 3
    sink.add_path(square, True)
    assert sink.segment_count == 3 + 4
    np.testing.assert_allclose(sink.segments()[-1], [[0, 1, 0], [0, 0, 0]])

    sink.add_path([(0, 0, 0)], True)
    sink.add_path([], False)
    assert sink.segment_count == 7


def test_clear_resets_frame():
    sink = LineBatchSink()
    sink.add_line((0, 0, 0), (1, 0, 0))
    sink.add_text((0, 0, 0), "label")
    sink.clear()
    assert sink.batches == []
    assert sink.texts == []
    assert sink.clear_count == 1
    assert sink.segments().shape == (0, 2, 3)


def test_batch_rgba_and_split():
    sink = LineBatchSink()
    sink.transparency = 0.25
    sink.add_line((0, 0, 0), (1, 0, 0))
    sink.always_on_top = False
    sink.add_line((0, 0, 0), (0, 1, 0))

    tested, on_top = split_batches(sink)
    assert len(tested) == 1 and len(on_top) == 1
    assert not tested[0].always_on_top
    assert batch_rgba(on_top[0]) == (1.0, 1.0, 1.0, 0.75)
