import unittest
from unittest.mock import MagicMock

import numpy as np
import pytest

glfw = pytest.importorskip("glfw")

from gizmos import Gizmos  # noqa: E402
from gizmos.platform.glfw_viewer import GLFWViewer, hotkey_code, look_at, perspective  # noqa: E402


class TestViewerMath(unittest.TestCase):
    def test_look_at_maps_eye_to_origin(self):
        view = look_at((0, 0, 5), (0, 0, 0))
        eye = view @ np.array([0.0, 0.0, 5.0, 1.0])
        np.testing.assert_allclose(eye, [0, 0, 0, 1], atol=1e-12)
        target = view @ np.array([0.0, 0.0, 0.0, 1.0])
        np.testing.assert_allclose(target, [0, 0, -5, 1], atol=1e-12)

    def test_perspective_depth_range(self):
        proj = perspective(60.0, 1.0, 0.1, 100.0)
        near = proj @ np.array([0.0, 0.0, -0.1, 1.0])
        far = proj @ np.array([0.0, 0.0, -100.0, 1.0])
        self.assertAlmostEqual(near[2] / near[3], -1.0)
        self.assertAlmostEqual(far[2] / far[3], 1.0)


def test_hotkey_code():
    assert hotkey_code("f2") == glfw.KEY_F2
    assert hotkey_code("no-such-key") == -1


def test_viewer_requires_line_batch_sink():
    with pytest.raises(TypeError):
        GLFWViewer(Gizmos(sink=MagicMock()))
