import math
import unittest

import numpy as np

from gizmos.geombase import (
    Frame3,
    as_frame,
    as_vec3,
    format_value,
    generate_circle_points,
    perpendicular_vector,
)


class TestFrame3(unittest.TestCase):
    def test_as_vec3_rejects_wrong_shape(self):
        with self.assertRaises(ValueError):
            as_vec3((1, 2))

    def test_identity_axes(self):
        frame = Frame3.identity()
        np.testing.assert_allclose(frame.right_vector, [1, 0, 0])
        np.testing.assert_allclose(frame.up_vector, [0, 1, 0])
        np.testing.assert_allclose(frame.look_vector, [0, 0, -1])

    def test_look_along(self):
        frame = Frame3.look_along((1, 2, 3), (5, 0, 0))
        np.testing.assert_allclose(frame.position, [1, 2, 3])
        np.testing.assert_allclose(frame.look_vector, [1, 0, 0], atol=1e-12)
        np.testing.assert_allclose(frame.up_vector, [0, 1, 0], atol=1e-12)

    def test_look_along_parallel_to_up(self):
        frame = Frame3.look_along((0, 0, 0), (0, 2, 0))
        np.testing.assert_allclose(frame.look_vector, [0, 1, 0], atol=1e-12)
        rotation = frame.rotation
        np.testing.assert_allclose(rotation.T @ rotation, np.eye(3), atol=1e-12)

    def test_look_along_zero_direction(self):
        frame = Frame3.look_along((1, 1, 1), (0, 0, 0))
        np.testing.assert_allclose(frame.rotation, np.eye(3))

    def test_transform_and_translate(self):
        frame = Frame3.look_along((1, 0, 0), (1, 0, 0))
        np.testing.assert_allclose(frame.transform_point((0, 0, -2)), [3, 0, 0], atol=1e-12)
        np.testing.assert_allclose(frame.transform_vector((0, 0, -2)), [2, 0, 0], atol=1e-12)

        moved = frame.translated((0, 1, 0))
        np.testing.assert_allclose(moved.position, [1, 1, 0])
        np.testing.assert_allclose(moved.rotation, frame.rotation)

    def test_euler_of_rotation_about_y(self):
        angle = math.radians(30)
        c, s = math.cos(angle), math.sin(angle)
        rotation = np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])
        rx, ry, rz = Frame3(rotation=rotation).euler_xyz_degrees()
        self.assertAlmostEqual(rx, 0.0)
        self.assertAlmostEqual(ry, 30.0)
        self.assertAlmostEqual(rz, 0.0)

    def test_as_frame(self):
        frame = Frame3((1, 2, 3))
        self.assertIs(as_frame(frame), frame)
        np.testing.assert_allclose(as_frame([4, 5, 6]).position, [4, 5, 6])


class TestHelpers(unittest.TestCase):
    def test_perpendicular_vector(self):
        for v in ([1, 0, 0], [0, 0, 1], [1, 2, 3], [0, 0, 0]):
            perp = perpendicular_vector(v)
            self.assertAlmostEqual(float(np.linalg.norm(perp)), 1.0)
            self.assertAlmostEqual(float(np.dot(perp, v)), 0.0)

    def test_circle_points(self):
        points = generate_circle_points((0, 1, 0), 2.0, (0, 0, 1), 12)
        self.assertEqual(points.shape, (12, 3))
        offsets = points - np.array([0, 1, 0])
        np.testing.assert_allclose(np.linalg.norm(offsets, axis=1), 2.0)
        np.testing.assert_allclose(offsets[:, 2], 0.0, atol=1e-12)

    def test_circle_needs_three_segments(self):
        with self.assertRaises(ValueError):
            generate_circle_points((0, 0, 0), 1.0, (0, 1, 0), 2)

    def test_format_value(self):
        self.assertEqual(format_value("text"), "text")
        self.assertEqual(format_value(True), "True")
        self.assertEqual(format_value(2), "2.000")
        self.assertEqual(format_value(1.23456, precision=1), "1.2")
        self.assertEqual(format_value(np.array([1.0, 2.0, 3.0]), 1), "(1.0, 2.0, 3.0)")
        self.assertEqual(format_value([1, 2]), "[1, 2]")
        self.assertEqual(format_value(None), "None")

    def test_format_frame(self):
        text = format_value(Frame3((1, 2, 3)), precision=1)
        self.assertEqual(text, "pos=(1.0, 2.0, 3.0) rot=(0.0, 0.0, 0.0)")


if __name__ == "__main__":
    unittest.main()
