import unittest
import numpy as np
from PIL import Image
import pytest
import sys
import os

# Add the parent directory to the path so we can import our module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from yolobox.box import make_box, compute_iou
from yolobox.coord_type import CoordType
from yolobox.geometry import (
    EPSILON,
    center_to_corners,
    corners_to_center,
    to_relative,
    to_absolute,
    iou_center_size,
    pairwise_iou,
)
from yolobox.image_size import ImageSize


class TestConversions(unittest.TestCase):
    """Test suite for coordinate conversion helpers."""

    def test_center_to_corners(self):
        self.assertEqual(center_to_corners(5.0, 10.0, 4.0, 6.0), (3.0, 7.0, 7.0, 13.0))

    def test_corners_to_center(self):
        self.assertEqual(corners_to_center(3.0, 7.0, 7.0, 13.0), (5.0, 10.0, 4.0, 6.0))

    def test_relative_and_absolute_are_inverse(self):
        size = ImageSize(640.0, 480.0)
        values = (320.0, 120.0, 64.0, 48.0)
        relative = to_relative(*values, size)
        self.assertEqual(relative, (0.5, 0.25, 0.1, 0.1))
        np.testing.assert_allclose(to_absolute(*relative, size), values)

    def test_epsilon_is_smallest_positive_float(self):
        self.assertGreater(EPSILON, 0.0)
        self.assertEqual(EPSILON / 2.0, 0.0)

    def test_iou_center_size_identical(self):
        self.assertEqual(iou_center_size((0.0, 0.0, 10.0, 10.0), (0.0, 0.0, 10.0, 10.0)), 1.0)


class TestPairwiseIoU(unittest.TestCase):
    """Test suite for the vectorised IoU matrix."""

    def setUp(self):
        rng = np.random.default_rng(0)
        self.boxes_a = [
            make_box("a", *rng.uniform(0, 50, 2), *rng.uniform(1, 30, 2), "cat")
            for _ in range(6)
        ]
        self.boxes_b = [
            make_box("b", *rng.uniform(0, 50, 2), *rng.uniform(1, 30, 2), "dog")
            for _ in range(4)
        ]
        self.boxes_b.append(make_box("far", 1000, 1000, 2, 2, "dog"))

    def test_shape_and_range(self):
        matrix = pairwise_iou(self.boxes_a, self.boxes_b)
        self.assertEqual(matrix.shape, (6, 5))
        self.assertEqual(matrix.dtype, np.float64)
        self.assertTrue(np.all(matrix >= 0.0))
        self.assertTrue(np.all(matrix <= 1.0))

    def test_matches_scalar_iou(self):
        matrix = pairwise_iou(self.boxes_a, self.boxes_b)
        for i, a in enumerate(self.boxes_a):
            for j, b in enumerate(self.boxes_b):
                self.assertAlmostEqual(matrix[i, j], compute_iou(a, b), places=12)

    def test_non_overlapping_column_is_zero(self):
        matrix = pairwise_iou(self.boxes_a, self.boxes_b)
        self.assertTrue(np.all(matrix[:, -1] == 0.0))

    def test_self_matrix_is_symmetric_with_unit_diagonal(self):
        matrix = pairwise_iou(self.boxes_a, self.boxes_a)
        np.testing.assert_allclose(np.diag(matrix), 1.0)
        np.testing.assert_array_equal(matrix, matrix.T)

    def test_known_overlap(self):
        box1 = make_box("img", 0, 0, 10, 10, "cat", coord_type=CoordType.CORNER_CORNER)
        box2 = make_box("img", 5, 5, 15, 15, "cat", coord_type=CoordType.CORNER_CORNER)
        matrix = pairwise_iou([box1], [box2])
        self.assertAlmostEqual(matrix[0, 0], 25.0 / 175.0)

    def test_empty_input(self):
        matrix = pairwise_iou([], self.boxes_b)
        self.assertEqual(matrix.shape, (0, 5))


class TestImageSize(unittest.TestCase):
    """Test suite for the image size collaborator."""

    def test_from_image(self):
        image = Image.new("RGB", (640, 480))
        self.assertEqual(ImageSize.from_image(image), ImageSize(640.0, 480.0))

    def test_non_positive_size_is_rejected(self):
        with pytest.raises(ValueError):
            ImageSize(0.0, 10.0)
        with pytest.raises(ValueError):
            ImageSize(10.0, -1.0)


if __name__ == "__main__":
    unittest.main()
