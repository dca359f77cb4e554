import unittest

import numpy

from ffnn.network.loss import mean_absolute_error, output_error


class TestOutputError(unittest.TestCase):

    def test_difference(self):
        output = numpy.array([[0.5, 0.25], [1.0, 0.0]])
        targets = numpy.array([[0.25, 0.25], [0.5, 1.0]])

        error = output_error(output, targets)

        expected = numpy.array([[0.25, 0.0], [0.5, -1.0]])
        self.assertTrue((error == expected).all())


class TestMeanAbsoluteError(unittest.TestCase):

    def test_zeros(self):
        self.assertEqual(mean_absolute_error(numpy.zeros((4, 2))), 0.0)

    def test_uniform(self):
        for c in [0.5, -0.25, 3.0, -1.5]:
            error = numpy.full((4, 2), c)
            self.assertEqual(mean_absolute_error(error), abs(c))

    def test_mixed_signs(self):
        error = numpy.array([[1.0, -1.0], [-2.0, 0.0]])
        self.assertEqual(mean_absolute_error(error), 1.0)

    def test_returns_float(self):
        self.assertIsInstance(mean_absolute_error(numpy.ones((2, 2))), float)

    def test_nan_propagates(self):
        error = numpy.array([[numpy.nan, 1.0]])
        self.assertTrue(numpy.isnan(mean_absolute_error(error)))
