import unittest

import numpy

from ffnn.network.activation import sigmoid, sigmoid_derivative


class TestSigmoid(unittest.TestCase):

    def test_sigmoid_at_zero(self):
        self.assertEqual(sigmoid(0.0), 0.5)

    def test_sigmoid_strictly_increasing(self):
        v = numpy.linspace(-20, 20, 1001)
        s = sigmoid(v)
        self.assertTrue((numpy.diff(s) > 0).all())

    def test_sigmoid_preserves_shape(self):
        random_state = numpy.random.RandomState(1234)
        v = random_state.randn(7, 3)
        s = sigmoid(v)

        self.assertEqual(s.shape, v.shape)
        self.assertTrue(((s > 0) & (s < 1)).all())

    def test_sigmoid_does_not_modify_input(self):
        v = numpy.array([[-1.0, 0.0, 2.0]])
        v_copy = v.copy()
        sigmoid(v)
        self.assertTrue((v == v_copy).all())

    def test_sigmoid_saturates_without_error(self):
        s = sigmoid(numpy.array([-1e4, 1e4]))
        self.assertEqual(s[0], 0.0)
        self.assertEqual(s[1], 1.0)

    def test_sigmoid_matches_formula(self):
        v = numpy.linspace(-5, 5, 21)
        expected = 1.0 / (1.0 + numpy.exp(-v))
        self.assertLess(numpy.abs(sigmoid(v) - expected).max(), 1e-12)


class TestSigmoidDerivative(unittest.TestCase):

    def test_derivative_range(self):
        v = numpy.linspace(-50, 50, 2001)
        d = sigmoid_derivative(sigmoid(v))
        self.assertTrue((d >= 0).all())
        self.assertTrue((d <= 0.25).all())

    def test_derivative_maximum_at_zero(self):
        self.assertEqual(sigmoid_derivative(sigmoid(0.0)), 0.25)

    def test_derivative_matches_finite_difference(self):
        v = numpy.linspace(-4, 4, 17)
        eps = 1e-6
        numeric = (sigmoid(v + eps) - sigmoid(v - eps)) / (2 * eps)
        self.assertLess(
            numpy.abs(sigmoid_derivative(sigmoid(v)) - numeric).max(), 1e-8)
