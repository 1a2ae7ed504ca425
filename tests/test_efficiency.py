"""Unit tests for efficiency module."""

import unittest
import sys
import os
import math
import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from solar_profit.efficiency import (DomainError, gaussian_density, integrate_trapezoidal,
                                     normal_coverage, window_bounds, calculate_efficiencies)


class TestGaussianDensity(unittest.TestCase):
    """Test Gaussian density evaluation."""

    def test_peak_at_mean(self):
        """Density at the mean is 1/(deviation*sqrt(2*pi))."""
        for deviation in [0.5, 1.0, 2.0, 7.5]:
            expected = 1.0 / (deviation * math.sqrt(2 * math.pi))
            self.assertAlmostEqual(gaussian_density(10.0, 10.0, deviation), expected, places=12)

    def test_symmetry(self):
        """Density is symmetric around the mean."""
        for d in [0.1, 1.0, 3.3]:
            left = gaussian_density(10.0 - d, 10.0, 2.0)
            right = gaussian_density(10.0 + d, 10.0, 2.0)
            self.assertAlmostEqual(left, right, places=14)

    def test_array_input(self):
        """Array input evaluates element-wise."""
        x = np.array([9.0, 10.0, 11.0])
        values = gaussian_density(x, 10.0, 1.0)

        self.assertEqual(values.shape, (3,))
        self.assertAlmostEqual(values[0], values[2], places=14)
        self.assertGreater(values[1], values[0])

    def test_zero_deviation_raises(self):
        """Zero deviation is outside the domain."""
        with self.assertRaises(DomainError):
            gaussian_density(1.0, 1.0, 0.0)

    def test_negative_deviation_gives_negative_density(self):
        """Negative deviation is not rejected."""
        self.assertLess(gaussian_density(0.0, 0.0, -1.0), 0)


class TestTrapezoidalIntegration(unittest.TestCase):
    """Test trapezoidal integration of the density."""

    def test_standard_coverage_fractions(self):
        """Mass within k deviations matches the 68-95-99.7 rule."""
        mean, deviation = 10.0, 2.0
        expected = {1: 0.682689, 2: 0.954500, 3: 0.997300}

        for k, coverage in expected.items():
            result = integrate_trapezoidal(mean - k * deviation, mean + k * deviation,
                                           1000, mean, deviation)
            self.assertAlmostEqual(result, coverage, places=4)

    def test_matches_closed_form(self):
        """Discretization error is small for 1000 intervals."""
        result = integrate_trapezoidal(9.0, 11.0, 1000, 10.0, 2.0)
        exact = normal_coverage(9.0, 11.0, 10.0, 2.0)

        self.assertAlmostEqual(result, exact, places=6)

    def test_zero_width_window(self):
        """Zero-width window integrates to zero, even for zero deviation."""
        self.assertEqual(integrate_trapezoidal(10.0, 10.0, 1000, 10.0, 2.0), 0.0)
        self.assertEqual(integrate_trapezoidal(10.0, 10.0, 1000, 10.0, 0.0), 0.0)

    def test_zero_deviation_over_window_raises(self):
        """Zero deviation over a non-empty window is a domain error."""
        with self.assertRaises(DomainError):
            integrate_trapezoidal(9.0, 11.0, 1000, 10.0, 0.0)

    def test_inverted_window_is_negative(self):
        """Inverted bounds give a negative integral."""
        forward = integrate_trapezoidal(9.0, 11.0, 1000, 10.0, 2.0)
        backward = integrate_trapezoidal(11.0, 9.0, 1000, 10.0, 2.0)

        self.assertLess(backward, 0)
        self.assertAlmostEqual(backward, -forward, places=12)

    def test_invalid_intervals(self):
        """Intervals must be a positive integer."""
        for intervals in [0, -5, 2.5, True]:
            with self.assertRaises(ValueError):
                integrate_trapezoidal(0.0, 1.0, intervals, 0.0, 1.0)


class TestEfficiencies(unittest.TestCase):
    """Test before/after efficiency calculation."""

    def test_window_from_improved_deviation(self):
        """Window is centred on power with the improved deviation as half-width."""
        self.assertEqual(window_bounds(10.0, 1.0), (9.0, 11.0))

    def test_scenario(self):
        """power=10, initial=2, improved=1."""
        before, after = calculate_efficiencies(10.0, 2.0, 1.0)

        self.assertAlmostEqual(before, 0.382925, places=4)
        self.assertAlmostEqual(after, 0.682689, places=4)

    def test_before_uses_improved_window(self):
        """Before pass integrates the initial spread over the improved window."""
        before, _ = calculate_efficiencies(10.0, 2.0, 1.0)
        expected = integrate_trapezoidal(9.0, 11.0, 1000, 10.0, 2.0)

        self.assertEqual(before, expected)

    def test_negative_improved_deviation(self):
        """Negative improved deviation inverts the window."""
        before, _ = calculate_efficiencies(10.0, 2.0, -1.0)

        self.assertLess(before, 0)

    def test_closed_form_requires_positive_deviation(self):
        """Closed-form coverage rejects non-positive deviations."""
        with self.assertRaises(DomainError):
            normal_coverage(9.0, 11.0, 10.0, 0.0)
        with self.assertRaises(DomainError):
            normal_coverage(9.0, 11.0, 10.0, -1.0)


if __name__ == '__main__':
    unittest.main()
