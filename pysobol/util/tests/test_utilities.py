import unittest
import numpy as np

from pysobol.util.utilities import (
    variance_biased, variance_unbiased, std_unbiased, standardize,
    split_indices
)


class TestUtilities(unittest.TestCase):
    def setUp(self):
        np.random.seed(1)

    def test_variance_biased_and_unbiased(self):
        values = np.array([1., 2., 3., 4.])
        assert np.allclose(variance_biased(values), 1.25)
        assert np.allclose(variance_unbiased(values), 5/3)
        assert np.allclose(std_unbiased(values), np.sqrt(5/3))

        # the two pooled values used when estimating indices from one sample
        assert np.allclose(variance_biased(np.array([-1., 1.])), 1.)
        assert np.allclose(variance_unbiased(np.array([-1., 1.])), 2.)

    def test_variance_of_columns(self):
        values = np.random.normal(0, 1, (20, 3))
        nvalues = values.shape[0]
        assert variance_biased(values).shape == (3,)
        assert np.allclose(
            variance_unbiased(values)*(nvalues-1)/nvalues,
            variance_biased(values))
        for kk in range(values.shape[1]):
            assert np.allclose(
                variance_biased(values)[kk],
                np.mean((values[:, kk]-values[:, kk].mean())**2))

    def test_variance_unbiased_requires_two_values(self):
        self.assertRaises(AssertionError, variance_unbiased, np.ones(1))

    def test_standardize(self):
        values = np.random.uniform(2, 5, (30, 2))
        values_copy = values.copy()
        std_values = standardize(
            values, values.mean(axis=0), std_unbiased(values))
        assert np.array_equal(values, values_copy)
        assert np.allclose(std_values.mean(axis=0), 0)
        assert np.allclose(variance_unbiased(std_values), 1)

    def test_split_indices(self):
        assert np.array_equal(split_indices(5, 2), [0, 3, 5])
        assert np.array_equal(split_indices(6, 3), [0, 2, 4, 6])
        assert np.array_equal(split_indices(3, 3), [0, 1, 2, 3])


if __name__ == "__main__":
    utilities_test_suite = unittest.TestLoader().loadTestsFromTestCase(
        TestUtilities)
    unittest.TextTestRunner(verbosity=2).run(utilities_test_suite)
