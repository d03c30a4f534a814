import unittest
import numpy as np

from pysobol.benchmarks.sensitivity_benchmarks import (
    ishigami_function, get_ishigami_function_statistics, sobol_g_function,
    get_sobol_g_function_statistics, linear_function,
    get_linear_function_statistics
)


class TestSensitivityBenchmarks(unittest.TestCase):
    def setUp(self):
        np.random.seed(1)

    def test_ishigami_function_statistics(self):
        nsamples = 1000000
        samples = np.random.uniform(-np.pi, np.pi, (3, nsamples))
        values = ishigami_function(samples)
        assert values.shape == (nsamples, 1)
        mean, variance, main_effects, total_effects = \
            get_ishigami_function_statistics()
        assert np.allclose(values.mean(), mean, atol=2e-2)
        assert np.allclose(values.var(), variance, rtol=1e-2)
        assert np.all(total_effects >= main_effects)
        assert main_effects.sum() <= 1
        assert np.allclose(main_effects[2], 0)

    def test_sobol_g_function_statistics(self):
        nsamples = 1000000
        a = np.array([0, 1, 4.5, 9, 99])
        samples = np.random.uniform(0, 1, (a.shape[0], nsamples))
        values = sobol_g_function(a, samples)
        assert values.shape == (nsamples, 1)
        mean, variance, main_effects, total_effects = \
            get_sobol_g_function_statistics(a)
        assert np.allclose(values.mean(), mean, atol=1e-2)
        assert np.allclose(values.var(), variance, rtol=2e-2)
        assert np.all(total_effects >= main_effects)
        # smaller coefficients correspond to more important variables
        assert np.all(np.diff(main_effects) < 0)

    def test_linear_function_statistics(self):
        nsamples = 100000
        coef = np.array([1., -2., 3.])
        samples = np.random.normal(0, 1, (coef.shape[0], nsamples))
        values = linear_function(coef, samples)
        assert values.shape == (nsamples, 1)
        mean, variance, main_effects, total_effects = \
            get_linear_function_statistics(coef, np.ones(coef.shape[0]))
        assert np.allclose(variance, 14)
        assert np.allclose(values.var(), variance, rtol=2e-2)
        assert np.allclose(main_effects, [1/14, 4/14, 9/14])
        assert np.allclose(main_effects.sum(), 1)
        assert np.allclose(total_effects, main_effects)


if __name__ == "__main__":
    sensitivity_benchmarks_test_suite = \
        unittest.TestLoader().loadTestsFromTestCase(TestSensitivityBenchmarks)
    unittest.TextTestRunner(verbosity=2).run(
        sensitivity_benchmarks_test_suite)
