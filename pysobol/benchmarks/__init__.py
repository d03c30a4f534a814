"""The :mod:`pysobol.benchmarks` module implements functions with known
Sobol sensitivity indices used to verify the sensitivity estimators.
"""

from pysobol.benchmarks.sensitivity_benchmarks import (
    ishigami_function, get_ishigami_function_statistics, sobol_g_function,
    get_sobol_g_function_statistics, linear_function,
    get_linear_function_statistics
)


__all__ = ["ishigami_function", "get_ishigami_function_statistics",
           "sobol_g_function", "get_sobol_g_function_statistics",
           "linear_function", "get_linear_function_statistics"]
