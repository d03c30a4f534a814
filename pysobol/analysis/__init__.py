from pysobol.analysis.errors import (
    SobolAnalysisError, DimensionMismatchError, DegenerateInputError,
    InvalidProblemError
)
from pysobol.analysis.sobol_analysis import (
    SobolProblem, SensitivityResult, sobol_analyze, split_output,
    interleave_output, first_order_index, total_order_index,
    sobol_output_stride, SOBOL_A_OFFSET, SOBOL_AB_OFFSET, SOBOL_B_OFFSET
)


__all__ = ["SobolProblem", "SensitivityResult", "sobol_analyze",
           "split_output", "interleave_output", "first_order_index",
           "total_order_index", "sobol_output_stride", "SOBOL_A_OFFSET",
           "SOBOL_AB_OFFSET", "SOBOL_B_OFFSET", "SobolAnalysisError",
           "DimensionMismatchError", "DegenerateInputError",
           "InvalidProblemError"]
