"""
PySobol : Sobol variance based sensitivity indices from model evaluations
at Saltelli sample sets
"""
import logging as _logging

from pysobol.analysis import (
    SobolProblem, SensitivityResult, sobol_analyze, split_output,
    interleave_output, first_order_index, total_order_index,
    sobol_output_stride, SOBOL_A_OFFSET, SOBOL_AB_OFFSET, SOBOL_B_OFFSET,
    SobolAnalysisError, DimensionMismatchError, DegenerateInputError,
    InvalidProblemError
)

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

name = "pysobol"

__all__ = ["SobolProblem", "SensitivityResult", "sobol_analyze",
           "split_output", "interleave_output", "first_order_index",
           "total_order_index", "sobol_output_stride", "SOBOL_A_OFFSET",
           "SOBOL_AB_OFFSET", "SOBOL_B_OFFSET", "SobolAnalysisError",
           "DimensionMismatchError", "DegenerateInputError",
           "InvalidProblemError"]
