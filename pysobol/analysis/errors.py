class SobolAnalysisError(ValueError):
    """Base class of the errors raised while computing Sobol indices."""


class DimensionMismatchError(SobolAnalysisError):
    """
    The model output does not have the ``nsamples*(nvars+2)`` entries
    required by the interleaved Sobol sample layout.
    """


class DegenerateInputError(SobolAnalysisError):
    """
    The model output has (near) zero variance or non-finite entries so the
    sensitivity indices are undefined.
    """


class InvalidProblemError(SobolAnalysisError):
    """The number of variables or the number of samples is not positive."""
