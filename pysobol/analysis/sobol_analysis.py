r"""
Sampling based estimation of Sobol main (first-order) and total effect
sensitivity indices from precomputed model evaluations.

References
----------
    [1] Sobol, I. M. (2001).  "Global sensitivity indices for nonlinear
        mathematical models and their Monte Carlo estimates."  Mathematics
        and Computers in Simulation, 55(1-3):271-280,
        doi:10.1016/S0378-4754(00)00270-6.
    [2] Saltelli, A. (2002).  "Making best use of model evaluations to
        compute sensitivity indices."  Computer Physics Communications,
        145(2):280-297, doi:10.1016/S0010-4655(02)00280-1.
    [3] Saltelli, A., P. Annoni, I. Azzini, F. Campolongo, M. Ratto, and
        S. Tarantola (2010).  "Variance based sensitivity analysis of model
        output.  Design and estimator for the total sensitivity index."
        Computer Physics Communications, 181(2):259-270,
        doi:10.1016/j.cpc.2009.09.018.
"""
import logging
from numbers import Integral
from functools import partial
from multiprocessing.pool import ThreadPool

import numpy as np
from scipy.optimize import OptimizeResult

from pysobol.util.utilities import (
    variance_biased, std_unbiased, standardize, split_indices
)
from pysobol.analysis.errors import (
    DimensionMismatchError, DegenerateInputError, InvalidProblemError
)

logger = logging.getLogger(__name__)

# Layout of one block of the interleaved model output. Block j stores the
# evaluations at A[j], AB_1[j], ..., AB_D[j], B[j] in that order.
SOBOL_A_OFFSET = 0
SOBOL_AB_OFFSET = 1
# counted from the end of the block
SOBOL_B_OFFSET = -1

DEGENERATE_RTOL = 1e3*np.finfo(float).eps


def sobol_output_stride(nvars):
    """
    The number of model evaluations in each block of the interleaved
    output, i.e. one for A, one for B and one for each AB resample.
    """
    return nvars + 2


def _validate_problem_size(nvars, nsamples):
    for name, value in (("nvars", nvars), ("nsamples", nsamples)):
        if (isinstance(value, bool) or not isinstance(value, Integral) or
                value < 1):
            raise InvalidProblemError(
                f"{name} must be a positive integer but was {value!r}")


def _check_output_size(model_output, nsamples, nvars):
    if model_output.ndim == 0:
        raise DimensionMismatchError("model_output must be an array")
    stride = sobol_output_stride(nvars)
    nvalues = model_output.shape[0]
    if nvalues % stride != 0:
        raise DimensionMismatchError(
            f"The number of model outputs {nvalues} is not a multiple of "
            f"nvars+2={stride}")
    if nvalues != nsamples*stride:
        raise DimensionMismatchError(
            f"Expected nsamples*(nvars+2)={nsamples*stride} model outputs "
            f"but got {nvalues}")


class SobolProblem(object):
    r"""
    The size of a Sobol sensitivity analysis.

    Parameters
    ----------
    nvars : integer
        The number :math:`D` of uncertain variables

    nsamples : integer
        The number :math:`N` of samples in each of the sample sets A and B

    names : list (nvars)
        The names of the variables. Defaults to ``z1, ..., zD``
    """

    def __init__(self, nvars, nsamples, names=None):
        _validate_problem_size(nvars, nsamples)
        if names is None:
            names = ["z%d" % (ii+1) for ii in range(nvars)]
        if len(names) != nvars:
            raise InvalidProblemError(
                f"Got {len(names)} names for {nvars} variables")
        self._nvars = int(nvars)
        self._nsamples = int(nsamples)
        self._names = tuple(names)

    @property
    def D(self):
        return self._nvars

    @property
    def N(self):
        return self._nsamples

    @property
    def names(self):
        return self._names

    def nvars(self):
        return self._nvars

    def nsamples(self):
        return self._nsamples

    def nmodel_evaluations(self):
        """Total number of model evaluations consumed by the analysis."""
        return self._nsamples*sobol_output_stride(self._nvars)

    def __repr__(self):
        return "{0}(nvars={1}, nsamples={2})".format(
            self.__class__.__name__, self._nvars, self._nsamples)


class SensitivityResult(OptimizeResult):
    pass


def split_output(model_output, nsamples, nvars):
    r"""
    Separate the interleaved model output into the values at the sample sets
    A, B and :math:`A_B^{(i)}, i=1,\ldots,D`.

    Parameters
    ----------
    model_output : np.ndarray (nsamples*(nvars+2)) or (nsamples*(nvars+2), nqoi)
        The model evaluations ordered in blocks of size nvars+2. See
        :data:`SOBOL_A_OFFSET`, :data:`SOBOL_AB_OFFSET`, :data:`SOBOL_B_OFFSET`

    nsamples : integer
        The number of blocks

    nvars : integer
        The number of variables

    Returns
    -------
    A : np.ndarray (nsamples) or (nsamples, nqoi)
        The values at the sample set A

    B : np.ndarray (nsamples) or (nsamples, nqoi)
        The values at the sample set B

    AB : np.ndarray (nsamples, nvars) or (nsamples, nvars, nqoi)
        Column i contains the values at A with the ith variable taken from B
    """
    _validate_problem_size(nvars, nsamples)
    model_output = np.asarray(model_output)
    _check_output_size(model_output, nsamples, nvars)
    stride = sobol_output_stride(nvars)
    blocks = model_output.reshape(
        (nsamples, stride)+model_output.shape[1:])
    A = blocks[:, SOBOL_A_OFFSET].copy()
    B = blocks[:, stride+SOBOL_B_OFFSET].copy()
    AB = blocks[:, SOBOL_AB_OFFSET:SOBOL_AB_OFFSET+nvars].copy()
    return A, B, AB


def interleave_output(A, B, AB):
    """
    Assemble the values at the sample sets A, B and AB into the interleaved
    layout consumed by :func:`split_output`. This is the inverse of
    :func:`split_output`.
    """
    A, B, AB = np.asarray(A), np.asarray(B), np.asarray(AB)
    if A.ndim == 0 or A.shape != B.shape:
        raise DimensionMismatchError(
            f"A and B must have the same shape but had shapes {A.shape} "
            f"and {B.shape}")
    if (AB.ndim != A.ndim+1 or AB.shape[0] != A.shape[0] or
            AB.shape[2:] != A.shape[1:]):
        raise DimensionMismatchError(
            f"AB has shape {AB.shape} which is inconsistent with A of "
            f"shape {A.shape}")
    nsamples, nvars = AB.shape[:2]
    _validate_problem_size(nvars, nsamples)
    stride = sobol_output_stride(nvars)
    blocks = np.empty(
        (nsamples, stride)+A.shape[1:], dtype=np.result_type(A, B, AB))
    blocks[:, SOBOL_A_OFFSET] = A
    blocks[:, SOBOL_AB_OFFSET:SOBOL_AB_OFFSET+nvars] = AB
    blocks[:, stride+SOBOL_B_OFFSET] = B
    return blocks.reshape((nsamples*stride,)+A.shape[1:])


def _pooled_variance(A, B):
    return variance_biased(np.concatenate((A, B), axis=0))


def first_order_index(A, AB, B):
    r"""
    Estimate the first order sensitivity index of one variable, normalized
    by the variance of the pooled values :math:`[A; B]`.
    [Saltelli et al., 2010 Table 2 eq (b)]

    Parameters
    ----------
    A : np.ndarray (nsamples) or (nsamples, nqoi)
        The values at the sample set A

    AB : np.ndarray (nsamples) or (nsamples, nqoi)
        The values at A with the variable of interest taken from B

    B : np.ndarray (nsamples) or (nsamples, nqoi)
        The values at the sample set B

    Returns
    -------
    index : float or np.ndarray (nqoi)
        The first order index. Monte Carlo error can make the estimate
        negative or larger than one
    """
    return np.mean(B*(AB-A), axis=0)/_pooled_variance(A, B)


def total_order_index(A, AB, B):
    r"""
    Estimate the total effect sensitivity index of one variable, normalized
    by the variance of the pooled values :math:`[A; B]`.
    [Saltelli et al., 2010 Table 2 eq (f)]

    See :func:`first_order_index` for a description of the arguments.
    """
    return 0.5*np.mean((A-AB)**2, axis=0)/_pooled_variance(A, B)


def _sobol_indices_of_variables(A, AB, B, var_indices):
    firstorder = [first_order_index(A, AB[:, ii], B) for ii in var_indices]
    totalorder = [total_order_index(A, AB[:, ii], B) for ii in var_indices]
    return firstorder, totalorder


def _sobol_indices_of_all_variables(A, AB, B, nprocs):
    nvars = AB.shape[1]
    if nprocs == 1:
        return _sobol_indices_of_variables(A, AB, B, range(nvars))

    nchunks = min(nprocs, nvars)
    bounds = split_indices(nvars, nchunks)
    logger.debug("Computing indices of %d variables with %d threads",
                 nvars, nchunks)
    pool = ThreadPool(nchunks)
    result = pool.map(
        partial(_sobol_indices_of_variables, A, AB, B),
        [range(bounds[ii], bounds[ii+1]) for ii in range(nchunks)])
    pool.close()
    pool.join()
    firstorder, totalorder = [], []
    for chunk_firstorder, chunk_totalorder in result:
        firstorder += chunk_firstorder
        totalorder += chunk_totalorder
    return firstorder, totalorder


def _normalize_model_output(values, rtol):
    if not np.all(np.isfinite(values)):
        raise DegenerateInputError("model_output contains non-finite values")
    mean = values.mean(axis=0)
    stdev = std_unbiased(values)
    scale = np.max(np.abs(values), axis=0)
    if np.any(stdev <= rtol*scale):
        raise DegenerateInputError(
            "model_output has zero variance so the Sobol indices are "
            "undefined")
    logger.debug("Normalizing model output with mean %s and std %s",
                 mean, stdev)
    return standardize(values, mean, stdev)


def sobol_analyze(problem, model_output, nprocs=1, rtol=DEGENERATE_RTOL):
    r"""
    Compute the first order (main effect) and total order (total effect)
    Sobol sensitivity indices of each variable from model evaluations at
    the Saltelli sample sets.

    The model output is first standardized using its mean and its unbiased
    standard deviation. The indices are then estimated by
    :func:`first_order_index` and :func:`total_order_index` which normalize
    by the biased variance of the values at A and B.

    Parameters
    ----------
    problem : :class:`SobolProblem`
        Any object with integer attributes ``D`` (the number of variables)
        and ``N`` (the number of samples in the sample set A)

    model_output : np.ndarray (N*(D+2)) or (N*(D+2), nqoi)
        The model evaluations in the interleaved layout described in
        :func:`split_output`. The array is not modified.

    nprocs : integer
        The number of threads used to compute the indices of the variables

    rtol : float
        The output is treated as constant if its standard deviation is
        smaller than ``rtol`` times its largest absolute value

    Returns
    -------
    result : :class:`SensitivityResult`
         Result object with the following attributes

    firstorder : np.ndarray (D) or (D, nqoi)
        The first order index of each variable

    totalorder : np.ndarray (D) or (D, nqoi)
        The total order index of each variable

    Raises
    ------
    InvalidProblemError
        If D or N are not positive integers

    DimensionMismatchError
        If the number of model outputs is not N*(D+2)

    DegenerateInputError
        If the model output is constant or not finite
    """
    nvars, nsamples = problem.D, problem.N
    _validate_problem_size(nvars, nsamples)
    if isinstance(nprocs, bool) or not isinstance(nprocs, Integral) or (
            nprocs < 1):
        raise ValueError(f"nprocs must be a positive integer but was {nprocs}")

    values = np.asarray(model_output, dtype=float)
    _check_output_size(values, nsamples, nvars)
    logger.debug("Computing Sobol indices of %d variables from %d samples",
                 nvars, nsamples)
    values = _normalize_model_output(values, rtol)

    A, B, AB = split_output(values, nsamples, nvars)
    if np.any(_pooled_variance(A, B) <= rtol):
        raise DegenerateInputError(
            "The values at the sample sets A and B are constant so the "
            "Sobol indices are undefined")

    firstorder, totalorder = _sobol_indices_of_all_variables(
        A, AB, B, nprocs)
    firstorder, totalorder = np.asarray(firstorder), np.asarray(totalorder)
    firstorder.setflags(write=False)
    totalorder.setflags(write=False)
    return SensitivityResult(
        {"firstorder": firstorder, "totalorder": totalorder})
