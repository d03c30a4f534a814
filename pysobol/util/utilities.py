import numpy as np


def variance_biased(values, axis=0):
    r"""
    Compute the population variance, i.e. the sum of squared deviations
    divided by the number of values :math:`n`.

    Parameters
    ----------
    values : np.ndarray (nvalues) or (nvalues, nqoi)
        The values

    axis : integer
        The axis along which the variance is computed

    Returns
    -------
    variance : float or np.ndarray (nqoi)
        The variance of each column of values

    Examples
    --------
    >>> print(variance_biased(np.array([1., 2., 3., 4.])))
    1.25
    """
    return np.var(values, axis=axis, ddof=0)


def variance_unbiased(values, axis=0):
    r"""
    Compute the sample variance, i.e. the sum of squared deviations
    divided by :math:`n-1`.

    Parameters
    ----------
    values : np.ndarray (nvalues) or (nvalues, nqoi)
        The values. nvalues must be at least 2

    axis : integer
        The axis along which the variance is computed

    Returns
    -------
    variance : float or np.ndarray (nqoi)
        The variance of each column of values

    Examples
    --------
    >>> print(variance_unbiased(np.array([1., 2., 3., 4.])))
    1.6666666666666667
    """
    assert np.asarray(values).shape[axis] > 1
    return np.var(values, axis=axis, ddof=1)


def std_unbiased(values, axis=0):
    """
    Square root of :func:`variance_unbiased`.
    """
    return np.sqrt(variance_unbiased(values, axis))


def standardize(values, mean, stdev):
    r"""
    Return the standardized values :math:`(y-\mu)/\sigma` as a new array.
    """
    return (np.asarray(values, dtype=float)-mean)/stdev


def split_indices(nelems, nsplits):
    """
    Split ``nelems`` consecutive indices into ``nsplits`` contiguous chunks
    whose sizes differ by at most one.

    Returns
    -------
    bounds : np.ndarray (nsplits+1)
        Chunk ``ii`` contains the indices ``bounds[ii]:bounds[ii+1]``
    """
    indices = np.hstack((
        np.full((nelems % nsplits), nelems//nsplits+1),
        np.full(nsplits-(nelems % nsplits), nelems//nsplits)))
    return np.hstack((0, np.cumsum(indices))).astype(int)
