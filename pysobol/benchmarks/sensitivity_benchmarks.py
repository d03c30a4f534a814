import numpy as np


def variance_linear_combination_of_indendent_variables(coef, variances):
    assert coef.shape[0] == variances.shape[0]
    return np.sum(coef**2*variances)


def linear_function(coefficients, samples):
    r"""
    Evaluate the additive function

    .. math:: f(z) = \sum_{i=1}^D c_i z_i

    Parameters
    ----------
    coefficients : np.ndarray (nvars)
        The coefficients :math:`c_i`

    samples : np.ndarray (nvars, nsamples)
        The samples at which the function is evaluated

    Returns
    -------
    values : np.ndarray (nsamples, 1)
        The function values
    """
    assert coefficients.shape[0] == samples.shape[0]
    return coefficients.dot(samples)[:, np.newaxis]


def get_linear_function_statistics(coefficients, variances):
    """
    Statistics of :func:`linear_function` for independent variables with
    the given variances. The function has no interactions so the main
    and total effects are equal.
    """
    mean = 0
    variance = variance_linear_combination_of_indendent_variables(
        coefficients, variances)
    main_effects = coefficients**2*variances/variance
    return mean, variance, main_effects, main_effects.copy()


def ishigami_function(samples, a=7, b=0.1):
    if samples.ndim == 1:
        samples = samples[:, np.newaxis]
    vals = np.sin(samples[0, :])+a*np.sin(samples[1, :])**2 +\
        b*samples[2, :]**4*np.sin(samples[0, :])
    return vals[:, np.newaxis]


def get_ishigami_function_statistics(a=7, b=0.1):
    """
    p_i(X_i) ~ U[-pi,pi]
    """
    mean = a/2
    variance = a**2/8+b*np.pi**4/5+b**2*np.pi**8/18+0.5
    D_1 = b*np.pi**4/5+b**2*np.pi**8/50+0.5
    D_2, D_3, D_12, D_13 = a**2/8, 0, 0, b**2*np.pi**8/18-b**2*np.pi**8/50
    D_23, D_123 = 0, 0
    main_effects = np.array([D_1, D_2, D_3])/variance
    total_effects = np.array(
        [D_1+D_12+D_13+D_123, D_2+D_12+D_23+D_123,
         D_3+D_13+D_23+D_123])/variance
    return mean, variance, main_effects, total_effects


def sobol_g_function(coefficients, samples):
    """
    The coefficients control the sensitivity of each variable. Specifically
    they limit the range of the outputs, i.e.
    1-1/(1+a_i) <= (abs(4*x-2)+a_i)/(a_i+1) <= 1-1/(1+a_i)
    """
    nvars, nsamples = samples.shape
    assert coefficients.shape[0] == nvars
    vals = np.prod((np.absolute(4*samples-2)+coefficients[:, np.newaxis]) /
                   (1+coefficients[:, np.newaxis]), axis=0)[:, np.newaxis]
    assert vals.shape[0] == nsamples
    return vals


def get_sobol_g_function_statistics(a):
    """
    p_i(X_i) ~ U[0,1]

    See article: Variance based sensitivity analysis of model output.
    Design and estimator for the total sensitivity index
    """
    nvars = a.shape[0]
    mean = 1
    unnormalized_main_effects = 1/(3*(1+a)**2)
    variance = np.prod(unnormalized_main_effects+1)-1
    main_effects = unnormalized_main_effects/variance
    total_effects = np.tile(np.prod(unnormalized_main_effects+1), (nvars))
    total_effects *= unnormalized_main_effects/(unnormalized_main_effects+1)
    total_effects /= variance
    return mean, variance, main_effects, total_effects
