from scipy.special import expit


def sigmoid(v):
    """ Elementwise logistic sigmoid, :code:`1 / (1 + exp(-v))`

    Large negative arguments saturate to exactly zero (and large positive
    arguments to exactly one) without overflow warnings.

    Parameters
    ----------
    v: ndarray or float

    Returns
    -------
    s: ndarray or float
        A new array with the same shape as `v`.
    """
    return expit(v)


def sigmoid_derivative(s):
    """ Elementwise derivative of the sigmoid, written in terms of the
    sigmoid's output: :code:`s * (1 - s)`

    Note
    ----
    `s` must already be sigmoid-activated, i.e., pass
    :code:`sigmoid(v)` rather than `v`.
    """
    return s * (1.0 - s)
