import numpy


def output_error(output, targets):
    """ The elementwise error, :code:`output - targets`
    """
    return output - targets


def mean_absolute_error(error):
    """ Average of the absolute values of all entries of the error matrix

    This is a diagnostic summary only; the backward pass uses the full
    error matrix. Non-finite entries propagate into the result.

    Parameters
    ----------
    error: ndarray, shape=(n_examples, n_outputs)

    Returns
    -------
    mae: float
    """
    error = numpy.asarray(error, dtype=float)
    return float(numpy.abs(error).sum() / error.size)
