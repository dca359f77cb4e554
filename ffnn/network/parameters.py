from collections import namedtuple

import numpy

from ffnn.core.exception import ConfigurationError


# The three weight layers: input => hidden1 => hidden2 => output
NetworkParameters = namedtuple('NetworkParameters', ['w1', 'w2', 'w3'])


def validate_parameters(params, n_features=None, n_outputs=None):
    """ Check that the weight matrices are 2d and that their dimensions
    chain, i.e., the columns of each layer equal the rows of the next.
    Raises :class:`ConfigurationError` otherwise.

    Parameters
    ----------
    params: NetworkParameters

    n_features: int, default=None
        If given, the expected number of rows of `w1`.

    n_outputs: int, default=None
        If given, the expected number of columns of `w3`.

    """
    if not isinstance(params, NetworkParameters):
        msg = "`params` was type {} but should be NetworkParameters"
        raise ConfigurationError(msg.format(type(params).__name__))

    for name, weights in zip(params._fields, params):
        if not isinstance(weights, numpy.ndarray):
            msg = "`{}` was type {} but should be numpy.ndarray"
            raise ConfigurationError(msg.format(name, type(weights).__name__))

        if weights.ndim != 2:
            msg = "`{}` (ndim={}) should be a 2d matrix"
            raise ConfigurationError(msg.format(name, weights.ndim))

    for (name, weights), (next_name, next_weights) in zip(
            zip(params._fields[:-1], params[:-1]),
            zip(params._fields[1:], params[1:])):
        if weights.shape[1] != next_weights.shape[0]:
            msg = ("`{}` shape {} does not chain with `{}` shape {}: "
                   "columns of the former should equal rows of the latter")
            raise ConfigurationError(msg.format(
                name, weights.shape, next_name, next_weights.shape))

    if n_features is not None and params.w1.shape[0] != n_features:
        msg = "`w1` has {} rows but there are {} features"
        raise ConfigurationError(msg.format(params.w1.shape[0], n_features))

    if n_outputs is not None and params.w3.shape[1] != n_outputs:
        msg = "`w3` has {} columns but there are {} outputs"
        raise ConfigurationError(msg.format(params.w3.shape[1], n_outputs))


def layer_sizes(params):
    """ Returns the layer widths (F, H1, H2, O) implied by the weights
    """
    return (params.w1.shape[0], params.w1.shape[1],
            params.w2.shape[1], params.w3.shape[1])


def initialize_parameters(n_features, hidden_sizes, n_outputs,
                          random_state=None):
    """ Create weight matrices with IID standard normal entries

    Identical weights would make the hidden units in a layer co-update
    identically, so the entries are drawn at random.

    Parameters
    ----------
    n_features: int
        Number of input units.

    hidden_sizes: 2-tuple of int
        Number of units in the first and second hidden layers.

    n_outputs: int
        Number of output units.

    random_state: numpy.random.RandomState, default=None
        Provide a RandomState object for reproducible results.

    Returns
    -------
    params: NetworkParameters
        Weights drawn in the order `w1`, `w2`, `w3`.
    """
    if len(hidden_sizes) != 2:
        msg = "`hidden_sizes` should have 2 entries but has {}"
        raise ConfigurationError(msg.format(len(hidden_sizes)))

    sizes = (n_features,) + tuple(hidden_sizes) + (n_outputs,)

    for size in sizes:
        if size <= 0:
            msg = "Layer sizes must be positive, got {}"
            raise ConfigurationError(msg.format(sizes))

    if random_state is None:
        random_state = numpy.random.RandomState()

    weights = [random_state.randn(rows, cols)
               for rows, cols in zip(sizes[:-1], sizes[1:])]

    return NetworkParameters(*weights)
