import numpy

from ffnn.core.exception import ConfigurationError
from ffnn.network.parameters import NetworkParameters


def weight_gradients(features, activations, deltas, normalize=False):
    """ Compute the gradient of each weight matrix from the layer deltas

    Parameters
    ----------
    features: ndarray, shape=(n_examples, n_features)

    activations: ForwardActivations

    deltas: Deltas

    normalize: bool, default=False
        If True, the gradients are divided by the number of examples
        (i.e., averaged rather than summed over the batch).

    Returns
    -------
    gradients: NetworkParameters
        The gradients, shaped like the corresponding weights.
    """
    gradients = NetworkParameters(
        w1=numpy.dot(features.T, deltas.hidden1),
        w2=numpy.dot(activations.hidden1.T, deltas.hidden2),
        w3=numpy.dot(activations.hidden2.T, deltas.output),
    )

    if normalize:
        n_examples = features.shape[0]
        gradients = NetworkParameters(
            *[gradient / n_examples for gradient in gradients])

    return gradients


def gradient_descent_update(params, features, activations, deltas,
                            learning_rate=1.0, normalize=False):
    """ Take one gradient descent step

    All gradients are computed from the same forward and backward state
    before any new weights are formed. The given weights are not modified.

    Parameters
    ----------
    params: NetworkParameters
        The weights used to compute `activations` and `deltas`.

    features, activations, deltas:
        See :func:`weight_gradients`.

    learning_rate: float, default=1.0
        The step size. Must be positive.

    normalize: bool, default=False
        See :func:`weight_gradients`.

    Returns
    -------
    params: NetworkParameters
        New weight matrices.
    """
    if not learning_rate > 0:
        msg = "`learning_rate` must be positive, got {}"
        raise ConfigurationError(msg.format(learning_rate))

    gradients = weight_gradients(
        features, activations, deltas, normalize=normalize)

    return NetworkParameters(*[
        weights - learning_rate * gradient
        for weights, gradient in zip(params, gradients)
    ])
