from collections import namedtuple

import numpy

from ffnn.network.activation import sigmoid


# Layer activations of one forward pass, retained for the backward pass
ForwardActivations = namedtuple(
    'ForwardActivations', ['hidden1', 'hidden2', 'output'])


def forward_pass(features, params):
    """ Propagate the features through the network

    Parameters
    ----------
    features: ndarray, shape=(n_examples, n_features)
        Each row of `features` is an observation.

    params: NetworkParameters
        The current weights. These are not modified.

    Returns
    -------
    activations: ForwardActivations
        The hidden and output activations with shapes
        (n_examples, H1), (n_examples, H2), and (n_examples, n_outputs).
    """
    hidden1 = sigmoid(numpy.dot(features, params.w1))
    hidden2 = sigmoid(numpy.dot(hidden1, params.w2))
    output = sigmoid(numpy.dot(hidden2, params.w3))

    return ForwardActivations(hidden1=hidden1, hidden2=hidden2, output=output)


def predict(features, params):
    """ Returns the network output for `features`
    """
    return forward_pass(features, params).output
