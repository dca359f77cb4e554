from collections import namedtuple

import numpy

from ffnn.network.activation import sigmoid_derivative


# Per-layer error signals, shaped like the corresponding activations
Deltas = namedtuple('Deltas', ['hidden1', 'hidden2', 'output'])


def backward_pass(error, activations, params):
    """ Backpropagate the output error through the network

    Each layer's delta is the next layer's delta sent back through the next
    layer's weights, then scaled by the layer's own activation derivative.

    Parameters
    ----------
    error: ndarray, shape=(n_examples, n_outputs)
        The output error, :code:`output - targets`.

    activations: ForwardActivations
        The activations of the forward pass that produced `error`.

    params: NetworkParameters
        The weights used in that forward pass.

    Returns
    -------
    deltas: Deltas
    """
    output_delta = error * sigmoid_derivative(activations.output)

    hidden2_error = numpy.dot(output_delta, params.w3.T)
    hidden2_delta = hidden2_error * sigmoid_derivative(activations.hidden2)

    hidden1_error = numpy.dot(hidden2_delta, params.w2.T)
    hidden1_delta = hidden1_error * sigmoid_derivative(activations.hidden1)

    return Deltas(hidden1=hidden1_delta, hidden2=hidden2_delta,
                  output=output_delta)
