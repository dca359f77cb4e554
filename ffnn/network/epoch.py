from collections import namedtuple

from ffnn.network.backward import backward_pass
from ffnn.network.forward import forward_pass
from ffnn.network.loss import output_error
from ffnn.network.update import gradient_descent_update


# The new weights and the error matrix computed with the old weights
EpochResult = namedtuple('EpochResult', ['params', 'error'])


def run_epoch(features, targets, params, learning_rate=1.0,
              normalize_gradient=False):
    """ Forward pass, error, backward pass, and weight update, in sequence

    Every matrix is freshly allocated, so the result depends only on the
    arguments and `params` is left untouched.

    Returns
    -------
    result: EpochResult
    """
    activations = forward_pass(features, params)
    error = output_error(activations.output, targets)
    deltas = backward_pass(error, activations, params)

    new_params = gradient_descent_update(
        params, features, activations, deltas,
        learning_rate=learning_rate, normalize=normalize_gradient)

    return EpochResult(params=new_params, error=error)
