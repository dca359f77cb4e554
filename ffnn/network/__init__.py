# flake8: noqa

from .activation import sigmoid, sigmoid_derivative
from .backward import Deltas, backward_pass
from .epoch import EpochResult, run_epoch
from .forward import ForwardActivations, forward_pass, predict
from .loss import mean_absolute_error, output_error
from .parameters import (
    NetworkParameters, initialize_parameters, layer_sizes,
    validate_parameters)
from .update import gradient_descent_update, weight_gradients
