from collections import namedtuple
import logging

import numpy

from ffnn.core.config import TrainingConfig
from ffnn.core.exception import ConfigurationError, TrainingAlreadyRun
from ffnn.network.epoch import run_epoch
from ffnn.network.loss import mean_absolute_error
from ffnn.network.parameters import (
    NetworkParameters, initialize_parameters, layer_sizes,
    validate_parameters)


logger = logging.getLogger(__name__)

INITIALIZING = 'initializing'
TRAINING = 'training'
EXHAUSTED = 'exhausted'


# Handed back to the caller when training ends
TrainingResult = namedtuple(
    'TrainingResult',
    ['params', 'error_history', 'epochs_run', 'cancelled'])


class Trainer:
    """ Owns the data, the weights, and the error history, and runs the
    fixed-length gradient descent loop
    """
    def __init__(self, features, targets, config=None, params=None,
                 random_state=None):
        """ Initialize a trainer. All configuration and dimension checks
        happen here, before any training.

        Parameters
        ----------
        features: ndarray, shape=(n_examples, n_features)
            The feature matrix, examples by row. A read-only copy is kept.

        targets: ndarray, shape=(n_examples, n_outputs) or (n_examples,)
            The target matrix. A 1d vector is treated as a single column.

        config: TrainingConfig, default=None
            The default (None) derives the dimensions from `features` and
            `targets` and uses the default options otherwise.

        params: NetworkParameters, default=None
            Starting weights. The default (None) draws them at random.

        random_state: numpy.random.RandomState, default=None
            Source of randomness for the initial weights. The default (None)
            creates one seeded with :code:`config.random_seed`.

        """
        self.state = INITIALIZING

        features = numpy.array(features, dtype=float)
        targets = numpy.array(targets, dtype=float)

        if targets.ndim == 1:
            targets = targets.reshape(-1, 1)

        if config is None:
            config = TrainingConfig.from_data(features, targets)
        elif not isinstance(config, TrainingConfig):
            msg = "`config` was type {} but should be TrainingConfig"
            raise ConfigurationError(msg.format(type(config).__name__))

        self._validate_data(features, targets, config)

        # Training data stays fixed for the life of the trainer
        features.setflags(write=False)
        targets.setflags(write=False)

        self.features = features
        self.targets = targets
        self.config = config

        if params is None:
            if random_state is None:
                random_state = numpy.random.RandomState(config.random_seed)
            params = initialize_parameters(
                n_features=config.n_features,
                hidden_sizes=config.hidden_sizes,
                n_outputs=config.n_outputs,
                random_state=random_state)
        else:
            # The trainer owns its weights, so keep float copies
            if isinstance(params, NetworkParameters):
                try:
                    params = NetworkParameters(*[
                        numpy.array(weights, dtype=float)
                        for weights in params])
                except (ValueError, TypeError):
                    msg = "Provided weights could not be converted to arrays"
                    raise ConfigurationError(msg)

            validate_parameters(params, n_features=config.n_features,
                                n_outputs=config.n_outputs)
            hidden_sizes = layer_sizes(params)[1:3]
            if hidden_sizes != config.hidden_sizes:
                msg = "Provided weights have hidden sizes {} but config has {}"
                raise ConfigurationError(
                    msg.format(hidden_sizes, config.hidden_sizes))

        self.random_state = random_state
        self.params = params
        self.error_history = []
        self.epoch = 0
        self._cancel_requested = False

        msg = ("Initialized network with layer sizes {} on {} examples "
               "(learning rate = {}, epochs = {})")
        logger.info(msg.format(layer_sizes(self.params), config.n_examples,
                               config.learning_rate, config.n_epochs))

    def _validate_data(self, features, targets, config):

        if features.ndim != 2:
            msg = "`features` (ndim={}) should be a 2d matrix"
            raise ConfigurationError(msg.format(features.ndim))

        if targets.ndim != 2:
            msg = "`targets` (ndim={}) should be a 1d or 2d matrix"
            raise ConfigurationError(msg.format(targets.ndim))

        if features.shape[0] != targets.shape[0]:
            msg = "Mismatch in number of examples: features ({}), targets ({})"
            raise ConfigurationError(
                msg.format(features.shape[0], targets.shape[0]))

        if features.shape[0] != config.n_examples:
            msg = "`features` has {} examples but config expects {}"
            raise ConfigurationError(
                msg.format(features.shape[0], config.n_examples))

        if features.shape[1] != config.n_features:
            msg = "`features` has {} features but config expects {}"
            raise ConfigurationError(
                msg.format(features.shape[1], config.n_features))

        if targets.shape[1] != config.n_outputs:
            msg = "`targets` has {} columns but config expects {} outputs"
            raise ConfigurationError(
                msg.format(targets.shape[1], config.n_outputs))

    def _log_with_epoch(self, msg, level='info'):
        """ Write to the logger with the current epoch number prepended
        to the log message
        """
        full_message = "(Epoch = {:04d}) {:s}".format(self.epoch, msg)

        if level == 'info':
            logger.info(full_message)
        elif level == 'debug':
            logger.debug(full_message)
        elif level == 'warning':
            logger.warning(full_message)
        elif level == 'error':
            logger.error(full_message)
        else:
            raise ValueError("Unknown log level: {}".format(level))

    def cancel(self):
        """ Request that training stop before the next epoch starts
        """
        self._cancel_requested = True

    def _should_stop(self, should_stop):
        return self._cancel_requested or (
            should_stop is not None and should_stop())

    def train(self, on_sample=None, should_stop=None):
        """ Run the configured number of epochs

        Parameters
        ----------
        on_sample: callable or list of callables, default=None
            Each is called as :code:`on_sample(epoch, error)` whenever the
            mean absolute error is recorded.

        should_stop: callable, default=None
            Checked (with no arguments) before each epoch; training stops
            when it returns True. See also :meth:`cancel`.

        Returns
        -------
        result: TrainingResult
            The final weights, the recorded errors in epoch order, the
            number of completed epochs, and whether training was cancelled.
        """
        if self.state != INITIALIZING:
            msg = "This trainer has already run ({} epochs completed)"
            raise TrainingAlreadyRun(msg.format(self.epoch))

        if on_sample is None:
            on_sample = []
        elif callable(on_sample):
            on_sample = [on_sample]

        self.state = TRAINING
        self._log_with_epoch("Training started")

        cancelled = False
        config = self.config

        try:
            for epoch in range(config.n_epochs):
                self.epoch = epoch

                if self._should_stop(should_stop):
                    self._log_with_epoch(
                        "Training cancelled", level='warning')
                    cancelled = True
                    break

                result = run_epoch(
                    self.features, self.targets, self.params,
                    learning_rate=config.learning_rate,
                    normalize_gradient=config.normalize_gradient)

                # The epoch is complete once its weights are installed
                self.params = result.params

                if epoch % config.sample_interval == 0:
                    error = mean_absolute_error(result.error)
                    self.error_history.append(error)
                    self._log_with_epoch(
                        "Mean absolute error = {:.7f}".format(error),
                        level='debug')

                    for callback in on_sample:
                        callback(epoch, error)
            else:
                self.epoch = config.n_epochs
        except Exception:
            self._log_with_epoch("Training interrupted", level='error')
            raise
        finally:
            self.state = EXHAUSTED

        if not cancelled and self.error_history:
            msg = "Training finished; final sampled error = {:.7f}"
            self._log_with_epoch(msg.format(self.error_history[-1]))
        elif not cancelled:
            self._log_with_epoch("Training finished")

        return TrainingResult(
            params=self.params,
            error_history=list(self.error_history),
            epochs_run=self.epoch,
            cancelled=cancelled)


def train(features, targets, config=None, random_state=None, on_sample=None):
    """ Train a network on `features` and `targets`. See :class:`Trainer`
    for a description of the arguments.

    Returns
    -------
    result: TrainingResult
    """
    trainer = Trainer(features, targets, config=config,
                      random_state=random_state)
    return trainer.train(on_sample=on_sample)
