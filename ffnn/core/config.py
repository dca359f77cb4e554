import numbers

import numpy

from ffnn.core.exception import ConfigurationError


class TrainingConfig:
    """ The configuration surface for training: data dimensions, network
    topology, and gradient descent options
    """

    _fields = (
        'n_examples',
        'n_features',
        'hidden_sizes',
        'n_outputs',
        'n_epochs',
        'learning_rate',
        'sample_interval',
        'normalize_gradient',
        'random_seed',
    )

    def __init__(self,
                 n_examples=100,
                 n_features=8,
                 hidden_sizes=(5, 5),
                 n_outputs=1,
                 n_epochs=1000,
                 learning_rate=1.0,
                 sample_interval=1,
                 normalize_gradient=False,
                 random_seed=None,
                 ):
        """ Initialize a training configuration. The defaults correspond
        to the abalone regression (8 attributes, one target).

        Parameters
        ----------
        n_examples: int, default=100
            The number of training examples (rows of the feature matrix).

        n_features: int, default=8
            The number of features (columns of the feature matrix).

        hidden_sizes: 2-tuple of int, default=(5, 5)
            The widths of the two hidden layers.

        n_outputs: int, default=1
            The width of the output layer (columns of the target matrix).

        n_epochs: int, default=1000
            The fixed number of epochs to train for. Zero is allowed and
            leaves the initial weights untouched.

        learning_rate: float, default=1.0
            The gradient descent step size. Must be positive.

        sample_interval: int, default=1
            The mean absolute error is recorded on every epoch that is a
            multiple of this interval.

        normalize_gradient: bool, default=False
            If True, the weight gradients are divided by `n_examples`.
            The default uses the raw full-batch sum.

        random_seed: int, default=None
            Seed for the random state used to initialize the weights when
            no random state is supplied to the trainer.

        """
        self.n_examples = _positive_int('n_examples', n_examples)
        self.n_features = _positive_int('n_features', n_features)
        self.n_outputs = _positive_int('n_outputs', n_outputs)

        try:
            hidden_sizes = tuple(hidden_sizes)
        except TypeError:
            msg = "`hidden_sizes` should be a pair of ints, got {!r}"
            raise ConfigurationError(msg.format(hidden_sizes))

        if len(hidden_sizes) != 2:
            msg = "`hidden_sizes` should have 2 entries but has {}"
            raise ConfigurationError(msg.format(len(hidden_sizes)))

        self.hidden_sizes = tuple(
            _positive_int('hidden_sizes[{}]'.format(i), size)
            for i, size in enumerate(hidden_sizes))

        if not _is_int(n_epochs) or n_epochs < 0:
            msg = "`n_epochs` should be a non-negative int, got {!r}"
            raise ConfigurationError(msg.format(n_epochs))
        self.n_epochs = int(n_epochs)

        try:
            learning_rate = float(learning_rate)
        except (ValueError, TypeError):
            msg = "`learning_rate` must be numeric, got {!r}"
            raise ConfigurationError(msg.format(learning_rate))

        if not learning_rate > 0 or not numpy.isfinite(learning_rate):
            msg = "`learning_rate` must be positive and finite, got {}"
            raise ConfigurationError(msg.format(learning_rate))
        self.learning_rate = learning_rate

        self.sample_interval = _positive_int(
            'sample_interval', sample_interval)

        self.normalize_gradient = bool(normalize_gradient)

        if random_seed is not None and not _is_int(random_seed):
            msg = "`random_seed` should be an int or None, got {!r}"
            raise ConfigurationError(msg.format(random_seed))
        self.random_seed = random_seed

    def __repr__(self):
        fields = ", ".join("{}={!r}".format(name, getattr(self, name))
                           for name in self._fields)
        return "<TrainingConfig {}>".format(fields)

    def __eq__(self, other):
        if not isinstance(other, TrainingConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def as_dict(self):
        return {name: getattr(self, name) for name in self._fields}

    @classmethod
    def from_dict(cls, options):
        """ Build a configuration from a dictionary of options. Unknown
        keys raise :class:`ConfigurationError`.
        """
        unknown = sorted(set(options) - set(cls._fields))
        if unknown:
            msg = "Unknown configuration option(s): {}"
            raise ConfigurationError(msg.format(", ".join(unknown)))
        return cls(**options)

    @classmethod
    def from_data(cls, features, targets, **overrides):
        """ Build a configuration whose dimensions are read off the
        feature and target matrices
        """
        features = numpy.asarray(features)
        targets = numpy.asarray(targets)

        if features.ndim != 2:
            msg = "`features` (ndim={}) should be a 2d matrix"
            raise ConfigurationError(msg.format(features.ndim))

        options = dict(
            n_examples=features.shape[0],
            n_features=features.shape[1],
            n_outputs=1 if targets.ndim == 1 else targets.shape[-1],
        )
        options.update(overrides)

        return cls.from_dict(options)


def _is_int(value):
    return (isinstance(value, numbers.Integral) and
            not isinstance(value, bool))


def _positive_int(name, value):
    if not _is_int(value) or value <= 0:
        msg = "`{}` should be a positive int, got {!r}"
        raise ConfigurationError(msg.format(name, value))
    return int(value)
