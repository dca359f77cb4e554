class ConfigurationError(ValueError):
    """ Raised when the network or training setup is inconsistent, e.g.,
    weight matrices whose dimensions do not chain, a non-positive learning
    rate, or a zero example count
    """


class DataError(ValueError):
    """ Raised by the data sources when a record is malformed
    """


class TrainingAlreadyRun(Exception):
    """ Raised when attempting to train with a trainer that has already
    exhausted its epochs
    """
