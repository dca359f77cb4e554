# flake8: noqa

from .core.config import TrainingConfig
from .core.exception import ConfigurationError, DataError, TrainingAlreadyRun
from .core.trainer import Trainer, TrainingResult, train
from .network.parameters import NetworkParameters, initialize_parameters
from ._version import version as __version__
