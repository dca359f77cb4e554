""" This module provides a few simple `on_sample` functions that can be
passed to :meth:`ffnn.core.trainer.Trainer.train`
"""
import logging


def collect_errors(error_list):
    """ Collects the sampled errors. Errors are appended to
    :code:`error_list` and so an empty list should be provided. Usage::

        errors = []
        trainer.train(on_sample=[collect_errors(errors), ...])
    """

    def on_sample(epoch, error):
        error_list.append(error)

    return on_sample


def log_errors(logger=None, level=logging.INFO):
    """ Report each sampled error as a line of text, e.g.,
    :code:`Error: 0.1234567`. The default logger is this package's
    progress logger.
    """
    logger = logger or logging.getLogger(__name__)

    def on_sample(epoch, error):
        logger.log(level, "Error: {:.7f}".format(error))

    return on_sample
