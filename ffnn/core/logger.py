import logging
import os


DEFAULT_LOG_FILENAME = 'fit-log.txt'
PACKAGE_LOGGER_NAME = 'ffnn'

LINE_FORMAT = '[%(asctime)s] %(levelname)-8s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(filename=None, stdout=True, level=logging.DEBUG):
    """ Sets up logging formatting, file location, etc. for the package

    Parameters
    ----------
    filename: str, default=None
        The log file, truncated on setup. The default (None) writes
        :code:`fit-log.txt` in the current directory.

    stdout: bool, default=True
        If True, log records are also written to the console.

    level: int, default=logging.DEBUG
        The level of the package logger.

    Returns
    -------
    logger: logging.Logger
        The package logger that all module loggers propagate to.

    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    # Handles when filename is None
    filename = filename or os.path.join(os.path.curdir, DEFAULT_LOG_FILENAME)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    # Repeated setup replaces the previous handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fhandler = logging.FileHandler(filename, mode='w')
    fhandler.setFormatter(formatter)
    logger.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        logger.addHandler(shandler)

    return logger
