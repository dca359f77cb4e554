""" Reader for the UCI abalone dataset format

Each record has nine comma-separated fields::

    sex, length, diameter, height, whole weight,
    shucked weight, viscera weight, shell weight, rings

The categorical `sex` field is mapped to a numeric code, the first eight
fields form the feature vector, and the ring count, scaled by
:data:`RINGS_SCALE`, is the regression target.
"""
import logging

import numpy

from ffnn.core.exception import ConfigurationError, DataError


logger = logging.getLogger(__name__)

DEFAULT_FILENAME = 'abalone.data'
DELIMITER = ','

N_ATTRIBUTES = 8

# Numeric codes for the categorical sex field (infant, male, female)
SEX_CODES = {
    'I': 0.33,
    'M': 0.66,
    'F': 1.0,
}

# Ring counts are divided by this so targets fall in the range of a
# sigmoid output unit
RINGS_SCALE = 20.0


def parse_record(line, line_number=None):
    """ Parse a single abalone record

    Parameters
    ----------
    line: str
        One delimited record.

    line_number: int, default=None
        Used only for error messages.

    Returns
    -------
    features, target: list of float (length 8), float

    """
    where = "" if line_number is None else " (line {})".format(line_number)
    fields = [field.strip() for field in line.strip().split(DELIMITER)]

    if len(fields) != N_ATTRIBUTES + 1:
        msg = "Record{} has {} fields but should have {}"
        raise DataError(msg.format(where, len(fields), N_ATTRIBUTES + 1))

    sex = fields[0]
    if sex not in SEX_CODES:
        msg = "Record{} has unknown sex code {!r} (expected one of {})"
        raise DataError(msg.format(where, sex, ", ".join(sorted(SEX_CODES))))

    values = [SEX_CODES[sex]]

    for ifield, field in enumerate(fields[1:], start=1):
        try:
            values.append(float(field))
        except ValueError:
            msg = "Record{} field {} ({!r}) is not numeric"
            raise DataError(msg.format(where, ifield, field))

    return values[:-1], values[-1] / RINGS_SCALE


def parse_records(lines, n_examples):
    """ Parse the first `n_examples` non-blank records from `lines`

    Parameters
    ----------
    lines: iterable of str

    n_examples: int
        The number of records to read. Raises :class:`DataError` if fewer
        are available.

    Returns
    -------
    features, targets: ndarray (n_examples, 8) and (n_examples, 1)

    """
    if n_examples <= 0:
        msg = "`n_examples` must be positive, got {}"
        raise ConfigurationError(msg.format(n_examples))

    features = []
    targets = []

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        x, y = parse_record(line, line_number=line_number)
        features.append(x)
        targets.append(y)

        if len(features) == n_examples:
            break

    if len(features) < n_examples:
        msg = "Requested {} examples but only {} records are available"
        raise DataError(msg.format(n_examples, len(features)))

    features = numpy.array(features, dtype=float)
    targets = numpy.array(targets, dtype=float).reshape(-1, 1)

    return features, targets


def load_abalone(filename=DEFAULT_FILENAME, n_examples=100):
    """ Load the first `n_examples` records of an abalone data file

    Returns
    -------
    features, targets: ndarray (n_examples, 8) and (n_examples, 1)
    """
    if n_examples <= 0:
        msg = "`n_examples` must be positive, got {}"
        raise ConfigurationError(msg.format(n_examples))

    with open(filename, 'r') as f:
        features, targets = parse_records(f, n_examples)

    msg = "Loaded {} examples with {} features from {}"
    logger.info(msg.format(features.shape[0], features.shape[1], filename))

    return features, targets
