import numpy


def random_matrix(rows, cols, random_state=None):
    """ A (rows, cols) matrix with IID standard normal entries
    """
    rs = numpy.random.RandomState() if random_state is None else random_state
    return rs.randn(rows, cols)


def random_dataset(n_examples=4, n_features=3, n_outputs=2,
                   random_state=None, unit_targets=True):
    """
    Make a random regression problem.

    Parameters
    ----------
    n_examples: int, default=4
        Number of rows.

    n_features: int, default=3
        Number of feature columns.

    n_outputs: int, default=2
        Number of target columns.

    random_state: numpy.random.RandomState, default=None
        RandomState object for reproducible results.

    unit_targets: bool, default=True
        If True, targets are uniform on [0, 1) and so can be reached by a
        sigmoid output. Otherwise they are standard normal.

    Returns
    -------
    features, targets: ndarray (n_examples, n_features), ndarray
        (n_examples, n_outputs)
    """
    rs = numpy.random.RandomState() if random_state is None else random_state

    features = random_matrix(n_examples, n_features, rs)

    if unit_targets:
        targets = rs.rand(n_examples, n_outputs)
    else:
        targets = random_matrix(n_examples, n_outputs, rs)

    return features, targets
