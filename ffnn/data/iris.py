import logging

import numpy
from sklearn.datasets import load_iris

from .loader import load_csv, split_columns


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

N_CLASSES = 3


def one_hot_encode(labels, n_classes):
    """ Convert integer class labels to rows of a one-hot matrix, e.g.,
    with :code:`n_classes=3`, :code:`[0, 2] -> [[1, 0, 0], [0, 0, 1]]`
    """
    labels = numpy.asarray(labels).ravel()
    int_labels = labels.astype(int)

    if (int_labels != labels).any():
        raise ValueError("Class labels must be integers")

    if int_labels.size and (int_labels.min() < 0 or
                            int_labels.max() >= n_classes):
        msg = "Class labels must lie in [0, {:d}]"
        raise ValueError(msg.format(n_classes - 1))

    return numpy.eye(n_classes)[int_labels]


def load(filename=None, skip_header=False):
    """ Load the Iris species data as network inputs and targets

    Parameters
    ----------
    filename: str, default=None
        A CSV file with the four measurements in the first columns and the
        integer species label (0, 1 or 2) in the last one. The default of
        None uses the copy bundled with scikit-learn.

    skip_header: bool, default=False
        Passed to :func:`ffnn.data.loader.load_csv`.

    Returns
    -------
    inputs, targets : ndarray (shape=(n, 4)), ndarray (shape=(n, 3))
        The raw (unnormalized) measurements and one-hot species targets.
    """
    if filename is None:
        bunch = load_iris()
        inputs, labels = bunch.data, bunch.target
    else:
        inputs, labels = split_columns(
            load_csv(filename, skip_header=skip_header), n_targets=1)

    logger.info("Loaded {:d} iris examples".format(inputs.shape[0]))

    return (numpy.asarray(inputs, dtype=numpy.float64),
            one_hot_encode(labels, N_CLASSES))
