import logging
import sys

import numpy

from .exception import StopTraining


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, level=logging.INFO):
    """ Sets up logging formatting, etc. for scripts that train networks

    Parameters
    ----------
    filename: str, default=None
        If given, log records are also written to this file (overwriting
        any existing file).

    level: int, default=logging.INFO
        The level of the root logger.
    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if filename is not None:
        handlers.append(logging.FileHandler(filename, mode='w'))

    root = logging.getLogger()
    root.setLevel(level)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


def _as_callbacks(on_epoch):
    if on_epoch is None:
        return []
    if callable(on_epoch):
        return [on_epoch]
    if not all(callable(func) for func in on_epoch):
        raise TypeError("`on_epoch` must be a callable or list of callables")
    return list(on_epoch)


def fit_online(network, inputs, targets, epochs, on_epoch=None,
               log_every=500):
    """ Train `network` by online gradient descent: one forward, backward
    and update cycle per sample, samples visited in dataset order.

    Parameters
    ----------
    network: ffnn.core.network.NeuralNetwork
        The network to train in place.

    inputs: ndarray, shape=(n_samples, n_inputs)
        The training inputs, examples by row. A 1d array is treated as a
        single input column.

    targets: ndarray, shape=(n_samples, n_outputs)
        The training targets, same convention as `inputs`.

    epochs: int
        Number of passes over the data.

    on_epoch: callable or list of callables, default=None
        Each is called as :code:`func(epoch, mean_error)` after every
        epoch. See :mod:`ffnn.util.on_epoch`.

    log_every: int, default=500
        The mean error is logged every `log_every` epochs. Use None or 0
        to disable.

    Returns
    -------
    errors: ndarray, shape=(epochs,)
        The mean (over samples) squared error recorded during each epoch.
        Shorter than `epochs` when an `on_epoch` function raised
        :class:`ffnn.core.exception.StopTraining`.
    """
    inputs = numpy.asarray(inputs, dtype=numpy.float64)
    if inputs.ndim == 1:
        inputs = inputs.reshape(-1, 1)

    targets = numpy.asarray(targets, dtype=numpy.float64)
    if targets.ndim == 1:
        targets = targets.reshape(-1, 1)

    if inputs.shape[0] != targets.shape[0]:
        msg = "`inputs` has {:d} samples but `targets` has {:d}"
        raise ValueError(msg.format(inputs.shape[0], targets.shape[0]))

    if inputs.shape[0] == 0:
        raise ValueError("No training samples were provided")

    if epochs < 0:
        msg = "`epochs` must be non-negative (got {})"
        raise ValueError(msg.format(epochs))

    callbacks = _as_callbacks(on_epoch)
    n_samples = inputs.shape[0]
    errors = numpy.zeros(epochs)

    pstr = "(Epoch = %%0%dd) Error = %%.6f" % len(str(epochs))

    for epoch in range(epochs):
        total_error = 0.0

        for x, y in zip(inputs, targets):
            network.forward_propagation(x)
            network.back_propagation(y)
            network.update_weights_and_biases()
            total_error += network.calculate_error(y)

        errors[epoch] = total_error / n_samples

        if log_every and epoch % log_every == 0:
            logger.info(pstr % (epoch, errors[epoch]))

        try:
            for func in callbacks:
                func(epoch, errors[epoch])
        except StopTraining as stop:
            logger.info(str(stop))
            return errors[:epoch+1]

    return errors
