""" This module provides a few simple `on_epoch` functions that can be
used with :func:`ffnn.core.fit.fit_online`
"""
import logging

from ffnn.core.exception import StopTraining


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def collect_errors(error_list):
    """ Collects the mean error of each epoch. Errors are appended to
    :code:`error_list` and so an empty list should be provided. Usage::

        errors = []
        fit_online(network, x, y, epochs=100,
                   on_epoch=collect_errors(errors))
    """

    def on_epoch(epoch, error):
        error_list.append(error)

    return on_epoch


def log_errors(every=100, level=logging.INFO):
    """ Logs the mean error every `every` epochs at the given log level
    """
    if every < 1:
        msg = "`every` must be a positive number of epochs (got {})"
        raise ValueError(msg.format(every))

    def on_epoch(epoch, error):
        if epoch % every == 0:
            logger.log(level, "Epoch {:d}: error = {:.6f}".format(
                epoch, error))

    return on_epoch


def stop_below(threshold):
    """ Raises :class:`StopTraining` once the mean error falls below
    `threshold`. :func:`ffnn.core.fit.fit_online` catches it and ends
    training early.
    """

    def on_epoch(epoch, error):
        if error < threshold:
            raise StopTraining(epoch, error)

    return on_epoch

