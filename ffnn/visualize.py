import matplotlib.pyplot as plt
import numpy as np


def plot_errors(errors, ax=None, log_scale=True, line_kwargs=None):
    """ Plot the per-epoch mean error returned by
    :func:`ffnn.core.fit.fit_online`

    Parameters
    ----------
    errors: ndarray, shape=(n_epochs,)

    ax: matplotlib axis, default=None
        The axis to draw on. A new figure is created if None.

    log_scale: bool, default=True
        Use a logarithmic y axis.

    line_kwargs: dict, default=None
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib axis
    """
    errors = np.asarray(errors)
    if errors.ndim != 1:
        raise ValueError("`errors` must be 1d.")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    ax.plot(np.arange(errors.shape[0]), errors, **(line_kwargs or {}))
    if log_scale:
        ax.set_yscale('log')

    ax.set_xlabel('Epoch')
    ax.set_ylabel('Mean error')
    ax.grid(True, alpha=0.3)

    return ax


def plot_predictions(x, targets, predictions, ax=None):
    """ Plot targets and predictions of a single-input, single-output
    network against the input values
    """
    x = np.asarray(x).ravel()
    targets = np.asarray(targets).ravel()
    predictions = np.asarray(predictions).ravel()

    if not x.shape == targets.shape == predictions.shape:
        raise ValueError("Shape mismatch between `x`, `targets` "
                         "and `predictions`.")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    order = np.argsort(x)
    ax.plot(x[order], targets[order], 'k-', lw=2, label='target')
    ax.plot(x[order], predictions[order], 'ro--', ms=4, label='prediction')
    ax.legend(loc='best')

    return ax
