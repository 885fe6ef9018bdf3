import numpy


def make_xor():
    """ The four XOR examples

    Returns
    -------
    inputs, targets : ndarray (shape=(4, 2)), ndarray (shape=(4, 1))
    """
    inputs = numpy.array([[0, 0],
                          [0, 1],
                          [1, 0],
                          [1, 1]], dtype=numpy.float64)
    targets = numpy.array([[0], [1], [1], [0]], dtype=numpy.float64)

    return inputs, targets


def make_sine(n_samples=50):
    """ Samples of the sine function on [-pi, pi)

    Parameters
    ----------
    n_samples: int, default=50
        The inputs are :code:`-pi + i * 2*pi / n_samples` for
        :code:`i = 0, ..., n_samples-1`.

    Returns
    -------
    inputs, targets : ndarray, ndarray (both shape=(n_samples, 1))
    """
    if n_samples < 1:
        msg = "`n_samples` must be positive (got {})"
        raise ValueError(msg.format(n_samples))

    x = -numpy.pi + numpy.arange(n_samples) * (2 * numpy.pi / n_samples)

    return x.reshape(-1, 1), numpy.sin(x).reshape(-1, 1)
