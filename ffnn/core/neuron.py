import numpy


def tanh_activation(x):
    """ The hyperbolic tangent, applied elementwise when `x` is an array
    """
    return numpy.tanh(x)


def tanh_derivative(activation):
    """ Derivative of tanh evaluated from an *already activated* value

    Parameters
    ----------
    activation: float or ndarray
        The output of :func:`tanh_activation`, i.e., :code:`tanh(x)`, and
        not the pre-activation sum :code:`x` itself.

    Returns
    -------
    derivative: float or ndarray
        :code:`1 - activation**2`, which equals :code:`1 - tanh(x)**2`
    """
    return 1.0 - activation * activation


class Neuron:
    """ A single unit of a layer

    Attributes
    ----------
    value: float
        The weighted input sum (or the raw input for input-layer neurons).

    bias: float
        Additive bias applied to the weighted sum.

    activation: float
        The tanh of the weighted sum (or the raw input for input-layer
        neurons).

    gradient: float
        The signed error gradient with respect to the weighted sum.

    weights: ndarray
        One weight per neuron in the preceding layer; empty for input-layer
        neurons.
    """

    tanh_activation = staticmethod(tanh_activation)
    tanh_derivative = staticmethod(tanh_derivative)

    def __init__(self):
        self.value = 0.0
        self.bias = 0.0
        self.activation = 0.0
        self.gradient = 0.0
        self._weights = numpy.zeros(0, dtype=numpy.float64)

    def __repr__(self):
        return "<Neuron activation={:.4f}, n_weights={:d}>".format(
            self.activation, self.n_weights)

    @property
    def weights(self):
        return self._weights

    @weights.setter
    def weights(self, weights):
        # Always store a private copy so callers' sequences are never aliased
        self._weights = numpy.array(weights, dtype=numpy.float64).ravel()

    @property
    def n_weights(self):
        return self._weights.shape[0]
