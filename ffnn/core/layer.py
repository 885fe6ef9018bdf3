import abc

import numpy

from .exception import DimensionMismatch
from .neuron import Neuron, tanh_activation, tanh_derivative


def as_vector(vector, size, name='vector'):
    """ Convert `vector` to a 1d float array and check it has `size` entries
    """
    vector = numpy.asarray(vector, dtype=numpy.float64).ravel()

    if vector.shape[0] != size:
        msg = "`{}` has length {:d} but the layer has {:d} neurons"
        raise DimensionMismatch(msg.format(name, vector.shape[0], size))

    return vector


class LayerBase(abc.ABC):
    """ The abstract base class for the layers of a network.

    A layer owns a fixed number of neurons. Adjacent layers are not stored;
    the owning network passes the preceding or following layer into
    :meth:`forward` and :meth:`backward`.
    """

    def __init__(self, n_neurons):
        if n_neurons < 1:
            msg = "A layer needs at least one neuron (got {})"
            raise ValueError(msg.format(n_neurons))

        self._neurons = tuple(Neuron() for _ in range(n_neurons))

    def __repr__(self):
        return "<{} n_neurons={:d}>".format(
            self.__class__.__name__, self.n_neurons)

    @property
    def neurons(self):
        return self._neurons

    @property
    def n_neurons(self):
        return len(self._neurons)

    @property
    def activations(self):
        return numpy.array([neuron.activation for neuron in self._neurons])

    @property
    def gradients(self):
        return numpy.array([neuron.gradient for neuron in self._neurons])

    @abc.abstractmethod
    def forward(self, previous):
        """ Recompute the activations of this layer from the activations
        of the `previous` layer
        """
        raise NotImplementedError

    @abc.abstractmethod
    def backward(self, following):
        """ Recompute the gradients of this layer from the gradients and
        weights of the `following` layer
        """
        raise NotImplementedError


class InputLayer(LayerBase):
    """ Holds the raw input values; has no trainable parameters """

    def load_input(self, vector):
        """ Copy `vector` into both the value and the activation of each
        neuron (downstream layers read the activation)
        """
        vector = as_vector(vector, self.n_neurons, name='input')

        for neuron, x in zip(self._neurons, vector):
            neuron.value = float(x)
            neuron.activation = float(x)

    def forward(self, previous=None):
        pass

    def backward(self, following=None):
        pass


class TrainableLayer(LayerBase):
    """ A layer of tanh neurons with incoming weights and biases """

    def initialize(self, previous, random_state):
        """ Draw each bias and incoming weight from a normal distribution
        with mean zero and standard deviation
        :code:`sqrt(2 / (fan_in + fan_out))`

        Parameters
        ----------
        previous: LayerBase
            The preceding layer; its size is the fan in.

        random_state: numpy.random.RandomState
            The source of the random draws.
        """
        fan_in = previous.n_neurons
        fan_out = self.n_neurons
        scale = numpy.sqrt(2.0 / (fan_in + fan_out))

        for neuron in self._neurons:
            neuron.bias = float(random_state.normal(0.0, scale))
            neuron.weights = random_state.normal(0.0, scale, size=fan_in)

    def forward(self, previous):
        inputs = previous.activations

        for neuron in self._neurons:
            neuron.value = float(numpy.dot(inputs, neuron.weights) +
                                 neuron.bias)
            neuron.activation = float(tanh_activation(neuron.value))

    def update(self, previous, learning_rate):
        """ Move the weights and biases along the stored gradients.

        The gradients carry the sign of :code:`target - prediction`, so the
        step is *added* to the parameters.
        """
        inputs = previous.activations

        for neuron in self._neurons:
            step = learning_rate * neuron.gradient

            # Mutates the neuron's own array; its length never changes
            weights = neuron.weights
            weights += step * inputs

            neuron.bias += step


class HiddenLayer(TrainableLayer):

    def backward(self, following):
        for i, neuron in enumerate(self._neurons):
            downstream = sum(
                successor.weights[i] * successor.gradient
                for successor in following.neurons)
            neuron.gradient = float(
                downstream * tanh_derivative(neuron.activation))


class OutputLayer(TrainableLayer):

    def load_target(self, vector):
        """ Compute the gradients of the output neurons from the target
        values. This is the only entry point for output-layer gradients.
        """
        vector = as_vector(vector, self.n_neurons, name='target')

        for neuron, target in zip(self._neurons, vector):
            error = target - neuron.activation
            neuron.gradient = float(
                error * tanh_derivative(neuron.activation))

    def backward(self, following=None):
        pass
