"""
A multilayer feed-forward network of tanh neurons trained one sample at a
time by backpropagation.

For a single input vector the computation chain is::

    a[0] = input
    a[l] = tanh( dot(W[l], a[l-1]) + b[l] ),  l = 1, ..., L-1

Training is a strictly sequential pipeline per sample:
:meth:`NeuralNetwork.forward_propagation`, then
:meth:`NeuralNetwork.back_propagation` (which reads the activations of
that forward pass), then :meth:`NeuralNetwork.update_weights_and_biases`
(which reads both). The network holds mutable state and is not safe to
share between threads.
"""
import logging
import numbers

import numpy

from .exception import InvalidTopology
from .layer import HiddenLayer, InputLayer, OutputLayer, as_vector


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


class NeuralNetwork:
    """ Fully connected network with tanh activations on every non-input
    layer
    """
    def __init__(self, topology, learning_rate, random_state=None):
        """
        Parameters
        ----------
        topology: sequence of int
            The number of neurons in each layer, input layer first and
            output layer last. At least two entries, all positive.

        learning_rate: float
            The step size of the parameter updates.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        self._topology = self._validate_topology(topology)

        try:
            self._learning_rate = float(learning_rate)
        except (ValueError, TypeError):
            msg = "`learning_rate` must be numeric (got {!r})"
            raise ValueError(msg.format(learning_rate))

        if not numpy.isfinite(self._learning_rate):
            msg = "`learning_rate` must be finite (got {})"
            raise ValueError(msg.format(self._learning_rate))

        self.random_state = (numpy.random.RandomState()
                             if random_state is None else random_state)

        # The layer sequence defines adjacency: the neighbours of layer `i`
        # are layers `i - 1` and `i + 1`.
        layers = [InputLayer(self._topology[0])]
        layers.extend(HiddenLayer(n) for n in self._topology[1:-1])
        layers.append(OutputLayer(self._topology[-1]))
        self._layers = tuple(layers)

        self.initialize_weights_and_biases()

        logger.debug("Created {!r}".format(self))

    def __repr__(self):
        return "<NeuralNetwork topology={}, learning_rate={}>".format(
            self._topology, self._learning_rate)

    @staticmethod
    def _validate_topology(topology):
        try:
            topology = tuple(topology)
        except TypeError:
            msg = "`topology` must be a sequence of ints (got {!r})"
            raise InvalidTopology(msg.format(topology))

        if len(topology) < 2:
            msg = "`topology` needs at least 2 layers (got {:d})"
            raise InvalidTopology(msg.format(len(topology)))

        for i, n_neurons in enumerate(topology):
            if (not isinstance(n_neurons, numbers.Integral) or
                    isinstance(n_neurons, bool) or n_neurons < 1):
                msg = "Layer {:d} must have a positive number of neurons " \
                      "(got {!r})"
                raise InvalidTopology(msg.format(i, n_neurons))

        return tuple(int(n_neurons) for n_neurons in topology)

    @property
    def topology(self):
        return self._topology

    @property
    def learning_rate(self):
        return self._learning_rate

    @property
    def layers(self):
        return self._layers

    @property
    def n_layers(self):
        return len(self._layers)

    @property
    def input_layer(self):
        return self._layers[0]

    @property
    def output_layer(self):
        return self._layers[-1]

    @property
    def n_inputs(self):
        return self.input_layer.n_neurons

    @property
    def n_outputs(self):
        return self.output_layer.n_neurons

    def initialize_weights_and_biases(self):
        """ Randomize every weight and bias of the non-input layers with
        Xavier/Glorot scaled normal draws from :attr:`random_state`
        """
        for i in range(1, self.n_layers):
            self._layers[i].initialize(
                previous=self._layers[i-1], random_state=self.random_state)

    def forward_propagation(self, input):
        """ Load `input` into the input layer and compute the activations of
        all following layers, in order
        """
        self.input_layer.load_input(input)

        for i in range(1, self.n_layers):
            self._layers[i].forward(self._layers[i-1])

    def back_propagation(self, target):
        """ Compute the gradients of every non-input layer, output layer
        first. Must follow a call to :meth:`forward_propagation`.
        """
        self.output_layer.load_target(target)

        for i in range(self.n_layers-2, 0, -1):
            self._layers[i].backward(self._layers[i+1])

    def update_weights_and_biases(self):
        """ Apply the gradients from :meth:`back_propagation` to the weights
        and biases of every non-input layer
        """
        for i in range(1, self.n_layers):
            self._layers[i].update(
                previous=self._layers[i-1],
                learning_rate=self._learning_rate)

    def predict(self, input):
        """
        Parameters
        ----------
        input: array-like, shape=(n_inputs,)
            A single observation.

        Returns
        -------
        output: ndarray, shape=(n_outputs,)
            A copy of the output layer activations.
        """
        self.forward_propagation(input)
        return self.output_layer.activations

    def calculate_error(self, target):
        """ The squared error :code:`sum(0.5 * (target - output)**2)` of the
        output activations currently stored, i.e., those of the latest
        forward pass
        """
        target = as_vector(target, self.n_outputs, name='target')
        diff = target - self.output_layer.activations
        return float(0.5 * numpy.dot(diff, diff))
