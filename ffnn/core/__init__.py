# flake8: noqa

from .exception import DimensionMismatch, InvalidTopology, StopTraining
from .layer import HiddenLayer, InputLayer, LayerBase, OutputLayer
from .network import NeuralNetwork
from .neuron import Neuron, tanh_activation, tanh_derivative
