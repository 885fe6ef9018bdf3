# flake8: noqa

from .core.network import NeuralNetwork
