import argparse

import numpy as np

from ffnn import NeuralNetwork
from ffnn.core.fit import fit_online, setup_logging
from ffnn.data import make_xor


parser = argparse.ArgumentParser(description="Learn XOR with a 2-4-1 net")
parser.add_argument('--epochs', type=int, default=6000)
parser.add_argument('--learning-rate', type=float, default=0.01)
parser.add_argument('--seed', type=int, default=None)
parser.add_argument('--plot', action='store_true')


def main(args):
    setup_logging()

    random_state = np.random.RandomState(args.seed)
    inputs, targets = make_xor()

    nn = NeuralNetwork(topology=[2, 4, 1], learning_rate=args.learning_rate,
                       random_state=random_state)

    errors = fit_online(nn, inputs, targets, epochs=args.epochs)

    print("XOR Test Results:")
    for x, y in zip(inputs, targets):
        output = nn.predict(x)
        print("Input: {}, Predicted: {:.4f}, Target: {:.0f}".format(
            x, output[0], y[0]))

    if args.plot:
        import matplotlib.pyplot as plt
        from ffnn.visualize import plot_errors

        plot_errors(errors)
        plt.show()


if __name__ == '__main__':
    main(parser.parse_args())
