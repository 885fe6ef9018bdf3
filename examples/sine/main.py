import argparse

import numpy as np

from ffnn import NeuralNetwork
from ffnn.core.fit import fit_online, setup_logging
from ffnn.data import make_sine


parser = argparse.ArgumentParser(
    description="Approximate sin(x) on [-pi, pi) with a 1-6-1 net")
parser.add_argument('--epochs', type=int, default=10000)
parser.add_argument('--learning-rate', type=float, default=0.01)
parser.add_argument('--samples', type=int, default=50)
parser.add_argument('--seed', type=int, default=None)
parser.add_argument('--plot', action='store_true')


def main(args):
    setup_logging()

    random_state = np.random.RandomState(args.seed)
    inputs, targets = make_sine(n_samples=args.samples)

    nn = NeuralNetwork(topology=[1, 6, 1], learning_rate=args.learning_rate,
                       random_state=random_state)

    errors = fit_online(nn, inputs, targets, epochs=args.epochs)

    predictions = np.array([nn.predict(x) for x in inputs])

    print("Sine Function Approximation Results:")
    for i in range(0, inputs.shape[0], 5):
        print("Input: {:+.4f}, Predicted: {:+.4f}, Target: {:+.4f}".format(
            inputs[i, 0], predictions[i, 0], targets[i, 0]))

    if args.plot:
        import matplotlib.pyplot as plt
        from ffnn.visualize import plot_errors, plot_predictions

        fig, axes = plt.subplots(1, 2, figsize=(12, 4))
        plot_errors(errors, ax=axes[0])
        plot_predictions(inputs, targets, predictions, ax=axes[1])
        plt.show()


if __name__ == '__main__':
    main(parser.parse_args())
