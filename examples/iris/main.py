import argparse

import numpy as np

from ffnn import NeuralNetwork
from ffnn.core.fit import fit_online, setup_logging
from ffnn.data import iris
from ffnn.util import normalize_input, normalize_matrix


parser = argparse.ArgumentParser(description="Classify iris species")
parser.add_argument('--csv', default=None,
                    help="CSV with 4 measurements and a 0/1/2 label per row "
                         "(default: the scikit-learn copy)")
parser.add_argument('--skip-header', action='store_true')
parser.add_argument('--epochs', type=int, default=1000)
parser.add_argument('--learning-rate', type=float, default=0.01)
parser.add_argument('--seed', type=int, default=None)
parser.add_argument('--plot', action='store_true')


def main(args):
    setup_logging()

    random_state = np.random.RandomState(args.seed)

    raw_inputs, targets = iris.load(args.csv, skip_header=args.skip_header)
    inputs = normalize_matrix(raw_inputs)

    nn = NeuralNetwork(topology=[4, 8, 3], learning_rate=args.learning_rate,
                       random_state=random_state)

    errors = fit_online(nn, inputs, targets, epochs=args.epochs)

    predicted = np.array([nn.predict(x).argmax() for x in inputs])
    accuracy = (predicted == targets.argmax(axis=1)).mean()
    print("Iris training accuracy: {:.3f}".format(accuracy))

    # Classify a new measurement scaled by the training ranges
    sample = np.array([5.9, 3.0, 5.1, 1.8])
    output = nn.predict(normalize_input(sample, reference=raw_inputs))
    print("Input: {}, Predicted class: {:d}, Outputs: {}".format(
        sample, output.argmax(), np.round(output, 4)))

    if args.plot:
        import matplotlib.pyplot as plt
        from ffnn.visualize import plot_errors

        plot_errors(errors)
        plt.show()


if __name__ == '__main__':
    main(parser.parse_args())
