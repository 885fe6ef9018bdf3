import unittest

import numpy as np

from ffnn.core.fit import fit_online
from ffnn.core.network import NeuralNetwork
from ffnn.data.toy import make_sine, make_xor
from ffnn.util.on_epoch import collect_errors, stop_below


class TestFitOnline(unittest.TestCase):

    def test_xor(self):
        inputs, targets = make_xor()
        final_errors = []

        for seed in range(5):
            nn = NeuralNetwork([2, 4, 1], 0.01,
                               random_state=np.random.RandomState(seed))
            errors = fit_online(nn, inputs, targets, epochs=6000,
                                log_every=None)

            self.assertEqual(errors.shape, (6000,))
            self.assertLess(errors[-1], errors[0])
            self.assertLess(errors[-500:].mean(), errors[:500].mean())
            final_errors.append(errors[-1])

        self.assertLess(min(final_errors), 0.05)

    def test_sine_with_1d_arrays(self):
        inputs, targets = make_sine(n_samples=20)
        nn = NeuralNetwork([1, 6, 1], 0.01,
                           random_state=np.random.RandomState(1234))

        errors = fit_online(nn, inputs.ravel(), targets.ravel(), epochs=300,
                            log_every=None)

        self.assertEqual(errors.shape, (300,))
        self.assertLess(errors[-1], errors[0])

    def test_error_is_mean_over_samples(self):
        inputs, targets = make_xor()
        nn = NeuralNetwork([2, 3, 1], 0.0,
                           random_state=np.random.RandomState(1234))

        # A zero learning rate leaves the network unchanged
        expected = 0.0
        for x, y in zip(inputs, targets):
            nn.forward_propagation(x)
            expected += nn.calculate_error(y)
        expected /= inputs.shape[0]

        errors = fit_online(nn, inputs, targets, epochs=3, log_every=None)
        np.testing.assert_allclose(errors, expected)

    def test_on_epoch_callbacks(self):
        inputs, targets = make_xor()
        nn = NeuralNetwork([2, 3, 1], 0.01,
                           random_state=np.random.RandomState(1234))

        collected = []
        epochs_seen = []

        def record_epoch(epoch, error):
            epochs_seen.append(epoch)

        errors = fit_online(nn, inputs, targets, epochs=10,
                            on_epoch=[collect_errors(collected),
                                      record_epoch],
                            log_every=None)

        np.testing.assert_array_equal(errors, collected)
        self.assertEqual(epochs_seen, list(range(10)))

    def test_stop_early(self):
        inputs, targets = make_xor()
        nn = NeuralNetwork([2, 3, 1], 0.01,
                           random_state=np.random.RandomState(1234))

        errors = fit_online(nn, inputs, targets, epochs=100,
                            on_epoch=stop_below(np.inf), log_every=None)

        self.assertEqual(errors.shape, (1,))

    def test_logging(self):
        inputs, targets = make_xor()
        nn = NeuralNetwork([2, 3, 1], 0.01,
                           random_state=np.random.RandomState(1234))

        with self.assertLogs('fit', level='INFO') as logs:
            fit_online(nn, inputs, targets, epochs=10, log_every=5)

        self.assertEqual(len(logs.output), 2)
        self.assertIn('Epoch = 00', logs.output[0])
        self.assertIn('Epoch = 05', logs.output[1])

    def test_zero_epochs(self):
        inputs, targets = make_xor()
        nn = NeuralNetwork([2, 3, 1], 0.01)

        errors = fit_online(nn, inputs, targets, epochs=0)
        self.assertEqual(errors.shape, (0,))

    def test_invalid_arguments(self):
        inputs, targets = make_xor()
        nn = NeuralNetwork([2, 3, 1], 0.01)

        with self.assertRaises(ValueError):
            fit_online(nn, inputs, targets[:3], epochs=1)
        with self.assertRaises(ValueError):
            fit_online(nn, inputs, targets, epochs=-1)
        with self.assertRaises(ValueError):
            fit_online(nn, inputs[:0], targets[:0], epochs=1)
        with self.assertRaises(TypeError):
            fit_online(nn, inputs, targets, epochs=1, on_epoch=[1, 2])


if __name__ == '__main__':
    unittest.main()
