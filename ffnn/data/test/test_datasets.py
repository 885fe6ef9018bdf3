import os
import shutil
import tempfile
import unittest

import numpy as np

from ffnn.data import iris
from ffnn.data.toy import make_sine, make_xor


class TestToy(unittest.TestCase):

    def test_xor(self):
        inputs, targets = make_xor()

        self.assertEqual(inputs.shape, (4, 2))
        self.assertEqual(targets.shape, (4, 1))
        np.testing.assert_array_equal(
            targets.ravel(), np.logical_xor(inputs[:, 0], inputs[:, 1]))

    def test_sine(self):
        inputs, targets = make_sine(n_samples=50)

        self.assertEqual(inputs.shape, (50, 1))
        self.assertEqual(inputs[0, 0], -np.pi)
        self.assertLess(inputs[-1, 0], np.pi)
        np.testing.assert_allclose(np.diff(inputs[:, 0]), 2 * np.pi / 50)
        np.testing.assert_allclose(targets, np.sin(inputs))

    def test_sine_bad_size(self):
        with self.assertRaises(ValueError):
            make_sine(n_samples=0)


class TestIris(unittest.TestCase):

    def test_one_hot_encode(self):
        encoded = iris.one_hot_encode([0, 2, 1, 2], 3)

        np.testing.assert_array_equal(
            encoded, [[1, 0, 0], [0, 0, 1], [0, 1, 0], [0, 0, 1]])

        with self.assertRaises(ValueError):
            iris.one_hot_encode([0, 3], 3)
        with self.assertRaises(ValueError):
            iris.one_hot_encode([0.5], 3)

    def test_load_bundled(self):
        inputs, targets = iris.load()

        self.assertEqual(inputs.shape, (150, 4))
        self.assertEqual(targets.shape, (150, 3))
        np.testing.assert_array_equal(targets.sum(axis=1), 1)
        np.testing.assert_array_equal(targets.sum(axis=0), [50, 50, 50])

    def test_load_csv(self):
        tmp_dir = tempfile.mkdtemp()
        try:
            path = os.path.join(tmp_dir, 'iris.csv')
            with open(path, 'w') as f:
                f.write("sepal_length,sepal_width,petal_length,"
                        "petal_width,species\n")
                f.write("5.1,3.5,1.4,0.2,0\n")
                f.write("7.0,3.2,4.7,1.4,1\n")
                f.write("6.3,3.3,6.0,2.5,2\n")

            inputs, targets = iris.load(path, skip_header=True)
        finally:
            shutil.rmtree(tmp_dir)

        np.testing.assert_array_equal(inputs[1], [7.0, 3.2, 4.7, 1.4])
        np.testing.assert_array_equal(targets, np.eye(3))


if __name__ == '__main__':
    unittest.main()
