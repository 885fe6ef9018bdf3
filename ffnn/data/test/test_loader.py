import os
import shutil
import tempfile
import unittest

import numpy as np

from ffnn.data.loader import load_csv, split_columns


class TestLoadCsv(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def _write(self, text, filename='data.csv'):
        path = os.path.join(self.tmp_dir, filename)
        with open(path, 'w') as f:
            f.write(text)
        return path

    def test_load(self):
        path = self._write("1,2,3\n4.5,-5,6e-1\n")

        table = load_csv(path)

        np.testing.assert_array_equal(table, [[1, 2, 3], [4.5, -5, 0.6]])
        self.assertEqual(table.dtype, np.float64)

    def test_skip_header(self):
        path = self._write("a,b\n1,2\n3,4\n")

        table = load_csv(path, skip_header=True)
        np.testing.assert_array_equal(table, [[1, 2], [3, 4]])

    def test_malformed_rows_are_skipped(self):
        path = self._write("1,2\nx,3\n\n4,5\n6,7,8\n9,10\n")

        with self.assertLogs('loader', level='WARNING') as logs:
            table = load_csv(path)

        np.testing.assert_array_equal(table, [[1, 2], [4, 5], [9, 10]])
        self.assertEqual(len(logs.output), 2)
        self.assertIn('line 2', logs.output[0])
        self.assertIn('line 5', logs.output[1])

    def test_delimiter(self):
        path = self._write("1;2\n3;4\n")
        np.testing.assert_array_equal(
            load_csv(path, delimiter=';'), [[1, 2], [3, 4]])

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_csv(os.path.join(self.tmp_dir, 'does-not-exist.csv'))

    def test_no_numeric_rows(self):
        path = self._write("a,b\nc,d\n")

        with self.assertLogs('loader', level='WARNING'):
            with self.assertRaises(ValueError):
                load_csv(path)

    def test_split_columns(self):
        table = np.arange(12, dtype=float).reshape(3, 4)

        inputs, targets = split_columns(table, n_targets=1)
        np.testing.assert_array_equal(inputs, table[:, :3])
        np.testing.assert_array_equal(targets, table[:, 3:])

        with self.assertRaises(ValueError):
            split_columns(table, n_targets=4)


if __name__ == '__main__':
    unittest.main()
