"""
Tests for CSV dataset loading, writing and generation
"""

import io
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import numpy as np

from dataset_io import (
    load_dataset_csv,
    make_dataset,
    make_datasets,
    require_int_range,
    write_dataset_csv,
)


class TestDatasetCsv(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _path(self, name):
        return Path(self.test_dir) / name

    def test_write_then_load(self):
        path = write_dataset_csv(self._path("d.csv"), [5, -3, 0, 2**31 - 1])
        self.assertEqual(load_dataset_csv(path), [5, -3, 0, 2**31 - 1])

    def test_accepts_str_path(self):
        write_dataset_csv(self._path("s.csv"), [1, 2])
        self.assertEqual(load_dataset_csv(os.path.join(self.test_dir, "s.csv")), [1, 2])

    def test_missing_file(self):
        with patch("sys.stderr", new_callable=io.StringIO) as err:
            self.assertEqual(load_dataset_csv(self._path("nope.csv")), [])
        self.assertIn("[SKIP]", err.getvalue())

    def test_missing_header(self):
        path = self._path("h.csv")
        path.write_text("number\n1\n2\n")
        with patch("sys.stderr", new_callable=io.StringIO) as err:
            self.assertEqual(load_dataset_csv(path), [])
        self.assertIn("[ERROR]", err.getvalue())

    def test_bad_rows_skipped(self):
        path = self._path("b.csv")
        path.write_text("value\n1\nabc\n\n-4\n2.5\n")
        self.assertEqual(load_dataset_csv(path), [1, -4])

    def test_no_ints(self):
        path = self._path("e.csv")
        path.write_text("value\nx\n")
        with patch("sys.stderr", new_callable=io.StringIO) as err:
            self.assertEqual(load_dataset_csv(path), [])
        self.assertIn("No ints", err.getvalue())


class TestGeneration(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_make_dataset_is_seeded(self):
        a = make_dataset(50, seed=3)
        self.assertEqual(len(a), 50)
        self.assertEqual(a, make_dataset(50, seed=3))
        self.assertTrue(all(isinstance(x, int) for x in a))

    def test_make_dataset_bounds(self):
        a = make_dataset(200, seed=1, low=-2, high=2)
        self.assertTrue(all(-2 <= x <= 2 for x in a))

    def test_make_dataset_rejects_inverted_bounds(self):
        with self.assertRaises(ValueError):
            make_dataset(5, low=3, high=1)

    def test_make_datasets_names_and_overwrite(self):
        paths = make_datasets(self.test_dir, [10, 20], [1, 2], seed=0)
        self.assertEqual(
            [p.name for p in paths],
            ["10_dataset_1.csv", "10_dataset_2.csv", "20_dataset_1.csv", "20_dataset_2.csv"],
        )
        self.assertEqual(len(load_dataset_csv(paths[2])), 20)

        write_dataset_csv(paths[0], [1, 2, 3])
        make_datasets(self.test_dir, [10], [1], seed=0)
        self.assertEqual(load_dataset_csv(paths[0]), [1, 2, 3])
        make_datasets(self.test_dir, [10], [1], seed=0, overwrite=True)
        self.assertEqual(len(load_dataset_csv(paths[0])), 10)


class TestIntRange(unittest.TestCase):
    def test_in_range(self):
        require_int_range([])
        require_int_range([-(2**31), 0, 2**31 - 1])

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            require_int_range([2**31])
        with self.assertRaises(ValueError):
            require_int_range([-(2**31) - 1])

    def test_wider_dtype(self):
        require_int_range([2**31], dtype=np.int64)


if __name__ == "__main__":
    unittest.main()
