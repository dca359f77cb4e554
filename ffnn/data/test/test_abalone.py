import os
import shutil
import tempfile
import unittest

import numpy

from ffnn.core.exception import ConfigurationError, DataError
from ffnn.data.abalone import load_abalone, parse_record, parse_records


RECORDS = """\
M,0.455,0.365,0.095,0.514,0.2245,0.101,0.15,15
M,0.35,0.265,0.09,0.2255,0.0995,0.0485,0.07,7
F,0.53,0.42,0.135,0.677,0.2565,0.1415,0.21,9
M,0.44,0.365,0.125,0.516,0.2155,0.114,0.155,10
I,0.33,0.255,0.08,0.205,0.0895,0.0395,0.055,7
I,0.425,0.3,0.095,0.3515,0.141,0.0775,0.12,8
"""


class TestParseRecord(unittest.TestCase):

    def test_parse(self):
        features, target = parse_record(
            "F,0.53,0.42,0.135,0.677,0.2565,0.1415,0.21,9")

        self.assertEqual(len(features), 8)
        self.assertEqual(features[0], 1.0)
        self.assertEqual(features[1:], [0.53, 0.42, 0.135, 0.677, 0.2565,
                                        0.1415, 0.21])
        self.assertEqual(target, 9 / 20.0)

    def test_sex_codes(self):
        for sex, code in [('I', 0.33), ('M', 0.66), ('F', 1.0)]:
            features, _ = parse_record(
                sex + ",0.5,0.4,0.1,0.5,0.2,0.1,0.15,10")
            self.assertEqual(features[0], code)

    def test_unknown_category(self):
        with self.assertRaises(DataError):
            parse_record("X,0.53,0.42,0.135,0.677,0.2565,0.1415,0.21,9")

    def test_non_numeric_field(self):
        with self.assertRaises(DataError):
            parse_record("F,0.53,abc,0.135,0.677,0.2565,0.1415,0.21,9")

    def test_wrong_field_count(self):
        with self.assertRaises(DataError):
            parse_record("F,0.53,0.42,0.135,9")

    def test_error_mentions_line(self):
        with self.assertRaises(DataError) as context:
            parse_record("F,,0.42,0.135,0.677,0.2565,0.1415,0.21,9",
                         line_number=7)
        self.assertIn("line 7", str(context.exception))


class TestParseRecords(unittest.TestCase):

    def test_shapes(self):
        features, targets = parse_records(RECORDS.splitlines(), 4)

        self.assertEqual(features.shape, (4, 8))
        self.assertEqual(targets.shape, (4, 1))
        self.assertEqual(targets[0, 0], 15 / 20.0)
        self.assertEqual(features[3, 0], 0.66)

    def test_blank_lines_skipped(self):
        lines = ["", RECORDS.splitlines()[0], "   ", RECORDS.splitlines()[1]]
        features, _ = parse_records(lines, 2)
        self.assertEqual(features.shape, (2, 8))

    def test_too_few_records(self):
        with self.assertRaises(DataError):
            parse_records(RECORDS.splitlines(), 7)

    def test_malformed_record_after_requested_rows_is_not_read(self):
        lines = RECORDS.splitlines()[:2] + ["not,a,record"]
        features, _ = parse_records(lines, 2)
        self.assertEqual(features.shape, (2, 8))

    def test_zero_examples(self):
        with self.assertRaises(ConfigurationError):
            parse_records(RECORDS.splitlines(), 0)


class TestLoadAbalone(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.filename = os.path.join(self.tmp_dir, 'abalone.data')

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_load(self):
        with open(self.filename, 'w') as f:
            f.write(RECORDS)

        features, targets = load_abalone(self.filename, n_examples=6)

        self.assertEqual(features.shape, (6, 8))
        self.assertEqual(targets.shape, (6, 1))
        self.assertTrue(((targets > 0) & (targets < 1)).all())
        self.assertTrue(numpy.isin(features[:, 0], [0.33, 0.66, 1.0]).all())

    def test_malformed_file(self):
        with open(self.filename, 'w') as f:
            f.write(RECORDS.replace("I,0.33", "Q,0.33"))

        with self.assertRaises(DataError):
            load_abalone(self.filename, n_examples=6)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_abalone(os.path.join(self.tmp_dir, 'nope.data'))
