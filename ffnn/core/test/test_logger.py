import logging
import os
import shutil
import tempfile
import unittest

from ffnn.core.logger import PACKAGE_LOGGER_NAME, setup_logging


class TestSetupLogging(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.filename = os.path.join(self.tmp_dir, 'log.txt')

    def tearDown(self):
        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        shutil.rmtree(self.tmp_dir)

    def test_module_records_reach_file(self):
        setup_logging(filename=self.filename, stdout=False)

        logging.getLogger('ffnn.core.trainer').info("hello from the trainer")

        with open(self.filename) as f:
            contents = f.read()

        self.assertIn("INFO", contents)
        self.assertIn("hello from the trainer", contents)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(filename=self.filename, stdout=True)
        logger = setup_logging(filename=self.filename, stdout=False)

        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.FileHandler)
