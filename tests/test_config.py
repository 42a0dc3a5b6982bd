"""
Unit tests for settings and logging setup.
"""

import logging
import os
import unittest
from unittest import mock
from pydantic import ValidationError
from cubegame.config import Settings, get_settings
from cubegame.logging import configure_logging, get_logger


class TestSettings(unittest.TestCase):
    """Test cases for Settings."""

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.cube_size, 3)
        self.assertEqual(settings.shuffle_iterations, 1000)
        self.assertIsNone(settings.shuffle_seed)
        self.assertEqual(settings.player_name, "")
        self.assertEqual(settings.log_level, "WARNING")
        self.assertFalse(settings.debug)

    def test_environment(self):
        env = {
            "CUBE_SIZE": "4",
            "SHUFFLE_ITERATIONS": "10",
            "SHUFFLE_SEED": "42",
            "PLAYER_NAME": "ada",
            "LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.cube_size, 4)
        self.assertEqual(settings.shuffle_iterations, 10)
        self.assertEqual(settings.shuffle_seed, 42)
        self.assertEqual(settings.player_name, "ada")
        self.assertEqual(settings.log_level, "DEBUG")

    def test_overrides(self):
        settings = get_settings(cube_size=5, shuffle_iterations=0)
        self.assertEqual(settings.cube_size, 5)
        self.assertEqual(settings.shuffle_iterations, 0)

    def test_invalid_cube_size(self):
        for size in (1, 256):
            with self.assertRaises(ValidationError):
                Settings(cube_size=size)

    def test_negative_shuffle(self):
        with self.assertRaises(ValidationError):
            Settings(shuffle_iterations=-1)

    def test_invalid_log_level(self):
        with self.assertRaises(ValidationError):
            Settings(log_level="LOUD")


class TestLogging(unittest.TestCase):
    """Test cases for logging setup."""

    def tearDown(self):
        configure_logging()

    def test_configure_logging_sets_level(self):
        configure_logging("debug")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        configure_logging("ERROR")
        self.assertEqual(logging.getLogger().level, logging.ERROR)

    def test_get_logger(self):
        logger = get_logger("cubegame.test")
        logger.debug("quiet_event", value=1)
        self.assertTrue(hasattr(logger, "info"))


if __name__ == '__main__':
    unittest.main()
