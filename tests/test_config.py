# tests/test_config.py

import os
import tempfile
import unittest

from backend.config import get_preset, load_config


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        config = load_config()
        self.assertEqual(get_preset(config, "expert"), {"width": 30, "height": 16, "num_mines": 99})
        self.assertEqual(config["agent"]["name"], "propagation")
        self.assertEqual(config["game"]["start_x"], 0)

    def test_user_file_is_merged_over_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "custom.yaml")
            with open(path, "w") as f:
                f.write("presets:\n  tiny:\n    width: 3\n    height: 3\n    num_mines: 1\nserver:\n  port: 8080\n")
            config = load_config(path)

        self.assertEqual(get_preset(config, "tiny")["num_mines"], 1)
        self.assertIn("beginner", config["presets"])
        self.assertEqual(config["server"]["port"], 8080)
        self.assertEqual(config["server"]["host"], "0.0.0.0")

    def test_unknown_preset(self):
        with self.assertRaises(KeyError):
            get_preset(load_config(), "nightmare")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/minesweeper.yaml")


if __name__ == "__main__":
    unittest.main()
