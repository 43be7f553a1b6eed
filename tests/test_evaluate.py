# tests/test_evaluate.py

import csv
import tempfile
import unittest

from agents.propagation_agent.agent import PropagationAgent
from evaluation.evaluate import evaluate_agent


class TestEvaluate(unittest.TestCase):

    def test_stats_and_summary_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            stats = evaluate_agent(PropagationAgent, num_episodes=4, width=6, height=6, num_mines=3,
                                   save_dir=tmp, seed=10)
            with open(stats["summary_path"], newline="") as f:
                rows = list(csv.DictReader(f))

        self.assertEqual(stats["episodes"], 4)
        self.assertEqual(len(rows), 4)
        self.assertGreaterEqual(stats["win_rate"], 0.0)
        self.assertLessEqual(stats["win_rate"], 1.0)
        self.assertGreater(stats["avg_moves"], 0)

    def test_mine_free_board_always_won(self):
        stats = evaluate_agent(PropagationAgent, num_episodes=3, width=4, height=4, num_mines=0, seed=1)
        self.assertEqual(stats["win_rate"], 1.0)
        self.assertEqual(stats["avg_score"], 1.0)

    def test_seeded_runs_repeat(self):
        first = evaluate_agent(PropagationAgent, num_episodes=5, width=8, height=8, num_mines=10, seed=3)
        second = evaluate_agent(PropagationAgent, num_episodes=5, width=8, height=8, num_mines=10, seed=3)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
