# tests/test_frontier.py

import dataclasses
import unittest

from agents.actions import Action, ActionType
from agents.frontier import FrontierQueue


class TestFrontierQueue(unittest.TestCase):

    def test_fifo_order(self):
        frontier = FrontierQueue()
        for pos in [(2, 1), (0, 0), (1, 3)]:
            frontier.add(pos)
        self.assertEqual([frontier.remove() for _ in range(3)], [(2, 1), (0, 0), (1, 3)])
        self.assertTrue(frontier.is_empty())

    def test_duplicates_are_ignored(self):
        frontier = FrontierQueue()
        self.assertTrue(frontier.add((1, 1)))
        self.assertTrue(frontier.add((2, 2)))
        self.assertFalse(frontier.add((1, 1)))
        self.assertEqual(len(frontier), 2)
        self.assertEqual(frontier.remove(), (1, 1))

    def test_readd_after_remove(self):
        frontier = FrontierQueue()
        frontier.add((0, 1))
        frontier.remove()
        self.assertTrue(frontier.add((0, 1)))
        self.assertIn((0, 1), frontier)

    def test_remove_from_empty(self):
        frontier = FrontierQueue()
        self.assertIsNone(frontier.remove())
        self.assertEqual(len(frontier), 0)


class TestAction(unittest.TestCase):

    def test_factories(self):
        self.assertEqual(Action.uncover(1, 2), Action(ActionType.UNCOVER, 1, 2))
        self.assertEqual(Action.flag(3, 4).position, (3, 4))
        self.assertEqual(Action.unflag(0, 1).action_type, ActionType.UNFLAG)
        self.assertEqual(Action.leave().action_type, ActionType.LEAVE)

    def test_actions_are_immutable(self):
        action = Action.uncover(1, 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            action.x = 2

    def test_to_dict(self):
        self.assertEqual(Action.flag(2, 5).to_dict(), {"type": "flag", "x": 2, "y": 5})
        self.assertEqual(Action.leave().to_dict(), {"type": "leave"})


if __name__ == "__main__":
    unittest.main()
