# tests/test_game.py

import unittest

from agents.actions import Action, ActionType
from agents.propagation_agent.agent import PropagationAgent
from backend.board import MinesweeperBoard
from backend.game import GameSession
from backend.tiles import NO_RESULT, Result


class FixedMines:
    def __init__(self, mines):
        self.mines = list(mines)

    def sample(self, population, k):
        return list(self.mines)


class BrokenAgent:
    """Returns one move, then breaks protocol."""

    def __init__(self):
        self.calls = 0

    def get_action(self, feedback=NO_RESULT):
        self.calls += 1
        if self.calls == 1:
            return Action.uncover(0, 0)
        return None


class TestGameSession(unittest.TestCase):

    def _session(self, width, height, layout, **kwargs):
        game = GameSession(width, height, len(layout), **kwargs)
        game.board = MinesweeperBoard(width, height, len(layout), game.start_x, game.start_y,
                                      rng=FixedMines(layout))
        return game

    def test_step_uncover_and_flag(self):
        game = self._session(3, 3, [(2, 2)])
        state = game.step("uncover", 0, 0)
        self.assertEqual(state["board"][0][0], 0)
        self.assertFalse(state["game_over"])
        self.assertEqual(game.last_result, Result.count(0))

        state = game.step("flag", 2, 2)
        self.assertEqual(state["board"][2][2], "F")
        state = game.step("unflag", 2, 2)
        self.assertIsNone(state["board"][2][2])
        self.assertEqual(state["moves_made"], 3)

    def test_mine_hit_ends_game(self):
        game = self._session(3, 3, [(2, 2)])
        game.step("uncover", 0, 0)
        state = game.step("uncover", 2, 2)
        self.assertTrue(state["game_over"])
        self.assertFalse(state["won"])
        self.assertEqual(state["board"][2][2], "*")

        moves = state["moves_made"]
        self.assertEqual(game.step("uncover", 1, 1)["moves_made"], moves)

    def test_unknown_action(self):
        game = GameSession(3, 3, 1, seed=0)
        with self.assertRaises(ValueError):
            game.step("reveal", 0, 0)

    def test_score(self):
        game = self._session(2, 2, [(1, 1)])
        self.assertEqual(game.get_score(), 0.0)
        game.step("uncover", 0, 0)
        self.assertAlmostEqual(game.get_score(), 1 / 3)

    def test_reset(self):
        game = GameSession(4, 4, 2, seed=9)
        game.step("uncover", 0, 0)
        game.reset()
        self.assertFalse(game.board.initialized)
        self.assertEqual(game.moves_made, 0)

    def test_apply_action_feedback(self):
        game = self._session(3, 3, [(2, 2)])
        self.assertEqual(game.apply_action(Action.uncover(1, 1)), Result.count(1))
        self.assertIs(game.apply_action(Action.flag(2, 2)), NO_RESULT)
        self.assertIs(game.apply_action(Action.leave()), NO_RESULT)
        self.assertTrue(game.board.is_flagged(2, 2))

    def test_agent_wins_simple_board(self):
        game = self._session(5, 5, [(4, 4)])
        frames = game.play_agent(PropagationAgent(5, 5, 1))
        self.assertTrue(game.is_win())
        self.assertEqual(frames[0]["action"], Action.uncover(0, 0))
        self.assertEqual(frames[0]["result"], Result.count(0))

    def test_frames_hold_independent_snapshots(self):
        game = self._session(5, 5, [(4, 4)])
        frames = game.play_agent(PropagationAgent(5, 5, 1))
        first = frames[0]["board"]
        self.assertEqual(len(first.get_hidden_positions()), 24)
        self.assertIsNot(first, game.board)
        self.assertEqual(frames[-1]["board"].grid, game.board.grid)

    def test_host_opening_on_all_but_one_mine_board(self):
        game = GameSession(5, 5, 24, start_x=2, start_y=2, seed=4)
        frames = game.play_agent(PropagationAgent(5, 5, 24, 2, 2), open_first=True)
        self.assertEqual(frames, [])
        self.assertTrue(game.is_win())
        self.assertEqual(game.moves_made, 1)

    def test_host_opening_is_reported_to_agent(self):
        game = self._session(5, 5, [(4, 4)], start_x=2, start_y=2)
        agent = PropagationAgent(5, 5, 1, 2, 2)
        frames = game.play_agent(agent, open_first=True)
        self.assertEqual(agent.knowledge.get(2, 2), 0)
        self.assertEqual(frames[0]["action"], Action.uncover(0, 0))
        self.assertTrue(game.is_win())

    def test_opening_can_win_immediately(self):
        game = self._session(1, 2, [(0, 1)])
        frames = game.play_agent(PropagationAgent(1, 2, 1))
        self.assertTrue(game.is_win())
        self.assertEqual(len(frames), 1)

    def test_protocol_violation_stops_loop(self):
        game = self._session(3, 3, [(2, 2)])
        frames = game.play_agent(BrokenAgent())
        self.assertEqual(len(frames), 1)
        self.assertFalse(game.is_game_over())

    def test_max_moves(self):
        game = GameSession(9, 9, 10, seed=2)
        frames = game.play_agent(PropagationAgent(9, 9, 10), max_moves=2)
        self.assertLessEqual(len(frames), 2)

    def test_leave_frame(self):
        game = self._session(2, 1, [(1, 0)])
        agent = PropagationAgent(2, 1, 1)
        agent.get_action()
        agent.get_action(1)
        game.board.uncover(0, 0)
        game.board.place_flag(1, 0)
        # the agent has nothing hidden left to try, so its next move is Leave
        frames = game.play_agent(agent)
        self.assertEqual(frames[-1]["action"].action_type, ActionType.LEAVE)


if __name__ == "__main__":
    unittest.main()
