import random
import unittest

from tictactoe_ai.board import parse_board
from tictactoe_ai.config import SelectorConfig
from tictactoe_ai.minimax import MinimaxSearch
from tictactoe_ai.move_selector import MoveSelector, choose_move


class FixedRng:
    """Random source whose draw is fixed; ``choice`` takes the last cell."""

    def __init__(self, sample):
        self.sample = sample
        self.random_calls = 0
        self.choices = []

    def random(self):
        self.random_calls += 1
        return self.sample

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[-1]


class TestMoveSelector(unittest.TestCase):
    def test_full_board_returns_none(self):
        board = parse_board("XOXXOOOXX")
        rng = FixedRng(0.0)
        self.assertIsNone(choose_move(board, "O", "top", rng))
        self.assertEqual(rng.random_calls, 0)

    def test_blocks_at_top(self):
        board = ["X", "X", None, "O", None, None, None, None, None]
        self.assertEqual(choose_move(board, "O", "top"), 2)

    def test_top_matches_search(self):
        boards = ["X........", "X...O...X", "XO..X....", "OX.XO...."]
        for text in boards:
            board = parse_board(text)
            for ai in ("X", "O"):
                expected = MinimaxSearch(ai).search(board, ai).index
                for seed in range(3):
                    got = choose_move(board, ai, "top", random.Random(seed))
                    self.assertEqual(got, expected, (text, ai, seed))

    def test_unknown_difficulty_plays_top(self):
        board = parse_board("XX.O.....")
        rng = FixedRng(0.999)
        self.assertEqual(choose_move(board, "O", "impossible", rng), 2)
        self.assertEqual(rng.choices, [])

    def test_sample_above_threshold_plays_random(self):
        board = parse_board("XX.O.....")
        rng = FixedRng(0.5)
        selector = MoveSelector("O", "beginner", rng)
        self.assertEqual(selector.choose_move(board), 8)
        self.assertEqual(selector.last_decision, "random")
        self.assertEqual(rng.choices, [[2, 4, 5, 6, 7, 8]])

    def test_sample_at_threshold_plays_optimal(self):
        board = parse_board("XX.O.....")
        rng = FixedRng(0.3)
        selector = MoveSelector("O", "beginner", rng)
        self.assertEqual(selector.choose_move(board), 2)
        self.assertEqual(selector.last_decision, "optimal")
        self.assertEqual(rng.random_calls, 1)

    def test_middle_threshold(self):
        board = parse_board("XX.O.....")
        self.assertEqual(MoveSelector("O", "middle", FixedRng(0.69)).choose_move(board), 2)
        self.assertEqual(MoveSelector("O", "middle", FixedRng(0.71)).choose_move(board), 8)

    def test_does_not_mutate_board(self):
        board = parse_board("X...O....")
        before = list(board)
        for seed in range(5):
            choose_move(board, "X", "beginner", random.Random(seed))
        choose_move(board, "X", "top")
        self.assertEqual(board, before)

    def test_beginner_mostly_random(self):
        board = parse_board("XX..O....")
        selector = MoveSelector("O", "beginner", random.Random(1234))
        trials = 1000
        random_path = 0
        not_optimal = 0
        for _ in range(trials):
            move = selector.choose_move(board)
            if selector.last_decision == "random":
                random_path += 1
            if move != 2:
                not_optimal += 1
        self.assertTrue(0.64 < random_path / trials < 0.76, random_path)
        # A random pick hits the block one time in six.
        self.assertTrue(0.50 < not_optimal / trials < 0.67, not_optimal)

    def test_from_config_is_reproducible(self):
        board = parse_board("X........")
        config = SelectorConfig(ai_player="O", difficulty="beginner", seed=7)
        first = [MoveSelector.from_config(config).choose_move(board) for _ in range(3)]
        selector = MoveSelector.from_config(config)
        self.assertEqual(selector.ai_player, "O")
        self.assertEqual(selector.choose_move(board), first[0])
        self.assertEqual(len(set(first)), 1)


if __name__ == "__main__":
    unittest.main()
