"""Shared fixtures for the TicTacToe tests."""

from typing import List

import pytest

from engine.ai_player import AIPlayer
from engine.game_state import Board, Move
from engine.session import GameSession


class FirstEmptyAI(AIPlayer):
    """Plays the first empty cell, so round scripts are easy to predict."""

    def get_best_move(self, board: Board) -> Move:
        return board.empty_cells()[0]


class ScriptedInput:
    """Feeds canned answers to a prompt and remembers the prompts shown."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def scripted_session():
    return GameSession(ai=FirstEmptyAI())


@pytest.fixture
def ai():
    return AIPlayer()
