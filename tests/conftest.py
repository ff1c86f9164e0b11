import pytest

from config import DEFAULT_SETTINGS
from game_logger import create_logger
from bowling import Player, TenPinGame


@pytest.fixture
def settings():
    return dict(DEFAULT_SETTINGS)


@pytest.fixture
def logger():
    game_logger = create_logger()
    yield game_logger
    game_logger.close()


@pytest.fixture
def make_game(settings, logger):
    def _make(*names):
        players = [Player(name, settings['player_colors'][i]) for i, name in enumerate(names)]
        return TenPinGame(players, settings=settings, logger=logger)

    return _make


@pytest.fixture
def roll():
    def _roll(game, shots):
        return [game.submit_turn(pins) for pins in shots]

    return _roll
