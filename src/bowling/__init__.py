# -*- coding: utf-8 -*-

from bowling.errors import GameOverError, InvalidPinCount, InvariantViolation, ScoreCounterError
from bowling.frames import Frame, FrameKind
from bowling.player import Player
from bowling.player_game import PlayerGame
from bowling.ten_pin import TenPinGame, TurnResult
