# -*- coding: utf-8 -*-

from enum import Enum

from config import DEFAULT_SETTINGS
from game_logger import create_logger
from bowling.errors import GameOverError, InvalidPinCount, InvariantViolation
from bowling.frames import PINS, Frame, FrameKind
from bowling.player_game import FRAMES, PlayerGame


class TurnResult(Enum):
	STRIKE = 'strike'
	SPARE = 'spare'
	ANOTHER_SHOT = 'another_shot'
	OPEN_FRAME = 'open_frame'
	PLAYER_FINISHED = 'player_finished'
	GAME_OVER = 'game_over'


class TenPinGame:
	def __init__(self, players, settings=None, logger=None):
		if settings is None:
			settings = dict(DEFAULT_SETTINGS)
		self.settings = settings

		if logger is None:
			logger = create_logger(
				log_dir=settings.get('log_dir'),
				console_level=settings.get('console_log_level', 'INFO')
			)
		self.logger = logger

		players = list(players)
		max_players = settings.get('max_players', DEFAULT_SETTINGS['max_players'])
		if not players:
			raise ValueError("A game needs at least one player")
		if len(players) > max_players:
			raise ValueError(f"Too many players: {len(players)} (max {max_players})")
		if len({id(p) for p in players}) != len(players):
			raise ValueError("The same player can't be seated twice")

		# Seating order, kept for display after players finish
		self.players = tuple(players)
		self.player_games = {p: PlayerGame() for p in players}

		# Players still bowling, in turn order
		self._active_players = list(players)
		self._current_player = players[0]
		self._current_player_index = 0
		self._current_frame = 1
		self._current_step = 0
		self.is_game_over = False

		self.logger.log_game_start([p.name for p in players], max_players)

	@property
	def current_frame(self):
		return self._current_frame

	@property
	def current_step(self):
		return self._current_step

	@property
	def active_players(self):
		return list(self._active_players)

	def get_current_player(self):
		if self.is_game_over or not self._active_players:
			self.logger.log_error("Current player requested with no active players")
			raise InvariantViolation("there is no current player, the game is over")
		return self._current_player

	def get_player_game(self, player):
		return self.player_games[player]

	def remaining_pins(self):
		"""Pins standing in front of the current player"""
		frame = self.player_games[self.get_current_player()].frames[self._current_frame]
		shots = frame.shots

		if self._current_frame < FRAMES:
			return PINS - frame.pins_knocked_down

		# 10th frame: the rack is reset after a strike or a spare
		if not shots:
			return PINS
		if len(shots) == 1:
			return PINS if shots[0] == PINS else PINS - shots[0]
		if shots[0] == PINS:
			return PINS if shots[1] == PINS else PINS - shots[1]
		return PINS

	def submit_turn(self, pins):
		if self.is_game_over:
			self.logger.log_error("Shot submitted after game over", {'pins': pins})
			raise GameOverError()

		player = self._current_player
		remaining = self.remaining_pins()
		if isinstance(pins, bool) or not isinstance(pins, int) or not 0 <= pins <= remaining:
			self.logger.log_error("Invalid pin count", {
				'player': player.name,
				'frame': self._current_frame,
				'step': self._current_step,
				'pins': pins,
				'remaining': remaining
			})
			raise InvalidPinCount(pins, remaining)

		game = self.player_games[player]
		frame = game.frames[self._current_frame]
		sum_pins = frame.pins_knocked_down + pins

		if self._current_frame == FRAMES and self._current_step == 0:
			self.logger.log_frame_10_entry(player.name)

		result = self._classify(frame, sum_pins)

		shots = frame.shots + (pins,)
		if self._current_frame == FRAMES:
			frame = Frame.last(shots)
		elif result is TurnResult.STRIKE:
			frame = Frame.strike()
		elif result is TurnResult.SPARE:
			frame = Frame.spare(shots)
		else:
			frame = Frame.open(shots)
		game.frames[self._current_frame] = frame

		self.logger.log_shot(player.name, self._current_frame, self._current_step, pins, frame.shots, result.name)

		# Live totals, even mid-frame
		self._recalculate_scores(player)

		if self._current_frame < FRAMES:
			if result is TurnResult.ANOTHER_SHOT:
				self._current_step += 1
			else:
				self.logger.log_frame_complete(
					player.name,
					self._current_frame,
					frame,
					game.get_cumulative_score(self._current_frame)
				)
				self._turn_over()
		elif result is TurnResult.PLAYER_FINISHED:
			self.logger.log_frame_10_exit(player.name, frame.shots, frame.pins_knocked_down)
			self.logger.log_bowler_complete(player.name, game.total_score)
			self._turn_over()
			if self.is_game_over:
				result = TurnResult.GAME_OVER
		else:
			self._current_step += 1

		return result

	def _classify(self, frame, sum_pins):
		step = self._current_step
		if self._current_frame < FRAMES:
			if sum_pins == PINS:
				return TurnResult.STRIKE if step == 0 else TurnResult.SPARE
			if step == 0:
				return TurnResult.ANOTHER_SHOT
			return TurnResult.OPEN_FRAME

		# 10th frame: up to three shots
		if step == 0:
			return TurnResult.ANOTHER_SHOT
		if step == 1 and (frame.shots[0] == PINS or sum_pins == PINS):
			return TurnResult.ANOTHER_SHOT
		return TurnResult.PLAYER_FINISHED

	def _turn_over(self):
		old_player = self._current_player

		if self._current_frame < FRAMES:
			old_frame = self._current_frame
			if self._current_player_index == len(self._active_players) - 1:
				self._current_player_index = 0
				self._current_frame += 1
			else:
				self._current_player_index += 1

			self._current_player = self._active_players[self._current_player_index]
			self._current_step = 0

			self.logger.log_turn_rotation(
				old_player.name,
				self._current_player.name,
				f"Frame {old_frame} complete"
			)
			return

		self._active_players.remove(old_player)

		if not self._active_players:
			self.handle_game_complete()
			return

		remaining = [p.name for p in self._active_players]
		self.logger.log_info(f"Players still bowling: {remaining}")

		# Next in line slides into the removed player's seat, or the previous one at the end
		if self._current_player_index >= len(self._active_players):
			self._current_player_index = len(self._active_players) - 1
		self._current_player = self._active_players[self._current_player_index]
		self._current_step = 0

		self.logger.log_turn_rotation(
			old_player.name,
			self._current_player.name,
			f"{old_player.name} finished"
		)

	def handle_game_complete(self):
		self.is_game_over = True
		self.logger.log_info("All players finished - game complete")
		self.logger.log_game_complete([(p.name, score) for p, score in self.standings()])

	def standings(self):
		"""Players by total score, highest first. Ties keep seating order."""
		scores = [(p, self.player_games[p].total_score) for p in self.players]
		return sorted(scores, key=lambda item: item[1], reverse=True)

	def winner(self):
		if not self.is_game_over:
			return None
		return self.standings()[0][0]

	def _recalculate_scores(self, player):
		"""Recompute the running totals of one player, stopping at the first pending frame"""
		frames = self.player_games[player].frames
		cumulative = self.player_games[player].cumulative_scores

		running_score = 0
		for n in range(1, FRAMES + 1):
			frame = frames[n]
			if frame.is_pending:
				break

			if frame.kind is FrameKind.OPEN or frame.kind is FrameKind.LAST:
				score_this_frame = frame.pins_knocked_down
			elif frame.kind is FrameKind.STRIKE:
				score_this_frame = PINS + sum(self._next_shots(frames, n, 2))
			else:
				score_this_frame = PINS + sum(self._next_shots(frames, n, 1))

			running_score += score_this_frame
			cumulative[n] = running_score

	@staticmethod
	def _next_shots(frames, frame_number, count):
		"""Up to `count` shots thrown after a frame. Bonus shots not thrown yet count as nothing."""
		shots = []
		for n in range(frame_number + 1, FRAMES + 1):
			if frames[n].is_pending:
				break
			shots.extend(frames[n].shots)
			if len(shots) >= count:
				break
		return shots[:count]
