# -*- coding: utf-8 -*-

class ScoreCounterError(Exception):
	"""Base class for scoring engine errors."""

	def __init__(self, detail, *, code):
		super().__init__(detail)
		self.detail = detail
		self.code = code


class InvalidPinCount(ScoreCounterError):
	"""The submitted pin count can't be thrown at the current rack.

	Raised before any state is touched, so the caller can simply ask again.
	"""

	def __init__(self, pins, remaining):
		super().__init__(
			f"invalid pin count {pins!r}, {remaining} pins standing",
			code="invalid_pin_count",
		)
		self.pins = pins
		self.remaining = remaining


class InvariantViolation(ScoreCounterError):
	"""The engine was driven in a way that can't happen in a real game."""

	def __init__(self, detail, *, code="invariant_violation"):
		super().__init__(detail, code=code)


class GameOverError(InvariantViolation):
	def __init__(self):
		super().__init__("the game is over, no more shots can be submitted", code="game_over")
