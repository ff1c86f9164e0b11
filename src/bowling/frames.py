# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum

from bowling.errors import InvariantViolation

PINS = 10

# Cached shot tuples
NO_SHOTS = ()
STRIKE_SHOTS = (PINS,)


class FrameKind(Enum):
	PENDING = 'pending'
	STRIKE = 'strike'
	SPARE = 'spare'
	OPEN = 'open'
	LAST = 'last'


@dataclass(frozen=True)
class Frame:
	"""One frame of one player's game.

	A frame never changes once built. Each shot produces a new Frame holding
	all the shots so far, tagged with the kind of frame they add up to.
	"""
	kind: FrameKind
	shots: tuple = NO_SHOTS

	@classmethod
	def pending(cls):
		return cls(FrameKind.PENDING)

	@classmethod
	def strike(cls):
		return cls(FrameKind.STRIKE, STRIKE_SHOTS)

	@classmethod
	def spare(cls, shots):
		shots = _checked(shots)
		if len(shots) != 2 or shots[0] >= PINS or sum(shots) != PINS:
			raise InvariantViolation(f"a spare needs two shots adding up to {PINS}, got {list(shots)}")
		return cls(FrameKind.SPARE, shots)

	@classmethod
	def open(cls, shots):
		shots = _checked(shots)
		if not 1 <= len(shots) <= 2 or sum(shots) >= PINS:
			raise InvariantViolation(f"an open frame holds one or two shots under {PINS}, got {list(shots)}")
		return cls(FrameKind.OPEN, shots)

	@classmethod
	def last(cls, shots):
		shots = _checked(shots)
		if not 1 <= len(shots) <= 3:
			raise InvariantViolation(f"the last frame holds one to three shots, got {list(shots)}")
		return cls(FrameKind.LAST, shots)

	@property
	def pins_knocked_down(self):
		return sum(self.shots)

	@property
	def is_pending(self):
		return self.kind is FrameKind.PENDING

	@property
	def first_shot(self):
		return self.shots[0] if self.shots else 0


def _checked(shots):
	shots = tuple(shots)
	for pins in shots:
		if isinstance(pins, bool) or not isinstance(pins, int) or not 0 <= pins <= PINS:
			raise InvariantViolation(f"a shot knocks down 0-{PINS} pins, got {pins!r}")
	return shots
