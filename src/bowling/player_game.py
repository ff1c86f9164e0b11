# -*- coding: utf-8 -*-

from bowling.frames import Frame, FrameKind

FRAMES = 10


class PlayerGame:
	def __init__(self):
		# Pre-populate the 10 frames for the game
		self.frames = {n: Frame.pending() for n in range(1, FRAMES + 1)}
		self.cumulative_scores = {n: 0 for n in range(1, FRAMES + 1)}

	def get_cumulative_score(self, frame):
		return self.cumulative_scores[frame]

	@property
	def total_score(self):
		# Running totals never go down, so the latest one is the largest
		return max(self.cumulative_scores.values())

	@property
	def last_scored_frame(self):
		"""Highest frame number reached by the running total, 0 before any shot"""
		scored = 0
		for n in range(1, FRAMES + 1):
			if self.frames[n].is_pending:
				break
			scored = n
		return scored

	@property
	def is_complete(self):
		last = self.frames[FRAMES]
		if last.kind is not FrameKind.LAST:
			return False
		shots = last.shots
		if len(shots) == 3:
			return True
		return len(shots) == 2 and shots[0] != 10 and sum(shots) != 10
