# -*- coding: utf-8 -*-

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Player:
	"""A seated bowler. Compared by identity, so equal names never collide."""
	name: str
	color: str = 'white'

	def __str__(self):
		return self.name
