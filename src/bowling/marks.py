# -*- coding: utf-8 -*-

# marks.py - scoreboard symbols for the rendering side
from bowling.frames import PINS, FrameKind
from bowling.player_game import FRAMES

STRIKE = 'X'
SPARE = '/'
GUTTER = '-'


def _shot_mark(pins):
	return GUTTER if pins == 0 else str(pins)


def frame_marks(frame_number, frame):
	"""
	Box symbols for one frame: two boxes for frames 1-9, three for the 10th.
	Empty boxes are ''.
	"""
	boxes = 3 if frame_number == FRAMES else 2

	if frame.kind is FrameKind.STRIKE:
		marks = [STRIKE]
	else:
		marks = []
		standing = PINS
		first_ball = True
		for pins in frame.shots:
			if pins == standing:
				# Rack cleared, a fresh one follows in the 10th
				marks.append(STRIKE if first_ball else SPARE)
				standing = PINS
				first_ball = True
			elif first_ball:
				marks.append(_shot_mark(pins))
				standing -= pins
				first_ball = False
			else:
				marks.append(_shot_mark(pins))
				standing = PINS
				first_ball = True

	return marks + [''] * (boxes - len(marks))


def scoreboard(game):
	"""One row per seated player, in seating order"""
	current = None
	if not game.is_game_over:
		current = game.get_current_player()

	rows = []
	active = game.active_players
	for player in game.players:
		player_game = game.get_player_game(player)
		scored = player_game.last_scored_frame
		rows.append({
			'name': player.name,
			'color': player.color,
			'marks': [frame_marks(n, player_game.frames[n]) for n in range(1, FRAMES + 1)],
			'scores': [player_game.get_cumulative_score(n) if n <= scored else None for n in range(1, FRAMES + 1)],
			'total': player_game.total_score,
			'is_current': player is current,
			'is_active': player in active,
		})
	return rows
