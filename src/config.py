# -*- coding: utf-8 -*-

import json
import os

CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config', 'settings.json')

DEFAULT_SETTINGS = {
    'max_players': 5,
    'log_dir': None,  # None disables the log file, console only
    'console_log_level': 'INFO',
    'player_colors': ['cyan', 'yellow', 'red', 'green', 'white'],
}

def load_settings(path=None):
    """Load settings.json on top of the defaults"""
    path = path or CONFIG_PATH
    settings = dict(DEFAULT_SETTINGS)
    if os.path.exists(path):
        with open(path, 'r') as f:
            settings.update(json.load(f))

    max_players = settings['max_players']
    if isinstance(max_players, bool) or not isinstance(max_players, int) or max_players < 1:
        raise ValueError(f"max_players must be a positive integer, got {max_players!r}")
    if len(settings['player_colors']) < max_players:
        raise ValueError("There are less player colors than max players")
    return settings

def save_settings(settings, path=None):
    path = path or CONFIG_PATH
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, 'w') as f:
        json.dump(settings, f, indent=2)
