import logging
import os
from datetime import datetime

class GameLogger:
    def __init__(self, log_dir=None, console_level='INFO'):
        """Initialize game logger, optionally with a timestamped log file"""
        self.log_dir = log_dir
        self.log_file = None

        # Configure logger
        self.logger = logging.getLogger('ScoreCounter')
        self.logger.setLevel(logging.DEBUG)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        # Format
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler (INFO by default to reduce console noise)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = os.path.join(log_dir, f"game_{timestamp}.log")

            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        self.logger.info("=== Game Log Started ===")
        if self.log_file:
            self.logger.info(f"Log file: {self.log_file}")

    def close(self):
        """Flush and detach the handlers"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def log_game_start(self, player_names, max_players):
        """Log game initialization"""
        self.logger.info("=== GAME START ===")
        self.logger.info(f"Players: {', '.join(player_names)} ({len(player_names)}/{max_players} seats)")

    def log_shot(self, player_name, frame, step, pins, frame_shots, result):
        """Log each shot thrown"""
        self.logger.debug(
            f"{player_name} | Frame {frame} Shot {step+1} | "
            f"Pins: {pins} | Frame shots: {list(frame_shots)} | "
            f"Result: {result}"
        )

    def log_frame_complete(self, player_name, frame, frame_value, cumulative_score):
        """Log when a frame is completed"""
        self.logger.info(
            f"{player_name} completed Frame {frame} | "
            f"Kind: {frame_value.kind.name} | Shots: {list(frame_value.shots)} | "
            f"Cumulative: {cumulative_score}"
        )

    def log_frame_10_entry(self, player_name):
        """Log entry into 10th frame"""
        self.logger.info(f">>> {player_name} entering Frame 10")

    def log_frame_10_exit(self, player_name, shots, frame_score):
        """Log completion of 10th frame"""
        self.logger.info(
            f"<<< {player_name} completed Frame 10 | "
            f"Shots thrown: {len(shots)} | Shots: {list(shots)} | "
            f"Frame score: {frame_score}"
        )

    def log_bowler_complete(self, player_name, final_score):
        """Log when a player finishes all frames"""
        self.logger.info(
            f"*** {player_name} FINISHED | Final score: {final_score} ***"
        )

    def log_game_complete(self, player_scores):
        """Log game completion"""
        self.logger.info("=== GAME COMPLETE ===")
        for name, score in player_scores:
            self.logger.info(f"{name}: {score}")

    def log_error(self, error_msg, context=None):
        """Log errors with context"""
        self.logger.error(f"ERROR: {error_msg}")
        if context:
            self.logger.error(f"Context: {context}")

    def log_info(self, message):
        """Log general info message"""
        self.logger.info(message)

    def log_debug(self, message):
        """Log debug message"""
        self.logger.debug(message)

    def log_turn_rotation(self, from_player, to_player, reason):
        """Log when turn rotates between players"""
        self.logger.debug(f"Turn: {from_player} → {to_player} ({reason})")

# Convenience function for easy import
def create_logger(log_dir=None, console_level='INFO'):
    return GameLogger(log_dir, console_level)
