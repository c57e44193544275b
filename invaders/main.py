#!/usr/bin/env python3
"""
Space Invaders - Main Entry Point
==================================

Runs the game interactively with pygame, or headless with a scripted
autopilot for demo/soak runs.

Usage:
    # Play (default)
    python main.py

    # Play without sound, with a fixed random seed
    python main.py --mute --seed 42

    # Headless autopilot for 20000 ticks
    python main.py --headless --ticks 20000

Controls:
    - LEFT/RIGHT: Move ship
    - SPACE: Fire / start level / next level
    - P: Pause/Resume
    - Q: Quit (from pause, level intro or level complete)
    - R: Restart (after game over or quit)
    - ESC: Close window
"""

# Suppress pygame's pkg_resources deprecation warning (pygame issue #4557)
import warnings
warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")

import argparse
import random
from typing import Optional

import pygame

from invaders.config import Config
from invaders.game import Simulation, Autopilot, Phase
from invaders.dispatcher import EventDispatcher
from invaders.storage import HighScoreStore
from invaders.audio import SoundBoard
from invaders.visualizer import Renderer, Scoreboard
from invaders.input import KeyboardController
from invaders.utils.logger import setup_logging, get_logger, log_run_summary, LogLevel


logger = get_logger('main')


class GameApp:
    """Interactive pygame shell around the simulation."""

    def __init__(self, config: Config):
        self.config = config

        pygame.init()
        pygame.display.set_caption("Space Invaders")
        self.screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()

        self.store = HighScoreStore(config.HIGH_SCORE_FILE, config.HIGH_SCORE_KEY)
        high_score = self.store.load()

        self.sim = Simulation(config, random.Random(config.SEED), high_score=high_score)
        self.controller = KeyboardController()
        self.renderer = Renderer(config)
        self.scoreboard = Scoreboard(config)
        self.sounds = SoundBoard(config)
        self.dispatcher = EventDispatcher(self.sounds, self.scoreboard, self.store)

        snapshot = self.sim.snapshot()
        self.scoreboard.sync_all(snapshot.score, snapshot.lives, snapshot.level, snapshot.high_score)
        self.running = True

        logger.info(f"Started with high score {high_score}")

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.controller.release_all()
            else:
                action = self.controller.handle_event(event)
                if action is not None:
                    events = self.sim.handle_action(action)
                    self.dispatcher.dispatch(events, self.sim.snapshot())

    def run(self) -> None:
        """Main frame loop: input, tick, dispatch, render."""
        while self.running:
            self._handle_events()

            events = self.sim.tick(self.controller.inputs)
            snapshot = self.sim.snapshot()
            self.dispatcher.dispatch(events, snapshot)

            self.renderer.draw(self.screen, snapshot)
            self.scoreboard.render(self.screen)
            pygame.display.flip()
            self.clock.tick(self.config.FPS)

        snapshot = self.sim.snapshot()
        log_run_summary(snapshot.score, snapshot.level, snapshot.high_score, 'window_closed')
        self.sounds.close()
        pygame.quit()


def run_headless(config: Config, ticks: int) -> Simulation:
    """
    Play the game with the autopilot and no display or audio.

    Args:
        config: Game configuration
        ticks: Number of frames to simulate

    Returns:
        The simulation in its final state
    """
    store = HighScoreStore(config.HIGH_SCORE_FILE, config.HIGH_SCORE_KEY)
    sim = Simulation(config, random.Random(config.SEED), high_score=store.load())
    pilot = Autopilot(fire_interval=config.AUTOPILOT_FIRE_INTERVAL)
    dispatcher = EventDispatcher(store=store)

    for _ in range(ticks):
        snapshot = sim.snapshot()
        if snapshot.phase == Phase.GAME_OVER:
            break
        inputs, action = pilot.decide(snapshot)
        if action is not None:
            dispatcher.dispatch(sim.handle_action(action), sim.snapshot())
        dispatcher.dispatch(sim.tick(inputs), sim.snapshot())

    snapshot = sim.snapshot()
    reason = 'game_over' if snapshot.phase == Phase.GAME_OVER else 'ticks'
    if reason == 'ticks':
        log_run_summary(snapshot.score, snapshot.level, snapshot.high_score, reason)
    return sim


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Space Invaders arcade shooter',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--headless', action='store_true',
                        help='Run the autopilot without a window')
    parser.add_argument('--ticks', type=int, default=36000,
                        help='Frames to simulate in headless mode (default: 36000)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for formation layout and enemy fire')
    parser.add_argument('--mute', action='store_true',
                        help='Disable sound effects')
    parser.add_argument('--high-score-file', type=str, default=None,
                        help='Path of the high score JSON file')
    parser.add_argument('--assets', type=str, default=None,
                        help='Directory with optional sprites and sounds')
    parser.add_argument('--fps', type=int, default=None,
                        help='Frame rate cap (default: 60)')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=[level.name for level in LogLevel],
                        help='Log verbosity')
    parser.add_argument('--no-log-file', action='store_true',
                        help='Log to console only')
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Apply CLI overrides on top of the default config."""
    config = Config()
    if args.seed is not None:
        config.SEED = args.seed
    if args.mute or args.headless:
        config.SOUND_ENABLED = False
    if args.high_score_file:
        config.HIGH_SCORE_FILE = args.high_score_file
    if args.assets:
        config.ASSET_DIR = args.assets
    if args.fps is not None:
        config.FPS = args.fps
    if args.log_level:
        config.LOG_LEVEL = args.log_level
    if args.no_log_file:
        config.LOG_TO_FILE = False
    config.__post_init__()
    return config


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    config = build_config(args)

    setup_logging(
        log_dir=config.LOG_DIR,
        level=LogLevel[config.LOG_LEVEL],
        file_output=config.LOG_TO_FILE,
        force=True,
    )

    if args.headless:
        run_headless(config, args.ticks)
    else:
        GameApp(config).run()


if __name__ == "__main__":
    main()
