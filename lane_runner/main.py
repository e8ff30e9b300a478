#!/usr/bin/env python3
"""
Lane Runner - Terminal Endless Runner
======================================
Jump over the obstacles scrolling toward you. The score ticks up
every step and the pace quickens until something hits.

Controls:
    SPACE   - Jump
    CTRL-C  - Quit
"""

import argparse
import logging
import os
import random
import signal
import sys
from typing import List, Optional

from blessed import Terminal

from .config import GameConfig, ENV_PREFIX
from .controls import InputSampler
from .game import GameLoop
from .renderer import screen_width
from .screen import Screen


logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='lane-runner',
        description='A terminal endless runner. Press SPACE to jump.',
    )
    parser.add_argument('--seed', type=int, default=None,
                        help=f'Seed for obstacle spawns (default: ${ENV_PREFIX}SEED or random)')
    parser.add_argument('--log-file', default=None,
                        help='Write logs here; without it only warnings reach stderr')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Level used with --log-file')
    return parser.parse_args(argv)


def configure_logging(log_file: Optional[str], level: str):
    """The game owns the screen, so full logging only goes to a file."""
    if log_file:
        logging.basicConfig(filename=log_file, level=getattr(logging, level),
                            format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


def resolve_seed(seed: Optional[int]) -> Optional[int]:
    if seed is not None:
        return seed
    raw = os.environ.get(ENV_PREFIX + 'SEED')
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{ENV_PREFIX}SEED: expected int, got {raw!r}') from None


def _handle_sigterm(signum, frame):
    """Turn SIGTERM into SystemExit so terminal scopes unwind."""
    raise SystemExit(128 + signum)


def main(argv: Optional[List[str]] = None):
    """Entry point. Sets up the terminal and plays one run."""
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    try:
        config = GameConfig.from_env()
        seed = resolve_seed(args.seed)
    except ValueError as exc:
        print(f'Invalid configuration: {exc}', file=sys.stderr)
        sys.exit(1)

    term = Terminal()
    width = screen_width(config)
    height = config.frame_height

    if term.is_a_tty and (term.width < width or term.height < height):
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {width}x{height}'
        )
        sys.exit(1)

    signal.signal(signal.SIGTERM, _handle_sigterm)

    sampler = InputSampler(term, jump_key=config.jump_key)
    game = GameLoop(
        config,
        sampler,
        Screen(term, width, height),
        rng=random.Random(seed),
    )
    logger.info('Seed: %s', seed)

    try:
        with sampler.raw_mode(), term.hidden_cursor():
            game.run()
    except KeyboardInterrupt:
        logger.info('Interrupted on tick %d', game.state.tick_count)
        print(term.normal)
        sys.exit(EXIT_INTERRUPTED)

    # Restore terminal
    print(term.normal)


if __name__ == '__main__':
    main()
