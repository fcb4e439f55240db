#!/usr/bin/env python3
"""
Dodgefall - Standalone entry point.

Usage:
    python -m dodgefall
    python -m dodgefall --resolution 800x600 --seed 42
    python -m dodgefall --skin geometric --log-level DEBUG

Controls:
    - Drag the square with the mouse or a finger
    - R to reset the round
    - F to toggle fullscreen
    - ESC to quit
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

import pygame

from dodgefall import config
from dodgefall.game_mode import DodgeMode
from dodgefall.input import InputManager
from dodgefall.input.sources import CombinedInputSource
from dodgefall.logging import configure_logging, get_logger
from dodgefall.models import Resolution

log = get_logger('main')

# Launcher-level options that are not passed to the game
_LAUNCHER_ARGS = {'resolution', 'fullscreen', 'log_level'}


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser from the game's declared ARGUMENTS."""
    parser = argparse.ArgumentParser(
        description=f'{DodgeMode.NAME} - {DodgeMode.DESCRIPTION}',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    for arg_def in DodgeMode.get_arguments():
        kwargs: Dict[str, Any] = {}
        if 'type' in arg_def:
            kwargs['type'] = arg_def['type']
        if 'default' in arg_def:
            kwargs['default'] = arg_def['default']
        if 'help' in arg_def:
            kwargs['help'] = arg_def['help']
        if 'action' in arg_def:
            kwargs['action'] = arg_def['action']
            kwargs.pop('type', None)  # action and type are mutually exclusive
        if 'choices' in arg_def:
            kwargs['choices'] = arg_def['choices']
        parser.add_argument(arg_def['name'], **kwargs)

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Default log level: TRACE, DEBUG, INFO, WARNING, ERROR, OFF'
    )
    return parser


def game_kwargs_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the parsed options meant for the game itself."""
    return {
        k: v for k, v in vars(args).items()
        if k not in _LAUNCHER_ARGS and v is not None
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    if args.resolution:
        try:
            resolution = Resolution.parse(args.resolution)
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
    else:
        resolution = Resolution(width=config.SCREEN_WIDTH, height=config.SCREEN_HEIGHT)

    pygame.init()

    if args.fullscreen or config.FULLSCREEN:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((resolution.width, resolution.height), pygame.RESIZABLE)
    pygame.display.set_caption(DodgeMode.NAME)

    width, height = screen.get_size()
    log.info("Display %dx%d at %d FPS", width, height, config.FPS)

    try:
        game = DodgeMode(width, height, **game_kwargs_from_args(args))
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        pygame.quit()
        return 1
    input_manager = InputManager(CombinedInputSource())
    input_manager.resize(width, height)
    clock = pygame.time.Clock()

    running = True
    while running:
        dt = clock.tick(config.FPS) / 1000.0

        for event in input_manager.process(pygame.event.get()):
            if event.type == pygame.QUIT:
                running = False
            elif event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
                screen = pygame.display.get_surface()
                width, height = screen.get_size()
                game.resize(width, height)
                input_manager.resize(width, height)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_f:
                    pygame.display.toggle_fullscreen()
                elif event.key == pygame.K_r:
                    game.reset()
                    log.info("Round reset by player")

        input_manager.update(dt)
        game.handle_input(input_manager.get_events())
        game.update(dt)
        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
