#!/usr/bin/env python3
"""Watch a random player play Minesweeper."""
import argparse
import logging
import os
import time
from typing import Optional

import numpy as np

from minesweeper import FieldConfig, MinesweeperEnv


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.3,
    games: int = 5,
    width: int = 9,
    height: int = 9,
    mines: int = 10,
    seed: Optional[int] = None,
):
    """Run demo games with visualization."""
    config = FieldConfig(width, height, mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)

    print(f"Board: {width}x{height} with {mines} mines ({100*mines/config.size:.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            valid_actions = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid_actions))
            x, y = action % width, action // width

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "VICTORY":
                    wins += 1
                    print(f"\n*** WIN in {info['elapsed_time']}s ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--width", type=int, default=9, help="Board width")
    parser.add_argument("--height", type=int, default=9, help="Board height")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~12%% of cells)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Log engine events")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    mines = args.mines if args.mines is not None else int(args.width * args.height * 0.12)

    demo(
        delay=args.delay,
        games=args.games,
        width=args.width,
        height=args.height,
        mines=mines,
        seed=args.seed,
    )
