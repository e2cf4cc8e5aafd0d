"""
WordCut - Main Entry Point

Terminal front-end: loads the dictionary, starts a game and reads moves
until the player quits.
"""

import argparse
import random

from . import create_game_service

COMMANDS = ":new starts a new game, :reset restarts this one, :quit exits"


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog='wordcut', description='WordCut word-reduction game')
    parser.add_argument('--word-list', default=None,
                        help='Word list file (JSON array or one word per line)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for start word selection')
    return parser.parse_args(argv)


def _print_history(state, output_func):
    output_func(f"Start: {state.start_word}")
    for number, move in enumerate(state.history, start=1):
        output_func(f"  {number}. {move.word:<12} +{move.points_p1} +{move.points_p2}")
    output_func(f"Total score: {state.total_score}")


def main(argv=None, input_func=input, output_func=print) -> int:
    """Run an interactive game. Returns the process exit code."""
    args = _parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None

    game_service = create_game_service(rng=rng, word_list_path=args.word_list)
    game_id = game_service.create_new_game()

    output_func("WordCut: remove 1 to 3 letters and rearrange the rest into a new word.")
    output_func(COMMANDS)

    try:
        while True:
            state = game_service.get_game_state(game_id)
            output_func(f"\n{state.current_word}  (score: {state.total_score})")

            try:
                line = input_func("> ").strip()
            except EOFError:
                break

            if line == ':quit':
                break
            if line == ':new':
                game_service.delete_game(game_id)
                game_id = game_service.create_new_game()
                continue
            if line == ':reset':
                game_service.reset_game(game_id)
                continue

            result = game_service.make_move(game_id, line)
            if not result.valid:
                output_func(f"✗ {result.reason}")
                continue

            output_func(f"✓ +{result.points_p1} (letters removed) +{result.points_p2} (reordered)")
            state = game_service.get_game_state(game_id)
            _print_history(state, output_func)
            if state.is_won:
                output_func(f"You win! {state.start_word} -> {state.current_word}")
                output_func(COMMANDS)

    except KeyboardInterrupt:
        output_func("")

    game_service.logger.logger.info("WordCut session ended")
    return 0
