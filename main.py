# main.py

import argparse
import csv
import logging
import os
import sys

from obpslg.errors import InningLimitExceeded
from obpslg.simulator import Simulator
from obpslg.stats import format_rate
from obpslg.utils import setup_logging

CONFIG_FILE = os.path.join("data", "config.yaml")

logger = logging.getLogger(__name__)


def format_report(simulator):
    """Records and batting lines for both teams, as printed at the end of a season."""
    lines = ["Records:"]
    for team in simulator.teams:
        lines.append(f"Team {team.name}: {team.record} ({format_rate(team.winning_percentage)})")
    lines.append("")
    lines.append("Batting stats:")
    for team in simulator.teams:
        line = team.stat_line()
        lines.append(f"Team {team.name}: {format_rate(line.batting_average)}/{format_rate(line.on_base_percentage)}/"
                     f"{format_rate(line.slugging)} ({format_rate(line.ops)} OPS), {team.runs} runs scored")
    season = simulator.season_summary()["season"]
    lines.append("")
    lines.append(f"{season['games']} games, {season['extra_inning_games']} in extra innings, "
                 f"{season['walk_off_games']} walk-offs.")
    return "\n".join(lines)


def append_csv_row(csv_name, simulator):
    """Appends one row per team to logs/<csv_name>, writing a header if the file is new."""
    output_dir = "logs"
    os.makedirs(output_dir, exist_ok=True)
    csv_path = os.path.join(output_dir, csv_name)
    logger.info(f"Attempting to append season results to CSV: {csv_path}")
    file_exists = os.path.isfile(csv_path)
    with open(csv_path, 'a', newline='') as f:
        writer = csv.writer(f)
        if not file_exists:
            writer.writerow(["Seed", "Team", "Wins", "Losses", "WinPct", "Runs", "AVG", "OBP", "SLG", "OPS"])
        for team in simulator.teams:
            line = team.stat_line()
            writer.writerow([simulator.seed, team.name, team.wins, team.losses, team.winning_percentage,
                             team.runs, line.batting_average, line.on_base_percentage, line.slugging, line.ops])
    logger.info(f"Appended season results to {csv_path}")


def main():
    parser = argparse.ArgumentParser(description="OBP vs SLG season simulator")
    parser.add_argument('--config', default=CONFIG_FILE,
                        help=f'Path to the YAML configuration file (default: {CONFIG_FILE}).')
    parser.add_argument('--num-games', type=int, default=None,
                        help='Override the number of games in the season (from config.yaml).')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random number generator. Omit for a different season every run.')
    parser.add_argument('--debug', action='store_true', help='Enable DEBUG level logging for all modules.')
    parser.add_argument('--show-game-logs', action='store_true',
                        help='Show detailed play-by-play logs from the game simulation on stderr.')
    parser.add_argument('--save-yaml', type=str, default=None, metavar='PATH',
                        help='Save the season summary and per-game results to this YAML file.')
    parser.add_argument('--csv', type=str, default=None,
                        help='Append the season results to logs/<CSV>.')

    args = parser.parse_args()

    root_log_level = logging.DEBUG if args.debug else logging.WARNING
    setup_logging(level=root_log_level, show_game_logs=args.show_game_logs)
    logger.debug(f"Command line args: {args}")

    try:
        simulator = Simulator(config_path=args.config)
        # Play-by-play is only rendered when someone will read it
        verbose = args.show_game_logs or args.save_yaml is not None
        simulator.run_season(num_games=args.num_games, seed=args.seed, verbose=verbose)
    except FileNotFoundError:
        logger.error(f"Fatal Error: Cannot find configuration file at {args.config}. Exiting.")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Fatal Error: Configuration error - {e}. Exiting.")
        sys.exit(1)
    except InningLimitExceeded as e:
        logger.error(f"Fatal Error: {e} Raise max_innings or check the hitters' stats. Exiting.")
        sys.exit(1)

    print(format_report(simulator))

    if args.save_yaml:
        simulator.save_results_yaml(args.save_yaml)

    if args.csv:
        try:
            append_csv_row(args.csv, simulator)
        except IOError as e:
            logger.error(f"Failed to append results to CSV {args.csv}: {e}")

    logger.info("Season simulation finished.")


if __name__ == "__main__":
    main()
