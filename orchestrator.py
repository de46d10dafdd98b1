# orchestrator.py

import argparse
import csv
import datetime
import logging
import os
import sys

import pandas as pd

from obpslg.errors import InningLimitExceeded
from obpslg.simulator import Simulator
from obpslg.utils import setup_logging

CONFIG_FILE = os.path.join("data", "config.yaml")
RESULTS_BASE_DIR = "results"

TRIAL_COLUMNS = ["Trial", "Seed", "Team", "Wins", "Losses", "WinPct", "Runs", "AVG", "OBP", "SLG", "OPS"]
SUMMARY_COLUMNS = ["Wins", "WinPct", "Runs", "OBP", "SLG", "OPS"]


def run_trial(simulator, trial_index, seed, num_games):
    """Plays one independently seeded season and returns one CSV row per team."""
    logger = logging.getLogger("Orchestrator")
    teams = simulator.run_season(num_games=num_games, seed=seed)
    rows = []
    for team in teams:
        line = team.stat_line()
        rows.append([trial_index, seed, team.name, team.wins, team.losses, team.winning_percentage, team.runs,
                     line.batting_average, line.on_base_percentage, line.slugging, line.ops])
    logger.debug(f"Trial {trial_index} (seed {seed}): "
                 + ", ".join(f"{team.name} {team.record}" for team in teams))
    return rows


def summarize_trials(trials_csv_path):
    """
    Reads the per-trial CSV back and aggregates it per team.
    Returns (summary DataFrame, Series of season-series wins per team).
    """
    df = pd.read_csv(trials_csv_path)
    summary = df.groupby("Team")[SUMMARY_COLUMNS].agg(["mean", "std", "min", "max"])

    # Which team won each season; an even split counts for neither
    per_trial = df.pivot(index="Trial", columns="Team", values="Wins")
    leaders = per_trial.idxmax(axis=1)[per_trial.max(axis=1) != per_trial.min(axis=1)]
    series_wins = leaders.value_counts().reindex(per_trial.columns, fill_value=0)
    return summary, series_wins


def main():
    parser = argparse.ArgumentParser(description="Replicate the OBP vs SLG season many times and summarize the results.")
    parser.add_argument('--config', default=CONFIG_FILE, help='Path to the YAML configuration file.')
    parser.add_argument('--trials', type=int, default=None, help='Number of seasons to simulate (from config.yaml).')
    parser.add_argument('--base-seed', type=int, default=None,
                        help='Seed of the first trial; trial i uses base seed + i (from config.yaml).')
    parser.add_argument('--num-games', type=int, default=None, help='Override the number of games per season.')
    parser.add_argument('--debug', action='store_true', help='Enable DEBUG level logging.')

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    setup_logging(level=log_level)
    logger = logging.getLogger("Orchestrator")

    logger.info("Starting OBP vs SLG Trial Orchestrator...")
    logger.debug(f"Orchestrator Args: {args}")

    try:
        simulator = Simulator(config_path=args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load configuration: {e}. Exiting.")
        sys.exit(1)

    orch_params = simulator.config.get('orchestrator_params') or {}
    trials = args.trials if args.trials is not None else orch_params.get('trials', 100)
    base_seed = args.base_seed if args.base_seed is not None else orch_params.get('base_seed', 1)
    num_games = args.num_games if args.num_games is not None else simulator.num_games
    if trials <= 0 or num_games <= 0:
        logger.error(f"Invalid run parameters: trials ({trials}) and num_games ({num_games}) must be positive.")
        sys.exit(1)
    logger.info(f"Running {trials} trial season(s) of {num_games} games, seeds {base_seed}..{base_seed + trials - 1}")

    # --- Create Timestamped Output Directory ---
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_output_dir = os.path.join(RESULTS_BASE_DIR, timestamp)
    try:
        os.makedirs(run_output_dir, exist_ok=True)
        logger.info(f"Created results directory: {run_output_dir}")
    except OSError as e:
        logger.error(f"Failed to create results directory {run_output_dir}: {e}")
        sys.exit(1)

    trials_csv_path = os.path.join(run_output_dir, f"{trials}_trial_results.csv")
    try:
        with open(trials_csv_path, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(TRIAL_COLUMNS)
            for trial_index in range(trials):
                seed = base_seed + trial_index
                try:
                    writer.writerows(run_trial(simulator, trial_index, seed, num_games))
                except InningLimitExceeded as e:
                    logger.error(f"Trial {trial_index} (seed {seed}) failed: {e} Stopping orchestrator.")
                    sys.exit(1)
                f.flush()
                if (trial_index + 1) % max(1, trials // 10) == 0:
                    logger.info(f"Completed trial {trial_index + 1}/{trials}")
    except IOError as e:
        logger.error(f"Failed to write to trials CSV file {trials_csv_path}: {e}")
        sys.exit(1)
    logger.info(f"Trial results saved to '{trials_csv_path}'")

    try:
        summary, series_wins = summarize_trials(trials_csv_path)
    except (pd.errors.EmptyDataError, KeyError) as e:
        logger.error(f"Could not summarize {trials_csv_path}: {e}")
        sys.exit(1)

    summary_csv_path = os.path.join(run_output_dir, "summary.csv")
    summary.to_csv(summary_csv_path)
    logger.info(f"Per-team summary over {trials} trials:\n{summary.round(3).to_string()}")
    for team, wins in series_wins.items():
        logger.info(f"{team} won the season series in {wins} of {trials} trials.")
    logger.info(f"Summary saved to '{summary_csv_path}'")

    logger.info("Orchestrator finished.")


if __name__ == "__main__":
    main()
