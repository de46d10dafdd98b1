import pandas as pd
import pytest

import main
import orchestrator
from obpslg.simulator import Simulator


def test_format_report(season_config):
    sim = Simulator(config=season_config)
    sim.run_season(seed=12)
    report = main.format_report(sim)
    assert report.startswith("Records:")
    assert "Team High OBP: " in report
    assert "OPS), " in report
    assert "12 games" in report


def test_run_trial_rows(season_config):
    sim = Simulator(config=season_config)
    rows = orchestrator.run_trial(sim, 0, 21, 6)
    assert [row[2] for row in rows] == ["High OBP", "High SLG"]
    assert rows[0][3] + rows[1][3] == 6
    assert all(len(row) == len(orchestrator.TRIAL_COLUMNS) for row in rows)


def test_summarize_trials(tmp_path):
    path = tmp_path / "trials.csv"
    pd.DataFrame([
        [0, 1, "A", 90, 72, 0.556, 700, 0.270, 0.340, 0.420, 0.760],
        [0, 1, "B", 72, 90, 0.444, 650, 0.250, 0.300, 0.450, 0.750],
        [1, 2, "A", 81, 81, 0.5, 680, 0.265, 0.335, 0.415, 0.750],
        [1, 2, "B", 81, 81, 0.5, 690, 0.255, 0.305, 0.455, 0.760],
        [2, 3, "A", 70, 92, 0.432, 640, 0.260, 0.330, 0.410, 0.740],
        [2, 3, "B", 92, 70, 0.568, 720, 0.258, 0.310, 0.460, 0.770],
    ], columns=orchestrator.TRIAL_COLUMNS).to_csv(path, index=False)

    summary, series_wins = orchestrator.summarize_trials(path)
    assert summary.loc["A", ("Wins", "mean")] == pytest.approx(241 / 3)
    assert summary.loc["B", ("Runs", "max")] == 720
    # Trial 1 was an even split
    assert series_wins["A"] == 1
    assert series_wins["B"] == 1
