"""
Plot the two result tables written by the experiment.

Usage:
    python -m nsbandit.plotting [rewards.csv optimal.csv out.png]
"""
import sys

import matplotlib.pyplot as plt
import pandas as pd

from .config import OPTIMAL_FILE, REWARD_FILE

FIGURE_FILE = "nonstationary_bandit.png"


def load_table(path):
    """Read a written table back; strips the spaces after the header commas."""
    return pd.read_csv(path, skipinitialspace=True, index_col="Step")


def plot_tables(rewards, optimal):
    fig, (ax_r, ax_o) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    for col in rewards.columns:
        ax_r.plot(rewards.index, rewards[col], label=col, linewidth=0.8)
    ax_r.set_ylabel("Average reward")
    ax_r.legend()

    for col in optimal.columns:
        ax_o.plot(optimal.index, optimal[col], label=col, linewidth=0.8)
    ax_o.set_ylabel("% Optimal action")
    ax_o.set_ylim(0, 100)
    ax_o.set_xlabel("Steps")
    ax_o.legend()

    fig.suptitle("Non-stationary 10-armed bandit (eps-greedy)")
    fig.tight_layout()
    return fig


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    paths = [REWARD_FILE, OPTIMAL_FILE, FIGURE_FILE]
    paths[:len(argv)] = argv[:3]
    reward_path, optimal_path, out = paths

    fig = plot_tables(load_table(reward_path), load_table(optimal_path))
    fig.savefig(out, dpi=300)
    plt.close(fig)
    print(f"Saved: {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
