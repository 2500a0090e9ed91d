"""
experiment.py

10-armed non-stationary bandit: sample-average vs. constant step size.
 - every run starts from zero true means and zero estimates
 - each step the true means take a N(0, 0.01) random walk, then every agent
   picks an action, is rewarded and updates against the same bandit
 - per-step reward and optimal-action hits are averaged over all runs

Saves:
 - rewards.csv : Step, SampleAverage, ConstantStepSize  (mean reward)
 - optimal.csv : Step, SampleAverage, ConstantStepSize  (% optimal action)

Usage:
    python -m nsbandit
"""
import os
import sys
import time

import numpy as np
import pandas as pd

from .agents import ConstantStepAgent, SampleAverageAgent
from .bandit import NonstationaryBandit
from .config import (ALPHA, EPSILON, LOG_EVERY, OPTIMAL_FILE, REWARD_FILE,
                     RUNS, SEED, STEPS)


# --------------------------
# Experiment loop
# --------------------------
def run_experiment(bandit, agents, runs=RUNS, steps=STEPS, log_every=None):
    """Average per-step reward and % optimal action over `runs` independent runs.

    Returns (avg_rewards, optimal_pct), both of shape (steps, len(agents)),
    columns in the order of `agents`.
    """
    if runs < 1 or steps < 1:
        raise ValueError(f"runs and steps must be positive, got runs={runs}, steps={steps}")
    if not agents:
        raise ValueError("at least one agent is required")

    rewards = np.zeros((steps, len(agents)))
    hits = np.zeros((steps, len(agents)))
    start = time.time()

    for run in range(runs):
        bandit.reset()
        for agent in agents:
            agent.reset()

        for t in range(steps):
            bandit.advance()
            best = bandit.best_action()
            for j, agent in enumerate(agents):
                a = agent.choose_action()
                r = bandit.sample_reward(a)
                agent.update(a, r)
                rewards[t, j] += r
                if a == best:
                    hits[t, j] += 1

        if log_every and (run + 1) % log_every == 0:
            print(f"[bandit] run {run + 1}/{runs} | elapsed {time.time() - start:.1f}s",
                  file=sys.stderr)

    avg_rewards = rewards / runs
    optimal_pct = hits / runs * 100.0
    return avg_rewards, optimal_pct


# --------------------------
# Result tables
# --------------------------
def to_table(values, agents):
    """One DataFrame per table: index Step (0..T-1), one column per agent."""
    df = pd.DataFrame(values, columns=[agent.name for agent in agents])
    df.index.name = "Step"
    return df


def write_table(df, path):
    """Write `Step, A, B` header then `<step>,<a>,<b>` rows (%g floats)."""
    with open(path, "w", newline="") as f:
        f.write(", ".join([df.index.name] + list(df.columns)) + "\n")
        df.to_csv(f, header=False, float_format="%g", lineterminator="\n")


def write_tables(avg_rewards, optimal_pct, agents, out_dir=".",
                 reward_file=REWARD_FILE, optimal_file=OPTIMAL_FILE):
    os.makedirs(out_dir, exist_ok=True)
    reward_path = os.path.join(out_dir, reward_file)
    optimal_path = os.path.join(out_dir, optimal_file)
    write_table(to_table(avg_rewards, agents), reward_path)
    write_table(to_table(optimal_pct, agents), optimal_path)
    return reward_path, optimal_path


# --------------------------
# Entry point
# --------------------------
def main():
    rng = np.random.default_rng(SEED)
    bandit = NonstationaryBandit(rng)
    agents = [
        SampleAverageAgent(rng, epsilon=EPSILON),
        ConstantStepAgent(rng, epsilon=EPSILON, alpha=ALPHA),
    ]

    avg_rewards, optimal_pct = run_experiment(bandit, agents, runs=RUNS, steps=STEPS,
                                              log_every=LOG_EVERY)
    write_tables(avg_rewards, optimal_pct, agents)
    print("1")
    return 0


if __name__ == "__main__":
    sys.exit(main())
