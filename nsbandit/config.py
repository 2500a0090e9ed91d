# ----------------------------
# Configuration (tweak here)
# ----------------------------

# Bandit
N_ARMS = 10
WALK_STD = 0.01     # std-dev of the per-step random walk on each true mean
REWARD_STD = 1.0    # std-dev of reward noise around the true mean

# Agents
EPSILON = 0.1
ALPHA = 0.1         # constant step size

# Experiment
RUNS = 2000
STEPS = 10000
SEED = 0

# Output
REWARD_FILE = "rewards.csv"
OPTIMAL_FILE = "optimal.csv"
LOG_EVERY = 200     # progress line every N runs
