import numpy as np

from .config import N_ARMS, WALK_STD, REWARD_STD


class NonstationaryBandit:
    """10-armed testbed whose true action values drift by a Gaussian random walk.

    All means start at 0. advance() must be called once per step, before any
    reward for that step is sampled.
    """

    def __init__(self, rng, k=N_ARMS, walk_std=WALK_STD, reward_std=REWARD_STD):
        self.rng = rng
        self.k = k
        self.walk_std = walk_std
        self.reward_std = reward_std
        self.q_true = np.zeros(k)

    def advance(self):
        self.q_true += self.rng.normal(0.0, self.walk_std, size=self.k)

    def sample_reward(self, action: int) -> float:
        if not 0 <= action < self.k:
            raise IndexError(f"action {action} out of range for {self.k} arms")
        return float(self.q_true[action] + self.rng.normal(0.0, self.reward_std))

    def best_action(self) -> int:
        # np.argmax returns the first occurrence on ties
        return int(np.argmax(self.q_true))

    def reset(self):
        self.q_true.fill(0.0)
