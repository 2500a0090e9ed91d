"""
Epsilon-greedy agents for the non-stationary bandit.

Both agents share action selection and reset; they differ only in the step
size used to move Q[a] toward an observed reward:
 - SampleAverageAgent: 1/N[a]  (exact running mean)
 - ConstantStepAgent:  alpha   (exponential recency-weighted average)
"""
from abc import ABC, abstractmethod

import numpy as np

from .config import N_ARMS


class Agent(ABC):
    name = "Agent"

    def __init__(self, rng, epsilon: float, k: int = N_ARMS):
        if not 0.0 <= epsilon <= 1.0:
            raise ValueError(f"epsilon must be in [0, 1], got {epsilon}")
        self.rng = rng
        self.epsilon = epsilon
        self.k = k
        self.Q = np.zeros(k)

    def choose_action(self) -> int:
        """Explore with probability epsilon, otherwise take argmax Q (lowest index on ties)."""
        if self.rng.random() < self.epsilon:
            return int(self.rng.integers(0, self.k))
        return int(np.argmax(self.Q))

    @abstractmethod
    def update(self, action: int, reward: float):
        """Move the estimate for `action` toward `reward`."""

    def reset(self):
        self.Q.fill(0.0)


class SampleAverageAgent(Agent):
    name = "SampleAverage"

    def __init__(self, rng, epsilon: float, k: int = N_ARMS):
        super().__init__(rng, epsilon, k)
        self.N = np.zeros(k, dtype=np.int64)

    def update(self, action: int, reward: float):
        self.N[action] += 1
        self.Q[action] += (reward - self.Q[action]) / self.N[action]

    def reset(self):
        super().reset()
        self.N.fill(0)


class ConstantStepAgent(Agent):
    name = "ConstantStepSize"

    def __init__(self, rng, epsilon: float, alpha: float, k: int = N_ARMS):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        super().__init__(rng, epsilon, k)
        self.alpha = alpha

    def update(self, action: int, reward: float):
        self.Q[action] += self.alpha * (reward - self.Q[action])
