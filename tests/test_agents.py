import numpy as np
import pytest

from nsbandit.agents import Agent, ConstantStepAgent, SampleAverageAgent


def test_agent_is_abstract():
    with pytest.raises(TypeError):
        Agent(np.random.default_rng(0), epsilon=0.1)


def test_sample_average_first_update_equals_reward():
    agent = SampleAverageAgent(np.random.default_rng(0), epsilon=0.1)
    agent.update(4, 2.75)
    assert agent.Q[4] == 2.75
    assert agent.N[4] == 1


def test_sample_average_converges_to_constant_reward():
    agent = SampleAverageAgent(np.random.default_rng(0), epsilon=0.1)
    for _ in range(1000):
        agent.update(2, 3.0)
    assert agent.Q[2] == pytest.approx(3.0)
    assert agent.N[2] == 1000


def test_sample_average_is_running_mean():
    agent = SampleAverageAgent(np.random.default_rng(0), epsilon=0.1)
    rewards = [1.0, 4.0, -2.0, 0.5]
    for r in rewards:
        agent.update(0, r)
    assert agent.Q[0] == pytest.approx(np.mean(rewards))


@pytest.mark.parametrize("alpha", [0.1, 0.25, 0.5, 1.0])
def test_constant_step_first_update_is_alpha_times_reward(alpha):
    agent = ConstantStepAgent(np.random.default_rng(0), epsilon=0.1, alpha=alpha)
    agent.update(7, 2.0)
    assert agent.Q[7] == alpha * 2.0


def test_constant_step_weights_recent_rewards():
    agent = ConstantStepAgent(np.random.default_rng(0), epsilon=0.1, alpha=0.5)
    agent.update(0, 0.0)
    agent.update(0, 4.0)
    assert agent.Q[0] == 2.0


def test_greedy_choice_is_argmax_lowest_index():
    agent = SampleAverageAgent(np.random.default_rng(0), epsilon=0.0)
    assert agent.choose_action() == 0
    agent.Q[[3, 6]] = 1.5
    assert all(agent.choose_action() == 3 for _ in range(100))


def test_full_exploration_is_roughly_uniform():
    agent = ConstantStepAgent(np.random.default_rng(42), epsilon=1.0, alpha=0.1)
    agent.Q[5] = 10.0
    counts = np.bincount([agent.choose_action() for _ in range(20000)], minlength=10)
    assert counts.sum() == 20000
    assert np.all(np.abs(counts - 2000) < 250)


def test_choose_action_draw_order():
    # one uniform draw, then one integer draw only when exploring
    agent = SampleAverageAgent(np.random.default_rng(11), epsilon=0.5)
    ref = np.random.default_rng(11)
    for _ in range(200):
        expected = int(ref.integers(0, 10)) if ref.random() < 0.5 else 0
        assert agent.choose_action() == expected


@pytest.mark.parametrize("agent", [
    SampleAverageAgent(np.random.default_rng(0), epsilon=0.1),
    ConstantStepAgent(np.random.default_rng(0), epsilon=0.1, alpha=0.1),
])
def test_reset_twice_same_as_once(agent):
    agent.update(1, 5.0)
    agent.update(8, -1.0)
    agent.reset()
    once = agent.Q.copy()
    agent.reset()
    assert np.array_equal(agent.Q, once)
    assert np.all(agent.Q == 0.0)
    if isinstance(agent, SampleAverageAgent):
        assert np.all(agent.N == 0)


@pytest.mark.parametrize("epsilon", [-0.1, 1.5])
def test_invalid_epsilon_rejected(epsilon):
    with pytest.raises(ValueError):
        SampleAverageAgent(np.random.default_rng(0), epsilon=epsilon)


@pytest.mark.parametrize("alpha", [0.0, -0.5, 1.1])
def test_invalid_alpha_rejected(alpha):
    with pytest.raises(ValueError):
        ConstantStepAgent(np.random.default_rng(0), epsilon=0.1, alpha=alpha)
