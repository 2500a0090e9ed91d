from .bandit import NonstationaryBandit
from .agents import Agent, SampleAverageAgent, ConstantStepAgent
from .experiment import run_experiment, to_table, write_tables
