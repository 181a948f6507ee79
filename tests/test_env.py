import gymnasium as gym
import numpy as np

import falling_blocks.env  # noqa: F401
from falling_blocks.env.falling_blocks_env import FallingBlocksEnv
from falling_blocks.game import Action, PieceKind
from falling_blocks.rl.random_agent import run_random

from conftest import FixedKinds


def test_reset_returns_observation_in_space():
    env = FallingBlocksEnv()
    obs, info = env.reset(seed=3)
    assert env.observation_space.contains(obs)
    assert obs["board"].shape == (20, 10)
    assert (obs["board"] < 0).sum() == 4
    assert 1 <= obs["next_piece"] <= 7
    assert info["score"] == 0


def test_seeded_resets_are_reproducible():
    env = FallingBlocksEnv()
    first, _ = env.reset(seed=11)
    second, _ = env.reset(seed=11)
    np.testing.assert_array_equal(first["board"], second["board"])
    assert first["next_piece"] == second["next_piece"]


def test_step_reward_is_score_delta():
    env = FallingBlocksEnv(gravity_every=0)
    env.reset(seed=0)
    env.game.factory.rng = FixedKinds(PieceKind.O)
    env.game.start()
    _, reward, terminated, truncated, info = env.step(int(Action.HARD_DROP))
    assert reward == 36.0
    assert not terminated and not truncated
    assert info["score"] == 36


def test_gravity_pulls_piece_each_step():
    env = FallingBlocksEnv()
    env.reset(seed=0)
    y = env.game.current_y
    env.step(int(Action.NONE))
    assert env.game.current_y == y + 1


def test_episode_terminates_on_game_over():
    env = FallingBlocksEnv(gravity_every=0)
    env.reset(seed=0)
    terminated = False
    for _ in range(200):
        _, _, terminated, _, _ = env.step(int(Action.HARD_DROP))
        if terminated:
            break
    assert terminated
    assert env.game.game_over


def test_truncates_after_max_steps():
    env = FallingBlocksEnv(max_episode_steps=2)
    env.reset(seed=0)
    env.step(int(Action.NONE))
    _, _, _, truncated, _ = env.step(int(Action.NONE))
    assert truncated


def test_rgb_render():
    env = FallingBlocksEnv(render_mode="rgb_array")
    env.reset(seed=1)
    img = env.render()
    assert img.shape == (240, 120, 3)
    assert img.dtype == np.uint8


def test_registered_env_and_random_agent():
    env = gym.make("FallingBlocks-10x20-v0")
    obs, _ = env.reset(seed=5)
    assert "board" in obs
    env.close()
    assert run_random(steps=50, seed=5) >= 0.0
