"""
Tests for return samplers and path seeding.
"""
import pytest
import numpy as np

from networth_suite.core.projection import ConstantReturnSampler, GaussianReturnSampler, spawn_path_seeds


@pytest.mark.unit
class TestGaussianReturnSampler:
    """Tests for the Box-Muller sampler."""

    def test_same_seed_same_draws(self):
        seq = np.random.SeedSequence(42)
        a = GaussianReturnSampler.from_seed(seq)
        b = GaussianReturnSampler.from_seed(np.random.SeedSequence(42))
        assert [a.draw(0.07, 0.15) for _ in range(10)] == [b.draw(0.07, 0.15) for _ in range(10)]

    def test_zero_stdev_returns_mean(self):
        sampler = GaussianReturnSampler(np.random.default_rng(1))
        assert all(sampler.draw(0.05, 0.0) == 0.05 for _ in range(20))

    def test_draws_are_finite(self):
        sampler = GaussianReturnSampler(np.random.default_rng(3))
        draws = np.array([sampler.draw(0.0, 1.0) for _ in range(5000)])
        assert np.isfinite(draws).all()


@pytest.mark.slow
class TestGaussianMoments:
    """Large-sample moment checks."""

    def test_mean_and_stdev(self):
        sampler = GaussianReturnSampler(np.random.default_rng(2024))
        draws = np.array([sampler.draw(0.07, 0.15) for _ in range(100_000)])
        assert draws.mean() == pytest.approx(0.07, abs=0.003)
        assert draws.std() == pytest.approx(0.15, rel=0.02)


@pytest.mark.unit
class TestSeeding:
    """Tests for per-path seeds."""

    def test_one_seed_per_path(self):
        assert len(spawn_path_seeds(1, 25)) == 25

    def test_children_are_stable(self):
        first = [s.generate_state(1)[0] for s in spawn_path_seeds(7, 5)]
        again = [s.generate_state(1)[0] for s in spawn_path_seeds(7, 5)]
        assert first == again
        assert len(set(first)) == 5

    def test_prefix_is_independent_of_count(self):
        short = [s.generate_state(1)[0] for s in spawn_path_seeds(7, 3)]
        long = [s.generate_state(1)[0] for s in spawn_path_seeds(7, 10)]
        assert long[:3] == short

    def test_constant_sampler(self):
        assert ConstantReturnSampler(0.02).draw(0.5, 0.9) == 0.02
