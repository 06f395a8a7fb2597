"""Tests for the Nelder-Mead coefficient configuration."""

from __future__ import annotations

import pytest

from nelmead import ConfigurationError, NelderMeadConfig, NelderMeadOptimizer


def test_defaults() -> None:
    cfg = NelderMeadConfig()
    assert (cfg.alpha, cfg.gamma, cfg.rho, cfg.sigma) == (1.0, 2.0, 0.5, 0.5)
    assert cfg.conv_threshold == 1e-14
    assert cfg.conv_limit == 12


def test_replace_overrides_single_field() -> None:
    cfg = NelderMeadConfig().replace(gamma=3.0)
    assert cfg.gamma == 3.0
    assert cfg.alpha == 1.0


def test_config_is_frozen() -> None:
    cfg = NelderMeadConfig()
    with pytest.raises(AttributeError):
        cfg.alpha = 2.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"alpha": 0.0},
        {"gamma": -1.0},
        {"rho": float("nan")},
        {"sigma": float("inf")},
        {"alpha": "1.0"},
        {"conv_threshold": -1e-3},
        {"conv_threshold": float("inf")},
        {"conv_limit": 0},
        {"conv_limit": 2.5},
    ],
)
def test_invalid_values_rejected(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        NelderMeadConfig(**kwargs)


def test_unknown_field_rejected() -> None:
    with pytest.raises(ConfigurationError):
        NelderMeadConfig().replace(beta=1.0)


def test_optimizer_keyword_overrides() -> None:
    nmo = NelderMeadOptimizer(lambda x: 0.0, 2, conv_limit=5, sigma=0.25)
    assert nmo.config.conv_limit == 5
    assert nmo.config.sigma == 0.25
    assert nmo.config.rho == 0.5


def test_optimizer_configure_before_run() -> None:
    nmo = NelderMeadOptimizer(lambda x: 0.0, 2, config=NelderMeadConfig(alpha=1.5))
    nmo.configure(conv_threshold=1e-8)
    assert nmo.config.alpha == 1.5
    assert nmo.config.conv_threshold == 1e-8
    nmo.optimize(20, [0.0, 0.0], 1.0)
    assert nmo.tracker.threshold == 1e-8
