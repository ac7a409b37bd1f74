"""
Tests for verification parameters and environment configuration.
"""

import hashlib

import pytest

from eztotp import InvalidParameters, Parameters, config
from eztotp.totp.parameters import MAX_TOLERANCE


class TestParameters:

    def test_defaults(self):
        params = Parameters()
        assert (params.digits, params.period, params.tolerance) == (6, 30, 1)
        assert params.algorithm == "sha1"
        assert params.digest is hashlib.sha1
        assert params.reuse_allowed is False

    def test_algorithm_case_insensitive(self):
        assert Parameters(algorithm="SHA256").algorithm == "sha256"

    @pytest.mark.parametrize("kwargs", [
        {"digits": 5},
        {"digits": 9},
        {"digits": "6"},
        {"period": 0},
        {"period": -30},
        {"period": 30.0},
        {"tolerance": -1},
        {"tolerance": True},
        {"tolerance": 11},
        {"tolerance": 10 ** 7},
        {"algorithm": "md5"},
        {"algorithm": None},
        {"reuse_allowed": 1},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidParameters):
            Parameters(**kwargs)

    def test_tolerance_upper_bound(self):
        assert Parameters(tolerance=MAX_TOLERANCE).tolerance == 10

    def test_immutable(self):
        params = Parameters()
        with pytest.raises(AttributeError):
            params.digits = 8

    def test_equality(self):
        assert Parameters() == Parameters(6, 30, 1, "sha1", False)
        assert Parameters() != Parameters(tolerance=2)
        assert len({Parameters(), Parameters()}) == 1


class TestConfig:

    def test_env_int(self, monkeypatch):
        monkeypatch.setenv("EZTOTP_TEST_INT", "8")
        assert config.env_int("EZTOTP_TEST_INT", 6) == 8

    def test_env_int_unset_or_blank(self, monkeypatch):
        monkeypatch.delenv("EZTOTP_TEST_INT", raising=False)
        assert config.env_int("EZTOTP_TEST_INT", 6) == 6
        monkeypatch.setenv("EZTOTP_TEST_INT", "  ")
        assert config.env_int("EZTOTP_TEST_INT", 6) == 6

    def test_env_int_unparsable_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("EZTOTP_TEST_INT", "eight")
        with caplog.at_level("WARNING", logger="eztotp"):
            assert config.env_int("EZTOTP_TEST_INT", 6) == 6
        assert "EZTOTP_TEST_INT" in caplog.text

    def test_env_flag(self, monkeypatch):
        monkeypatch.setenv("EZTOTP_TEST_FLAG", "Yes")
        assert config.env_flag("EZTOTP_TEST_FLAG")
        monkeypatch.setenv("EZTOTP_TEST_FLAG", "0")
        assert not config.env_flag("EZTOTP_TEST_FLAG")

    def test_default_parameters_follow_config(self, monkeypatch):
        monkeypatch.setattr(config, "DIGITS", 8)
        monkeypatch.setattr(config, "TOLERANCE", 2)
        params = config.default_parameters()
        assert params.digits == 8
        assert params.tolerance == 2

    def test_default_parameters_overrides(self):
        assert config.default_parameters(period=60).period == 60

    def test_out_of_range_config_raises(self, monkeypatch):
        monkeypatch.setattr(config, "DIGITS", 12)
        with pytest.raises(InvalidParameters):
            config.default_parameters()
