"""
Tests for the scratch code store, replay guard, constant-time comparison
and secret handling.
"""

import pytest

from eztotp import (
    InvalidParameters,
    InvalidState,
    ReplayGuard,
    ScratchCode,
    ScratchCodeStore,
    SecureString,
    constant_time_equals,
    generate_sealing_key,
    seal_secret,
    unseal_secret,
)


class TestConstantTimeEquals:

    def test_equal(self):
        assert constant_time_equals("287082", "287082")
        assert constant_time_equals(b"\x00\xff", b"\x00\xff")

    def test_unequal_same_length(self):
        assert not constant_time_equals("287082", "287083")
        assert not constant_time_equals("287082", "987082")

    def test_unequal_length(self):
        assert not constant_time_equals("287082", "2870821")
        assert not constant_time_equals("287082", "")
        assert not constant_time_equals("", "1")

    def test_empty(self):
        assert constant_time_equals("", "")


class TestScratchCodeStore:

    def test_contains_unconsumed(self):
        store = ScratchCodeStore(["11112222", "33334444"])
        assert store.contains_unconsumed("11112222")
        assert store.contains_unconsumed("33334444")
        assert not store.contains_unconsumed("55556666")

    def test_consume_is_permanent(self):
        store = ScratchCodeStore(["11112222", "33334444"])
        store.consume("11112222")
        assert not store.contains_unconsumed("11112222")
        assert store.contains_unconsumed("33334444")
        assert store.remaining() == ["33334444"]

    def test_consume_without_match_raises(self):
        store = ScratchCodeStore(["11112222"])
        store.consume("11112222")
        with pytest.raises(ValueError):
            store.consume("11112222")
        with pytest.raises(ValueError):
            store.consume("99999999")

    def test_duplicate_values_consumed_one_at_a_time(self):
        store = ScratchCodeStore(["11112222", "11112222"])
        store.consume("11112222")
        assert store.contains_unconsumed("11112222")
        store.consume("11112222")
        assert not store.contains_unconsumed("11112222")

    def test_consumed_entries_loaded_as_consumed(self):
        store = ScratchCodeStore([ScratchCode("11112222", consumed=True)])
        assert not store.contains_unconsumed("11112222")
        assert store.remaining() == []

    def test_non_string_candidate(self):
        store = ScratchCodeStore(["11112222"])
        assert not store.contains_unconsumed(11112222)

    @pytest.mark.parametrize("code", ["", "1111-2222", None, 11112222])
    def test_invalid_codes_rejected(self, code):
        with pytest.raises(InvalidParameters):
            ScratchCodeStore([code])

    def test_list_round_trip_preserves_order(self):
        store = ScratchCodeStore(["33334444", "11112222"])
        store.consume("11112222")
        entries = store.to_list()
        assert entries == [
            {"code": "33334444", "consumed": False},
            {"code": "11112222", "consumed": True},
        ]
        assert ScratchCodeStore.from_list(entries).to_list() == entries

    @pytest.mark.parametrize("entries", [
        "11112222",
        [["11112222", False]],
        [{"code": "abc", "consumed": False}],
        [{"code": "11112222", "consumed": "no"}],
        [{"consumed": False}],
    ])
    def test_from_list_rejects_bad_entries(self, entries):
        with pytest.raises(InvalidState):
            ScratchCodeStore.from_list(entries)

    def test_repr_hides_codes(self):
        store = ScratchCodeStore(["11112222"])
        assert "11112222" not in repr(store)
        assert "11112222" not in repr(ScratchCode("11112222"))


class TestReplayGuard:

    def test_fresh_when_nothing_accepted(self):
        guard = ReplayGuard()
        assert guard.last_accepted is None
        assert guard.is_fresh(0)

    def test_accepted_and_earlier_counters_stale(self):
        guard = ReplayGuard()
        guard.advance(10)
        assert not guard.is_fresh(10)
        assert not guard.is_fresh(9)
        assert not guard.is_fresh(0)
        assert guard.is_fresh(11)

    def test_advance_is_monotonic(self):
        guard = ReplayGuard()
        for counter, expected in [(5, 5), (3, 5), (9, 9), (9, 9), (7, 9), (12, 12)]:
            guard.advance(counter)
            assert guard.last_accepted == expected

    def test_advance_reports_movement(self):
        guard = ReplayGuard(4)
        assert guard.advance(5)
        assert not guard.advance(5)
        assert not guard.advance(1)

    @pytest.mark.parametrize("value", [-1, "3", 2.0, True])
    def test_invalid_initial_value(self, value):
        with pytest.raises(InvalidState):
            ReplayGuard(value)


class TestSecureString:

    def test_masked(self):
        secret = SecureString(b"12345678901234567890")
        assert "1234" not in str(secret)
        assert "1234" not in repr(secret)

    def test_value_and_clear(self):
        secret = SecureString("abc")
        assert secret.get_value() == b"abc"
        assert len(secret) == 3
        secret.clear()
        assert secret.cleared
        with pytest.raises(ValueError):
            secret.get_value()

    def test_context_manager_clears(self):
        with SecureString(b"abc") as secret:
            assert secret.get_value() == b"abc"
        assert secret.cleared

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            SecureString(12345)


class TestSealing:

    def test_round_trip(self):
        key = generate_sealing_key()
        token = seal_secret(b"12345678901234567890", key)
        assert isinstance(token, str)
        assert "12345678901234567890" not in token
        assert unseal_secret(token, key) == b"12345678901234567890"

    def test_accepts_secure_string(self):
        key = generate_sealing_key()
        token = seal_secret(SecureString(b"secret-bytes"), key)
        assert unseal_secret(token, key) == b"secret-bytes"

    def test_nonce_is_random(self):
        key = generate_sealing_key()
        assert seal_secret(b"secret", key) != seal_secret(b"secret", key)

    def test_wrong_key(self):
        token = seal_secret(b"secret", generate_sealing_key())
        with pytest.raises(InvalidState):
            unseal_secret(token, generate_sealing_key())

    def test_tampered_token(self):
        key = generate_sealing_key()
        token = seal_secret(b"secret", key)
        flipped = token[:-4] + ("AAAA" if token[-4:] != "AAAA" else "BBBB")
        with pytest.raises(InvalidState):
            unseal_secret(flipped, key)

    @pytest.mark.parametrize("token", ["", "not base64 !!", "QUJD", None])
    def test_garbage_token(self, token):
        with pytest.raises(InvalidState):
            unseal_secret(token, generate_sealing_key())

    @pytest.mark.parametrize("key", [b"", b"short", b"x" * 16, "k" * 32])
    def test_bad_key(self, key):
        with pytest.raises(InvalidParameters):
            seal_secret(b"secret", key)
