"""Tests for annotator configuration and hoist policies."""

import pytest

from irsource.config import AnnotatorConfig, HoistPolicy, parse_hoist_policy
from irsource.constants import ARTIFICIAL_OPS, BLOCK_ENTRY_OP
from irsource.types import NO_LOOP, CharRange, ConfigurationError, ErrorCode

OUTER = CharRange(0, 100)
INNER = CharRange(10, 40)
SIBLING = CharRange(50, 90)


class TestAnnotatorConfig:
    def test_defaults(self):
        config = AnnotatorConfig()
        assert config.hoist_policy is HoistPolicy.DISCOVERY_INDEX
        assert config.block_entry_op == BLOCK_ENTRY_OP
        assert config.artificial_ops == ARTIFICIAL_OPS

    def test_from_env_default(self, monkeypatch):
        monkeypatch.delenv("IRSOURCE_HOIST_POLICY", raising=False)
        assert AnnotatorConfig.from_env().hoist_policy is HoistPolicy.DISCOVERY_INDEX

    def test_from_env_containment(self, monkeypatch):
        monkeypatch.setenv("IRSOURCE_HOIST_POLICY", "Containment")
        assert AnnotatorConfig.from_env().hoist_policy is HoistPolicy.CONTAINMENT

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("IRSOURCE_HOIST_POLICY", "depth")
        with pytest.raises(ConfigurationError) as exc_info:
            AnnotatorConfig.from_env()
        assert exc_info.value.code == ErrorCode.INVALID_CONFIG
        assert "depth" in str(exc_info.value)

    def test_parse_hoist_policy(self):
        assert parse_hoist_policy("index") is HoistPolicy.DISCOVERY_INDEX


class TestHoistPolicy:
    """Loops in discovery order: OUTER (0), INNER (1), SIBLING (2)."""

    loops = [OUTER, INNER, SIBLING]

    @pytest.mark.parametrize("policy", list(HoistPolicy))
    def test_no_instruction_loop_is_never_hoisted(self, policy):
        assert policy.is_hoisted(self.loops, NO_LOOP, NO_LOOP) is False
        assert policy.is_hoisted(self.loops, 1, NO_LOOP) is False

    @pytest.mark.parametrize("policy", list(HoistPolicy))
    def test_loop_code_outside_any_loop_is_hoisted(self, policy):
        assert policy.is_hoisted(self.loops, NO_LOOP, 0) is True

    @pytest.mark.parametrize("policy", list(HoistPolicy))
    def test_same_loop_is_not_hoisted(self, policy):
        assert policy.is_hoisted(self.loops, 1, 1) is False

    @pytest.mark.parametrize("policy", list(HoistPolicy))
    def test_inner_into_outer_is_hoisted(self, policy):
        assert policy.is_hoisted(self.loops, 0, 1) is True

    @pytest.mark.parametrize("policy", list(HoistPolicy))
    def test_outer_code_in_inner_block_is_not_hoisted(self, policy):
        assert policy.is_hoisted(self.loops, 1, 0) is False

    def test_sibling_loops_disagree(self):
        # Block in the later sibling, instruction in the earlier inner loop.
        assert HoistPolicy.DISCOVERY_INDEX.is_hoisted(self.loops, 2, 1) is False
        assert HoistPolicy.CONTAINMENT.is_hoisted(self.loops, 2, 1) is True

    def test_other_source_under_containment(self):
        assert HoistPolicy.CONTAINMENT.is_hoisted(self.loops, 0, 0, same_source=False) is True
        assert HoistPolicy.DISCOVERY_INDEX.is_hoisted(self.loops, 0, 0, same_source=False) is False
