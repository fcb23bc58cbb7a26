"""Tests for loading method dumps."""

import copy

import pytest

from irsource.ir import load_method_dump
from irsource.types import DumpFormatError, ErrorCode, SourcePosition

DUMP = {
    "name": "foo",
    "sources": [
        {"id": 0, "lines": ["(a) {", "  return a + 1;", "}"]},
        {"id": 7, "lines": ["(b) {", "  return b;", "}"]},
    ],
    "inlined": [{"source_id": 0}, {"source_id": 7}],
    "blocks": {
        "B0": {
            "hir": [{"id": "i1", "op": "BlockEntry"}, {"id": 2, "op": "Add"}],
            "lir": [{"id": 0, "op": "label"}, {"id": "1", "op": "add-i"}],
        },
        "B1": {"hir": [{"id": "i3", "op": "BlockEntry"}], "lir": None},
    },
    "lir2hir": {"1": "2"},
    "hir2pos": {"2": {"inline_id": 0, "position": 15}, "i3": {"inline_id": 1, "position": 8}},
}


def _dump(**overrides):
    data = copy.deepcopy(DUMP)
    data.update(overrides)
    return data


class TestLoadMethodDump:
    def test_method(self):
        method, _, _ = load_method_dump(_dump())

        assert method.name == "foo"
        assert [s.id for s in method.sources] == [0, 7]
        assert method.inlined[1].source.lines == ("(b) {", "  return b;", "}")
        assert method.inlined[0].annotations == []

    def test_blocks(self):
        _, blocks, _ = load_method_dump(_dump())

        assert set(blocks) == {"B0", "B1"}
        assert [i.id for i in blocks["B0"].hir] == ["i1", "2"]
        assert [i.op for i in blocks["B0"].lir] == ["label", "add-i"]
        assert blocks["B1"].lir is None

    def test_position_tables(self):
        _, _, info = load_method_dump(_dump())

        assert info.correlate("1") == "2"
        assert info.correlate("0") is None
        assert info.position_of("2") == SourcePosition(0, 15)
        assert info.position_of("i3") == SourcePosition(1, 8)

    def test_tables_are_optional(self):
        data = _dump()
        del data["lir2hir"]
        del data["hir2pos"]
        _, _, info = load_method_dump(data)

        assert info.lir2hir == {}
        assert info.hir2pos == {}


class TestLoadMethodDumpErrors:
    @pytest.mark.parametrize("key", ["name", "sources", "inlined", "blocks"])
    def test_missing_top_level_key(self, key):
        data = _dump()
        del data[key]
        with pytest.raises(DumpFormatError) as exc_info:
            load_method_dump(data)
        assert exc_info.value.code == ErrorCode.INVALID_DUMP
        assert key in str(exc_info.value)

    def test_wrong_type(self):
        with pytest.raises(DumpFormatError, match="'sources' must be list"):
            load_method_dump(_dump(sources={"id": 0}))

    def test_non_string_lines(self):
        with pytest.raises(DumpFormatError, match="lines must be strings"):
            load_method_dump(_dump(sources=[{"id": 0, "lines": ["(a) {", 3]}]))

    def test_unknown_source(self):
        with pytest.raises(DumpFormatError, match="unknown source 3"):
            load_method_dump(_dump(inlined=[{"source_id": 3}]))

    def test_unknown_inline_id(self):
        with pytest.raises(DumpFormatError, match="unknown inline id 2"):
            load_method_dump(_dump(hir2pos={"2": {"inline_id": 2, "position": 0}}))

    def test_bad_lir(self):
        blocks = {"B0": {"hir": [], "lir": "label"}}
        with pytest.raises(DumpFormatError, match="'lir' must be a list or null"):
            load_method_dump(_dump(blocks=blocks))

    def test_instruction_without_op(self):
        blocks = {"B0": {"hir": [{"id": "i1"}]}}
        with pytest.raises(DumpFormatError, match="missing required key 'op'"):
            load_method_dump(_dump(blocks=blocks))

    def test_not_an_object(self):
        with pytest.raises(DumpFormatError):
            load_method_dump([])
