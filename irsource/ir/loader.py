"""Build a Method, its blocks and position tables from a JSON dump.

Dump shape::

    {
        "name": "foo",
        "sources": [{"id": 0, "lines": ["(a) {", "  return a;", "}"]}],
        "inlined": [{"source_id": 0}],
        "blocks": {
            "B0": {
                "hir": [{"id": "i1", "op": "BlockEntry"}],
                "lir": [{"id": "0", "op": "label"}]
            }
        },
        "lir2hir": {"0": "i1"},
        "hir2pos": {"i1": {"inline_id": 0, "position": 6}}
    }
"""

from __future__ import annotations

from typing import Any

from irsource.ir.info import IRInfo
from irsource.ir.model import Block, InlinedFunction, Instruction, Method, Source
from irsource.types.core import SourcePosition
from irsource.types.errors import DumpFormatError, ErrorContext


def _require(data: dict[str, Any], key: str, kind: type | tuple[type, ...], where: str) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise DumpFormatError(
            f"{where}: missing required key '{key}'",
            context=ErrorContext(operation="load_method_dump", component=where),
        )
    value = data[key]
    if not isinstance(value, kind):
        expected = " or ".join(k.__name__ for k in kind) if isinstance(kind, tuple) else kind.__name__
        raise DumpFormatError(
            f"{where}: '{key}' must be {expected}, got {type(value).__name__}",
            context=ErrorContext(operation="load_method_dump", component=where),
        )
    return value


def _load_instructions(raw: list[Any], where: str) -> list[Instruction]:
    return [
        Instruction(
            id=str(_require(item, "id", (str, int), where)),
            op=_require(item, "op", str, where),
        )
        for item in raw
    ]


def load_method_dump(data: dict[str, Any]) -> tuple[Method, dict[str, Block], IRInfo]:
    """Load a method dump.

    Args:
        data: Parsed JSON document (see module docstring).

    Returns:
        Tuple of (method, blocks by name, position tables).

    Raises:
        DumpFormatError: If the dump is missing keys, has wrong types, or
            references an unknown source or inline id.
    """
    name = _require(data, "name", str, "method")

    sources: dict[int, Source] = {}
    for raw in _require(data, "sources", list, "method"):
        source_id = _require(raw, "id", int, "source")
        lines = _require(raw, "lines", list, "source")
        if not all(isinstance(line, str) for line in lines):
            raise DumpFormatError(f"source {source_id}: lines must be strings")
        sources[source_id] = Source(id=source_id, lines=tuple(lines))

    inlined: list[InlinedFunction] = []
    for raw in _require(data, "inlined", list, "method"):
        source_id = _require(raw, "source_id", int, "inlined")
        if source_id not in sources:
            raise DumpFormatError(f"inlined function refers to unknown source {source_id}")
        inlined.append(InlinedFunction(source=sources[source_id]))

    method = Method(name=name, sources=list(sources.values()), inlined=inlined)

    blocks: dict[str, Block] = {}
    for block_name, raw in _require(data, "blocks", dict, "method").items():
        where = f"block {block_name}"
        hir = _load_instructions(_require(raw, "hir", list, where), where)
        raw_lir = raw.get("lir")
        if raw_lir is not None and not isinstance(raw_lir, list):
            raise DumpFormatError(f"{where}: 'lir' must be a list or null")
        lir = _load_instructions(raw_lir, where) if raw_lir is not None else None
        blocks[block_name] = Block(name=block_name, hir=hir, lir=lir)

    lir2hir = {
        str(lir_id): str(hir_id)
        for lir_id, hir_id in data.get("lir2hir", {}).items()
    }

    hir2pos: dict[str, SourcePosition] = {}
    for hir_id, raw in data.get("hir2pos", {}).items():
        where = f"position of {hir_id}"
        inline_id = _require(raw, "inline_id", int, where)
        if not 0 <= inline_id < len(inlined):
            raise DumpFormatError(f"{where}: unknown inline id {inline_id}")
        hir2pos[str(hir_id)] = SourcePosition(
            inline_id=inline_id,
            position=_require(raw, "position", int, where),
        )

    return method, blocks, IRInfo(lir2hir=lir2hir, hir2pos=hir2pos)
