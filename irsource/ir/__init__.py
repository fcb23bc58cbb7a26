"""IR model consumed by the source annotator.

The decoder that produces methods, blocks and instructions lives outside
this package; only the attributes the annotator reads are modeled here.
"""

from .info import IRInfo
from .loader import load_method_dump
from .model import Block, InlinedFunction, Instruction, Method, Source
from .protocols import PositionLookup

__all__ = [
    "Block",
    "InlinedFunction",
    "Instruction",
    "IRInfo",
    "Method",
    "PositionLookup",
    "Source",
    "load_method_dump",
]
