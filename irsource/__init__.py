"""
irsource - Map optimizing-compiler IR back onto JavaScript source.

Given the source dumps of a compiled method (and of every function inlined
into it) plus the compiler's high-level and low-level IR, irsource:
- Rebuilds a syntax tree for each dumped function body with tree-sitter
- Finds the loop bodies of each function
- Resolves every IR position to the smallest enclosing syntax node
- Marks each source line as dead, live, or hoisted out of its loop (LICM)

The results are attached to the method as per-line flags and a source
mapping table that a viewer can render next to the IR.
"""

__version__ = "0.1.0"
