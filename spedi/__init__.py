"""Control-flow graph, procedure and call-graph structures for disassembled ARM/Thumb sections, with DWARF constants and an option parser."""

__version__ = "0.1.0"