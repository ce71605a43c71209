"""Procedures of the interprocedural control-flow graph."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Tuple

from spedi.cfg import CFGNode, CFGNodeRoleInProcedure

__all__ = ["ICFGExitNodeType", "ICFGProcedureType", "ICFGNode"]


class ICFGExitNodeType(IntEnum):
    """How control leaves a procedure at one of its exit nodes."""

    kTailCall = 0
    kOverlap = 1
    kInvalidLR = 2
    kTailCallOrOverlap = 3
    kReturn = 4
    kIndirect = 5


class ICFGProcedureType(IntEnum):
    """How a procedure was discovered."""

    kTail = 0
    kDirectlyCalled = 1
    kExternal = 2
    kIndirectlyCalled = 3
    kInvalid = 4


class ICFGNode:
    """A procedure starting at ``entry_addr`` with ``entry_node`` as its entry.

    Without an entry node the procedure is external to the section.
    Procedures compare and order by entry address.
    """

    def __init__(
        self,
        entry_addr: int,
        entry_node: Optional[CFGNode],
        proc_type: ICFGProcedureType,
    ) -> None:
        self.proc_type = proc_type
        self.built = False
        self.non_return = False
        self.returns_to_caller = False
        self.entry_node = entry_node
        self.end_node: Optional[CFGNode] = None
        self.entry_addr = entry_addr
        self.end_addr = 0
        self.estimated_end_addr = 0
        self.lr_store_idx = 0
        self.has_overlap = False
        self.callers: List[CFGNode] = []
        self.callees: List[CFGNode] = []
        self.cfg_nodes: List[CFGNode] = []
        self.exit_nodes: List[Tuple[ICFGExitNodeType, CFGNode]] = []
        if entry_node is None:
            self.proc_type = ICFGProcedureType.kExternal
        else:
            entry_node.role_in_procedure = CFGNodeRoleInProcedure.kEntry
            entry_node.procedure_id = entry_addr
            entry_node.candidate_start_addr = entry_addr
            self.end_node = entry_node
            self.end_addr = entry_node.max_block.end_addr
        self.name = f"proc_{entry_addr:x}"

    @classmethod
    def from_entry_node(
        cls, entry_node: CFGNode, proc_type: ICFGProcedureType
    ) -> "ICFGNode":
        """A procedure whose entry address is the node's candidate start address."""
        return cls(entry_node.candidate_start_addr, entry_node, proc_type)

    @property
    def id(self) -> int:
        return self.entry_addr

    @property
    def is_built(self) -> bool:
        return self.built

    @property
    def is_valid(self) -> bool:
        """True if the procedure has an entry node within the section."""
        return self.entry_node is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ICFGNode):
            return NotImplemented
        return self.entry_addr == other.entry_addr

    def __lt__(self, other: "ICFGNode") -> bool:
        if not isinstance(other, ICFGNode):
            return NotImplemented
        return self.entry_addr < other.entry_addr

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ICFGNode({self.name}, type={self.proc_type.name})"

    def is_within_estimated_address_space(self, addr: int) -> bool:
        """True if ``addr`` lies in ``[entry_addr, estimated_end_addr)``."""
        return self.entry_addr <= addr < self.estimated_end_addr

    def add_caller(self, caller: CFGNode) -> None:
        self.callers.append(caller)

    def finalize(self) -> None:
        """Mark the procedure as completely built."""
        self.built = True