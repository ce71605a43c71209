"""Call graph of the procedures recovered from one section.

Procedures are :class:`~spedi.icfg.ICFGNode` objects.  Exit nodes are CFG
nodes whose maximal block exposes ``branch_info.is_call``.
"""

from __future__ import annotations

import sys
from typing import Dict, List, Optional

from spedi.cfg import CFGEdgeType, CFGNode
from spedi.icfg import ICFGExitNodeType, ICFGNode, ICFGProcedureType

__all__ = ["DisassemblyCallGraph"]

_EXIT_LABELS = {
    ICFGExitNodeType.kInvalidLR: "Exit_invalid",
    ICFGExitNodeType.kTailCall: "Exit_tail_call",
    ICFGExitNodeType.kOverlap: "Exit_overlap",
    ICFGExitNodeType.kTailCallOrOverlap: "Exit_overlap or tail call",
    ICFGExitNodeType.kReturn: "Exit_return",
    ICFGExitNodeType.kIndirect: "Exit_indirect",
}


class DisassemblyCallGraph:
    """Collects procedures of a section and orders them into a call graph."""

    def __init__(self, sec_start_addr: int = 0, sec_end_addr: int = 0) -> None:
        self.section_start_addr = sec_start_addr
        self.section_end_addr = sec_end_addr
        self.call_graph_ordered = False
        self.main_procs: List[ICFGNode] = []
        self.external_procs: List[ICFGNode] = []
        self.unmerged_procs: List[ICFGNode] = []
        self.call_graph_map: Dict[int, Optional[ICFGNode]] = {}

    def insert_procedure(
        self,
        entry_addr: int,
        entry_node: Optional[CFGNode],
        proc_type: ICFGProcedureType,
    ) -> Optional[ICFGNode]:
        """Create and register a procedure; return None if ``entry_addr`` is taken."""
        if entry_addr in self.call_graph_map:
            return None
        self.call_graph_map[entry_addr] = None
        proc = ICFGNode(entry_addr, entry_node, proc_type)
        if proc_type == ICFGProcedureType.kExternal:
            self.external_procs.append(proc)
        else:
            self.unmerged_procs.append(proc)
        return proc

    def add_procedure(
        self,
        entry_addr: int,
        entry_node: Optional[CFGNode],
        proc_type: ICFGProcedureType,
    ) -> None:
        """Register a procedure unless one already exists at ``entry_addr``."""
        self.insert_procedure(entry_addr, entry_node, proc_type)

    def create_procedure(self, entry_addr: int, entry_node: CFGNode) -> ICFGNode:
        """A directly called procedure that is not registered in the graph."""
        return ICFGNode(entry_addr, entry_node, ICFGProcedureType.kDirectlyCalled)

    def build_initial_call_graph(self) -> List[ICFGNode]:
        """Order the registered procedures and estimate their address ranges."""
        if self.main_procs:
            raise RuntimeError("initial call graph is not empty")
        self.main_procs, self.unmerged_procs = self.unmerged_procs, []
        self.main_procs.sort()
        for proc in self.external_procs:
            self.call_graph_map[proc.entry_addr] = proc
        for proc, following in zip(self.main_procs, self.main_procs[1:]):
            proc.estimated_end_addr = following.entry_addr
            self.call_graph_map.setdefault(proc.id, proc)
        if self.main_procs:
            self.main_procs[-1].estimated_end_addr = self.section_end_addr
        self.call_graph_ordered = True
        return self.main_procs

    def build_call_graph(self) -> None:
        """Merge pending procedures, classify ambiguous exits and print each procedure."""
        self.main_procs.extend(self.unmerged_procs)
        self.unmerged_procs = []
        self.main_procs.sort()
        for proc in self.main_procs:
            resolved = []
            for exit_type, node in proc.exit_nodes:
                if exit_type == ICFGExitNodeType.kTailCallOrOverlap:
                    if node.remote_successor.is_procedure_entry:
                        exit_type = ICFGExitNodeType.kTailCall
                    else:
                        exit_type = ICFGExitNodeType.kOverlap
                resolved.append((exit_type, node))
            proc.exit_nodes = resolved
            sys.stdout.write(self.format_procedure(proc))
        self.call_graph_ordered = True

    def format_procedure(self, proc_node: ICFGNode) -> str:
        """Human-readable listing of a procedure and its exit nodes."""
        lines = [
            "\n",
            f"Function 0x{proc_node.entry_addr:x} 0x{proc_node.end_addr:x}\n",
        ]
        for exit_type, node in proc_node.exit_nodes:
            text = (
                f"{_EXIT_LABELS[exit_type]} node {node.id} "
                f"at: 0x{node.candidate_start_addr:x} /"
            )
            if (
                exit_type == ICFGExitNodeType.kTailCall
                and node.remote_successor is not None
                and not node.max_block.branch_info.is_call
            ):
                text += "(internal)"
            lines.append(text + "\n")
        lines.append("Procedure end ...\n")
        return "".join(lines)

    def is_non_return_procedure(self, proc: ICFGNode) -> bool:
        """Structural non-return check; it never concludes that a procedure is non-returning."""
        if len(proc.exit_nodes) != 1 or proc.end_node.remote_successor is not None:
            return False
        # A single exit without a remote successor is not conclusive on its own.
        return False

    def check_non_return_procedure_and_fix_callers(self, proc: ICFGNode) -> None:
        """Mark ``proc`` non-returning if it only tail-calls via calls, and fix its callers."""
        if proc.returns_to_caller:
            return
        for exit_type, node in proc.exit_nodes:
            if exit_type != ICFGExitNodeType.kTailCall:
                return
            if not node.max_block.branch_info.is_call:
                return
        proc.non_return = True
        for edge in proc.entry_node.direct_preds:
            if edge.type == CFGEdgeType.kDirect and edge.node.is_call:
                edge.node.set_is_call(False)