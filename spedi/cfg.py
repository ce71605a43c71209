"""Control-flow graph of the maximal blocks of a disassembled section.

A :class:`CFGNode` wraps one maximal block.  The block object is only used
through a small interface:

* ``id`` - index of the block within its section,
* ``instructions`` - iterable of instructions, each with ``addr`` and ``size``,
* ``addr_of_first_inst``, ``addr_of_last_inst`` and ``end_addr``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Iterator, List, Optional, Protocol, Sequence

__all__ = [
    "CFGEdgeType",
    "CFGEdge",
    "CFGNodeType",
    "CFGNodeRoleInProcedure",
    "NodeTraversalStatus",
    "CFGNode",
    "DisassemblyCFG",
]


class _Instruction(Protocol):
    addr: int
    size: int


class _MaximalBlock(Protocol):
    id: int
    instructions: Sequence[_Instruction]
    addr_of_first_inst: int
    addr_of_last_inst: int
    end_addr: int


class CFGEdgeType(IntEnum):
    """Kind of control transfer an edge stands for."""

    kDirect = 0
    kConditional = 1
    kReturn = 2
    kSwitchTable = 3
    kUnknown = 4


@dataclass(frozen=True)
class CFGEdge:
    """An edge pointing at ``node`` through a branch to ``target_addr``."""

    type: CFGEdgeType = CFGEdgeType.kDirect
    node: Optional["CFGNode"] = None
    target_addr: int = 0

    @property
    def valid(self) -> bool:
        """True if the edge points at a node."""
        return self.node is not None


class CFGNodeType(IntEnum):
    """Classification of a node as code or data."""

    kData = 1
    kUnknown = 2
    kCode = 4


class CFGNodeRoleInProcedure(IntEnum):
    """Role a node plays within the procedure it belongs to."""

    kUnknown = 0
    kEntry = 1
    kCall = 2
    kExit = 3
    kBody = 4


class NodeTraversalStatus(IntEnum):
    """State of a node during graph traversal."""

    kUnvisited = 0
    kVisited = 1
    kFinished = 2


@dataclass(eq=False, repr=False)
class CFGNode:
    """A node of the control-flow graph, wrapping one maximal block."""

    max_block: Optional[Any] = None
    type: CFGNodeType = CFGNodeType.kUnknown
    is_call: bool = False
    traversal_status: NodeTraversalStatus = NodeTraversalStatus.kUnvisited
    role_in_procedure: CFGNodeRoleInProcedure = CFGNodeRoleInProcedure.kUnknown
    candidate_start_addr: int = 0
    overlap_node: Optional["CFGNode"] = None
    aligned_predecessor: Optional["CFGNode"] = None
    procedure_id: int = 0
    immediate_successor: Optional["CFGNode"] = None
    remote_successor: Optional["CFGNode"] = None
    direct_preds: List[CFGEdge] = field(default_factory=list)
    indirect_preds: List[CFGEdge] = field(default_factory=list)
    indirect_succs: List[CFGEdge] = field(default_factory=list)

    def __repr__(self) -> str:
        block_id = self.max_block.id if self.max_block is not None else None
        return f"CFGNode(id={block_id}, type={self.type.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CFGNode):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def id(self) -> int:
        """Identifier of the node, equal to that of its maximal block."""
        return self.max_block.id

    @property
    def is_data(self) -> bool:
        return self.type == CFGNodeType.kData

    @property
    def is_code(self) -> bool:
        return self.type == CFGNodeType.kCode

    @property
    def has_overlap_with_other_node(self) -> bool:
        return self.overlap_node is not None

    @property
    def is_candidate_start_addr_set(self) -> bool:
        return self.candidate_start_addr != 0

    @property
    def is_procedure_entry(self) -> bool:
        return self.role_in_procedure == CFGNodeRoleInProcedure.kEntry

    @property
    def is_assigned_to_procedure(self) -> bool:
        return self.procedure_id != 0

    @property
    def is_aligned_to_predecessor(self) -> bool:
        return self.aligned_predecessor is not None

    @property
    def is_immediate_successor_set(self) -> bool:
        return self.immediate_successor is not None

    def add_remote_predecessor(self, predecessor: "CFGNode", target_addr: int) -> None:
        """Record a direct branch from ``predecessor`` into this node."""
        self.direct_preds.append(CFGEdge(CFGEdgeType.kDirect, predecessor, target_addr))

    def add_immediate_predecessor(
        self, predecessor: "CFGNode", target_addr: int
    ) -> None:
        """Record a fall-through of a conditional branch into this node."""
        self.direct_preds.append(
            CFGEdge(CFGEdgeType.kConditional, predecessor, target_addr)
        )

    def _candidate_chain(self) -> Iterator[Any]:
        current = self.candidate_start_addr
        for inst in self.max_block.instructions:
            if inst.addr == current:
                yield inst
                current += inst.size

    def candidate_instructions(
        self, predicate: Optional[Callable[[Any], bool]] = None
    ) -> list:
        """Instructions chained from the candidate start address, optionally filtered."""
        return [
            inst
            for inst in self._candidate_chain()
            if predicate is None or predicate(inst)
        ]

    def candidate_instruction_count(self) -> int:
        """Number of instructions chained from the candidate start address."""
        return sum(1 for _ in self._candidate_chain())

    def set_candidate_start_addr(self, candidate_start: int) -> None:
        """Set the candidate start to the first instruction at or after ``candidate_start``."""
        for inst in self.max_block.instructions:
            if candidate_start <= inst.addr:
                self.candidate_start_addr = inst.addr
                return

    def reset_candidate_start_addr(self) -> None:
        self.candidate_start_addr = 0

    def is_candidate_start_addr_valid(self, candidate_addr: int) -> bool:
        """True if ``candidate_addr`` does not lie past the last instruction."""
        return candidate_addr <= self.max_block.addr_of_last_inst

    def set_to_data_and_invalidate_predecessors(self) -> None:
        """Mark this node as data, along with every code node branching into it directly."""
        self.type = CFGNodeType.kData
        pending = [self]
        while pending:
            node = pending.pop()
            for edge in node.direct_preds:
                pred = edge.node
                if not pred.is_data and edge.type in (
                    CFGEdgeType.kDirect,
                    CFGEdgeType.kConditional,
                ):
                    pred.type = CFGNodeType.kData
                    pending.append(pred)

    def set_is_call(self, value: bool) -> None:
        """Set whether this node ends in a call; clearing it drops indirect successors."""
        self.is_call = value
        if not value:
            self.indirect_succs.clear()

    def set_as_return_node_from(self, cfg_node: "CFGNode") -> None:
        """Make this node the return target of the call ending ``cfg_node``."""
        self.aligned_predecessor = cfg_node
        cfg_node.indirect_succs.append(
            CFGEdge(CFGEdgeType.kReturn, self, cfg_node.max_block.end_addr)
        )
        cfg_node.is_call = True

    def set_as_switch_case_for(self, cfg_node: "CFGNode", target_addr: int) -> None:
        """Link this node as a switch-table target of ``cfg_node``."""
        self.indirect_preds.append(
            CFGEdge(CFGEdgeType.kSwitchTable, cfg_node, target_addr)
        )
        cfg_node.indirect_succs.append(
            CFGEdge(CFGEdgeType.kSwitchTable, self, target_addr)
        )

    def has_predecessors(self) -> bool:
        return bool(
            self.aligned_predecessor is not None
            or self.indirect_preds
            or self.direct_preds
        )

    def is_switch_statement(self) -> bool:
        """Meaningful only after switch tables have been recovered."""
        return len(self.indirect_succs) > 1

    def is_switch_branch_target(self) -> bool:
        return any(
            edge.type == CFGEdgeType.kSwitchTable for edge in self.indirect_preds
        )

    def min_target_addr_of_valid_predecessor(self) -> int:
        """Lowest address targeted by a valid predecessor, or 0 if there is none."""
        if self.indirect_preds:
            return min(edge.target_addr for edge in self.indirect_preds)
        targets = [
            edge.target_addr
            for edge in self.direct_preds
            if edge.node.type != CFGNodeType.kData
            and edge.type != CFGEdgeType.kConditional
            and edge.node.id != self.id
        ]
        return min(targets, default=0)

    def is_appendable_by(self, cfg_node: "CFGNode") -> bool:
        """True if ``cfg_node`` starts exactly where this node ends."""
        return self.max_block.end_addr == cfg_node.max_block.addr_of_first_inst

    def return_successor_node(self) -> Optional["CFGNode"]:
        """The return target of a call node, if it has exactly that one indirect successor."""
        if (
            len(self.indirect_succs) == 1
            and self.indirect_succs[0].type == CFGEdgeType.kReturn
        ):
            return self.indirect_succs[0].node
        return None


class DisassemblyCFG:
    """The ordered list of CFG nodes of a section, indexed by block id."""

    def __init__(self, nodes: Optional[List[CFGNode]] = None) -> None:
        self.nodes: List[CFGNode] = list(nodes) if nodes is not None else []
        self.valid = False

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[CFGNode]:
        return iter(self.nodes)

    def node_at(self, index: int) -> CFGNode:
        return self.nodes[index]

    def node_of(self, max_block: Any) -> CFGNode:
        """The node that wraps ``max_block``."""
        return self.nodes[max_block.id]

    def is_last(self, node: CFGNode) -> bool:
        return self.nodes[-1].id == node.id

    def previous(self, node: CFGNode) -> CFGNode:
        """The node before ``node``; raises IndexError for the first node."""
        if node.id == 0:
            raise IndexError("first node has no predecessor in the section")
        return self.nodes[node.id - 1]

    def next(self, node: CFGNode) -> CFGNode:
        """The node after ``node``; raises IndexError for the last node."""
        return self.nodes[node.id + 1]