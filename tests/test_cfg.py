from dataclasses import dataclass, field

import pytest

from spedi.cfg import (
    CFGEdge,
    CFGEdgeType,
    CFGNode,
    CFGNodeRoleInProcedure,
    CFGNodeType,
    DisassemblyCFG,
)


@dataclass
class Inst:
    addr: int
    size: int


@dataclass
class Block:
    id: int
    instructions: list = field(default_factory=list)

    @property
    def addr_of_first_inst(self):
        return self.instructions[0].addr

    @property
    def addr_of_last_inst(self):
        return self.instructions[-1].addr

    @property
    def end_addr(self):
        last = self.instructions[-1]
        return last.addr + last.size


def make_node(block_id, start=0x1000, sizes=(2, 2)):
    insts = []
    addr = start
    for size in sizes:
        insts.append(Inst(addr, size))
        addr += size
    return CFGNode(Block(block_id, insts))


def test_edge_default_is_invalid():
    assert CFGEdge().valid is False
    node = make_node(0)
    edge = CFGEdge(CFGEdgeType.kDirect, node, 0x1000)
    assert edge.valid is True
    assert edge.node is node


def test_new_node_defaults():
    node = make_node(3)
    assert node.id == 3
    assert node.type == CFGNodeType.kUnknown
    assert node.role_in_procedure == CFGNodeRoleInProcedure.kUnknown
    assert not node.is_candidate_start_addr_set
    assert not node.has_predecessors()


def test_candidate_instructions_follow_chain():
    insts = [Inst(0x100, 2), Inst(0x102, 4), Inst(0x104, 2), Inst(0x106, 2)]
    node = CFGNode(Block(0, insts))
    node.set_candidate_start_addr(0x100)
    addrs = [inst.addr for inst in node.candidate_instructions()]
    assert addrs == [0x100, 0x102, 0x106]
    assert node.candidate_instruction_count() == len(addrs)
    wide = node.candidate_instructions(lambda inst: inst.size == 4)
    assert [inst.addr for inst in wide] == [0x102]


def test_set_candidate_start_snaps_forward():
    node = make_node(0, start=0x200, sizes=(4, 4, 4))
    node.set_candidate_start_addr(0x201)
    assert node.candidate_start_addr == 0x204
    node.set_candidate_start_addr(0x300)
    assert node.candidate_start_addr == 0x204
    node.reset_candidate_start_addr()
    assert node.candidate_start_addr == 0


def test_candidate_start_validity():
    node = make_node(0, start=0x200, sizes=(4, 4))
    assert node.is_candidate_start_addr_valid(0x204)
    assert not node.is_candidate_start_addr_valid(0x205)


def test_invalidation_propagates_through_direct_and_conditional():
    a, b, c = make_node(0), make_node(1), make_node(2)
    b.add_remote_predecessor(a, 0x1000)
    c.add_immediate_predecessor(b, 0x1000)
    c.set_to_data_and_invalidate_predecessors()
    assert all(node.is_data for node in (a, b, c))


def test_invalidation_ignores_switch_edges():
    switch, case = make_node(0), make_node(1)
    case.set_as_switch_case_for(switch, 0x1000)
    case.set_to_data_and_invalidate_predecessors()
    assert case.is_data
    assert not switch.is_data


def test_invalidation_handles_cycles():
    a, b = make_node(0), make_node(1)
    a.add_remote_predecessor(b, 0x1000)
    b.add_remote_predecessor(a, 0x1000)
    a.set_to_data_and_invalidate_predecessors()
    assert a.is_data and b.is_data


def test_set_is_call_false_clears_indirect_successors():
    call, ret = make_node(0), make_node(1)
    ret.set_as_return_node_from(call)
    assert call.is_call
    call.set_is_call(False)
    assert call.indirect_succs == []
    assert call.return_successor_node() is None


def test_return_node_relation():
    call = make_node(0, start=0x1000, sizes=(4,))
    ret = make_node(1, start=0x1004, sizes=(2,))
    ret.set_as_return_node_from(call)
    assert ret.aligned_predecessor is call
    assert ret.is_aligned_to_predecessor
    assert ret.has_predecessors()
    assert call.return_successor_node() is ret
    assert call.indirect_succs[0].target_addr == call.max_block.end_addr


def test_switch_statement_detection():
    switch = make_node(0)
    cases = [make_node(1), make_node(2)]
    cases[0].set_as_switch_case_for(switch, 0x2000)
    assert not switch.is_switch_statement()
    cases[1].set_as_switch_case_for(switch, 0x2010)
    assert switch.is_switch_statement()
    assert cases[0].is_switch_branch_target()
    assert not switch.is_switch_branch_target()


def test_min_target_prefers_indirect_predecessors():
    node, switch, other = make_node(0), make_node(1), make_node(2)
    node.add_remote_predecessor(other, 0x10)
    node.set_as_switch_case_for(switch, 0x300)
    node.set_as_switch_case_for(switch, 0x200)
    assert node.min_target_addr_of_valid_predecessor() == 0x200


def test_min_target_filters_direct_predecessors():
    node = make_node(0)
    data_pred, cond_pred, good_pred = make_node(1), make_node(2), make_node(3)
    data_pred.type = CFGNodeType.kData
    node.add_remote_predecessor(data_pred, 0x10)
    node.add_immediate_predecessor(cond_pred, 0x20)
    node.add_remote_predecessor(node, 0x30)
    assert node.min_target_addr_of_valid_predecessor() == 0
    node.add_remote_predecessor(good_pred, 0x500)
    assert node.min_target_addr_of_valid_predecessor() == 0x500


def test_is_appendable_by():
    first = make_node(0, start=0x1000, sizes=(2, 2))
    second = make_node(1, start=0x1004, sizes=(2,))
    third = make_node(2, start=0x1006, sizes=(2,))
    assert first.is_appendable_by(second)
    assert not first.is_appendable_by(third)


def test_equality_by_id():
    assert make_node(5, start=0x10) == make_node(5, start=0x80)
    assert make_node(5) != make_node(6)


def test_disassembly_cfg_navigation():
    nodes = [make_node(i, start=0x1000 + 4 * i) for i in range(3)]
    cfg = DisassemblyCFG(nodes)
    assert len(cfg) == 3
    assert cfg.node_at(1) is nodes[1]
    assert cfg.node_of(nodes[2].max_block) is nodes[2]
    assert cfg.is_last(nodes[2])
    assert not cfg.is_last(nodes[0])
    assert cfg.previous(nodes[1]) is nodes[0]
    assert cfg.next(nodes[1]) is nodes[2]
    assert list(cfg) == nodes
    assert cfg.valid is False


def test_disassembly_cfg_bounds():
    nodes = [make_node(i) for i in range(2)]
    cfg = DisassemblyCFG(nodes)
    with pytest.raises(IndexError):
        cfg.previous(nodes[0])
    with pytest.raises(IndexError):
        cfg.next(nodes[1])