# spedi

`spedi` holds the data structures used to recover the structure of ARM/Thumb
code sections from a speculative disassembly: a control-flow graph over the
maximal blocks of a section, procedures built from that graph, and a call
graph that orders them. It also ships DWARF constant enumerations and a small
command-line option parser.

## What is in the package

| Module | Contents |
| --- | --- |
| `spedi.common` | `ISAType`, `ISAInstWidth` and `ARMCodeSymbolType` enumerations |
| `spedi.dwarf_constants` | DWARF 2 to 4 constant enumerations: `DW_TAG`, `DW_AT`, `DW_FORM`, `DW_OP`, `DW_LANG`, `DW_LNS`, `DW_LNE` and the rest |
| `spedi.cmdline` | A small command-line option parser: `Parser`, `CmdlineError`, `in_range`, `one_of` |
| `spedi.cfg` | `CFGNode`, `CFGEdge`, `DisassemblyCFG` and the `CFGEdgeType`, `CFGNodeType`, `CFGNodeRoleInProcedure` and `NodeTraversalStatus` enumerations |
| `spedi.section` | `SectionDisassembly`, the maximal blocks of one section together with its bytes and address range |
| `spedi.icfg` | `ICFGNode`, a procedure, with `ICFGExitNodeType` and `ICFGProcedureType` |
| `spedi.call_graph` | `DisassemblyCallGraph`, which collects procedures and orders them into a call graph |

## Maximal blocks

The package does not define maximal blocks or instructions itself; it works
with any objects that offer the attributes it reads:

* a block has `id` (its index in the section), `instructions`,
  `addr_of_first_inst`, `addr_of_last_inst` and `end_addr`;
* an instruction has `addr` and `size`;
* for the call graph, a block also has `branch_info.is_call`.

`SectionDisassembly.add` requires each block's `id` to equal its position and
raises `ValueError` otherwise. `virtual_addr_of` and `physical_offset_of`
convert between offsets into the section bytes and virtual addresses, and
`is_within_section_address_space` checks an address against
`[start_addr, end_addr)`.

## Control-flow graph

Each `CFGNode` wraps one maximal block. Edges are recorded with
`add_remote_predecessor` (direct branch) and `add_immediate_predecessor`
(conditional fall-through); a call site is tied to the node it returns to with
`set_as_return_node_from`, and switch-table targets with
`set_as_switch_case_for`.

When a node turns out to be data, `set_to_data_and_invalidate_predecessors`
marks it and every code node that reaches it, directly or transitively, by a
direct or conditional branch.

`candidate_instructions(predicate)` walks the instructions of a node from its
candidate start address, following only instructions that directly follow one
another, and returns those the predicate accepts (all of them when no
predicate is given). `set_candidate_start_addr` moves the candidate start to
the first instruction at or after the given address.

`DisassemblyCFG` keeps the nodes in block order; `node_at`, `node_of`,
`previous`, `next` and `is_last` navigate it, and `previous`/`next` raise
`IndexError` at either end.

## Procedures and the call graph

An `ICFGNode` is a procedure identified by its entry address; its default name
is `proc_<hex entry address>`. Creating one marks its entry node as a
procedure entry. A procedure without an entry node is external. Procedures
compare and sort by entry address.

`DisassemblyCallGraph.insert_procedure` registers a procedure and returns it,
or returns `None` if one with the same entry address already exists.
`build_initial_call_graph` sorts the registered procedures and gives each an
estimated end address: the entry of the next procedure, or the end of the
section for the last one.

`build_call_graph` merges the procedures added since, resolves each
"tail call or overlap" exit into a tail call or an overlap, and writes every
procedure to standard output using `format_procedure`.
`check_non_return_procedure_and_fix_callers` marks a procedure that never
returns and only leaves through tail calls made by calls as non-returning, and
clears the call flag of its direct callers.

## Command-line options

```python
from spedi.cmdline import Parser, in_range

parser = Parser()
parser.add_flag("verbose", "v", "print more detail")
parser.add("level", "l", "analysis level", int, False, 1, in_range(0, 3))

if parser.parse(["prog", "-v", "--level=2", "input.elf"]):
    print(parser.exists("verbose"), parser.get("level"), parser.rest())
else:
    print(parser.error_full())
    print(parser.usage())
```

Bad input is collected as messages instead of stopping the parse: `error()`
returns the first message and `error_full()` returns all of them. Asking for
an option that was never defined raises `CmdlineError`. `parse_string` splits
a whole command line, honouring double quotes and backslashes, before
parsing. `parse_check` adds a `--help` flag and exits with the usage text on
`--help` or on errors.

## What the package does not do

It does not read ELF files, decode machine code, or find maximal blocks; the
blocks must be supplied by the caller. It contains no analysis pass that
builds and refines the control-flow graph from a section on its own, no
recovery of switch tables or PLT entries, and no command-line program.

## Tests

The test suite uses pytest and is installed through the `test` extra.