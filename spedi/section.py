"""Disassembly of one code section: its bytes, address range and maximal blocks."""

from __future__ import annotations

from typing import Any, Iterator, List

from spedi.common import ISAType

__all__ = ["SectionDisassembly"]


class SectionDisassembly:
    """The maximal blocks recovered from one section, kept in address order.

    Every block added must carry an ``id`` equal to its index in the section.
    """

    def __init__(
        self,
        name: str,
        start_addr: int,
        data: bytes,
        isa: ISAType = ISAType.kThumb,
    ) -> None:
        self.section_name = name
        self.start_addr = start_addr
        self.data = bytes(data)
        self.isa = isa
        self.maximal_blocks: List[Any] = []
        self.valid = False

    @property
    def end_addr(self) -> int:
        """Virtual address one past the last byte of the section."""
        return self.start_addr + len(self.data)

    @property
    def size(self) -> int:
        """Size of the section in bytes."""
        return len(self.data)

    @property
    def maximal_block_count(self) -> int:
        return len(self.maximal_blocks)

    def __len__(self) -> int:
        return len(self.maximal_blocks)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.maximal_blocks)

    def add(self, max_block: Any) -> None:
        """Append a maximal block whose id must equal its position."""
        if max_block.id != len(self.maximal_blocks):
            raise ValueError(
                f"invalid index of maximal block: expected "
                f"{len(self.maximal_blocks)}, got {max_block.id}"
            )
        self.maximal_blocks.append(max_block)

    def back(self) -> Any:
        """The last maximal block; raises IndexError if there is none."""
        return self.maximal_blocks[-1]

    def virtual_addr_of(self, offset: int) -> int:
        """Virtual address of the byte at ``offset`` within the section data."""
        if not 0 <= offset < len(self.data):
            raise ValueError(f"offset {offset} is outside the section data")
        return self.start_addr + offset

    def physical_offset_of(self, virtual_addr: int) -> int:
        """Offset into the section data of ``virtual_addr`` (not range-checked)."""
        return virtual_addr - self.start_addr

    def is_last(self, max_block: Any) -> bool:
        return max_block.id == len(self.maximal_blocks) - 1

    def is_first(self, max_block: Any) -> bool:
        return max_block.id == 0

    def maximal_block_at(self, index: int) -> Any:
        return self.maximal_blocks[index]

    def is_within_section_address_space(self, addr: int) -> bool:
        """True if ``addr`` lies in ``[start_addr, end_addr)``."""
        return self.start_addr <= addr < self.end_addr