
"""Block record, kind tags and the builders that derive new blocks"""
from dataclasses import dataclass, replace
from typing import Dict, Tuple

from tetris_layout import cell_width, cell_height

# Group identity for blocks that never belong to a piece
NO_GROUP = -1

# Piece kinds in catalog order (index produced by the random sequence)
KINDS = ["O", "T", "I", "S", "Z", "J", "L"]
BEDROCK = "BEDROCK"
GREY = "GREY"

Style = Tuple[int, int, int]

STYLES: Dict[str, Style] = {
    "O": (255, 224, 102),
    "T": (200, 119, 255),
    "I": (102, 224, 255),
    "S": (94, 224, 142),
    "Z": (255, 102, 119),
    "J": (106, 119, 255),
    "L": (255, 158, 94),
    BEDROCK: (140, 60, 40),
    GREY: (128, 128, 128),
}


@dataclass(frozen=True)
class Block:
    id: int
    group: int
    x: int
    y: int
    width: int
    height: int
    placed: bool
    kind: str
    style: Style

    @property
    def clearable(self) -> bool:
        return self.kind not in (BEDROCK, GREY)

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.x, self.y)


def new_block(id: int, group: int, x: int, y: int, kind: str, placed: bool = False) -> Block:
    return Block(id, group, x, y, cell_width(), cell_height(), placed, kind, STYLES[kind])

def moved_to(b: Block, x: int, y: int) -> Block:
    return replace(b, x=x, y=y)

def locked(b: Block) -> Block:
    return replace(b, placed=True)

def shifted_down(b: Block, count: int = 1) -> Block:
    return replace(b, y=b.y + count * b.height)

def shifted_up(b: Block, count: int = 1) -> Block:
    return replace(b, y=b.y - count * b.height)

def same_group(a: Block, b: Block) -> bool:
    """Blocks move together only when they share a real group (or are the same block)."""
    if a.id == b.id:
        return True
    return a.group != NO_GROUP and a.group == b.group
