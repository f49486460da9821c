# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG


def columns() -> int:
    return int(CONFIG["GRID_WIDTH"])

def rows() -> int:
    return int(CONFIG["GRID_HEIGHT"])

def cell_width() -> int:
    return int(CONFIG["CANVAS_WIDTH"]) // columns()

def cell_height() -> int:
    return int(CONFIG["CANVAS_HEIGHT"]) // rows()

def right_edge_x() -> int:
    """Largest x a block may take."""
    return int(CONFIG["CANVAS_WIDTH"]) - cell_width()

def floor_y() -> int:
    """Largest y a block may take."""
    return int(CONFIG["CANVAS_HEIGHT"]) - cell_height()

def center_x() -> int:
    # snapped to the grid so pieces stay cell aligned
    return (columns() // 2) * cell_width()

def column_of(x: int) -> int:
    return x // cell_width()

def row_of(y: int) -> int:
    return y // cell_height()


@dataclass
class Dims:
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_x: int
    preview_y: int
    preview_w: int
    preview_h: int

def compute_dims() -> Dims:
    margin = 16
    preview_w = int(CONFIG["PREVIEW_WIDTH"])
    preview_h = int(CONFIG["PREVIEW_HEIGHT"])
    panel_w = preview_w + 2 * margin

    board_w = int(CONFIG["CANVAS_WIDTH"])
    board_h = int(CONFIG["CANVAS_HEIGHT"])

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_x=panel_x + margin, preview_y=panel_y + 150,
        preview_w=preview_w, preview_h=preview_h,
    )
