
CONFIG = {
    # Playfield (pixels) and grid
    "CANVAS_WIDTH": 200,
    "CANVAS_HEIGHT": 400,
    "PREVIEW_WIDTH": 160,
    "PREVIEW_HEIGHT": 80,
    "GRID_WIDTH": 10,
    "GRID_HEIGHT": 20,
    # Timing
    "TICK_RATE_MS": 500,
    "RANDOM_TICK_MS": 10,
    # Rules
    "DROP_BED_ROCK": 8,
    "CLEAR_ROW_SCORE": 100,
    "DROP_BLOCK_SCORE": 10,
    "LEVEL_UP_SCORE": 1000,
    "MAX_LEVEL": 10,
    "NUM_BLOCK_TYPES": 7,
    # Runtime
    "SEED": None,
    "HALT_ON_GAME_OVER": True,
    "EVENT_QUEUE_SIZE": 64,
    "LOG_LEVEL": "WARNING",
}
