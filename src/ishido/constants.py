BOARD_COLS = 12
BOARD_ROWS = 8

COLOR_COUNT = 6
SYMBOL_COUNT = 6
# Physical copies of every color/symbol pair in the deck.
DECK_COPIES = 2
BACKGROUND_VARIANTS = 4

# Pixel size of one board cell; the tile sheet uses the same cell size.
TILE_WIDTH = 56
TILE_HEIGHT = 66

# Window: the board on the left, the status area image on the right.
WINDOW_WIDTH = 788
WINDOW_HEIGHT = BOARD_ROWS * TILE_HEIGHT
BOARD_PIXEL_WIDTH = BOARD_COLS * TILE_WIDTH
BOARD_PIXEL_HEIGHT = BOARD_ROWS * TILE_HEIGHT
STATUS_CENTER_X = WINDOW_WIDTH - (WINDOW_WIDTH - BOARD_PIXEL_WIDTH) / 2

# Status area layout, measured in pixels from the top of the window.
NEXT_STONE_TOP = TILE_HEIGHT / 2
SCORE_TEXT_Y = 140
FOUR_WAYS_TEXT_Y = 185
NEW_BUTTON_TEXT_Y = 484
NEW_BUTTON_WIDTH = 44
NEW_BUTTON_HEIGHT = 32

# Remaining-stone tally: one bar per stone, ten per row.
TALLY_BARS_PER_ROW = 10
TALLY_BAR_WIDTH = 5
TALLY_BAR_HEIGHT = 15
TALLY_BASE_Y = 444

# Seconds of tick time after a placement (or game start) before valid positions are highlighted.
HINT_DELAY = 5.0

GRAPHICS_DIR_NAME = "graphics"
BACKGROUND_IMAGE = "Background.png"
TILESET_IMAGE = "Tileset.png"
STATUSAREA_IMAGE = "Statusarea.png"
