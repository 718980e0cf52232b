"""Board geometry and the fixed colours used when drawing."""

TILE_COUNT = 5
TILE_SIZE = 100
BORDER = 2
SCREEN_WIDTH = TILE_COUNT * TILE_SIZE
SCREEN_HEIGHT = TILE_COUNT * TILE_SIZE

WHITE = (255, 255, 255, 255)
BLANK = (0, 0, 0, 0)
RAYWHITE = (245, 245, 245, 255)