WIDTH = 640
HEIGHT = 480
FULLSCREEN = False
RESIZABLE = True
WINDOW_TITLE = "Rocket Dodge"
FPS = 60
VSYNC = False
BACKGROUND_COLOR = (0.0, 0.0, 0.0, 1.0)
# Player speed in pixels per frame
START_SPEED = 12.0
MIN_SPEED = 1.0
MAX_SPEED = 20.0
SPEED_STEP = 1.0
# Game over text (pygame default font, embedded in the pygame wheel)
FONT_SIZE = 16
GAME_OVER_TEXT = "Game Over!"
GAME_OVER_COLOR = (255, 0, 0, 255)
