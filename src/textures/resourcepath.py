ASSETS_PATH: str = "./assets/"

BACKGROUND_TEXTURE_PATH: str = ASSETS_PATH + "background.png"
PLAYER_TEXTURE_PATH: str = ASSETS_PATH + "rocket.png"
OBSTACLE_TEXTURE_PATH: str = ASSETS_PATH + "rock.png"

# None selects pygame's bundled default font
FONT_PATH: str | None = None
