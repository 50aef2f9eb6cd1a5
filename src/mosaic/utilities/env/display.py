from mosaic.utilities.env.parsing import _env_flag, _env_int

DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
DEFAULT_MAX_FPS = 60


class DisplayConfiguration:
    @classmethod
    def window_size(cls) -> tuple[int, int]:
        return (
            _env_int("MOSAIC_WINDOW_WIDTH", default=DEFAULT_WINDOW_WIDTH, minimum=1),
            _env_int("MOSAIC_WINDOW_HEIGHT", default=DEFAULT_WINDOW_HEIGHT, minimum=1),
        )

    @classmethod
    def fullscreen(cls) -> bool:
        return _env_flag("MOSAIC_FULLSCREEN")

    @classmethod
    def resizable(cls) -> bool:
        return _env_flag("MOSAIC_RESIZABLE", default=True)

    @classmethod
    def max_fps(cls) -> int:
        """Frame cap for the main loop; ``0`` leaves it uncapped."""

        return _env_int("MOSAIC_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=0)
