from mosaic.utilities.env.parsing import _env_optional_float

DEFAULT_FRAME_LOG_INTERVAL_SECONDS = 5.0


class DiagnosticsConfiguration:
    @classmethod
    def frame_log_interval_seconds(cls) -> float | None:
        return _env_optional_float(
            "MOSAIC_LOG_FRAME_INTERVAL",
            default=DEFAULT_FRAME_LOG_INTERVAL_SECONDS,
            minimum=0.0,
        )
