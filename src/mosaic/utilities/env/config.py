from mosaic.utilities.env.diagnostics import DiagnosticsConfiguration
from mosaic.utilities.env.display import DisplayConfiguration


class Configuration(DisplayConfiguration, DiagnosticsConfiguration):
    """Aggregate environment configuration helpers."""
