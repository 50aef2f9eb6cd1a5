"""Environment configuration helpers."""

from mosaic.utilities.env.config import Configuration as Configuration
