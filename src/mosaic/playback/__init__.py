from mosaic.playback.controller import \
    PlaybackController as PlaybackController
from mosaic.playback.state import PlaybackState as PlaybackState
from mosaic.playback.state import SessionState as SessionState
