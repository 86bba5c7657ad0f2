"""Write a message onto the GitHub activity graph with backdated commits."""

from .errors import (ConfigurationError, ContribWriterError, ExternalCommandFailure,
                     MissingConfiguration, UnsupportedCharacterWarning)
from .glyphs import lookup
from .grid import Grid, compose
from .refresh import refresh_schedule
from .schedule import ScheduledCommit, schedule
from .window import Window, current_window, place_centered, place_left_aligned

__version__ = "0.1.0"
