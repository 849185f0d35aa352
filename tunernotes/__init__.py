"""tunernotes: note-name rendering for a chromatic tuner."""

__version__ = "0.1.0"
