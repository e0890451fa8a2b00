# strikesim/simulation/exceptions.py
"""Simulation exceptions."""

class SimulationError(Exception):
    """Base exception for all simulation errors."""
    pass

class InvalidPath(SimulationError):
    """Raised when a path is empty or its time offsets decrease."""
    def __init__(self, message="Invalid path", flight_id=None):
        self.flight_id = flight_id
        super().__init__(f"{message} [Flight: {flight_id}]" if flight_id else message)

class PlaybackError(SimulationError):
    """Raised for an invalid playback speed or seek time."""
    pass
