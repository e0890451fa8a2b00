"""
strikesim - Mission planning and engagement simulation engine

Assigns strike targets to aircraft, builds time-parameterized flight paths
and replays the mission as a deterministic time-stepped simulation with
missile guidance, target destruction and proximity hazards.
"""

__version__ = "0.1.0"
