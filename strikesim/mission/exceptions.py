# strikesim/mission/exceptions.py
"""
Mission Planning Exceptions
Error types raised while assigning targets and building flight paths.
"""

class MissionError(Exception):
    """Base class for all mission planning errors"""
    pass

class MissionSetupError(MissionError):
    """The mission inputs are incomplete (no targets, no aircraft or no base)"""
    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"Mission setup incomplete: {reason}")

class InsufficientCapacity(MissionError):
    """Total ammunition required by the targets exceeds what the aircraft carry"""
    def __init__(self, required, available):
        self.required = required
        self.available = available
        super().__init__(f"Not enough ammo! Need {required}, have {available}")

class MissingTargetReference(MissionError):
    """An assigned target id does not resolve to a known target"""
    def __init__(self, target_id, context=None):
        self.target_id = target_id
        self.context = context
        message = f"Target '{target_id}' not found in target list"
        super().__init__(f"{message} [{context}]" if context else message)
