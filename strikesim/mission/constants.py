# strikesim/mission/constants.py

class MissionConstants:
    # Ammunition needed to service a target of each priority
    AMMO_BY_PRIORITY = {
        'high': 2,
        'medium': 1,
        'low': 1,
    }
    # Lower rank is serviced first
    PRIORITY_RANK = {
        'high': 0,
        'medium': 1,
        'low': 2,
    }
    TARGET_TYPE_BY_PRIORITY = {
        'high': 'primary',
        'medium': 'secondary',
        'low': 'opportunity',
    }

    DEFAULT_AMMO_CAPACITY = 4
    AIRCRAFT_COLORS = ['#22c55e', '#3b82f6', '#f59e0b', '#8b5cf6', '#ec4899', '#06b6d4']
    MISSION_NAME_PREFIX = "Strike Mission"
