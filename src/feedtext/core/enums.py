"""Core enumerations: event classification and the closed vocabularies."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class FeedEventType(StrEnum):
    """Coarse feed event bucket assigned by the upstream classifier."""

    GAME = "Game"
    AUGMENT = "Augment"


class FeedEventSource(StrEnum):
    """Narrator of a feed event sentence."""

    PLAYER = "player"
    TEAM = "team"
    UMPIRE = "umpire"


class ParseFailure(IntEnum):
    """Reason a feed event text could not be interpreted."""

    EVENT_TYPE_NOT_RECOGNIZED = 1
    FAILED_PARSING_TEXT = 2


class Attribute(StrEnum):
    """Player statistic names referenced by augment events."""

    ACCURACY = "Accuracy"
    ACROBATICS = "Acrobatics"
    AGILITY = "Agility"
    AIMING = "Aiming"
    ARM = "Arm"
    AWARENESS = "Awareness"
    COMPOSURE = "Composure"
    CONTACT = "Contact"
    CONTROL = "Control"
    CUNNING = "Cunning"
    DEFIANCE = "Defiance"
    DETERMINATION = "Determination"
    DEXTERITY = "Dexterity"
    DISCIPLINE = "Discipline"
    GREED = "Greed"
    GUTS = "Guts"
    INSIGHT = "Insight"
    INTIMIDATION = "Intimidation"
    LIFT = "Lift"
    LUCK = "Luck"
    MUSCLE = "Muscle"
    PATIENCE = "Patience"
    PERFORMANCE = "Performance"
    PERSUASION = "Persuasion"
    PRESENCE = "Presence"
    PRIORITY = "Priority"
    REACTION = "Reaction"
    ROTATION = "Rotation"
    RUTHLESSNESS = "Ruthlessness"
    SELFLESSNESS = "Selflessness"
    SPEED = "Speed"
    STAMINA = "Stamina"
    STEALTH = "Stealth"
    STUFF = "Stuff"
    UNTHWACKABILITY = "Unthwackability"
    VELOCITY = "Velocity"
    VISION = "Vision"
    WISDOM = "Wisdom"


class ItemType(StrEnum):
    """Equipment slot of an item."""

    BAT = "Bat"
    CAP = "Cap"
    GLOVES = "Gloves"
    JERSEY = "Jersey"
    NECKLACE = "Necklace"
    RING = "Ring"
    SNEAKERS = "Sneakers"
    SOCKS = "Socks"


class ItemPrefix(StrEnum):
    """Single-word adjective placed before the item type."""

    BOLD = "Bold"
    CONSISTENT = "Consistent"
    FIERY = "Fiery"
    FORTIFIED = "Fortified"
    LUCKY = "Lucky"
    SHARP = "Sharp"
    STEADY = "Steady"
    SWIFT = "Swift"


class ItemSuffix(StrEnum):
    """Multi-word phrase placed after the item type."""

    OF_THE_ACROBAT = "of the Acrobat"
    OF_THE_CHEETAH = "of the Cheetah"
    OF_THE_HAWK = "of the Hawk"
    OF_THE_SEER = "of the Seer"
    OF_FORTUNE = "of Fortune"
    OF_VITALITY = "of Vitality"
