"""Static content of the 78-card deck: meanings, names and face layouts."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from tarot_types import LayoutTemplate, Suit


class Meaning(NamedTuple):
    upright: str
    reversed: str


class MajorMeaning(NamedTuple):
    name: str
    upright: str
    reversed: str


def _ranked(*entries):
    """Freeze a sequence of entries into a 1-based rank mapping."""

    return MappingProxyType({rank: entry for rank, entry in enumerate(entries, start=1)})


RANK_WORDS: Mapping[int, str] = _ranked(
    "Ace", "Two", "Three", "Four", "Five", "Six", "Seven",
    "Eight", "Nine", "Ten", "Page", "Knight", "Queen", "King",
)

MINOR_RANKS = tuple(RANK_WORDS)

MAJOR_ARCANA_TEMPLATE = LayoutTemplate(top=0, center=1, bottom=0)

LAYOUT_TEMPLATES: Mapping[int, LayoutTemplate] = _ranked(
    LayoutTemplate(0, 1, 0),
    LayoutTemplate(1, 0, 1),
    LayoutTemplate(1, 1, 1),
    LayoutTemplate(2, 0, 2),
    LayoutTemplate(2, 1, 2),
    LayoutTemplate(2, 2, 2),
    LayoutTemplate(3, 1, 3),
    LayoutTemplate(3, 2, 3),
    LayoutTemplate(3, 3, 3),
    LayoutTemplate(4, 2, 4),
    LayoutTemplate(1, "Page", 1),
    LayoutTemplate(1, "Knight", 1),
    LayoutTemplate(1, "Queen", 1),
    LayoutTemplate(1, "King", 1),
)

DEFAULT_SUIT_NAMES: Mapping[Suit, str] = MappingProxyType(
    {
        Suit.RODS: "Rods",
        Suit.COINS: "Coins",
        Suit.CUPS: "Cups",
        Suit.BLADES: "Blades",
    }
)

# Staffs
_RODS = _ranked(
    Meaning("Creation, willpower, inspiration, desire", "Lack of energy, lack of passion, boredom"),
    Meaning("Planning, making decisions, leaving home", "Fear of change, playing safe, bad planning"),
    Meaning("Looking ahead, expansion, rapid growth", "Obstacles, delays, frustration"),
    Meaning("Community, home, celebration", "Lack of support, transience, home conflicts"),
    Meaning("Competition, rivalry, conflict", "Avoiding conflict, respecting differences"),
    Meaning("Victory, success, public reward", "Excess pride, lack of recognition, punishment"),
    Meaning("Perseverance, defensive, maintaining control", "Give up, destroyed confidence, overwhelmed"),
    Meaning("Rapid action, movement, quick decisions", "Panic, waiting, slowdown"),
    Meaning("Resilience, grit, last stand", "Exhaustion, fatigue, questioning motivations"),
    Meaning("Accomplishment, responsibility, burden", "Inability to delegate, overstressed, burnt out"),
    Meaning("Exploration, excitement, freedom", "Lack of direction, procrastination, creating conflict"),
    Meaning("Courage, determination, joy", "Selfishness, jealousy, insecurities"),
    Meaning("Action, adventure, fearlessness", "Anger, impulsiveness, recklessness"),
    Meaning("Big picture, leader, overcoming challenges", "Impulsive, overbearing, unachievable"),
)

_COINS = _ranked(
    Meaning("Opportunity, prosperity, new venture", "Lost opportunity, missed chance, bad investment"),
    Meaning("Balancing decisions, priorities, adapting to change", "Loss of balance, disorganized, overwhelmed"),
    Meaning("Teamwork, collaboration, building", "Lack of teamwork, disorganized, group conflict"),
    Meaning("Conservation, frugality, security", "Greediness, stinginess, possessiveness"),
    Meaning("Need, poverty, insecurity", "Recovery, charity, improvement"),
    Meaning("Charity, generosity, sharing", "Strings attached, stinginess, power and domination"),
    Meaning("Hard work, perseverance, diligence", "Work without results, distractions, lack of rewards"),
    Meaning("Apprenticeship, passion, high standards", "Lack of passion, uninspired, no motivation"),
    Meaning("Fruits of labor, rewards, luxury", "Reckless spending, living beyond means, false success"),
    Meaning("Legacy, culmination, inheritance", "Fleeting success, lack of stability, lack of resources"),
    Meaning("Ambition, desire, diligence", "Lack of commitment, greediness, laziness"),
    Meaning("Efficiency, hard work, responsibility", "Laziness, obsessiveness, work without reward"),
    Meaning("Practicality, creature comforts, financial security", "Self-centeredness, jealousy, smothering"),
    Meaning("Abundance, prosperity, security", "Greed, indulgence, sensuality"),
)

_CUPS = _ranked(
    Meaning("New feelings, spirituality, intuition", "Emotional loss, blocked creativity, emptiness"),
    Meaning("Unity, partnership, connection", "Imbalance, broken communication, tension"),
    Meaning("Friendship, community, happiness", "Overindulgence, gossip, isolation"),
    Meaning("Apathy, contemplation, disconnectedness", "Sudden awareness, choosing happiness, acceptance"),
    Meaning("Loss, grief, self-pity", "Acceptance, moving on, finding peace"),
    Meaning("Familiarity, happy memories, healing", "Moving forward, leaving home, independence"),
    Meaning("Searching for purpose, choices, daydreaming", "Lack of purpose, diversion, confusion"),
    Meaning("Walking away, disillusionment, leaving behind", "Avoidance, fear of change, fear of loss"),
    Meaning("Satisfaction, emotional stability, luxury", "Lack of inner joy, smugness, dissatisfaction"),
    Meaning("Inner happiness, fulfillment, dreams coming true", "Shattered dreams, broken family, domestic"),
    Meaning("Happy surprise, dreamer, sensitivity", "Emotional immaturity, insecurity, disappointment"),
    Meaning("Following the heart, idealist, romantic", "Moodiness, disappointment"),
    Meaning("Compassion, calm, comfort", "Martyrdom, insecurity, dependence"),
    Meaning("Compassion, control, balance", "Coldness, moodiness, bad advice"),
)

# Swords
_BLADES = _ranked(
    Meaning("Breakthrough, clarity, sharp mind", "Confusion, brutality, chaos"),
    Meaning("Difficult choices, indecision, stalemate", "Lesser of two evils, no right choice, confusion"),
    Meaning("Heartbreak, suffering, grief", "Recovery, forgiveness, moving on"),
    Meaning("Rest, restoration, contemplation", "Restlessness, burnout, stress"),
    Meaning("Unbridled ambition, win at all costs, sneakiness", "Lingering resentment, desire to reconcile, forgiveness"),
    Meaning("Transition, leaving behind, moving on", "Emotional baggage, unresolved issues, resisting transition"),
    Meaning("Deception, trickery, tactics and strategy", "Coming clean, rethinking approach, deception"),
    Meaning("Imprisonment, entrapment, self-victimization", "Self acceptance, new perspective, freedom"),
    Meaning("Anxiety, hopelessness, trauma", "Hope, reaching out, despair"),
    Meaning("Failure, collapse, defeat", "Can't get worse, only upwards, inevitable end"),
    Meaning("Curiosity, restlessness, mental energy", "Deception, manipulation, all talk"),
    Meaning("Complexity, perceptiveness, clear", "Cold hearted, cruel, bitterness"),
    Meaning("Action, impulsiveness, defending beliefs", "No direction, disregard for consequences, unpredictability"),
    Meaning("Head over heart, discipline, truth", "Manipulative, cruel, weakness"),
)

MINOR_MEANINGS: Mapping[Suit, Mapping[int, Meaning]] = MappingProxyType(
    {
        Suit.RODS: _RODS,
        Suit.COINS: _COINS,
        Suit.CUPS: _CUPS,
        Suit.BLADES: _BLADES,
    }
)

MAJOR_ARCANA: Mapping[int, MajorMeaning] = _ranked(
    MajorMeaning("The Fool", "Innocence, new beginnings, free spirit", "Recklessness, taken advantage of, inconsideration"),
    MajorMeaning("The Magician", "Willpower, desire, creation, manifestation", "Trickery, illusions, out of touch"),
    MajorMeaning("The High Priestess", "Intuitive, unconscious, inner voice", "Lack of center, lost inner voice, repressed feelings"),
    MajorMeaning("The Empress", "Motherhood, fertility, nature", "Dependence, smothering, emptiness, nosiness"),
    MajorMeaning("The Emperor", "Authority, structure, control, fatherhood", "Tyranny, rigidity, coldness"),
    MajorMeaning("The High Priest", "Tradition, conformity, morality, ethics", "Rebellion, subversiveness, new approaches"),
    MajorMeaning("The Lovers", "Partnerships, duality, union", "Loss of balance, one-sidedness, disharmony"),
    MajorMeaning("The Chariot", "Direction, control, willpower", "Lack of control, lack of direction, aggression"),
    MajorMeaning("Strength", "Inner strength, bravery, compassion, focus", "Self doubt, weakness, insecurity"),
    MajorMeaning("The Hermit", "Contemplation, search for truth, inner guidance", "Loneliness, isolation, lost your way"),
    MajorMeaning("The Wheel of Fortune", "Change, cycles, inevitable fate", "No control, clinging to control, bad luck"),
    MajorMeaning("Justice", "Cause and effect, clarity, truth", "Dishonesty, unaccountability, unfairness"),
    MajorMeaning("The Hanged Man", "Waiting, sacrifice, release, martyrdom", "Stalling, needless sacrifice, fear of sacrifice"),
    MajorMeaning("Death", "End of cycle, beginnings, change, metamorphosis", "Fear of change, holding on, stagnation"),
    MajorMeaning("Temperance", "Middle path, patience, finding meaning", "Extremes, excess, lack of balance"),
    MajorMeaning("The Devil", "The Unacknowledged, addiction, materialism, playfulness", "Realisation, freedom, release, restoring control"),
    MajorMeaning("The Tower", "Sudden upheaval, broken pride, disaster", "Disaster avoided, delayed disaster, fear of suffering"),
    MajorMeaning("The Star", "Hope, guidance, faith, rejuvenation", "Faithlessness, being lost, discouragement, insecurity"),
    MajorMeaning("The Moon", "Unconsciousness, illusions, intuition", "Confusion, fear, misinterpretation"),
    MajorMeaning("The Sun", "Joy, success, celebration, positivity", "Negativity, depression, sadness"),
    MajorMeaning("Judgement", "Reflection, reckoning, awakening", "Lack of self awareness, doubt, self loathing"),
    MajorMeaning("The Great Work", "Fulfillment, creation, harmony, completion", "Incompletion, stagnation, disharmony, no closure"),
)

MAJOR_TITLES: Mapping[int, str] = MappingProxyType(
    {rank: entry.name for rank, entry in MAJOR_ARCANA.items()}
)

MAJOR_RANKS = tuple(MAJOR_ARCANA)


def meaning_for(suit: Suit, rank: int, upright: bool) -> str:
    """Return the upright or reversed reading of the card at ``suit``/``rank``."""

    entry = MAJOR_ARCANA[rank] if suit.is_major else MINOR_MEANINGS[suit][rank]
    return entry.upright if upright else entry.reversed


__all__ = [
    "DEFAULT_SUIT_NAMES",
    "LAYOUT_TEMPLATES",
    "MAJOR_ARCANA",
    "MAJOR_ARCANA_TEMPLATE",
    "MAJOR_RANKS",
    "MAJOR_TITLES",
    "MINOR_MEANINGS",
    "MINOR_RANKS",
    "MajorMeaning",
    "Meaning",
    "RANK_WORDS",
    "meaning_for",
]
