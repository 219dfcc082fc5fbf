"""
Quiz Catalog Configuration

This file contains the question catalogs, option sets and axis orders for the
TTRPG player profile quiz. Two variants are registered: the 13-axis
"potential" catalog and the older 11-axis "classic" catalog. Both feed the same
scoring engine; a variant only decides which questions are asked, in which
axis order, and which scoring rule each axis uses.
"""

from typing import Dict, List, Tuple
from dataclasses import dataclass, field

import pandas as pd

# =============================================================================
# DATA TYPES
# =============================================================================

AVERAGE_RULE = "average"
AVAILABILITY_RULE = "availability"


@dataclass(frozen=True)
class Question:
    id: int
    text: str
    axis: str
    options: Tuple[str, ...]
    label: str = ""


@dataclass(frozen=True)
class QuizVariant:
    """A named catalog: ordered axes, ordered questions and per-axis scoring rules."""
    name: str
    title: str
    axes: Tuple[str, ...]
    questions: Tuple[Question, ...]
    scoring_rules: Dict[str, str] = field(default_factory=dict)

    def rule_for(self, axis: str) -> str:
        return self.scoring_rules.get(axis, AVERAGE_RULE)

    @property
    def total_questions(self) -> int:
        return len(self.questions)


# =============================================================================
# OPTION SETS
# =============================================================================

DEFAULT_OPTIONS = ("Very rarely", "Rarely", "Sometimes", "Often", "Very often")
PERCENTAGE_OPTIONS = ("0%", "1-24%", "25-49%", "50-74%", "75-100%")
FREQUENCY_OPTIONS = ("Never", "1/30 days", "1/14 days", "1/7 days", "More")
SESSION_FREQUENCY_OPTIONS = (
    "Never",
    "0-2 pr Campaign",
    "A quarter of sessions have one",
    "Every other session has one",
    "Every Session!",
)
CLASSIC_OPTIONS = ("Not at all", "Rarely", "Sometimes", "Often", "Always")

# =============================================================================
# POTENTIAL VARIANT (13 axes)
# =============================================================================

PLAY_POTENTIAL_AXIS = "Play Potential"

POTENTIAL_AXES = [
    "Storytelling",
    "Roleplay Immersion",
    "Combat Enthusiasm",
    "Combat Complexity",
    "Combat Frequency",
    "Puzzle Solving",
    "Character Morality",
    "Player Character Decohesion",
    "Collaborative Play",
    "Improvisation",
    "World Interaction",
    "Game Mechanics Focus",
    PLAY_POTENTIAL_AXIS,
]

# axis -> [(question text, option set)], in asking order
POTENTIAL_TEMPLATES: Dict[str, List[Tuple[str, Tuple[str, ...]]]] = {
    "Storytelling": [
        ("Is the story something that should primarily be driving the campaign?", DEFAULT_OPTIONS),
        ("Do you prefer longer narrative arcs?", DEFAULT_OPTIONS),
        ("How often do you want character backstories influencing present events?", DEFAULT_OPTIONS),
    ],
    "Roleplay Immersion": [
        ("How much do you want to immerse yourself in your character?", DEFAULT_OPTIONS),
        ("How often do you want to interact with other PCs in character?", DEFAULT_OPTIONS),
        ("How often do you want others to interact with you in character?", DEFAULT_OPTIONS),
    ],
    "Combat Enthusiasm": [
        ("How much do you prefer for a session to focus on combat encounters during a session?", PERCENTAGE_OPTIONS),
        ("How much do you think others in a pod should focus on optimizing for efficient combat?", PERCENTAGE_OPTIONS),
        ("If you could pick how often combats occur in sessions, what would you pick?", DEFAULT_OPTIONS),
    ],
    "Combat Complexity": [
        ("How much do you enjoy combat that requires strategic positioning, resource tracking, and tactical choices?", DEFAULT_OPTIONS),
        ("Do you enjoy learning and applying intricate game mechanics (e.g., conditions, flanking, cover)?", DEFAULT_OPTIONS),
        ("How important is turn-by-turn planning and synergy with teammates during combat?", DEFAULT_OPTIONS),
    ],
    "Combat Frequency": [
        ("What percentage of a session would you ideally want to be combat-focused?", PERCENTAGE_OPTIONS),
        ("How often would you like sessions to include at least one combat encounter?", SESSION_FREQUENCY_OPTIONS),
        ("Do you feel disappointed when a session goes by without combat?", DEFAULT_OPTIONS),
    ],
    "Puzzle Solving": [
        ("Do you enjoy riddles and puzzles in your sessions? NOT COMBAT", DEFAULT_OPTIONS),
        ("How often do you want puzzles incorporated into a session for story or otherwise?", SESSION_FREQUENCY_OPTIONS),
        ("Do you like solving mysteries as part of the narrative? Not skill roll/random chance", DEFAULT_OPTIONS),
    ],
    "Character Morality": [
        ("How often do you play morally consistent characters?", PERCENTAGE_OPTIONS),
        ("How often would you accept actions against your real-life ethics?", PERCENTAGE_OPTIONS),
        ("How often do you play characters with a personal code of honor?", DEFAULT_OPTIONS),
    ],
    "Player Character Decohesion": [
        ("How comfortable are you playing characters whose actions or personalities differ significantly from your own in real life?", PERCENTAGE_OPTIONS),
        ("Do you enjoy roleplaying worldviews unlike your own?", PERCENTAGE_OPTIONS),
        ("Do you experiment with different personalities?", PERCENTAGE_OPTIONS),
    ],
    "Collaborative Play": [
        ("Do you want to build stories with other players?", DEFAULT_OPTIONS),
        ("How often do you find your characters set aside greed in favour of the greater good?", DEFAULT_OPTIONS),
        ("Are party dynamics and cohesion important to the characters you make?", DEFAULT_OPTIONS),
    ],
    "Improvisation": [
        ("Do you improvise in-character during sessions?", DEFAULT_OPTIONS),
        ("Do you enjoy reacting to unexpected story events?", DEFAULT_OPTIONS),
        ("Do you create spontaneous scenes or dialogue?", DEFAULT_OPTIONS),
    ],
    "World Interaction": [
        ("How often do you find yourself drawn into the lore/world if its decently written?", DEFAULT_OPTIONS),
        ("Do you want to be able to be sidetracked by unrelated or non essential situations, places /people?", DEFAULT_OPTIONS),
        ("How often do you find yourself wanting to interact with the world/NPCs outside of main objectives?", DEFAULT_OPTIONS),
    ],
    "Game Mechanics Focus": [
        ("Do you optimize builds for effectiveness more or equally to your peers?", DEFAULT_OPTIONS),
        ("How important is it to you to learn and use every mechanic/rule?", PERCENTAGE_OPTIONS),
        ("What percentage of the time do you enjoy breaking down mechanics or min-maxing?", PERCENTAGE_OPTIONS),
    ],
    # Order matters: actual, desired, available
    PLAY_POTENTIAL_AXIS: [
        ("How often do you currently play TTRPGs?", FREQUENCY_OPTIONS),
        ("How often would you ideally want to play?", FREQUENCY_OPTIONS),
        ("How available are you for long-term campaigns?", FREQUENCY_OPTIONS),
    ],
}

# =============================================================================
# CLASSIC VARIANT (11 axes)
# =============================================================================

CLASSIC_AXES = [
    "Storytelling",
    "Roleplay Immersion",
    "Tactical Combat",
    "Puzzle Solving",
    "Character Morality",
    "Player vs Character Separation",
    "Collaborative Play",
    "Improvisation",
    "World Interaction",
    "Game Mechanics Focus",
    "Play Frequency",
]

CLASSIC_TEMPLATES: Dict[str, List[str]] = {
    "Storytelling": [
        "How important is character-driven storytelling to you?",
        "Do you prefer long narrative arcs?",
        "Do you enjoy character backstories influencing present events?",
    ],
    "Roleplay Immersion": [
        "Do you fully immerse yourself in your character?",
        "Do you write journals or backgrounds for your character?",
        "Do you stay in character while speaking and acting?",
    ],
    "Tactical Combat": [
        "How much do you enjoy tactical combat?",
        "Do you track bonuses and rules closely?",
        "Do you prefer complex battle maps over theatre of the mind?",
    ],
    "Puzzle Solving": [
        "Do you enjoy riddles and puzzles in your sessions?",
        "Do you look for hidden clues or coded messages?",
        "Do you like solving mysteries as part of the narrative?",
    ],
    "Character Morality": [
        "Do you play morally consistent characters?",
        "Would you refuse actions against your real-life ethics?",
        "Do you play characters with a personal code of honor?",
    ],
    "Player vs Character Separation": [
        "Do you act differently than your character would?",
        "Do you roleplay worldviews unlike your own?",
        "Do you experiment with different personalities?",
    ],
    "Collaborative Play": [
        "Do you build stories with other players?",
        "Do you initiate roleplay with party members?",
        "Do you care about party dynamics and cohesion?",
    ],
    "Improvisation": [
        "Do you improvise in-character during sessions?",
        "Do you enjoy reacting to unexpected story events?",
        "Do you create spontaneous scenes or dialogue?",
    ],
    "World Interaction": [
        "Do you explore the lore of the setting deeply?",
        "Do you ask questions about worldbuilding details?",
        "Do you contribute to the world as a player?",
    ],
    "Game Mechanics Focus": [
        "Do you optimize builds for effectiveness?",
        "Do you learn the rules in detail for every system?",
        "Do you enjoy breaking down mechanics or min-maxing?",
    ],
    "Play Frequency": [
        "How often do you currently play TTRPGs?",
        "How often would you ideally want to play?",
        "How available are you for long-term campaigns?",
    ],
}

# =============================================================================
# CATALOG CONSTRUCTION
# =============================================================================

def build_questions(
    templates: Dict[str, List[Tuple[str, Tuple[str, ...]]]],
    id_stride: int,
) -> List[Question]:
    """
    Flatten per-axis templates into the ordered question list.

    Args:
        templates: axis -> list of (text, options), in asking order
        id_stride: id spacing between consecutive axes

    Returns:
        Questions in catalog order, ids = axis_position * id_stride + j + 1
    """
    questions = []
    for i, (axis, items) in enumerate(templates.items()):
        for j, (text, options) in enumerate(items):
            questions.append(
                Question(
                    id=i * id_stride + j + 1,
                    text=text,
                    axis=axis,
                    options=tuple(options),
                    label=f"{axis} #{j + 1}",
                )
            )
    return questions


def validate_catalog(axes: List[str], questions: List[Question]) -> None:
    """Raise ValueError if axes and questions are inconsistent."""
    if len(set(axes)) != len(axes):
        raise ValueError(f"Duplicate axis in axis list: {axes}")

    known = set(axes)
    seen_ids = set()
    for q in questions:
        if q.axis not in known:
            raise ValueError(f"Question {q.id} references unknown axis '{q.axis}'")
        if not q.options:
            raise ValueError(f"Question {q.id} has no options")
        if q.id in seen_ids:
            raise ValueError(f"Duplicate question id: {q.id}")
        seen_ids.add(q.id)


def _make_variant(name, title, axes, questions, scoring_rules=None) -> QuizVariant:
    validate_catalog(axes, questions)
    return QuizVariant(
        name=name,
        title=title,
        axes=tuple(axes),
        questions=tuple(questions),
        scoring_rules=dict(scoring_rules or {}),
    )


POTENTIAL_VARIANT = _make_variant(
    "potential",
    "TTRPG Player Profile Quiz",
    POTENTIAL_AXES,
    build_questions(POTENTIAL_TEMPLATES, id_stride=10),
    scoring_rules={PLAY_POTENTIAL_AXIS: AVAILABILITY_RULE},
)

CLASSIC_VARIANT = _make_variant(
    "classic",
    "Your TTRPG Player Profile",
    CLASSIC_AXES,
    build_questions(
        {axis: [(text, CLASSIC_OPTIONS) for text in texts] for axis, texts in CLASSIC_TEMPLATES.items()},
        id_stride=3,
    ),
)

VARIANTS: Dict[str, QuizVariant] = {
    POTENTIAL_VARIANT.name: POTENTIAL_VARIANT,
    CLASSIC_VARIANT.name: CLASSIC_VARIANT,
}

DEFAULT_VARIANT = POTENTIAL_VARIANT.name

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_variant(name: str = DEFAULT_VARIANT) -> QuizVariant:
    """Look up a registered variant by name."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(f"Unknown quiz variant '{name}'. Expected one of: {list_variants()}") from None


def list_variants() -> List[str]:
    return list(VARIANTS)


def get_questions(name: str = DEFAULT_VARIANT) -> List[Question]:
    """Get the ordered question list of a variant."""
    return list(get_variant(name).questions)


def create_catalog_dataframe(name: str = DEFAULT_VARIANT) -> pd.DataFrame:
    """Create a DataFrame view of a variant's catalog, indexed by question id."""
    variant = get_variant(name)
    rows = [
        {
            "Id": q.id,
            "Axis": q.axis,
            "Question": q.text,
            "Options": len(q.options),
            "Rule": variant.rule_for(q.axis),
        }
        for q in variant.questions
    ]
    return pd.DataFrame(rows).set_index("Id")


if __name__ == "__main__":
    for variant_name in list_variants():
        print(f"\n{variant_name}:")
        print(create_catalog_dataframe(variant_name))
