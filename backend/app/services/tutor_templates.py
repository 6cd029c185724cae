"""Hand-authored study content for well-known topics."""
from __future__ import annotations

from typing import Any, Dict, List

TEMPLATE_LIBRARY: List[Dict[str, Any]] = [
    {
        "key": "photosynthesis",
        "topic": "Photosynthesis",
        "aliases": ["chloroplast", "calvin cycle", "light reaction"],
        "summary": (
            "Photosynthesis converts light into chemical energy, producing glucose for growth "
            "and oxygen as a byproduct."
        ),
        "explanation": [
            "Plants capture light energy through chlorophyll in chloroplasts.",
            "Light-dependent reactions generate ATP and NADPH in the thylakoid membranes.",
            "The Calvin cycle uses ATP and NADPH to fix carbon dioxide into organic molecules.",
            "The process links cellular energy, carbon cycles, and ecosystem oxygen balance.",
            "Understanding inputs, outputs, and location of each stage helps solve exam questions quickly.",
        ],
        "key_points": [
            "Light-dependent reactions occur in the thylakoid membranes.",
            "The Calvin cycle occurs in the chloroplast stroma.",
            "ATP and NADPH power carbon fixation into sugars.",
            "Oxygen is released mainly from water splitting.",
            "Photosynthesis links sunlight, carbon dioxide, and biomass production.",
            "Stage location and molecule flow are common assessment points.",
        ],
        "flashcards": [
            {"front": "Where do light-dependent reactions happen?", "back": "In the thylakoid membranes."},
            {"front": "What powers the Calvin cycle?", "back": "ATP and NADPH from light reactions."},
            {"front": "What is the main product plants store?", "back": "Glucose and related carbohydrates."},
            {"front": "Why is oxygen released?", "back": "Water is split during the light-dependent stage."},
            {"front": "Where does carbon fixation occur?", "back": "In the chloroplast stroma."},
        ],
        "quiz": [
            {
                "question": "Which structure hosts the light-dependent stage?",
                "options": ["Stroma", "Thylakoid membrane", "Nucleus", "Ribosome"],
                "correct_index": 1,
                "rationale": "Light reactions are membrane-based because electron transport chains are embedded there.",
            },
            {
                "question": "What is the direct role of ATP/NADPH in photosynthesis?",
                "options": [
                    "Store oxygen permanently",
                    "Build chlorophyll molecules",
                    "Fuel carbon fixation in the Calvin cycle",
                    "Transport water to roots",
                ],
                "correct_index": 2,
                "rationale": "ATP and NADPH provide energy and reducing power for sugar synthesis.",
            },
            {
                "question": "Why is photosynthesis vital to ecosystems?",
                "options": [
                    "It removes all atmospheric nitrogen",
                    "It converts light to stored chemical energy",
                    "It eliminates cellular respiration",
                    "It stops carbon movement",
                ],
                "correct_index": 1,
                "rationale": "It forms the base of food webs by producing usable organic matter.",
            },
        ],
    },
    {
        "key": "newton laws",
        "topic": "Newton's Laws of Motion",
        "aliases": ["inertia", "f = ma", "third law", "forces"],
        "summary": (
            "Newton's laws explain how forces affect motion, from inertia to acceleration "
            "and action-reaction pairs."
        ),
        "explanation": [
            "First law: motion state stays unchanged unless a net external force acts.",
            "Second law: acceleration scales with force and inversely with mass.",
            "Third law: forces appear in equal and opposite interaction pairs.",
            "Together, these laws connect free-body diagrams with measurable motion changes.",
            "Exam success depends on identifying the system and net force correctly.",
        ],
        "key_points": [
            "Inertia is resistance to change in motion.",
            "Net force determines acceleration direction and magnitude.",
            "Mass reduces acceleration for the same applied force.",
            "Action-reaction forces act on different objects.",
            "Free-body diagrams prevent force-accounting mistakes.",
            "Units and sign convention are critical in calculations.",
        ],
        "flashcards": [
            {
                "front": "State Newton's first law.",
                "back": "An object stays at rest or constant velocity unless net force acts.",
            },
            {"front": "Write Newton's second law.", "back": "F = m * a."},
            {"front": "What does Newton's third law state?", "back": "Every action has an equal and opposite reaction."},
            {"front": "Why use free-body diagrams?", "back": "To isolate forces acting on one object."},
            {"front": "If force increases with same mass, what changes?", "back": "Acceleration increases proportionally."},
        ],
        "quiz": [
            {
                "question": "Passengers move forward when a car brakes because of...",
                "options": ["Third law", "Inertia", "Gravitation", "Frictionless mass"],
                "correct_index": 1,
                "rationale": "Body motion tends to continue until another force changes it.",
            },
            {
                "question": "If force doubles and mass stays constant, acceleration...",
                "options": ["Halves", "Doubles", "Stays constant", "Becomes zero"],
                "correct_index": 1,
                "rationale": "From F = ma, acceleration is directly proportional to force.",
            },
            {
                "question": "Action-reaction force pairs act on...",
                "options": ["The same object", "Different objects", "Only moving objects", "Only rigid bodies"],
                "correct_index": 1,
                "rationale": "Each body exerts a force on the other body in the interaction.",
            },
        ],
    },
    {
        "key": "world war 2",
        "topic": "World War II",
        "aliases": ["ww2", "normandy", "stalingrad", "axis", "allies"],
        "summary": (
            "World War II was a global conflict shaped by alliances, industrial warfare, and key "
            "turning points between 1939 and 1945."
        ),
        "explanation": [
            "The conflict escalated after the invasion of Poland in 1939.",
            "Allied and Axis coalitions fought across Europe, Africa, and the Pacific.",
            "Strategic turning points shifted momentum in both theaters.",
            "Civilian impact and the Holocaust define major ethical and historical lessons.",
            "Chronology and causality are essential for strong historical analysis.",
        ],
        "key_points": [
            "Invasion of Poland in 1939 triggered wider war declarations.",
            "Allied and Axis blocs drove strategic decision-making.",
            "Major turning points changed military momentum by 1943-1944.",
            "Industrial and logistics capacity shaped campaign outcomes.",
            "Civilian casualties and genocide are central to interpretation.",
            "Post-war institutions emerged partly in response to this conflict.",
        ],
        "flashcards": [
            {"front": "What event marked the beginning of WW2 in Europe?", "back": "Germany's invasion of Poland in 1939."},
            {"front": "Name the two main opposing alliances.", "back": "Allied powers and Axis powers."},
            {"front": "Why are turning points important in WW2 study?", "back": "They explain when and why momentum shifted."},
            {"front": "What is a key humanitarian dimension of WW2?", "back": "The Holocaust and large-scale civilian loss."},
            {"front": "Why compare theaters of war?", "back": "Each theater had different strategy, logistics, and timelines."},
        ],
        "quiz": [
            {
                "question": "Which event triggered immediate British and French war declarations?",
                "options": ["Pearl Harbor", "Invasion of Poland", "Battle of the Bulge", "Yalta Conference"],
                "correct_index": 1,
                "rationale": "The September 1939 invasion drove direct escalation in Europe.",
            },
            {
                "question": "Why are logistics repeatedly emphasized in WW2 analysis?",
                "options": [
                    "They were irrelevant to campaign outcomes",
                    "Supply capacity shaped strategic feasibility",
                    "Only naval battles required logistics",
                    "Logistics replaced political goals",
                ],
                "correct_index": 1,
                "rationale": "Sustaining troops and equipment determined what operations were possible.",
            },
            {
                "question": "A strong WW2 essay should prioritize...",
                "options": [
                    "Memorizing dates only",
                    "Single-event explanations",
                    "Chronology plus cause-and-effect links",
                    "Ignoring social consequences",
                ],
                "correct_index": 2,
                "rationale": "High-quality analysis connects events, motivations, and consequences.",
            },
        ],
    },
]

# (explanation, key points, flashcards, quiz) caps per mode
MODE_LIMITS: Dict[str, Dict[str, int]] = {
    "explain": {"explanation": 5, "key_points": 6, "flashcards": 5, "quiz": 3},
    "flashcards": {"explanation": 3, "key_points": 7, "flashcards": 8, "quiz": 2},
    "quiz": {"explanation": 4, "key_points": 6, "flashcards": 4, "quiz": 6},
    "exam_prep": {"explanation": 6, "key_points": 8, "flashcards": 6, "quiz": 5},
}

DISTRACTOR_TEMPLATES = (
    "A secondary detail that is not central to this concept",
    "A statement that reverses the main principle",
    "A common misconception beginners often repeat",
    "A claim with no direct evidence in this topic",
)

STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "how", "i", "in", "is",
        "it", "its", "me", "my", "of", "on", "or", "our", "that", "the", "this", "to", "what",
        "when", "where", "which", "with", "you", "your",
    }
)
