"""
Mindset Program Content
Static quiz question bank and 7-day module catalog.

Option strings are the contract surface of the persona classifier: the
classifier matches substrings of these exact strings, so edits here
change persona assignment.
"""

from typing import Dict, List

from .models import DayPlan, MindsetModule, QuizQuestion

# ============================================================================
# QUIZ QUESTIONS
# ============================================================================

QUIZ_QUESTIONS: List[QuizQuestion] = [
    QuizQuestion(
        id="feeling",
        text="When your skin flares, what do you feel first?",
        options=["Ashamed", "Angry", "Anxious", "Disconnected"],
    ),
    QuizQuestion(
        id="hiding",
        text="How often do you hide your skin?",
        options=["Daily", "Weekly", "Rarely", "Never"],
    ),
    QuizQuestion(
        id="thought",
        text="Which thought feels most familiar?",
        options=["I'll never fix this", "Why me?", "I hate how I look", "I can't control this"],
    ),
    QuizQuestion(
        id="inner_voice",
        text="Describe your inner voice:",
        options=["Harsh / Judgmental", "Overwhelmed", "Lost", "Trying to be hopeful"],
    ),
    QuizQuestion(
        id="belief",
        text="Do you believe you can heal?",
        options=["No", "Maybe", "I hope so", "Absolutely"],
    ),
    QuizQuestion(
        id="social",
        text="How does your skin affect your social life?",
        options=["I cancel plans often", "I go but I hide", "I feel awkward", "It doesn't stop me"],
    ),
    QuizQuestion(
        id="mirror",
        text="How often do you check your skin in the mirror?",
        options=[
            "Constantly / Obsessively",
            "Morning and Night",
            "I avoid mirrors entirely",
            "Only when treating it",
        ],
    ),
    QuizQuestion(
        id="sleep_anxiety",
        text="What keeps you awake at night?",
        options=["The Itch", "Worrying about tomorrow's skin", "General life stress", "Nothing, I sleep well"],
    ),
    QuizQuestion(
        id="control",
        text="Do you feel in control of your body?",
        options=["Completely", "Sometimes", "My skin controls me", "I am fighting it"],
    ),
    QuizQuestion(
        id="intimacy",
        text="Does your skin affect intimacy or dating?",
        options=[
            "I pull away / Avoid touch",
            "I feel unlovable",
            "It makes me self-conscious",
            "No impact",
        ],
    ),
    QuizQuestion(
        id="focus",
        text="How does the itch affect your work/school?",
        options=["I can't focus at all", "It's distracting", "I push through it", "No issue"],
    ),
    QuizQuestion(
        id="soothing",
        text="What is your go-to soothing method when stressed?",
        options=["Scratching until it hurts", "Scalding hot water", "Applying cream", "Distracting myself"],
    ),
    QuizQuestion(
        id="comparison",
        text="Do you compare your skin to others?",
        options=["Always / Triggers envy", "Only on bad days", "Sometimes", "Never"],
    ),
    QuizQuestion(
        id="trigger_awareness",
        text="What seems to trigger a flare most?",
        options=["Emotional Stress", "Food / Diet", "Weather / Heat", "I have no idea"],
    ),
    QuizQuestion(
        id="motivation",
        text="Why do you want to heal *now*?",
        options=[
            "I have a big event coming",
            "I'm exhausted by the pain",
            "For my family/partner",
            "To feel free again",
        ],
    ),
]

QUIZ_OPTIONS: Dict[str, List[str]] = {q.id: q.options for q in QUIZ_QUESTIONS}


# ============================================================================
# MODULES
# ============================================================================

def _days(*plans) -> List[DayPlan]:
    return [DayPlan(title=t, morning=m, evening=e) for t, m, e in plans]


MINDSET_MODULES: Dict[str, MindsetModule] = {
    m.id: m
    for m in [
        MindsetModule(
            id="rewire-itch",
            title="Rewire the Itch Loop",
            description="Break the mental feedback loop between stress, negative thoughts, and the itch-scratch cycle.",
            aim="Stop subconscious scratching",
            tags=["NLP", "Habit Reversal", "CBT"],
            audio="Reset Skin Identity",
            days=_days(
                ("Awareness", "The Pause Button", "Trigger Log"),
                ("Safety Signals", "Speak Safety", "Cooling Down"),
                ("Language Shift", "Reframe the Flare", "Gratitude Scan"),
                ("Hand Distraction", "Busy Hands", "Progressive Release"),
                ("Visual Healing", "The Cool Light", "Forgiveness"),
                ("Environment", "Friction Check", "Sanctuary Setup"),
                ("New Identity", "The Healer", "The Contract"),
            ),
        ),
        MindsetModule(
            id="attract-healed",
            title="Attract the Healed You",
            description=(
                "Shift from a mindset of 'fixing a problem' to 'embodying health'. "
                "Uses visualization to pull you out of the 'stuck' mindset."
            ),
            aim="Boost hope & manifestation",
            tags=["Visualization", "Manifestation", "Hope"],
            audio="Future Self Embodiment",
            days=_days(
                ("The Vision", "Future Scripting", "Mirror Work"),
                ("Sensory Shift", "Feel the Smoothness", "The Beach Walk"),
                ("Act As If", "Wardrobe Win", "Social Confidence"),
                ("Release Doubt", "Burn the Old Story", "Sleep Expectation"),
                ("Gratitude", "Body Thanks", "Review Wins"),
                ("Vibrational Rise", "Power Pose", "Self-Love Letter"),
                ("Anchor", "The Anchor", "Release"),
            ),
        ),
        MindsetModule(
            id="stress-safety",
            title="From Stress to Safety",
            description=(
                "Move your body from Sympathetic (Fight/Flight) to Parasympathetic "
                "(Rest/Digest) to lower cortisol spikes."
            ),
            aim="Calm the nervous system",
            tags=["Somatic", "Breathwork", "Vagus Nerve"],
            audio="Vagus Nerve Calm",
            days=_days(
                ("The Breath", "Box Breathing", "Jaw Release"),
                ("Cold Reset", "Dive Reflex", "Digital Sunset"),
                ("Shake it Off", "Somatic Shaking", "Legs Up Wall"),
                ("Vocal Tone", "The Hum", "Silence"),
                ("Touch", "Self-Havening", "Weighted Blanket"),
                ("Nature", "Sky Gaze", "Grounding"),
                ("Integration", "Stress Audit", "Safety Anchor"),
            ),
        ),
        MindsetModule(
            id="rebuild-identity",
            title="Rebuild Skin Identity",
            description=(
                "Separate your self-worth from your skin barrier function. "
                "Ideal for those who hide their skin."
            ),
            aim="Build confidence & reduce shame",
            tags=["Confidence", "Self-Worth", "Exposure"],
            audio="Skin Confidence Primer",
            days=_days(
                ("Separation", "Who Am I?", "The Observer"),
                ("Exposure", "Show a Little", "Selfie Challenge"),
                ("Values", "Value Align", "Inner Child"),
                ("Boundaries", "The Script", "No Apology"),
                ("Confidence", "Posture Hack", "Compliment File"),
                ("Connection", "Reach Out", "Forgiveness"),
                ("Integration", "I Am More", "Freedom"),
            ),
        ),
        MindsetModule(
            id="release-battle",
            title="Release the Battle",
            description=(
                "Stop fighting your body. Start parenting it. Connect with the "
                "wounded parts of yourself that need safety."
            ),
            aim="Inner child healing",
            tags=["Inner Child", "Compassion", "Softening"],
            audio="Apology to Body",
            days=_days(
                ("Surrender", "Drop the Weapons", "Gentle Touch"),
                ("Listening", "Body Scan", "The Letter"),
                ("Nurture", "Comfort Food", "Nest"),
                ("Emotion", "Name It", "Cry it Out"),
                ("Play", "Play Time", "Soothing Audio"),
                ("Protection", "Say No", "Bubble"),
                ("Partnership", "Team Talk", "Peace Treaty"),
            ),
        ),
    ]
}
