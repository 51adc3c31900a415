"""
Game Configuration Constants Module

All ranking, hint and autocorrect parameters of the game are centralized
here so they can be tuned without touching the engine.
"""

import os
from typing import Dict, Final, Tuple

# Hints allowed per game
MAX_HINTS: Final[int] = 3

# Worst rank a recognized word can receive
MAX_RANK: Final[int] = 2000

# Common words without a precise rank get a random rank in this closed range
GENERIC_RANK_RANGE: Final[Tuple[int, int]] = (1500, 1999)

# Added to a word's rank when it is only ranked under another target
CROSS_TARGET_PENALTY: Final[int] = 500

# Hint heuristic: opening range when nothing has been guessed yet,
# and the range used once the player is within CLOSE_RANK_THRESHOLD
HINT_OPENING_RANGE: Final[Tuple[int, int]] = (50, 99)
HINT_CLOSE_RANGE: Final[Tuple[int, int]] = (2, 5)
CLOSE_RANK_THRESHOLD: Final[int] = 10

DEFAULT_WORDS_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data', 'words.json'
)

# Irregular forms and domain vocabulary mapped to their ranked base form.
# Looked up before any suffix rule.
KNOWN_VARIANTS: Final[Dict[str, str]] = {
    'joints': 'joint',
    'bones': 'bone',
    'tendons': 'tendon',
    'steroids': 'steroid',
    'antibodies': 'antibody',
    'biopsies': 'biopsy',
    'diagnoses': 'diagnosis',
    'infusions': 'infusion',
    'clinics': 'clinic',
    'pagers': 'pager',
    'coffees': 'coffee',
    'flares': 'flare',
    'rashes': 'rash',
    'ulcers': 'ulcer',
    'symptoms': 'symptom',
    'treatments': 'treatment',
    'medications': 'medication',
    'injections': 'injection',
    'patients': 'patient',
    'doctors': 'doctor',
    'hospitals': 'hospital',
    'diseases': 'disease',
    'conditions': 'condition',
    'autoimmunity': 'autoimmune',
    'inflammatory': 'inflammation',
    'arthritic': 'arthritis',
    'inflamed': 'inflammation',
    'swells': 'swollen',
    'swell': 'swollen',
    'swelling': 'swollen',
    'fatigued': 'fatigue',
    'tiredness': 'tired',
    'exhausted': 'tired',
    'sleepy': 'tired',
    'diagnosed': 'diagnosis',
    'diagnosing': 'diagnosis',
    'treating': 'treatment',
    'treated': 'treatment',
}
