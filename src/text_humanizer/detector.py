"""Detector heurístico de texto generado por IA.

Combina cinco señales estadísticas del texto (variación en la longitud de las
frases, repetición léxica, frases típicas de IA, fluidez y mezcla de
registros) en un porcentaje "humano". Cuanto más alto es cada rasgo, más
humano parece el texto.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List

import numpy as np

MIN_TEXT_LENGTH = 50

AI_PHRASES = [
    "in conclusion",
    "to summarize",
    "it is important to note",
    "it is worth mentioning",
    "it should be noted",
    "as mentioned earlier",
    "as previously stated",
    "in other words",
]

CONTRACTION_PAIRS = [
    ("don't", "do not"),
    ("can't", "cannot"),
    ("won't", "will not"),
    ("it's", "it is"),
    ("i'm", "i am"),
    ("you're", "you are"),
]

TRANSITION_WORDS = [
    "however",
    "therefore",
    "furthermore",
    "moreover",
    "nevertheless",
    "thus",
    "consequently",
]

# About 1 in 5 sentences should carry a transition.
IDEAL_TRANSITION_RATIO = 0.2

FEATURE_WEIGHTS = {
    "repetitive_patterns": 0.25,
    "sentence_variability": 0.25,
    "unusual_phrasing": 0.2,
    "natural_flow": 0.2,
    "inconsistencies": 0.1,
}

SENTENCE_DELIMITERS = re.compile(r"[.!?]+")

_MIXED_FORM_PATTERNS = [
    (
        re.compile(rf"\b{re.escape(short)}\b", re.IGNORECASE),
        re.compile(rf"\b{re.escape(full)}\b", re.IGNORECASE),
    )
    for short, full in CONTRACTION_PAIRS
]


@dataclass(frozen=True)
class DetectionFeatures:
    repetitive_patterns: float
    sentence_variability: float
    unusual_phrasing: float
    natural_flow: float
    inconsistencies: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "repetitivePatterns": self.repetitive_patterns,
            "sentenceVariability": self.sentence_variability,
            "unusualPhrasing": self.unusual_phrasing,
            "naturalFlow": self.natural_flow,
            "inconsistencies": self.inconsistencies,
        }


@dataclass(frozen=True)
class DetectionResult:
    ai_score: int
    human_score: int
    features: DetectionFeatures

    def to_dict(self) -> Dict[str, Any]:
        return {
            "aiScore": self.ai_score,
            "humanScore": self.human_score,
            "features": self.features.to_dict(),
        }


def _neutral_result() -> DetectionResult:
    return DetectionResult(
        ai_score=50,
        human_score=50,
        features=DetectionFeatures(
            repetitive_patterns=0.5,
            sentence_variability=0.5,
            unusual_phrasing=0.5,
            natural_flow=0.5,
            inconsistencies=0.5,
        ),
    )


def _round_feature(value: float) -> float:
    """Redondeo a 2 decimales, mitades hacia arriba sobre el valor exacto."""

    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def split_sentences(text: str) -> List[str]:
    return [s for s in SENTENCE_DELIMITERS.split(text) if s.strip()]


def _sentence_variability(sentences: List[str]) -> float:
    if not sentences:
        return 0.0
    lengths = np.array([len(s.split()) for s in sentences], dtype="float64")
    # Sumas de izquierda a derecha; np.var suma por pares y cambia el redondeo.
    mean = float(np.cumsum(lengths)[-1]) / len(lengths)
    variance = float(np.cumsum((lengths - mean) ** 2)[-1]) / len(lengths)
    return min(variance / 10, 1.0)


def _word_repetition_ratio(text: str) -> float:
    words = text.split()
    if not words:
        return 0.0
    return 1 - len(set(words)) / len(words)


def _ai_phrase_score(text: str) -> float:
    count = sum(text.count(phrase) for phrase in AI_PHRASES)
    return min(count / 3, 1.0)


def _inconsistency_score(text: str) -> float:
    mixed = 0
    for short_re, full_re in _MIXED_FORM_PATTERNS:
        if short_re.search(text) and full_re.search(text):
            mixed += 1
    return min(mixed / 3, 1.0)


def _natural_flow_score(sentences: List[str]) -> float:
    starters = [s.split()[0].lower() for s in sentences if s.split()]
    if not starters:
        return 0.0
    starter_variety = len(set(starters)) / len(starters)

    transitions = 0
    for sentence in sentences:
        lowered = sentence.lower()
        for word in TRANSITION_WORDS:
            if word in lowered:
                transitions += 1

    actual_ratio = transitions / len(sentences)
    # Too many or too few transitions are both suspicious; not clamped.
    transition_score = 1 - abs(actual_ratio - IDEAL_TRANSITION_RATIO) * 2

    return starter_variety * 0.6 + transition_score * 0.4


def detect_ai_text(text: str) -> DetectionResult:
    """
    Puntúa un texto con las heurísticas locales.

    Nunca falla: textos de menos de MIN_TEXT_LENGTH caracteres (tras
    normalizar) devuelven el resultado neutro 50/50.
    """

    normalized = text.lower().strip()
    if len(normalized) < MIN_TEXT_LENGTH:
        return _neutral_result()

    sentences = split_sentences(normalized)

    raw = {
        "repetitive_patterns": 1 - _word_repetition_ratio(normalized),
        "sentence_variability": _sentence_variability(sentences),
        "unusual_phrasing": 1 - _ai_phrase_score(normalized),
        "natural_flow": _natural_flow_score(sentences),
        "inconsistencies": _inconsistency_score(normalized),
    }

    weighted = 0.0
    for name, weight in FEATURE_WEIGHTS.items():
        weighted += raw[name] * weight
    human_score = int(math.floor(weighted * 100 + 0.5))

    return DetectionResult(
        ai_score=100 - human_score,
        human_score=human_score,
        features=DetectionFeatures(
            **{name: _round_feature(value) for name, value in raw.items()}
        ),
    )
