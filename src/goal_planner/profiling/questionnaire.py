# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Risk questionnaire responses and the standard question bank.

Each response carries a pre-mapped sub-score (0-100) and a weight. Weights
across a completed questionnaire sum to 1.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from ..errors import InvalidInput, require_finite

Answer = Union[str, int, float]


@dataclass(frozen=True)
class QuestionResponse:
    """A single answered question.

    Attributes:
        question_id: Identifier of the question answered
        answer: Selected answer as shown to the investor
        sub_score: Pre-mapped score of the answer, 0-100
        weight: Fraction of the questionnaire score carried by this question
    """
    question_id: str
    answer: Answer
    sub_score: float
    weight: float

    def __post_init__(self):
        require_finite(self.sub_score, "sub_score")
        require_finite(self.weight, "weight")
        if not 0 <= self.sub_score <= 100:
            raise InvalidInput(
                f"sub_score must be within 0-100: {self.sub_score}",
                {"question_id": self.question_id},
            )
        if self.weight < 0:
            raise InvalidInput(
                f"weight cannot be negative: {self.weight}",
                {"question_id": self.question_id},
            )


@dataclass(frozen=True)
class QuestionOption:
    value: int
    label: str
    score: float


@dataclass(frozen=True)
class RiskQuestion:
    """A multiple choice question with scored options."""
    id: str
    question: str
    options: Tuple[QuestionOption, ...]
    weight: float

    def option(self, value: int) -> QuestionOption:
        for opt in self.options:
            if opt.value == value:
                return opt
        raise InvalidInput(
            f"Question '{self.id}' has no option {value}",
            {"valid": [opt.value for opt in self.options]},
        )


RISK_ASSESSMENT_QUESTIONS: Tuple[RiskQuestion, ...] = (
    RiskQuestion(
        id="time_horizon",
        question="How long can you invest this money before needing it?",
        options=(
            QuestionOption(1, "Less than 1 year", 10),
            QuestionOption(2, "1-3 years", 20),
            QuestionOption(3, "3-5 years", 40),
            QuestionOption(4, "5-10 years", 60),
            QuestionOption(5, "10+ years", 80),
        ),
        weight=0.25,
    ),
    RiskQuestion(
        id="volatility_comfort",
        question="If your investment lost 20% in one month, you would:",
        options=(
            QuestionOption(1, "Sell immediately to prevent further losses", 10),
            QuestionOption(2, "Worry but hold onto the investment", 30),
            QuestionOption(3, "Hold and wait for recovery", 60),
            QuestionOption(4, "Buy more while prices are low", 80),
        ),
        weight=0.30,
    ),
    RiskQuestion(
        id="priority",
        question="Your investment priority is:",
        options=(
            QuestionOption(1, "Preserve capital, minimal risk", 20),
            QuestionOption(2, "Generate steady income", 40),
            QuestionOption(3, "Balance growth and stability", 60),
            QuestionOption(4, "Maximize long-term growth", 80),
        ),
        weight=0.25,
    ),
    RiskQuestion(
        id="experience",
        question="Your investment experience level:",
        options=(
            QuestionOption(1, "Beginner (0-2 years)", 30),
            QuestionOption(2, "Some experience (2-5 years)", 50),
            QuestionOption(3, "Experienced (5-10 years)", 70),
            QuestionOption(4, "Very experienced (10+ years)", 80),
        ),
        weight=0.20,
    ),
)

_QUESTIONS_BY_ID: Dict[str, RiskQuestion] = {q.id: q for q in RISK_ASSESSMENT_QUESTIONS}


def get_question(question_id: str) -> RiskQuestion:
    """Look up a question from the standard bank."""
    try:
        return _QUESTIONS_BY_ID[question_id]
    except KeyError:
        raise InvalidInput(
            f"Unknown question: {question_id}",
            {"known": sorted(_QUESTIONS_BY_ID)},
        ) from None


def build_response(question_id: str, option_value: int) -> QuestionResponse:
    """Map a selected option of a standard question to a scored response."""
    question = get_question(question_id)
    option = question.option(option_value)
    return QuestionResponse(
        question_id=question.id,
        answer=option.label,
        sub_score=option.score,
        weight=question.weight,
    )


def build_responses(answers: Mapping[str, int]) -> List[QuestionResponse]:
    """Map ``{question_id: option_value}`` answers to scored responses.

    Responses are returned in question bank order for the questions answered.
    """
    for question_id in answers:
        get_question(question_id)
    return [build_response(q.id, answers[q.id])
            for q in RISK_ASSESSMENT_QUESTIONS if q.id in answers]


def total_weight(responses: Iterable[QuestionResponse]) -> float:
    return sum(r.weight for r in responses)
