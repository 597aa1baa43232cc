# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
JSON HTTP service exposing risk profiling, allocation, simulation,
rebalancing and instrument recommendations.

Environment:
    HOST, PORT: Bind address for ``python -m goal_planner.api``
    LOG_LEVEL: Logging level name. Default INFO.
    PLANNER_DEFAULT_SEED: Seed used when a simulate request names none
    PLANNER_SIMULATION_TIMEOUT: Seconds a simulation may run before it is
                                cancelled
    PLANNER_MAX_WORKERS: Worker threads per simulation
    PLANNER_MAX_TRIALS: Largest trial_count a simulate request may ask for
    PLANNER_MAX_MONTHS: Longest horizon in months a simulate request may ask for
"""

from __future__ import annotations

import logging
import math
import os
import time
from dataclasses import asdict
from datetime import date
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np
from flask import Flask, jsonify, request

from ..allocation import AllocationMix, AllocationResolver
from ..config import (
    DEFAULT_ACCOUNT_TYPE,
    DEFAULT_DEVIATION_THRESHOLD,
    DEFAULT_TRIAL_COUNT,
    MAX_SERVICE_MONTHS,
    MAX_SERVICE_TRIAL_COUNT,
)
from ..errors import ArithmeticDomainError, CancelledError, InvalidInput, PlannerError
from ..goals import InvestmentGoal
from ..montecarlo import MonteCarloConfig, MonteCarloSimulator
from ..profiling import (
    BehavioralFactors,
    QuestionResponse,
    RISK_ASSESSMENT_QUESTIONS,
    RiskProfileCalculator,
    build_responses,
)
from ..rebalancing import RebalancingAlertGenerator
from ..recommendations import RecommendationGenerator

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8002"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEFAULT_SEED = int(os.getenv("PLANNER_DEFAULT_SEED", "42"))
SIMULATION_TIMEOUT = float(os.getenv("PLANNER_SIMULATION_TIMEOUT", "30"))
MAX_WORKERS = int(os.getenv("PLANNER_MAX_WORKERS", "1"))
MAX_TRIALS = int(os.getenv("PLANNER_MAX_TRIALS", str(MAX_SERVICE_TRIAL_COUNT)))
MAX_MONTHS = int(os.getenv("PLANNER_MAX_MONTHS", str(MAX_SERVICE_MONTHS)))

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)

calculator = RiskProfileCalculator()
resolver = AllocationResolver()
simulator = MonteCarloSimulator(config=MonteCarloConfig(max_workers=MAX_WORKERS))
alert_generator = RebalancingAlertGenerator()
recommendation_generator = RecommendationGenerator()

ERROR_STATUS = {
    InvalidInput: 400,
    ArithmeticDomainError: 400,
    CancelledError: 408,
}


def _number(payload: Mapping[str, Any], key: str, default: Optional[float] = None) -> float:
    value = payload.get(key, default)
    if value is None:
        raise InvalidInput(f"'{key}' is required")
    if isinstance(value, bool):
        raise InvalidInput(f"'{key}' must be a number", {key: value})
    number = None
    if isinstance(value, (int, float, str)):
        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError):
            pass
    if number is None:
        raise InvalidInput(f"'{key}' must be a number", {key: value})
    if not math.isfinite(number):
        raise InvalidInput(f"'{key}' must be a finite number", {key: str(value)})
    return number


def _integer(payload: Mapping[str, Any], key: str, default: Optional[int] = None) -> int:
    raw = payload.get(key, default)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    value = _number(payload, key, default)
    if value != int(value):
        raise InvalidInput(f"'{key}' must be a whole number", {key: value})
    return int(value)


def _object(payload: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    if not isinstance(value, dict):
        raise InvalidInput(f"'{key}' must be a JSON object")
    return value


def _date(payload: Mapping[str, Any], key: str) -> date:
    value = payload.get(key)
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise InvalidInput(f"'{key}' must be an ISO date (YYYY-MM-DD)", {key: value}) from None


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        raise InvalidInput("Request JSON body is required")
    if not isinstance(payload, dict):
        raise InvalidInput("Request JSON body must be an object")
    return payload


def _parse_responses(payload: Mapping[str, Any]) -> list:
    """Responses come either as bank answers or as explicit scored responses."""
    if "answers" in payload:
        answers = _object(payload, "answers")
        return build_responses({qid: _integer(answers, qid) for qid in answers})

    raw = payload.get("responses")
    if not isinstance(raw, list):
        raise InvalidInput("Provide 'answers' or a 'responses' list",
                           {"questions": [q.id for q in RISK_ASSESSMENT_QUESTIONS]})
    responses = []
    for item in raw:
        if not isinstance(item, dict):
            raise InvalidInput("Each response must be a JSON object")
        responses.append(QuestionResponse(
            question_id=str(item.get("question_id", "")),
            answer=item.get("answer"),
            sub_score=_number(item, "sub_score"),
            weight=_number(item, "weight"),
        ))
    return responses


def _parse_factors(payload: Mapping[str, Any]) -> BehavioralFactors:
    factors = _object(payload, "behavioral_factors")
    return BehavioralFactors(
        age=_number(factors, "age"),
        emergency_fund_ratio=_number(factors, "emergency_fund_ratio"),
        debt_to_income_ratio=_number(factors, "debt_to_income_ratio"),
        investment_experience_years=_number(factors, "investment_experience_years"),
        income_stability=_number(factors, "income_stability"),
        spending_volatility=_number(factors, "spending_volatility"),
    )


def _parse_goal(payload: Mapping[str, Any]) -> InvestmentGoal:
    goal = _object(payload, "goal")
    return InvestmentGoal(
        target_amount=_number(goal, "target_amount"),
        target_date=_date(goal, "target_date"),
        current_amount=_number(goal, "current_amount", 0),
        monthly_contribution=_number(goal, "monthly_contribution", 0),
        name=str(goal.get("name", "")),
        account_type=str(goal.get("account_type", DEFAULT_ACCOUNT_TYPE)),
    )


def _parse_allocation(payload: Mapping[str, Any], key: str) -> AllocationMix:
    weights = _object(payload, key)
    return AllocationMix.from_mapping({name: _number(weights, name) for name in weights})


def _resolve_allocation(payload: Mapping[str, Any]) -> AllocationMix:
    """Explicit allocation if given, else resolved from category and horizon."""
    if "allocation" in payload:
        return _parse_allocation(payload, "allocation")
    category = str(payload.get("risk_category", ""))
    if "goal" in payload:
        years = _parse_goal(payload).years_until(_date(payload, "now"))
    else:
        years = _number(payload, "years_to_goal")
    return resolver.resolve(category, years)


@app.errorhandler(PlannerError)
def handle_planner_error(error: PlannerError) -> Tuple[Any, int]:
    status = ERROR_STATUS.get(type(error), 400)
    logger.warning("%s on %s: %s", type(error).__name__, request.path, error.message)
    body = {"success": False}
    body.update(error.to_dict())
    return jsonify(body), status


@app.get("/health")
def health() -> Tuple[Any, int]:
    return jsonify({"ok": True, "service": "goal-planner-api"}), 200


@app.post("/planner/api/v1/risk-profile")
def risk_profile() -> Tuple[Any, int]:
    payload = _json_body()
    profile = calculator.calculate(_parse_responses(payload), _parse_factors(payload))
    return jsonify({"success": True, "risk_profile": asdict(profile)}), 200


@app.post("/planner/api/v1/allocation")
def allocation() -> Tuple[Any, int]:
    payload = _json_body()
    mix = _resolve_allocation(payload)
    return jsonify({"success": True, "allocation": mix.as_dict()}), 200


@app.post("/planner/api/v1/simulate")
def simulate() -> Tuple[Any, int]:
    payload = _json_body()
    mix = _resolve_allocation(payload)
    seed = _integer(payload, "seed", DEFAULT_SEED)
    if seed < 0:
        raise InvalidInput("'seed' cannot be negative", {"seed": seed})
    trial_count = _integer(payload, "trial_count", DEFAULT_TRIAL_COUNT)
    if trial_count > MAX_TRIALS:
        raise InvalidInput(f"'trial_count' cannot exceed {MAX_TRIALS}",
                           {"trial_count": trial_count})

    if "goal" in payload:
        goal = _parse_goal(payload)
        months_total = goal.months_until(_date(payload, "now"))
        contribution, initial, target = (goal.monthly_contribution, goal.current_amount,
                                         goal.target_amount)
    else:
        months_total = _integer(payload, "months_total")
        contribution = _number(payload, "monthly_contribution", 0)
        initial = _number(payload, "initial_investment", 0)
        target = _number(payload, "target_amount")
    if months_total > MAX_MONTHS:
        raise InvalidInput(f"Horizon cannot exceed {MAX_MONTHS} months",
                           {"months_total": months_total})

    result = simulator.run(
        mix,
        monthly_contribution=contribution,
        initial_investment=initial,
        months_total=months_total,
        target_amount=target,
        rng=np.random.default_rng(seed),
        trial_count=trial_count,
        deadline=time.monotonic() + SIMULATION_TIMEOUT,
    )
    return jsonify({
        "success": True,
        "seed": seed,
        "allocation": mix.as_dict(),
        "result": result.to_dict(),
    }), 200


@app.post("/planner/api/v1/rebalancing")
def rebalancing() -> Tuple[Any, int]:
    payload = _json_body()
    if "holdings" in payload:
        holdings = _object(payload, "holdings")
        current = AllocationMix.from_holdings({k: _number(holdings, k) for k in holdings})
    else:
        current = _parse_allocation(payload, "current")
    target = _resolve_allocation({**payload, "allocation": payload["target"]}
                                 if "target" in payload else payload)
    threshold = _number(payload, "deviation_threshold", DEFAULT_DEVIATION_THRESHOLD)
    alerts = alert_generator.generate(current, target, threshold)
    return jsonify({
        "success": True,
        "current": current.as_dict(),
        "target": target.as_dict(),
        "alerts": [alert.to_dict() for alert in alerts],
    }), 200


@app.post("/planner/api/v1/recommendations")
def recommendations() -> Tuple[Any, int]:
    payload = _json_body()
    goal = _parse_goal(payload)
    mix = _resolve_allocation(payload)
    recs = recommendation_generator.generate(goal, mix, _date(payload, "now"))
    return jsonify({
        "success": True,
        "account_type": goal.account_type,
        "allocation": mix.as_dict(),
        "recommendations": [rec.to_dict() for rec in recs],
    }), 200


if __name__ == "__main__":
    app.run(host=HOST, port=PORT, debug=False)
