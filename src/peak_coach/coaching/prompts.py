"""Prompt templates for the advanced coach."""

from typing import List, Sequence

from ..models import CoachingContext, ConversationTurn


# Conversation turns kept in a query prompt
HISTORY_TURNS = 4

COACH_SYSTEM = """You are Peak, a precise, data-driven personal health coach.
Be direct and specific. Base everything on the user's actual biometrics and
never invent readings that are not listed."""

MORNING_BRIEFING_USER = """## Today's Biometrics
{biometrics}

## Morning Log
{log}

Generate a morning briefing with:
1. One direct headline sentence about today's readiness
2. Two specific insights from the biometrics
3. Three concrete action items (numbered)
Be concise. Max 150 words total."""

CONVERSATION_USER = """## Current Biometrics
{biometrics}
{log}
{history}
User: {query}
Coach (max 80 words, direct and specific):"""


def format_biometrics(context: CoachingContext) -> str:
    """Render only the readings that are present."""
    readiness = context.readiness
    snapshot = context.snapshot
    lines = [f"Readiness score: {readiness.score}/10 ({readiness.label.value})"]

    if snapshot.hrv is not None:
        lines.append(f"HRV (SDNN): {snapshot.hrv.sdnn:.1f}ms")
    if snapshot.resting_heart_rate is not None:
        lines.append(f"Resting HR: {snapshot.resting_heart_rate} bpm")
    if snapshot.sleep is not None:
        sleep = snapshot.sleep
        lines.append(f"Sleep: {sleep.duration_hours:.1f}h total")
        lines.append(f"  Deep: {sleep.deep_minutes}min, REM: {sleep.rem_minutes}min")
    if snapshot.spo2 is not None:
        lines.append(f"SpO2: {snapshot.spo2:.1f}%")
    if snapshot.steps is not None:
        lines.append(f"Steps: {snapshot.steps}")

    return "\n".join(lines)


def format_log(context: CoachingContext) -> str:
    summary = context.log_summary
    line = f"Water: {summary.water_ml}ml | Caffeine: {summary.caffeine_mg}mg"
    if summary.supplements:
        line += f" | Supplements: {', '.join(summary.supplements)}"
    if summary.medications:
        line += f" | Medications: {', '.join(summary.medications)}"
    return line


def format_history(history: Sequence[ConversationTurn]) -> str:
    if not history:
        return ""
    recent: List[ConversationTurn] = list(history)[-HISTORY_TURNS:]
    lines = ["## Conversation"]
    lines.extend(f"{turn.role.value.title()}: {turn.content}" for turn in recent)
    return "\n".join(lines) + "\n"


def build_morning_prompt(context: CoachingContext) -> str:
    return MORNING_BRIEFING_USER.format(
        biometrics=format_biometrics(context),
        log=format_log(context),
    )


def build_conversation_prompt(context: CoachingContext) -> str:
    return CONVERSATION_USER.format(
        biometrics=format_biometrics(context),
        log=format_log(context),
        history=format_history(context.history),
        query=context.query or "",
    )
