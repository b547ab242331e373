from typing import Dict, List

from ..engine.models import Achievement, GuessResult, HintResult


def format_achievements(achievements: List[Achievement]) -> str:
    """List every achievement, marking the unlocked ones."""
    lines = ["", "Achievements:"]
    for achievement in achievements:
        status = "Achieved! " if achievement.achieved else ""
        lines.append(f"- {achievement.name}: {status}({achievement.description})")
    lines.append("")
    return "\n".join(lines)


def format_unlocked(achievement: Achievement) -> str:
    return f"{achievement.cheer} You earned the achievement: {achievement.name}!"


def format_hint(hint: HintResult) -> str:
    """Describe a hint and the cost deducted for it."""
    if hint.kind == "first_letter":
        reveal = f"First letter: {hint.letter}"
    elif hint.kind == "length":
        reveal = f"Word length: {hint.length} letters."
    else:
        reveal = f"Revealed letter at position {hint.index + 1}: {hint.letter}"
    return f"{reveal}\nHint cost deducted. Current score: {hint.score}"


def format_guess_result(result: GuessResult) -> str:
    """Feedback printed after a guess."""
    if result.status == "correct":
        return (
            f"Correct! You earned {result.points} points "
            f"(including {result.combo_bonus} combo points)!\n"
            f"Current streak: {result.streak} | Max streak: {result.max_streak}"
        )

    lines = [f"Incorrect guess. Attempts left: {result.attempts_left}"]
    if result.status == "exhausted":
        lines.append(f'Game Over! The correct answer was "{result.answer}"')
    return "\n".join(lines)


def format_summary(state: Dict) -> str:
    """End-of-session summary built from GameSession.get_state()."""
    unlocked = sum(1 for achieved in state["achievements"].values() if achieved)
    return "\n".join([
        "=== Session Summary ===",
        f"Final score: {state['score']}",
        f"Highest score: {state['highest_score']}",
        f"Max streak: {state['max_streak']}",
        f"Rounds won: {state['rounds_won']}/{state['rounds_played']}",
        f"Achievements: {unlocked}/{len(state['achievements'])}",
    ])
