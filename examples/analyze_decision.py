"""Example: Evaluate a single decision end to end."""

import json

from decision_intel import DecisionEngine, Option, default_priorities
from decision_intel.core.patterns import detected_patterns


def main():
    """Score two options, then print the full analysis."""

    print("Initializing decision engine...")
    engine = DecisionEngine.from_config('config.yaml')

    decision = "Should I switch jobs?"
    priorities = default_priorities()
    options = [
        Option(
            id='stay',
            name='Stay at current company',
            emotional_text="It feels safe and comfortable, but I'm worried I'll regret not growing.",
            scores={'money': 3, 'happiness': 3, 'growth': 2, 'stability': 5, 'risk': 2}
        ),
        Option(
            id='switch',
            name='Join the startup',
            emotional_text="I'm excited and can't wait, though it's risky and I'm a bit anxious.",
            scores={'money': 4, 'happiness': 4, 'growth': 5, 'stability': 2, 'risk': 4}
        ),
    ]

    print(f"\nDecision: {decision}")
    print("-" * 60)

    evaluation = engine.evaluate(decision, options, priorities)

    print(f"\n{'='*60}")
    print("RANKING")
    print(f"{'='*60}")
    for scored in evaluation.scoring.scored_options:
        percent = evaluation.scoring.percentage(scored)
        print(f"{scored.option.name:<28} {scored.total_score:>3}/{evaluation.scoring.max_possible} ({percent}%)")
        for contribution in scored.top_contributions():
            print(f"    {contribution.priority.label:<20} {contribution.weighted}")
    print(f"\n{evaluation.recommendation}")

    print(f"\n{'='*60}")
    print("EMOTIONS")
    print(f"{'='*60}")
    for analysis in evaluation.emotional_analyses:
        found = ', '.join(f"{e.label} {e.intensity:.0%}" for e in analysis.emotions) or 'none'
        print(f"{analysis.option_name}: {found}")

    print(f"\n{'='*60}")
    print("COGNITIVE PATTERNS")
    print(f"{'='*60}")
    for pattern in detected_patterns(evaluation.patterns):
        print(f"• {pattern.label}: {pattern.description}")
    print(f"\n{evaluation.emotional_insight}")

    print(f"\n{'='*60}")
    print("DEVIL'S ADVOCATE")
    print(f"{'='*60}")
    for question in evaluation.questions:
        print(f"[{question.category.value}] {question.question}")

    output_path = 'analysis.json'
    with open(output_path, 'w') as f:
        json.dump(evaluation.to_dict(), f, indent=2)

    print(f"\n\nFull analysis saved to: {output_path}")


if __name__ == '__main__':
    main()
