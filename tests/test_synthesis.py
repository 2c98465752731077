"""Tests for the decision intelligence report."""

import json

import pytest
from decision_intel.generation.synthesis import (
    DEFAULT_CON,
    DEFAULT_OUTCOME,
    DEFAULT_PRO,
    LIKELY_OUTCOMES,
    NO_BACKUP_OPTION,
    analyze_option_emotion_insight,
    generate_decision_intelligence_analysis,
)
from decision_intel.models import EmotionType, Option, default_priorities


@pytest.fixture
def priorities():
    """Default priorities."""
    return default_priorities()


@pytest.fixture
def options():
    """Three options with reflections and ratings."""
    return [
        Option('a', 'Startup', emotional_text="I love the opportunity but it's expensive and hard",
               scores={'money': 5, 'growth': 1, 'mystery': 4}),
        Option('b', 'Corporate', emotional_text='', scores={'money': 3, 'growth': 3}),
        Option('c', 'Sabbatical', emotional_text="I'm scared and worried"),
    ]


def test_situation_and_recommendation(options, priorities):
    """Test summary and recommendation name the decision and winner."""
    report = generate_decision_intelligence_analysis("Should I change my job?", options, priorities, options[0])

    assert report.situation_summary == (
        'You\'re deciding: "Should I change my job?". After evaluating your options against your '
        'priorities, "Startup" has emerged as the best fit.'
    )
    assert report.recommended_decision.option == 'Startup'
    assert 'across 5 priorities' in report.recommended_decision.reasoning


def test_backup_plan_is_first_non_winner(options, priorities):
    """Test the backup plan skips the winner."""
    report = generate_decision_intelligence_analysis("x", options, priorities, options[1])
    assert report.backup_plan.option == 'Startup'

    report = generate_decision_intelligence_analysis("x", options, priorities, options[0])
    assert report.backup_plan.option == 'Corporate'


def test_backup_plan_without_alternatives(options, priorities):
    """Test the placeholder when there is only one option."""
    report = generate_decision_intelligence_analysis("x", options[:1], priorities, options[0])

    assert report.backup_plan.option == NO_BACKUP_OPTION


def test_emotional_insight_with_intensity(priorities):
    """Test the winner's dominant emotion and rounded intensity."""
    winner = Option('w', 'Travel', emotional_text="I'm thrilled and excited")

    report = generate_decision_intelligence_analysis("x", [winner], priorities, winner)

    assert report.emotional_insight.startswith('Your feelings about "Travel" show excitement with 67% intensity.')
    assert "doesn't cloud your judgment" in report.emotional_insight


def test_emotional_insight_fear_and_calm(priorities):
    """Test fear wording and the no-emotion fallback."""
    fearful = Option('f', 'Surgery', emotional_text="I'm scared, afraid and anxious")
    calm = Option('c', 'Wait', emotional_text='Just a plan')

    fear_report = generate_decision_intelligence_analysis("x", [fearful], priorities, fearful)
    calm_report = generate_decision_intelligence_analysis("x", [calm], priorities, calm)

    assert 'show fear with 100% intensity' in fear_report.emotional_insight
    assert fear_report.emotional_insight.endswith('should be addressed before proceeding.')
    assert calm_report.emotional_insight.startswith('You appear to have a relatively calm')


def test_key_factors(options, priorities):
    """Test cue-driven factors come before the standing ones."""
    report = generate_decision_intelligence_analysis(
        "Can I afford to move in with my partner?", options, priorities, options[0])

    assert report.key_factors_and_constraints == [
        'Financial resources and budget',
        'Impact on relationships and family',
        'Your 5 key priorities',
        'Current personal circumstances',
        'Long-term goals and values',
    ]


def test_option_pros_and_cons(options, priorities):
    """Test reflection cues and ratings feed pros and cons."""
    report = generate_decision_intelligence_analysis("x", options, priorities, options[0])
    startup = report.options_analysis[0]

    assert startup.option == 'Startup'
    assert startup.pros == [
        'Strong positive emotional connection',
        'Growth potential',
        'Strong in Money',
        'Strong in mystery',
    ]
    assert startup.cons == [
        'Financial implications to consider',
        'Requires significant effort',
        'Weak in Growth',
    ]
    assert startup.likely_outcome == LIKELY_OUTCOMES[EmotionType.EXCITEMENT]


def test_option_defaults(options, priorities):
    """Test placeholders when nothing stands out."""
    report = generate_decision_intelligence_analysis("x", options, priorities, options[0])
    corporate = report.options_analysis[1]

    assert corporate.pros == [DEFAULT_PRO]
    assert corporate.cons == [DEFAULT_CON]
    assert corporate.likely_outcome == DEFAULT_OUTCOME


def test_options_keep_input_order(options, priorities):
    """Test every option is analysed in input order."""
    report = generate_decision_intelligence_analysis("x", options, priorities, options[2])

    assert [a.option for a in report.options_analysis] == ['Startup', 'Corporate', 'Sabbatical']
    assert report.options_analysis[2].cons == ['Potential risks or concerns']
    assert report.options_analysis[2].likely_outcome == LIKELY_OUTCOMES[EmotionType.FEAR]


def test_risks_for_career_decision(options, priorities):
    """Test opportunity cost names every other option."""
    report = generate_decision_intelligence_analysis("Should I change my job?", options, priorities, options[0])

    assert report.risks_and_tradeoffs == [
        'Choosing "Startup" means not pursuing Corporate or Sabbatical',
        'Career decisions have long-term impact and are not easily reversible',
        'Opportunity cost - time spent on this cannot be spent elsewhere',
        'Plans may need adjustment based on new information',
        'External factors outside your control may affect outcomes',
    ]


def test_risks_for_financial_decision(options, priorities):
    """Test financial cue adds market risks."""
    report = generate_decision_intelligence_analysis("Where should I invest?", options, priorities, options[0])

    assert 'Financial investments carry risk of loss' in report.risks_and_tradeoffs
    assert 'Career decisions have long-term impact and are not easily reversible' not in report.risks_and_tradeoffs
    assert len(report.risks_and_tradeoffs) == 5


def test_next_steps(options, priorities):
    """Test generic, career and finance steps in order."""
    generic = generate_decision_intelligence_analysis("Where should I live?", options, priorities, options[0])
    both = generate_decision_intelligence_analysis(
        "Should I invest money in my career?", options, priorities, options[0])

    assert len(generic.immediate_next_steps) == 5
    assert generic.immediate_next_steps[0] == 'Create a detailed plan for implementing "Startup"'
    assert len(both.immediate_next_steps) == 9
    assert both.immediate_next_steps[3] == 'Update your resume or portfolio if applicable'
    assert both.immediate_next_steps[5] == 'Review your budget and financial situation'
    assert both.immediate_next_steps[-1] == 'Be prepared to adjust your approach as needed'


def test_report_serializes(options, priorities):
    """Test the report converts to JSON with all eight sections."""
    report = generate_decision_intelligence_analysis("x", options, priorities, options[0]).to_dict()

    assert set(report) == {
        'situationSummary', 'emotionalInsight', 'keyFactorsAndConstraints', 'optionsAnalysis',
        'risksAndTradeoffs', 'recommendedDecision', 'backupPlan', 'immediateNextSteps',
    }
    json.dumps(report)


def test_option_emotion_insight():
    """Test per-option insight with and without emotions."""
    guilty = analyze_option_emotion_insight(Option('g', 'Quit', emotional_text='I feel guilty and selfish'))
    calm = analyze_option_emotion_insight(Option('c', 'Stay', emotional_text=''))

    assert guilty.dominant_emotion.type is EmotionType.GUILT
    assert guilty.insight.startswith('There\'s some guilt tied to "Quit."')
    assert calm.emotions == []
    assert 'clear-headed perspective on "Stay."' in calm.insight


def test_risks_for_single_option(priorities):
    """Test the opportunity cost line without alternatives."""
    only = Option('o', 'Stay put')

    report = generate_decision_intelligence_analysis("Where should I live?", [only], priorities, only)

    assert report.risks_and_tradeoffs[0] == 'Choosing "Stay put" means not pursuing other options'
    assert len(report.risks_and_tradeoffs) == 3
