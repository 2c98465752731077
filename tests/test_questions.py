"""Tests for devil's-advocate question generation."""

import pytest
from decision_intel.generation.questions import MAX_QUESTIONS, generate_devils_advocate_questions
from decision_intel.models import Option, QuestionCategory


@pytest.fixture
def options():
    """Three options for a housing decision."""
    return [
        Option('rent', 'Keep renting'),
        Option('buy', 'Buy a flat'),
        Option('parents', 'Move back home'),
    ]


def categories(questions):
    return [q.category for q in questions]


def test_two_options_cover_every_category(options):
    """Test the standard sequence with no financial cue."""
    questions = generate_devils_advocate_questions("Where should I live?", options[:2], options[1])

    assert len(questions) == MAX_QUESTIONS
    assert categories(questions) == [
        QuestionCategory.ASSUMPTIONS,
        QuestionCategory.RISKS,
        QuestionCategory.RISKS,
        QuestionCategory.ALTERNATIVES,
        QuestionCategory.ALTERNATIVES,
        QuestionCategory.LONG_TERM,
    ]
    assert set(categories(questions)) == set(QuestionCategory)


def test_questions_name_the_winner(options):
    """Test templates are filled with the winner's name."""
    questions = generate_devils_advocate_questions("Where should I live?", options[:2], options[1])

    assert questions[0].question == 'What evidence do you have that "Buy a flat" will actually work out as planned?'
    assert questions[0].icon == 'lightbulb'
    assert '"Buy a flat"' in questions[1].question


def test_financial_cue_adds_assumption(options):
    """Test money-related decisions get the financial assumption question."""
    questions = generate_devils_advocate_questions("Is the higher salary worth it?", options[:2], options[0])

    assert len(questions) == MAX_QUESTIONS
    assert questions[1].category is QuestionCategory.ASSUMPTIONS
    assert questions[1].icon == 'alert-triangle'
    assert 'financial situation' in questions[1].question
    # Truncation drops the long-term questions
    assert QuestionCategory.LONG_TERM not in categories(questions)


def test_alternatives_name_all_other_options(options):
    """Test the alternatives question lists every non-winner."""
    questions = generate_devils_advocate_questions("Where should I live?", options, options[0])

    alternatives = [q for q in questions if q.icon == 'git-branch']
    assert len(alternatives) == 1
    assert alternatives[0].question.startswith(
        'What would need to be true for Buy a flat, Move back home to actually be better than "Keep renting"?'
    )


def test_single_option_skips_named_alternatives(options):
    """Test no named alternatives question without other options."""
    questions = generate_devils_advocate_questions("Where should I live?", options[:1], options[0])

    assert len(questions) == MAX_QUESTIONS
    assert 'git-branch' not in [q.icon for q in questions]
    assert [q.icon for q in questions] == ['lightbulb', 'shield', 'eye-off', 'plus-circle', 'clock', 'trending-up']


def test_serialization(options):
    """Test category values in the serialized form."""
    questions = generate_devils_advocate_questions("Where should I live?", options[:1], options[0])

    assert questions[-1].to_dict()['category'] == 'long-term'
