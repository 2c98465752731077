"""Tests for cognitive pattern detection."""

import pytest
from decision_intel.core.emotions import analyze_option_emotions
from decision_intel.core.patterns import (
    detect_cognitive_patterns,
    detected_patterns,
    get_emotional_insight,
)
from decision_intel.models import DetectedEmotion, EmotionalAnalysis, EmotionType, Option


def analysis(option_id, **intensities):
    """Build an emotional analysis from emotion name -> intensity."""
    emotions = sorted(
        (DetectedEmotion(EmotionType(name), name.title(), value) for name, value in intensities.items()),
        key=lambda e: e.intensity, reverse=True
    )
    return EmotionalAnalysis(option_id, option_id.upper(), emotions, emotions[0] if emotions else None)


@pytest.fixture
def options():
    """Two bare options."""
    return [Option('win', 'Winner'), Option('other', 'Other')]


def flags(patterns):
    return {p.id: p.detected for p in patterns}


def test_catalog_always_complete(options):
    """Test all four patterns are returned, undetected ones included."""
    patterns = detect_cognitive_patterns(options, [analysis('win'), analysis('other')], 'win')

    assert [p.id for p in patterns] == ['fear-avoidance', 'excitement-bias', 'comfort-bias', 'guilt-driven']
    assert not any(p.detected for p in patterns)
    assert all(p.label and p.description for p in patterns)


def test_fear_avoidance(options):
    """Test strong fear elsewhere with a calm winner flags avoidance."""
    patterns = detect_cognitive_patterns(options, [analysis('win'), analysis('other', fear=0.7)], 'win')

    assert flags(patterns)['fear-avoidance'] is True


def test_fear_avoidance_needs_calm_winner(options):
    """Test notable fear in the winner suppresses avoidance."""
    analyses = [analysis('win', fear=1 / 3), analysis('other', fear=2 / 3)]

    assert flags(detect_cognitive_patterns(options, analyses, 'win'))['fear-avoidance'] is False

    analyses = [analysis('win', fear=0.3), analysis('other', fear=2 / 3)]
    assert flags(detect_cognitive_patterns(options, analyses, 'win'))['fear-avoidance'] is True


def test_fear_threshold_is_strict(options):
    """Test fear of exactly 0.5 elsewhere is not enough."""
    analyses = [analysis('win'), analysis('other', fear=0.5)]

    assert flags(detect_cognitive_patterns(options, analyses, 'win'))['fear-avoidance'] is False


def test_excitement_bias(options):
    """Test strong excitement in the winner."""
    strong = [analysis('win', excitement=2 / 3), analysis('other')]
    weak = [analysis('win', excitement=1 / 3), analysis('other')]
    elsewhere = [analysis('win'), analysis('other', excitement=1.0)]

    assert flags(detect_cognitive_patterns(options, strong, 'win'))['excitement-bias'] is True
    assert flags(detect_cognitive_patterns(options, weak, 'win'))['excitement-bias'] is False
    assert flags(detect_cognitive_patterns(options, elsewhere, 'win'))['excitement-bias'] is False


def test_comfort_bias(options):
    """Test relief in the winner combined with fear elsewhere."""
    with_fear = [analysis('win', relief=1 / 3), analysis('other', fear=2 / 3)]
    without_fear = [analysis('win', relief=1.0), analysis('other', fear=1 / 3)]

    assert flags(detect_cognitive_patterns(options, with_fear, 'win'))['comfort-bias'] is True
    assert flags(detect_cognitive_patterns(options, without_fear, 'win'))['comfort-bias'] is False


def test_guilt_anywhere(options):
    """Test guilt in any option, not only the winner."""
    in_other = [analysis('win'), analysis('other', guilt=1 / 3)]
    too_weak = [analysis('win', guilt=0.3), analysis('other')]

    assert flags(detect_cognitive_patterns(options, in_other, 'win'))['guilt-driven'] is True
    assert flags(detect_cognitive_patterns(options, too_weak, 'win'))['guilt-driven'] is False


def test_from_reflection_text():
    """Test patterns computed from real reflections."""
    options = [
        Option('stay', 'Stay', emotional_text="It's safe and comfortable"),
        Option('go', 'Go', emotional_text="I'm scared and anxious about it"),
    ]
    analyses = analyze_option_emotions(options)

    fired = detected_patterns(detect_cognitive_patterns(options, analyses, 'stay'))

    assert [p.id for p in fired] == ['fear-avoidance', 'comfort-bias']


def test_emotional_insight(options):
    """Test winner insight plus the first detected pattern."""
    analyses = [analysis('win', excitement=1.0), analysis('other', fear=1.0)]
    patterns = detect_cognitive_patterns(options, analyses, 'win')

    insight = get_emotional_insight(analyses[0], patterns)

    assert insight.startswith('You feel genuine excitement about "WIN."')
    assert insight.endswith(patterns[0].description)


def test_emotional_insight_without_signal(options):
    """Test no dominant emotion and no pattern gives empty insight."""
    patterns = detect_cognitive_patterns(options, [analysis('win'), analysis('other')], 'win')

    assert get_emotional_insight(analysis('win'), patterns) == ''
    assert get_emotional_insight(None, patterns) == ''


@pytest.mark.parametrize('emotion', [e.value for e in EmotionType])
def test_emotional_insight_every_emotion(emotion):
    """Test every emotion type has winner text."""
    winner = analysis('win', **{emotion: 1.0})
    assert 'WIN' in get_emotional_insight(winner, [])
