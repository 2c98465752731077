"""Tests for lexicon matching and emotion detection."""

import pytest
from decision_intel.core.emotions import (
    EMOTION_LEXICON,
    EmotionDetector,
    analyze_option_emotions,
    detect_emotions,
)
from decision_intel.core.lexicon import Lexicon, contains_any, count_matches
from decision_intel.models import EmotionType, Option


@pytest.fixture
def lexicon_contract():
    """Representative phrases each category must keep."""
    return {
        'fear': ['scared', 'afraid', 'worried', 'anxious', 'risky', 'uncertain', 'doubt', 'what if'],
        'excitement': ['excited', 'thrilled', "can't wait", 'opportunity', 'passionate', 'adventure'],
        'guilt': ['guilty', 'selfish', 'should', 'regret', 'blame', 'letting down'],
        'relief': ['relief', 'free', 'peaceful', 'finally', 'comfortable', 'weight off'],
        'uncertainty': ['unsure', 'confused', 'torn', 'conflicted', 'maybe', 'undecided', 'not sure'],
    }


def test_lexicon_contract(lexicon_contract):
    """Test the emotion lexicon keeps its characteristic phrases, in category order."""
    assert list(EMOTION_LEXICON.categories) == [e.value for e in EmotionType]
    for category, phrases in lexicon_contract.items():
        for phrase in phrases:
            assert phrase in EMOTION_LEXICON.phrases(category), f"{phrase!r} missing from {category}"


def test_contains_any_is_case_insensitive_substring():
    """Test matching is substring containment regardless of case."""
    assert contains_any('Feeling CAREFREE today', ['free'])
    assert contains_any('excitement', ['excit'])
    assert not contains_any('', ['free'])
    assert not contains_any(None, ['free'])


def test_count_matches_counts_each_phrase_once():
    """Test repeated occurrences of one phrase count once."""
    assert count_matches('scared scared scared', ['scared', 'afraid']) == 1
    assert count_matches('scared and afraid', ['scared', 'afraid']) == 2


def test_first_match_follows_table_order():
    """Test routing picks the earliest category, not the best one."""
    lexicon = Lexicon({'a': ['alpha'], 'b': ['alpha', 'beta', 'gamma']})
    assert lexicon.first_match('alpha beta gamma') == 'a'
    assert lexicon.first_match('delta') is None


def test_empty_text():
    """Test blank text yields no emotions."""
    assert detect_emotions('') == []
    assert detect_emotions('   \n\t') == []
    assert detect_emotions(None) == []


def test_three_matches_give_full_intensity():
    """Test intensity caps at 1 after three matches."""
    emotions = detect_emotions("I'm scared and afraid and anxious")

    assert len(emotions) == 1
    assert emotions[0].type is EmotionType.FEAR
    assert emotions[0].label == 'Fear'
    assert emotions[0].intensity == 1.0


def test_single_match_intensity():
    """Test one match gives a third of full intensity."""
    emotions = detect_emotions("I'm thrilled")

    assert len(emotions) == 1
    assert emotions[0].type is EmotionType.EXCITEMENT
    assert emotions[0].intensity == pytest.approx(1 / 3)


def test_intensity_is_capped():
    """Test more than three matches stay at 1."""
    emotions = detect_emotions('scared, afraid, worried, anxious, nervous')
    assert emotions[0].intensity == 1.0


def test_substring_semantics():
    """Test keywords match inside longer words."""
    emotions = detect_emotions('I feel carefree')

    assert [e.type for e in emotions] == [EmotionType.RELIEF]


def test_case_insensitive():
    """Test upper-case text is detected."""
    assert detect_emotions('SCARED')[0].type is EmotionType.FEAR


def test_sorted_by_intensity():
    """Test strongest emotion comes first."""
    emotions = detect_emotions("I'm scared and worried but excited")

    assert [e.type for e in emotions] == [EmotionType.FEAR, EmotionType.EXCITEMENT]
    assert emotions[0].intensity == pytest.approx(2 / 3)
    assert emotions[1].intensity == pytest.approx(1 / 3)


def test_ties_keep_category_order():
    """Test equal intensities follow lexicon order."""
    emotions = detect_emotions("I'm relieved and excited")

    assert [e.type for e in emotions] == [EmotionType.EXCITEMENT, EmotionType.RELIEF]


def test_custom_lexicon():
    """Test the detector uses an injected lexicon."""
    detector = EmotionDetector(Lexicon({'guilt': ['oops']}))

    emotions = detector.detect('oops')

    assert [e.type for e in emotions] == [EmotionType.GUILT]


def test_analyze_option_emotions():
    """Test one analysis per option, in order, with dominant emotion."""
    options = [
        Option('a', 'Stay', emotional_text="It's safe and I'm finally calm"),
        Option('b', 'Leave', emotional_text=''),
        Option('c', 'Travel', emotional_text="I'm excited, it's an adventure"),
    ]

    analyses = analyze_option_emotions(options)

    assert [a.option_id for a in analyses] == ['a', 'b', 'c']
    assert analyses[0].dominant_emotion.type is EmotionType.RELIEF
    assert analyses[0].dominant_emotion.intensity == 1.0
    assert analyses[1].emotions == []
    assert analyses[1].dominant_emotion is None
    assert analyses[2].dominant_emotion.type is EmotionType.EXCITEMENT
    assert analyses[2].option_name == 'Travel'
