import pytest

from services.answer_analyzer import (
    AnswerQuality,
    analyze_answer,
    analyze_answers,
    classify_answer,
)

REACT_ANSWER = (
    "I developed a React dashboard at my last job handling 10k daily users, solved a "
    "caching bug that cut load time by half, and collaborated daily with a "
    "cross-functional team."
)


@pytest.mark.parametrize("answer", ["yup", "tyu", "ok", "", "   ", "???", "42"])
def test_single_tokens_are_nonsensical(answer):
    assert classify_answer(answer) is AnswerQuality.NONSENSICAL


@pytest.mark.parametrize("answer", ["aaa bbb", "!!! ???", "123 456", "zzz hmm", "ok   sure"])
def test_short_gibberish_is_nonsensical(answer):
    assert classify_answer(answer) is AnswerQuality.NONSENSICAL


def test_short_real_sentence_is_poor():
    assert classify_answer("I worked on the backend services there") is AnswerQuality.POOR


def test_medium_answer_without_meaningful_words_is_poor():
    answer = "I think that is a fine question and I would say it depends on many things really"
    assert classify_answer(answer) is AnswerQuality.POOR


def test_medium_answer_with_meaningful_word_is_meaningful():
    answer = "I built the reporting service for our finance group and it runs every night now"
    assert classify_answer(answer) is AnswerQuality.MEANINGFUL


def test_nonsensical_answer_skips_signal_scan():
    analysis = analyze_answer("api")
    assert analysis.nonsensical_answers == 1
    assert analysis.technical_terms == 0
    assert analysis.answer_count == 1


def test_react_answer_signals():
    analysis = analyze_answer(REACT_ANSWER)
    assert analysis.meaningful_answers == 1
    assert analysis.technical_terms == 1
    assert analysis.problem_solving == 1
    assert analysis.experience_mentions == 1
    assert analysis.specific_examples == 0
    assert analysis.communication_quality == 1
    assert analysis.total_words == 30


def test_signal_counts_once_per_answer():
    answer = (
        "The api talks to the database through a framework, and the software system "
        "uses react and node for all programming work on the project."
    )
    assert analyze_answer(answer).technical_terms == 1


def test_communication_needs_sentence_terminator():
    answer = " ".join(["project"] * 25)
    assert analyze_answer(answer).communication_quality == 0
    assert analyze_answer(answer + ".").communication_quality == 1


def test_batch_sums_counters():
    analysis = analyze_answers([REACT_ANSWER, REACT_ANSWER, "yup"])
    assert analysis.answer_count == 3
    assert analysis.meaningful_answers == 2
    assert analysis.nonsensical_answers == 1
    assert analysis.technical_terms == 2
    assert analysis.total_words == 61
    assert analysis.average_word_length == pytest.approx(61 / 3)


def test_empty_batch():
    analysis = analyze_answers([])
    assert analysis.answer_count == 0
    assert analysis.average_word_length == 0.0
