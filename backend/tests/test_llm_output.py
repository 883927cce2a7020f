import json

from services.llm_output import (
    DEFAULT_STRENGTHS,
    extract_analysis_manually,
    parse_performance,
    parse_questions,
    strip_code_fences,
)


def test_strip_code_fences():
    assert strip_code_fences('```json\n[{"a": 1}]\n```') == '[{"a": 1}]'
    assert strip_code_fences("  plain text  ") == "plain text"


def test_questions_from_json_array():
    text = json.dumps([
        {"id": 1, "text": "Tell me about your last project?", "category": "Technical"},
        {"question": "How do you handle conflict on a team?", "type": "Behavioral"},
    ])
    questions = parse_questions(f"Here you go:\n{text}\nGood luck!")
    assert [q.id for q in questions] == [1, 2]
    assert questions[1].text == "How do you handle conflict on a team?"
    assert questions[1].category == "Behavioral"


def test_questions_from_fenced_array_of_strings():
    text = '```json\n["Why do you want this job?", "Describe a coding challenge."]\n```'
    questions = parse_questions(text)
    assert [q.category for q in questions] == ["Motivation", "Technical"]


def test_questions_from_loose_objects():
    text = (
        '{"id": 1, "text": "Explain your favourite data structure?"}\n'
        'not json at all\n'
        '{"id": 2, "text": "What motivates you at work?", "category": "Motivation",}'
    )
    questions = parse_questions(text)
    assert len(questions) == 2
    assert questions[0].text == "Explain your favourite data structure?"
    # unparseable object keeps its raw text
    assert questions[1].text.startswith('{"id": 2')


def test_questions_from_numbered_list():
    text = "1. What is your biggest strength?\n2. Why did you leave your last job?\n3) not a question"
    questions = parse_questions(text)
    assert [q.text for q in questions] == [
        "What is your biggest strength?",
        "Why did you leave your last job?",
    ]


def test_unparseable_questions():
    assert parse_questions("") is None
    assert parse_questions("I cannot help with that") is None


def test_performance_from_json():
    payload = {
        "overallScore": 72,
        "technicalScore": 80,
        "behavioralScore": 65,
        "communicationScore": 70,
        "strengths": ["Clear answers"],
        "weaknesses": ["Few metrics"],
        "suggestions": ["Quantify impact"],
        "detailedFeedback": {"question1": "Solid"},
    }
    report = parse_performance(f"```json\n{json.dumps(payload)}\n```", source="gemini")
    assert report.overall_score == 72
    assert report.strengths == ["Clear answers"]
    assert report.detailed_feedback == {"question1": "Solid"}
    assert report.source == "gemini"


def test_performance_trailing_commas_repaired():
    text = (
        '{"overallScore": 40, "technicalScore": 30, "behavioralScore": 50, '
        '"communicationScore": 45, "strengths": ["Honest",],}'
    )
    report = parse_performance(text)
    assert report.technical_score == 30
    assert report.strengths == ["Honest"]
    assert report.weaknesses == ["Could provide more detailed responses"]


def test_performance_scores_clamped():
    text = json.dumps({
        "overallScore": 140, "technicalScore": -5,
        "behavioralScore": "55", "communicationScore": 49.6,
    })
    report = parse_performance(text)
    assert report.overall_score == 100
    assert report.technical_score == 0
    assert report.behavioral_score == 55
    assert report.communication_score == 50


def test_performance_missing_score_is_rejected():
    text = json.dumps({"overallScore": 70, "technicalScore": 70, "behavioralScore": 70})
    assert parse_performance(text) is None
    assert parse_performance("") is None


def test_performance_manual_extraction():
    text = """Sure! overallScore: 35, technicalScore: 20
    behavioralScore: 40 and communicationScore: 45
    strengths: ["Friendly tone", "On time"]
    detailedFeedback: {"question1": "Too short"}
    """
    report = parse_performance(text)
    assert report.overall_score == 35
    assert report.communication_score == 45
    assert report.strengths == ["Friendly tone", "On time"]
    assert report.suggestions == ["Practice more interview questions"]


def test_manual_extraction_short_keys():
    analysis = extract_analysis_manually('overall: 10, technical: 11, behavioral: 12, communication: 13')
    assert analysis == {
        "overallScore": 10,
        "technicalScore": 11,
        "behavioralScore": 12,
        "communicationScore": 13,
    }


def test_empty_lists_use_defaults():
    text = json.dumps({
        "overallScore": 1, "technicalScore": 1, "behavioralScore": 1,
        "communicationScore": 1, "strengths": [],
    })
    assert parse_performance(text).strengths == DEFAULT_STRENGTHS


def test_out_of_range_question_ids_fall_back_to_position():
    text = '[{"id": 1e400, "text": "First question here?"}, {"id": NaN, "text": "Second question here?"}]'
    questions = parse_questions(text)
    assert [q.id for q in questions] == [1, 2]


def test_unrepresentable_score_is_rejected():
    text = json.dumps({
        "overallScore": 10 ** 400, "technicalScore": 1,
        "behavioralScore": 1, "communicationScore": 1,
    })
    assert parse_performance(text) is None
