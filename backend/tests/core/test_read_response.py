"""Response Reading — tolerant text and error extraction.

Tests cover:
    - parse_upstream_body: JSON, empty, non-JSON
    - Text extraction per provider shape, including missing/odd shapes
    - Error message extraction: nested, top-level (Mistral), list-wrapped (Gemini)
"""

from llm_relay.core.read_response import (
    extract_chat_completion_text,
    extract_claude_text,
    extract_gemini_text,
    extract_mistral_error_message,
    extract_nested_error_message,
    parse_upstream_body,
)


# -- parse_upstream_body -------------------------------------------------------


def test_parse_json_body():
    assert parse_upstream_body('{"a": 1}') == {"a": 1}


def test_parse_empty_body():
    assert parse_upstream_body("") == {}


def test_parse_non_json_body():
    assert parse_upstream_body("upstream down") == {
        "parse_error": True, "raw": "upstream down",
    }


# -- text extraction -----------------------------------------------------------


def test_gemini_text_first_candidate():
    data = {"candidates": [
        {"content": {"parts": [{"text": "one"}]}},
        {"content": {"parts": [{"text": "two"}]}},
    ]}
    assert extract_gemini_text(data) == "one"


def test_gemini_text_joins_parts():
    data = {"candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}]}
    assert extract_gemini_text(data) == "ab"


def test_gemini_text_missing_content():
    assert extract_gemini_text({"candidates": [{"finishReason": "SAFETY"}]}) is None
    assert extract_gemini_text({"candidates": []}) is None
    assert extract_gemini_text({"parse_error": True, "raw": "x"}) is None


def test_gemini_text_empty_string_is_none():
    data = {"candidates": [{"content": {"parts": [{"text": ""}]}}]}
    assert extract_gemini_text(data) is None


def test_claude_text_skips_non_text_blocks():
    data = {"content": [
        {"type": "thinking", "thinking": "hmm"},
        {"type": "text", "text": "Hello"},
        {"type": "tool_use", "id": "t", "name": "x", "input": {}},
    ]}
    assert extract_claude_text(data) == "Hello"


def test_claude_text_missing_content():
    assert extract_claude_text({"content": []}) is None
    assert extract_claude_text({}) is None


def test_chat_completion_text():
    data = {"choices": [{"message": {"role": "assistant", "content": "hey"}}]}
    assert extract_chat_completion_text(data) == "hey"


def test_chat_completion_null_content():
    data = {"choices": [{"message": {"role": "assistant", "content": None}}]}
    assert extract_chat_completion_text(data) is None


def test_extractors_tolerate_non_dict_input():
    for extract in (extract_gemini_text, extract_claude_text, extract_chat_completion_text):
        assert extract([]) is None
        assert extract("text") is None
        assert extract(None) is None


# -- error messages ------------------------------------------------------------


def test_nested_error_message():
    assert extract_nested_error_message({"error": {"message": "nope"}}) == "nope"


def test_nested_error_message_list_wrapped():
    assert extract_nested_error_message([{"error": {"message": "wrapped"}}]) == "wrapped"


def test_nested_error_message_absent():
    assert extract_nested_error_message({"error": "flat string"}) is None
    assert extract_nested_error_message({}) is None


def test_mistral_top_level_message():
    assert extract_mistral_error_message({"message": "Unauthorized"}) == "Unauthorized"


def test_mistral_detail_string():
    assert extract_mistral_error_message({"detail": "Invalid model"}) == "Invalid model"


def test_mistral_detail_list_not_a_message():
    assert extract_mistral_error_message({"detail": [{"msg": "x"}]}) is None
