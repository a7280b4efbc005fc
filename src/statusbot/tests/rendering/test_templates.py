"""
Tests for prompt template loading and rendering.
"""

import pytest

from statusbot.rendering.templates import DEFAULT_TEMPLATES, load_templates, render


def test_shipped_templates_match_defaults():
    templates = load_templates()

    assert set(templates) == set(DEFAULT_TEMPLATES)


def test_defaults_hold_only_rendered_templates():
    assert set(DEFAULT_TEMPLATES) == {
        "continuation_prompt", "recognizer_not_configured", "recognizer_unavailable",
        "not_understood", "project_prompt", "suite_prompt", "status_prompt",
        "category_prompt", "date_prompt", "date_ambiguous_prompt", "date_retry_prompt",
        "confirm_prompt", "confirm_retry", "help", "cancel", "results_summary",
        "results_tally", "results_suites", "search_unavailable",
    }


def test_render_fills_slots():
    assert render("suite_prompt", project="Alpha") == \
        "Which Suite in Alpha Project you are looking for?"


def test_render_treats_none_as_empty():
    assert render("suite_prompt", project=None) == \
        "Which Suite in  Project you are looking for?"


def test_partial_override_file(tmp_path):
    config_file = tmp_path / "prompts.yaml"
    config_file.write_text('help: "Try: project name, suite, status."\nbogus: 3\n')

    templates = load_templates(config_file)

    assert templates["help"] == "Try: project name, suite, status."
    assert templates["project_prompt"] == DEFAULT_TEMPLATES["project_prompt"]
    assert "bogus" not in templates


def test_missing_file_uses_defaults(tmp_path):
    assert load_templates(tmp_path / "missing.yaml") == DEFAULT_TEMPLATES


def test_non_mapping_file_is_rejected(tmp_path):
    config_file = tmp_path / "prompts.yaml"
    config_file.write_text("- just\n- a list\n")

    with pytest.raises(ValueError):
        load_templates(config_file)
