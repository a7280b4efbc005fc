"""
Prompt Templates

Loads message templates from rendering/config/prompts.yaml. Keys missing from
the file fall back to the built-in defaults, so a partial override file is
valid.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES: Dict[str, str] = {
    "continuation_prompt": "What else can I do for you?",
    "recognizer_not_configured": (
        "NOTE: the recognizer is not configured. To enable all capabilities, "
        "set CLU_ENDPOINT, CLU_API_KEY, CLU_PROJECT_NAME and CLU_DEPLOYMENT_NAME."
    ),
    "recognizer_unavailable": (
        "NOTE: the recognizer could not be reached, so I will ask for each "
        "detail in turn."
    ),
    "not_understood": (
        "Sorry, I didn't get that. Please try asking in a different way "
        "(intent was {intent})"
    ),
    "project_prompt": "Which Project Details you want?",
    "suite_prompt": "Which Suite in {project} Project you are looking for?",
    "status_prompt": "Which Status in {project} Project {suite} Suite you are looking for?",
    "category_prompt": (
        "Which Catogory in {project} Project {suite} Suite {status} Status "
        "you are looking for?"
    ),
    "date_prompt": "What date would you like?",
    "date_ambiguous_prompt": "Can you give me a more specific date?",
    "date_retry_prompt": (
        "I'm sorry, for best results, please enter the date including the "
        "month, day and year."
    ),
    "confirm_prompt": (
        "Please confirm, you want to get the {project} Project {suite} Suite "
        "{status} Status {category} Category as on {date}. Is this correct?"
    ),
    "confirm_retry": "Please answer yes or no.",
    "help": "Show Help...",
    "cancel": "Cancelling...",
    "results_summary": (
        "The Results shown for {project} Project {suite} Suite {status} Status "
        "{category} Category as on {date}"
    ),
    "results_tally": "Pass Count: {pass_count},Fail Count: {fail_count}",
    "results_suites": "Suites: {suites}",
    "search_unavailable": (
        "Sorry, the project status search is unavailable right now. "
        "Please try again later."
    ),
}

TEMPLATES_FILE = Path(__file__).parent / "config" / "prompts.yaml"


def load_templates(config_file: Path = TEMPLATES_FILE) -> Dict[str, str]:
    """
    Load template overrides from a YAML file merged over the defaults.

    Raises:
        ValueError: If the file is not valid YAML or not a mapping
    """
    templates = dict(DEFAULT_TEMPLATES)

    if not config_file.exists():
        logger.warning(
            "Prompt templates config not found at %s. Using built-in defaults.",
            config_file
        )
        return templates

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(
            f"Failed to parse YAML config file {config_file}: {e}"
        ) from e

    if not isinstance(config_data, dict):
        raise ValueError(
            f"Config file {config_file} must contain a YAML dictionary. "
            f"Got {type(config_data)}"
        )

    for key, text in config_data.items():
        if not isinstance(key, str) or not isinstance(text, str):
            logger.warning(
                "Skipping invalid template entry %r: expected string key and value",
                key
            )
            continue
        if key not in DEFAULT_TEMPLATES:
            logger.warning("Unknown template key %r in %s", key, config_file)
        templates[key] = text

    logger.info("Loaded %d prompt templates from %s", len(templates), config_file)
    return templates


# Load templates at module import time
_TEMPLATES: Dict[str, str] = load_templates()


def get_template(key: str) -> str:
    """Raw template text. Raises KeyError for unknown keys."""
    return _TEMPLATES[key]


def render(key: str, **values: Any) -> str:
    """
    Render a template. None values render as empty strings.

    Args:
        key: Template key (e.g., "suite_prompt")
        **values: Placeholder values

    Returns:
        Rendered text
    """
    template = get_template(key)
    cleaned = {k: ("" if v is None else v) for k, v in values.items()}
    try:
        return template.format(**cleaned)
    except KeyError as e:
        logger.warning(
            "Template %r has unfilled placeholder %s; rendering default",
            key,
            e
        )
        return DEFAULT_TEMPLATES[key].format(**cleaned)
