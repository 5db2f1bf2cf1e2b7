from __future__ import annotations

import pytest

from testgen_prompts import (
    CODE_GENERATOR_TYPES,
    DEFAULT_PROMPTS,
    PromptRenderer,
    TemplateNotFound,
    escape_code_fences,
    render_prompt,
    render_template,
)

from tests.fixtures.mock_prompt_store import mock_prompt_store


def test_prompt_rendering_ok() -> None:
    renderer = PromptRenderer(mock_prompt_store())
    rendered = renderer.render('GREETING', {'name': 'Alice', 'place': 'Chennai'})
    assert rendered == 'Hello Alice, welcome to Chennai. Bye Alice.'


def test_prompt_rendering_missing_variable_left_literal() -> None:
    renderer = PromptRenderer(mock_prompt_store())
    rendered = renderer.render('GREETING', {'name': 'Alice'})
    assert rendered == 'Hello Alice, welcome to ${place}. Bye Alice.'


def test_prompt_rendering_ignores_unused_variables() -> None:
    renderer = PromptRenderer(mock_prompt_store())
    assert renderer.render('STATIC', {'name': 'Alice'}) == 'No placeholders here.'


def test_prompt_rendering_unknown_key() -> None:
    renderer = PromptRenderer(mock_prompt_store())
    with pytest.raises(TemplateNotFound) as exc_info:
        renderer.render('NONEXISTENT_KEY', {})
    assert exc_info.value.key == 'NONEXISTENT_KEY'
    assert 'NONEXISTENT_KEY' in str(exc_info.value)


def test_render_prompt_unknown_builtin_key() -> None:
    with pytest.raises(TemplateNotFound, match='NONEXISTENT_KEY'):
        render_prompt('NONEXISTENT_KEY', {})


@pytest.mark.parametrize('key', list(DEFAULT_PROMPTS))
def test_render_without_variables_returns_trimmed_template(key: str) -> None:
    assert render_prompt(key, {}) == DEFAULT_PROMPTS[key].strip()
    assert render_prompt(key) == DEFAULT_PROMPTS[key].strip()


@pytest.mark.parametrize('key', list(CODE_GENERATOR_TYPES))
def test_every_catalog_key_renders(key: str) -> None:
    assert render_prompt(key, {})


@pytest.mark.parametrize('key', list(DEFAULT_PROMPTS))
def test_full_bindings_leave_no_placeholders(key: str) -> None:
    rendered = render_prompt(key, {'domContent': '<main></main>', 'pageUrl': 'https://example.test/'})
    assert '${domContent}' not in rendered
    assert '${pageUrl}' not in rendered


def test_render_is_idempotent() -> None:
    variables = {'domContent': '<form></form>', 'pageUrl': 'https://example.test/login'}
    first = render_prompt('CUCUMBER_WITH_PLAYWRIGHT_TYPESCRIPT_STEPS', variables)
    second = render_prompt('CUCUMBER_WITH_PLAYWRIGHT_TYPESCRIPT_STEPS', variables)
    assert first == second


def test_testdata_prompt_inserts_dom_literally() -> None:
    # Arrange
    dom = "<input id='name'/>"

    # Act
    rendered = render_prompt('TESTDATA_JSON_ONLY', {'domContent': dom})

    # Assert
    expected = DEFAULT_PROMPTS['TESTDATA_JSON_ONLY'].replace('${domContent}', dom).strip()
    assert rendered == expected
    assert dom in rendered


def test_selenium_steps_prompt_replaces_dom_and_url() -> None:
    # Arrange
    url = 'https://example.test/login'
    raw = DEFAULT_PROMPTS['CUCUMBER_WITH_SELENIUM_JAVA_STEPS']

    # Act
    rendered = render_prompt('CUCUMBER_WITH_SELENIUM_JAVA_STEPS', {'domContent': '<form></form>', 'pageUrl': url})

    # Assert
    assert '${pageUrl}' not in rendered
    assert '${domContent}' not in rendered
    assert '<form></form>' in rendered
    assert rendered.count(url) == raw.count('${pageUrl}') == 2
    assert f'driver.get("{url}");' in rendered


def test_values_are_not_expanded_recursively() -> None:
    rendered = render_template('A ${a} B ${b}', {'a': '${b}', 'b': 'x'})
    assert rendered == 'A ${b} B x'


def test_values_are_inserted_literally() -> None:
    rendered = render_template('url=${u}', {'u': r'\1 $& ${0}'})
    assert rendered == r'url=\1 $& ${0}'


def test_non_identifier_placeholders_are_left_alone() -> None:
    rendered = render_template('${not-valid} ${ok}', {'not-valid': 'x', 'ok': 'y'})
    assert rendered == '${not-valid} y'


def test_values_are_converted_to_text() -> None:
    assert render_template('n=${n}', {'n': 5}) == 'n=5'


def test_code_fences_not_escaped_by_renderer() -> None:
    rendered = render_template('${dom}', {'dom': '```html```'})
    assert rendered == '```html```'


def test_escape_code_fences() -> None:
    assert escape_code_fences('a ```b``` c') == 'a \\`\\`\\`b\\`\\`\\` c'
    assert escape_code_fences('no fences') == 'no fences'
