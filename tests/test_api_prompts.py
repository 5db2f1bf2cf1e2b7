from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from testgen_prompts import DEFAULT_PROMPTS, FilesystemPromptStore
from testgen_prompts.api.core.container import Container, get_container
from testgen_prompts.app.main import create_app


@pytest.fixture
def client() -> TestClient:
    app = create_app()
    app.dependency_overrides[get_container] = lambda: Container()
    return TestClient(app)


def test_list_prompts(client: TestClient) -> None:
    response = client.get('/v1/prompts')

    assert response.status_code == 200
    body = response.json()
    assert {entry['key'] for entry in body} == set(DEFAULT_PROMPTS)
    steps = next(entry for entry in body if entry['key'] == 'CUCUMBER_WITH_SELENIUM_JAVA_STEPS')
    assert steps['display_name'] == 'Cucumber-With-Selenium-Java-Steps'
    assert steps['placeholders'] == ['domContent', 'pageUrl']


def test_get_prompt_template(client: TestClient) -> None:
    response = client.get('/v1/prompts/CUCUMBER_ONLY')

    assert response.status_code == 200
    assert response.json()['template'] == DEFAULT_PROMPTS['CUCUMBER_ONLY']


def test_get_unknown_prompt_returns_404(client: TestClient) -> None:
    response = client.get('/v1/prompts/NONEXISTENT_KEY')

    assert response.status_code == 404
    assert 'NONEXISTENT_KEY' in response.json()['detail']


def test_render_prompt(client: TestClient) -> None:
    # Arrange
    payload = {'variables': {'domContent': '<form></form>', 'pageUrl': 'https://example.test/login'}}

    # Act
    response = client.post('/v1/prompts/CUCUMBER_WITH_SELENIUM_JAVA_STEPS/render', json=payload)

    # Assert
    assert response.status_code == 200
    body = response.json()
    assert body['display_name'] == 'Cucumber-With-Selenium-Java-Steps'
    assert 'https://example.test/login' in body['prompt']
    assert '${pageUrl}' not in body['prompt']


def test_render_prompt_escapes_fences_on_request(client: TestClient) -> None:
    payload = {'variables': {'domContent': '```x```'}, 'escape_code_fences': True}

    response = client.post('/v1/prompts/TESTDATA_JSON_ONLY/render', json=payload)

    assert response.status_code == 200
    assert '\\`\\`\\`x\\`\\`\\`' in response.json()['prompt']


def test_render_unknown_prompt_returns_404(client: TestClient) -> None:
    response = client.post('/v1/prompts/NONEXISTENT_KEY/render', json={'variables': {}})

    assert response.status_code == 404


def test_render_uses_overridden_store(tmp_path: Path) -> None:
    # Arrange
    (tmp_path / 'TESTDATA_JSON_ONLY.md').write_text('Data for ${domContent}', encoding='utf-8')
    store = FilesystemPromptStore(base_dir=tmp_path).load()
    app = create_app()
    app.dependency_overrides[get_container] = lambda: Container(store=store)

    # Act
    response = TestClient(app).post(
        '/v1/prompts/TESTDATA_JSON_ONLY/render',
        json={'variables': {'domContent': '<input/>'}},
    )

    # Assert
    assert response.json()['prompt'] == 'Data for <input/>'
