"""
Tests for rendering resolved tables through templates.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from yaml_schema_to_code.pipeline import (
    RenderConfig,
    ResolvedField,
    ResolvedSchema,
    ResolvedTable,
    TemplateRegistrationError,
    TemplateRenderer,
    TemplateRenderError,
)
from yaml_schema_to_code.pipeline.renderer import build_context
from yaml_schema_to_code.pipeline.schema_ast import TypeAlias

TEMPLATES_DIR = Path(__file__).parent / "test_data" / "templates"


@pytest.fixture
def resolved():
    return ResolvedSchema(
        tables={
            "user_account": ResolvedTable(
                name="user_account",
                schema="auth",
                fields=[
                    ResolvedField("id", "uuid::Uuid", "UUID", True),
                    ResolvedField("email", "String", "String"),
                ],
            ),
            "order": ResolvedTable(name="order", fields=[ResolvedField("total", "Decimal", "Money")]),
        },
        types={"UUID": TypeAlias("UUID", "uuid::Uuid"), "Money": TypeAlias("Money", "Decimal")},
    )


def write_template(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


class TestBuildContext:
    def test_context_shape(self, resolved):
        context = build_context(resolved.tables["user_account"], resolved.types)

        assert context == {
            "name": "user_account",
            "schema": "auth",
            "fields": [
                {"name": "id", "type": "uuid::Uuid", "is_primary": True},
                {"name": "email", "type": "String", "is_primary": None},
            ],
            "types": {
                "UUID": {"target_type": "uuid::Uuid"},
                "Money": {"target_type": "Decimal"},
            },
        }


class TestTemplateRenderer:
    def test_render_directory(self, resolved):
        result = TemplateRenderer().render_all(resolved, TEMPLATES_DIR)

        assert list(result) == ["query", "struct"]
        assert [name for name, _ in result["struct"]] == ["user_account", "order"]
        assert result["query"][0][1] == "-- User_account\nSELECT id, email FROM auth.user_account;\n"
        assert result["query"][1][1] == "-- Order\nSELECT total FROM public.order;\n"

    def test_render_single_file(self, resolved):
        result = TemplateRenderer().render_all(resolved, TEMPLATES_DIR / "struct.jinja2")

        assert list(result) == ["struct"]
        assert result["struct"][0][1] == (
            "// table: auth.user_account\n"
            "pub struct UserAccount {\n"
            "    #[primary_key]\n"
            "    pub id: uuid::Uuid,\n"
            "    pub email: String,\n"
            "}\n"
        )

    def test_rendering_is_idempotent(self, resolved):
        renderer = TemplateRenderer()
        first = renderer.render_all(resolved, TEMPLATES_DIR)
        second = renderer.render_all(resolved, TEMPLATES_DIR)

        assert first == second

    def test_filters(self, tmp_path, resolved):
        write_template(tmp_path, "names.txt", "{{ name | snake_to_pascal }} {{ name | snake_to_camel }} {{ name | upper_first }}")

        result = TemplateRenderer().render_all(resolved, tmp_path)

        assert result["names"][0][1] == "UserAccount userAccount User_account"

    def test_types_are_available(self, tmp_path, resolved):
        write_template(tmp_path, "types.txt", "{% for alias, t in types | dictsort %}{{ alias }}={{ t.target_type }};{% endfor %}")

        result = TemplateRenderer().render_all(resolved, tmp_path)

        assert result["types"][1][1] == "Money=Decimal;UUID=uuid::Uuid;"

    def test_undefined_variable_fails(self, tmp_path, resolved):
        write_template(tmp_path, "bad.txt", "{{ name }} {{ missing }}")

        with pytest.raises(TemplateRenderError) as exc_info:
            TemplateRenderer().render_all(resolved, tmp_path)

        assert exc_info.value.template == "bad"
        assert exc_info.value.table == "user_account"

    def test_undefined_variable_allowed_when_not_strict(self, tmp_path, resolved):
        write_template(tmp_path, "lenient.txt", "{{ name }}{{ missing }}")

        result = TemplateRenderer(RenderConfig(strict_undefined=False)).render_all(resolved, tmp_path)

        assert result["lenient"][1][1] == "order"

    def test_render_failure_aborts_batch(self, tmp_path, resolved):
        write_template(tmp_path, "a_good.txt", "{{ name }}")
        write_template(tmp_path, "b_bad.txt", "{{ fields[5].name }}")

        with pytest.raises(TemplateRenderError, match="b_bad"):
            TemplateRenderer().render_all(resolved, tmp_path)

    def test_syntax_error_fails_registration(self, tmp_path, resolved):
        write_template(tmp_path, "broken.txt", "{% for field in fields %}")

        with pytest.raises(TemplateRegistrationError, match="broken.txt"):
            TemplateRenderer().render_all(resolved, tmp_path)

    def test_missing_template_path(self, tmp_path, resolved):
        with pytest.raises(TemplateRegistrationError, match="does not exist"):
            TemplateRenderer().render_all(resolved, tmp_path / "missing")

    def test_empty_template_directory(self, tmp_path, resolved):
        (tmp_path / "partials").mkdir()
        write_template(tmp_path, ".hidden.txt", "{{ name }}")

        with pytest.raises(TemplateRegistrationError, match="No templates found"):
            TemplateRenderer().render_all(resolved, tmp_path)

    def test_duplicate_template_identifiers(self, tmp_path, resolved):
        write_template(tmp_path, "dao.jinja2", "{{ name }}")
        write_template(tmp_path, "dao.txt", "{{ name }}")

        with pytest.raises(TemplateRegistrationError, match="dao"):
            TemplateRenderer().render_all(resolved, tmp_path)

    def test_templates_can_include_siblings(self, tmp_path, resolved):
        (tmp_path / "partials").mkdir()
        write_template(tmp_path / "partials", "header.txt", "// {{ name }}\n")
        write_template(tmp_path, "main.txt", '{% include "partials/header.txt" %}body\n')

        result = TemplateRenderer().render_all(resolved, tmp_path)

        assert list(result) == ["main"]
        assert result["main"][1][1] == "// order\nbody\n"

    def test_empty_schema(self, resolved):
        result = TemplateRenderer().render_all(ResolvedSchema(), TEMPLATES_DIR)

        assert result == {"query": [], "struct": []}
