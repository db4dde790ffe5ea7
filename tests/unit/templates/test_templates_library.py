from pathlib import Path

import pytest

from reader_kit.templates.template import CopyTemplate
from reader_kit.templates.templates_library import DEFAULT_TEMPLATES_DIR, TemplatesLibrary


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML template files."""
    (tmp_path / "manual.yaml").write_text(
        """name: manual
version: "1.0"
description: Plain copy
inputs:
  heading: Heading
  content: Body
template: "## {heading}\\n{content}"
"""
    )

    (tmp_path / "manual_v2.yaml").write_text(
        """name: manual
version: "2.0"
description: Plain copy without heading
inputs:
  content: Body
template: "{content}"
"""
    )

    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty temp directory."""
    return tmp_path


class TestTemplatesLibrary:
    def test_loads_templates_from_directory(self, templates_dir: Path) -> None:
        library = TemplatesLibrary(str(templates_dir))

        assert library.list() == [("manual", "1.0"), ("manual", "2.0")]

    def test_get_defaults_to_version_one(self, templates_dir: Path) -> None:
        library = TemplatesLibrary(templates_dir)

        template = library.get("manual")

        assert isinstance(template, CopyTemplate)
        assert template.inputs == {"heading": "Heading", "content": "Body"}

    def test_get_raises_keyerror_for_unknown_template(self, templates_dir: Path) -> None:
        library = TemplatesLibrary(templates_dir)

        with pytest.raises(KeyError, match="Template 'qa' version '1.0' not found"):
            library.get("qa")

    def test_empty_directory_loads_no_templates(self, empty_dir: Path) -> None:
        assert TemplatesLibrary(empty_dir).list() == []

    def test_rejects_inputs_that_do_not_match_body(self, tmp_path: Path) -> None:
        (tmp_path / "broken.yaml").write_text(
            """name: broken
version: "1.0"
description: Declares an input it never uses
inputs:
  content: Body
  title: Unused
template: "{content}"
"""
        )

        with pytest.raises(ValueError, match="do not match placeholders"):
            TemplatesLibrary(tmp_path)

    def test_packaged_library_has_one_template_per_pass(self) -> None:
        library = TemplatesLibrary(DEFAULT_TEMPLATES_DIR)

        assert library.list() == [("explain", "1.0"), ("manual", "1.0"), ("qa", "1.0")]


class TestCopyTemplateRender:
    @pytest.fixture
    def template(self) -> CopyTemplate:
        return CopyTemplate(
            name="t",
            version="1.0",
            description="d",
            inputs={"heading": "h", "content": "c"},
            template="# {heading}\n\n{content}",
        )

    def test_substitutes_placeholders(self, template: CopyTemplate) -> None:
        assert template.render(heading="Foo", content="Bar") == "# Foo\n\nBar"

    def test_braces_in_values_are_left_alone(self, template: CopyTemplate) -> None:
        assert template.render(heading="{x}", content="{}") == "# {x}\n\n{}"

    def test_missing_input_raises(self, template: CopyTemplate) -> None:
        with pytest.raises(ValueError, match="missing inputs: content"):
            template.render(heading="Foo")

    def test_unexpected_input_raises(self, template: CopyTemplate) -> None:
        with pytest.raises(ValueError, match="unexpected inputs: extra"):
            template.render(heading="Foo", content="Bar", extra="x")

    def test_extra_fields_are_forbidden(self) -> None:
        with pytest.raises(ValueError):
            CopyTemplate(
                name="t",
                version="1.0",
                description="d",
                inputs={},
                template="",
                author="me",  # type: ignore[call-arg]
            )
