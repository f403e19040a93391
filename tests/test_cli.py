from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest
from click.testing import CliRunner

from codizer.cli import main
from codizer.config import Settings

FIXTURES = Path(__file__).parent / "fixtures"

ADD_TAG = "//codizer(title='Add', description='Adds two numbers', developed_by='Team A')\n"


@pytest.fixture(autouse=True)
def no_env_settings():
    with patch("codizer.cli.load_settings", return_value=Settings()) as mock_load:
        yield mock_load


class TestCliGen:
    def test_missing_input_is_usage_error(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(main, ["gen"])
            assert list(Path(".").iterdir()) == []

        assert result.exit_code == 2
        assert "-i/--input" in result.output

    def test_unreadable_input(self, tmp_path):
        missing = tmp_path / "missing.js"
        result = CliRunner().invoke(main, ["gen", "-i", str(missing)])

        assert result.exit_code == 1
        assert f"Could not read file: {missing}" in result.output
        assert not Path(f"{missing}_documentation.md").exists()

    def test_writes_default_output_path(self, tmp_path):
        source = tmp_path / "math.js"
        source.write_text(ADD_TAG, encoding="utf-8")

        result = CliRunner().invoke(main, ["gen", "-i", str(source), "--no-enhance"])

        assert result.exit_code == 0
        output = tmp_path / "math.js_documentation.md"
        assert output.exists()
        assert "# Add" in output.read_text(encoding="utf-8")
        assert f"Documentation file created: {output}" in result.output

    def test_promizer_family_suffix(self, tmp_path):
        source = tmp_path / "server.js"
        source.write_text("//promizer(type='GET', format='json', body=['id:number'])\n", encoding="utf-8")

        result = CliRunner().invoke(main, ["gen", "-i", str(source), "--family", "promizer"])

        assert result.exit_code == 0
        assert (tmp_path / "server.js_api_documentation.md").exists()

    def test_suffix_and_output_options(self, tmp_path):
        source = tmp_path / "math.js"
        source.write_text(ADD_TAG, encoding="utf-8")
        runner = CliRunner()

        result = runner.invoke(main, ["gen", "-i", str(source), "--suffix", ".md"])
        assert result.exit_code == 0
        assert (tmp_path / "math.js.md").exists()

        explicit = tmp_path / "api_documentation.md"
        result = runner.invoke(main, ["gen", "-i", str(source), "-o", str(explicit)])
        assert result.exit_code == 0
        assert explicit.exists()

    def test_config_suffix(self, tmp_path, no_env_settings):
        no_env_settings.return_value = Settings(output_suffixes={"codizer": ".docs.md"})
        source = tmp_path / "math.js"
        source.write_text(ADD_TAG, encoding="utf-8")

        result = CliRunner().invoke(main, ["gen", "-i", str(source)])

        assert result.exit_code == 0
        assert (tmp_path / "math.js.docs.md").exists()

    def test_empty_suffix_overrides_config(self, tmp_path, no_env_settings):
        no_env_settings.return_value = Settings(output_suffixes={"codizer": ".docs.md"})
        source = tmp_path / "math.md"
        source.write_text(ADD_TAG, encoding="utf-8")

        result = CliRunner().invoke(main, ["gen", "-i", str(source), "--suffix", ""])

        assert result.exit_code == 0
        assert not (tmp_path / "math.md.docs.md").exists()
        assert source.read_text(encoding="utf-8").startswith("# Add\n")

    def test_malformed_tag_reported_but_output_written(self, tmp_path):
        source = tmp_path / "math.js"
        source.write_text("//codizer(title='X')\n" + ADD_TAG, encoding="utf-8")

        result = CliRunner().invoke(main, ["gen", "-i", str(source)])

        assert result.exit_code == 0
        assert "Tag parsing error" in result.output
        content = (tmp_path / "math.js_documentation.md").read_text(encoding="utf-8")
        assert "# Add" in content
        assert "# X" not in content

    def test_bad_config_file(self, tmp_path, no_env_settings):
        from codizer.config import ConfigError

        no_env_settings.side_effect = ConfigError("Invalid YAML in codizer.yaml")
        source = tmp_path / "math.js"
        source.write_text(ADD_TAG, encoding="utf-8")

        result = CliRunner().invoke(main, ["gen", "-i", str(source), "--config", str(tmp_path / "codizer.yaml")])

        assert result.exit_code == 1
        assert "Invalid YAML" in result.output

    @patch("codizer.cli.build_enricher")
    def test_enrichment_uses_settings_and_model(self, mock_build, tmp_path, no_env_settings):
        no_env_settings.return_value = Settings(api_key="secret")
        mock_build.return_value = MagicMock(return_value="Enhanced description")
        source = tmp_path / "math.js"
        source.write_text(ADD_TAG, encoding="utf-8")

        result = CliRunner().invoke(main, ["gen", "-i", str(source), "--model", "gpt-4o"])

        assert result.exit_code == 0
        settings = mock_build.call_args[0][0]
        assert settings.api_key == "secret"
        assert settings.model == "gpt-4o"
        content = (tmp_path / "math.js_documentation.md").read_text(encoding="utf-8")
        assert "Enhanced description" in content

    @patch("codizer.cli.build_enricher")
    def test_no_enhance_skips_enricher(self, mock_build, tmp_path):
        source = tmp_path / "math.js"
        source.write_text(ADD_TAG, encoding="utf-8")

        result = CliRunner().invoke(main, ["gen", "-i", str(source), "--no-enhance"])

        assert result.exit_code == 0
        mock_build.assert_not_called()

    def test_unwritable_output(self, tmp_path):
        source = tmp_path / "math.js"
        source.write_text(ADD_TAG, encoding="utf-8")
        target = tmp_path / "missing-dir" / "out.md"

        result = CliRunner().invoke(main, ["gen", "-i", str(source), "-o", str(target)])

        assert result.exit_code == 1
        assert f"Error writing file: {target}" in result.output


class TestCliFamilies:
    def test_lists_families(self):
        result = CliRunner().invoke(main, ["families"])
        assert result.exit_code == 0
        assert "codizer: //codizer(...)" in result.output
        assert "promizer: //promizer(...) [endpoint, endpoint summary]" in result.output
