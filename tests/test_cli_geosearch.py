"""
Tests for the geosearch CLI.
"""
import json
from typer.testing import CliRunner

from geosearch.src.cli.geosearch import app

ITEMS = [
    {"name": "קפה תל אביב", "description": "", "location": "תל אביב", "type": "cafe"},
    {"name": "גלריה", "description": "", "location": "רמת גן", "type": "gallery", "tags": ["art"]},
    {"name": "מאפייה", "description": "", "location": "חיפה", "type": "bakery"},
]
REGIONS = [{"name": "מרכז", "settlements": ["תל אביב", "רמת גן"]}]


class TestCLI:

    def setup_method(self):
        self.runner = CliRunner()

    def _files(self, tmp_path):
        items = tmp_path / "items.json"
        regions = tmp_path / "regions.json"
        items.write_text(json.dumps(ITEMS, ensure_ascii=False), encoding="utf-8")
        regions.write_text(json.dumps(REGIONS, ensure_ascii=False), encoding="utf-8")
        return str(items), str(regions)

    def test_normalize(self):
        result = self.runner.invoke(app, ["normalize", "תל-אביב!"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "תל אביב"

    def test_search_json(self, tmp_path):
        items, regions = self._files(tmp_path)
        result = self.runner.invoke(app, ["search", "תל אביב", "--items", items, "--regions", regions, "--json"])
        assert result.exit_code == 0
        lines = [json.loads(l) for l in result.stdout.splitlines() if l.strip()]
        assert lines[0]["name"] == "קפה תל אביב"
        assert "מאפייה" not in [l["name"] for l in lines]

    def test_search_type_filter_and_limit(self, tmp_path):
        items, regions = self._files(tmp_path)
        result = self.runner.invoke(app, ["search", "", "--items", items, "--type", "art", "--json"])
        assert result.exit_code == 0
        assert [json.loads(l)["name"] for l in result.stdout.splitlines()] == ["גלריה"]
        result = self.runner.invoke(app, ["search", "", "--items", items, "-n", "1", "--json"])
        assert len(result.stdout.splitlines()) == 1

    def test_search_no_results(self, tmp_path):
        items, regions = self._files(tmp_path)
        result = self.runner.invoke(app, ["search", "זזזז", "--items", items, "--regions", regions])
        assert result.exit_code == 0
        assert "No results" in result.stdout

    def test_missing_items_file(self, tmp_path):
        result = self.runner.invoke(app, ["search", "x", "--items", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_expand(self, tmp_path):
        _, regions = self._files(tmp_path)
        result = self.runner.invoke(app, ["expand", "קריית גת", "--regions", regions])
        assert result.exit_code == 0
        assert "Region expansion: yes" in result.stdout
        result = self.runner.invoke(app, ["expand", "א", "--regions", regions])
        assert "Region expansion: no" in result.stdout

    def test_types(self, tmp_path):
        items, _ = self._files(tmp_path)
        result = self.runner.invoke(app, ["types", "--items", items])
        assert result.exit_code == 0
        assert result.stdout.split() == ["cafe", "gallery", "art", "bakery"]
