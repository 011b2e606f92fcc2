"""Tests for the command line interface."""
import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from main import cli
from schemadoc.api.notion_client import PublishResult


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "orders.json"
    path.write_text(json.dumps({
        "param": {"fields": {"shop_id": {"type": "uint64", "required": "Required"}}},
        "request_body": {
            "fields": {
                "day": {"type": "string", "format": "YYYYMMDD"},
                "lines": {
                    "type": "array",
                    "items": {"type": "object", "properties": {"qty": {"type": "int32"}}},
                },
            }
        },
    }), encoding="utf-8")
    return path


@pytest.fixture
def broken_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{oops", encoding="utf-8")
    return path


class TestPublishCommand:
    """Test the publish command."""

    def test_dry_run(self, runner, schema_file):
        result = runner.invoke(cli, ["publish", "--dry-run", str(schema_file)])

        assert result.exit_code == 0
        assert "[DRY RUN]" in result.output

    @patch("schemadoc.api.notion_client.NotionClient.create_page")
    def test_publish(self, mock_create, runner, schema_file):
        mock_create.return_value = PublishResult(success=True, page_id="page-42")

        result = runner.invoke(cli, ["publish", "--title", "Orders", str(schema_file)])

        assert result.exit_code == 0
        assert "page-42" in result.output
        title, blocks = mock_create.call_args[0]
        assert title == "Orders"
        assert any(b["type"] == "code" for b in blocks)

    @patch("schemadoc.api.notion_client.NotionClient.create_page")
    def test_continues_after_bad_file(self, mock_create, runner, broken_file, schema_file):
        mock_create.return_value = PublishResult(success=True, page_id="page-42")

        result = runner.invoke(cli, ["publish", str(broken_file), str(schema_file)])

        assert result.exit_code == 1
        assert "broken.json" in result.output
        assert mock_create.call_count == 1

    def test_continues_after_undecodable_file(self, runner, tmp_path, schema_file):
        bad = tmp_path / "latin1.json"
        bad.write_bytes(b'{"a\xff": 1}')

        result = runner.invoke(cli, ["publish", "--dry-run", str(bad), str(schema_file)])

        assert result.exit_code == 1
        assert "latin1.json" in result.output
        assert "orders.json" in result.output
        assert "[DRY RUN]" in result.output

    @patch("schemadoc.api.notion_client.NotionClient.create_page")
    def test_publish_failure(self, mock_create, runner, schema_file):
        mock_create.return_value = PublishResult(success=False, error="401 Unauthorized")

        result = runner.invoke(cli, ["publish", str(schema_file)])

        assert result.exit_code == 1
        assert "401 Unauthorized" in result.output


class TestPreviewCommand:
    """Test the preview command."""

    def test_preview(self, runner, schema_file):
        result = runner.invoke(cli, ["preview", str(schema_file)])

        assert result.exit_code == 0
        assert "1. Path Parameters" in result.output
        assert "shop_id" in result.output
        assert "[]obj" in result.output
        assert '"day": "20240901"' in result.output

    def test_preview_broken(self, runner, broken_file):
        result = runner.invoke(cli, ["preview", str(broken_file)])

        assert result.exit_code == 1

    def test_preview_undecodable(self, runner, tmp_path):
        bad = tmp_path / "latin1.json"
        bad.write_bytes(b'{"a\xff": 1}')

        result = runner.invoke(cli, ["preview", str(bad)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "decoding" in result.output


class TestExportCommand:
    """Test the export command."""

    def test_export(self, runner, schema_file, tmp_path):
        output = tmp_path / "model.json"

        result = runner.invoke(cli, ["export", str(schema_file), "--output", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        body = [s for s in data["sections"] if s["name"] == "request_body"][0]
        assert body["example"] == {"day": "20240901", "lines": [{"qty": 0}]}
