"""
Tests for the HRC FastAPI server.
"""

import inspect

import pytest
from fastapi.testclient import TestClient

from hrc.server import app, process_document


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def levels_payload(level_specs):
    """Level configuration as sent by a UI."""
    return [spec.to_dict() for spec in level_specs]


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check(self, client):
        """Test health check."""
        response = client.get("/api/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data


class TestValidateEndpoint:
    """Tests for level validation."""

    def test_valid_levels(self, client, levels_payload):
        """Test valid levels."""
        response = client.post("/api/levels/validate", json={"levels": levels_payload})
        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["level_count"] == 3
        assert data["errors"] == []

    def test_reports_every_invalid_level(self, client, levels_payload):
        """Test reports every invalid level."""
        levels_payload[0]["pattern"] = ""
        levels_payload[1]["item_type"] = ""
        response = client.post("/api/levels/validate", json={"levels": levels_payload})
        data = response.json()
        assert data["valid"] is False
        assert [e["level"] for e in data["errors"]] == [1, 2]
        assert data["errors"][0]["error"] == "RegEx pattern is required."

    def test_no_levels(self, client):
        """Test no levels."""
        data = client.post("/api/levels/validate", json={"levels": []}).json()
        assert data["valid"] is False


class TestProcessEndpoint:
    """Tests for in-memory processing."""

    def test_process_lines(self, client, levels_payload, sample_lines, expected_output):
        """Test process lines."""
        response = client.post(
            "/api/process", json={"levels": levels_payload, "lines": sample_lines}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["output_lines"] == expected_output
        assert data["summary"]["transformed_lines_count"] == 8

    def test_process_text(self, client, levels_payload, sample_lines, expected_output):
        """Test process text."""
        response = client.post(
            "/api/process",
            json={"levels": levels_payload, "text": "\r\n".join(sample_lines)},
        )
        assert response.status_code == 200
        assert response.json()["output_lines"] == expected_output

    def test_requires_input(self, client, levels_payload):
        """Test requires input."""
        response = client.post("/api/process", json={"levels": levels_payload})
        assert response.status_code == 400

    def test_invalid_level_rejected(self, client, levels_payload, sample_lines):
        """Test invalid level rejected."""
        levels_payload[0]["pattern"] = "no groups"
        response = client.post(
            "/api/process", json={"levels": levels_payload, "lines": sample_lines}
        )
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error_code"] == "HRC_010"
        assert "exactly one capturing group" in detail["message"]


class TestProcessFileEndpoint:
    """Tests for processing documents on disk."""

    def test_process_file(self, client, levels_payload, sample_document):
        """Test process file."""
        response = client.post(
            "/api/process-file",
            json={"levels": levels_payload, "input_path": str(sample_document)},
        )
        assert response.status_code == 200
        data = response.json()
        output_path = sample_document.with_name("notes.processed.md")
        assert output_path.exists()
        assert data["output_path"] == str(output_path.resolve())
        assert data["summary_text"].startswith("✓ Processing Complete!")

    def test_missing_input(self, client, levels_payload, temp_dir):
        """Test missing input."""
        response = client.post(
            "/api/process-file",
            json={"levels": levels_payload, "input_path": str(temp_dir / "missing.md")},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error_code"] == "HRC_020"

    def test_unwritable_output(self, client, levels_payload, sample_document, temp_dir):
        """Test unwritable output."""
        response = client.post(
            "/api/process-file",
            json={
                "levels": levels_payload,
                "input_path": str(sample_document),
                "output_path": str(temp_dir / "no_such_dir" / "out.md"),
            },
        )
        assert response.status_code == 422
        assert response.json()["detail"]["error_code"] == "HRC_021"


class TestEndpointExecution:
    """Tests for how endpoints are scheduled."""

    def test_file_endpoint_runs_in_threadpool(self):
        """Test the blocking file endpoint is a plain function."""
        assert not inspect.iscoroutinefunction(process_document)
