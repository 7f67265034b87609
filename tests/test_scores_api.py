"""Tests for GET /api/scores and GET /api/scores/trends."""

from __future__ import annotations

import json
from datetime import UTC, date, datetime
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

from tests.factories import make_composite
from tracker.schemas.records import Phase
from tracker.services.scoring.series_writer import (
    build_time_series,
    scores_path,
    write_time_series,
)

VALUES = [50.0, 55.0, 60.0, 54.0, 48.0]


def _write_series(data_dir: Path, phase: Phase = Phase.post_jan6) -> None:
    scores = [make_composite(v, date(2024, i + 1, 1)) for i, v in enumerate(VALUES)]
    series = build_time_series(
        phase,
        [s.date for s in scores],
        scores,
        last_updated=datetime(2024, 6, 1, tzinfo=UTC),
    )
    write_time_series(series, scores_path(data_dir, phase))


class TestGetScores:
    def test_returns_series(self, client: TestClient, data_dir: Path) -> None:
        _write_series(data_dir)
        response = client.get("/api/scores", params={"phase": "post-jan6"})
        assert response.status_code == 200
        data = response.json()
        assert data["dates"][0] == "2024-01-01"
        assert [c["score"] for c in data["composite_scores"]] == VALUES
        assert data["metadata"]["phase"] == "post-jan6"
        assert data["metadata"]["date_range"] == {"start": "2024-01-01", "end": "2024-05-01"}

    def test_default_phase_is_post_jan6(self, client: TestClient, data_dir: Path) -> None:
        _write_series(data_dir)
        response = client.get("/api/scores")
        assert response.status_code == 200
        assert response.json()["metadata"]["phase"] == "post-jan6"

    def test_invalid_phase_400(self, client: TestClient, data_dir: Path) -> None:
        response = client.get("/api/scores", params={"phase": "future"})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "Invalid phase"
        assert detail["valid_phases"] == ["post-jan6", "trump-era", "baseline"]

    def test_missing_document_404(self, client: TestClient, data_dir: Path) -> None:
        response = client.get("/api/scores", params={"phase": "baseline"})
        assert response.status_code == 404
        detail = response.json()["detail"]
        assert detail["error"] == 'Scores not found for phase "baseline".'
        assert "generate_scores.py" in detail["message"]
        assert detail["phase"] == "baseline"

    def test_empty_document_404(self, client: TestClient, data_dir: Path) -> None:
        path = scores_path(data_dir, Phase.trump_era)
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"dates": []}), encoding="utf-8")
        response = client.get("/api/scores", params={"phase": "trump-era"})
        assert response.status_code == 404
        detail = response.json()["detail"]
        assert detail["error"] == 'No data available for phase "trump-era".'
        assert "indicators.csv" in detail["message"]

    def test_unreadable_document_500(self, client: TestClient, data_dir: Path) -> None:
        with patch(
            "tracker.api.scores.get_phase_scores", side_effect=OSError("disk error")
        ):
            response = client.get("/api/scores", params={"phase": "baseline"})
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to load scores"

    def test_corrupt_document_500(self, client: TestClient, data_dir: Path) -> None:
        path = scores_path(data_dir, Phase.baseline)
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")
        response = client.get("/api/scores", params={"phase": "baseline"})
        assert response.status_code == 500


class TestGetTrends:
    def test_returns_analysis(self, client: TestClient, data_dir: Path) -> None:
        _write_series(data_dir)
        response = client.get("/api/scores/trends", params={"phase": "post-jan6"})
        assert response.status_code == 200
        data = response.json()
        assert data["phase"] == "post-jan6"
        assert data["window"] == 3
        assert len(data["trends"]) == len(VALUES)
        assert data["trends"][0]["trend"] == "stable"
        assert data["rolling_average"][0] == 52.5
        assert "2024-03-01" in [t["date"] for t in data["turning_points"]]
        assert data["summary"]["max"] == 60.0

    def test_custom_window(self, client: TestClient, data_dir: Path) -> None:
        _write_series(data_dir)
        response = client.get("/api/scores/trends", params={"window": 1})
        assert response.status_code == 200
        assert response.json()["rolling_average"] == VALUES

    def test_window_out_of_range_422(self, client: TestClient, data_dir: Path) -> None:
        response = client.get("/api/scores/trends", params={"window": 0})
        assert response.status_code == 422

    def test_missing_phase_document_404(self, client: TestClient, data_dir: Path) -> None:
        response = client.get("/api/scores/trends", params={"phase": "trump-era"})
        assert response.status_code == 404
