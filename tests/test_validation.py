"""Tests for entry_requirements.validation - schema and dataset invariants."""

import json
import logging

import pytest

from entry_requirements.validation import (
    DatasetValidationError,
    load_dataset,
    validate_dataset,
    write_dataset,
)


def _doc(results=None, total=None):
    results = results if results is not None else [
        {"country": "Chile", "cca3": "CHL", "extracted": {"visaRequired": None}, "color": None},
        {"country": "Peru", "cca3": "PER", "extracted": None, "color": "green"},
    ]
    return {
        "generatedAt": "2026-01-15T10:00:00+00:00",
        "total": len(results) if total is None else total,
        "results": results,
    }


class TestValidateDataset:
    def test_valid(self):
        assert validate_dataset(_doc()) is True

    def test_not_an_object(self):
        with pytest.raises(DatasetValidationError, match="JSON object"):
            validate_dataset([])

    def test_missing_results(self):
        with pytest.raises(DatasetValidationError, match="results"):
            validate_dataset({"generatedAt": "x", "total": 0})

    def test_non_object_entry(self):
        with pytest.raises(DatasetValidationError, match="results.0"):
            validate_dataset(_doc(results=["CHL"]))

    def test_missing_cca3(self):
        with pytest.raises(DatasetValidationError, match="cca3"):
            validate_dataset(_doc(results=[{"country": "Chile"}]))

    def test_duplicate_cca3(self):
        results = [
            {"country": "Chile", "cca3": "CHL"},
            {"country": "Chile again", "cca3": "CHL"},
        ]
        with pytest.raises(DatasetValidationError, match="Duplicate cca3: CHL"):
            validate_dataset(_doc(results=results))

    def test_bad_color(self):
        results = [{"country": "Chile", "cca3": "CHL", "color": "orange"}]
        with pytest.raises(DatasetValidationError, match="color"):
            validate_dataset(_doc(results=results))

    def test_bad_tri_state(self):
        results = [{"country": "Chile", "cca3": "CHL", "extracted": {"visaRequired": "yes"}}]
        with pytest.raises(DatasetValidationError, match="visaRequired"):
            validate_dataset(_doc(results=results))

    def test_negative_days(self):
        results = [{"country": "Chile", "cca3": "CHL", "extracted": {"visaFreeDays": -3}}]
        with pytest.raises(DatasetValidationError, match="visaFreeDays"):
            validate_dataset(_doc(results=results))

    def test_total_mismatch_strict(self):
        with pytest.raises(DatasetValidationError, match="total is 7"):
            validate_dataset(_doc(total=7))

    def test_total_mismatch_lenient(self, caplog):
        with caplog.at_level(logging.WARNING, logger="entry_requirements.validation"):
            assert validate_dataset(_doc(total=7), strict=False) is True
        assert "total is 7" in caplog.text

    def test_without_schema_still_checks_invariants(self):
        results = [{"cca3": "CHL"}, {"cca3": "CHL"}]
        with pytest.raises(DatasetValidationError, match="Duplicate"):
            validate_dataset(_doc(results=results), schema_path=None)


class TestLoadWrite:
    def test_round_trip_keeps_unicode(self, tmp_path):
        path = tmp_path / "out" / "entry.json"
        doc = _doc(results=[{"country": "Côte d'Ivoire", "cca3": "CIV", "visaText": "È necessario il visto"}])
        write_dataset(doc, path)
        assert "Côte d'Ivoire" in path.read_text(encoding="utf-8")
        assert load_dataset(path) == doc

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dataset(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{ invalid json }")
        with pytest.raises(json.JSONDecodeError):
            load_dataset(path)
