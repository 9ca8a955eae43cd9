"""
Tests for the command-line collaborator.
"""
import json
import pytest
from qtc_calculator.cli import main, build_parser, read_inputs

class TestCommandLine:
    """Test argument handling, output and exit codes."""

    @pytest.mark.unit
    def test_narrow_ignores_wide_arguments(self):
        args = build_parser().parse_args(["--heart-rate", "70", "--qt", "400", "--qrs", "150", "--sex", "male"])
        inputs = read_inputs(args)

        assert inputs.qrs_type == "narrow"
        assert inputs.qrs_duration_ms is None
        assert inputs.sex is None

    @pytest.mark.unit
    def test_successful_run(self, capsys):
        exit_code = main(["--heart-rate", "100", "--qt", "380"])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "QTc Values" in output
        assert "borderline" in output

    @pytest.mark.unit
    def test_non_numeric_input_reported(self, capsys):
        exit_code = main(["--heart-rate", "fast", "--qt", "400"])
        output = capsys.readouterr().out

        assert exit_code == 1
        assert "Check your inputs" in output
        assert "Heart rate is required and must be a number" in output

    @pytest.mark.unit
    def test_wide_missing_sex(self, capsys):
        exit_code = main(["--qrs-type", "wide", "--heart-rate", "90", "--qt", "460", "--qrs", "160"])
        output = capsys.readouterr().out

        assert exit_code == 1
        assert "Sex is required" in output

    @pytest.mark.unit
    def test_json_output(self, capsys):
        exit_code = main(["--qrs-type", "wide", "--heart-rate", "90", "--qt", "460", "--qrs", "160", "--sex", "male", "--json"])
        payload = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert payload["status"] == "ok"
        assert payload["result"]["mode"] == "wide"
        assert payload["result"]["wide_values"]["bogossian_modified_qt"] == 380.0

    @pytest.mark.unit
    def test_json_output_on_failure(self, capsys):
        exit_code = main(["--heart-rate", "0", "--qt", "400", "--json"])
        payload = json.loads(capsys.readouterr().out)

        assert exit_code == 1
        assert payload == {"status": "invalid", "errors": ["Heart rate must be greater than 0 bpm."]}

    @pytest.mark.unit
    def test_blank_heart_rate_reported_as_missing(self, capsys):
        exit_code = main(["--heart-rate", "  ", "--qt", "400"])
        output = capsys.readouterr().out

        assert exit_code == 1
        assert "Heart rate is required and must be a number" in output
