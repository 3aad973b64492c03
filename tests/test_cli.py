"""Tests for the kaplanmeier command line."""

import json
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

from kaplanmeier.cli import main

SCENARIO = "1,1\n1,0\n2,1\n3,1\n3,1\n5,0\n"


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self._tmpdir = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmpdir.name)

    def tearDown(self):
        self._tmpdir.cleanup()

    def write(self, name, text):
        file = self.tmpdir / name
        file.write_text(text)
        return str(file)

    def test_table(self):
        result = self.runner.invoke(main, [self.write("obs.csv", SCENARIO)])
        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert lines[0].split() == ["time", "nevents", "ncensor", "natrisk", "survival"]
        assert [line.split() for line in lines[1:]] == [
            ["1", "1", "1", "6", "0.833333"],
            ["2", "1", "0", "4", "0.625000"],
            ["3", "2", "0", "3", "0.208333"],
            ["5", "0", "1", "1", "0.208333"],
        ]

    def test_options(self):
        text = "event\ttime\n" + "".join(f"{e}\t{t}\n" for t, e in (line.split(",") for line in SCENARIO.split()))
        file = self.write("obs.tsv", text)
        result = self.runner.invoke(main, [file, "--delimiter", "\t", "--time-column", "1", "--event-column", "0", "--skiprows", "1"])
        assert result.exit_code == 0, result.output
        assert result.output.strip().splitlines()[3].split() == ["3", "2", "0", "3", "0.208333"]

    def test_params_file(self):
        params = self.write("params.json", json.dumps({"delimiter": ";"}))
        file = self.write("obs.txt", SCENARIO.replace(",", ";"))
        result = self.runner.invoke(main, [file, "--params", params])
        assert result.exit_code == 0, result.output
        assert len(result.output.strip().splitlines()) == 5

    def test_params_file_unknown_key(self):
        params = self.write("params.json", json.dumps({"sheet": 2}))
        result = self.runner.invoke(main, [self.write("obs.csv", SCENARIO), "--params", params])
        assert result.exit_code == 2, result.output
        assert "Cannot override missing key 'sheet'" in result.output

    def test_verbose(self):
        result = self.runner.invoke(main, [self.write("obs.csv", SCENARIO), "--verbose"])
        assert result.exit_code == 0, result.output
        assert "Reading observations from" in result.output
        assert "Read 6 observations (4 events)." in result.output
        assert "Estimate has 4 rows." in result.output

    def test_bad_column(self):
        result = self.runner.invoke(main, [self.write("obs.csv", SCENARIO), "--event-column", "5"])
        assert result.exit_code == 1, result.output
        assert "Could not read" in result.output

    def test_unparseable_value(self):
        result = self.runner.invoke(main, [self.write("obs.csv", "1,1\nsoon,0\n")])
        assert result.exit_code == 1, result.output
        assert "Could not read" in result.output

    def test_empty_file(self):
        result = self.runner.invoke(main, [self.write("obs.csv", "")])
        assert result.exit_code == 1, result.output
        assert "At least one observation is required." in result.output

    def test_header_only_file(self):
        result = self.runner.invoke(main, [self.write("obs.csv", "time,event\n"), "--skiprows", "1"])
        assert result.exit_code == 1, result.output
        assert "At least one observation is required." in result.output

    def test_params_file_wrong_type(self):
        for bad in ({"time_column": "0"}, {"event_column": 1.5}, {"skiprows": True}, {"delimiter": 9}, {"time_column": -1}):
            params = self.write("params.json", json.dumps(bad))
            result = self.runner.invoke(main, [self.write("obs.csv", SCENARIO), "--params", params])
            assert result.exit_code == 2, f"{bad=}: {result.output}"
            assert "Parameter" in result.output, f"{bad=}: {result.output}"
            assert not isinstance(result.exception, TypeError)

    def test_close_times_print_distinctly(self):
        result = self.runner.invoke(main, [self.write("obs.csv", "1234.561,1\n1234.564,1\n1234.569,0\n0.1,1\n")])
        assert result.exit_code == 0, result.output
        printed = [line.split()[0] for line in result.output.strip().splitlines()[1:]]
        assert printed == ["0.1", "1234.561", "1234.564", "1234.569"], f"{printed=}"

    def test_missing_file(self):
        result = self.runner.invoke(main, [str(self.tmpdir / "missing.csv")])
        assert result.exit_code == 2


if __name__ == "__main__":
    unittest.main()
