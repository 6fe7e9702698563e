import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from massaction.cli import app

NETWORK = {
    "species": {"A": 1.0, "B": 0.0},
    "reactions": [{"reactants": ["A"], "products": ["B"], "rate": 2.0}],
    "solver": {"points": 11, "t_end": 1.0},
}


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.network_file = Path(self._tmp.name) / "network.json"
        self.network_file.write_text(json.dumps(NETWORK))

    def test_species(self):
        result = self.runner.invoke(app, ["species", str(self.network_file)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout), {"species": ["A", "B"]})

    def test_rates(self):
        result = self.runner.invoke(app, ["rates", str(self.network_file)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout), {"rates": {"A": -2.0, "B": 2.0}})

    def test_run(self):
        result = self.runner.invoke(
            app, ["run", str(self.network_file), "--points", "5", "--method", "BDF"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.stdout)
        self.assertEqual(len(payload["time"]), 5)
        self.assertEqual(set(payload["species"]), {"A", "B"})
        self.assertAlmostEqual(payload["final"]["A"], 0.1353352832, places=4)
        self.assertAlmostEqual(payload["final"]["A"] + payload["final"]["B"], 1.0, places=6)

    def test_run_rejects_bad_time_span(self):
        result = self.runner.invoke(app, ["run", str(self.network_file), "--t-end", "-1"])
        self.assertEqual(result.exit_code, 1)

    def test_malformed_network(self):
        self.network_file.write_text(json.dumps({"reactions": [{"reactants": ["A"]}]}))
        result = self.runner.invoke(app, ["rates", str(self.network_file)])
        self.assertEqual(result.exit_code, 1)

    def test_missing_file(self):
        result = self.runner.invoke(app, ["rates", str(Path(self._tmp.name) / "nope.json")])
        self.assertNotEqual(result.exit_code, 0)


if __name__ == '__main__':
    unittest.main()
