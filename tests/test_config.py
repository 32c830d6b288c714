"""
Tests for park configuration.

Covers:
- Validation of components and turbines
- Dictionary and file serialization
- Sample fleet and merging
"""

import json
import tempfile
import unittest
from pathlib import Path

from windpark.config import (
    ApiConfig, ConfigFormat, MonitoringConfig, ParkConfig, PlanningConfig,
    SAMPLE_TURBINES, TurbineConfig, ValidationLevel
)
from windpark.exceptions import ConfigurationError


class TestComponentValidation(unittest.TestCase):
    """Validation of individual configuration components."""

    def test_valid_defaults(self):
        for component in [PlanningConfig(), MonitoringConfig(), ApiConfig()]:
            self.assertTrue(component.validate().is_valid)

    def test_invalid_components(self):
        invalid = [
            PlanningConfig(strategy="best_fit"),
            PlanningConfig(solver_time_limit=0),
            MonitoringConfig(log_level="LOUD"),
            MonitoringConfig(max_event_history=0),
            ApiConfig(port=0),
            ApiConfig(port=70000),
            ApiConfig(prefix="api"),
            ApiConfig(prefix="/api/"),
            ApiConfig(host=""),
        ]
        for component in invalid:
            result = component.validate()
            self.assertFalse(result.is_valid, component)
            self.assertGreater(len(result.errors), 0)

    def test_turbine_validation(self):
        self.assertTrue(TurbineConfig("A", 2, 15).validate().is_valid)

        for turbine in [TurbineConfig("", 2, 1), TurbineConfig("A", -2, 1),
                        TurbineConfig("A", 2, -1), TurbineConfig("A", 2.5, 1)]:
            self.assertFalse(turbine.validate().is_valid)

        result = TurbineConfig("Z", 0, 1).validate()
        self.assertTrue(result.is_valid)
        self.assertEqual(len(result.warnings), 1)


class TestParkConfig(unittest.TestCase):
    """Park configuration tests."""

    def test_sample_turbines(self):
        config = ParkConfig.with_sample_turbines()
        turbines = config.build_turbines()

        self.assertEqual(
            [(t.identifier, t.capacity, t.production_cost) for t in turbines],
            SAMPLE_TURBINES
        )
        self.assertTrue(config.validate().is_valid)
        self.assertTrue(config.validate_and_log())

    def test_park_validation_prefixes_errors(self):
        config = ParkConfig(name="", planning=PlanningConfig(strategy="unknown"))
        config.add_turbine("A", 1, 1)
        config.add_turbine("A", -1, 1)

        result = config.validate()
        self.assertFalse(result.is_valid)
        self.assertIn("Park name cannot be empty", result.errors)
        self.assertIn("planning: Invalid planning strategy: unknown", result.errors)
        self.assertIn("Duplicate turbine identifier: A", result.errors)
        self.assertIn("turbine 'A': Turbine capacity must be >= 0, got -1", result.errors)

    def test_empty_fleet_warns(self):
        result = ParkConfig().validate()
        self.assertTrue(result.is_valid)
        self.assertIn("No turbines configured", result.warnings)

    def test_turbine_management(self):
        config = ParkConfig.with_sample_turbines()

        self.assertEqual(config.get_turbine("C").capacity, 6)
        self.assertTrue(config.remove_turbine("C"))
        self.assertFalse(config.remove_turbine("C"))
        self.assertIsNone(config.get_turbine("C"))

    def test_dict_round_trip(self):
        config = ParkConfig.with_sample_turbines(
            name="North Sea",
            planning=PlanningConfig(strategy="milp", solver_time_limit=5),
            validation_level=ValidationLevel.WARN
        )
        restored = ParkConfig.from_dict(config.to_dict())

        self.assertEqual(restored.to_dict(), config.to_dict())
        self.assertEqual(restored.validation_level, ValidationLevel.WARN)
        self.assertEqual(restored.planning.planner_options(), {"time_limit": 5, "messages": False})

    def test_from_partial_dict_uses_defaults(self):
        config = ParkConfig.from_dict({"turbines": [
            {"identifier": "A", "capacity": 3, "production_cost": 2}
        ]})

        self.assertEqual(config.name, "Wind Park")
        self.assertEqual(config.planning.strategy, "merit_order")
        self.assertEqual(config.api.prefix, "/api")
        self.assertEqual(config.turbines[0].capacity, 3)

    def test_yaml_and_json_files(self):
        config = ParkConfig.with_sample_turbines(name="File Park")

        with tempfile.TemporaryDirectory() as tmp:
            yaml_path = Path(tmp) / "park.yml"
            json_path = Path(tmp) / "park.json"
            config.save_to_file(yaml_path)
            config.save_to_file(json_path)

            self.assertEqual(ParkConfig.load_from_file(yaml_path).to_dict(), config.to_dict())
            self.assertEqual(json.loads(json_path.read_text())["name"], "File Park")
            self.assertEqual(ParkConfig.load_from_file(json_path).to_dict(), config.to_dict())

            # an explicit format wins over the suffix
            text_path = Path(tmp) / "park.txt"
            config.save_to_file(text_path, format=ConfigFormat.JSON)
            self.assertEqual(json.loads(text_path.read_text())["turbines"][0]["identifier"], "A")

            with self.assertRaises(FileNotFoundError):
                ParkConfig.load_from_file(Path(tmp) / "missing.yaml")

    def test_unusable_files(self):
        documents = {
            "park.toml": 'name = "File Park"\n',
            "list.yaml": "- identifier: A\n  capacity: 2\n  production_cost: 1\n",
            "scalar.json": "42",
            "broken.json": '{"name": ',
            "broken.yaml": "name: [unclosed\n",
            "incomplete.yaml": "turbines:\n  - identifier: A\n",
            "level.yaml": "validation_level: loose\n",
        }

        with tempfile.TemporaryDirectory() as tmp:
            for file_name, text in documents.items():
                path = Path(tmp) / file_name
                path.write_text(text)
                with self.subTest(file_name=file_name):
                    with self.assertRaises(ConfigurationError):
                        ParkConfig.load_from_file(path)

            with self.assertRaises(ConfigurationError):
                ParkConfig().save_to_file(Path(tmp) / "park.ini")

    def test_empty_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.yaml"
            path.write_text("")
            config = ParkConfig.load_from_file(path)

        self.assertEqual(config.to_dict(), ParkConfig().to_dict())

    def test_merge(self):
        base = ParkConfig.with_sample_turbines()
        override = ParkConfig(name="Merged", api=ApiConfig(port=9090))

        merged = base.merge(override)
        self.assertEqual(merged.name, "Merged")
        self.assertEqual(merged.api.port, 9090)
        self.assertEqual(merged.api.host, "127.0.0.1")
        # no turbines in the override keeps the fleet
        self.assertEqual(merged.to_dict()["turbines"], base.to_dict()["turbines"])

    def test_merge_turbines_by_identifier(self):
        base = ParkConfig.with_sample_turbines()
        override = ParkConfig()
        override.add_turbine("C", 6, 1)
        override.add_turbine("F", 4, 2)

        merged = base.merge(override)
        self.assertEqual(
            [(t.identifier, t.capacity, t.production_cost) for t in merged.turbines],
            [("A", 2, 15), ("B", 2, 5), ("C", 6, 1), ("D", 6, 5), ("E", 5, 3), ("F", 4, 2)]
        )
        self.assertEqual(len(base.turbines), 5)

    def test_configured_turbine_out_of_range(self):
        result = TurbineConfig("A", 2, 2**63).validate()
        self.assertFalse(result.is_valid)
        self.assertIn("production_cost must be <=", result.errors[0])


if __name__ == "__main__":
    unittest.main()
