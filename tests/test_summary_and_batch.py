# ============================================================
# tests/test_summary_and_batch.py # 결과 요약 및 배치 실행 테스트
# ============================================================
"""
Tests for services/design_summary.py and interface/batch_runner.py
Run with: python -m pytest tests -v
"""

import os
import tempfile
import unittest

import pandas as pd

from interface.batch_runner import BatchRunner
from services.design_summary import (
    GENERAL_NOTES, RACKING_NOTES, WHEEL_NOTES, DesignSummarizer, stress_ratio
)
from slabcore.engine import DesignEngine, DesignInput
from slabcore.ground.subgrade import GroundCondition
from slabcore.loading.racking import RackingLoad
from slabcore.loading.wheel import WheelLoad
from slabcore.material.concrete import SlabConcrete


def make_input(loading, fc=35.0) -> DesignInput:
    return DesignInput(ground=GroundCondition(cbr_value=10), concrete=SlabConcrete(fc=fc),
                       loading=loading, joint_type="dowel")


class TestDesignSummary(unittest.TestCase):

    def setUp(self):
        self.engine = DesignEngine()
        self.summarizer = DesignSummarizer()

    def test_stress_ratio(self):
        self.assertAlmostEqual(stress_ratio(2000, 4000), 50.0)
        self.assertEqual(stress_ratio(2000, 0), 0.0)

    def test_summary_of_adequate_racking_design(self):
        design_input = make_input(RackingLoad())
        output = self.engine.compute_design(design_input)
        summary = self.summarizer.summarize(design_input, output)

        self.assertEqual(len(summary.rows), 3)
        self.assertEqual(summary.governing_position, output.governing_position)
        self.assertEqual(summary.recommended_thickness, output.recommended_thickness)
        self.assertTrue(summary.is_adequate)
        self.assertEqual(summary.warnings, [])
        self.assertEqual(summary.notes, GENERAL_NOTES + RACKING_NOTES)
        for row in summary.rows:
            self.assertLessEqual(row.stress_ratio, 100.0 + 1e-6)

    def test_summary_warns_on_exhausted_search(self):
        design_input = make_input(RackingLoad(point_load=5000))
        summary = self.summarizer.summarize(design_input, self.engine.compute_design(design_input))
        self.assertFalse(summary.is_adequate)
        self.assertEqual(len(summary.warnings), 3)
        for row in summary.rows:
            self.assertGreater(row.stress_ratio, 100.0)

    def test_summary_of_degraded_output(self):
        design_input = make_input(WheelLoad(), fc=0)
        summary = self.summarizer.summarize(design_input, self.engine.compute_design(design_input))
        self.assertEqual(len(summary.warnings), 1)
        self.assertIn("fc", summary.warnings[0])
        self.assertEqual(summary.notes, GENERAL_NOTES + WHEEL_NOTES)
        for row in summary.rows:
            self.assertEqual(row.stress_ratio, 0.0)
            self.assertEqual(row.thickness, 150)


class TestBatchRunner(unittest.TestCase):

    PARAMS = {
        "load_class": ["racking"],
        "cbr": [5, 10],
        "fc": [0, 35],
        "baseplate_x": [140], "baseplate_y": [140],
        "point_load": [40],
        "back_to_back_spacing": [None, 0.3],
    }

    def test_combinations_and_statuses(self):
        runner = BatchRunner(self.PARAMS)
        runner.run()

        self.assertEqual(len(runner.results), 8)
        statuses = [row["status"] for row in runner.results]
        self.assertEqual(statuses.count("Degraded"), 4)  # fc = 0
        for row in runner.results:
            if row["fc"] == 35:
                self.assertIn(row["status"], ("OK", "Inadequate"))
                self.assertIn(row["governing"], ("interior", "edge", "corner"))

    def test_wheel_combos_and_definition_errors(self):
        runner = BatchRunner({
            "load_class": ["wheel"],
            "cbr": [10],
            "fc": [35],
            "tire_type": ["steel", "rubber"],
            "configuration": ["single"],
            "wheel_diameter": [250], "tire_width": [100],
            "point_load": [40],
        })
        runner.run()
        by_tire = {row["tire_type"]: row for row in runner.results}
        self.assertEqual(by_tire["rubber"]["status"], "Error")
        self.assertIn(by_tire["steel"]["status"], ("OK", "Inadequate"))

    def test_save_to_csv(self):
        runner = BatchRunner({**self.PARAMS, "fc": [35]})
        runner.run()

        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "result.csv")
            runner.save_to_csv(path)
            df = pd.read_csv(path, encoding="utf-8-sig")

        self.assertEqual(len(df), 4)
        for column in ("modulus", "allowable_stress", "edge_thickness", "corner_ratio", "governing", "status"):
            self.assertIn(column, df.columns)
        # 응력은 MPa 로 저장
        self.assertAlmostEqual(df["allowable_stress"].iloc[0], 0.456 * 35 ** 0.66, places=6)


if __name__ == '__main__':
    unittest.main(verbosity=2)
