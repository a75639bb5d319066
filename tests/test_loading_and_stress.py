# ============================================================
# tests/test_loading_and_stress.py # 재하면 기하 및 응력 식 테스트
# ============================================================
"""
Unit tests for loaded-area geometry, wheel contact patches and stress formulas.
Run with: python -m pytest tests -v
"""

import unittest
import math

from slabcore.exceptions import LoadingError
from slabcore.loading.base_loading import LoadClass, radius_of_loaded_area
from slabcore.loading.racking import RackingLoad
from slabcore.loading.wheel import (
    TireType, WheelConfiguration, WheelLoad, single_contact_dimensions
)
from slabcore.stress import (
    JointType, Position, corner_stress, edge_stress, has_load_transfer,
    interior_stress, position_stress, radius_of_relative_stiffness
)


class TestLoadedArea(unittest.TestCase):
    """Tests for radius_of_loaded_area (TM38 Eq. 3.4)"""

    def test_large_area_uses_circular_radius(self):
        # 1000 x 1000 mm -> r = sqrt(1/pi) m = 564.2 mm >= 1.72 * 100
        self.assertAlmostEqual(radius_of_loaded_area(1000, 1000, 100), 1000 / math.sqrt(math.pi))

    def test_small_area_correction(self):
        # 면적 0 -> b = sqrt(h²) - 0.675h = 0.325h
        self.assertAlmostEqual(radius_of_loaded_area(0, 0, 200), 65.0)

    def test_small_area_never_below_circular_radius(self):
        for h in (125, 150, 200, 300, 500):
            r = math.sqrt(0.0196 / math.pi) * 1000
            self.assertGreaterEqual(radius_of_loaded_area(140, 140, h), r - 1e-9)

    def test_combined_area_doubles(self):
        single = radius_of_loaded_area(1000, 1000, 100)
        combined = radius_of_loaded_area(1000, 1000, 100, is_combined=True)
        self.assertAlmostEqual(combined, math.sqrt(2) * single)


class TestRackingLoad(unittest.TestCase):

    def test_load_class(self):
        self.assertEqual(RackingLoad().load_class, LoadClass.RACKING)

    def test_back_to_back_combination_depends_on_thickness(self):
        """배면 간격 300mm: h=200 이면 300 < 400 합산, h=125 이면 300 >= 250 단독"""
        load = RackingLoad(point_load=40, is_back_to_back=True, back_to_back_spacing=0.3)
        self.assertTrue(load.is_combined(200))
        self.assertEqual(load.effective_load(200), 80)
        self.assertFalse(load.is_combined(125))
        self.assertEqual(load.effective_load(125), 40)

    def test_area_and_load_doubled_together(self):
        load = RackingLoad(is_back_to_back=True, back_to_back_spacing=0.3)
        plain = RackingLoad()
        for h in (125, 150, 175, 200, 250):
            doubled_load = load.effective_load(h) == 2 * plain.effective_load(h)
            doubled_area = load.equivalent_radius(h) > plain.equivalent_radius(h)
            self.assertEqual(doubled_load, doubled_area, f"h={h}")

    def test_single_rack_never_combined(self):
        load = RackingLoad(is_back_to_back=False, back_to_back_spacing=0.1)
        self.assertFalse(load.is_combined(600))
        self.assertEqual(load.effective_load(600), load.point_load)


class TestWheelContact(unittest.TestCase):

    def test_pneumatic_and_solid_single_contact(self):
        length, width = single_contact_dimensions(TireType.PNEUMATIC, 250, 100, 40)
        self.assertAlmostEqual(length, 0.6 * math.sqrt(250 * 40 * 10))
        self.assertAlmostEqual(width, 80)
        length, width = single_contact_dimensions(TireType.SOLID, 250, 100, 40)
        self.assertAlmostEqual(length, 0.4 * math.sqrt(250 * 40 * 10))
        self.assertAlmostEqual(width, 70)

    def test_steel_wheel_width_floor(self):
        """강재 휠 40kN: 폭 max(10, 4) = 10mm -> 최소 50mm 적용"""
        wheel = WheelLoad(point_load=40, tire_type="steel", configuration="single",
                          wheel_diameter=250, tire_width=100)
        contact = wheel.contact_patch()
        self.assertEqual(contact.single_width, 50)
        self.assertEqual(contact.width, 50)
        self.assertAlmostEqual(contact.length, 90)
        self.assertAlmostEqual(contact.area, 90 * 50 / 1e6)

    def test_minimum_contact_length(self):
        length, _ = single_contact_dimensions(TireType.PNEUMATIC, 250, 100, 0)
        self.assertEqual(length, 50)

    def test_dual_close_spacing_merges(self):
        wheel = WheelLoad(configuration="dual", wheel_spacing=150)  # 150 < 2 x 80
        contact = wheel.contact_patch()
        self.assertTrue(contact.is_interacting)
        self.assertAlmostEqual(contact.width, 2 * 80 + 150)
        self.assertAlmostEqual(contact.length, contact.single_length)

    def test_dual_wide_spacing_back_derives_width(self):
        wheel = WheelLoad(configuration="dual", wheel_spacing=200)  # 200 >= 160
        contact = wheel.contact_patch()
        self.assertFalse(contact.is_interacting)
        self.assertAlmostEqual(contact.width, math.sqrt(2 * 80))
        self.assertAlmostEqual(contact.area, 2 * contact.single_length * 80 / 1e6)

    def test_tandem_close_and_wide_spacing(self):
        single_length = 0.6 * math.sqrt(250 * 40 * 10)  # 189.7 mm
        close = WheelLoad(configuration="tandem", wheel_spacing=150).contact_patch()
        self.assertTrue(close.is_interacting)
        self.assertAlmostEqual(close.length, 2 * single_length + 150)
        self.assertAlmostEqual(close.width, 80)

        wide = WheelLoad(configuration="tandem", wheel_spacing=400).contact_patch()
        self.assertFalse(wide.is_interacting)
        self.assertAlmostEqual(wide.length, math.sqrt(2 * single_length))
        self.assertAlmostEqual(wide.width, 80)

    def test_wheel_design_factor_and_load(self):
        wheel = WheelLoad(point_load=40, frequency_factor=1.2)
        self.assertEqual(wheel.load_class, LoadClass.WHEEL)
        self.assertAlmostEqual(wheel.design_factor, 1.8)
        self.assertEqual(wheel.effective_load(600), 40)

    def test_enum_coercion(self):
        wheel = WheelLoad(tire_type="solid", configuration="tandem")
        self.assertIs(wheel.tire_type, TireType.SOLID)
        self.assertIs(wheel.configuration, WheelConfiguration.TANDEM)

    def test_unknown_codes_raise_loading_error(self):
        with self.assertRaises(LoadingError):
            WheelLoad(tire_type="rubber")
        with self.assertRaises(LoadingError):
            WheelLoad(configuration="triple")


class TestStress(unittest.TestCase):
    """Tests for slabcore/stress.py"""

    E = 5000 * math.sqrt(35) * 1000

    def test_radius_of_relative_stiffness(self):
        self.assertAlmostEqual(radius_of_relative_stiffness(self.E, 125, 54), 97.7, delta=0.1)

    def test_radius_of_relative_stiffness_scaling(self):
        """l 은 h^0.75 에 비례"""
        l_1 = radius_of_relative_stiffness(self.E, 150, 54)
        l_2 = radius_of_relative_stiffness(self.E, 300, 54)
        self.assertAlmostEqual(l_2 / l_1, 2 ** 0.75)

    def test_formulas_when_l_equals_b(self):
        # ln(l/b) = 0 -> interior = q * 1.069 * 1000, q = 40*1000/200² = 1.0
        self.assertAlmostEqual(interior_stress(40, 200, 100, 100), 1069.0)
        # (b/l)^0.5 = 1 -> corner = 0
        self.assertAlmostEqual(corner_stress(40, 200, 100, 100), 0.0)
        # b = 25.4 -> ln(b/25.4) = 0
        self.assertAlmostEqual(edge_stress(40, 200, 25.4, 25.4), 0.0)

    def test_load_transfer_factors(self):
        l, b = 164.4, 100.5
        for position, factor in ((Position.INTERIOR, 1.0), (Position.EDGE, 0.85), (Position.CORNER, 0.70)):
            with_transfer = position_stress(position, 40, 250, l, b, True)
            without_transfer = position_stress(position, 40, 250, l, b, False)
            self.assertAlmostEqual(with_transfer, factor * without_transfer)

    def test_has_load_transfer(self):
        self.assertTrue(has_load_transfer("dowel"))
        self.assertTrue(has_load_transfer(JointType.TIED))
        self.assertFalse(has_load_transfer("non_dowel"))
        with self.assertRaises(LoadingError):
            has_load_transfer("welded")

    def test_stress_linear_in_load(self):
        for position in Position:
            single = position_stress(position, 40, 250, 164.4, 100.5, True)
            double = position_stress(position, 80, 250, 164.4, 100.5, True)
            self.assertAlmostEqual(double, 2 * single)


if __name__ == '__main__':
    unittest.main(verbosity=2)
