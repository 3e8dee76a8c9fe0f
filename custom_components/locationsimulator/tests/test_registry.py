"""
Tests for DeviceRegistry: discovery order, duplicate protection, idempotent
removal and strict index lookup.
"""

from __future__ import annotations

import unittest

from custom_components.locationsimulator.registry import DeviceRegistry

from .test_common import UDID_A, UDID_B, UDID_C


class TestDeviceRegistry(unittest.TestCase):

    def test_starts_empty(self):
        registry = DeviceRegistry()
        self.assertEqual(len(registry), 0)
        self.assertEqual(list(registry), [])

    def test_add_keeps_discovery_order(self):
        registry = DeviceRegistry()
        registry.add(UDID_B)
        registry.add(UDID_A)
        registry.add(UDID_C)
        self.assertEqual(list(registry), [UDID_B, UDID_A, UDID_C])

    def test_duplicate_add_is_ignored(self):
        registry = DeviceRegistry()
        self.assertTrue(registry.add(UDID_A))
        self.assertFalse(registry.add(UDID_A))
        self.assertFalse(registry.add(UDID_A))
        self.assertEqual(list(registry), [UDID_A])

    def test_remove_present_device(self):
        registry = DeviceRegistry()
        registry.add(UDID_A)
        registry.add(UDID_B)
        self.assertTrue(registry.remove(UDID_A))
        self.assertEqual(list(registry), [UDID_B])

    def test_remove_absent_device_is_noop(self):
        registry = DeviceRegistry()
        registry.add(UDID_A)
        self.assertFalse(registry.remove(UDID_B))
        self.assertEqual(list(registry), [UDID_A])

    def test_remove_is_exact_match(self):
        registry = DeviceRegistry()
        registry.add(UDID_A)
        self.assertFalse(registry.remove(UDID_A.lower()))
        self.assertFalse(registry.remove(UDID_A[:-1]))
        self.assertIn(UDID_A, registry)

    def test_index_lookup(self):
        registry = DeviceRegistry()
        registry.add(UDID_A)
        registry.add(UDID_B)
        self.assertEqual(registry[1], UDID_B)
        self.assertEqual(registry.index(UDID_B), 1)
        self.assertIsNone(registry.index(UDID_C))

    def test_out_of_range_index_raises(self):
        registry = DeviceRegistry()
        registry.add(UDID_A)
        with self.assertRaises(IndexError):
            registry[1]

    def test_negative_index_raises(self):
        registry = DeviceRegistry()
        registry.add(UDID_A)
        with self.assertRaises(IndexError):
            registry[-1]

    def test_iteration_is_a_snapshot(self):
        registry = DeviceRegistry()
        registry.add(UDID_A)
        registry.add(UDID_B)
        for udid in registry:
            registry.remove(udid)
        self.assertEqual(len(registry), 0)
