import unittest

from .models import Occupancy, Priority, QueueError, QueueStatus
from .registry import HospitalSystem, SpecializationRegistry


class TestSpecializationRegistry(unittest.TestCase):
    def setUp(self):
        self.registry = SpecializationRegistry(specialization_count=3, queue_capacity=5)

    def test_invalid_specialization_ids(self):
        for bad in (0, 4, -1, True, "1", None):
            admit = self.registry.admit(bad, "X", Priority.REGULAR)
            dispatch = self.registry.dispatch_next(bad)
            self.assertIs(admit.error, QueueError.INVALID_SPECIALIZATION, bad)
            self.assertIs(dispatch.error, QueueError.INVALID_SPECIALIZATION, bad)
        self.assertEqual(self.registry.list_non_empty(), [])

    def test_invalid_for_single_specialization(self):
        registry = SpecializationRegistry(specialization_count=1, queue_capacity=5)
        self.assertIs(registry.admit(0, "X", Priority.URGENT).error,
                      QueueError.INVALID_SPECIALIZATION)
        self.assertIs(registry.admit(2, "X", Priority.URGENT).error,
                      QueueError.INVALID_SPECIALIZATION)
        self.assertTrue(registry.admit(1, "X", Priority.URGENT).ok)

    def test_empty_and_invalid_are_distinct(self):
        self.assertIs(self.registry.dispatch_next(2).error, QueueError.EMPTY_QUEUE)
        self.assertIs(self.registry.dispatch_next(9).error, QueueError.INVALID_SPECIALIZATION)

    def test_categories_are_independent(self):
        self.registry.admit(1, "A", Priority.REGULAR)
        self.registry.admit(3, "B", Priority.URGENT)
        self.assertEqual(self.registry.get(1).occupancy(), Occupancy(0, 1))
        self.assertEqual(self.registry.get(2).occupancy(), Occupancy(0, 0))
        self.assertEqual(self.registry.get(3).occupancy(), Occupancy(1, 0))

    def test_list_non_empty(self):
        self.registry.admit(3, "C", Priority.REGULAR)
        self.registry.admit(1, "A", Priority.REGULAR)
        self.registry.admit(1, "U", Priority.URGENT)

        listing = self.registry.list_non_empty()
        self.assertEqual([sid for sid, _ in listing], [1, 3])
        self.assertEqual([p.name for p in listing[0][1]], ["U", "A"])
        self.assertEqual([p.name for p in listing[1][1]], ["C"])

    def test_statistics(self):
        for i in range(4):
            self.registry.admit(1, f"P{i}", Priority.REGULAR)
        for i in range(5):
            self.registry.admit(2, f"Q{i}", Priority.from_flag(i < 2))
        for i in range(3):
            self.registry.admit(3, f"R{i}", Priority.URGENT)

        rows = self.registry.statistics()
        self.assertEqual([r.specialization_id for r in rows], [1, 2, 3])
        self.assertEqual([r.status for r in rows],
                         [QueueStatus.BUSY, QueueStatus.FULL, QueueStatus.AVAILABLE])
        self.assertEqual((rows[1].urgent, rows[1].regular, rows[1].total), (2, 3, 5))
        self.assertEqual(rows[0].to_dict()["status"], "Busy")

        fresh = SpecializationRegistry(specialization_count=2)
        self.assertTrue(all(r.status is QueueStatus.EMPTY for r in fresh.statistics()))

    def test_get_unknown_raises(self):
        with self.assertRaises(KeyError):
            self.registry.get(0)

    def test_construction_parameters(self):
        self.assertEqual(len(SpecializationRegistry()), 20)
        self.assertEqual(SpecializationRegistry().queue_capacity, 5)
        with self.assertRaises(ValueError):
            SpecializationRegistry(specialization_count=0)
        with self.assertRaises(ValueError):
            SpecializationRegistry(queue_capacity=-1)


class TestHospitalScenario(unittest.TestCase):
    def test_alice_bob_carol(self):
        system = HospitalSystem(specialization_count=1, queue_capacity=2)
        queue = system.registry.get(1)

        self.assertTrue(system.add_patient(1, "Alice", False).ok)
        self.assertEqual(queue.occupancy(), Occupancy(0, 1))
        self.assertTrue(system.add_patient(1, "Bob", True).ok)
        self.assertEqual(queue.occupancy(), Occupancy(1, 1))

        rejected = system.add_patient(1, "Carol", False)
        self.assertIs(rejected.error, QueueError.CAPACITY_EXCEEDED)
        self.assertEqual(queue.occupancy(), Occupancy(1, 1))

        self.assertEqual(system.next_patient(1).value.name, "Bob")
        self.assertEqual(queue.occupancy(), Occupancy(0, 1))
        self.assertEqual(system.next_patient(1).value.name, "Alice")
        self.assertEqual(queue.occupancy(), Occupancy(0, 0))
        self.assertIs(system.next_patient(1).error, QueueError.EMPTY_QUEUE)

    def test_summary(self):
        system = HospitalSystem(specialization_count=2, queue_capacity=2)
        system.add_patient(1, "A", True)
        system.add_patient(1, "B", False)
        system.add_patient(2, "C", False)
        self.assertEqual(system.summary(), {
            "specializations": 2,
            "capacity": 4,
            "urgent": 1,
            "regular": 2,
            "total": 3,
            "full": 1,
        })


if __name__ == '__main__':
    unittest.main()
