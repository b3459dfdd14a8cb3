import io
import unittest

from clinic_core import HospitalSystem
from console import HospitalConsole


def run_console(script, system=None):
    system = system or HospitalSystem(specialization_count=1, queue_capacity=2)
    out = io.StringIO()
    cleared = []
    console = HospitalConsole(system, stdin=io.StringIO(script), stdout=out,
                              clear=lambda: cleared.append(True))
    console.run()
    return out.getvalue(), system, cleared


class TestHospitalConsole(unittest.TestCase):
    def test_scenario(self):
        script = "\n".join([
            "1", "1", "Alice", "0",
            "1", "1", "Bob", "1",
            "1", "1", "Carol", "0",
            "3", "1",
            "3", "1",
            "3", "1",
            "6",
        ]) + "\n"
        output, system, _ = run_console(script)

        self.assertEqual(output.count("Patient added successfully."), 2)
        self.assertIn("Sorry, we can't add more patients for specialization 1.", output)
        self.assertLess(output.index("Bob, please go with the Doctor."),
                        output.index("Alice, please go with the Doctor."))
        self.assertIn("(Urgent case, arrived at ", output)
        self.assertIn("No patients in specialization 1 at the moment. Have rest, Doctor.", output)
        self.assertTrue(output.endswith("Exiting program...\n"))
        self.assertTrue(system.registry.get(1).is_empty())

    def test_invalid_inputs_reprompt(self):
        script = "\n".join(["9", "abc", "1", "0", "2", "1", "   ", "6"]) + "\n"
        output, system, _ = run_console(script)
        self.assertIn("Invalid input. Please enter a number between 1 and 6: ", output)
        self.assertIn("Invalid input. Please enter a number between 1 and 1: ", output)
        self.assertIn("Invalid name. Please enter a valid name.", output)
        self.assertTrue(system.registry.get(1).is_empty())

    def test_print_patients_and_statistics(self):
        system = HospitalSystem(specialization_count=2, queue_capacity=5)
        system.add_patient(2, "Regular Joe", False)
        system.add_patient(2, "Urgent Ann", True)
        output, _, _ = run_console("2\n4\n6\n", system)

        self.assertIn("Specialization 2 (2 patients):", output)
        self.assertLess(output.index("Urgent Ann"), output.index("Regular Joe"))
        self.assertIn("Urgent Ann           (Urgent, Arrived: ", output)
        self.assertIn("Specialization Urgent    Regular   Total     Status", output)
        self.assertIn("1              0         0         0         Empty", output)
        self.assertIn("2              1         1         2         Available", output)

    def test_empty_listing_clear_and_eof(self):
        output, _, cleared = run_console("2\n5\n")
        self.assertIn("No patients in any specialization at the moment.", output)
        self.assertEqual(cleared, [True])
        self.assertEqual(output.count("HOSPITAL MANAGEMENT SYSTEM v2.0"), 2)
        self.assertTrue(output.endswith("Exiting program...\n"))


if __name__ == '__main__':
    unittest.main()
