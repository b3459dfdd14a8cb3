import os
import sys
from typing import Callable, Optional, TextIO

from clinic_core import HospitalSystem, QueueError
from config import HospitalConfig, configure_logging

LINE = "----------------------------------------\n"
DOUBLE_LINE = "========================================\n"

MENU = (
    "\nMain Menu:\n"
    "1) Add new patient\n"
    "2) Print all patients\n"
    "3) Get next patient\n"
    "4) View statistics\n"
    "5) Clear screen\n"
    "6) Exit\n"
)

EXIT_CHOICE = 6


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


class HospitalConsole:
    """
    控制台菜单：读取用户输入，调用 HospitalSystem，并按表格格式输出结果。
    输入输出流可替换，便于测试。
    """

    def __init__(self, system: HospitalSystem, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 clear: Callable[[], None] = clear_screen):
        self.system = system
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.clear = clear

    # ---------- 输入输出 ----------
    def write(self, text: str) -> None:
        self.stdout.write(text)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _read_int(self, low: int, high: int, retry_message: str) -> int:
        # 输入不合法时一直重新提示
        while True:
            raw = self._read_line().strip()
            try:
                value = int(raw)
            except ValueError:
                value = None
            if value is not None and low <= value <= high:
                return value
            self.write(retry_message)

    def _read_specialization(self) -> int:
        count = self.system.specialization_count
        self.write(f"Enter specialization (1-{count}): ")
        return self._read_int(
            1, count, f"Invalid input. Please enter a number between 1 and {count}: "
        )

    # ---------- 菜单项 ----------
    def display_welcome(self) -> None:
        self.write(DOUBLE_LINE)
        self.write("   HOSPITAL MANAGEMENT SYSTEM v2.0\n")
        self.write(DOUBLE_LINE + "\n")

    def get_choice(self) -> int:
        self.write(MENU)
        self.write(f"Enter your choice (1-{EXIT_CHOICE}): ")
        choice = self._read_int(
            1, EXIT_CHOICE,
            f"Invalid input. Please enter a number between 1 and {EXIT_CHOICE}: ",
        )
        self.write("\n")
        return choice

    def add_patient(self) -> None:
        specialization = self._read_specialization()

        self.write("Enter patient name: ")
        name = self._read_line()
        if not name.strip():
            self.write("Invalid name. Please enter a valid name.\n\n")
            return

        self.write("Enter status (0 for regular, 1 for urgent): ")
        status = self._read_int(
            0, 1, "Invalid input. Please enter 0 for regular or 1 for urgent: "
        )

        result = self.system.add_patient(specialization, name, status == 1)
        if result.error is QueueError.CAPACITY_EXCEEDED:
            self.write(
                f"Sorry, we can't add more patients for specialization {specialization}.\n\n"
            )
            return
        self.write("Patient added successfully.\n\n")

    def print_all_patients(self) -> None:
        listing = self.system.waiting_patients()
        if not listing:
            self.write("No patients in any specialization at the moment.\n\n")
            return

        for specialization_id, patients in listing:
            self.write(f"Specialization {specialization_id} ({len(patients)} patients):\n")
            self.write(LINE)
            for patient in patients:
                self.write(
                    f"{patient.name:<20} ({patient.priority.label}, "
                    f"Arrived: {patient.formatted_arrival_time()})\n"
                )
            self.write(LINE + "\n")

    def next_patient(self) -> None:
        specialization = self._read_specialization()
        result = self.system.next_patient(specialization)
        if result.error is QueueError.EMPTY_QUEUE:
            self.write(
                f"No patients in specialization {specialization} at the moment. "
                f"Have rest, Doctor.\n\n"
            )
            return

        patient = result.value
        self.write(f"\n{patient.name}, please go with the Doctor.\n")
        self.write(
            f"({patient.priority.label} case, arrived at "
            f"{patient.formatted_arrival_time()})\n\n"
        )

    def print_statistics(self) -> None:
        self.write("\nHospital Statistics:\n")
        self.write(DOUBLE_LINE)
        self.write(f"{'Specialization':<15}{'Urgent':<10}{'Regular':<10}{'Total':<10}Status\n")
        self.write(LINE)
        for row in self.system.statistics():
            self.write(
                f"{row.specialization_id:<15}{row.urgent:<10}{row.regular:<10}"
                f"{row.total:<10}{row.status.label}\n"
            )
        self.write(DOUBLE_LINE + "\n")

    def clear_screen(self) -> None:
        self.clear()
        self.display_welcome()

    # ---------- 主循环 ----------
    def run(self) -> None:
        self.display_welcome()
        actions = {
            1: self.add_patient,
            2: self.print_all_patients,
            3: self.next_patient,
            4: self.print_statistics,
            5: self.clear_screen,
        }
        try:
            while True:
                choice = self.get_choice()
                if choice == EXIT_CHOICE:
                    break
                actions[choice]()
        except EOFError:
            # 输入结束时按退出处理
            self.write("\n")
        self.write("Exiting program...\n")


def main() -> None:
    config = HospitalConfig.from_env()
    # 控制台默认只输出错误日志，避免打乱菜单
    configure_logging(os.environ.get("LOG_LEVEL", "ERROR"))
    HospitalConsole(HospitalSystem.from_config(config)).run()


if __name__ == "__main__":
    main()
