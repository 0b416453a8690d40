from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classrooms.mysql_classroom_repository import MySQLClassroomRepository
from .classrooms.repository import ClassroomRepository
from .classrooms.service import ClassroomService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .exams.mysql_exam_repository import MySQLExamRepository
from .exams.repository import ExamRepository
from .exams.service import ExamService
from .payments.mysql_payment_repository import MySQLPaymentRepository
from .payments.repository import PaymentRepository
from .payments.service import PaymentService
from .reports.service import ReportService
from .results.mysql_result_repository import MySQLResultRepository
from .results.repository import ResultRepository
from .results.service import ResultService
from .stats.service import StatsService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    students_repo: StudentRepository
    employees_repo: EmployeeRepository
    classrooms_repo: ClassroomRepository
    attendance_repo: AttendanceRepository
    payments_repo: PaymentRepository
    exams_repo: ExamRepository
    results_repo: ResultRepository

    student_service: StudentService
    employee_service: EmployeeService
    classroom_service: ClassroomService
    attendance_service: AttendanceService
    payment_service: PaymentService
    exam_service: ExamService
    result_service: ResultService
    stats_service: StatsService
    report_service: ReportService


def assemble_container(
    *,
    students_repo: StudentRepository,
    employees_repo: EmployeeRepository,
    classrooms_repo: ClassroomRepository,
    attendance_repo: AttendanceRepository,
    payments_repo: PaymentRepository,
    exams_repo: ExamRepository,
    results_repo: ResultRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any set of repositories (MySQL in production, in-memory in tests)."""

    repos = dict(
        students=students_repo,
        attendance=attendance_repo,
        payments=payments_repo,
        exams=exams_repo,
        results=results_repo,
    )
    return Container(
        conn=conn,
        students_repo=students_repo,
        employees_repo=employees_repo,
        classrooms_repo=classrooms_repo,
        attendance_repo=attendance_repo,
        payments_repo=payments_repo,
        exams_repo=exams_repo,
        results_repo=results_repo,
        student_service=StudentService(
            students_repo,
            attendance=attendance_repo,
            payments=payments_repo,
            results=results_repo,
        ),
        employee_service=EmployeeService(employees_repo, classrooms=classrooms_repo),
        classroom_service=ClassroomService(classrooms_repo, employees_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        payment_service=PaymentService(payments_repo, students_repo),
        exam_service=ExamService(exams_repo, results=results_repo),
        result_service=ResultService(results_repo, exams_repo, students_repo),
        stats_service=StatsService(employees=employees_repo, classrooms=classrooms_repo, **repos),
        report_service=ReportService(**repos),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble_container(
        conn=conn,
        students_repo=MySQLStudentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        classrooms_repo=MySQLClassroomRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
        exams_repo=MySQLExamRepository(conn),
        results_repo=MySQLResultRepository(conn),
    )
