from __future__ import annotations

from dataclasses import dataclass

from .adjustments.mysql_adjustment_repository import MySQLAdjustmentRepository
from .adjustments.service import AdjustmentService
from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_GRACE_MINUTES, DEFAULT_MIDNIGHT_WINDOW_END
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.calculator.standard_calculator import StandardWorkTimeCalculator
from .payroll.service import AttendanceSummaryService
from .punches.mysql_punch_repository import MySQLPunchLinkRepository, MySQLPunchRepository
from .punches.service import PunchLinkService
from .rules.mysql_rule_repository import MySQLRuleRepository
from .rules.service import RuleService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    rules_repo: MySQLRuleRepository
    adjustments_repo: MySQLAdjustmentRepository
    punches_repo: MySQLPunchRepository
    links_repo: MySQLPunchLinkRepository
    attendance_repo: MySQLAttendanceRepository

    attendance_service: AttendanceService
    summary_service: AttendanceSummaryService
    punch_link_service: PunchLinkService
    rule_service: RuleService
    adjustment_service: AdjustmentService

    default_offset_minutes: int = 0


def build_container(
    *,
    db_config: dict,
    grace_minutes: int = DEFAULT_GRACE_MINUTES,
    midnight_window_end: str = DEFAULT_MIDNIGHT_WINDOW_END,
    default_offset_minutes: int = 0,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    rules_repo = MySQLRuleRepository(conn)
    adjustments_repo = MySQLAdjustmentRepository(conn)
    punches_repo = MySQLPunchRepository(conn)
    links_repo = MySQLPunchLinkRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        rules_repo,
        adjustments_repo,
        punches_repo,
        links_repo,
        strategy_factory=AttendanceStrategyFactory(),
        calculator=StandardWorkTimeCalculator(),
        grace_minutes=grace_minutes,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        rules_repo=rules_repo,
        adjustments_repo=adjustments_repo,
        punches_repo=punches_repo,
        links_repo=links_repo,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        summary_service=AttendanceSummaryService(attendance_repo),
        punch_link_service=PunchLinkService(
            punches_repo,
            links_repo,
            employees_repo,
            midnight_window_end=midnight_window_end,
        ),
        rule_service=RuleService(rules_repo),
        adjustment_service=AdjustmentService(adjustments_repo),
        default_offset_minutes=int(default_offset_minutes),
    )
