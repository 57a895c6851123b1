from __future__ import annotations

import json
from typing import Sequence

from ..core.enums import RuleType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Rule
from .repository import RuleRepository
from .scope import parse_scope


class MySQLRuleRepository(RuleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_rules(self) -> Sequence[Rule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT rule_id, name, priority, scope, valid_from, valid_to, rule_type, params
                FROM special_rules
                ORDER BY rule_id
                """
            )
            rows = fetchall(cur)
            return [
                Rule(
                    rule_id=int(r["rule_id"]),
                    name=r["name"],
                    priority=int(r.get("priority") or 0),
                    scope=parse_scope(r["scope"]),
                    valid_from=r["valid_from"],
                    valid_to=r["valid_to"],
                    rule_type=RuleType(r["rule_type"]),
                    params=json.loads(r["params"]) if r.get("params") else {},
                )
                for r in rows
            ]

    def create(self, rule: Rule) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO special_rules(name, priority, scope, valid_from, valid_to, rule_type, params)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    rule.name,
                    int(rule.priority),
                    rule.scope.to_text(),
                    rule.valid_from,
                    rule.valid_to,
                    rule.rule_type.value,
                    json.dumps(dict(rule.params)),
                ),
            )
            return int(cur.lastrowid)

    def delete(self, *, rule_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM special_rules WHERE rule_id=%s", (int(rule_id),))
            return cur.rowcount > 0
