"""Parameterized SQL builders for partial updates and search filters.

Both builders return a ``CompiledSql`` pair: the SQL fragments, in order,
and the values to bind to them. The value for fragment ``i`` (1-based) is
bound under the name ``p<i>``, so callers appending further values (a row
identifier for an UPDATE, say) continue numbering at ``len(values) + 1``.

Only column names and fixed fragment text are ever written into the SQL
string; every user-supplied value travels through a bind parameter.
"""

from collections.abc import Mapping
from typing import Any, NamedTuple

from jobly.errors import InvalidInputError

COMPANY_JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

JOB_JS_TO_SQL = {
    "companyHandle": "company_handle",
}


class CompiledSql(NamedTuple):
    fragments: list[str]
    values: list[Any]

    def params(self) -> dict[str, Any]:
        """Bind parameters keyed by placeholder name."""
        return bind_params(self.values)


def placeholder(position: int) -> str:
    """Bind placeholder for the value at 1-based ``position``."""
    return f":p{position}"


def bind_params(values: list[Any]) -> dict[str, Any]:
    return {f"p{idx}": value for idx, value in enumerate(values, start=1)}


def quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> CompiledSql:
    """Build the SET fragments for an UPDATE touching only the given fields.

    Keys are translated through ``js_to_sql`` (camelCase field name to
    snake_case column); keys missing from the table are used as-is.
    An explicit ``None`` value sets the column to NULL.

        {"name": "Hey", "numEmployees": 10}
        => ['"name" = :p1', '"num_employees" = :p2'], ["Hey", 10]

    Raises InvalidInputError for an empty update.
    """
    keys = list(data_to_update)
    if not keys:
        raise InvalidInputError("No data")

    fragments = [
        f"{quote_ident(js_to_sql.get(key, key))} = {placeholder(idx)}"
        for idx, key in enumerate(keys, start=1)
    ]
    return CompiledSql(fragments, [data_to_update[key] for key in keys])


def set_clause(compiled: CompiledSql) -> str:
    return ", ".join(compiled.fragments)


def where_clause(compiled: CompiledSql) -> str:
    """Join filter fragments with AND; empty string when there are none."""
    if not compiled.fragments:
        return ""
    return "WHERE " + " AND ".join(compiled.fragments)


def _contains(value: str) -> str:
    return f"%{value.lower()}%"


def company_filter_sql(filters: Mapping[str, Any] | None = None) -> CompiledSql:
    """Compile company search filters.

    Recognized keys: ``name`` (case-insensitive substring), ``minEmployees``
    and ``maxEmployees`` (inclusive bounds on num_employees). The min <= max
    check belongs to the caller and is not repeated here.
    """
    filters = filters or {}
    fragments: list[str] = []
    values: list[Any] = []

    if filters.get("name"):
        values.append(_contains(filters["name"]))
        fragments.append(f"LOWER(name) LIKE {placeholder(len(values))}")
    if filters.get("minEmployees") is not None:
        values.append(filters["minEmployees"])
        fragments.append(f"num_employees >= {placeholder(len(values))}")
    if filters.get("maxEmployees") is not None:
        values.append(filters["maxEmployees"])
        fragments.append(f"num_employees <= {placeholder(len(values))}")

    return CompiledSql(fragments, values)


def job_filter_sql(filters: Mapping[str, Any] | None = None) -> CompiledSql:
    """Compile job search filters.

    Fragments are always emitted in the order title, minSalary, hasEquity,
    whatever order the keys arrive in. ``hasEquity`` only filters when it
    is exactly True; False and absent both leave equity unconstrained.
    """
    filters = filters or {}
    fragments: list[str] = []
    values: list[Any] = []

    if filters.get("title"):
        values.append(_contains(filters["title"]))
        fragments.append(f"LOWER(title) LIKE {placeholder(len(values))}")
    if filters.get("minSalary") is not None:
        values.append(filters["minSalary"])
        fragments.append(f"salary >= {placeholder(len(values))}")
    if filters.get("hasEquity") is True:
        values.append(0)
        fragments.append(f"CAST(equity AS NUMERIC) > {placeholder(len(values))}")

    return CompiledSql(fragments, values)
