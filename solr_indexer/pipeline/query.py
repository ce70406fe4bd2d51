"""
SQL generation for the record lookup.

Table, field list and id column come from admin-trusted configuration and
are interpolated verbatim; only the id value is bound as a parameter.
"""

from __future__ import annotations

QMARK = "?"
FORMAT = "%s"


def build_query(table: str, fields: str, id_field: str, placeholder: str = QMARK) -> str:
    """
    Build the single-row SELECT for `table`.

    `placeholder` is the DB-API parameter marker of the driver that will run
    the statement; the default is the positional `?` marker. With the `%s`
    marker, literal `%` in the configured pieces is doubled so the driver
    does not read it as a placeholder.

    >>> build_query("T", "a,b", "id")
    'SELECT a,b FROM T WHERE id = ?'
    """
    if placeholder == FORMAT:
        table, fields, id_field = (part.replace("%", "%%") for part in (table, fields, id_field))
    return f"SELECT {fields} FROM {table} WHERE {id_field} = {placeholder}"


__all__ = ["FORMAT", "QMARK", "build_query"]
