"""Module: types."""

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


# Stores a list of strings as one comma-joined column; empty string is an empty list.
class CommaSeparatedList(TypeDecorator):
    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return ""
        return ",".join(str(item) for item in value)

    def process_result_value(self, value, dialect):
        if not value:
            return []
        return value.split(",")


# Same storage as CommaSeparatedList, for whole numbers (weekday numbers).
class CommaSeparatedIntList(CommaSeparatedList):
    cache_ok = True

    def process_result_value(self, value, dialect):
        return [int(item) for item in super().process_result_value(value, dialect)]
