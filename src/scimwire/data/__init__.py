from scimwire.data.records import Record, is_empty_value, record_fields

__all__ = ["Record", "is_empty_value", "record_fields"]
