from .record_store import RecordStore, validate_new_record

__all__ = ["RecordStore", "validate_new_record"]
