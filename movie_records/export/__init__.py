from .csv_export import CSV_COLUMNS, CSV_MIME_TYPE, export_filename, records_to_frame, to_csv

__all__ = ["CSV_COLUMNS", "CSV_MIME_TYPE", "export_filename", "records_to_frame", "to_csv"]
