from .sources import (
    LoadReport,
    read_csv_pairs,
    read_json_pairs,
    read_pairs,
    load_dictionary,
    merge_letter_files,
)

__all__ = [
    "LoadReport",
    "read_csv_pairs",
    "read_json_pairs",
    "read_pairs",
    "load_dictionary",
    "merge_letter_files",
]
