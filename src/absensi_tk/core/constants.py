"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

UNMARKED_LABEL = "-"
NO_CLASS_LABEL = "-"

REPORT_TITLE = "LAPORAN ABSENSI DIGITAL SISWA TK"
DEFAULT_SCHOOL_CITY = "Kediri"
CSV_DELIMITER = ";"

# attendance.note is VARCHAR(255)
MAX_NOTE_LENGTH = 255

MONTH_NAMES_ID = [
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
]
