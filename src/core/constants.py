"""Core constants used across Gradebook modules.

This module centralizes parsing rules, file names, and limits.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_INPUT_PATH = "students.txt"
DEFAULT_REPORT_NAME = "report.txt"
DEFAULT_LOG_LEVEL = "ERROR"
SOURCE_ENCODING = "utf-8"
SOURCE_BOM_ENCODING = "utf-8-sig"
REPORT_ENCODING = "utf-8"
DELIMITER_PRIORITY = (",", ";", "\t")
DEFAULT_DELIMITER = ","
QUOTE_CHAR = '"'
MIN_RECORD_FIELDS = 3
HEADER_ID_LABEL = "id"
HEADER_SCORE_LABEL = "score"
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
FALLBACK_GRADE = "F"
REPORT_LINE_TEMPLATE = "{full_name} (ID: {student_id}): Score = {score}, Grade = {grade}"
RUN_SPEC_VERSION = 1
TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
FALSE_FLAG_VALUES = ("0", "false", "no", "off")
