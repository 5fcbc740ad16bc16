from __future__ import annotations

# Single source of truth for static constants.

# Extended Arabic-Indic (Persian) and Arabic-Indic digit alphabets, ordered 0-9.
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

# Thousands separators accepted in hand-entered counts: Latin comma and Arabic comma.
THOUSANDS_SEPARATORS = (",", "،")

DEFAULT_TRANSACTION_DATE = "14030101"
DEFAULT_LEDGER_API_URL = "https://api.example.com/v1/livestock-entry"
NAME_SUGGESTION_LIMIT = 5

BYTE_ORDER_MARK = "\ufeff"

# Built-in registry used when no NAME_REGISTRY_PATH is configured.
DEFAULT_NAME_REGISTRY = (
    (101, "علی رضا محمدی"),
    (102, "محمد حسین پور"),
    (103, "سید حسن موسوی"),
    (104, "احمد کریمی"),
    (105, "رضا نوروزی"),
    (106, "محمود احمدی"),
    (107, "جواد عزتی"),
    (108, "حسین حسینی"),
    (109, "اکبر عباسی"),
    (110, "مهدی زند"),
    (111, "کامران تفتی"),
    (112, "سارا امیری"),
    (113, "مریم کاویانی"),
    (114, "امیر جعفری"),
    (115, "سعید آقاخانی"),
)
