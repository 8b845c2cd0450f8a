# student_db/config.py
"""Настройки приложения. Каждое значение можно переопределить переменной окружения."""
import os

# --- КОНФИГУРАЦИЯ ---
DB_FILE = os.environ.get("STUDENT_DB_FILE", "students_database.txt")
OUTPUT_FILE = os.environ.get("STUDENT_DB_OUTPUT", "output_students.txt")
EXPORT_FILE = os.environ.get("STUDENT_DB_EXPORT", "search_results.csv")
LOG_LEVEL = os.environ.get("STUDENT_DB_LOG_LEVEL", "WARNING").upper()
