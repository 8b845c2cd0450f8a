# student_db/io_utils.py
"""Модуль для операций ввода/вывода: текстовый файл базы и экспорт в CSV."""
import csv
import re
from typing import Iterable, List, Optional, Tuple

from .models import Student
from .errors import FileProcessingError

FIELD_COUNT = 5
INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
EXPORT_HEADER = ['id', 'surname', 'birth_year', 'study_year', 'gpa']


def parse_line(line: str) -> Optional[Student]:
    """Разбирает строку вида '<id> <фамилия> <год рождения> <курс> <балл>'.

    Поля разделены любыми пробельными символами, лишние поля в конце строки
    игнорируются. Если строку не удалось разобрать, возвращает None;
    валидность самой записи здесь не проверяется.
    """
    fields = line.split()
    if len(fields) < FIELD_COUNT:
        return None
    # int()/float() понимают "1_0", "nan", "inf" и не-ASCII цифры - такие поля не принимаем
    if not all(INT_RE.fullmatch(fields[i]) for i in (0, 2, 3)) or not FLOAT_RE.fullmatch(fields[4]):
        return None
    return Student(
        int(fields[0]),
        fields[1],
        int(fields[2]),
        int(fields[3]),
        float(fields[4]),
    )


def format_line(student: Student) -> str:
    """Строка файла базы для одной записи, балл с одним знаком после запятой."""
    return f"{student.id} {student.surname} {student.birth_year} {student.study_year} {student.gpa:.1f}"


def read_student_lines(filepath: str) -> List[Tuple[int, Optional[Student]]]:
    """Читает файл базы и возвращает пары (номер строки, студент или None).

    Пустые строки пропускаются, строка с байтами не в UTF-8 считается
    нераспознанной. Отсутствие файла - забота вызывающего кода, здесь оно,
    как и любая другая ошибка открытия, превращается в FileProcessingError.
    """
    rows = []
    try:
        with open(filepath, mode='rb') as file:
            for line_num, raw in enumerate(file, start=1):
                try:
                    line = raw.decode('utf-8')
                except UnicodeDecodeError:
                    rows.append((line_num, None))
                    continue
                if not line.strip():
                    continue
                rows.append((line_num, parse_line(line)))
    except OSError as e:
        raise FileProcessingError(f"Не удалось прочитать файл {filepath}: {e}") from e
    return rows


def write_students_to_file(filepath: str, students: Iterable[Student]):
    """Полностью перезаписывает файл базы, по одной записи на строку."""
    try:
        with open(filepath, mode='w', encoding='utf-8') as file:
            for s in students:
                file.write(format_line(s) + "\n")
    except OSError as e:
        raise FileProcessingError(f"Не удалось открыть файл базы для записи {filepath}: {e}") from e


def export_students_to_csv(filepath: str, students: Iterable[Student]):
    """Экспортирует выборку студентов в отдельный CSV-файл с заголовком."""
    try:
        with open(filepath, mode='w', encoding='utf-8', newline='') as file:
            writer = csv.writer(file)
            writer.writerow(EXPORT_HEADER)

            for s in students:
                writer.writerow([s.id, s.surname, s.birth_year, s.study_year, f"{s.gpa:.2f}"])
    except OSError as e:
        raise FileProcessingError(f"Ошибка экспорта в файл {filepath}: {e}") from e
