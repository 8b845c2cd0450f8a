# student_db/store.py
"""Хранилище записей о студентах: список в памяти, синхронизированный с текстовым файлом."""
import logging
import os
from typing import Iterator, List, NamedTuple, Optional, Tuple

import pandas as pd

from . import io_utils, processing
from .models import Student
from .errors import DataValidationError, DuplicateStudentIdError

logger = logging.getLogger(__name__)

DEFAULT_STUDENTS = (
    (101, "Ivanov", 2005, 1, 4.5),
    (102, "Petrov", 2004, 2, 3.8),
    (103, "Sidorov", 2006, 1, 4.2),
    (104, "Sokolov", 2003, 3, 3.9),
    (105, "Kozlov", 2004, 2, 4.1),
)


class LoadReport(NamedTuple):
    """Итог загрузки файла: сколько записей принято и сколько строк отброшено."""
    loaded: int = 0
    unparsed: int = 0
    invalid: int = 0
    duplicates: int = 0

    @property
    def skipped(self) -> int:
        return self.unparsed + self.invalid + self.duplicates


class StudentDatabase:
    """Упорядоченная база студентов с хранением в текстовом файле.

    Порядок добавления совпадает с порядком строк в файле и порядком вывода.
    Записи только добавляются: после каждого успешного append файл
    перезаписывается целиком.
    """

    def __init__(self, path: str, seed: bool = True, strict: bool = False):
        self.path = path
        self._students: List[Student] = []
        self.load(strict=strict)
        if seed and not self._students:
            self.seed_defaults()

    def load(self, strict: bool = False) -> LoadReport:
        """Загружает записи из файла, заменяя текущее содержимое.

        Нераспознанные строки пропускаются молча, невалидные и повторяющиеся -
        с предупреждением в логе. В строгом режиме любая пропущенная строка
        приводит к DataValidationError (повторный ID - к DuplicateStudentIdError).
        Отсутствующий файл ошибкой не считается. При любой ошибке текущее
        содержимое базы остается прежним.
        """
        if not os.path.exists(self.path):
            self._students = []
            logger.info("Файл базы '%s' не найден, начинаем с пустой базы.", self.path)
            return LoadReport()

        unparsed = invalid = duplicates = 0
        seen_ids = set()
        loaded: List[Student] = []

        for line_num, student in io_utils.read_student_lines(self.path):
            if student is None:
                unparsed += 1
                logger.debug("Строка %d файла '%s' не распознана, пропускаем.", line_num, self.path)
                if strict:
                    raise DataValidationError(f"Строка {line_num} файла {self.path} не распознана.")
                continue

            try:
                student.validate()
            except DataValidationError as e:
                invalid += 1
                logger.warning("Пропускаем невалидную запись (строка %d, ID: %s): %s", line_num, student.id, e)
                if strict:
                    raise DataValidationError(f"Строка {line_num} файла {self.path}: {e}") from e
                continue

            if student.id in seen_ids:
                duplicates += 1
                logger.warning("Пропускаем повторяющийся ID %s (строка %d).", student.id, line_num)
                if strict:
                    raise DuplicateStudentIdError(f"Строка {line_num} файла {self.path}: ID {student.id} уже встречался.")
                continue

            seen_ids.add(student.id)
            loaded.append(student)

        self._students = loaded
        report = LoadReport(len(loaded), unparsed, invalid, duplicates)
        logger.info("Загружено %d записей из '%s', пропущено строк: %d.", report.loaded, self.path, report.skipped)
        return report

    def seed_defaults(self):
        """Заполняет базу примерами. Файл при этом не записывается."""
        self._students = [Student(*row) for row in DEFAULT_STUDENTS]

    def persist(self):
        """Перезаписывает файл базы текущим содержимым."""
        io_utils.write_students_to_file(self.path, self._students)
        logger.debug("Сохранено %d записей в '%s'.", len(self._students), self.path)

    def append(self, student: Student):
        """Добавляет студента и сразу сохраняет базу.

        Если сохранить не удалось, FileProcessingError уходит вызывающему,
        а запись остаётся в памяти: база по-прежнему согласована.
        """
        student.validate()
        if self.find_by_id(student.id) is not None:
            raise DuplicateStudentIdError(f"Студент с ID {student.id} уже существует.")

        self._students.append(student)
        self.persist()

    def find_by_id(self, student_id: int) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def size(self) -> int:
        return len(self._students)

    @property
    def records(self) -> Tuple[Student, ...]:
        """Снимок текущего содержимого базы."""
        return tuple(self._students)

    def to_dataframe(self) -> pd.DataFrame:
        """Снимок базы в виде DataFrame с колонками id, surname, birth_year, study_year, gpa."""
        return processing.students_to_dataframe(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.records)
