# student_db/models.py
"""Модуль, определяющий основную модель данных - запись о студенте."""
import math

from .errors import DataValidationError

BIRTH_YEAR_MIN = 1950
BIRTH_YEAR_MAX = 2015
STUDY_YEAR_MIN = 1
STUDY_YEAR_MAX = 4
GPA_MIN = 0.0
GPA_MAX = 5.0


def _is_int(value) -> bool:
    # bool - подкласс int, но True/False не годятся как ID или год
    return isinstance(value, int) and not isinstance(value, bool)


class Student:
    """Представляет студента: ID, фамилия, год рождения, курс и средний балл.

    Конструктор ничего не проверяет: запись может быть собрана из
    пользовательского ввода или строки файла, а решение о том, пускать ли её
    в базу, принимает StudentDatabase через validate().
    После создания поля менять нельзя: база хранит те же объекты, что отдает наружу.
    """
    __slots__ = ('id', 'surname', 'birth_year', 'study_year', 'gpa')

    def __init__(self, student_id: int, surname: str, birth_year: int, study_year: int, gpa: float):
        object.__setattr__(self, 'id', student_id)
        object.__setattr__(self, 'surname', surname)
        object.__setattr__(self, 'birth_year', birth_year)
        object.__setattr__(self, 'study_year', study_year)
        object.__setattr__(self, 'gpa', gpa)

    def __setattr__(self, name, value):
        raise AttributeError(f"Запись о студенте нельзя изменить (поле '{name}').")

    def __delattr__(self, name):
        raise AttributeError(f"Запись о студенте нельзя изменить (поле '{name}').")

    def validate(self) -> None:
        """Проверяет все ограничения полей. Бросает DataValidationError на первом нарушении."""
        if not _is_int(self.id) or self.id <= 0:
            raise DataValidationError(f"ID студента должен быть положительным целым числом, получено: {self.id!r}.")
        if not isinstance(self.surname, str) or not self.surname.strip():
            raise DataValidationError("Фамилия студента не может быть пустой.")
        if not _is_int(self.birth_year) or not BIRTH_YEAR_MIN <= self.birth_year <= BIRTH_YEAR_MAX:
            raise DataValidationError(
                f"Год рождения {self.birth_year!r} недопустим. Разрешен диапазон {BIRTH_YEAR_MIN}-{BIRTH_YEAR_MAX}."
            )
        if not _is_int(self.study_year) or not STUDY_YEAR_MIN <= self.study_year <= STUDY_YEAR_MAX:
            raise DataValidationError(
                f"Курс {self.study_year!r} недопустим. Разрешен диапазон {STUDY_YEAR_MIN}-{STUDY_YEAR_MAX}."
            )
        if (not isinstance(self.gpa, (int, float)) or isinstance(self.gpa, bool)
                or math.isnan(self.gpa) or not GPA_MIN <= self.gpa <= GPA_MAX):
            raise DataValidationError(
                f"Средний балл {self.gpa!r} недопустим. Разрешен диапазон {GPA_MIN}-{GPA_MAX}."
            )

    def is_valid(self) -> bool:
        """True, если все пять ограничений выполнены одновременно."""
        try:
            self.validate()
        except DataValidationError:
            return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        # В файле балл хранится с одним знаком после запятой
        return (self.id, self.surname, self.birth_year, self.study_year, round(self.gpa, 1)) == \
               (other.id, other.surname, other.birth_year, other.study_year, round(other.gpa, 1))

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return (f"Student(id={self.id}, surname='{self.surname}', birth_year={self.birth_year}, "
                f"study_year={self.study_year}, gpa={self.gpa})")

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        return (f"ID: {self.id:<4} | Фамилия: {self.surname:<15} | Год рождения: {self.birth_year} | "
                f"Курс: {self.study_year} | Средний балл: {self.gpa:.2f}")
